"""Contrato de un descriptor de petición.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- `ControlRequest` lo implementa, pero el `Dispatcher` acepta cualquier valor
  que exponga estos métodos (útil en tests o para endpoints ad-hoc).
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from core.domain.requests import HttpMethod


@runtime_checkable
class RequestDescriptor(Protocol):
    """Qué enviar: todo se resuelve sin I/O.

    Reglas de diseño:
    - Los cuatro accesores son puros; llamarlos dos veces devuelve lo mismo.
    - `encoded_body` puede lanzar `RequestEncodingError`; el `Dispatcher` lo
      convierte en `Failure`.
    """

    def method(self) -> HttpMethod: ...

    def url(self) -> str: ...

    def headers(self) -> dict[str, str]: ...

    def body(self) -> dict[str, Any] | None: ...

    def encoded_body(self) -> bytes | None: ...
