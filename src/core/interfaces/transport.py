"""Contrato del transporte HTTP inyectado en el `Dispatcher`.

Por qué:
- El Core no conoce httpx; cualquier cliente que cumpla `send` sirve.
- Facilita testeo: se puede sustituir por un transporte falso en memoria.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Protocol, runtime_checkable


@dataclass(frozen=True)
class TransportResponse:
    """Respuesta ya recibida y clasificada como éxito por el transporte."""

    status_code: int
    content: bytes = b""
    headers: Mapping[str, str] = field(default_factory=dict)


@runtime_checkable
class HttpTransport(Protocol):
    """Ejecuta exactamente un intercambio HTTP.

    Reglas:
    - Devuelve `TransportResponse` si la respuesta se considera éxito.
    - Lanza `HttpStatusError` si clasifica el status como error y
      `TransportError` ante fallos de red/protocolo.
    """

    async def send(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str],
        body: bytes | None,
    ) -> TransportResponse:
        ...
