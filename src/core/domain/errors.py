"""Taxonomía de errores de la librería.

Dos niveles:
- Construcción (`RequestConstructionError`): precondiciones del caller; se lanzan
  al crear el descriptor y nunca pasan por el canal de `Outcome`.
- Dispatch (`DispatchError` y subclases): fallos al ejecutar la petición; el
  `Dispatcher` los entrega siempre como `Failure`.
"""

from __future__ import annotations


class ControlApiError(Exception):
    """Base de todos los errores propios de la librería."""


class RequestConstructionError(ControlApiError):
    """El descriptor no puede construirse (token, identificador o base URL inválidos)."""


class DispatchError(ControlApiError):
    """Fallo durante la ejecución de un descriptor."""


class RequestEncodingError(DispatchError):
    """El body no se pudo serializar a JSON."""


class TransportError(DispatchError):
    """Fallo de red o de protocolo reportado por el transporte HTTP."""


class HttpStatusError(DispatchError):
    """El transporte clasificó la respuesta como error (status no 2xx)."""

    def __init__(self, status_code: int, content: bytes = b"", message: str | None = None) -> None:
        self.status_code = status_code
        self.content = content
        super().__init__(message or f"HTTP {status_code}")


class EmptyResponseError(ControlApiError, ValueError):
    """Se pidió decodificar un modelo de una respuesta sin body."""
