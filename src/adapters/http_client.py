"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeouts, headers y User-Agent para toda llamada a la Control API.
- Traduce errores de httpx a la taxonomía del Core (`HttpStatusError`,
  `TransportError`) para que el `Dispatcher` no dependa de httpx.
- Facilita testeo: se puede inyectar un `httpx.AsyncClient` con `MockTransport`.
"""

from __future__ import annotations

from types import TracebackType
from typing import Mapping

import httpx

from core.config import AppSettings
from core.domain.errors import HttpStatusError, TransportError
from core.interfaces.transport import TransportResponse


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` con defaults seguros.

    Por qué un builder:
    - Centraliza timeouts/headers para que todas las peticiones se comporten igual.
    - Sin reintentos: la política de reintentos es del caller.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
    )


class HttpxTransport:
    """`HttpTransport` sobre `httpx.AsyncClient`.

    Si no se pasa un cliente, crea uno con `build_async_client` y lo cierra en
    `aclose()`; un cliente inyectado pertenece al caller y no se cierra.
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        settings: AppSettings | None = None,
    ) -> None:
        self._owns_client = client is None
        self._client = client if client is not None else build_async_client(settings)

    async def send(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str],
        body: bytes | None,
    ) -> TransportResponse:
        try:
            response = await self._client.request(method, url, headers=dict(headers), content=body)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise HttpStatusError(
                exc.response.status_code,
                exc.response.content,
                f"{method} {url} returned HTTP {exc.response.status_code}",
            ) from exc
        except httpx.HTTPError as exc:
            raise TransportError(f"{method} {url} failed: {exc}") from exc

        return TransportResponse(
            status_code=response.status_code,
            content=response.content,
            headers=dict(response.headers),
        )

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "HttpxTransport":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()
