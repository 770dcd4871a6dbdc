"""Descriptor genérico de peticiones a la Control API.

Por qué un único modelo:
- Todos los endpoints comparten la misma forma (verbo + path + token + body JSON);
  lo único que cambia es el path y los parámetros.
- Un valor inmutable es trivial de testear: `method()`, `url()`, `headers()` y
  `body()` son funciones puras de los datos de construcción.

Nota:
- El descriptor no hace I/O. Ejecutarlo es trabajo del `Dispatcher`.
"""

from __future__ import annotations

import copy
import json
from enum import Enum
from typing import Any
from urllib.parse import quote, urlsplit

from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic.config import ConfigDict

from core.domain.errors import RequestConstructionError, RequestEncodingError

DEFAULT_API_BASE_URL = "https://api.ws.sonos.com/control/api/v1"

JSON_CONTENT_TYPE = "application/json"


class HttpMethod(str, Enum):
    """Verbos usados por la Control API."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"

    @property
    def allows_body(self) -> bool:
        return self not in (HttpMethod.GET, HttpMethod.DELETE)


class Scope(str, Enum):
    """Primer segmento del path: a qué agrupación apunta el comando."""

    HOUSEHOLDS = "households"
    GROUPS = "groups"
    PLAYERS = "players"


def path_segment(name: str, value: str) -> str:
    """Valida y codifica un identificador para usarlo como segmento del path.

    Los ids de Sonos incluyen `:` (p.ej. `RINCON_xxx:12`), por eso se deja literal.
    """

    if not isinstance(value, str) or not value.strip():
        raise RequestConstructionError(f"{name} must be a non-empty string")
    return quote(value, safe=":")


def scoped_path(scope: Scope, scope_id: str, *resource: str) -> str:
    """Construye `<scope>/<id>/<resource...>` con el id ya codificado."""

    segments = [scope.value, path_segment(f"{scope.value} id", scope_id)]
    segments.extend(resource)
    return "/".join(segments)


class ControlRequest(BaseModel):
    """Petición inmutable a un endpoint de la Control API.

    Invariantes:
    - `headers()` siempre incluye `Authorization: Bearer <token>` y `Content-Type` JSON.
    - Los verbos sin body (GET, DELETE) nunca llevan parámetros.
    - `base_url` tiene esquema http/https y host.
    """

    model_config = ConfigDict(frozen=True)

    http_method: HttpMethod = Field(
        ...,
        description="Verbo HTTP fijo del endpoint.",
    )
    path: str = Field(
        ...,
        description="Path relativo a `base_url`, con identificadores ya interpolados.",
    )
    access_token: str = Field(
        ...,
        repr=False,
        description="Bearer token opaco; no se refresca ni se persiste.",
    )
    parameters: dict[str, Any] | None = Field(
        default=None,
        description="Body JSON (orden de claves preservado).",
    )
    base_url: str = Field(
        default=DEFAULT_API_BASE_URL,
        description="Base URL de la Control API.",
    )

    @field_validator("access_token", mode="before")
    @classmethod
    def _check_token_type(cls, value: Any) -> Any:
        if not isinstance(value, str):
            raise RequestConstructionError("access_token must be a non-empty string")
        return value

    @field_validator("parameters", mode="before")
    @classmethod
    def _detach_parameters(cls, value: Any) -> Any:
        return copy.deepcopy(value) if value is not None else None

    @model_validator(mode="after")
    def _check_preconditions(self) -> "ControlRequest":
        if not self.access_token.strip():
            raise RequestConstructionError("access_token must be a non-empty string")

        parts = urlsplit(self.base_url)
        if parts.scheme not in ("http", "https") or not parts.netloc:
            raise RequestConstructionError(f"invalid base URL: {self.base_url!r}")

        if not self.path.strip("/"):
            raise RequestConstructionError("path must not be empty")

        if self.parameters is not None and not self.http_method.allows_body:
            raise RequestConstructionError(f"{self.http_method.value} requests cannot carry a body")
        return self

    def method(self) -> HttpMethod:
        return self.http_method

    def url(self) -> str:
        return f"{self.base_url.rstrip('/')}/{self.path.lstrip('/')}"

    def headers(self) -> dict[str, str]:
        return {
            "Content-Type": JSON_CONTENT_TYPE,
            "Authorization": f"Bearer {self.access_token}",
        }

    def body(self) -> dict[str, Any] | None:
        # Copia profunda: el caller puede mutar el resultado sin tocar el descriptor.
        return copy.deepcopy(self.parameters)

    def encoded_body(self) -> bytes | None:
        """Serializa el body a JSON compacto; `None` si no hay body."""

        if self.parameters is None:
            return None
        try:
            return json.dumps(self.parameters, separators=(",", ":"), allow_nan=False).encode("utf-8")
        except (TypeError, ValueError) as exc:
            raise RequestEncodingError(f"body for {self.path} is not JSON serializable") from exc
