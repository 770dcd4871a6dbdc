"""Helpers compartidos por los endpoints de la Control API.

Cada módulo del paquete es una lista de funciones que devuelven `ControlRequest`;
aquí vive lo que todas repiten: resolver la base URL, descartar parámetros
opcionales no informados y el par subscribe/unsubscribe.
"""

from __future__ import annotations

from typing import Any

from core.config import AppSettings
from core.domain.errors import RequestConstructionError
from core.domain.requests import ControlRequest, HttpMethod, Scope, path_segment, scoped_path

SUBSCRIPTION = "subscription"


def build_request(
    method: HttpMethod,
    path: str,
    *,
    access_token: str,
    parameters: dict[str, Any] | None = None,
    settings: AppSettings | None = None,
) -> ControlRequest:
    settings = settings or AppSettings()
    return ControlRequest(
        http_method=method,
        path=path,
        access_token=access_token,
        parameters=parameters,
        base_url=settings.api_base_url,
    )


def compact(**parameters: Any) -> dict[str, Any]:
    """Body con las claves en orden de llamada, sin los opcionales a `None`."""

    return {key: value for key, value in parameters.items() if value is not None}


def require_id(name: str, value: str) -> str:
    """Valida un id que viaja en el body (no en el path)."""

    path_segment(name, value)
    return value


def require_ids(name: str, values: list[str]) -> list[str]:
    if isinstance(values, str):
        raise RequestConstructionError(f"{name} must be a list of ids, not a string")
    return [require_id(name, value) for value in values]


def require_range(name: str, value: int, low: int, high: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or not low <= value <= high:
        raise RequestConstructionError(f"{name} must be an integer in [{low}, {high}]")
    return value


def subscribe(
    scope: Scope,
    scope_id: str,
    namespace: str,
    *,
    access_token: str,
    settings: AppSettings | None = None,
) -> ControlRequest:
    """POST `<scope>/<id>/<namespace>/subscription` (sin body).

    Sonos envía los eventos al Callback URL configurado en el portal de
    desarrolladores; la librería no guarda qué suscripciones están activas.
    """

    return build_request(
        HttpMethod.POST,
        scoped_path(scope, scope_id, namespace, SUBSCRIPTION),
        access_token=access_token,
        settings=settings,
    )


def unsubscribe(
    scope: Scope,
    scope_id: str,
    namespace: str,
    *,
    access_token: str,
    settings: AppSettings | None = None,
) -> ControlRequest:
    """DELETE `<scope>/<id>/<namespace>/subscription` (nunca lleva body)."""

    return build_request(
        HttpMethod.DELETE,
        scoped_path(scope, scope_id, namespace, SUBSCRIPTION),
        access_token=access_token,
        settings=settings,
    )


def require_bool(name: str, value: bool | None, *, optional: bool = False) -> bool | None:
    if value is None and optional:
        return None
    if not isinstance(value, bool):
        raise RequestConstructionError(f"{name} must be a bool")
    return value
