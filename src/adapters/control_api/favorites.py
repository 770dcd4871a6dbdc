"""Namespace `favorites`: listar y cargar favoritos (Sonos Favorites)."""

from __future__ import annotations

from typing import Any

from adapters.control_api.common import build_request, compact, require_id, subscribe, unsubscribe
from core.config import AppSettings
from core.domain.requests import ControlRequest, HttpMethod, Scope, scoped_path

NAMESPACE = "favorites"


def get_favorites(
    access_token: str,
    household_id: str,
    *,
    settings: AppSettings | None = None,
) -> ControlRequest:
    """GET `households/{id}/favorites`. Respuesta: `FavoriteList`."""

    return build_request(
        HttpMethod.GET,
        scoped_path(Scope.HOUSEHOLDS, household_id, NAMESPACE),
        access_token=access_token,
        settings=settings,
    )


def load_favorite(
    access_token: str,
    group_id: str,
    *,
    favorite_id: str,
    action: str = "REPLACE",
    play_on_completion: bool | None = None,
    play_modes: Any = None,
    settings: AppSettings | None = None,
) -> ControlRequest:
    """POST `groups/{id}/favorites`: carga un favorito en la cola del grupo.

    `action` es uno de `APPEND`, `INSERT`, `INSERT_NEXT`, `REPLACE`.
    """

    return build_request(
        HttpMethod.POST,
        scoped_path(Scope.GROUPS, group_id, NAMESPACE),
        access_token=access_token,
        parameters=compact(
            action=action,
            favoriteId=require_id("favorite_id", favorite_id),
            playOnCompletion=play_on_completion,
            playModes=play_modes,
        ),
        settings=settings,
    )


def subscribe_favorites(
    access_token: str,
    household_id: str,
    *,
    settings: AppSettings | None = None,
) -> ControlRequest:
    return subscribe(Scope.HOUSEHOLDS, household_id, NAMESPACE, access_token=access_token, settings=settings)


def unsubscribe_favorites(
    access_token: str,
    household_id: str,
    *,
    settings: AppSettings | None = None,
) -> ControlRequest:
    return unsubscribe(Scope.HOUSEHOLDS, household_id, NAMESPACE, access_token=access_token, settings=settings)
