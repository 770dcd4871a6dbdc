"""Namespace `playlists`: playlists de Sonos del household."""

from __future__ import annotations

from typing import Any

from adapters.control_api.common import build_request, compact, require_id, subscribe, unsubscribe
from core.config import AppSettings
from core.domain.requests import ControlRequest, HttpMethod, Scope, scoped_path

NAMESPACE = "playlists"


def get_playlists(
    access_token: str,
    household_id: str,
    *,
    settings: AppSettings | None = None,
) -> ControlRequest:
    """GET `households/{id}/playlists`. Respuesta: `PlaylistList`."""

    return build_request(
        HttpMethod.GET,
        scoped_path(Scope.HOUSEHOLDS, household_id, NAMESPACE),
        access_token=access_token,
        settings=settings,
    )


def get_playlist(
    access_token: str,
    household_id: str,
    *,
    playlist_id: str,
    settings: AppSettings | None = None,
) -> ControlRequest:
    """POST `households/{id}/playlists/getPlaylist`: tracks de una playlist."""

    return build_request(
        HttpMethod.POST,
        scoped_path(Scope.HOUSEHOLDS, household_id, NAMESPACE, "getPlaylist"),
        access_token=access_token,
        parameters={"playlistId": require_id("playlist_id", playlist_id)},
        settings=settings,
    )


def load_playlist(
    access_token: str,
    group_id: str,
    *,
    playlist_id: str,
    action: str = "REPLACE",
    play_on_completion: bool | None = None,
    play_modes: Any = None,
    settings: AppSettings | None = None,
) -> ControlRequest:
    """POST `groups/{id}/playlists`: carga una playlist en la cola del grupo."""

    return build_request(
        HttpMethod.POST,
        scoped_path(Scope.GROUPS, group_id, NAMESPACE),
        access_token=access_token,
        parameters=compact(
            action=action,
            playlistId=require_id("playlist_id", playlist_id),
            playOnCompletion=play_on_completion,
            playModes=play_modes,
        ),
        settings=settings,
    )


def subscribe_playlists(
    access_token: str,
    household_id: str,
    *,
    settings: AppSettings | None = None,
) -> ControlRequest:
    """Suscribe a eventos de `playlists`.

    Sonos exige un Callback URL seguro configurado en el portal de desarrolladores.
    """

    return subscribe(Scope.HOUSEHOLDS, household_id, NAMESPACE, access_token=access_token, settings=settings)


def unsubscribe_playlists(
    access_token: str,
    household_id: str,
    *,
    settings: AppSettings | None = None,
) -> ControlRequest:
    return unsubscribe(Scope.HOUSEHOLDS, household_id, NAMESPACE, access_token=access_token, settings=settings)
