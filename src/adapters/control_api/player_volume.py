"""Namespace `playerVolume`: volumen de un player individual dentro de un grupo."""

from __future__ import annotations

from adapters.control_api.common import (
    build_request,
    compact,
    require_bool,
    require_range,
    subscribe,
    unsubscribe,
)
from core.config import AppSettings
from core.domain.requests import ControlRequest, HttpMethod, Scope, scoped_path

NAMESPACE = "playerVolume"


def get_player_volume(
    access_token: str,
    player_id: str,
    *,
    settings: AppSettings | None = None,
) -> ControlRequest:
    return build_request(
        HttpMethod.GET,
        scoped_path(Scope.PLAYERS, player_id, NAMESPACE),
        access_token=access_token,
        settings=settings,
    )


def set_player_volume(
    access_token: str,
    player_id: str,
    *,
    volume: int,
    muted: bool | None = None,
    settings: AppSettings | None = None,
) -> ControlRequest:
    """POST `players/{id}/playerVolume`; `muted` opcional en la misma llamada."""

    return build_request(
        HttpMethod.POST,
        scoped_path(Scope.PLAYERS, player_id, NAMESPACE),
        access_token=access_token,
        parameters=compact(
            volume=require_range("volume", volume, 0, 100),
            muted=require_bool("muted", muted, optional=True),
        ),
        settings=settings,
    )


def set_relative_player_volume(
    access_token: str,
    player_id: str,
    *,
    volume_delta: int,
    settings: AppSettings | None = None,
) -> ControlRequest:
    return build_request(
        HttpMethod.POST,
        scoped_path(Scope.PLAYERS, player_id, NAMESPACE, "relative"),
        access_token=access_token,
        parameters={"volumeDelta": require_range("volume_delta", volume_delta, -100, 100)},
        settings=settings,
    )


def set_player_mute(
    access_token: str,
    player_id: str,
    *,
    muted: bool,
    settings: AppSettings | None = None,
) -> ControlRequest:
    return build_request(
        HttpMethod.POST,
        scoped_path(Scope.PLAYERS, player_id, NAMESPACE, "mute"),
        access_token=access_token,
        parameters={"muted": require_bool("muted", muted)},
        settings=settings,
    )


def subscribe_player_volume(
    access_token: str,
    player_id: str,
    *,
    settings: AppSettings | None = None,
) -> ControlRequest:
    return subscribe(Scope.PLAYERS, player_id, NAMESPACE, access_token=access_token, settings=settings)


def unsubscribe_player_volume(
    access_token: str,
    player_id: str,
    *,
    settings: AppSettings | None = None,
) -> ControlRequest:
    return unsubscribe(Scope.PLAYERS, player_id, NAMESPACE, access_token=access_token, settings=settings)
