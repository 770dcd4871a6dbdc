"""Namespace `playback`: transporte (play/pause/skip/seek) y modos de reproducción."""

from __future__ import annotations

from typing import Mapping

from adapters.control_api.common import build_request, compact, require_id, subscribe, unsubscribe
from core.config import AppSettings
from core.domain.errors import RequestConstructionError
from core.domain.requests import ControlRequest, HttpMethod, Scope, scoped_path

NAMESPACE = "playback"

PLAY_MODES = ("repeat", "repeatOne", "shuffle", "crossfade")


def _command(
    access_token: str,
    group_id: str,
    command: str,
    *,
    parameters: dict | None = None,
    settings: AppSettings | None = None,
) -> ControlRequest:
    return build_request(
        HttpMethod.POST,
        scoped_path(Scope.GROUPS, group_id, NAMESPACE, command),
        access_token=access_token,
        parameters=parameters,
        settings=settings,
    )


def _require_millis(name: str, value: int, *, allow_negative: bool) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or (value < 0 and not allow_negative):
        raise RequestConstructionError(f"{name} must be an integer number of milliseconds")
    return value


def get_playback_status(
    access_token: str,
    group_id: str,
    *,
    settings: AppSettings | None = None,
) -> ControlRequest:
    """GET `groups/{id}/playback`. Respuesta: `PlaybackStatus`."""

    return build_request(
        HttpMethod.GET,
        scoped_path(Scope.GROUPS, group_id, NAMESPACE),
        access_token=access_token,
        settings=settings,
    )


def play(access_token: str, group_id: str, *, settings: AppSettings | None = None) -> ControlRequest:
    return _command(access_token, group_id, "play", settings=settings)


def pause(access_token: str, group_id: str, *, settings: AppSettings | None = None) -> ControlRequest:
    return _command(access_token, group_id, "pause", settings=settings)


def toggle_play_pause(access_token: str, group_id: str, *, settings: AppSettings | None = None) -> ControlRequest:
    return _command(access_token, group_id, "togglePlayPause", settings=settings)


def skip_to_next_track(access_token: str, group_id: str, *, settings: AppSettings | None = None) -> ControlRequest:
    return _command(access_token, group_id, "skipToNextTrack", settings=settings)


def skip_to_previous_track(
    access_token: str,
    group_id: str,
    *,
    settings: AppSettings | None = None,
) -> ControlRequest:
    return _command(access_token, group_id, "skipToPreviousTrack", settings=settings)


def seek(
    access_token: str,
    group_id: str,
    *,
    position_millis: int,
    item_id: str | None = None,
    settings: AppSettings | None = None,
) -> ControlRequest:
    """POST `groups/{id}/playback/seek` a una posición absoluta del item actual.

    Con `item_id` la API rechaza el seek si el item ya cambió.
    """

    if item_id is not None:
        require_id("item_id", item_id)
    return _command(
        access_token,
        group_id,
        "seek",
        parameters=compact(
            positionMillis=_require_millis("position_millis", position_millis, allow_negative=False),
            itemId=item_id,
        ),
        settings=settings,
    )


def seek_relative(
    access_token: str,
    group_id: str,
    *,
    delta_millis: int,
    item_id: str | None = None,
    settings: AppSettings | None = None,
) -> ControlRequest:
    if item_id is not None:
        require_id("item_id", item_id)
    return _command(
        access_token,
        group_id,
        "seekRelative",
        parameters=compact(
            deltaMillis=_require_millis("delta_millis", delta_millis, allow_negative=True),
            itemId=item_id,
        ),
        settings=settings,
    )


def set_play_modes(
    access_token: str,
    group_id: str,
    *,
    play_modes: Mapping[str, bool],
    settings: AppSettings | None = None,
) -> ControlRequest:
    """POST `groups/{id}/playback/playMode`.

    Solo se envían los modos indicados; el resto no cambia.
    """

    unknown = set(play_modes) - set(PLAY_MODES)
    if unknown or not play_modes:
        raise RequestConstructionError(f"play_modes must use keys from {PLAY_MODES}")
    if not all(isinstance(value, bool) for value in play_modes.values()):
        raise RequestConstructionError("play_modes values must be bools")
    return _command(
        access_token,
        group_id,
        "playMode",
        parameters={"playModes": dict(play_modes)},
        settings=settings,
    )


def subscribe_playback(
    access_token: str,
    group_id: str,
    *,
    settings: AppSettings | None = None,
) -> ControlRequest:
    return subscribe(Scope.GROUPS, group_id, NAMESPACE, access_token=access_token, settings=settings)


def unsubscribe_playback(
    access_token: str,
    group_id: str,
    *,
    settings: AppSettings | None = None,
) -> ControlRequest:
    return unsubscribe(Scope.GROUPS, group_id, NAMESPACE, access_token=access_token, settings=settings)
