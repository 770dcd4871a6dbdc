"""Namespace `groupVolume`: volumen y mute de un grupo completo."""

from __future__ import annotations

from adapters.control_api.common import (
    build_request,
    require_bool,
    require_range,
    subscribe,
    unsubscribe,
)
from core.config import AppSettings
from core.domain.requests import ControlRequest, HttpMethod, Scope, scoped_path

NAMESPACE = "groupVolume"


def get_group_volume(
    access_token: str,
    group_id: str,
    *,
    settings: AppSettings | None = None,
) -> ControlRequest:
    """GET `groups/{id}/groupVolume`. Respuesta: `GroupVolume`."""

    return build_request(
        HttpMethod.GET,
        scoped_path(Scope.GROUPS, group_id, NAMESPACE),
        access_token=access_token,
        settings=settings,
    )


def set_group_volume(
    access_token: str,
    group_id: str,
    *,
    volume: int,
    settings: AppSettings | None = None,
) -> ControlRequest:
    return build_request(
        HttpMethod.POST,
        scoped_path(Scope.GROUPS, group_id, NAMESPACE),
        access_token=access_token,
        parameters={"volume": require_range("volume", volume, 0, 100)},
        settings=settings,
    )


def set_relative_group_volume(
    access_token: str,
    group_id: str,
    *,
    volume_delta: int,
    settings: AppSettings | None = None,
) -> ControlRequest:
    """POST `groups/{id}/groupVolume/relative`. `volume_delta` en [-100, 100]."""

    return build_request(
        HttpMethod.POST,
        scoped_path(Scope.GROUPS, group_id, NAMESPACE, "relative"),
        access_token=access_token,
        parameters={"volumeDelta": require_range("volume_delta", volume_delta, -100, 100)},
        settings=settings,
    )


def set_group_mute(
    access_token: str,
    group_id: str,
    *,
    muted: bool,
    settings: AppSettings | None = None,
) -> ControlRequest:
    return build_request(
        HttpMethod.POST,
        scoped_path(Scope.GROUPS, group_id, NAMESPACE, "mute"),
        access_token=access_token,
        parameters={"muted": require_bool("muted", muted)},
        settings=settings,
    )


def subscribe_group_volume(
    access_token: str,
    group_id: str,
    *,
    settings: AppSettings | None = None,
) -> ControlRequest:
    return subscribe(Scope.GROUPS, group_id, NAMESPACE, access_token=access_token, settings=settings)


def unsubscribe_group_volume(
    access_token: str,
    group_id: str,
    *,
    settings: AppSettings | None = None,
) -> ControlRequest:
    return unsubscribe(Scope.GROUPS, group_id, NAMESPACE, access_token=access_token, settings=settings)
