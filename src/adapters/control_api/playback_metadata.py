"""Namespace `playbackMetadata`: qué suena (container, item actual y siguiente)."""

from __future__ import annotations

from adapters.control_api.common import build_request, subscribe, unsubscribe
from core.config import AppSettings
from core.domain.requests import ControlRequest, HttpMethod, Scope, scoped_path

NAMESPACE = "playbackMetadata"


def get_metadata_status(
    access_token: str,
    group_id: str,
    *,
    settings: AppSettings | None = None,
) -> ControlRequest:
    return build_request(
        HttpMethod.GET,
        scoped_path(Scope.GROUPS, group_id, NAMESPACE),
        access_token=access_token,
        settings=settings,
    )


def subscribe_playback_metadata(
    access_token: str,
    group_id: str,
    *,
    settings: AppSettings | None = None,
) -> ControlRequest:
    return subscribe(Scope.GROUPS, group_id, NAMESPACE, access_token=access_token, settings=settings)


def unsubscribe_playback_metadata(
    access_token: str,
    group_id: str,
    *,
    settings: AppSettings | None = None,
) -> ControlRequest:
    return unsubscribe(Scope.GROUPS, group_id, NAMESPACE, access_token=access_token, settings=settings)
