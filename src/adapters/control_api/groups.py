"""Namespace `groups`: topología de grupos y players de un household."""

from __future__ import annotations

from adapters.control_api.common import (
    build_request,
    compact,
    require_id,
    require_ids,
    subscribe,
    unsubscribe,
)
from core.config import AppSettings
from core.domain.errors import RequestConstructionError
from core.domain.requests import ControlRequest, HttpMethod, Scope, scoped_path

NAMESPACE = "groups"


def get_groups(
    access_token: str,
    household_id: str,
    *,
    settings: AppSettings | None = None,
) -> ControlRequest:
    """GET `households/{id}/groups`. Respuesta: `GroupsSnapshot`."""

    return build_request(
        HttpMethod.GET,
        scoped_path(Scope.HOUSEHOLDS, household_id, NAMESPACE),
        access_token=access_token,
        settings=settings,
    )


def create_group(
    access_token: str,
    household_id: str,
    *,
    player_ids: list[str],
    music_context_group_id: str | None = None,
    settings: AppSettings | None = None,
) -> ControlRequest:
    """POST `households/{id}/groups/createGroup`.

    `music_context_group_id` indica de qué grupo hereda la reproducción el nuevo grupo.
    """

    if music_context_group_id is not None:
        require_id("music_context_group_id", music_context_group_id)
    return build_request(
        HttpMethod.POST,
        scoped_path(Scope.HOUSEHOLDS, household_id, NAMESPACE, "createGroup"),
        access_token=access_token,
        parameters=compact(
            playerIds=require_ids("player_ids", player_ids),
            musicContextGroupId=music_context_group_id,
        ),
        settings=settings,
    )


def modify_group_members(
    access_token: str,
    group_id: str,
    *,
    player_ids_to_add: list[str] | None = None,
    player_ids_to_remove: list[str] | None = None,
    settings: AppSettings | None = None,
) -> ControlRequest:
    """POST `groups/{id}/groups/modifyGroupMembers`: añade y/o quita players."""

    if not player_ids_to_add and not player_ids_to_remove:
        raise RequestConstructionError("modify_group_members needs players to add or remove")
    return build_request(
        HttpMethod.POST,
        scoped_path(Scope.GROUPS, group_id, NAMESPACE, "modifyGroupMembers"),
        access_token=access_token,
        parameters=compact(
            playerIdsToAdd=require_ids("player_ids_to_add", player_ids_to_add) if player_ids_to_add else None,
            playerIdsToRemove=(
                require_ids("player_ids_to_remove", player_ids_to_remove) if player_ids_to_remove else None
            ),
        ),
        settings=settings,
    )


def set_group_members(
    access_token: str,
    group_id: str,
    *,
    player_ids: list[str],
    settings: AppSettings | None = None,
) -> ControlRequest:
    """POST `groups/{id}/groups/setGroupMembers`: reemplaza los miembros del grupo."""

    return build_request(
        HttpMethod.POST,
        scoped_path(Scope.GROUPS, group_id, NAMESPACE, "setGroupMembers"),
        access_token=access_token,
        parameters={"playerIds": require_ids("player_ids", player_ids)},
        settings=settings,
    )


def subscribe_groups(
    access_token: str,
    household_id: str,
    *,
    settings: AppSettings | None = None,
) -> ControlRequest:
    return subscribe(Scope.HOUSEHOLDS, household_id, NAMESPACE, access_token=access_token, settings=settings)


def unsubscribe_groups(
    access_token: str,
    household_id: str,
    *,
    settings: AppSettings | None = None,
) -> ControlRequest:
    return unsubscribe(Scope.HOUSEHOLDS, household_id, NAMESPACE, access_token=access_token, settings=settings)
