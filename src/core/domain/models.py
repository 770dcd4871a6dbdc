"""Modelos de respuesta de la Control API (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field) sin acoplar
  el Core a librerías de I/O.
- El Core trata las respuestas como bytes opacos; estos modelos son opcionales
  para el caller (`Success.parse(GroupVolume)`).

Nota:
- Los campos usan snake_case con alias camelCase del wire format.
- `extra="ignore"`: la API añade campos sin versionar y no deben romper el parseo.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class _ApiModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class ApiError(_ApiModel):
    """Body de error estándar (`globalError` / errores de namespace)."""

    error_code: str = Field(
        ...,
        alias="errorCode",
        description="Código de error de la API (p.ej. ERROR_INVALID_PARAMETER).",
    )
    reason: str | None = Field(
        default=None,
        description="Descripción legible del error, si la API la envía.",
    )


class GroupVolume(_ApiModel):
    volume: int = Field(..., ge=0, le=100, description="Volumen del grupo (0..100).")
    muted: bool = Field(default=False, description="Indica si el grupo está silenciado.")
    fixed: bool = Field(default=False, description="Volumen fijo (no ajustable por API).")


class PlayerVolume(_ApiModel):
    volume: int = Field(..., ge=0, le=100, description="Volumen del player (0..100).")
    muted: bool = Field(default=False, description="Indica si el player está silenciado.")
    fixed: bool = Field(default=False, description="Volumen fijo (no ajustable por API).")


class Household(_ApiModel):
    id: str = Field(..., min_length=1, description="Identificador del household.")


class HouseholdList(_ApiModel):
    households: list[Household] = Field(default_factory=list)


class Player(_ApiModel):
    id: str = Field(..., min_length=1)
    name: str = Field(default="")
    websocket_url: str | None = Field(default=None, alias="websocketUrl")
    software_version: str | None = Field(default=None, alias="softwareVersion")
    api_version: str | None = Field(default=None, alias="apiVersion")
    capabilities: list[str] = Field(default_factory=list)
    device_ids: list[str] = Field(default_factory=list, alias="deviceIds")


class Group(_ApiModel):
    id: str = Field(..., min_length=1)
    name: str = Field(default="")
    coordinator_id: str | None = Field(default=None, alias="coordinatorId")
    playback_state: str | None = Field(default=None, alias="playbackState")
    player_ids: list[str] = Field(default_factory=list, alias="playerIds")


class GroupsSnapshot(_ApiModel):
    """Respuesta de `getGroups`: grupos y players del household."""

    groups: list[Group] = Field(default_factory=list)
    players: list[Player] = Field(default_factory=list)
    partial: bool = Field(
        default=False,
        description="True si la API no pudo contactar a todos los players.",
    )


class Favorite(_ApiModel):
    id: str = Field(..., min_length=1)
    name: str = Field(default="")
    description: str | None = Field(default=None)
    image_url: str | None = Field(default=None, alias="imageUrl")
    service: dict[str, Any] = Field(default_factory=dict)


class FavoriteList(_ApiModel):
    version: str | None = Field(default=None)
    items: list[Favorite] = Field(default_factory=list)


class Playlist(_ApiModel):
    id: str = Field(..., min_length=1)
    name: str = Field(default="")
    type: str | None = Field(default=None)
    track_count: int | None = Field(default=None, alias="trackCount")


class PlaylistList(_ApiModel):
    version: str | None = Field(default=None)
    playlists: list[Playlist] = Field(default_factory=list)


class PlaybackStatus(_ApiModel):
    playback_state: str = Field(..., alias="playbackState")
    position_millis: int | None = Field(default=None, alias="positionMillis")
    item_id: str | None = Field(default=None, alias="itemId")
    queue_version: str | None = Field(default=None, alias="queueVersion")
    play_modes: dict[str, bool] = Field(default_factory=dict, alias="playModes")
    available_playback_actions: dict[str, bool] = Field(
        default_factory=dict,
        alias="availablePlaybackActions",
    )
