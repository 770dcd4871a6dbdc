"""Endpoints de la Control API (descriptores concretos).

Por qué un paquete:
- Agrupa módulos por namespace de la API (groupVolume, favorites, playlists, ...).
- Cada función devuelve un `core.domain.requests.ControlRequest` listo para el
  `Dispatcher`; ninguna hace I/O.
"""

from adapters.control_api import (
    favorites,
    group_volume,
    groups,
    households,
    playback,
    playback_metadata,
    player_volume,
    playlists,
)

__all__ = [
	"favorites",
	"group_volume",
	"groups",
	"households",
	"playback",
	"playback_metadata",
	"player_volume",
	"playlists",
]
