"""Tests for the Control API endpoint factories."""

from __future__ import annotations

import pytest

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
from core.config import AppSettings
from core.domain.errors import RequestConstructionError
from core.domain.requests import HttpMethod
from tests.conftest import ACCESS_TOKEN, GROUP_ID, HOUSEHOLD_ID, PLAYER_ID

BASE = "https://api.ws.sonos.com/control/api/v1"

# (factory, scope id, kwargs, verb, path after BASE, body)
CATALOGUE = [
    (households.get_households, None, {}, HttpMethod.GET, "households", None),
    (groups.get_groups, HOUSEHOLD_ID, {}, HttpMethod.GET, f"households/{HOUSEHOLD_ID}/groups", None),
    (
        groups.create_group,
        HOUSEHOLD_ID,
        {"player_ids": [PLAYER_ID], "music_context_group_id": GROUP_ID},
        HttpMethod.POST,
        f"households/{HOUSEHOLD_ID}/groups/createGroup",
        {"playerIds": [PLAYER_ID], "musicContextGroupId": GROUP_ID},
    ),
    (
        groups.modify_group_members,
        GROUP_ID,
        {"player_ids_to_add": ["RINCON_B"]},
        HttpMethod.POST,
        f"groups/{GROUP_ID}/groups/modifyGroupMembers",
        {"playerIdsToAdd": ["RINCON_B"]},
    ),
    (
        groups.set_group_members,
        GROUP_ID,
        {"player_ids": ["RINCON_A", "RINCON_B"]},
        HttpMethod.POST,
        f"groups/{GROUP_ID}/groups/setGroupMembers",
        {"playerIds": ["RINCON_A", "RINCON_B"]},
    ),
    (groups.subscribe_groups, HOUSEHOLD_ID, {}, HttpMethod.POST, f"households/{HOUSEHOLD_ID}/groups/subscription", None),
    (
        groups.unsubscribe_groups,
        HOUSEHOLD_ID,
        {},
        HttpMethod.DELETE,
        f"households/{HOUSEHOLD_ID}/groups/subscription",
        None,
    ),
    (group_volume.get_group_volume, GROUP_ID, {}, HttpMethod.GET, f"groups/{GROUP_ID}/groupVolume", None),
    (
        group_volume.set_group_volume,
        GROUP_ID,
        {"volume": 35},
        HttpMethod.POST,
        f"groups/{GROUP_ID}/groupVolume",
        {"volume": 35},
    ),
    (
        group_volume.set_relative_group_volume,
        GROUP_ID,
        {"volume_delta": -5},
        HttpMethod.POST,
        f"groups/{GROUP_ID}/groupVolume/relative",
        {"volumeDelta": -5},
    ),
    (
        group_volume.set_group_mute,
        GROUP_ID,
        {"muted": True},
        HttpMethod.POST,
        f"groups/{GROUP_ID}/groupVolume/mute",
        {"muted": True},
    ),
    (
        group_volume.subscribe_group_volume,
        GROUP_ID,
        {},
        HttpMethod.POST,
        f"groups/{GROUP_ID}/groupVolume/subscription",
        None,
    ),
    (
        group_volume.unsubscribe_group_volume,
        GROUP_ID,
        {},
        HttpMethod.DELETE,
        f"groups/{GROUP_ID}/groupVolume/subscription",
        None,
    ),
    (player_volume.get_player_volume, PLAYER_ID, {}, HttpMethod.GET, f"players/{PLAYER_ID}/playerVolume", None),
    (
        player_volume.set_player_volume,
        PLAYER_ID,
        {"volume": 10, "muted": False},
        HttpMethod.POST,
        f"players/{PLAYER_ID}/playerVolume",
        {"volume": 10, "muted": False},
    ),
    (
        player_volume.set_relative_player_volume,
        PLAYER_ID,
        {"volume_delta": 3},
        HttpMethod.POST,
        f"players/{PLAYER_ID}/playerVolume/relative",
        {"volumeDelta": 3},
    ),
    (
        player_volume.set_player_mute,
        PLAYER_ID,
        {"muted": False},
        HttpMethod.POST,
        f"players/{PLAYER_ID}/playerVolume/mute",
        {"muted": False},
    ),
    (playback.get_playback_status, GROUP_ID, {}, HttpMethod.GET, f"groups/{GROUP_ID}/playback", None),
    (playback.play, GROUP_ID, {}, HttpMethod.POST, f"groups/{GROUP_ID}/playback/play", None),
    (playback.pause, GROUP_ID, {}, HttpMethod.POST, f"groups/{GROUP_ID}/playback/pause", None),
    (playback.toggle_play_pause, GROUP_ID, {}, HttpMethod.POST, f"groups/{GROUP_ID}/playback/togglePlayPause", None),
    (playback.skip_to_next_track, GROUP_ID, {}, HttpMethod.POST, f"groups/{GROUP_ID}/playback/skipToNextTrack", None),
    (
        playback.skip_to_previous_track,
        GROUP_ID,
        {},
        HttpMethod.POST,
        f"groups/{GROUP_ID}/playback/skipToPreviousTrack",
        None,
    ),
    (
        playback.seek,
        GROUP_ID,
        {"position_millis": 90_000, "item_id": "3"},
        HttpMethod.POST,
        f"groups/{GROUP_ID}/playback/seek",
        {"positionMillis": 90_000, "itemId": "3"},
    ),
    (
        playback.seek_relative,
        GROUP_ID,
        {"delta_millis": -10_000},
        HttpMethod.POST,
        f"groups/{GROUP_ID}/playback/seekRelative",
        {"deltaMillis": -10_000},
    ),
    (
        playback.set_play_modes,
        GROUP_ID,
        {"play_modes": {"shuffle": True, "repeat": False}},
        HttpMethod.POST,
        f"groups/{GROUP_ID}/playback/playMode",
        {"playModes": {"shuffle": True, "repeat": False}},
    ),
    (
        playback_metadata.get_metadata_status,
        GROUP_ID,
        {},
        HttpMethod.GET,
        f"groups/{GROUP_ID}/playbackMetadata",
        None,
    ),
    (
        playback_metadata.unsubscribe_playback_metadata,
        GROUP_ID,
        {},
        HttpMethod.DELETE,
        f"groups/{GROUP_ID}/playbackMetadata/subscription",
        None,
    ),
    (
        player_volume.unsubscribe_player_volume,
        PLAYER_ID,
        {},
        HttpMethod.DELETE,
        f"players/{PLAYER_ID}/playerVolume/subscription",
        None,
    ),
    (playback.subscribe_playback, GROUP_ID, {}, HttpMethod.POST, f"groups/{GROUP_ID}/playback/subscription", None),
    (playback.unsubscribe_playback, GROUP_ID, {}, HttpMethod.DELETE, f"groups/{GROUP_ID}/playback/subscription", None),
    (
        favorites.unsubscribe_favorites,
        HOUSEHOLD_ID,
        {},
        HttpMethod.DELETE,
        f"households/{HOUSEHOLD_ID}/favorites/subscription",
        None,
    ),
    (favorites.get_favorites, HOUSEHOLD_ID, {}, HttpMethod.GET, f"households/{HOUSEHOLD_ID}/favorites", None),
    (
        favorites.subscribe_favorites,
        HOUSEHOLD_ID,
        {},
        HttpMethod.POST,
        f"households/{HOUSEHOLD_ID}/favorites/subscription",
        None,
    ),
    (playlists.get_playlists, HOUSEHOLD_ID, {}, HttpMethod.GET, f"households/{HOUSEHOLD_ID}/playlists", None),
    (
        playlists.get_playlist,
        HOUSEHOLD_ID,
        {"playlist_id": "12"},
        HttpMethod.POST,
        f"households/{HOUSEHOLD_ID}/playlists/getPlaylist",
        {"playlistId": "12"},
    ),
    (
        playlists.load_playlist,
        GROUP_ID,
        {"playlist_id": "12", "action": "APPEND"},
        HttpMethod.POST,
        f"groups/{GROUP_ID}/playlists",
        {"action": "APPEND", "playlistId": "12"},
    ),
    (
        playlists.subscribe_playlists,
        HOUSEHOLD_ID,
        {},
        HttpMethod.POST,
        f"households/{HOUSEHOLD_ID}/playlists/subscription",
        None,
    ),
    (
        playlists.unsubscribe_playlists,
        HOUSEHOLD_ID,
        {},
        HttpMethod.DELETE,
        f"households/{HOUSEHOLD_ID}/playlists/subscription",
        None,
    ),
]


def _call(factory, scope_id, kwargs, settings):
    if scope_id is None:
        return factory(ACCESS_TOKEN, settings=settings, **kwargs)
    return factory(ACCESS_TOKEN, scope_id, settings=settings, **kwargs)


@pytest.mark.parametrize(
    ("factory", "scope_id", "kwargs", "method", "path", "body"),
    CATALOGUE,
    ids=[f"{entry[0].__module__.rsplit('.', 1)[-1]}.{entry[0].__name__}" for entry in CATALOGUE],
)
def test_endpoint_shape(factory, scope_id, kwargs, method, path, body, settings) -> None:
    request = _call(factory, scope_id, kwargs, settings)

    assert request.method() == method
    assert request.url() == f"{BASE}/{path}"
    assert request.body() == body
    assert request.headers() == {
        "Content-Type": "application/json",
        "Authorization": f"Bearer {ACCESS_TOKEN}",
    }


@pytest.mark.parametrize(
    ("factory", "scope_id", "kwargs", "method", "path", "body"),
    [entry for entry in CATALOGUE if entry[3] is HttpMethod.DELETE],
)
def test_unsubscribe_requests_never_carry_a_body(factory, scope_id, kwargs, method, path, body, settings) -> None:
    request = _call(factory, scope_id, kwargs, settings)

    assert path.endswith("/subscription")
    assert request.body() is None
    assert request.encoded_body() is None


def test_load_favorite_keeps_exactly_the_supplied_keys(settings) -> None:
    request = favorites.load_favorite(
        ACCESS_TOKEN,
        "groupId",
        action="action",
        favorite_id="favoriteId",
        play_on_completion=True,
        play_modes=["playMode1", "playMode2"],
        settings=settings,
    )

    assert request.method() == HttpMethod.POST
    assert request.url() == f"{BASE}/groups/groupId/favorites"
    assert set(request.body()) == {"action", "favoriteId", "playOnCompletion", "playModes"}
    assert request.body() == {
        "playModes": ["playMode1", "playMode2"],
        "playOnCompletion": True,
        "favoriteId": "favoriteId",
        "action": "action",
    }


def test_optional_parameters_left_out_are_omitted(settings) -> None:
    request = favorites.load_favorite(ACCESS_TOKEN, GROUP_ID, favorite_id="7", settings=settings)

    assert request.body() == {"action": "REPLACE", "favoriteId": "7"}


def test_base_url_comes_from_settings() -> None:
    settings = AppSettings(api_base_url="http://localhost:8080/control/api/v1")

    request = group_volume.get_group_volume(ACCESS_TOKEN, GROUP_ID, settings=settings)

    assert request.url() == f"http://localhost:8080/control/api/v1/groups/{GROUP_ID}/groupVolume"


def test_base_url_comes_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SONOS_CONTROL_API_BASE_URL", "https://sandbox.example.com/v1")

    request = households.get_households(ACCESS_TOKEN)

    assert request.url() == "https://sandbox.example.com/v1/households"


@pytest.mark.parametrize(
    ("factory", "kwargs"),
    [
        (group_volume.set_group_volume, {"volume": 101}),
        (group_volume.set_group_volume, {"volume": -1}),
        (group_volume.set_group_volume, {"volume": True}),
        (group_volume.set_relative_group_volume, {"volume_delta": 101}),
        (group_volume.set_group_mute, {"muted": "yes"}),
        (group_volume.set_group_mute, {"muted": None}),
        (player_volume.set_player_mute, {"muted": None}),
        (groups.set_group_members, {"player_ids": "RINCON_A"}),
        (groups.set_group_members, {"player_ids": ["RINCON_A", ""]}),
        (groups.modify_group_members, {}),
        (playback.seek, {"position_millis": -1}),
        (playback.set_play_modes, {"play_modes": {"loop": True}}),
        (playback.set_play_modes, {"play_modes": {}}),
        (playback.set_play_modes, {"play_modes": {"shuffle": "on"}}),
        (favorites.load_favorite, {"favorite_id": ""}),
        (playlists.load_playlist, {"playlist_id": "  "}),
    ],
)
def test_invalid_parameters_are_construction_errors(factory, kwargs, settings) -> None:
    with pytest.raises(RequestConstructionError):
        factory(ACCESS_TOKEN, GROUP_ID, settings=settings, **kwargs)


@pytest.mark.parametrize("scope_id", ["", "   "])
def test_blank_scope_ids_are_construction_errors(scope_id: str, settings) -> None:
    with pytest.raises(RequestConstructionError):
        group_volume.subscribe_group_volume(ACCESS_TOKEN, scope_id, settings=settings)


def test_blank_token_is_a_construction_error(settings) -> None:
    with pytest.raises(RequestConstructionError):
        playback.play("", GROUP_ID, settings=settings)
