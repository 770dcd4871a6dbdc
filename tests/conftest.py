"""Shared fixtures for the sonos-control tests.

Only the network is faked: descriptors, dispatcher and transport are the real
classes, wired to `httpx.MockTransport` or to an in-memory recording transport.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping

import httpx
import pytest
import structlog

from adapters.http_client import HttpxTransport
from core.config import AppSettings
from core.interfaces.transport import TransportResponse

ACCESS_TOKEN = "accessToken"
HOUSEHOLD_ID = "Sonos_HHID_4231"
GROUP_ID = "RINCON_000E58A0123401400:12"
PLAYER_ID = "RINCON_000E58A0123401400"


@dataclass
class SentRequest:
    method: str
    url: str
    headers: dict[str, str]
    body: bytes | None


@dataclass
class RecordingTransport:
    """`HttpTransport` en memoria: devuelve `response` o lanza `error`."""

    response: TransportResponse = field(default_factory=lambda: TransportResponse(status_code=200))
    error: Exception | None = None
    sent: list[SentRequest] = field(default_factory=list)

    async def send(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str],
        body: bytes | None,
    ) -> TransportResponse:
        self.sent.append(SentRequest(method=method, url=url, headers=dict(headers), body=body))
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[None]:
    """Keep developer env vars, `.env` files and CLI logging config out of the tests."""

    for key in list(os.environ):
        if key.upper().startswith("SONOS_CONTROL_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    yield
    structlog.reset_defaults()


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(api_base_url="https://api.ws.sonos.com/control/api/v1")


@pytest.fixture
def recording_transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def mock_httpx_transport() -> Callable[[Callable[[httpx.Request], httpx.Response]], HttpxTransport]:
    """Build an `HttpxTransport` whose client answers through `handler`."""

    def _build(handler: Callable[[httpx.Request], httpx.Response]) -> HttpxTransport:
        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return HttpxTransport(client=client)

    return _build
