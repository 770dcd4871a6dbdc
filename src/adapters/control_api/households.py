"""Endpoint `households`: households accesibles con el token."""

from __future__ import annotations

from adapters.control_api.common import build_request
from core.config import AppSettings
from core.domain.requests import ControlRequest, HttpMethod


def get_households(access_token: str, *, settings: AppSettings | None = None) -> ControlRequest:
    """GET `households`. Respuesta: `HouseholdList`."""

    return build_request(HttpMethod.GET, "households", access_token=access_token, settings=settings)
