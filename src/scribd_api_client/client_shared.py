"""Shared helpers for sync/async client bootstrap."""

from __future__ import annotations

from collections.abc import Mapping

import httpx

from .config import ScribdClientConfig
from .core.errors import ScribdMalformedResponseError, ScribdValidationError
from .core.models import Session
from .core.normalize import NormalizedValue


def validate_client_config(config: ScribdClientConfig) -> None:
    try:
        config.validate()
    except ValueError as exc:
        raise ScribdValidationError(str(exc)) from exc


def validate_credentials(api_key: str, secret: str) -> None:
    if not api_key:
        raise ScribdValidationError("api_key must not be empty")
    if not secret:
        raise ScribdValidationError("secret must not be empty")


def build_endpoint_url(config: ScribdClientConfig, api_key: str) -> str:
    return str(httpx.URL(config.base_url, params={"api_key": api_key}))


def select_member(result: NormalizedValue, name: str, *, method: str) -> NormalizedValue:
    if isinstance(result, Mapping) and name in result:
        return result[name]
    raise ScribdMalformedResponseError(f"{method} response has no {name!r} element")


def remember_session(session: Session, result: NormalizedValue) -> None:
    if not isinstance(result, Mapping):
        raise ScribdMalformedResponseError("login response has no session data")
    session.update(result.get("session_key"), result.get("user_id"))


__all__ = [
    "validate_client_config",
    "validate_credentials",
    "build_endpoint_url",
    "select_member",
    "remember_session",
]
