"""Shared helpers for sync/async transport implementations."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

import httpx

from ..config import ScribdClientConfig
from .encoding import FILE_REFERENCE_PREFIX
from .errors import ScribdTransportError, ScribdValidationError


def build_default_headers(config: ScribdClientConfig) -> Mapping[str, str]:
    return {
        "Accept-Encoding": "gzip",
        "Cache-Control": "no-store",
        "User-Agent": config.user_agent,
    }


def build_default_timeout(config: ScribdClientConfig) -> httpx.Timeout:
    return httpx.Timeout(
        connect=config.transport.timeout_connect_seconds,
        read=config.transport.timeout_read_seconds,
        write=config.transport.timeout_write_seconds,
        pool=config.transport.timeout_pool_seconds,
    )


def split_form_fields(
    fields: Mapping[str, str],
    *,
    file_param: str,
) -> tuple[dict[str, str], Path | None]:
    """Separate plain form fields from the ``@path`` file attachment."""

    data = dict(fields)
    reference = data.get(file_param)
    if reference is None or not reference.startswith(FILE_REFERENCE_PREFIX):
        return data, None
    del data[file_param]
    path = Path(reference[len(FILE_REFERENCE_PREFIX):])
    if not path.is_file():
        raise ScribdValidationError(f"upload file does not exist: {path}")
    return data, path


def ensure_transport_status(response: object) -> bytes:
    http_status = getattr(response, "status_code", None)
    if http_status is not None and http_status >= 500:
        raise ScribdTransportError(
            "remote host internal error",
            http_status=http_status,
            cause="server",
        )
    return bytes(getattr(response, "content", b""))


__all__ = [
    "build_default_headers",
    "build_default_timeout",
    "split_form_fields",
    "ensure_transport_status",
]
