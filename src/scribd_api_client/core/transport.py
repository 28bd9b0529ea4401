"""Blocking HTTP transport."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Protocol

import httpx

from ..config import ScribdClientConfig
from .errors import ScribdTransportError
from .transport_shared import (
    build_default_headers,
    build_default_timeout,
    ensure_transport_status,
    split_form_fields,
)

logger = logging.getLogger("scribd_api_client")


class SyncTransportClient(Protocol):
    def post(self, url: str, *, data: Mapping[str, str], files: Any = None) -> object: ...
    def close(self) -> None: ...


class SyncTransport:
    """Sends one multipart/form POST per call and returns the raw body."""

    def __init__(
        self,
        config: ScribdClientConfig,
        *,
        client: SyncTransportClient | None = None,
    ) -> None:
        self._config = config
        self._closed = False
        self._owns_client = client is None
        self._client = client or httpx.Client(
            headers=build_default_headers(config),
            timeout=build_default_timeout(config),
        )

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._owns_client:
            self._client.close()

    def post(self, url: str, fields: Mapping[str, str]) -> bytes:
        if self._closed:
            raise ScribdTransportError("transport is already closed")

        file_param = self._config.file_param
        data, upload_path = split_form_fields(fields, file_param=file_param)
        try:
            if upload_path is None:
                response = self._client.post(url, data=data)
            else:
                logger.debug("attaching upload file name=%s", upload_path.name)
                with upload_path.open("rb") as handle:
                    response = self._client.post(
                        url,
                        data=data,
                        files={file_param: (upload_path.name, handle)},
                    )
        except httpx.HTTPError as exc:
            logger.error("request network error error=%s", exc.__class__.__name__)
            raise ScribdTransportError(
                "network/transport error",
                cause="network",
            ) from exc

        return ensure_transport_status(response)


__all__ = [
    "SyncTransport",
    "SyncTransportClient",
]
