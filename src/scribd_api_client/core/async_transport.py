"""Async HTTP transport."""

from __future__ import annotations

import asyncio
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


class AsyncTransportClient(Protocol):
    async def post(self, url: str, *, data: Mapping[str, str], files: Any = None) -> object: ...
    async def aclose(self) -> None: ...


class AsyncTransport:
    """Asynchronous transport for the Scribd API.

    Upload files are read in a worker thread so the event loop is not blocked.
    """

    def __init__(
        self,
        config: ScribdClientConfig,
        *,
        client: AsyncTransportClient | None = None,
    ) -> None:
        self._config = config
        self._closed = False
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            headers=build_default_headers(config),
            timeout=build_default_timeout(config),
        )

    async def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._owns_client and hasattr(self._client, "aclose"):
            await self._client.aclose()

    async def post(self, url: str, fields: Mapping[str, str]) -> bytes:
        if self._closed:
            raise ScribdTransportError("transport is already closed")

        file_param = self._config.file_param
        data, upload_path = split_form_fields(fields, file_param=file_param)
        try:
            if upload_path is None:
                response = await self._client.post(url, data=data)
            else:
                logger.debug("attaching upload file name=%s", upload_path.name)
                content = await asyncio.to_thread(upload_path.read_bytes)
                response = await self._client.post(
                    url,
                    data=data,
                    files={file_param: (upload_path.name, content)},
                )
        except httpx.HTTPError as exc:
            logger.error("request network error error=%s", exc.__class__.__name__)
            raise ScribdTransportError(
                "network/transport error",
                cause="network",
            ) from exc

        return ensure_transport_status(response)


__all__ = [
    "AsyncTransport",
    "AsyncTransportClient",
]
