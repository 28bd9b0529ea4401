"""Public package exports for Scribd API client."""

from .async_client import AsyncScribdClient
from .client import ScribdClient
from .config import ScribdClientConfig, TransportConfig
from .core.errors import (
    ScribdApiError,
    ScribdClientClosedError,
    ScribdMalformedResponseError,
    ScribdProtocolError,
    ScribdTransportError,
    ScribdValidationError,
)
from .core.models import Session

__all__ = [
    "ScribdClient",
    "AsyncScribdClient",
    "ScribdClientConfig",
    "TransportConfig",
    "Session",
    "ScribdApiError",
    "ScribdProtocolError",
    "ScribdTransportError",
    "ScribdMalformedResponseError",
    "ScribdValidationError",
    "ScribdClientClosedError",
]
