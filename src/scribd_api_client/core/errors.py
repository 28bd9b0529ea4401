"""Error types raised by the client."""

from __future__ import annotations


def _to_code(value: object) -> int:
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        text = value.strip()
        digits = text[1:] if text.startswith("-") else text
        if digits.isascii() and digits.isdigit():
            return int(text)
    return -1


class ScribdApiError(Exception):
    """Base exception for this package."""

    def __init__(
        self,
        message: str,
        *,
        http_status: int | None = None,
        cause: str | None = None,
    ) -> None:
        super().__init__(message)
        self.http_status = http_status
        self.cause = cause


class ScribdProtocolError(ScribdApiError):
    """The service answered with ``stat="fail"``.

    ``code`` is the service error code (``-1`` when the response did not carry
    a usable one) and ``message`` its accompanying text.
    """

    def __init__(
        self,
        code: object,
        message: str,
        *,
        method: str | None = None,
        http_status: int | None = None,
    ) -> None:
        self.code = _to_code(code)
        self.message = message
        self.method = method
        super().__init__(
            f"[Errno {self.code}] {message}",
            http_status=http_status,
            cause="protocol",
        )


class ScribdTransportError(ScribdApiError):
    """Network/transport-level failure."""


class ScribdMalformedResponseError(ScribdApiError):
    """Response body could not be interpreted."""


class ScribdValidationError(ScribdApiError):
    """Invalid configuration or arguments."""


class ScribdClientClosedError(ScribdApiError):
    """Raised when client is used after close."""


__all__ = [
    "ScribdApiError",
    "ScribdProtocolError",
    "ScribdTransportError",
    "ScribdMalformedResponseError",
    "ScribdValidationError",
    "ScribdClientClosedError",
]
