"""Signed request execution for sync/async clients."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Mapping
from typing import Protocol

from .encoding import DEFAULT_FILE_PARAM, ParamValue, encode_params
from .errors import ScribdMalformedResponseError, ScribdProtocolError, ScribdValidationError
from .models import Session, SignedRequest
from .normalize import NormalizedValue
from .response_parsing import interpret_response, parse_xml_payload
from .signing import SIGNATURE_PARAM, sign_params

logger = logging.getLogger("scribd_api_client")

METHOD_PARAM = "method"
SESSION_KEY_PARAM = "session_key"
USER_ID_PARAM = "my_user_id"


class SyncPoster(Protocol):
    def post(self, url: str, fields: Mapping[str, str]) -> bytes: ...


class AsyncPoster(Protocol):
    def post(self, url: str, fields: Mapping[str, str]) -> Awaitable[bytes]: ...


def build_signed_request(
    method: str,
    params: Mapping[str, ParamValue],
    *,
    session: Session | None,
    url: str,
    secret: str,
    file_param: str = DEFAULT_FILE_PARAM,
) -> SignedRequest:
    """Inject the administrative fields, encode and sign ``params``.

    The signature covers exactly the encoded parameters that are sent.
    """

    if not method:
        raise ScribdValidationError("method must be specified")
    if SIGNATURE_PARAM in params:
        raise ScribdValidationError(f"{SIGNATURE_PARAM} is computed by the client and must not be passed")
    logical: dict[str, ParamValue] = dict(params)
    logical[METHOD_PARAM] = method
    logical[SESSION_KEY_PARAM] = session.session_key if session is not None else None
    logical[USER_ID_PARAM] = session.user_id if session is not None else None

    encoded = encode_params(logical, file_param=file_param)
    return SignedRequest(
        method=method,
        url=url,
        params=encoded,
        signature=sign_params(encoded, secret),
    )


class _ExecutorBase:
    def __init__(
        self,
        *,
        url: str,
        secret: str,
        file_param: str = DEFAULT_FILE_PARAM,
    ) -> None:
        self._url = url
        self._secret = secret
        self._file_param = file_param
        self.last_error_code: int | None = None

    @property
    def url(self) -> str:
        return self._url

    def _build(
        self,
        method: str,
        params: Mapping[str, ParamValue],
        session: Session | None,
    ) -> SignedRequest:
        request = build_signed_request(
            method,
            params,
            session=session,
            url=self._url,
            secret=self._secret,
            file_param=self._file_param,
        )
        logger.debug(
            "request start method=%s params=%s",
            method,
            ",".join(sorted(request.params)),
        )
        return request

    def _interpret(self, request: SignedRequest, body: bytes) -> NormalizedValue:
        logger.debug("response received method=%s bytes=%s", request.method, len(body))
        try:
            root = parse_xml_payload(body)
            result = interpret_response(root, method=request.method)
        except ScribdProtocolError as exc:
            self.last_error_code = exc.code
            logger.error(
                "request failed method=%s code=%s message=%s",
                request.method,
                exc.code,
                exc.message,
            )
            raise
        except ScribdMalformedResponseError:
            logger.error("malformed response method=%s", request.method)
            raise
        logger.info("request success method=%s", request.method)
        return result


class RequestExecutor(_ExecutorBase):
    """Builds, signs and sends one request, then interprets the response."""

    def __init__(
        self,
        transport: SyncPoster,
        *,
        url: str,
        secret: str,
        file_param: str = DEFAULT_FILE_PARAM,
    ) -> None:
        super().__init__(url=url, secret=secret, file_param=file_param)
        self._transport = transport

    def execute(
        self,
        method: str,
        params: Mapping[str, ParamValue],
        session: Session | None = None,
    ) -> NormalizedValue:
        request = self._build(method, params, session)
        body = self._transport.post(request.url, request.form_fields())
        return self._interpret(request, body)


class AsyncRequestExecutor(_ExecutorBase):
    """Async counterpart of :class:`RequestExecutor`."""

    def __init__(
        self,
        transport: AsyncPoster,
        *,
        url: str,
        secret: str,
        file_param: str = DEFAULT_FILE_PARAM,
    ) -> None:
        super().__init__(url=url, secret=secret, file_param=file_param)
        self._transport = transport

    async def execute(
        self,
        method: str,
        params: Mapping[str, ParamValue],
        session: Session | None = None,
    ) -> NormalizedValue:
        request = self._build(method, params, session)
        body = await self._transport.post(request.url, request.form_fields())
        return self._interpret(request, body)


__all__ = [
    "METHOD_PARAM",
    "SESSION_KEY_PARAM",
    "USER_ID_PARAM",
    "SyncPoster",
    "AsyncPoster",
    "build_signed_request",
    "RequestExecutor",
    "AsyncRequestExecutor",
]
