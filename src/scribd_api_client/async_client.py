"""Public async client entrypoint."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from types import TracebackType

from . import endpoints
from .client_shared import (
    build_endpoint_url,
    remember_session,
    select_member,
    validate_client_config,
    validate_credentials,
)
from .config import ScribdClientConfig
from .core.async_transport import AsyncTransport
from .core.encoding import ParamValue, Scalar
from .core.errors import ScribdClientClosedError
from .core.executor import AsyncPoster, AsyncRequestExecutor
from .core.models import Session
from .core.normalize import NormalizedValue


class AsyncScribdClient:
    """Public async Scribd API client.

    Holds the login session between calls; do not share one instance
    between tasks without external locking.
    """

    def __init__(
        self,
        api_key: str,
        secret: str,
        *,
        config: ScribdClientConfig | None = None,
        transport: AsyncPoster | None = None,
    ) -> None:
        validate_credentials(api_key, secret)
        self._config = config or ScribdClientConfig()
        validate_client_config(self._config)

        self.api_key = api_key
        self._transport = transport or AsyncTransport(self._config)
        self._executor = AsyncRequestExecutor(
            self._transport,
            url=build_endpoint_url(self._config, api_key),
            secret=secret,
            file_param=self._config.file_param,
        )
        self.session = Session()
        self._closed = False

    @property
    def url(self) -> str:
        return self._executor.url

    @property
    def last_error_code(self) -> int | None:
        return self._executor.last_error_code

    async def request(self, method: str, params: Mapping[str, ParamValue] | None = None) -> NormalizedValue:
        """Send ``method`` with ``params`` and return the normalized result."""

        self._ensure_open()
        return await self._executor.execute(method, params or {}, self.session)

    async def upload(
        self,
        file: str,
        doc_type: str | None = None,
        access: str | None = None,
        rev_id: int | str | None = None,
    ) -> NormalizedValue:
        params = endpoints.build_upload_params(
            file,
            doc_type=doc_type,
            access=access,
            rev_id=rev_id,
            file_param=self._config.file_param,
        )
        return await self.request(endpoints.UPLOAD, params)

    async def upload_from_url(
        self,
        url: str,
        doc_type: str | None = None,
        access: str | None = None,
        rev_id: int | str | None = None,
    ) -> NormalizedValue:
        params = endpoints.build_upload_from_url_params(
            url,
            doc_type=doc_type,
            access=access,
            rev_id=rev_id,
        )
        return await self.request(endpoints.UPLOAD_FROM_URL, params)

    async def get_list(self, filters: Mapping[str, ParamValue] | None = None) -> NormalizedValue:
        result = await self.request(endpoints.GET_LIST, endpoints.build_get_list_params(filters))
        return select_member(result, "resultset", method=endpoints.GET_LIST)

    async def get_conversion_status(self, doc_id: int | str) -> NormalizedValue:
        result = await self.request(endpoints.GET_CONVERSION_STATUS, endpoints.build_doc_id_params(doc_id))
        return select_member(result, "conversion_status", method=endpoints.GET_CONVERSION_STATUS)

    async def get_settings(self, doc_id: int | str) -> NormalizedValue:
        return await self.request(endpoints.GET_SETTINGS, endpoints.build_doc_id_params(doc_id))

    async def change_settings(
        self,
        doc_ids: Sequence[Scalar] | Scalar,
        title: str | None = None,
        description: str | None = None,
        access: str | None = None,
        license: str | None = None,
        parental_advisory: str | None = None,
        show_ads: str | None = None,
        tags: Sequence[str] | str | None = None,
    ) -> NormalizedValue:
        params = endpoints.build_change_settings_params(
            doc_ids,
            title=title,
            description=description,
            access=access,
            license=license,
            parental_advisory=parental_advisory,
            show_ads=show_ads,
            tags=tags,
        )
        return await self.request(endpoints.CHANGE_SETTINGS, params)

    async def delete(self, doc_id: int | str) -> NormalizedValue:
        return await self.request(endpoints.DELETE, endpoints.build_doc_id_params(doc_id))

    async def search(
        self,
        query: str,
        num_results: int | None = None,
        num_start: int | None = None,
        scope: str | None = None,
        category_id: int | None = None,
        language: str | None = None,
        simple: bool = True,
    ) -> NormalizedValue:
        params = endpoints.build_search_params(
            query,
            num_results=num_results,
            num_start=num_start,
            scope=scope,
            category_id=category_id,
            language=language,
            simple=simple,
        )
        result = await self.request(endpoints.SEARCH, params)
        return select_member(result, "result_set", method=endpoints.SEARCH)

    async def login(self, username: str, password: str) -> NormalizedValue:
        result = await self.request(endpoints.LOGIN, endpoints.build_login_params(username, password))
        remember_session(self.session, result)
        return result

    async def signup(
        self,
        username: str,
        password: str,
        email: str,
        name: str | None = None,
    ) -> NormalizedValue:
        params = endpoints.build_signup_params(username, password, email, name=name)
        result = await self.request(endpoints.SIGNUP, params)
        remember_session(self.session, result)
        return result

    def logout(self) -> None:
        self.session.clear()

    def _ensure_open(self) -> None:
        if self._closed:
            raise ScribdClientClosedError("AsyncScribdClient is already closed")

    async def close(self) -> None:
        if self._closed:
            return
        close = getattr(self._transport, "close", None)
        if close is not None:
            await close()
        self._closed = True

    async def __aenter__(self) -> "AsyncScribdClient":
        self._ensure_open()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        await self.close()
        return False


__all__ = [
    "AsyncScribdClient",
]
