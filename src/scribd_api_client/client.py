"""Public client entrypoint."""

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
from .core.encoding import ParamValue, Scalar
from .core.errors import ScribdClientClosedError
from .core.executor import RequestExecutor, SyncPoster
from .core.models import Session
from .core.normalize import NormalizedValue
from .core.transport import SyncTransport


class ScribdClient:
    """Public Scribd API client.

    Holds the login session between calls; do not share one instance
    between threads without external locking.
    """

    def __init__(
        self,
        api_key: str,
        secret: str,
        *,
        config: ScribdClientConfig | None = None,
        transport: SyncPoster | None = None,
    ) -> None:
        validate_credentials(api_key, secret)
        self._config = config or ScribdClientConfig()
        validate_client_config(self._config)

        self.api_key = api_key
        self._transport = transport or SyncTransport(self._config)
        self._executor = RequestExecutor(
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

    def request(self, method: str, params: Mapping[str, ParamValue] | None = None) -> NormalizedValue:
        """Send ``method`` with ``params`` and return the normalized result."""

        self._ensure_open()
        return self._executor.execute(method, params or {}, self.session)

    def upload(
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
        return self.request(endpoints.UPLOAD, params)

    def upload_from_url(
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
        return self.request(endpoints.UPLOAD_FROM_URL, params)

    def get_list(self, filters: Mapping[str, ParamValue] | None = None) -> NormalizedValue:
        result = self.request(endpoints.GET_LIST, endpoints.build_get_list_params(filters))
        return select_member(result, "resultset", method=endpoints.GET_LIST)

    def get_conversion_status(self, doc_id: int | str) -> NormalizedValue:
        result = self.request(endpoints.GET_CONVERSION_STATUS, endpoints.build_doc_id_params(doc_id))
        return select_member(result, "conversion_status", method=endpoints.GET_CONVERSION_STATUS)

    def get_settings(self, doc_id: int | str) -> NormalizedValue:
        return self.request(endpoints.GET_SETTINGS, endpoints.build_doc_id_params(doc_id))

    def change_settings(
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
        return self.request(endpoints.CHANGE_SETTINGS, params)

    def delete(self, doc_id: int | str) -> NormalizedValue:
        return self.request(endpoints.DELETE, endpoints.build_doc_id_params(doc_id))

    def search(
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
        result = self.request(endpoints.SEARCH, params)
        return select_member(result, "result_set", method=endpoints.SEARCH)

    def login(self, username: str, password: str) -> NormalizedValue:
        result = self.request(endpoints.LOGIN, endpoints.build_login_params(username, password))
        remember_session(self.session, result)
        return result

    def signup(
        self,
        username: str,
        password: str,
        email: str,
        name: str | None = None,
    ) -> NormalizedValue:
        params = endpoints.build_signup_params(username, password, email, name=name)
        result = self.request(endpoints.SIGNUP, params)
        remember_session(self.session, result)
        return result

    def logout(self) -> None:
        self.session.clear()

    def _ensure_open(self) -> None:
        if self._closed:
            raise ScribdClientClosedError("ScribdClient is already closed")

    def close(self) -> None:
        if self._closed:
            return
        close = getattr(self._transport, "close", None)
        if close is not None:
            close()
        self._closed = True

    def __enter__(self) -> "ScribdClient":
        self._ensure_open()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        self.close()
        return False


__all__ = [
    "ScribdClient",
]
