"""Request parameter builders for the Scribd API methods."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from .core.encoding import FILE_REFERENCE_PREFIX, ParamValue, Scalar

UPLOAD = "docs.upload"
UPLOAD_FROM_URL = "docs.uploadFromUrl"
GET_LIST = "docs.getList"
GET_CONVERSION_STATUS = "docs.getConversionStatus"
GET_SETTINGS = "docs.getSettings"
CHANGE_SETTINGS = "docs.changeSettings"
DELETE = "docs.delete"
SEARCH = "docs.search"
LOGIN = "user.login"
SIGNUP = "user.signup"


def build_upload_params(
    file: str,
    *,
    doc_type: str | None = None,
    access: str | None = None,
    rev_id: int | str | None = None,
    file_param: str = "file",
) -> dict[str, ParamValue]:
    return {
        "doc_type": doc_type,
        "access": access,
        "rev_id": rev_id,
        file_param: FILE_REFERENCE_PREFIX + str(file),
    }


def build_upload_from_url_params(
    url: str,
    *,
    doc_type: str | None = None,
    access: str | None = None,
    rev_id: int | str | None = None,
) -> dict[str, ParamValue]:
    return {
        "url": url,
        "access": access,
        "rev_id": rev_id,
        "doc_type": doc_type,
    }


def build_get_list_params(filters: Mapping[str, ParamValue] | None = None) -> dict[str, ParamValue]:
    return dict(filters or {})


def build_doc_id_params(doc_id: int | str) -> dict[str, ParamValue]:
    return {"doc_id": doc_id}


def build_change_settings_params(
    doc_ids: Sequence[Scalar] | Scalar,
    *,
    title: str | None = None,
    description: str | None = None,
    access: str | None = None,
    license: str | None = None,
    parental_advisory: str | None = None,
    show_ads: str | None = None,
    tags: Sequence[str] | str | None = None,
) -> dict[str, ParamValue]:
    return {
        "doc_ids": doc_ids,
        "title": title,
        "description": description,
        "access": access,
        "license": license,
        "parental_advisory": parental_advisory,
        "show_ads": show_ads,
        "tags": tags,
    }


def build_search_params(
    query: str,
    *,
    num_results: int | None = None,
    num_start: int | None = None,
    scope: str | None = None,
    category_id: int | None = None,
    language: str | None = None,
    simple: bool = True,
) -> dict[str, ParamValue]:
    return {
        "query": query,
        "num_results": num_results,
        "num_start": num_start,
        "scope": scope,
        "category_id": category_id,
        "language": language,
        "simple": simple,
    }


def build_login_params(username: str, password: str) -> dict[str, ParamValue]:
    return {"username": username, "password": password}


def build_signup_params(
    username: str,
    password: str,
    email: str,
    *,
    name: str | None = None,
) -> dict[str, ParamValue]:
    return {
        "username": username,
        "password": password,
        "name": name,
        "email": email,
    }


__all__ = [
    "UPLOAD",
    "UPLOAD_FROM_URL",
    "GET_LIST",
    "GET_CONVERSION_STATUS",
    "GET_SETTINGS",
    "CHANGE_SETTINGS",
    "DELETE",
    "SEARCH",
    "LOGIN",
    "SIGNUP",
    "build_upload_params",
    "build_upload_from_url_params",
    "build_get_list_params",
    "build_doc_id_params",
    "build_change_settings_params",
    "build_search_params",
    "build_login_params",
    "build_signup_params",
]
