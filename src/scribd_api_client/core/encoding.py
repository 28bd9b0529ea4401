"""Request parameter encoding."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Union

Scalar = Union[str, int, float, bool, None]
ParamValue = Union[Scalar, Sequence[Scalar]]

DEFAULT_FILE_PARAM = "file"
FILE_REFERENCE_PREFIX = "@"


def is_empty_value(value: object) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (list, tuple)):
        return len(value) == 0
    return False


def encode_scalar(value: Scalar) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "1" if value else "0"
    return str(value)


def encode_value(key: str, value: ParamValue, *, file_param: str = DEFAULT_FILE_PARAM) -> str:
    """Render one parameter value as transmitted text.

    Sequences are joined with commas. A value starting with ``@`` is prefixed
    with a space unless it belongs to the file parameter, where ``@path``
    means "attach this local file".
    """

    if isinstance(value, (list, tuple)):
        text = ",".join(encode_scalar(item) for item in value)
    else:
        text = encode_scalar(value)
    if key != file_param and text.startswith(FILE_REFERENCE_PREFIX):
        text = " " + text
    return text


def encode_params(
    params: Mapping[str, ParamValue],
    *,
    file_param: str = DEFAULT_FILE_PARAM,
) -> dict[str, str]:
    encoded: dict[str, str] = {}
    for key, value in params.items():
        if is_empty_value(value):
            continue
        encoded[key] = encode_value(key, value, file_param=file_param)
    return encoded


__all__ = [
    "Scalar",
    "ParamValue",
    "DEFAULT_FILE_PARAM",
    "FILE_REFERENCE_PREFIX",
    "is_empty_value",
    "encode_scalar",
    "encode_value",
    "encode_params",
]
