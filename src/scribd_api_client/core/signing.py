"""Request signature helpers."""

from __future__ import annotations

import hashlib
from collections.abc import Mapping

SIGNATURE_PARAM = "api_sig"


def build_signature_base(params: Mapping[str, str], secret: str) -> str:
    """Return ``secret`` followed by every ``key + value`` in sorted key order."""

    if SIGNATURE_PARAM in params:
        raise ValueError(f"{SIGNATURE_PARAM} must not be part of the signed parameters")
    return secret + "".join(key + params[key] for key in sorted(params))


def sign_params(params: Mapping[str, str], secret: str) -> str:
    base = build_signature_base(params, secret)
    return hashlib.md5(base.encode("utf-8")).hexdigest()


__all__ = [
    "SIGNATURE_PARAM",
    "build_signature_base",
    "sign_params",
]
