from __future__ import annotations

import hashlib

import pytest

from scribd_api_client.core.signing import build_signature_base, sign_params


def _md5(text: str) -> str:
    return hashlib.md5(text.encode("utf-8")).hexdigest()


def test_signature_base_concatenates_sorted_pairs_after_secret():
    base = build_signature_base({"method": "docs.delete", "doc_id": "5"}, "s3cr3t")
    assert base == "s3cr3tdoc_id5methoddocs.delete"


def test_sign_params_is_md5_hex_of_signature_base():
    params = {"method": "user.login", "username": "alice", "password": "pw"}
    expected = _md5("secretmethoduser.loginpasswordpwusernamealice")
    assert sign_params(params, "secret") == expected


def test_sign_params_is_order_independent():
    first = sign_params({"a": "1", "b": "2", "c": "3"}, "k")
    second = sign_params({"c": "3", "a": "1", "b": "2"}, "k")
    assert first == second
    assert first == sign_params({"a": "1", "b": "2", "c": "3"}, "k")


def test_sign_params_returns_lowercase_hex_digest():
    signature = sign_params({"x": "y"}, "k")
    assert len(signature) == 32
    assert signature == signature.lower()
    int(signature, 16)


def test_sign_params_depends_on_secret():
    assert sign_params({"x": "y"}, "one") != sign_params({"x": "y"}, "two")


def test_sign_params_encodes_text_as_utf8():
    assert sign_params({"title": "żółw"}, "k") == _md5("ktitleżółw")


def test_sign_params_sorts_by_codepoint():
    base = build_signature_base({"b": "1", "B": "2", "a": "3"}, "")
    assert base == "B2a3b1"


def test_sign_params_rejects_signature_param():
    with pytest.raises(ValueError):
        sign_params({"api_sig": "abc", "x": "y"}, "k")
