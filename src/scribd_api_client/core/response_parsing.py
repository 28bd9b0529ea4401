"""Shared response parsing helpers for sync/async executors."""

from __future__ import annotations

from lxml import etree

from .errors import ScribdMalformedResponseError, ScribdProtocolError
from .normalize import NormalizedValue, element_children, element_name, normalize_payload

STATUS_ATTRIBUTE = "stat"
STATUS_OK = "ok"
STATUS_FAIL = "fail"


def _build_parser() -> etree.XMLParser:
    return etree.XMLParser(resolve_entities=False, no_network=True)


def parse_xml_payload(body: bytes) -> etree._Element:
    """Parse response bytes and map parse failures to domain errors."""

    if isinstance(body, str):
        body = body.encode("utf-8")
    try:
        root = etree.fromstring(body, parser=_build_parser())
    except (etree.XMLSyntaxError, ValueError) as exc:
        raise ScribdMalformedResponseError(
            "response body is not valid XML",
            cause="parse",
        ) from exc
    if root is None:
        raise ScribdMalformedResponseError("response body is empty", cause="parse")
    return root


def extract_status(root: etree._Element) -> str | None:
    value = root.get(STATUS_ATTRIBUTE)
    return value.strip() if value is not None else None


def build_protocol_error(root: etree._Element, *, method: str | None = None) -> ScribdProtocolError:
    for child in element_children(root):
        if element_name(child) == "error":
            return ScribdProtocolError(
                child.get("code"),
                child.get("message") or "",
                method=method,
            )
    return ScribdProtocolError(-1, "unidentified error", method=method)


def interpret_response(root: etree._Element, *, method: str | None = None) -> NormalizedValue:
    """Return the normalized payload of a successful response or raise.

    ``stat="fail"`` raises :class:`ScribdProtocolError`; a missing or unknown
    status raises :class:`ScribdMalformedResponseError`.
    """

    status = extract_status(root)
    if status == STATUS_FAIL:
        raise build_protocol_error(root, method=method)
    if status == STATUS_OK:
        return normalize_payload(root)
    if status is None:
        raise ScribdMalformedResponseError("response status attribute is missing", cause="status")
    raise ScribdMalformedResponseError(
        f"unknown response status: {status!r}",
        cause="status",
    )


__all__ = [
    "STATUS_ATTRIBUTE",
    "STATUS_OK",
    "STATUS_FAIL",
    "parse_xml_payload",
    "extract_status",
    "build_protocol_error",
    "interpret_response",
]
