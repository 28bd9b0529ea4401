"""Conversion of XML response trees into plain nested mappings."""

from __future__ import annotations

from typing import Union

from lxml import etree

NormalizedValue = Union[str, dict[str, "NormalizedValue"]]

EMPTY_SUCCESS_MARKER = "1"


def element_children(element: etree._Element) -> list[etree._Element]:
    """Element children only; comments and processing instructions are skipped."""

    return [child for child in element if isinstance(child.tag, str)]


def element_name(element: etree._Element) -> str:
    return etree.QName(element).localname


def element_text(element: etree._Element) -> str:
    # Direct text of the node, without the text of nested elements.
    parts = [element.text or ""]
    for child in element:
        if not isinstance(child.tag, str):
            parts.append(child.tail or "")
    return "".join(parts)


def normalize_node(element: etree._Element) -> NormalizedValue:
    """Convert ``element`` into a string or a mapping of tag name to value.

    Repeated sibling tags are kept under ``"<tag> <n>"`` where ``n`` is the
    size of the mapping being built plus one, so ``<r>A</r><r>B</r>``
    becomes ``{"r": "A", "r 2": "B"}``.
    """

    result: dict[str, NormalizedValue] = {}
    for child in element_children(element):
        name = element_name(child)
        if name in result:
            result[f"{name} {len(result) + 1}"] = normalize_node(child)
        else:
            result[name] = normalize_node(child)
    if result:
        return result
    return element_text(element)


def normalize_payload(root: etree._Element) -> NormalizedValue:
    """Normalize a successful response root.

    A body with no payload at all (empty or whitespace-only) is reported as
    ``"1"``, the service's idiom for "done, nothing to return".
    """

    value = normalize_node(root)
    if isinstance(value, str) and value.strip() == "":
        return EMPTY_SUCCESS_MARKER
    return value


__all__ = [
    "NormalizedValue",
    "EMPTY_SUCCESS_MARKER",
    "element_children",
    "element_name",
    "element_text",
    "normalize_node",
    "normalize_payload",
]
