"""Recursive emission of builder-chain expressions from markup nodes."""

from __future__ import annotations

import re
from typing import List, Mapping, Sequence

from .config import TransformOptions
from .dom_model import MarkupContent, MarkupNode, TextNode
from .escape import escape_text
from .extract import PropValue, extract_props, extract_styles
from .tables import element_class, input_subtype

BUILDER_NAMESPACE = "h"
INPUT_PREFIX = "input"

WHITESPACE_RE = re.compile(r"[ \t\n\r]+")


def is_whitespace(text: str) -> bool:
    return WHITESPACE_RE.fullmatch(text) is not None


def _literal(value: PropValue) -> str:
    if value is True:
        return "true"
    return f'"{escape_text(str(value))}"'


def map_to_string(values: Mapping[str, PropValue]) -> str:
    """Serialize a props/style map as ``"key":value,`` pairs in iteration order."""
    return "".join(f'"{escape_text(key)}":{_literal(value)},' for key, value in values.items())


def constructor_name(node: MarkupNode) -> str:
    if element_class(node.tag) == "input":
        return f"{BUILDER_NAMESPACE}.{INPUT_PREFIX}{input_subtype(node.attributes.get('type'))}"
    return f"{BUILDER_NAMESPACE}.{node.tag}"


def extract_children(children: Sequence[MarkupContent], options: TransformOptions) -> str:
    """Render children as comma-terminated fragments, or ``""`` when none are kept."""
    parts: List[str] = []
    for child in children:
        if isinstance(child, TextNode):
            text = child.text
            if text and (not options.trim or not is_whitespace(text)):
                parts.append(f'"{escape_text(text)}",')
        else:
            parts.append(f"{print_node(child, options)},")
    return "".join(parts)


def _textarea_value(node: MarkupNode) -> str | None:
    if not node.children:
        return None
    first = node.children[0]
    if isinstance(first, TextNode) and first.text:
        return first.text.strip()
    return None


def print_node(node: MarkupNode, options: TransformOptions) -> str:
    """Compose the builder-chain expression for one node and its subtree.

    Calls are chained in a fixed order: constructor, ``style``, then either the
    input-specific ``value``/``checked``/``props`` or plain ``props``, and
    finally ``value`` for textareas or ``children`` for everything else.
    """
    kind = element_class(node.tag)
    attrs = node.attributes
    parts: List[str] = [constructor_name(node)]

    class_name = attrs.get("class")
    if class_name:
        parts.append(f'("{escape_text(class_name)}")')
    else:
        parts.append("()")

    styles = extract_styles(attrs.get("style"))
    if styles is not None:
        parts.append(f".style({{{map_to_string(styles)}}})")

    if kind == "input":
        value = attrs.get("value")
        if value:
            parts.append(f'.value("{escape_text(value)}")')
        # A bare ``checked`` attribute parses as "" and still means checked.
        if "checked" in attrs:
            parts.append(".checked(true)")

    props = extract_props(kind, attrs)
    if props is not None:
        parts.append(f".props({{{map_to_string(props)}}})")

    if kind == "textarea":
        text = _textarea_value(node)
        if text is not None:
            parts.append(f'.value("{escape_text(text)}")')
    else:
        children = extract_children(node.children, options)
        if children:
            parts.append(f".children({children})")

    return "".join(parts)


__all__ = [
    "BUILDER_NAMESPACE",
    "INPUT_PREFIX",
    "constructor_name",
    "extract_children",
    "is_whitespace",
    "map_to_string",
    "print_node",
]
