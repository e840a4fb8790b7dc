"""Style and attribute extraction for a single markup node."""

from __future__ import annotations

from typing import Dict, Mapping

from .tables import ElementClass, props_table

PropValue = str | bool
PropertyMap = Dict[str, PropValue]
StyleMap = Dict[str, str]


def extract_styles(style: str | None) -> StyleMap | None:
    """Split an inline ``style`` value into ordered property/value pairs.

    Segments without a ``:`` are dropped. Returns ``None`` when no pair
    survives so callers can skip the ``.style()`` call entirely.
    """
    if not style:
        return None
    result: StyleMap = {}
    for segment in style.split(";"):
        key, sep, value = segment.partition(":")
        if sep:
            result[key.strip()] = value.strip()
    return result or None


def extract_props(kind: ElementClass, attributes: Mapping[str, str]) -> PropertyMap | None:
    """Filter and rename attributes into builder props, ``None`` when nothing is left."""
    table = props_table(kind)
    result: PropertyMap = {}
    for name, value in attributes.items():
        if name.startswith("on"):
            continue
        if name in table:
            prop = table[name]
            if prop is None:
                continue
        else:
            prop = name
        # Boolean attributes (``disabled``, ``required``...) arrive without a value.
        result[prop] = True if value == "" else value
    return result or None


__all__ = ["PropValue", "PropertyMap", "StyleMap", "extract_props", "extract_styles"]
