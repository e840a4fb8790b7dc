"""Static lookup tables for the markup to builder-chain transform."""

from __future__ import annotations

from types import MappingProxyType
from typing import Literal, Mapping

ElementClass = Literal["plain", "input", "textarea"]

# None marks attributes consumed by a dedicated emitter path.
ATTRIBUTES_TO_PROPS: Mapping[str, str | None] = MappingProxyType(
    {
        "class": None,
        "style": None,
        "accept-charset": "acceptCharset",
        "for": "htmlFor",
    }
)

INPUT_ATTRIBUTES_TO_PROPS: Mapping[str, str | None] = MappingProxyType(
    {
        **ATTRIBUTES_TO_PROPS,
        "type": None,
        "checked": None,
        "value": None,
    }
)

ELEMENT_CLASSES: Mapping[str, ElementClass] = MappingProxyType(
    {
        "input": "input",
        "textarea": "textarea",
    }
)

INPUT_TYPES: Mapping[str, str] = MappingProxyType(
    {
        "button": "Button",
        "checkbox": "Checkbox",
        "color": "Color",
        "date": "Date",
        "datetime": "Datetime",
        "datetime-local": "DatetimeLocal",
        "email": "Email",
        "file": "File",
        "hidden": "Hidden",
        "image": "Image",
        "month": "Month",
        "number": "Number",
        "password": "Password",
        "radio": "Radio",
        "range": "Range",
        "reset": "Reset",
        "search": "Search",
        "submit": "Submit",
        "tel": "Tel",
        "text": "Text",
        "time": "Time",
        "url": "Url",
        "week": "Week",
    }
)

DEFAULT_INPUT_TYPE = "Text"


def element_class(tag: str) -> ElementClass:
    return ELEMENT_CLASSES.get(tag, "plain")


def input_subtype(type_value: str | None) -> str:
    """Map an ``<input type>`` value to its constructor suffix, ``Text`` when unknown."""
    if not type_value:
        return DEFAULT_INPUT_TYPE
    return INPUT_TYPES.get(type_value, DEFAULT_INPUT_TYPE)


def props_table(kind: ElementClass) -> Mapping[str, str | None]:
    if kind == "input":
        return INPUT_ATTRIBUTES_TO_PROPS
    return ATTRIBUTES_TO_PROPS


__all__ = [
    "ATTRIBUTES_TO_PROPS",
    "DEFAULT_INPUT_TYPE",
    "ELEMENT_CLASSES",
    "ElementClass",
    "INPUT_ATTRIBUTES_TO_PROPS",
    "INPUT_TYPES",
    "element_class",
    "input_subtype",
    "props_table",
]
