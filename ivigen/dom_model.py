"""Read-only markup tree handed to the emitter, built from BeautifulSoup output."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Mapping, Tuple

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import PreformattedString

# Listing the document root stops bs4 from collapsing whitespace-only strings.
PRESERVE_WHITESPACE_TAGS = frozenset({BeautifulSoup.ROOT_TAG_NAME, "pre", "textarea"})


@dataclass(frozen=True)
class TextNode:
    text: str


@dataclass(frozen=True)
class MarkupNode:
    tag: str
    attributes: Mapping[str, str] = field(default_factory=dict)
    children: Tuple["MarkupContent", ...] = ()


MarkupContent = MarkupNode | TextNode


def _convert_children(tag: Tag) -> Tuple[MarkupContent, ...]:
    children: List[MarkupContent] = []
    for child in tag.contents:
        if isinstance(child, Tag):
            children.append(_convert_tag(child))
        elif isinstance(child, PreformattedString):
            # Comments, doctypes, CDATA and processing instructions carry no content.
            continue
        elif isinstance(child, NavigableString):
            children.append(TextNode(str(child)))
    return tuple(children)


def _convert_tag(tag: Tag) -> MarkupNode:
    attributes = {name: str(value) for name, value in tag.attrs.items()}
    return MarkupNode(tag=tag.name, attributes=attributes, children=_convert_children(tag))


def parse_markup(html: str) -> List[MarkupNode]:
    """Parse markup text and return its top-level element nodes in document order.

    ``class`` is kept as a single string rather than split into a list,
    whitespace-only text reaches the caller unchanged, and top-level text
    outside any element is not returned.
    """
    soup = BeautifulSoup(
        html,
        "html.parser",
        multi_valued_attributes=None,
        preserve_whitespace_tags=PRESERVE_WHITESPACE_TAGS,
    )
    return [_convert_tag(child) for child in soup.contents if isinstance(child, Tag)]


__all__ = ["MarkupContent", "MarkupNode", "TextNode", "parse_markup"]
