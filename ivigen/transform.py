"""Top-level markup to builder-chain component transform."""

from __future__ import annotations

from typing import List

from .config import TransformOptions
from .dom_model import MarkupNode, parse_markup
from .emitter import print_node
from .formatter import Formatter, format_source


def emit_component(node: MarkupNode, options: TransformOptions) -> str:
    """Wrap the expression for ``node`` in an unformatted function definition."""
    return f"function {options.component_name}() {{ return {print_node(node, options)}; }}"


def transform_nodes(
    nodes: List[MarkupNode],
    options: TransformOptions,
    formatter: Formatter = format_source,
) -> str:
    # Only the first root is represented; the builder target is single-rooted.
    if not nodes:
        return ""
    return formatter(emit_component(nodes[0], options))


def html_to_ivi(
    html: str,
    options: TransformOptions | None = None,
    formatter: Formatter = format_source,
) -> str:
    """Convert markup text into a formatted component function.

    Returns ``""`` when the markup holds no element. Parser errors are not
    caught.
    """
    options = options or TransformOptions()
    return transform_nodes(parse_markup(html), options, formatter)


__all__ = ["emit_component", "html_to_ivi", "transform_nodes"]
