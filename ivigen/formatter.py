"""Pretty-printing of generated source through jsbeautifier."""

from __future__ import annotations

from typing import Callable

import jsbeautifier

Formatter = Callable[[str], str]


def _default_options() -> jsbeautifier.BeautifierOptions:
    opts = jsbeautifier.default_options()
    opts.indent_size = 2
    opts.indent_char = " "
    opts.end_with_newline = True
    opts.preserve_newlines = False
    opts.wrap_line_length = 80
    return opts


def format_source(source: str) -> str:
    # Fresh options per call; BeautifierOptions is mutable.
    return jsbeautifier.beautify(source, _default_options())


def identity(source: str) -> str:
    return source


__all__ = ["Formatter", "format_source", "identity"]
