"""Escaping for text placed inside generated double-quoted string literals."""

from __future__ import annotations

_ESCAPES = str.maketrans({"\n": "\\n", "\r": "\\r", '"': '\\"'})


def escape_text(text: str) -> str:
    """Escape line feeds, carriage returns and double quotes; leave everything else as is."""
    return text.translate(_ESCAPES)


__all__ = ["escape_text"]
