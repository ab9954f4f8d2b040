"""HTML entity encoding and named colours."""

from __future__ import annotations

from typing import Optional

_ENTITIES = {
    '"': "&quot;",
    "'": "&apos;",
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
}

_COLORS = {
    "aqua": "#00FFFF",
    "black": "#000000",
    "blue": "#0000FF",
    "fuchsia": "#FF00FF",
    "gray": "#808080",
    "green": "#008000",
    "lime": "#00FF00",
    "maroon": "#800000",
    "navy": "#000080",
    "olive": "#808000",
    "purple": "#800080",
    "red": "#FF0000",
    "silver": "#C0C0C0",
    "teal": "#008080",
    "white": "#FFFFFF",
    "yellow": "#FFFF00",
}


def entity(ch: str) -> Optional[str]:
    """Return the HTML entity for a character, or None if it needs none."""
    return _ENTITIES.get(ch)


def encode_entities(text: str) -> str:
    """Replace every character that has an HTML entity by that entity."""
    return "".join(_ENTITIES.get(ch, ch) for ch in text)


def color_rgb(name: str) -> Optional[str]:
    """Return the '#RRGGBB' value of a basic HTML colour name, or None."""
    return _COLORS.get(name)