"""ASCII character classification and case conversion.

Every function accepts either a one-character string or an integer
character code.
"""

from __future__ import annotations

from typing import Union

Char = Union[str, int]

_PUNCTUATION = frozenset(map(ord, "!\"#$%&'()*+,-./:;<=>?@[\\]^_`{|}~"))
_SPACE = frozenset(map(ord, "\t\n\v\f\r "))
_BLANK = frozenset(map(ord, "\t "))
_CONTROL = frozenset([*range(0o000, 0o040), 0o177])


def _code(ch: Char) -> int:
    if isinstance(ch, str):
        if len(ch) != 1:
            raise ValueError(f"expected a single character, got {ch!r}")
        return ord(ch)
    return int(ch)


def is_ascii(ch: Char) -> bool:
    """Return True unless bit 8 of the character code is set."""
    return not (_code(ch) & (1 << 8))


def is_digit(ch: Char) -> bool:
    """Return True for '0' through '9'."""
    return ord("0") <= _code(ch) <= ord("9")


def is_xdigit(ch: Char) -> bool:
    """Return True for hexadecimal digits."""
    c = _code(ch)
    return is_digit(c) or ord("a") <= c <= ord("f") or ord("A") <= c <= ord("F")


def is_upper(ch: Char) -> bool:
    """Return True for 'A' through 'Z'."""
    return ord("A") <= _code(ch) <= ord("Z")


def is_lower(ch: Char) -> bool:
    """Return True for 'a' through 'z'."""
    return ord("a") <= _code(ch) <= ord("z")


def is_alpha(ch: Char) -> bool:
    """Return True for ASCII letters."""
    return is_upper(ch) or is_lower(ch)


def is_alnum(ch: Char) -> bool:
    """Return True for ASCII letters and digits."""
    return is_alpha(ch) or is_digit(ch)


def is_space(ch: Char) -> bool:
    """Return True for tab, newline, vertical tab, form feed, CR and space."""
    return _code(ch) in _SPACE


def is_blank(ch: Char) -> bool:
    """Return True for tab and space."""
    return _code(ch) in _BLANK


def is_punct(ch: Char) -> bool:
    """Return True for ASCII punctuation characters."""
    return _code(ch) in _PUNCTUATION


def is_cntrl(ch: Char) -> bool:
    """Return True for ASCII control characters, including DEL."""
    return _code(ch) in _CONTROL


def is_graph(ch: Char) -> bool:
    """Return True for characters with a visible glyph."""
    return is_alnum(ch) or is_punct(ch)


def is_print(ch: Char) -> bool:
    """Return True for visible characters and space."""
    return is_graph(ch) or _code(ch) == ord(" ")


def _convert(ch: Char, code: int) -> Char:
    return chr(code) if isinstance(ch, str) else code


def to_lower(ch: Char) -> Char:
    """Lower-case an ASCII upper-case letter; anything else is unchanged."""
    c = _code(ch)
    return _convert(ch, c + 32 if is_upper(c) else c)


def to_upper(ch: Char) -> Char:
    """Upper-case an ASCII lower-case letter; anything else is unchanged."""
    c = _code(ch)
    return _convert(ch, c - 32 if is_lower(c) else c)