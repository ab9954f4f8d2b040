"""Amateur Data Interchange Format (ADIF) helpers."""

from __future__ import annotations

from tclib.ctype import Char, to_upper

# Boolean, Number, Date, Time, String, Multiline String, Enumeration, Location
_DATA_TYPES = frozenset("BNDTSMEL")


def is_valid_data_type_specifier(ch: Char) -> bool:
    """Return True if ch, in either case, names an ADIF data type."""
    upper = to_upper(ch)
    letter = upper if isinstance(upper, str) else chr(upper)
    return letter in _DATA_TYPES