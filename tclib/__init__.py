"""Small self-contained utilities: ASCII character classes, error messages, paths, checksums, digests, HTML entities and option scanning."""

__version__ = "0.1.0"

__all__ = [
    "adif",
    "args",
    "array",
    "check",
    "crc32",
    "ctype",
    "errors",
    "html",
    "libgen",
    "luhn",
    "mathutil",
    "md2",
]