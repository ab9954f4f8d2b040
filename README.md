# tclib

A small collection of self-contained utilities with no third-party dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `tclib.ctype` | ASCII character classes and case conversion: `is_ascii`, `is_digit`, `is_xdigit`, `is_upper`, `is_lower`, `is_alpha`, `is_alnum`, `is_space`, `is_blank`, `is_punct`, `is_cntrl`, `is_graph`, `is_print`, `to_lower`, `to_upper`. Each takes a one-character string or an integer code. |
| `tclib.errors` | `ErrorCode`, an `IntEnum` whose members carry a `.message`; `strerror(code)` returns the message (unknown codes give "Generic Error"); `perror(code, file)` writes it to standard error or `file`. |
| `tclib.array` | `index_of(haystack, needle, compar)` returns the first index where `compar` returns 0, or -1; `append(array, element)` returns a new list. |
| `tclib.check` | `Check(fn, message)` and `run_checks(checks, err)`, which runs checks in order and returns `False` at the first failure, reporting it on `err`. |
| `tclib.html` | `entity(ch)`, `encode_entities(text)` for `" ' & < >`, and `color_rgb(name)` for the sixteen basic HTML colour names. |
| `tclib.args` | `Program`, `ProgramArg`, `Example` with `usage_text()`, `help_text()`, `version_text()`; `ArgScanner` for short (`-a`, `-al`, `-n 5`) and long (`--name`, `--name value`, `--name=value`) options; `InvalidArgumentError`. |
| `tclib.libgen` | `basename(path)` and `dirname(path)` with POSIX-style handling of trailing slashes. |
| `tclib.luhn` | `luhn_check(s)` for strings of two or more ASCII digits. |
| `tclib.crc32` | `begin()`, `update(crc, value)`, `end(crc)` and the one-shot `checksum(data)`. |
| `tclib.adif` | `is_valid_data_type_specifier(ch)` for ADIF data type letters (B, N, D, T, S, M, E, L, either case). |
| `tclib.mathutil` | `int_abs`, `int_max`, `int_min`, `float_abs`, and `table_sin`, a sine looked up in a 1000-entry table. |
| `tclib.md2` | `md2_hexdigest(data)` returns the MD2 digest as 32 hex digits; text is encoded as UTF-8. |

## Examples

```python
from tclib.libgen import basename, dirname
from tclib.luhn import luhn_check
from tclib.md2 import md2_hexdigest
from tclib.html import encode_entities, color_rgb
from tclib.errors import ErrorCode, strerror

basename("/usr/lib")        # "lib"
dirname("/usr/")            # "/"
luhn_check("49927398716")   # True
md2_hexdigest(b"abc")       # "da853b0d3f88d99b30283a69e6ded6bb"
encode_entities("<p>")      # "&lt;p&gt;"
color_rgb("purple")         # "#800080"
strerror(ErrorCode.EIO)     # "I/O error"
```

Incremental CRC-32:

```python
from tclib import crc32

crc = crc32.begin()
for byte in b"hello":
    crc = crc32.update(crc, byte)
assert crc32.end(crc) == crc32.checksum(b"hello")
```

Scanning command-line options. The argument list excludes the program
name; scanning stops at the first non-option argument or at `--`:

```python
from tclib.args import ArgScanner, InvalidArgumentError, Program, ProgramArg

prog = Program(
    program="demo",
    description="a demonstration",
    args=[
        ProgramArg("h", "help", "show help"),
        ProgramArg("n", "count", "repeat count", has_value=True),
    ],
)
scanner = ArgScanner(prog, ["-n", "5", "file.txt"])
for option, value in scanner:
    if option.arg == "h":
        print(prog.help_text(), end="")
    elif option.arg == "n":
        count = int(value)
scanner.remaining()  # ["file.txt"]
```

An unknown option, or one missing its value, raises `InvalidArgumentError`.

## What it does not do

- There is no command-line program; the package is a library only.
- The ADIF module only recognises data type letters; it does not parse
  ADIF records or files.