"""Command line option descriptions, help text and option scanning."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional, Sequence


@dataclass(frozen=True)
class ProgramArg:
    """One option: a short letter, a long name, and whether it takes a value."""

    arg: Optional[str]
    longarg: Optional[str]
    description: str = ""
    has_value: bool = False


@dataclass(frozen=True)
class Example:
    """An example command line and what it does."""

    command: str
    description: str


@dataclass
class Program:
    """What a program is called, what it does and which options it takes."""

    program: str
    usage: str = "[OPTIONS]"
    description: str = ""
    package: str = ""
    version: str = ""
    copyright: str = ""
    license: str = ""
    author: str = ""
    args: Sequence[ProgramArg] = field(default_factory=tuple)
    examples: Sequence[Example] = field(default_factory=tuple)

    def usage_text(self) -> str:
        """Return the one-line usage message."""
        return f"usage: {self.program} {self.usage}\n"

    def help_text(self) -> str:
        """Return the full help message: description, usage, options, examples."""
        parts = [
            f"{self.program} -- {self.description}\n",
            "\n",
            self.usage_text(),
            "\n",
        ]
        for option in self.args:
            line = "  "
            if option.arg:
                line += f"-{option.arg}"
                if option.longarg:
                    line += ", "
            if option.longarg:
                line += f"--{option.longarg}"
            parts.append(f"{line}\t{option.description}\n")
        parts.append("\n")
        parts.append("examples:\n")
        for example in self.examples:
            parts.append("\n")
            parts.append(f"  # {example.description}\n")
            parts.append(f"  {example.command}\n")
        parts.append("\n")
        return "".join(parts)

    def version_text(self) -> str:
        """Return the version, copyright, licence and author message."""
        return (
            f"{self.program} v{self.version} ({self.package})\n"
            f"{self.copyright}\n"
            f"{self.license}\n"
            "\n"
            f"Written by {self.author}\n"
        )


class InvalidArgumentError(ValueError):
    """Raised when a command line option is unknown or lacks its value."""

    def __init__(self, program: str, argument: str) -> None:
        self.program = program
        self.argument = argument
        super().__init__(
            f"Invalid argument: {argument}\n"
            f"Try '{program} --help' for more information"
        )


class ArgScanner:
    """Scan options from an argument list, one at a time.

    argv holds the arguments without the program name. Iterating yields
    (ProgramArg, value) pairs, value being None for options without one.
    Scanning stops at the first argument that is not an option, or at "--".
    """

    def __init__(self, program: Program, argv: Sequence[str]) -> None:
        self._program = program
        self._argv = list(argv)
        self._index = 0
        self._pos = 1

    def __iter__(self) -> Iterator[tuple[ProgramArg, Optional[str]]]:
        while self._index < len(self._argv):
            token = self._argv[self._index]
            if not token.startswith("-") or token == "--":
                return
            if token.startswith("--"):
                yield self._long(token)
            else:
                yield self._short(token)

    def remaining(self) -> list[str]:
        """Return the arguments not consumed as options."""
        return self._argv[self._index:]

    def _fail(self, token: str) -> InvalidArgumentError:
        return InvalidArgumentError(self._program.program, token)

    def _take_next_value(self, token: str) -> str:
        if self._index >= len(self._argv):
            raise self._fail(token)
        value = self._argv[self._index]
        self._index += 1
        self._pos = 1
        return value

    def _long(self, token: str) -> tuple[ProgramArg, Optional[str]]:
        eq = token.find("=")
        if eq == -1:
            name = token[2:]
            option = next((a for a in self._program.args if a.longarg == name), None)
            if option is None:
                raise self._fail(token)
            self._index += 1
            value = self._take_next_value(token) if option.has_value else None
            return option, value
        if eq > 2:
            name = token[2:eq]
            option = next(
                (
                    a
                    for a in self._program.args
                    if a.longarg is not None and a.longarg[: len(name)] == name
                ),
                None,
            )
            if option is None:
                raise self._fail(token)
            self._index += 1
            self._pos = 1
            return option, (token[eq + 1:] if option.has_value else None)
        raise self._fail(token)

    def _short(self, token: str) -> tuple[ProgramArg, Optional[str]]:
        letter = token[self._pos] if self._pos < len(token) else None
        option = next(
            (a for a in self._program.args if letter is not None and a.arg == letter),
            None,
        )
        if option is None:
            raise self._fail(token)
        if self._pos + 1 >= len(token):
            self._index += 1
            self._pos = 1
        else:
            self._pos += 1
        value = self._take_next_value(token) if option.has_value else None
        return option, value