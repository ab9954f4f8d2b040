"""A minimal runner for named checks."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Callable, Iterable, Optional, TextIO


@dataclass(frozen=True)
class Check:
    """A check function and the message describing it."""

    fn: Callable[[], bool]
    message: str


def run_checks(
    checks: Optional[Iterable[Check]], err: Optional[TextIO] = None
) -> bool:
    """Run checks in order; return False at the first one that fails.

    A failure is reported on err (standard error by default).
    """
    stream = sys.stderr if err is None else err
    if checks is None:
        stream.write("list of checks is None\n")
        return False
    for check in checks:
        if not check.fn():
            stream.write(f'check "{check.message}" failed\n')
            return False
    return True