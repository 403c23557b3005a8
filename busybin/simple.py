"""Small utilities: true, false and sleep."""

from __future__ import annotations

import re
import time

from busybin.core import ExitStatus, Proc

_INTEGER = re.compile(r"[+-]?[0-9]+")


def false(proc: Proc) -> int:
    """Always fail."""
    return 1


def true(proc: Proc) -> int:
    """Always succeed."""
    return 0


def sleep(proc: Proc) -> int:
    """Pause for a whole, non-negative number of seconds."""
    if len(proc.args) != 1:
        proc.err("sleep only accepts a number of seconds as a parameter")
        return ExitStatus.INVALID_ARGS
    (text,) = proc.args
    if not _INTEGER.fullmatch(text):
        proc.err(f'Failed to parse seconds: parsing "{text}": invalid syntax')
        return ExitStatus.INVALID_ARGS
    seconds = int(text)
    if seconds < 0:
        proc.err("Seconds must be non-negative")
        return ExitStatus.INVALID_ARGS

    time.sleep(seconds)
    return 0