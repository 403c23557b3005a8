"""The basename and dirname utilities."""

from __future__ import annotations

import re

from busybin.core import ExitStatus, Proc

_SLASHES = re.compile("/{2,}")


def basename(proc: Proc) -> int:
    """Print the last component of a path, optionally stripping a suffix."""
    if len(proc.args) == 1:
        (path,) = proc.args
        suffix = ""
    elif len(proc.args) == 2:
        path, suffix = proc.args
    else:
        proc.err("Invalid number of arguments")
        return ExitStatus.INVALID_ARGS

    path = _SLASHES.sub("/", path).rstrip("/")
    if not path:
        # Empty strings and strings of only slashes end here.
        proc.out("")
        return ExitStatus.SUCCESS

    path = path.rsplit("/", 1)[-1]

    if suffix and suffix != path:
        path = path.removesuffix(suffix)
    proc.out(path)
    return ExitStatus.SUCCESS


def dirname(proc: Proc) -> int:
    """Print the directory portion of a path."""
    if len(proc.args) != 1:
        proc.err("Must provide 1 argument")
        return ExitStatus.INVALID_ARGS
    (path,) = proc.args

    if not path:
        proc.out(".")
        return ExitStatus.SUCCESS

    # Remove trailing slashes that are not also leading slashes.
    path = path[0] + path[1:].rstrip("/")

    if "/" not in path:
        proc.out(".")
        return ExitStatus.SUCCESS

    if path == "/":
        proc.out(path)
        return ExitStatus.SUCCESS

    proc.out(path.rsplit("/", 1)[0])
    return ExitStatus.SUCCESS