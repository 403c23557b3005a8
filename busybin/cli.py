"""Entry point that picks a utility from the name the program was started under."""

from __future__ import annotations

import dataclasses
import os
import posixpath
import sys
from typing import Callable

from busybin.core import Proc
from busybin.files import cat, ln, mkdir, rm, tee
from busybin.listing import ls
from busybin.pathnames import basename, dirname
from busybin.shell import clear, sh
from busybin.simple import false, sleep, true

_COMMANDS: dict[str, Callable[[Proc], int]] = {
    "basename": basename,
    "cat": cat,
    "clear": clear,
    "dirname": dirname,
    "false": false,
    "ln": ln,
    "ls": ls,
    "mkdir": mkdir,
    "rm": rm,
    "sh": sh,
    "sleep": sleep,
    "tee": tee,
    "true": true,
}


def dispatch(proc: Proc) -> int:
    """Run the utility named by the first argument with the remaining arguments."""
    invoked = proc.args[0] if proc.args else ""
    command = _COMMANDS.get(posixpath.basename(invoked))
    if command is None:
        proc.out("Unrecognized command: " + invoked)
        return 1
    return command(dataclasses.replace(proc, args=list(proc.args[1:])))


def main(argv: list[str] | None = None) -> int:
    """Run the utility named by ``argv[0]`` against the real process streams."""
    if argv is None:
        argv = sys.argv
    try:
        wd = os.getcwd()
    except OSError as exc:
        sys.stderr.write(f"Failed to resolve working directory: {exc}\n")
        wd = ""
    return dispatch(
        Proc(
            args=list(argv),
            wd=wd,
            stdin=sys.stdin.buffer,
            stdout=sys.stdout.buffer,
            stderr=sys.stderr.buffer,
        )
    )


if __name__ == "__main__":
    sys.exit(main())