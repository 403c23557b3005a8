"""A minimal shell with a few built-ins, plus the clear utility."""

from __future__ import annotations

import dataclasses
import os
import shutil
import signal
import subprocess
from typing import BinaryIO

from busybin.core import ExitStatus, Proc
from busybin.term import CLEAN_SCREEN, CURSOR_HOME, Attribute, sgr


def clear(proc: Proc) -> int:
    """Clear the terminal screen and move the cursor home."""
    proc.stdout.write((CLEAN_SCREEN + CURSOR_HOME).encode("utf-8"))
    _flush(proc.stdout)
    return ExitStatus.SUCCESS


def sh(proc: Proc) -> int:
    """Run a command given with -c, or read and run commands from stdin until exit."""
    # The shell works on its own copy so that `cd` does not leak to the caller.
    proc = dataclasses.replace(proc, args=list(proc.args))

    if proc.args:
        if proc.args[0] != "-c":
            proc.err("Only -c is supported")
            return 1
        if len(proc.args) < 2:
            proc.err("No command provided")
            return 2
        status, _ = _run(proc, " ".join(proc.args[1:]))
        return status

    status = 0
    while True:
        _prompt(proc)
        line = proc.stdin.readline()
        if not line:
            break
        status, done = _run(proc, line.decode("utf-8", errors="replace"))
        if done:
            break
    return status


def _run(proc: Proc, command: str) -> tuple[int, bool]:
    """Run one command line; return its status and whether the shell should exit."""
    tokens = command.strip("\n\t ").split(" ")
    name = tokens[0]

    if name == "cd":
        if len(tokens) < 2:
            proc.err("cd requires a directory")
            return 1, False
        if len(tokens) > 2:
            proc.err("cd only takes one parameter; ignoring all by the first")
        proc.wd = proc.resolve_path(tokens[1])
        return 0, False
    if name == "exit":
        return 0, True
    if name == "echo":
        proc.out(" ".join(tokens[1:]))
        return 0, False
    return _run_external(proc, tokens), False


def _run_external(proc: Proc, tokens: list[str]) -> int:
    name = tokens[0]
    found = shutil.which(name)
    if found is None:
        proc.err(f'Error looking in path: exec: "{name}": executable file not found in $PATH')
        return 1
    try:
        exe = os.path.realpath(found, strict=True)
    except OSError as exc:
        proc.err(f"Error resolving executable: {exc}")
        return 1

    stdin_fd = _fileno(proc.stdin)
    stdout_fd = _output_fd(proc.stdout)
    stderr_fd = _output_fd(proc.stderr)

    options: dict = {
        "executable": exe,
        "cwd": proc.wd or None,
        "stdout": stdout_fd if stdout_fd is not None else subprocess.PIPE,
        "stderr": stderr_fd if stderr_fd is not None else subprocess.PIPE,
    }
    if stdin_fd is not None:
        options["stdin"] = stdin_fd
    else:
        options["input"] = proc.stdin.read()

    try:
        # The name typed by the user is passed as argv[0], not the resolved path.
        result = subprocess.run([name, *tokens[1:]], check=False, **options)
    except OSError as exc:
        proc.err(f"Error running process: {exc}")
        return 1

    if stdout_fd is None and result.stdout:
        proc.stdout.write(result.stdout)
        _flush(proc.stdout)
    if stderr_fd is None and result.stderr:
        proc.stderr.write(result.stderr)
        _flush(proc.stderr)

    code = result.returncode
    if code > 0:
        proc.err(f"Error running process: exit status {code}")
        return 1
    if code < 0:
        description = signal.strsignal(-code) or str(-code)
        proc.err(f"Error running process: signal: {description.lower()}")
        return 1
    return 0


def _prompt(proc: Proc) -> None:
    text = sgr(Attribute.CYAN_FOREGROUND) + proc.wd + "> " + sgr(Attribute.RESET)
    proc.stdout.write(text.encode("utf-8"))
    _flush(proc.stdout)


def _fileno(stream: BinaryIO) -> int | None:
    try:
        return stream.fileno()
    except (AttributeError, OSError, ValueError):
        return None


def _output_fd(stream: BinaryIO) -> int | None:
    fd = _fileno(stream)
    if fd is not None:
        _flush(stream)
    return fd


def _flush(stream: BinaryIO) -> None:
    flush = getattr(stream, "flush", None)
    if flush is not None:
        flush()