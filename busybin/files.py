"""Utilities that read, write, link and remove files: cat, ln, mkdir, rm and tee."""

from __future__ import annotations

import os
import shutil
import stat
from functools import partial
from typing import BinaryIO

from busybin.core import BUFFER_SIZE, ExitStatus, Proc


def _parse(args: list[str], dash_is_operand: bool = False) -> tuple[list[str], list[str]]:
    """Split arguments into single-letter options, in order, and operands."""
    flags: list[str] = []
    operands: list[str] = []
    for arg in args:
        if arg.startswith("-"):
            if arg == "-" and dash_is_operand:
                operands.append(arg)
            flags.extend(arg[1:])
        else:
            operands.append(arg)
    return flags, operands


def cat(proc: Proc) -> int:
    """Copy each named file to stdout in turn."""
    flags, files = _parse(proc.args, dash_is_operand=True)
    for flag in flags:
        if flag == "u":
            proc.err("-u option is not implemented")
        else:
            proc.err("Unrecognized flag: " + flag)
        return ExitStatus.INVALID_ARGS

    for path in files:
        try:
            handle = open(proc.resolve_path(path), "rb")
        except OSError as exc:
            proc.err(f"Cannot open file {path}: {exc}")
            return ExitStatus.FILE_ERROR
        try:
            with handle:
                for chunk in iter(partial(handle.read, BUFFER_SIZE), b""):
                    proc.stdout.write(chunk)
        except OSError as exc:
            proc.err(f"Error reading file {path}: {exc}")
            return ExitStatus.FILE_ERROR
    return ExitStatus.SUCCESS


def _remove_entry(path: str) -> None:
    """Remove a file or an empty directory, ignoring a path that does not exist."""
    try:
        os.remove(path)
    except FileNotFoundError:
        pass
    except OSError:
        if os.path.isdir(path) and not os.path.islink(path):
            os.rmdir(path)
        else:
            raise


def ln(proc: Proc) -> int:
    """Create a hard link, or with -s a symbolic link, from the second path to the first."""
    force = False
    symlink = False
    flags, files = _parse(proc.args)
    for flag in flags:
        if flag == "f":
            force = True
        elif flag == "s":
            symlink = True
        elif flag in ("L", "P"):
            proc.err(f"-{flag} option is not implemented")
            return ExitStatus.INVALID_ARGS
        else:
            proc.err("Unrecognized flag: " + flag)
            return ExitStatus.INVALID_ARGS

    if len(files) != 2:
        proc.err("Must provide 2 file paths")
        return ExitStatus.INVALID_ARGS

    oldname, newname = (proc.resolve_path(f) for f in files)

    if force:
        try:
            _remove_entry(newname)
        except OSError as exc:
            proc.err(str(exc))
            return 2

    try:
        if symlink:
            os.symlink(oldname, newname)
        else:
            os.link(oldname, newname)
    except OSError as exc:
        proc.err(f"Error creating link: {exc}")
        return 3
    return 0


def mkdir(proc: Proc) -> int:
    """Create directories, with -p also creating missing parents."""
    dirs: list[str] = []
    intermediate = False
    for arg in proc.args:
        if arg == "-m":
            proc.err("-m option is not implemented")
            return ExitStatus.INVALID_ARGS
        if arg == "-p":
            intermediate = True
            continue
        dirs.append(arg)

    for directory in dirs:
        path = proc.resolve_path(directory)
        try:
            if intermediate:
                os.makedirs(path, 0o700, exist_ok=True)
            else:
                os.mkdir(path, 0o700)
        except OSError as exc:
            proc.err(f"Failed to create directory: {exc}")
            return ExitStatus.FILE_ERROR
    return 0


def _remove_all(path: str) -> None:
    """Remove a path and anything below it; a missing path is not an error."""
    try:
        info = os.lstat(path)
    except FileNotFoundError:
        return
    if stat.S_ISDIR(info.st_mode):
        shutil.rmtree(path)
    else:
        os.remove(path)


def rm(proc: Proc) -> int:
    """Remove files, and with -r, -R or -d whole directory trees."""
    recursive = False
    flags, paths = _parse(proc.args)
    for flag in flags:
        if flag in ("d", "R", "r"):
            recursive = True
        elif flag in ("f", "i", "v"):
            proc.err(f"-{flag} option is not implemented")
            return ExitStatus.INVALID_ARGS
        else:
            proc.err("Unrecognized flag: " + flag)
            return ExitStatus.INVALID_ARGS

    for operand in paths:
        path = proc.resolve_path(operand)
        if not recursive:
            try:
                info = os.stat(path)
            except OSError as exc:
                proc.err(f"Error stating path: {exc}")
                return ExitStatus.FILE_ERROR
            if stat.S_ISDIR(info.st_mode):
                proc.err("Cannot remove directory: " + path)
                return ExitStatus.INVALID_ARGS
        try:
            if recursive:
                _remove_all(path)
            else:
                os.remove(path)
        except OSError as exc:
            proc.err(f"Error removing path: {exc}")
            return ExitStatus.FILE_ERROR
    return ExitStatus.SUCCESS


def _close_all(files: list[BinaryIO]) -> None:
    for handle in files:
        try:
            handle.close()
        except OSError:
            pass


def tee(proc: Proc) -> int:
    """Copy stdin to stdout and to each named file, one byte at a time."""
    append = False
    flags, paths = _parse(proc.args)
    for flag in flags:
        if flag == "a":
            append = True
        elif flag == "i":
            proc.err("-i option is not implemented")
            return ExitStatus.INVALID_ARGS
        else:
            proc.err("Unrecognized flag: " + flag)
            return ExitStatus.INVALID_ARGS

    open_flags = os.O_WRONLY | os.O_CREAT
    if append:
        open_flags |= os.O_APPEND

    files: list[BinaryIO] = []
    for path in paths:
        try:
            fd = os.open(proc.resolve_path(path), open_flags, 0o644)
        except OSError as exc:
            proc.err(f"Error opening file {path}: {exc}")
            _close_all(files)
            return ExitStatus.FILE_ERROR
        files.append(os.fdopen(fd, "wb", buffering=0))

    while True:
        try:
            byte = proc.stdin.read(1)
        except OSError as exc:
            proc.err(f"Error reading from stdin: {exc}")
            break
        if not byte:
            break
        try:
            proc.stdout.write(byte)
        except OSError as exc:
            proc.err(f"Error writing to stdout: {exc}")
            break
        for handle in files:
            try:
                handle.write(byte)
            except OSError as exc:
                proc.err(f"Error writing to file: {exc}")
                break

    status = ExitStatus.SUCCESS
    for handle in files:
        try:
            handle.close()
        except OSError as exc:
            proc.err(f"Error closing file: {exc}")
            status = ExitStatus.FILE_ERROR
    return status