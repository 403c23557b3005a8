"""The ls utility."""

from __future__ import annotations

import os
import stat
from datetime import datetime, timedelta

from busybin.core import ExitStatus, Proc

_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
           "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

_SIX_MONTHS = timedelta(days=6 * 30)


def format_date(t: datetime) -> str:
    """Show a time of day for recent dates and the year for dates over six months old."""
    now = datetime.now(t.tzinfo) if t.tzinfo is not None else datetime.now()
    month = _MONTHS[t.month - 1]
    if now - t > _SIX_MONTHS:
        return f"{month} {t.day:02d}  {t.year:04d}"
    return f"{month} {t.day:02d} {t.hour:02d}:{t.minute:02d}"


def _type_string(mode: int) -> str:
    """Describe only the file-type bits of a mode, permissions shown as dashes."""
    prefix = ""
    if stat.S_ISDIR(mode):
        prefix += "d"
    if stat.S_ISLNK(mode):
        prefix += "L"
    if stat.S_ISBLK(mode) or stat.S_ISCHR(mode):
        prefix += "D"
    if stat.S_ISFIFO(mode):
        prefix += "p"
    if stat.S_ISSOCK(mode):
        prefix += "S"
    if stat.S_ISCHR(mode):
        prefix += "c"
    return (prefix or "-") + "-" * 9


def _short_format(proc: Proc, entries: list[os.DirEntry]) -> None:
    for entry in entries:
        proc.out(entry.name)


def _long_format(proc: Proc, entries: list[os.DirEntry]) -> None:
    infos: list[tuple[os.DirEntry, os.stat_result]] = []
    for entry in entries:
        try:
            infos.append((entry, entry.stat(follow_symlinks=False)))
        except OSError as exc:
            proc.err(f"Error reading file {entry.name}: {exc}")

    size_width = max((len(str(info.st_size)) for _, info in infos), default=1)
    links_width = max((len(str(info.st_nlink)) for _, info in infos), default=1)
    owner_width = max((len(str(info.st_uid)) for _, info in infos), default=1)
    group_width = max((len(str(info.st_gid)) for _, info in infos), default=1)

    for entry, info in infos:
        name = entry.name
        if stat.S_ISLNK(info.st_mode):
            try:
                resolved = os.path.realpath(entry.path, strict=True)
            except OSError as exc:
                proc.err(f"Error resolving symlink: {exc}")
                resolved = ""
            name += " -> " + resolved

        modified = format_date(datetime.fromtimestamp(info.st_mtime))
        proc.out(
            f"{_type_string(info.st_mode)} "
            f"{info.st_nlink:>{links_width}} "
            f"{info.st_uid:>{owner_width}} "
            f"{info.st_gid:>{group_width}} "
            f"{info.st_size:>{size_width}} "
            f"{modified} {name}"
        )


def ls(proc: Proc) -> int:
    """List the entries of each directory, sorted by name; -l for the long format."""
    use_long_format = False
    paths: list[str] = []
    for arg in proc.args:
        if arg.startswith("-"):
            for flag in arg[1:]:
                if flag == "l":
                    use_long_format = True
                else:
                    proc.err("Unrecognized flag: " + flag)
                    return ExitStatus.INVALID_ARGS
        else:
            paths.append(arg)
    if not paths:
        paths = [proc.wd]

    for path in paths:
        try:
            with os.scandir(path) as it:
                entries = sorted(it, key=lambda e: e.name)
        except OSError as exc:
            proc.err(f"Error reading directory: {exc}")
            return ExitStatus.FILE_ERROR
        if use_long_format:
            _long_format(proc, entries)
        else:
            _short_format(proc, entries)
    return ExitStatus.SUCCESS