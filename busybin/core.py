"""Process context shared by every command: arguments, working directory and streams."""

from __future__ import annotations

import io
import posixpath
from dataclasses import dataclass, field
from enum import IntEnum
from typing import BinaryIO

BUFFER_SIZE = 4096


class ExitStatus(IntEnum):
    """Standard exit statuses used by the commands."""

    SUCCESS = 0
    INVALID_ARGS = 1
    FILE_ERROR = 2


def _clean(path: str) -> str:
    if not path:
        return ""
    cleaned = posixpath.normpath(path)
    if cleaned.startswith("//") and not cleaned.startswith("///"):
        cleaned = cleaned[1:]
    return cleaned


@dataclass
class Proc:
    """Everything a command needs to talk to the operating system.

    The streams are binary file objects; text written through :meth:`out`
    and :meth:`err` is encoded as UTF-8.
    """

    args: list[str] = field(default_factory=list)
    wd: str = ""
    env: dict[str, str] = field(default_factory=dict)
    stdin: BinaryIO = field(default_factory=io.BytesIO)
    stdout: BinaryIO = field(default_factory=io.BytesIO)
    stderr: BinaryIO = field(default_factory=io.BytesIO)

    def resolve_path(self, p: str) -> str:
        """Return ``p`` unchanged if absolute, else joined to the working directory and cleaned."""
        if posixpath.isabs(p):
            return p
        return _clean(posixpath.join(self.wd, p))

    def out(self, txt: str) -> None:
        """Write a line of text to stdout, adding a trailing newline if missing."""
        self._write_line(self.stdout, txt)

    def err(self, txt: str) -> None:
        """Write a line of text to stderr, adding a trailing newline if missing."""
        self._write_line(self.stderr, txt)

    @staticmethod
    def _write_line(stream: BinaryIO, txt: str) -> None:
        if not txt.endswith("\n"):
            txt += "\n"
        stream.write(txt.encode("utf-8"))
        flush = getattr(stream, "flush", None)
        if flush is not None:
            flush()