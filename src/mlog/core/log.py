"""
core.log — The sequential base logger.

``BaseLogger`` writes one line per call to a single writer, with an
optional prefix and a date/time/source-location header selected by
``Flag``.  It also provides the print / fatal / panic emission families
that ``Logger`` builds its debug gating on.
"""

from __future__ import annotations

import os
import sys
import threading
from datetime import datetime, timezone
from enum import IntFlag
from typing import Any, Mapping, Optional, TextIO


# ── Header flags ──────────────────────────────────────────────────────


class Flag(IntFlag):
    """Header annotations written in front of every line."""

    DATE = 1            # 2009/01/23
    TIME = 2            # 01:23:23
    MICROSECONDS = 4    # 01:23:23.123123, implies TIME
    LONGFILE = 8        # /a/b/c.py:23
    SHORTFILE = 16      # c.py:23, overrides LONGFILE
    UTC = 32            # date/time in UTC
    MSGPREFIX = 64      # prefix right before the message
    STD = DATE | TIME


class LogPanic(RuntimeError):
    """Raised by the panic family after the message has been written."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


# ── Formatting helpers ────────────────────────────────────────────────


def sprint(*v: Any) -> str:
    """Concatenate the string form of each value, no separators."""
    return "".join(str(x) for x in v)


def sprintf(format: str, *v: Any) -> str:
    """
    Apply %-style substitution.

    A single non-empty mapping is used as the mapping for ``%(name)s``
    keys, as ``logging`` does.  With no values only ``%%`` is collapsed,
    so a lone ``%`` passes through.
    """
    if not v:
        return format.replace("%%", "%")
    if len(v) == 1 and isinstance(v[0], Mapping) and v[0]:
        return format % v[0]
    return format % v


def sprintln(*v: Any) -> str:
    """Join values with single spaces and terminate with a newline."""
    return " ".join(str(x) for x in v) + "\n"


# ── BaseLogger ────────────────────────────────────────────────────────


class BaseLogger:
    """
    A line-oriented logger writing to one destination.

    Every emission builds the full line first and hands it to the
    writer in a single ``write`` call under the logger's lock, so
    concurrent callers never interleave within a line.

    ``writer=None`` means "whatever ``sys.stderr`` is at write time",
    which keeps stream redirection (and pytest capture) working for
    long-lived instances.
    """

    def __init__(
        self,
        writer: Optional[TextIO] = None,
        prefix: str = "",
        flags: int = Flag.STD,
    ) -> None:
        self._lock = threading.Lock()
        self._writer = writer
        self._prefix = prefix
        self._flags = Flag(flags)

    # ── Configuration ─────────────────────────────────────────────────

    def writer(self) -> TextIO:
        with self._lock:
            return self._writer if self._writer is not None else sys.stderr

    def set_output(self, writer: Optional[TextIO]) -> None:
        with self._lock:
            self._writer = writer

    def prefix(self) -> str:
        with self._lock:
            return self._prefix

    def set_prefix(self, prefix: str) -> None:
        with self._lock:
            self._prefix = prefix

    def flags(self) -> Flag:
        with self._lock:
            return self._flags

    def set_flags(self, flags: int) -> None:
        with self._lock:
            self._flags = Flag(flags)

    # ── Line assembly ─────────────────────────────────────────────────

    def _header(self, flags: Flag, now: datetime, file: str, line: int) -> str:
        parts = []
        if not flags & Flag.MSGPREFIX:
            parts.append(self._prefix)
        if flags & (Flag.DATE | Flag.TIME | Flag.MICROSECONDS):
            if flags & Flag.UTC:
                now = now.astimezone(timezone.utc)
            if flags & Flag.DATE:
                parts.append(now.strftime("%Y/%m/%d "))
            if flags & (Flag.TIME | Flag.MICROSECONDS):
                stamp = now.strftime("%H:%M:%S")
                if flags & Flag.MICROSECONDS:
                    stamp += f".{now.microsecond:06d}"
                parts.append(stamp + " ")
        if flags & (Flag.SHORTFILE | Flag.LONGFILE):
            if flags & Flag.SHORTFILE:
                file = os.path.basename(file)
            parts.append(f"{file}:{line}: ")
        if flags & Flag.MSGPREFIX:
            parts.append(self._prefix)
        return "".join(parts)

    def output(self, calldepth: int, s: str) -> None:
        """
        Write one line for ``s``.

        ``calldepth`` counts frames above this method when resolving the
        source location for LONGFILE / SHORTFILE; ``1`` is the direct
        caller of ``output``.  Writer errors propagate.
        """
        now = datetime.now().astimezone()
        if not s.endswith("\n"):
            s += "\n"
        with self._lock:
            flags = self._flags
            file, line = "???", 0
            if flags & (Flag.SHORTFILE | Flag.LONGFILE):
                try:
                    frame = sys._getframe(calldepth)
                except ValueError:
                    pass
                else:
                    file, line = frame.f_code.co_filename, frame.f_lineno
                    del frame
            text = self._header(flags, now, file, line) + s
            writer = self._writer if self._writer is not None else sys.stderr
            writer.write(text)

    # ── Print family ──────────────────────────────────────────────────

    def print(self, *v: Any, stacklevel: int = 1) -> None:
        self.output(stacklevel + 1, sprint(*v))

    def printf(self, format: str, *v: Any, stacklevel: int = 1) -> None:
        self.output(stacklevel + 1, sprintf(format, *v))

    def println(self, *v: Any, stacklevel: int = 1) -> None:
        self.output(stacklevel + 1, sprintln(*v))

    # ── Fatal family (log, then exit 1) ───────────────────────────────

    def fatal(self, *v: Any, stacklevel: int = 1) -> None:
        self.output(stacklevel + 1, sprint(*v))
        sys.exit(1)

    def fatalf(self, format: str, *v: Any, stacklevel: int = 1) -> None:
        self.output(stacklevel + 1, sprintf(format, *v))
        sys.exit(1)

    def fatalln(self, *v: Any, stacklevel: int = 1) -> None:
        self.output(stacklevel + 1, sprintln(*v))
        sys.exit(1)

    # ── Panic family (log, then raise LogPanic) ───────────────────────

    def panic(self, *v: Any, stacklevel: int = 1) -> None:
        s = sprint(*v)
        self.output(stacklevel + 1, s)
        raise LogPanic(s)

    def panicf(self, format: str, *v: Any, stacklevel: int = 1) -> None:
        s = sprintf(format, *v)
        self.output(stacklevel + 1, s)
        raise LogPanic(s)

    def panicln(self, *v: Any, stacklevel: int = 1) -> None:
        s = sprintln(*v)
        self.output(stacklevel + 1, s)
        raise LogPanic(s)
