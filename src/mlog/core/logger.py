"""
core.logger — ``Logger``: a ``BaseLogger`` with a switchable debug level.

Debug messages are written as ``[DEBUG] <message>``; the word ``DEBUG``
is colored gray only when the destination is an interactive terminal.
"""

from __future__ import annotations

import sys
import threading
from typing import Any, Optional, TextIO

from rich.color import ColorSystem
from rich.style import Style

from .config import Config, debug_from_env
from .log import BaseLogger, Flag, sprint, sprintf, sprintln

# SGR 37, the standard-palette "white" that terminals draw as light gray.
GRAY = Style(color="white")


def colorize(style: Style, text: str) -> str:
    """Wrap ``text`` in the 8-color ANSI sequence for ``style``."""
    return style.render(text, color_system=ColorSystem.STANDARD)


def is_terminal(writer: Any) -> bool:
    isatty = getattr(writer, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except ValueError:
        # closed file
        return False


class Logger:
    """
    A ``BaseLogger`` plus the debug family.

    The print / fatal / panic families and ``output`` are forwarded to
    ``base`` untouched; ``debug``, ``debugf`` and ``debugln`` only write
    while debug mode is on.  The debug flag is a ``threading.Event`` so
    it can be toggled from any thread while others log.
    """

    def __init__(self, base: Optional[BaseLogger] = None, debug: bool = False) -> None:
        self.base = base if base is not None else BaseLogger()
        self._debug = threading.Event()
        if debug:
            self._debug.set()

    @classmethod
    def from_config(cls, cfg: Config) -> Logger:
        writer = sys.stdout if cfg.output == "stdout" else None
        return cls(BaseLogger(writer, cfg.prefix, cfg.flags), debug=cfg.debug)

    # ── Debug mode ────────────────────────────────────────────────────

    @property
    def debug_enabled(self) -> bool:
        return self._debug.is_set()

    def enable_debug(self) -> None:
        """Turn debug mode on. Takes precedence over ``DEBUG``."""
        self._debug.set()

    def disable_debug(self) -> None:
        """Turn debug mode off. Takes precedence over ``DEBUG``."""
        self._debug.clear()

    # ── Debug family ──────────────────────────────────────────────────

    def debug(self, *v: Any, stacklevel: int = 1) -> None:
        """Print with a ``[DEBUG] `` tag when in debug mode, like ``print``."""
        if not self._debug.is_set():
            return
        level = "DEBUG"
        if is_terminal(self.base.writer()):
            level = colorize(GRAY, level)
        self.base.print(f"[{level}] ", sprint(*v), stacklevel=stacklevel + 1)

    def debugf(self, format: str, *v: Any, stacklevel: int = 1) -> None:
        """Like ``debug``, with arguments handled as in ``printf``."""
        self.debug(sprintf(format, *v), stacklevel=stacklevel + 1)

    def debugln(self, *v: Any, stacklevel: int = 1) -> None:
        """Like ``debug``, with arguments handled as in ``println``."""
        self.debug(sprintln(*v), stacklevel=stacklevel + 1)

    # ── Pass-through to the base logger ───────────────────────────────

    def output(self, calldepth: int, s: str) -> None:
        self.base.output(calldepth + 1, s)

    def print(self, *v: Any, stacklevel: int = 1) -> None:
        self.base.print(*v, stacklevel=stacklevel + 1)

    def printf(self, format: str, *v: Any, stacklevel: int = 1) -> None:
        self.base.printf(format, *v, stacklevel=stacklevel + 1)

    def println(self, *v: Any, stacklevel: int = 1) -> None:
        self.base.println(*v, stacklevel=stacklevel + 1)

    def fatal(self, *v: Any, stacklevel: int = 1) -> None:
        self.base.fatal(*v, stacklevel=stacklevel + 1)

    def fatalf(self, format: str, *v: Any, stacklevel: int = 1) -> None:
        self.base.fatalf(format, *v, stacklevel=stacklevel + 1)

    def fatalln(self, *v: Any, stacklevel: int = 1) -> None:
        self.base.fatalln(*v, stacklevel=stacklevel + 1)

    def panic(self, *v: Any, stacklevel: int = 1) -> None:
        self.base.panic(*v, stacklevel=stacklevel + 1)

    def panicf(self, format: str, *v: Any, stacklevel: int = 1) -> None:
        self.base.panicf(format, *v, stacklevel=stacklevel + 1)

    def panicln(self, *v: Any, stacklevel: int = 1) -> None:
        self.base.panicln(*v, stacklevel=stacklevel + 1)

    def writer(self) -> TextIO:
        return self.base.writer()

    def set_output(self, writer: Optional[TextIO]) -> None:
        self.base.set_output(writer)

    def prefix(self) -> str:
        return self.base.prefix()

    def set_prefix(self, prefix: str) -> None:
        self.base.set_prefix(prefix)

    def flags(self) -> Flag:
        return self.base.flags()

    def set_flags(self, flags: int) -> None:
        self.base.set_flags(flags)


def new() -> Logger:
    """
    Create a Logger writing to stderr with the standard flags.

    Debug mode starts enabled when ``DEBUG`` is one of ``yes``, ``true``
    or ``1`` (any case); the variable is read only here.
    """
    return Logger(debug=debug_from_env())
