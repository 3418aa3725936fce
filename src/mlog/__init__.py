"""
mlog — A standard line logger with a switchable debug level.

Architecture:
    core/   BaseLogger (prefix, flags, print/fatal/panic), Logger (debug
            gating, colored tag), Config / load_config
    cli/    Typer CLI entry-points

The functions below operate on one process-wide ``Logger`` created at
import time by ``new()``, so debug mode follows ``DEBUG`` unless
``enable_debug`` / ``disable_debug`` is called.
"""

from __future__ import annotations

from typing import Any, Optional, TextIO

from .core.config import Config, load_config
from .core.log import BaseLogger, Flag, LogPanic
from .core.logger import Logger, new

__version__ = "0.1.0"

_std = new()


def default() -> Logger:
    """Return the package-level Logger."""
    return _std


# ── Debug mode ────────────────────────────────────────────────────────


def enable_debug() -> None:
    """Turn debug mode on. Takes precedence over ``DEBUG``."""
    _std.enable_debug()


def disable_debug() -> None:
    """Turn debug mode off. Takes precedence over ``DEBUG``."""
    _std.disable_debug()


def is_debug_enabled() -> bool:
    return _std.debug_enabled


# ── Debug family ──────────────────────────────────────────────────────


def debug(*v: Any) -> None:
    """Print with a ``[DEBUG] `` tag when in debug mode, like ``print``."""
    _std.debug(*v, stacklevel=2)


def debugf(format: str, *v: Any) -> None:
    """Like ``debug``, with arguments handled as in ``printf``."""
    _std.debugf(format, *v, stacklevel=2)


def debugln(*v: Any) -> None:
    """Like ``debug``, with arguments handled as in ``println``."""
    _std.debugln(*v, stacklevel=2)


# ── Standard families ─────────────────────────────────────────────────


def output(calldepth: int, s: str) -> None:
    _std.output(calldepth + 1, s)


def print(*v: Any) -> None:
    _std.print(*v, stacklevel=2)


def printf(format: str, *v: Any) -> None:
    _std.printf(format, *v, stacklevel=2)


def println(*v: Any) -> None:
    _std.println(*v, stacklevel=2)


def fatal(*v: Any) -> None:
    _std.fatal(*v, stacklevel=2)


def fatalf(format: str, *v: Any) -> None:
    _std.fatalf(format, *v, stacklevel=2)


def fatalln(*v: Any) -> None:
    _std.fatalln(*v, stacklevel=2)


def panic(*v: Any) -> None:
    _std.panic(*v, stacklevel=2)


def panicf(format: str, *v: Any) -> None:
    _std.panicf(format, *v, stacklevel=2)


def panicln(*v: Any) -> None:
    _std.panicln(*v, stacklevel=2)


# ── Destination / prefix / flags ──────────────────────────────────────


def writer() -> TextIO:
    return _std.writer()


def set_output(w: Optional[TextIO]) -> None:
    _std.set_output(w)


def prefix() -> str:
    return _std.prefix()


def set_prefix(p: str) -> None:
    _std.set_prefix(p)


def flags() -> Flag:
    return _std.flags()


def set_flags(f: int) -> None:
    _std.set_flags(f)


# ``print`` is left out so ``from mlog import *`` never shadows the builtin.
__all__ = [
    "BaseLogger",
    "Config",
    "Flag",
    "LogPanic",
    "Logger",
    "load_config",
    "new",
    "default",
    "enable_debug",
    "disable_debug",
    "is_debug_enabled",
    "debug",
    "debugf",
    "debugln",
    "output",
    "printf",
    "println",
    "fatal",
    "fatalf",
    "fatalln",
    "panic",
    "panicf",
    "panicln",
    "writer",
    "set_output",
    "prefix",
    "set_prefix",
    "flags",
    "set_flags",
]
