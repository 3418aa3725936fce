"""
core.models — Shared enums.
"""

from __future__ import annotations

from enum import Enum


class Level(str, Enum):
    """Which emission path ``mlog emit`` uses."""

    DEBUG = "debug"    # only in debug mode
    PRINT = "print"    # always
