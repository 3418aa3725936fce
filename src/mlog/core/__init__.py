"""
core — Base logger, debug-aware Logger, and configuration.

Nothing in ``core`` imports from ``cli``.
"""

from .config import Config, load_config, parse_debug_value, debug_from_env
from .log import BaseLogger, Flag, LogPanic, sprint, sprintf, sprintln
from .logger import Logger, colorize, is_terminal, new
from .models import Level

__all__ = [
    "Config",
    "load_config",
    "parse_debug_value",
    "debug_from_env",
    "BaseLogger",
    "Flag",
    "LogPanic",
    "sprint",
    "sprintf",
    "sprintln",
    "Logger",
    "colorize",
    "is_terminal",
    "new",
    "Level",
]
