"""
core.config — Logger configuration.

Debug mode comes from the ``DEBUG`` environment variable; ``load_config``
also reads ``.env`` files first.  Callers that want a fully configured
logger go through ``load_config()`` and ``Logger.from_config``.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Literal, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from .log import Flag

DEBUG_ENV = "DEBUG"
DEBUG_TRUE_VALUES = ("yes", "true", "1")

_env_loaded = False


def _load_dotenv() -> None:
    """Load .env files from the project root, the CWD and the home dir.

    Existing environment variables always win (``override=False``), so
    an explicit ``DEBUG=...`` in the shell is never replaced.
    """
    global _env_loaded
    if _env_loaded:
        return

    _pkg_root = Path(__file__).resolve().parent.parent          # src/mlog
    _project_root = _pkg_root.parent.parent

    search = [
        _project_root / ".env",
        Path.cwd() / ".env",
        Path.home() / ".env",
    ]
    for p in search:
        if p.exists():
            load_dotenv(p, override=False)
    _env_loaded = True


def parse_debug_value(value: Optional[str]) -> bool:
    """Return True for ``yes`` / ``true`` / ``1`` in any case."""
    if value is None:
        return False
    return value.strip().lower() in DEBUG_TRUE_VALUES


def debug_from_env() -> bool:
    """Read ``DEBUG`` from the process environment (no .env lookup)."""
    return parse_debug_value(os.environ.get(DEBUG_ENV))


class Config(BaseModel):
    """
    Settings for one ``Logger``.

    Create via ``load_config()`` to pick up the environment.
    """

    debug: bool = Field(default=False, description="Emit debug-level messages")
    prefix: str = Field(default="", description="Text written at the start of every line")
    flags: int = Field(default=int(Flag.STD), ge=0, description="Header flags, see core.log.Flag")
    output: Literal["stderr", "stdout"] = "stderr"


def load_config(**overrides: object) -> Config:
    """
    Load ``Config`` from the environment, applying optional overrides.

    ``None`` overrides are ignored so CLI options that were not given
    fall back to the environment.
    """
    _load_dotenv()
    defaults: dict = {"debug": debug_from_env()}
    defaults.update({k: v for k, v in overrides.items() if v is not None})
    return Config(**defaults)  # type: ignore[arg-type]
