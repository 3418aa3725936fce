import io

import pytest

import mlog
from mlog.core import config as config_module


class TTYBuffer(io.StringIO):
    """In-memory writer that claims to be a terminal."""

    def isatty(self):
        return True


@pytest.fixture(autouse=True)
def no_dotenv(monkeypatch):
    # keep stray .env files out of the tests
    monkeypatch.setattr(config_module, "_env_loaded", True)


@pytest.fixture
def std():
    """The package-level logger, restored after the test."""
    logger = mlog.default()
    saved = (logger.base._writer, logger.prefix(), logger.flags(), logger.debug_enabled)
    yield logger
    writer, prefix, flags, enabled = saved
    logger.set_output(writer)
    logger.set_prefix(prefix)
    logger.set_flags(flags)
    if enabled:
        logger.enable_debug()
    else:
        logger.disable_debug()
