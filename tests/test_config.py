import pytest
from pydantic import ValidationError

from mlog.core import config as config_module
from mlog.core.config import Config, load_config, parse_debug_value
from mlog.core.log import Flag


def test_parse_debug_value():
    assert parse_debug_value("Yes")
    assert parse_debug_value("TRUE")
    assert parse_debug_value("1")
    assert not parse_debug_value(None)
    assert not parse_debug_value("maybe")
    assert not parse_debug_value("10")


def test_defaults(monkeypatch):
    monkeypatch.delenv("DEBUG", raising=False)
    cfg = load_config()
    assert cfg == Config()
    assert cfg.flags == int(Flag.STD)
    assert cfg.output == "stderr"


def test_env_and_overrides(monkeypatch):
    monkeypatch.setenv("DEBUG", "true")
    assert load_config().debug is True
    assert load_config(debug=False).debug is False
    # None means "not given"
    assert load_config(debug=None, prefix=None).debug is True


def test_invalid_values_rejected():
    with pytest.raises(ValidationError):
        Config(flags=-1)
    with pytest.raises(ValidationError):
        Config(output="file")


def test_dotenv_fills_missing_debug(monkeypatch, tmp_path):
    (tmp_path / ".env").write_text("DEBUG=yes\n")
    monkeypatch.chdir(tmp_path)
    # setenv first so monkeypatch restores the variable's original state
    monkeypatch.setenv("DEBUG", "")
    monkeypatch.delenv("DEBUG")
    monkeypatch.setattr(config_module, "_env_loaded", False)
    assert load_config().debug is True


def test_dotenv_never_overrides_env(monkeypatch, tmp_path):
    (tmp_path / ".env").write_text("DEBUG=yes\n")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("DEBUG", "no")
    monkeypatch.setattr(config_module, "_env_loaded", False)
    assert load_config().debug is False
