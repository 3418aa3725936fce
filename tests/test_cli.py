from typer.testing import CliRunner

from mlog.cli import app

runner = CliRunner()


def test_emit_debug_enabled_by_flag():
    result = runner.invoke(app, ["emit", "--stdout", "--flags", "0", "--debug", "hello", "world"])
    assert result.exit_code == 0
    assert result.stdout == "[DEBUG] hello world\n"


def test_emit_debug_follows_env():
    args = ["emit", "--stdout", "--flags", "0", "hi"]
    on = runner.invoke(app, args, env={"DEBUG": "YES"})
    off = runner.invoke(app, args, env={"DEBUG": "maybe"})
    assert on.stdout == "[DEBUG] hi\n"
    assert off.exit_code == 0
    assert off.stdout == ""


def test_emit_no_debug_overrides_env():
    result = runner.invoke(app, ["emit", "--stdout", "--no-debug", "hi"], env={"DEBUG": "1"})
    assert result.exit_code == 0
    assert result.stdout == ""


def test_emit_print_level_is_unconditional():
    result = runner.invoke(
        app,
        ["emit", "--stdout", "--no-debug", "--level", "print", "--prefix", "cli: ", "--flags", "0", "hi"],
    )
    assert result.exit_code == 0
    assert result.stdout == "cli: hi\n"


def test_emit_rejects_unknown_level():
    result = runner.invoke(app, ["emit", "--level", "trace", "hi"])
    assert result.exit_code == 2


def test_emit_level_is_case_insensitive():
    result = runner.invoke(app, ["emit", "--stdout", "--flags", "0", "--level", "PRINT", "hi"])
    assert result.exit_code == 0
    assert result.stdout == "hi\n"


def test_emit_help_lists_levels():
    result = runner.invoke(app, ["emit", "--help"])
    assert result.exit_code == 0
    assert "debug|print" in result.stdout


def test_emit_rejects_negative_flags():
    result = runner.invoke(app, ["emit", "--flags", "-1", "hi"])
    assert result.exit_code == 1
    assert "Invalid configuration" in result.stdout


def test_status_table():
    result = runner.invoke(app, ["status", "--stdout"], env={"DEBUG": "true"})
    assert result.exit_code == 0
    assert "true" in result.stdout
    assert "DATE|TIME" in result.stdout
    assert "stdout" in result.stdout
