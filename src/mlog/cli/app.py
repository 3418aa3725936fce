"""
cli.app — Main Typer application.
"""

from __future__ import annotations

import os
import sys
from typing import List, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..core.config import DEBUG_ENV, Config, load_config
from ..core.log import Flag
from ..core.logger import Logger, is_terminal
from ..core.models import Level

app = typer.Typer(
    name="mlog",
    help="Line logger with a switchable debug level.",
    no_args_is_help=True,
)
console = Console()


# ── Shared helpers ────────────────────────────────────────────────────


def _build_config(**cli_overrides: object) -> Config:
    """Build a ``Config`` from env + CLI overrides, exit 1 on bad values."""
    try:
        return load_config(**cli_overrides)
    except ValidationError as exc:
        console.print(f"[red]Invalid configuration:[/] {exc.errors()[0]['msg']}")
        raise typer.Exit(1)


def _flag_names(flags: int) -> str:
    """Render header flags as ``DATE|TIME``; ``0`` when none are set."""
    names = [
        f.name
        for f in Flag
        if f.value & (f.value - 1) == 0 and flags & f.value
    ]
    return "|".join(names) if names else "0"


# ═════════════════════════════════════════════════════════════════════
#  Commands
# ═════════════════════════════════════════════════════════════════════


@app.command()
def emit(
    message: List[str] = typer.Argument(..., help="Message words, joined by spaces"),
    level: Level = typer.Option(Level.DEBUG, "--level", "-l", help="debug (only in debug mode) or print (always)", case_sensitive=False),
    debug: Optional[bool] = typer.Option(None, "--debug/--no-debug", help="Override the DEBUG environment variable"),
    prefix: Optional[str] = typer.Option(None, "--prefix", "-p", help="Line prefix"),
    flags: Optional[int] = typer.Option(None, "--flags", "-f", help="Header flags bitmask (0 = none, 3 = date|time)"),
    stdout: bool = typer.Option(False, "--stdout", help="Write to stdout instead of stderr"),
) -> None:
    """Write MESSAGE through a logger built from the environment and options."""
    cfg = _build_config(
        debug=debug,
        prefix=prefix,
        flags=flags,
        output="stdout" if stdout else None,
    )
    logger = Logger.from_config(cfg)
    text = " ".join(message)
    if level is Level.DEBUG:
        logger.debug(text)
    else:
        logger.print(text)


@app.command()
def status(
    stdout: bool = typer.Option(False, "--stdout", help="Report on stdout as the destination"),
) -> None:
    """Show how a logger would be configured in this environment."""
    cfg = _build_config(output="stdout" if stdout else None)
    destination = sys.stdout if cfg.output == "stdout" else sys.stderr

    table = Table(title="mlog", show_header=True, header_style="bold")
    table.add_column("Setting", style="dim")
    table.add_column("Value")
    table.add_row("debug", "[green]on[/]" if cfg.debug else "off")
    table.add_row(DEBUG_ENV, escape(os.environ.get(DEBUG_ENV, "(unset)")))
    table.add_row("prefix", escape(repr(cfg.prefix)))
    table.add_row("flags", _flag_names(cfg.flags))
    table.add_row("output", cfg.output)
    table.add_row("terminal", "yes" if is_terminal(destination) else "no")
    console.print(table)


def main() -> None:
    """Entry-point registered in pyproject.toml."""
    app()
