"""
cli — Typer CLI entry-point for mlog.

Commands:
    emit      Write a message through a configured Logger
    status    Show the resolved logger configuration
"""

from .app import app, main

__all__ = ["app", "main"]
