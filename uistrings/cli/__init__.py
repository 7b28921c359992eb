"""Command line interface for uistrings."""

from uistrings.cli.main import cli

__all__ = ["cli"]
