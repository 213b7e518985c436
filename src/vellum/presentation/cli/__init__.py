"""Command-line interface (``vellum``)."""

from vellum.presentation.cli.app import cli

__all__ = ["cli"]
