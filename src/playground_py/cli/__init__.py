"""Command line interface for playground-py."""

from playground_py.cli.commands import cli

__all__ = ["cli"]
