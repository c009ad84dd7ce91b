"""Command-line interface for devbox-shell."""

from devbox_shell.cli.app import build_parser, entrypoint, main

__all__ = [
    "build_parser",
    "entrypoint",
    "main",
]
