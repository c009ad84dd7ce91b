"""Detect the user's shell and configure it to run with Devbox init hooks."""

from devbox_shell.shell.detection import detect
from devbox_shell.shell.command import build_exec_command, exec_command
from devbox_shell.shell.hooks import write_hooks
from devbox_shell.shell.init_file import build_init_file

__all__ = [
    "build_exec_command",
    "build_init_file",
    "detect",
    "exec_command",
    "write_hooks",
]
