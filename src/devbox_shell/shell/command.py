"""Build the command that replaces the current process with the user's shell."""

import logging
import os
from collections.abc import Callable

from devbox_shell.errors import CompositionError, MaterializationError
from devbox_shell.models import EnvironmentSnapshot, ShellDescriptor, ShellFamily
from devbox_shell.shell.hooks import write_hooks

log = logging.getLogger(__name__)


def plain_exec_command(executable_path: str) -> str:
    """Return the command that execs a shell without any hooks."""
    return f"exec {executable_path}"


def _bash_command(sh: ShellDescriptor, original_path: str) -> str:
    return (
        f'exec /usr/bin/env ORIGINAL_PATH="{original_path}" '
        f'{sh.executable_path} --rcfile "{sh.materialized_init_file}"'
    )


def _zsh_command(sh: ShellDescriptor, original_path: str) -> str:
    zdotdir = os.path.dirname(sh.materialized_init_file)
    return (
        f'exec /usr/bin/env ORIGINAL_PATH="{original_path}" '
        f'ZDOTDIR="{zdotdir}" {sh.executable_path}'
    )


def _env_file_command(sh: ShellDescriptor, original_path: str) -> str:
    return (
        f'exec /usr/bin/env ORIGINAL_PATH="{original_path}" '
        f'ENV="{sh.materialized_init_file}" {sh.executable_path} '
    )


def _unknown_command(sh: ShellDescriptor, original_path: str) -> str:
    return plain_exec_command(sh.executable_path)


_COMMAND_BUILDERS: dict[ShellFamily, Callable[[ShellDescriptor, str], str]] = {
    ShellFamily.BASH: _bash_command,
    ShellFamily.ZSH: _zsh_command,
    ShellFamily.KSH: _env_file_command,
    ShellFamily.POSIX: _env_file_command,
    ShellFamily.UNKNOWN: _unknown_command,
}


def build_exec_command(sh: ShellDescriptor, original_path: str) -> str:
    """Return the exec command for sh, pointing it at its wrapped init file.

    original_path is exported as ORIGINAL_PATH verbatim; it is not quoted or
    escaped beyond the surrounding double quotes.
    """
    if not sh.materialized_init_file:
        return plain_exec_command(sh.executable_path)
    return _COMMAND_BUILDERS[sh.family](sh, original_path)


def exec_command(sh: ShellDescriptor, env: EnvironmentSnapshot) -> str:
    """Write sh's init hooks and return a command that replaces the current shell with sh.

    Falls back to execing the shell unmodified if the hooks can't be written.
    """
    try:
        write_hooks(sh)
    except (CompositionError, MaterializationError) as e:
        log.warning("Failed to write shell pre-init and post-init hooks: %s", e)
        return plain_exec_command(sh.executable_path)
    return build_exec_command(sh, env.path)
