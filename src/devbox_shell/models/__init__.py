"""Model package for devbox-shell."""

from devbox_shell.models.environment import EnvironmentSnapshot
from devbox_shell.models.shell_config import ShellConfig
from devbox_shell.models.shell_descriptor import ShellDescriptor
from devbox_shell.models.shell_family import ShellFamily

__all__ = [
    "EnvironmentSnapshot",
    "ShellConfig",
    "ShellDescriptor",
    "ShellFamily",
]
