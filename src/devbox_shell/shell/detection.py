"""Shell detection."""

import logging
import os

from devbox_shell.errors import DetectionError
from devbox_shell.models import EnvironmentSnapshot, ShellDescriptor, ShellFamily

log = logging.getLogger(__name__)

# Made-up init file name for POSIX shells when ENV isn't set, so there is
# somewhere to put a new one. Deliberately not joined with the home directory.
POSIX_FALLBACK_INIT_FILE = ".shinit"


def rcfile_path(home: str | None, basename: str) -> str:
    """Return the absolute path for an rcfile in the user's home directory.

    Returns an empty string when the home directory is unknown. The file is
    not required to exist.
    """
    if not home:
        return ""
    return os.path.join(home, basename)


def _classify_shell(path: str) -> ShellFamily:
    """Return the shell family for an executable path."""
    base = os.path.basename(path)
    # Login shell
    if base.startswith("-"):
        base = base[1:]
    if base == "bash":
        return ShellFamily.BASH
    if base == "zsh":
        return ShellFamily.ZSH
    if base == "ksh":
        return ShellFamily.KSH
    if base in {"dash", "ash", "sh"}:
        return ShellFamily.POSIX
    return ShellFamily.UNKNOWN


def _native_init_file(family: ShellFamily, env: EnvironmentSnapshot) -> str:
    if family is ShellFamily.BASH:
        return rcfile_path(env.home, ".bashrc")
    if family is ShellFamily.ZSH:
        return rcfile_path(env.home, ".zshrc")
    if family is ShellFamily.KSH:
        return rcfile_path(env.home, ".kshrc")
    if family is ShellFamily.POSIX:
        return env.env_file or POSIX_FALLBACK_INIT_FILE
    return ""


def detect(
    env: EnvironmentSnapshot,
    pre_init_hook: str = "",
    post_init_hook: str = "",
) -> ShellDescriptor:
    """Determine the user's default shell from an environment snapshot."""
    if not env.shell:
        raise DetectionError("unable to detect the current shell")

    path = os.path.normpath(env.shell)
    # normpath keeps a leading "//" on POSIX.
    if path.startswith("//"):
        path = "/" + path.lstrip("/")
    family = _classify_shell(path)
    sh = ShellDescriptor(
        family=family,
        executable_path=path,
        native_init_file=_native_init_file(family, env),
        pre_init_hook=pre_init_hook,
        post_init_hook=post_init_hook,
    )
    log.debug("Detected shell: %s", sh.executable_path)
    log.debug("Recognized shell as: %s", sh.family.name.lower())
    log.debug("Looking for user's shell init file at: %s", sh.native_init_file)
    return sh
