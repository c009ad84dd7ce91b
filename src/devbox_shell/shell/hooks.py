"""Write the wrapped shell init file somewhere the shell can find it."""

import logging
import os
import tempfile

from devbox_shell.errors import MaterializationError
from devbox_shell.models import ShellDescriptor
from devbox_shell.shell.init_file import build_init_file

log = logging.getLogger(__name__)

# Init file name used when the user's own init file path is unknown.
DEFAULT_INIT_FILE_NAME = ".devboxrc"


def materialize_init_file(contents: bytes, basename: str) -> str:
    """Write contents to a new private temp directory and return the file path.

    A directory rather than a single temp file is needed because zsh finds
    its .zshrc through ZDOTDIR, which names a directory. The directory is
    left in place for the shell that replaces this process.
    """
    try:
        tmp = tempfile.mkdtemp(prefix="devbox")
    except OSError as e:
        raise MaterializationError(f"create temp dir for shell init file: {e}") from e

    init_file = os.path.join(tmp, basename or DEFAULT_INIT_FILE_NAME)
    try:
        fd = os.open(init_file, os.O_WRONLY | os.O_CREAT | os.O_EXCL, 0o600)
        with os.fdopen(fd, "wb") as f:
            f.write(contents)
    except OSError as e:
        raise MaterializationError(f"write to shell init file: {e}") from e
    return init_file


def write_hooks(sh: ShellDescriptor) -> None:
    """Build and write the wrapped init file, recording its path on sh."""
    contents = build_init_file(sh)
    if contents is None:
        return

    basename = os.path.basename(sh.native_init_file)
    sh.materialized_init_file = materialize_init_file(contents, basename)

    log.debug("Wrote devbox shell init file to: %s", sh.materialized_init_file)
    log.debug(
        "--- Begin Devbox Shell Init Contents ---\n%s--- End Devbox Shell Init Contents ---",
        contents.decode(errors="replace"),
    )
