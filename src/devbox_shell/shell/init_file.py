"""Assemble the init file that wraps the user's own with Devbox hooks."""

import logging

from devbox_shell.errors import CompositionError
from devbox_shell.models import ShellDescriptor

log = logging.getLogger(__name__)

# The post-init section reuses the "Pre-init" begin marker.
PRE_INIT_BEGIN = b"\n# Begin Devbox Pre-init Hook\n\n"
PRE_INIT_END = b"\n\n# End Devbox Pre-init Hook\n\n"
POST_INIT_BEGIN = b"\n\n# Begin Devbox Pre-init Hook\n\n"
POST_INIT_END = b"\n\n# End Devbox Post-init Hook"


def read_native_init_file(path: str) -> bytes:
    """Read the user's init file, raising CompositionError if it can't be read."""
    if not path:
        raise CompositionError("no shell init file to wrap")
    try:
        with open(path, "rb") as f:
            return f.read()
    except OSError as e:
        raise CompositionError(f"read shell init file {path}: {e}") from e


def build_init_file(sh: ShellDescriptor) -> bytes | None:
    """Return the contents of the wrapped init file for sh.

    Returns None when there is nothing to add to the user's own init file, in
    which case the shell should be started unmodified.
    """
    prehook = sh.pre_init_hook.strip()
    posthook = sh.post_init_hook.strip()
    if not prehook and not posthook:
        log.debug("no init hooks, skipping init file")
        return None

    buf = bytearray()
    if prehook:
        buf += PRE_INIT_BEGIN
        buf += prehook.encode(errors="surrogateescape")
        buf += PRE_INIT_END

    native = read_native_init_file(sh.native_init_file).strip()
    if native:
        buf += native

    if posthook:
        buf += POST_INIT_BEGIN
        buf += posthook.encode(errors="surrogateescape")
        buf += POST_INIT_END

    contents = bytes(buf).strip()
    if not contents:
        return None
    return contents + b"\n"
