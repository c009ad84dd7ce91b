"""Shared CLI helpers."""

import os
from pathlib import Path

from devbox_shell.errors import ConfigError


def read_hook_file(path: str) -> str:
    """Return the text of a hook script file.

    Bytes that aren't valid UTF-8 are kept as surrogate escapes so they are
    written back unchanged.
    """
    try:
        return os.fsdecode(Path(path).expanduser().read_bytes())
    except OSError as e:
        raise ConfigError(f"unable to read hook file {path}: {e}") from e


def resolve_hook(text: str | None, path: str | None, default: str) -> str:
    """Pick hook text from an inline flag, a file flag, or the config default."""
    if text is not None:
        return text
    if path is not None:
        return read_hook_file(path)
    return default
