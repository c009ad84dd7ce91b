"""Configuration loading for devbox-shell."""

import json
import logging
import os
from pathlib import Path

from pydantic import ValidationError

from devbox_shell.errors import ConfigError
from devbox_shell.models import ShellConfig

log = logging.getLogger(__name__)

CONFIG_SUBDIR = Path(".config") / "devbox-shell"
CONFIG_FILENAME = "config.json"
CONFIG_ENV_VAR = "DEVBOX_SHELL_CONFIG"
DEBUG_ENV_VAR = "DEVBOX_DEBUG"


def config_path() -> Path | None:
    """Return the config file path, honoring the DEVBOX_SHELL_CONFIG override.

    Returns None when there is no override and the home directory is unknown.
    """
    override = os.environ.get(CONFIG_ENV_VAR, "").strip()
    if override:
        return Path(override).expanduser()
    try:
        home = Path.home()
    except RuntimeError as e:
        log.debug("no home directory, skipping config file: %s", e)
        return None
    return home / CONFIG_SUBDIR / CONFIG_FILENAME


def debug_enabled() -> bool:
    """Return whether DEVBOX_DEBUG asks for debug logging."""
    value = os.environ.get(DEBUG_ENV_VAR, "").strip().lower()
    return value not in {"", "0", "false"}


def load_config(path: Path | None = None) -> ShellConfig:
    """Load hook configuration, returning defaults when no file exists."""
    if path is None:
        path = config_path()
    if path is None or not path.exists():
        log.debug("no config file at %s, using defaults", path)
        return ShellConfig()

    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ConfigError(f"unable to read config file {path}: {e}") from e
    if not isinstance(payload, dict):
        raise ConfigError(f"config file {path} must contain a JSON object")

    try:
        config = ShellConfig(**payload)
    except ValidationError as e:
        raise ConfigError(f"invalid config file {path}: {e}") from e
    log.debug("loaded config from %s", path)
    return config
