"""Snapshot of the process environment read during a shell bootstrap."""

import os
from collections.abc import Mapping
from dataclasses import dataclass


@dataclass(frozen=True)
class EnvironmentSnapshot:
    """Every environment value detection and command building depend on."""

    shell: str = ""
    env_file: str = ""
    home: str | None = None
    path: str = ""

    @classmethod
    def from_environ(cls, environ: Mapping[str, str] | None = None) -> "EnvironmentSnapshot":
        """Capture a snapshot from environ, defaulting to os.environ."""
        if environ is None:
            environ = os.environ
        return cls(
            shell=environ.get("SHELL", ""),
            env_file=environ.get("ENV", ""),
            home=environ.get("HOME") or None,
            path=environ.get("PATH", ""),
        )
