"""Exceptions raised while bootstrapping a shell."""


class ShellBootstrapError(RuntimeError):
    """Base class for shell bootstrap failures."""


class DetectionError(ShellBootstrapError):
    """No shell could be detected from the environment."""


class CompositionError(ShellBootstrapError):
    """The wrapped init file could not be assembled."""


class MaterializationError(ShellBootstrapError):
    """The wrapped init file could not be written to disk."""


class ConfigError(ShellBootstrapError):
    """The hook configuration file is unreadable or invalid."""
