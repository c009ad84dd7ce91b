"""devbox-shell: bootstrap an interactive shell wrapped in init hooks."""

__version__ = "0.1.0"
