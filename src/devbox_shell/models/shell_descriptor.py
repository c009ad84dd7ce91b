"""Detected shell session model."""

from dataclasses import dataclass

from devbox_shell.models.shell_family import ShellFamily

# Set once by detection.
_DETECTED_FIELDS = frozenset({"family", "executable_path"})


@dataclass
class ShellDescriptor:
    """A shell to launch and the hooks to wrap around its init file.

    ``family`` and ``executable_path`` can't be reassigned after construction.
    ``materialized_init_file`` stays empty until a wrapped init file has been
    written. The file is never removed here: the shell that replaces this
    process owns it from then on.
    """

    family: ShellFamily
    executable_path: str
    native_init_file: str = ""

    # Commands that run before the user's init file. The script's environment
    # contains ORIGINAL_PATH, the PATH from before any init file ran.
    pre_init_hook: str = ""

    # Commands that run after the user's init file. ORIGINAL_PATH is set here
    # as well.
    post_init_hook: str = ""

    materialized_init_file: str = ""

    def __setattr__(self, name: str, value: object) -> None:
        if name in _DETECTED_FIELDS and name in self.__dict__:
            raise AttributeError(f"{name} is fixed once the shell is detected")
        super().__setattr__(name, value)
