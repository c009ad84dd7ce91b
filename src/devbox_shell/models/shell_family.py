"""Shell family tag."""

from enum import Enum


class ShellFamily(Enum):
    """Which shell's startup semantics apply to a detected executable."""

    UNKNOWN = ""
    BASH = "bash"
    ZSH = "zsh"
    KSH = "ksh"
    POSIX = "posix"
