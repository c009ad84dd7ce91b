"""Print (or run) the command that starts the user's shell with Devbox hooks."""

import argparse
import logging
import os
import sys
from pathlib import Path

from devbox_shell import __version__
from devbox_shell.cli.shared import resolve_hook
from devbox_shell.config import debug_enabled, load_config
from devbox_shell.errors import ShellBootstrapError
from devbox_shell.models import EnvironmentSnapshot
from devbox_shell.shell import detect, exec_command

log = logging.getLogger(__name__)

EXEC_SHELL = "/bin/sh"


def build_parser() -> argparse.ArgumentParser:
    """Build the devbox-shell argument parser."""
    parser = argparse.ArgumentParser(
        prog="devbox-shell",
        description="Start the user's shell wrapped in Devbox pre-init and post-init hooks",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--config", help="Path to a JSON hook config file")
    pre_group = parser.add_mutually_exclusive_group()
    pre_group.add_argument("--pre-hook", help="Commands to run before the user's init file")
    pre_group.add_argument(
        "--pre-hook-file",
        help="File containing commands to run before the user's init file",
    )
    post_group = parser.add_mutually_exclusive_group()
    post_group.add_argument("--post-hook", help="Commands to run after the user's init file")
    post_group.add_argument(
        "--post-hook-file",
        help="File containing commands to run after the user's init file",
    )
    parser.add_argument(
        "--exec",
        action="store_true",
        help="Replace this process with the shell instead of printing the command",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Detect the shell, write its hooks, and print or run the exec command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug or debug_enabled() else logging.WARNING,
        format="%(name)s %(levelname)s: %(message)s",
    )

    env = EnvironmentSnapshot.from_environ()
    try:
        config = load_config(Path(args.config) if args.config else None)
        pre_init_hook = resolve_hook(args.pre_hook, args.pre_hook_file, config.pre_init_hook)
        post_init_hook = resolve_hook(args.post_hook, args.post_hook_file, config.post_init_hook)
        sh = detect(env, pre_init_hook=pre_init_hook, post_init_hook=post_init_hook)
    except ShellBootstrapError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    command = exec_command(sh, env)
    if not args.exec:
        print(command)
        return 0

    log.debug("running: %s", command)
    sys.stdout.flush()
    sys.stderr.flush()
    try:
        os.execv(EXEC_SHELL, [EXEC_SHELL, "-c", command])
    except OSError as e:
        print(f"Error: unable to start {EXEC_SHELL}: {e}", file=sys.stderr)
    return 1


def entrypoint() -> None:
    """Console script entrypoint."""
    raise SystemExit(main())
