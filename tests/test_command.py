"""Unit tests for devbox_shell.shell.command."""

import os
import tempfile
from unittest.mock import patch

import pytest

from devbox_shell.errors import MaterializationError
from devbox_shell.models import EnvironmentSnapshot, ShellDescriptor, ShellFamily
from devbox_shell.shell import detect
from devbox_shell.shell.command import build_exec_command, exec_command

ORIGINAL_PATH = "/usr/local/bin:/usr/bin:/bin"


@pytest.fixture(autouse=True)
def _private_tempdir(tmp_path, monkeypatch):
    monkeypatch.setattr(tempfile, "tempdir", str(tmp_path / "tmp"))
    os.mkdir(tmp_path / "tmp")


def _materialized(family, executable, init_file="/tmp/devbox123/.rc"):
    return ShellDescriptor(
        family=family,
        executable_path=executable,
        materialized_init_file=init_file,
    )


class TestBuildExecCommand:
    def test_bash_uses_rcfile_flag(self):
        sh = _materialized(ShellFamily.BASH, "/bin/bash", "/tmp/devbox123/.bashrc")
        assert build_exec_command(sh, ORIGINAL_PATH) == (
            f'exec /usr/bin/env ORIGINAL_PATH="{ORIGINAL_PATH}" '
            '/bin/bash --rcfile "/tmp/devbox123/.bashrc"'
        )

    def test_zsh_uses_zdotdir(self):
        sh = _materialized(ShellFamily.ZSH, "/bin/zsh", "/tmp/devbox123/.zshrc")
        assert build_exec_command(sh, ORIGINAL_PATH) == (
            f'exec /usr/bin/env ORIGINAL_PATH="{ORIGINAL_PATH}" '
            'ZDOTDIR="/tmp/devbox123" /bin/zsh'
        )

    @pytest.mark.parametrize(
        ("family", "executable"),
        [(ShellFamily.KSH, "/bin/ksh"), (ShellFamily.POSIX, "/bin/dash")],
    )
    def test_ksh_and_posix_use_env(self, family, executable):
        sh = _materialized(family, executable, "/tmp/devbox123/.kshrc")
        assert build_exec_command(sh, ORIGINAL_PATH) == (
            f'exec /usr/bin/env ORIGINAL_PATH="{ORIGINAL_PATH}" '
            f'ENV="/tmp/devbox123/.kshrc" {executable} '
        )

    def test_unknown_family_falls_back(self):
        sh = _materialized(ShellFamily.UNKNOWN, "/usr/bin/fish")
        assert build_exec_command(sh, ORIGINAL_PATH) == "exec /usr/bin/fish"

    def test_nothing_materialized_falls_back(self):
        sh = _materialized(ShellFamily.BASH, "/bin/bash", init_file="")
        assert build_exec_command(sh, ORIGINAL_PATH) == "exec /bin/bash"

    def test_every_family_has_a_builder(self):
        for family in ShellFamily:
            sh = _materialized(family, "/bin/x")
            assert "\n" not in build_exec_command(sh, ORIGINAL_PATH)


class TestExecCommand:
    def test_bash_with_hooks(self, tmp_path):
        (tmp_path / ".bashrc").write_text("alias ll='ls -l'\n")
        env = EnvironmentSnapshot(shell="/bin/bash", home=str(tmp_path), path=ORIGINAL_PATH)
        sh = detect(env, pre_init_hook="echo hi")

        command = exec_command(sh, env)

        assert sh.materialized_init_file
        assert command == (
            f'exec /usr/bin/env ORIGINAL_PATH="{ORIGINAL_PATH}" '
            f'/bin/bash --rcfile "{sh.materialized_init_file}"'
        )

    def test_zsh_without_hooks_is_plain_exec(self, tmp_path):
        env = EnvironmentSnapshot(shell="/bin/zsh", home=str(tmp_path), path=ORIGINAL_PATH)
        sh = detect(env)
        assert exec_command(sh, env) == "exec /bin/zsh"
        assert os.listdir(tmp_path / "tmp") == []

    def test_missing_init_file_falls_back_to_plain_exec(self, tmp_path, caplog):
        env = EnvironmentSnapshot(shell="/bin/bash", home=str(tmp_path), path=ORIGINAL_PATH)
        sh = detect(env, pre_init_hook="echo hi", post_init_hook="")

        with caplog.at_level("WARNING", logger="devbox_shell"):
            assert exec_command(sh, env) == "exec /bin/bash"
        assert sh.materialized_init_file == ""
        assert "Failed to write shell" in caplog.text

    def test_materialization_failure_falls_back_to_plain_exec(self, tmp_path):
        (tmp_path / ".zshrc").write_text("setopt autocd\n")
        env = EnvironmentSnapshot(shell="/bin/zsh", home=str(tmp_path), path=ORIGINAL_PATH)
        sh = detect(env, post_init_hook="echo bye")

        with patch(
            "devbox_shell.shell.hooks.materialize_init_file",
            side_effect=MaterializationError("disk full"),
        ):
            assert exec_command(sh, env) == "exec /bin/zsh"

    def test_uses_snapshot_path_not_process_path(self, tmp_path, monkeypatch):
        monkeypatch.setenv("PATH", "/changed")
        (tmp_path / ".kshrc").write_text("")
        env = EnvironmentSnapshot(shell="/bin/ksh", home=str(tmp_path), path=ORIGINAL_PATH)
        sh = detect(env, pre_init_hook="export A=1")
        command = exec_command(sh, env)
        assert f'ORIGINAL_PATH="{ORIGINAL_PATH}"' in command
        assert "/changed" not in command
