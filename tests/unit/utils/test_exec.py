"""Tests for zsh_prompts.utils._exec module."""

import subprocess
import sys

import pytest
from pytest_mock import MockerFixture

from zsh_prompts.utils import CommandConfig, CommandResult, run_command


class TestCommandConfig:
    def test_default_values(self) -> None:
        config = CommandConfig(args=["git", "status"])
        assert config.cwd is None
        assert config.env == {}
        assert config.timeout is None

    def test_frozen(self) -> None:
        config = CommandConfig(args=["git"])
        with pytest.raises(AttributeError):
            config.timeout = 1.0  # pyright: ignore[reportAttributeAccessIssue]


class TestCommandResult:
    def test_ok_requires_zero_exit(self) -> None:
        assert CommandResult(success=True, exit_code=0).ok
        assert not CommandResult(success=True, exit_code=128).ok

    def test_failed_execution_is_not_ok(self) -> None:
        result = CommandResult(success=False, error="boom")
        assert not result.ok
        assert result.exit_code is None


class TestRunCommand:
    def test_empty_args(self) -> None:
        result = run_command(CommandConfig(args=[]))

        assert result.success is False
        assert result.error == "No command specified"

    def test_captures_output_and_exit_code(self) -> None:
        result = run_command(
            CommandConfig(args=[sys.executable, "-c", "import sys; print('out'); sys.exit(3)"])
        )

        assert result.success is True
        assert result.exit_code == 3
        assert result.stdout.strip() == "out"

    def test_passes_extra_env_and_cwd(self, mocker: MockerFixture) -> None:
        mock_run = mocker.patch(
            "zsh_prompts.utils._exec.subprocess.run",
            return_value=subprocess.CompletedProcess(args=[], returncode=0, stdout=b"", stderr=b""),
        )

        _ = run_command(CommandConfig(args=("git", "status"), cwd="/repo", env={"LC_ALL": "C"}))

        args, kwargs = mock_run.call_args
        assert args[0] == ["git", "status"]
        assert kwargs["cwd"] == "/repo"
        assert kwargs["env"]["LC_ALL"] == "C"
        assert kwargs["stdin"] is subprocess.DEVNULL

    def test_decodes_invalid_utf8_leniently(self, mocker: MockerFixture) -> None:
        _ = mocker.patch(
            "zsh_prompts.utils._exec.subprocess.run",
            return_value=subprocess.CompletedProcess(
                args=[], returncode=0, stdout=b"main\xff", stderr=b""
            ),
        )

        result = run_command(CommandConfig(args=["git"]))

        assert result.stdout == "main�"

    def test_timeout(self, mocker: MockerFixture) -> None:
        _ = mocker.patch(
            "zsh_prompts.utils._exec.subprocess.run",
            side_effect=subprocess.TimeoutExpired(cmd="git", timeout=0.5),
        )

        result = run_command(CommandConfig(args=["git"], timeout=0.5))

        assert result.success is False
        assert result.timed_out is True
        assert result.error == "Command timed out after 0.5s"

    def test_command_not_found(self) -> None:
        result = run_command(CommandConfig(args=["zsh-prompts-no-such-executable"]))

        assert result.success is False
        assert result.command_not_found is True
        assert result.error

    def test_other_os_error(self, mocker: MockerFixture) -> None:
        _ = mocker.patch(
            "zsh_prompts.utils._exec.subprocess.run",
            side_effect=PermissionError("denied"),
        )

        result = run_command(CommandConfig(args=["git"]))

        assert result.success is False
        assert result.command_not_found is False
        assert result.error == "denied"
