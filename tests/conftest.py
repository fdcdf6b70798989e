"""Shared test fixtures for zsh-prompts tests."""

import os
import shutil
import subprocess
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

import pytest
from rich.console import Console

_GIT_ENV = {
    "GIT_AUTHOR_NAME": "Test User",
    "GIT_AUTHOR_EMAIL": "test@example.com",
    "GIT_COMMITTER_NAME": "Test User",
    "GIT_COMMITTER_EMAIL": "test@example.com",
    "GIT_CONFIG_NOSYSTEM": "1",
}


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep tests away from the real user config, log directory and env."""
    for key in list(os.environ):
        if key.startswith("ZSH_PROMPTS_"):
            monkeypatch.delenv(key)

    config_dir = tmp_path / "user-config"
    log_dir = tmp_path / "user-logs"
    monkeypatch.setattr("zsh_prompts.utils._paths.get_user_config_dir", lambda: config_dir)
    monkeypatch.setattr("zsh_prompts.utils._paths.get_log_dir", lambda: log_dir)


@pytest.fixture
def user_config_file(tmp_path: Path) -> Path:
    """Path of the (isolated) user config file, with its directory created."""
    path = tmp_path / "user-config" / "config.toml"
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


@pytest.fixture
def console() -> Console:
    return Console(
        width=70,
        force_terminal=True,
        highlight=False,
        color_system=None,
        legacy_windows=False,
    )


@dataclass(frozen=True, slots=True)
class GitRepo:
    """A real git repository driven through the git executable."""

    root: Path
    home: Path

    def git(self, *args: str, check: bool = True) -> str:
        env = {**os.environ, **_GIT_ENV, "HOME": str(self.home)}
        result = subprocess.run(  # noqa: S603
            ["git", *args],  # noqa: S607
            cwd=self.root,
            env=env,
            capture_output=True,
            text=True,
            check=check,
        )
        return result.stdout

    def write(self, name: str, content: str) -> Path:
        path = self.root / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
        return path

    def commit_file(self, name: str, content: str, message: str | None = None) -> str:
        self.write(name, content)
        self.git("add", name)
        self.git("commit", "-q", "-m", message or f"update {name}")
        return self.git("rev-parse", "HEAD").strip()


@pytest.fixture
def make_git_repo(tmp_path: Path) -> Callable[[str], GitRepo]:
    """Return a factory creating empty repositories on branch ``main``."""
    if shutil.which("git") is None:
        pytest.skip("git executable not available")

    home = tmp_path / "home"
    home.mkdir(exist_ok=True)

    def _make(name: str = "repo") -> GitRepo:
        root = tmp_path / name
        root.mkdir()
        repo = GitRepo(root=root, home=home)
        repo.git("init", "-q")
        repo.git("symbolic-ref", "HEAD", "refs/heads/main")
        repo.git("config", "commit.gpgsign", "false")
        return repo

    return _make


@pytest.fixture
def git_repo(make_git_repo: Callable[[str], GitRepo]) -> GitRepo:
    """An empty repository on branch ``main``."""
    return make_git_repo("repo")
