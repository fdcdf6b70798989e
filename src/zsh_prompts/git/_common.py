"""Common git utility functions.

This module provides shared helpers used by both repository inspectors,
including repository discovery, ref-name handling, byte/string conversion
and remote classification.
"""

from __future__ import annotations

from pathlib import Path
from typing import Final

from dulwich.errors import NotGitRepository
from dulwich.repo import Repo

from zsh_prompts.enums import RemoteHostKind

SHORT_COMMIT_LENGTH: Final = 7
HEADS_PREFIX: Final = "refs/heads/"
REMOTES_PREFIX: Final = "refs/remotes/"
STASH_REF: Final = "refs/stash"
DEFAULT_REMOTE: Final = "origin"


def decode_bytes(value: bytes | str) -> str:
    """Decode bytes to str if needed.

    Args:
        value: A bytes or str value.

    Returns:
        The value as a string.
    """
    if isinstance(value, bytes):
        return value.decode()
    return value


def discover_repo(cwd: Path | str | None = None) -> Repo | None:
    """Discover git repository from the given directory.

    Args:
        cwd: Directory to start search from. If None, uses current directory.

    Returns:
        Repo instance if found, None otherwise.
    """
    try:
        if cwd is not None:
            return Repo.discover(str(cwd))
        return Repo.discover()
    except NotGitRepository:
        return None


def get_worktree_dir(repo: Repo) -> Path:
    """Get the worktree directory for a repository.

    Args:
        repo: The repository instance.

    Returns:
        Path to the worktree directory.
    """
    repo_path = repo.path
    if isinstance(repo_path, bytes):
        repo_path = repo_path.decode()

    path = Path(repo_path)
    # If path is .git directory, return parent
    if path.name == ".git":
        return path.parent
    return path


def strip_refs_heads(branch: bytes | str | None) -> str | None:
    """Strip refs/heads/ prefix from a branch reference.

    Args:
        branch: Branch reference (bytes or str), possibly with refs/heads/ prefix.

    Returns:
        Branch name without prefix, or None if input is None.
    """
    if branch is None:
        return None
    branch_str = decode_bytes(branch)
    if branch_str.startswith(HEADS_PREFIX):
        return branch_str[len(HEADS_PREFIX) :]
    return branch_str


def short_commit_id(commit_id: bytes | str) -> str:
    """Abbreviate a hex commit id to its first seven characters."""
    return decode_bytes(commit_id).strip()[:SHORT_COMMIT_LENGTH]


def classify_remote(url: str | None) -> RemoteHostKind:
    """Classify a remote URL by hosting provider.

    Matching is a plain substring test, so both HTTPS and SSH forms of
    GitHub and GitLab URLs are recognized.

    Args:
        url: Remote URL, or None when the remote is not configured.

    Returns:
        The hosting provider, ``OTHER`` for unknown hosts or a missing URL.
    """
    if not url:
        return RemoteHostKind.OTHER
    if "github.com" in url:
        return RemoteHostKind.GITHUB
    if "gitlab.com" in url:
        return RemoteHostKind.GITLAB
    return RemoteHostKind.OTHER
