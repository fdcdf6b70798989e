"""Tests for zsh_prompts.git._common module."""

from pathlib import Path

import pytest
from dulwich.repo import Repo

from zsh_prompts.enums import RemoteHostKind
from zsh_prompts.git import classify_remote, discover_repo, short_commit_id
from zsh_prompts.git._common import decode_bytes, get_worktree_dir, strip_refs_heads


class TestClassifyRemote:
    @pytest.mark.parametrize(
        "url",
        [
            "https://github.com/owner/repo.git",
            "git@github.com:owner/repo.git",
            "ssh://git@github.com/owner/repo",
        ],
    )
    def test_github(self, url: str) -> None:
        assert classify_remote(url) is RemoteHostKind.GITHUB

    @pytest.mark.parametrize(
        "url",
        ["https://gitlab.com/group/project.git", "git@gitlab.com:group/project.git"],
    )
    def test_gitlab(self, url: str) -> None:
        assert classify_remote(url) is RemoteHostKind.GITLAB

    @pytest.mark.parametrize(
        "url",
        [None, "", "https://bitbucket.org/o/r.git", "/srv/git/repo.git", "https://gitlab.example.com/r"],
    )
    def test_other(self, url: str | None) -> None:
        assert classify_remote(url) is RemoteHostKind.OTHER


class TestShortCommitId:
    def test_takes_first_seven_characters(self) -> None:
        assert short_commit_id("abcdef1234") == "abcdef1"

    def test_strips_whitespace_and_decodes(self) -> None:
        assert short_commit_id(b"  1234567890\n") == "1234567"

    def test_short_input_is_kept(self) -> None:
        assert short_commit_id("abc") == "abc"


class TestStripRefsHeads:
    def test_strips_prefix(self) -> None:
        assert strip_refs_heads(b"refs/heads/feature/x") == "feature/x"

    def test_keeps_other_refs(self) -> None:
        assert strip_refs_heads("refs/tags/v1") == "refs/tags/v1"

    def test_none(self) -> None:
        assert strip_refs_heads(None) is None


class TestDecodeBytes:
    def test_bytes(self) -> None:
        assert decode_bytes(b"main") == "main"

    def test_str(self) -> None:
        assert decode_bytes("main") == "main"


class TestDiscoverRepo:
    def test_finds_repo_from_subdirectory(self, tmp_path: Path) -> None:
        Repo.init(str(tmp_path)).close()
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)

        repo = discover_repo(nested)

        assert repo is not None
        try:
            assert get_worktree_dir(repo).resolve() == tmp_path.resolve()
        finally:
            repo.close()

    def test_returns_none_outside_repo(self, tmp_path: Path) -> None:
        assert discover_repo(tmp_path) is None
