from collections.abc import Callable
from dataclasses import dataclass, field

import pytest

from zsh_prompts.git import HeadInfo, StatusTally


@dataclass
class FakeInspector:
    """In-memory RepositoryInspector that records every query.

    Set an attribute to an exception instance to make that query raise it.
    """

    repository: bool | Exception = True
    url: str | None | Exception = None
    head: HeadInfo | Exception = field(default_factory=lambda: HeadInfo.on_branch("main"))
    tally: StatusTally | Exception = field(default_factory=StatusTally)
    counts: tuple[int, int] | Exception = (0, 0)
    stash: bool | Exception = False
    calls: list[str] = field(default_factory=list)
    closed: bool = False

    def _answer[T](self, name: str, value: T | Exception) -> T:
        self.calls.append(name)
        if isinstance(value, Exception):
            raise value
        return value

    def is_repository(self) -> bool:
        return self._answer("is_repository", self.repository)

    def remote_url(self, name: str = "origin") -> str | None:
        return self._answer("remote_url", self.url)

    def head_info(self) -> HeadInfo:
        return self._answer("head_info", self.head)

    def status_tally(self) -> StatusTally:
        return self._answer("status_tally", self.tally)

    def ahead_behind(self, branch: str) -> tuple[int, int]:
        return self._answer("ahead_behind", self.counts)

    def has_stash(self) -> bool:
        return self._answer("has_stash", self.stash)

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def make_inspector() -> Callable[..., FakeInspector]:
    """Return a factory for FakeInspector instances."""
    return FakeInspector
