"""Tests for zsh_prompts.git._aggregate module."""

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
from pytest_mock import MockerFixture

from zsh_prompts.enums import InspectorBackend, RemoteHostKind
from zsh_prompts.git import (
    DulwichInspector,
    GitProcessInspector,
    HeadInfo,
    RepositoryStatus,
    StatusTally,
    aggregate,
    build_segments,
    create_inspector,
)
from zsh_prompts.git._icons import (
    CLEAN_ICON,
    CONFLICT_ICON,
    REMOTE_ICONS,
    STASH_ICON,
    VCS_ICON,
)
from zsh_prompts.segment import ColorOverrides, NamedColor, RgbColor, Segment

MakeInspector = Callable[..., Any]


def _status(**kwargs: Any) -> RepositoryStatus:
    kwargs.setdefault("head", HeadInfo.on_branch("main"))
    return RepositoryStatus(is_repository=True, **kwargs)


def _texts(segments: list[Segment]) -> list[str]:
    return [segment.text for segment in segments]


class TestBuildSegments:
    def test_not_a_repository_is_empty(self) -> None:
        assert build_segments(RepositoryStatus.not_a_repository()) == []

    def test_staged_changes_on_main(self) -> None:
        segments = build_segments(_status(tally=StatusTally(staged=2)))

        assert _texts(segments) == [REMOTE_ICONS[RemoteHostKind.OTHER], VCS_ICON, "main", "+2"]
        assert CLEAN_ICON not in _texts(segments)

    def test_clean_and_behind(self) -> None:
        segments = build_segments(_status(behind=3))

        assert _texts(segments) == [
            REMOTE_ICONS[RemoteHostKind.OTHER],
            VCS_ICON,
            "main",
            CLEAN_ICON,
            "↓3",
        ]
        assert segments[-1].color is NamedColor.RED

    def test_detached_head(self) -> None:
        segments = build_segments(_status(head=HeadInfo.detached("abcdef1234")))

        assert segments[2] == Segment(":abcdef1", NamedColor.RED)
        assert segments[3] == Segment(CLEAN_ICON, NamedColor.GREEN)

    def test_detached_honors_branch_override(self) -> None:
        overrides = ColorOverrides(branch=NamedColor.CYAN)
        segments = build_segments(_status(head=HeadInfo.detached("abcdef1234")), overrides)

        assert segments[2].color is NamedColor.CYAN

    def test_unborn_shows_branch_name(self) -> None:
        segments = build_segments(_status(head=HeadInfo.unborn("trunk")))
        assert segments[2] == Segment("trunk", NamedColor.YELLOW)

    def test_unborn_without_name_shows_unknown(self) -> None:
        segments = build_segments(_status(head=HeadInfo.unborn()))
        assert segments[2].text == "unknown"

    def test_every_category_in_fixed_order(self) -> None:
        status = _status(
            remote_host_kind=RemoteHostKind.GITHUB,
            tally=StatusTally(staged=1, unstaged=2, untracked=3, conflicts=4),
            has_stash=True,
            ahead=5,
            behind=6,
        )

        segments = build_segments(status)

        assert segments == [
            Segment(REMOTE_ICONS[RemoteHostKind.GITHUB], NamedColor.BLUE),
            Segment(VCS_ICON, NamedColor.WHITE),
            Segment("main", NamedColor.YELLOW),
            Segment("+1", NamedColor.GREEN),
            Segment("!2", NamedColor.RED),
            Segment("?3", NamedColor.CYAN),
            Segment(f"{CONFLICT_ICON}4", NamedColor.MAGENTA),
            Segment(STASH_ICON, NamedColor.BLUE),
            Segment("↑5", NamedColor.WHITE),
            Segment("↓6", NamedColor.RED),
        ]

    def test_stash_alone_suppresses_clean(self) -> None:
        texts = _texts(build_segments(_status(has_stash=True)))
        assert STASH_ICON in texts
        assert CLEAN_ICON not in texts

    @pytest.mark.parametrize("kind", list(RemoteHostKind))
    def test_remote_icon_per_host(self, kind: RemoteHostKind) -> None:
        segments = build_segments(_status(remote_host_kind=kind))
        assert segments[0].text == REMOTE_ICONS[kind]

    def test_global_and_role_overrides(self) -> None:
        overrides = ColorOverrides(default=NamedColor.BLACK, staged=RgbColor(1, 2, 3))
        segments = build_segments(_status(tally=StatusTally(staged=1, unstaged=1)), overrides)

        assert segments[3].color == RgbColor(1, 2, 3)
        assert all(s.color is NamedColor.BLACK for i, s in enumerate(segments) if i != 3)

    def test_remote_icon_uses_vcs_icon_override(self) -> None:
        segments = build_segments(_status(), ColorOverrides(vcs_icon=NamedColor.GREEN))
        assert segments[0].color is NamedColor.GREEN
        assert segments[1].color is NamedColor.GREEN


class TestAggregate:
    def test_uses_given_inspector_without_closing_it(self, make_inspector: MakeInspector) -> None:
        inspector = make_inspector(tally=StatusTally(staged=2))

        segments = aggregate(inspector=inspector)

        assert _texts(segments)[2:] == ["main", "+2"]
        assert inspector.closed is False

    def test_not_a_repository(self, make_inspector: MakeInspector) -> None:
        inspector = make_inspector(repository=False)
        assert aggregate(inspector=inspector) == []
        assert inspector.calls == ["is_repository"]

    def test_is_idempotent(self, make_inspector: MakeInspector) -> None:
        inspector = make_inspector(tally=StatusTally(unstaged=1), counts=(1, 0))
        assert aggregate(inspector=inspector) == aggregate(inspector=inspector)

    def test_creates_and_closes_inspector(
        self, make_inspector: MakeInspector, mocker: MockerFixture
    ) -> None:
        inspector = make_inspector()
        factory = mocker.patch(
            "zsh_prompts.git._aggregate.create_inspector", return_value=inspector
        )

        _ = aggregate(cwd="/some/dir", backend="process", timeout=1.0)

        factory.assert_called_once_with("process", "/some/dir", timeout=1.0, logger=mocker.ANY)
        assert inspector.closed is True

    def test_closes_inspector_when_snapshot_raises(
        self, make_inspector: MakeInspector, mocker: MockerFixture
    ) -> None:
        inspector = make_inspector()
        mocker.patch("zsh_prompts.git._aggregate.create_inspector", return_value=inspector)
        mocker.patch(
            "zsh_prompts.git._aggregate.take_snapshot", side_effect=RuntimeError("boom")
        )

        with pytest.raises(RuntimeError):
            _ = aggregate()
        assert inspector.closed is True


class TestCreateInspector:
    def test_dulwich(self, tmp_path: Path) -> None:
        assert isinstance(create_inspector(InspectorBackend.DULWICH, tmp_path), DulwichInspector)

    def test_process_from_string(self, tmp_path: Path) -> None:
        inspector = create_inspector("process", tmp_path, timeout=3.0)
        assert isinstance(inspector, GitProcessInspector)
        assert inspector.cwd == tmp_path

    def test_unknown_backend(self) -> None:
        with pytest.raises(ValueError):
            _ = create_inspector("svn")
