# ruff: noqa: TC003  # Path needed at runtime for cyclopts parameter parsing
"""The ``git`` command: print the git segments for a prompt."""

import sys
from pathlib import Path
from typing import Annotated

from cyclopts import Parameter

from zsh_prompts.enums import InspectorBackend
from zsh_prompts.git import aggregate
from zsh_prompts.segment import ColorOverrides, render_segments
from zsh_prompts.utils import create_null_logger

from ._context import CLIContext

ColorOption = Annotated[str | None, Parameter(help="Color name or #RGB / #RRGGBB hex value")]


def git_command(
    *,
    color: Annotated[
        str | None, Parameter(help="Color for every git segment without its own color")
    ] = None,
    git_icon_color: Annotated[
        str | None, Parameter(help="Color for the remote and git icons")
    ] = None,
    branch_color: Annotated[
        str | None, Parameter(help="Color for the branch or detached commit")
    ] = None,
    staged_color: ColorOption = None,
    unstaged_color: ColorOption = None,
    untracked_color: ColorOption = None,
    conflict_color: ColorOption = None,
    stashed_color: ColorOption = None,
    clean_color: ColorOption = None,
    ahead_color: ColorOption = None,
    behind_color: ColorOption = None,
    backend: Annotated[
        InspectorBackend | None,
        Parameter(help="Repository inspector (defaults to git.backend from config)"),
    ] = None,
    cwd: Annotated[
        Path | None, Parameter(help="Directory to inspect (defaults to the current directory)")
    ] = None,
) -> None:
    """Print git status segments for the prompt.

    Prints nothing outside a git work tree. Invalid colors are ignored.
    Errors are logged, never printed, so the prompt always renders.

    Args:
        color: Global color override.
        git_icon_color: Color override for the remote and git icons.
        branch_color: Color override for the branch or detached commit.
        staged_color: Color override for the staged count.
        unstaged_color: Color override for the unstaged count.
        untracked_color: Color override for the untracked count.
        conflict_color: Color override for the conflict count.
        stashed_color: Color override for the stash icon.
        clean_color: Color override for the clean icon.
        ahead_color: Color override for the ahead count.
        behind_color: Color override for the behind count.
        backend: Repository inspector to use.
        cwd: Directory to inspect.
    """
    ctx = CLIContext.get_current()
    logger = (ctx.logger or create_null_logger()).bind(command="git")
    git_config = ctx.config.git

    try:
        flag_overrides = ColorOverrides.from_strings(
            {
                "default": color,
                "vcs_icon": git_icon_color,
                "branch": branch_color,
                "staged": staged_color,
                "unstaged": unstaged_color,
                "untracked": untracked_color,
                "conflict": conflict_color,
                "stashed": stashed_color,
                "clean": clean_color,
                "ahead": ahead_color,
                "behind": behind_color,
            },
            logger=logger,
        )
        overrides = flag_overrides.merged_over(ctx.config.color_overrides(logger=logger))
        segments = aggregate(
            overrides,
            cwd=cwd,
            backend=backend or git_config.backend,
            timeout=git_config.timeout_seconds,
            logger=logger,
        )
    except Exception:  # noqa: BLE001 - a broken prompt is worse than a missing segment
        logger.exception("Failed to render git segments")
        return

    sys.stdout.write(render_segments(segments))
