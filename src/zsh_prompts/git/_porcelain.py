"""Parser for ``git status --porcelain=v2`` output.

Records are classified by their leading characters rather than matched
with regular expressions, so paths containing spaces, newlines or other
special characters can never be mistaken for status fields:

- ``# `` branch header, skipped
- ``1 `` ordinary change
- ``2 `` rename or copy
- ``u `` unmerged entry
- ``? `` untracked entry
- ``! `` ignored entry

Unknown record types are skipped. Ordinary, rename and unmerged records
carry the two-letter XY status at fixed columns 2 and 3, where ``.``
means unchanged. With ``-z`` output a rename record is followed by a
separate record holding the original path, which the parser skips.
"""

from __future__ import annotations

from enum import Enum, auto
from typing import Final

from zsh_prompts.git._models import StatusTally

_NUL: Final = "\0"
_UNCHANGED: Final = "."
_XY_STAGED_COLUMN: Final = 2
_XY_UNSTAGED_COLUMN: Final = 3
_MIN_CHANGE_RECORD_LENGTH: Final = 4


class _State(Enum):
    RECORD = auto()
    ORIGINAL_PATH = auto()


class PorcelainParser:
    """Incremental line classifier for porcelain v2 records.

    Feed records one at a time with ``feed`` and read the accumulated
    counts with ``result``.
    """

    def __init__(self, *, nul_separated: bool = True) -> None:
        """Initialize an empty parser.

        Args:
            nul_separated: Whether records come from ``-z`` output, where a
                rename record is followed by its original path as a record
                of its own.
        """
        self._nul_separated: bool = nul_separated
        self._state: _State = _State.RECORD
        self._staged: int = 0
        self._unstaged: int = 0
        self._untracked: int = 0
        self._conflicts: int = 0

    def feed(self, record: str) -> None:
        """Classify one record and update the counts.

        Args:
            record: One record without its terminator.
        """
        if self._state is _State.ORIGINAL_PATH:
            self._state = _State.RECORD
            return

        if not record:
            return

        match record[:2]:
            case "# ":
                # Branch headers carry no entry counts
                pass
            case "1 ":
                self._feed_change(record)
            case "2 ":
                self._feed_change(record)
                if self._nul_separated:
                    self._state = _State.ORIGINAL_PATH
            case "u ":
                self._conflicts += 1
            case "? ":
                self._untracked += 1
            case _:
                # Ignored entries and unknown record types
                pass

    def _feed_change(self, record: str) -> None:
        if len(record) < _MIN_CHANGE_RECORD_LENGTH:
            return
        if record[_XY_STAGED_COLUMN] != _UNCHANGED:
            self._staged += 1
        if record[_XY_UNSTAGED_COLUMN] != _UNCHANGED:
            self._unstaged += 1

    def result(self) -> StatusTally:
        """Return the counts accumulated so far."""
        return StatusTally(
            staged=self._staged,
            unstaged=self._unstaged,
            untracked=self._untracked,
            conflicts=self._conflicts,
        )

def split_records(data: str) -> tuple[list[str], bool]:
    """Split porcelain output into records.

    Args:
        data: Raw output, NUL-separated (``-z``) or newline-separated.

    Returns:
        Tuple of (records, nul_separated).
    """
    if _NUL in data:
        records = data.split(_NUL)
        nul_separated = True
    else:
        records = data.splitlines()
        nul_separated = False
    # A trailing terminator leaves one empty record behind
    if records and not records[-1]:
        records.pop()
    return records, nul_separated


def parse_porcelain_v2(data: str) -> StatusTally:
    """Parse ``git status --porcelain=v2`` output.

    Args:
        data: Raw command output, with or without ``-z``.

    Returns:
        Entry counts per category.
    """
    records, nul_separated = split_records(data)
    parser = PorcelainParser(nul_separated=nul_separated)
    for record in records:
        parser.feed(record)
    return parser.result()
