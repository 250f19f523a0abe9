"""
Display states of board cells and keyboard keys.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class CellTag(str, Enum):
    """Base classification of a board cell or keyboard key."""

    # Completed guesses
    CORRECT = "correct"
    PRESENT = "present"
    ABSENT = "absent"

    # Guess being typed, relative to the cursor
    BEFORE_CURSOR = "before-cursor"
    AT_CURSOR = "at-cursor"
    AFTER_CURSOR = "after-cursor"

    def __str__(self) -> str:
        return self.value


# Higher rank wins when merging observations of the same letter
_RANK = {CellTag.ABSENT: 0, CellTag.PRESENT: 1, CellTag.CORRECT: 2}


def best_tag(a: CellTag, b: CellTag) -> CellTag:
    """
    Merge two observations of a letter with correct > present > absent.

    Raises:
        ValueError: If either tag is a cursor tag
    """
    if a not in _RANK or b not in _RANK:
        raise ValueError(f"Cannot rank cursor states {a!s}, {b!s}")
    return a if _RANK[a] >= _RANK[b] else b


@dataclass(frozen=True)
class CellState:
    """
    State of one board cell.

    Attributes:
        tag: Base classification
        hint: Whether the cell's solution letter was already found at this
              position (only set on the guess being typed)
    """
    tag: CellTag
    hint: bool = False

    def __str__(self) -> str:
        # Space-joined token form, usable as CSS classes
        return f"{self.tag} hint" if self.hint else str(self.tag)


CORRECT = CellState(CellTag.CORRECT)
PRESENT = CellState(CellTag.PRESENT)
ABSENT = CellState(CellTag.ABSENT)
BEFORE_CURSOR = CellState(CellTag.BEFORE_CURSOR)
AT_CURSOR = CellState(CellTag.AT_CURSOR)
AFTER_CURSOR = CellState(CellTag.AFTER_CURSOR)
