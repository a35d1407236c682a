"""Data models returned by the dictionary engine and puzzle rounds."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple


@dataclass
class FormResult:
    """Outcome of checking a target word against a rack.

    ``substitutions`` lists ``(position, letter)`` for every character of the
    word that was covered by a wildcard tile, in word order.
    """

    can_form: bool
    substitutions: List[Tuple[int, str]] = field(default_factory=list)

    @property
    def wildcard_letter(self) -> Optional[str]:
        if not self.substitutions:
            return None
        return self.substitutions[0][1]

    @property
    def wildcard_position(self) -> Optional[int]:
        if not self.substitutions:
            return None
        return self.substitutions[0][0]


@dataclass(frozen=True)
class PatternMatch:
    """First dictionary word matching a wildcard pattern."""

    word: str
    wildcard_letter: Optional[str] = None


@dataclass(frozen=True)
class GridCell:
    """A letter cell of a word-search grid."""

    row: int
    col: int
    letter: str
