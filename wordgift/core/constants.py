"""Shared constants and enumerations for the puzzle engines."""

from __future__ import annotations

import string
from dataclasses import dataclass
from enum import Enum
from typing import Tuple

WILDCARD = "*"
ALPHABET = string.ascii_uppercase

# Rack-validation dictionary versus grid/rack discovery word lists.
DEFAULT_MIN_LENGTH = 5
DISCOVERY_MIN_LENGTH = 4


class GameType(str, Enum):
    """The mini-games tracked by the progress store."""

    FIND_WORDS = "findWords"
    CROSSWORD = "crossword"
    REARRANGE = "rearrange"


class Direction(str, Enum):
    """Crossword answer directions."""

    ACROSS = "across"
    DOWN = "down"


NEIGHBOR_STEPS: Tuple[Tuple[int, int], ...] = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1), (0, 1),
    (1, -1), (1, 0), (1, 1),
)


@dataclass(frozen=True)
class Bounds:
    """Simple rectangle bounds helper."""

    rows: int
    cols: int

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols
