"""Word-search grid representation and exhaustive solver."""

from __future__ import annotations

from typing import List, Optional, Sequence, Set, Tuple

from ..core.constants import NEIGHBOR_STEPS, Bounds
from ..core.exceptions import PuzzleError
from ..core.models import GridCell
from ..data.dictionary import WordDictionary
from ..data.normalization import normalize_word
from ..utils.logger import get_logger

LOGGER = get_logger(__name__)

Position = Tuple[int, int]


def is_adjacent(a: Position, b: Position) -> bool:
    """True when ``b`` is one king move away from ``a``."""

    row_diff = abs(a[0] - b[0])
    col_diff = abs(a[1] - b[1])
    return row_diff <= 1 and col_diff <= 1 and (row_diff, col_diff) != (0, 0)


class WordSearchGrid:
    """Rectangular letter grid traced through 8-directional neighbours."""

    def __init__(self, rows: Sequence[Sequence[str]]) -> None:
        if not rows or not rows[0]:
            raise PuzzleError("Word-search grid must have at least one cell")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise PuzzleError("Word-search grid rows must all have the same width")
        self.letters: List[List[str]] = [[normalize_word(ch) for ch in row] for row in rows]
        self.bounds = Bounds(rows=len(rows), cols=width)

    @classmethod
    def from_strings(cls, rows: Sequence[str]) -> "WordSearchGrid":
        return cls([list(row) for row in rows])

    def cell(self, row: int, col: int) -> GridCell:
        return GridCell(row=row, col=col, letter=self.letters[row][col])

    def word_for_path(self, path: Sequence[Position]) -> Optional[str]:
        """Return the word spelled by a traced path, or ``None`` if the trace is illegal."""

        if not path:
            return None
        seen: Set[Position] = set()
        previous: Optional[Position] = None
        for position in path:
            row, col = position
            if not self.bounds.contains(row, col) or position in seen:
                return None
            if previous is not None and not is_adjacent(previous, position):
                return None
            seen.add(position)
            previous = position
        return "".join(self.letters[row][col] for row, col in path)

    def find_words(self, dictionary: WordDictionary) -> List[str]:
        """Return every dictionary word traceable in the grid, sorted."""

        found: Set[str] = set()
        for row in range(self.bounds.rows):
            for col in range(self.bounds.cols):
                self._search(dictionary, (row, col), [self.letters[row][col]], {(row, col)}, found)
        LOGGER.debug(
            "Grid %dx%d contains %d words", self.bounds.rows, self.bounds.cols, len(found)
        )
        return sorted(found)

    def _search(
        self,
        dictionary: WordDictionary,
        position: Position,
        path: List[str],
        visited: Set[Position],
        found: Set[str],
    ) -> None:
        word = "".join(path)
        if not dictionary.has_prefix(word):
            return
        if dictionary.is_valid_word(word):
            found.add(word)

        row, col = position
        for dr, dc in NEIGHBOR_STEPS:
            nxt = (row + dr, col + dc)
            if not self.bounds.contains(*nxt) or nxt in visited:
                continue
            visited.add(nxt)
            path.append(self.letters[nxt[0]][nxt[1]])
            self._search(dictionary, nxt, path, visited, found)
            path.pop()
            visited.discard(nxt)
