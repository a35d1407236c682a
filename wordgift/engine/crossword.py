"""Fixed crossword puzzles and answer checking."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple

from ..core.constants import Bounds, Direction
from ..core.exceptions import PuzzleError
from ..data.normalization import normalize_word

Cell = Tuple[int, int]


def cell_key(cell: Cell) -> str:
    """Encode a cell as the ``"row,col"`` key used in saved answers."""

    return f"{cell[0]},{cell[1]}"


def parse_cell_key(key: str) -> Cell:
    try:
        row, col = key.split(",")
        return int(row), int(col)
    except ValueError as exc:
        raise PuzzleError(f"Malformed cell key: {key!r}") from exc


def to_answers(entries: Dict[Cell, str]) -> Dict[str, str]:
    """Convert grid entries into the string-keyed form stored with progress."""

    return {cell_key(cell): normalize_word(letter) for cell, letter in entries.items()}


def from_answers(answers: Dict[str, str]) -> Dict[Cell, str]:
    return {parse_cell_key(key): letter for key, letter in answers.items()}


@dataclass
class CrosswordClue:
    number: int
    direction: Direction
    clue: str
    answer: str
    row: int
    col: int

    def __post_init__(self) -> None:
        self.answer = normalize_word(self.answer)

    def cells(self) -> Iterator[Cell]:
        for index in range(len(self.answer)):
            if self.direction == Direction.DOWN:
                yield self.row + index, self.col
            else:
                yield self.row, self.col + index


@dataclass
class CrosswordPuzzle:
    width: int
    height: int
    clues: List[CrosswordClue] = field(default_factory=list)
    theme: str = ""

    @property
    def bounds(self) -> Bounds:
        return Bounds(rows=self.height, cols=self.width)

    def _empty(self) -> List[List[Optional[str]]]:
        return [[None] * self.width for _ in range(self.height)]

    def answer_grid(self) -> List[List[Optional[str]]]:
        """Solution letters per cell; ``None`` marks a block."""

        grid = self._empty()
        for clue in self.clues:
            for letter, (row, col) in zip(clue.answer, clue.cells()):
                if not self.bounds.contains(row, col):
                    raise PuzzleError(f"Clue {clue.number} {clue.direction.value} leaves the grid")
                existing = grid[row][col]
                if existing is not None and existing != letter:
                    raise PuzzleError(
                        f"Clue {clue.number} {clue.direction.value} conflicts at ({row},{col})"
                    )
                grid[row][col] = letter
        return grid

    def blank_grid(self) -> List[List[Optional[str]]]:
        """Playable cells as empty strings, blocks as ``None``."""

        return [
            ["" if letter is not None else None for letter in row]
            for row in self.answer_grid()
        ]

    def clue_numbers(self) -> List[List[Optional[int]]]:
        grid: List[List[Optional[int]]] = [[None] * self.width for _ in range(self.height)]
        for clue in self.clues:
            if not self.bounds.contains(clue.row, clue.col):
                raise PuzzleError(f"Clue {clue.number} starts outside the grid")
            grid[clue.row][clue.col] = clue.number
        return grid

    def wrong_cells(self, entries: Dict[Cell, str]) -> List[Cell]:
        """Playable cells whose entry is missing or differs from the answer."""

        wrong: List[Cell] = []
        for row, letters in enumerate(self.answer_grid()):
            for col, letter in enumerate(letters):
                if letter is None:
                    continue
                if normalize_word(entries.get((row, col), "")) != letter:
                    wrong.append((row, col))
        return wrong

    def is_complete(self, entries: Dict[Cell, str]) -> bool:
        return not self.wrong_cells(entries)
