"""Built-in puzzle sets, one entry per playable round."""

from __future__ import annotations

from typing import List

from ..core.constants import Direction
from .crossword import CrosswordClue, CrosswordPuzzle
from .grid_search import WordSearchGrid
from .rounds import FindWordsPuzzle, RearrangePuzzle

# Valid words are computed from the grid at round start.
FIND_WORDS_PUZZLES: List[FindWordsPuzzle] = [
    FindWordsPuzzle(
        grid=WordSearchGrid.from_strings(["STARE", "HEARS", "OWLED", "PERSO", "STEPS"]),
        min_words=8,
    ),
    FindWordsPuzzle(
        grid=WordSearchGrid.from_strings(["LIGHT", "ONESA", "VERST", "EDGES", "SPOTS"]),
        min_words=8,
    ),
    FindWordsPuzzle(
        grid=WordSearchGrid.from_strings(["PLAYS", "HONET", "OTESA", "NESTR", "ESSAY"]),
        min_words=8,
    ),
]

CROSSWORD_PUZZLES: List[CrosswordPuzzle] = [
    CrosswordPuzzle(
        width=8,
        height=7,
        theme="Photography",
        clues=[
            CrosswordClue(1, Direction.ACROSS, "Sudden burst of light", "FLASH", 1, 0),
            CrosswordClue(2, Direction.DOWN, "Camera glass", "LENS", 1, 1),
            CrosswordClue(3, Direction.DOWN, "Quick picture", "SNAP", 1, 3),
            CrosswordClue(4, Direction.DOWN, "Magnify the view", "ZOOM", 3, 5),
            CrosswordClue(5, Direction.ACROSS, "Camera capture", "PHOTO", 4, 3),
        ],
    ),
    CrosswordPuzzle(
        width=8,
        height=6,
        theme="Games",
        clues=[
            CrosswordClue(1, Direction.ACROSS, "Roll these to play", "DICE", 0, 0),
            CrosswordClue(2, Direction.DOWN, "Playing ___", "CARD", 0, 2),
            CrosswordClue(3, Direction.ACROSS, "Reputation, for short", "REP", 2, 2),
            CrosswordClue(4, Direction.DOWN, "Chess piece", "PAWN", 2, 4),
            CrosswordClue(5, Direction.ACROSS, "Game victories", "WINS", 4, 4),
        ],
    ),
]

# Ten-letter racks; goals count five-letter and six-plus-letter words.
REARRANGE_PUZZLES: List[RearrangePuzzle] = [
    RearrangePuzzle(letters=list("STAREDLINS"), min_words=8, min_six_letter_words=3),
    RearrangePuzzle(letters=list("PLAYERSONE"), min_words=8, min_six_letter_words=3),
    RearrangePuzzle(letters=list("SWORDSTEAR"), min_words=8, min_six_letter_words=3),
    RearrangePuzzle(letters=list("MASTERGINS"), min_words=10, min_six_letter_words=4),
    RearrangePuzzle(letters=list("PHONESARTH"), min_words=10, min_six_letter_words=5),
]
