"""Round bookkeeping for the find-words and rearrange games."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence

from ..data.dictionary import WordDictionary
from ..data.normalization import normalize_rack, normalize_word
from ..utils.logger import get_logger
from .grid_search import Position, WordSearchGrid

LOGGER = get_logger(__name__)


class SubmitOutcome(str, Enum):
    """Result of submitting a word to a round."""

    ACCEPTED = "accepted"
    DUPLICATE = "duplicate"
    NOT_A_WORD = "not_a_word"
    NOT_FORMABLE = "not_formable"
    INVALID_PATH = "invalid_path"


# ----------------------------------------------------------------------
# Find words
# ----------------------------------------------------------------------
@dataclass
class FindWordsPuzzle:
    grid: WordSearchGrid
    min_words: int
    valid_words: Optional[List[str]] = None


class FindWordsRound:
    """Tracks words traced on a word-search grid."""

    def __init__(
        self,
        puzzle: FindWordsPuzzle,
        dictionary: Optional[WordDictionary] = None,
        found_words: Optional[Sequence[str]] = None,
    ) -> None:
        self.puzzle = puzzle
        if puzzle.valid_words is not None:
            valid = [normalize_word(word) for word in puzzle.valid_words]
        elif dictionary is not None:
            valid = puzzle.grid.find_words(dictionary)
        else:
            raise ValueError("FindWordsRound needs valid_words or a dictionary")
        self.valid_words: List[str] = sorted(set(valid))
        self.found_words: List[str] = [normalize_word(word) for word in found_words or []]

    def submit_path(self, path: Sequence[Position]) -> SubmitOutcome:
        word = self.puzzle.grid.word_for_path(path)
        if word is None:
            return SubmitOutcome.INVALID_PATH
        if word in self.found_words:
            return SubmitOutcome.DUPLICATE
        if word not in self.valid_words:
            return SubmitOutcome.NOT_A_WORD
        self.found_words.append(word)
        LOGGER.debug("Found %s (%d/%d)", word, len(self.found_words), self.puzzle.min_words)
        return SubmitOutcome.ACCEPTED

    @property
    def is_complete(self) -> bool:
        return len(self.found_words) >= self.puzzle.min_words

    def missed_words(self) -> List[str]:
        return [word for word in self.valid_words if word not in self.found_words]


# ----------------------------------------------------------------------
# Rearrange
# ----------------------------------------------------------------------
@dataclass
class RearrangePuzzle:
    letters: List[str]
    min_words: int
    min_six_letter_words: int


@dataclass
class RearrangeRound:
    """Tracks words built from a letter rack.

    The round is complete when enough five-letter words and enough
    six-or-more-letter words have been found.
    """

    puzzle: RearrangePuzzle
    dictionary: WordDictionary
    found_words: List[str] = field(default_factory=list)

    def submit(self, word: str) -> SubmitOutcome:
        candidate = normalize_word(word)
        if not self.dictionary.is_valid_word(candidate):
            return SubmitOutcome.NOT_A_WORD
        if candidate in self.found_words:
            return SubmitOutcome.DUPLICATE
        if not self.dictionary.can_form_word(self.puzzle.letters, candidate).can_form:
            return SubmitOutcome.NOT_FORMABLE
        self.found_words.append(candidate)
        return SubmitOutcome.ACCEPTED

    @property
    def five_letter_words(self) -> List[str]:
        return [word for word in self.found_words if len(word) == 5]

    @property
    def six_letter_words(self) -> List[str]:
        return [word for word in self.found_words if len(word) >= 6]

    @property
    def is_complete(self) -> bool:
        return (
            len(self.five_letter_words) >= self.puzzle.min_words
            and len(self.six_letter_words) >= self.puzzle.min_six_letter_words
        )

    def candidates(self) -> List[str]:
        return self.dictionary.find_all_words(normalize_rack(self.puzzle.letters))
