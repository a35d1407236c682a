"""Persistent puzzle progress.

Progress is a single JSON document holding the completion state of every
round plus whether the intro has been shown. Only those fields are saved;
navigation state always starts fresh.
"""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

from ..core.constants import GameType
from ..core.exceptions import ProgressError
from ..utils.logger import get_logger

LOGGER = get_logger(__name__)

DEFAULT_PROGRESS_PATH = Path("local_db/puzzle-progress.json")

ROUND_COUNTS: Dict[GameType, int] = {
    GameType.FIND_WORDS: 3,
    GameType.CROSSWORD: 2,
    GameType.REARRANGE: 5,
}


@dataclass
class RoundState:
    completed: bool = False
    found_words: Optional[List[str]] = None
    answers: Optional[Dict[str, str]] = None


@dataclass
class GameProgress:
    rounds: Dict[GameType, List[RoundState]] = field(default_factory=dict)
    seen_intro: bool = False

    @classmethod
    def initial(cls) -> "GameProgress":
        return cls(
            rounds={game: [RoundState() for _ in range(count)] for game, count in ROUND_COUNTS.items()}
        )

    def to_jsonable(self) -> Dict[str, object]:
        doc: Dict[str, object] = {
            game.value: [asdict(state) for state in states] for game, states in self.rounds.items()
        }
        doc["seen_intro"] = self.seen_intro
        return doc

    @classmethod
    def from_jsonable(cls, doc: Dict[str, object]) -> "GameProgress":
        progress = cls.initial()
        for game in GameType:
            saved = doc.get(game.value)
            if not isinstance(saved, list):
                continue
            states = progress.rounds[game]
            for index, item in enumerate(saved[: len(states)]):
                if isinstance(item, dict):
                    states[index] = RoundState(
                        completed=bool(item.get("completed", False)),
                        found_words=item.get("found_words"),
                        answers=item.get("answers"),
                    )
        progress.seen_intro = bool(doc.get("seen_intro", False))
        return progress


class ProgressStore:
    """Load and save :class:`GameProgress` as a JSON file."""

    def __init__(self, path: Path | str = DEFAULT_PROGRESS_PATH) -> None:
        self.path = Path(path)

    def load(self) -> GameProgress:
        if not self.path.exists():
            return GameProgress.initial()
        try:
            doc = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            LOGGER.warning("Ignoring unreadable progress file %s: %s", self.path, exc)
            return GameProgress.initial()
        if not isinstance(doc, dict):
            LOGGER.warning("Ignoring malformed progress file %s", self.path)
            return GameProgress.initial()
        return GameProgress.from_jsonable(doc)

    def save(self, progress: GameProgress) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(
            json.dumps(progress.to_jsonable(), ensure_ascii=False, indent=2), encoding="utf-8"
        )
        LOGGER.debug("Progress saved to %s", self.path)

    def complete_round(
        self,
        progress: GameProgress,
        game: GameType,
        index: int,
        found_words: Optional[List[str]] = None,
        answers: Optional[Dict[str, str]] = None,
    ) -> GameProgress:
        """Mark a round complete, persist, and return the updated progress."""

        states = _rounds_for(progress, game)
        game = GameType(game)
        if not 0 <= index < len(states):
            raise ProgressError(f"{game.value} has no round {index}")
        if answers is not None and not all(isinstance(key, str) for key in answers):
            raise ProgressError("Crossword answers must be keyed by 'row,col' strings")
        updated = list(states)
        updated[index] = RoundState(completed=True, found_words=found_words, answers=answers)
        new_progress = GameProgress(
            rounds={**progress.rounds, game: updated}, seen_intro=progress.seen_intro
        )
        self.save(new_progress)
        LOGGER.info("Completed %s round %d", game.value, index + 1)
        return new_progress


def _rounds_for(progress: GameProgress, game: GameType) -> List[RoundState]:
    try:
        return progress.rounds[GameType(game)]
    except (KeyError, ValueError) as exc:
        raise ProgressError(f"Unknown game type: {game!r}") from exc


def is_game_complete(progress: GameProgress, game: GameType) -> bool:
    return all(state.completed for state in _rounds_for(progress, game))


def is_all_complete(progress: GameProgress) -> bool:
    return all(is_game_complete(progress, game) for game in GameType)


def completed_count(progress: GameProgress, game: GameType) -> int:
    return sum(1 for state in _rounds_for(progress, game) if state.completed)


def total_rounds(game: GameType) -> int:
    return ROUND_COUNTS[GameType(game)]


def next_available_round(progress: GameProgress, game: GameType) -> int:
    """Index of the first unfinished round, or -1 when all are complete."""

    for index, state in enumerate(_rounds_for(progress, game)):
        if not state.completed:
            return index
    return -1
