import tempfile
import unittest
from pathlib import Path

from wordgift.core.constants import Direction, GameType
from wordgift.core.exceptions import PuzzleError
from wordgift.engine.crossword import (
    CrosswordClue,
    CrosswordPuzzle,
    cell_key,
    from_answers,
    parse_cell_key,
    to_answers,
)
from wordgift.state.progress import ProgressStore


def photography_puzzle() -> CrosswordPuzzle:
    return CrosswordPuzzle(
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
    )


def full_entries(puzzle: CrosswordPuzzle):
    entries = {}
    for row, letters in enumerate(puzzle.answer_grid()):
        for col, letter in enumerate(letters):
            if letter is not None:
                entries[(row, col)] = letter.lower()
    return entries


class CrosswordPuzzleTests(unittest.TestCase):
    def test_answer_grid_shares_crossings(self) -> None:
        grid = photography_puzzle().answer_grid()
        self.assertEqual("".join(grid[1][0:5]), "FLASH")
        self.assertEqual("".join(grid[r][1] for r in range(1, 5)), "LENS")
        self.assertEqual("".join(grid[4][3:8]), "PHOTO")
        self.assertIsNone(grid[0][0])

    def test_blank_grid(self) -> None:
        blank = photography_puzzle().blank_grid()
        self.assertIsNone(blank[0][0])
        self.assertEqual(blank[1][0], "")

    def test_clue_numbers(self) -> None:
        numbers = photography_puzzle().clue_numbers()
        self.assertEqual(numbers[1][0], 1)
        self.assertEqual(numbers[4][3], 5)
        self.assertIsNone(numbers[0][0])

    def test_check_answers(self) -> None:
        puzzle = photography_puzzle()
        entries = full_entries(puzzle)
        self.assertTrue(puzzle.is_complete(entries))

        entries[(1, 0)] = "X"
        del entries[(6, 5)]
        self.assertFalse(puzzle.is_complete(entries))
        self.assertEqual(puzzle.wrong_cells(entries), [(1, 0), (6, 5)])

    def test_conflicting_clues(self) -> None:
        puzzle = CrosswordPuzzle(
            width=4,
            height=4,
            clues=[
                CrosswordClue(1, Direction.ACROSS, "", "DICE", 0, 0),
                CrosswordClue(2, Direction.DOWN, "", "WINS", 0, 2),
            ],
        )
        with self.assertRaises(PuzzleError):
            puzzle.answer_grid()

    def test_clue_leaving_grid(self) -> None:
        puzzle = CrosswordPuzzle(
            width=3, height=3, clues=[CrosswordClue(1, Direction.ACROSS, "", "DICE", 0, 0)]
        )
        with self.assertRaises(PuzzleError):
            puzzle.answer_grid()

    def test_clue_starting_outside_grid(self) -> None:
        puzzle = CrosswordPuzzle(
            width=3, height=3, clues=[CrosswordClue(1, Direction.DOWN, "", "CAT", -1, 0)]
        )
        with self.assertRaises(PuzzleError):
            puzzle.clue_numbers()

    def test_answers_are_normalized(self) -> None:
        clue = CrosswordClue(1, Direction.ACROSS, "Sudden burst of light", " flash ", 0, 0)
        self.assertEqual(clue.answer, "FLASH")
        self.assertEqual(list(clue.cells()), [(0, 0), (0, 1), (0, 2), (0, 3), (0, 4)])

        puzzle = CrosswordPuzzle(width=5, height=1, clues=[clue])
        self.assertEqual(puzzle.answer_grid(), [list("FLASH")])


class AnswerKeyTests(unittest.TestCase):
    def test_cell_keys(self) -> None:
        self.assertEqual(cell_key((4, 12)), "4,12")
        self.assertEqual(parse_cell_key("4,12"), (4, 12))

    def test_malformed_cell_key(self) -> None:
        for key in ("bad", "1,2,3", "a,b", "1-2", ""):
            with self.assertRaises(PuzzleError):
                parse_cell_key(key)

    def test_saved_answers_round_trip(self) -> None:
        puzzle = photography_puzzle()
        answers = to_answers(full_entries(puzzle))
        self.assertEqual(answers["1,0"], "F")
        self.assertTrue(puzzle.is_complete(from_answers(answers)))

        with tempfile.TemporaryDirectory() as tmpdir:
            store = ProgressStore(Path(tmpdir) / "progress.json")
            store.complete_round(store.load(), GameType.CROSSWORD, 0, answers=answers)
            state = store.load().rounds[GameType.CROSSWORD][0]

        self.assertTrue(state.completed)
        self.assertTrue(puzzle.is_complete(from_answers(state.answers)))


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
