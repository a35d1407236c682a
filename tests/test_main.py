import io
import json
import logging
import tempfile
import unittest
from contextlib import redirect_stdout
from pathlib import Path

import main
from wordgift.utils.logger import configure_logging

WORDS = "STAR\nSTARE\nTEARS\nRATES\nTRADE\nDEAR\n"


class MainCliTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmpdir = tempfile.TemporaryDirectory()
        self.dictionary = Path(self._tmpdir.name) / "dictionary.txt"
        self.dictionary.write_text(WORDS, encoding="utf-8")

    def tearDown(self) -> None:
        self._tmpdir.cleanup()
        configure_logging(logging.WARNING)

    def run_cli(self, *argv: str, dictionary: Path | None = None):
        source = dictionary or self.dictionary
        out = io.StringIO()
        with redirect_stdout(out):
            code = main.main(["--dictionary", str(source), "--log-level", "critical", *argv])
        return code, out.getvalue()

    def test_check(self) -> None:
        code, output = self.run_cli("check", "stare", "cat", "star")
        self.assertEqual(code, 0)
        self.assertEqual(output.splitlines(), ["STARE: valid", "CAT: invalid", "STAR: invalid"])

    def test_min_length_override(self) -> None:
        code, output = self.run_cli("--min-length", "4", "check", "star")
        self.assertEqual(code, 0)
        self.assertEqual(output.strip(), "STAR: valid")

    def test_rack_defaults_to_discovery_length(self) -> None:
        code, output = self.run_cli("rack", "S", "T", "A", "R")
        self.assertEqual(code, 0)
        self.assertIn("Letters: S, T, A, R", output)
        self.assertIn("Found 1 words:", output)
        self.assertIn("4 letters (1): STAR", output)

    def test_form_exit_codes(self) -> None:
        code, output = self.run_cli("form", "STA*", "STAR")
        self.assertEqual(code, 0)
        self.assertEqual(json.loads(output), {"can_form": True, "substitutions": [[3, "R"]]})

        code, output = self.run_cli("form", "STA", "STAR")
        self.assertEqual(code, 1)
        self.assertFalse(json.loads(output)["can_form"])

    def test_match_exit_codes(self) -> None:
        code, output = self.run_cli("match", "STAR*")
        self.assertEqual(code, 0)
        self.assertEqual(json.loads(output), {"word": "STARE", "wildcard_letter": "E"})

        code, output = self.run_cli("match", "ZZZ*")
        self.assertEqual(code, 1)
        self.assertEqual(output.strip(), "no match")

    def test_grid(self) -> None:
        code, output = self.run_cli("grid", "STAR", "XEXE", "XXXD")
        self.assertEqual(code, 0)
        self.assertIn("4 letters (2): DEAR, STAR", output)
        self.assertIn("5 letters (2): RATES, STARE", output)

    def test_ragged_grid_returns_error_code(self) -> None:
        code, _ = self.run_cli("grid", "STAR", "ST")
        self.assertEqual(code, 2)

    def test_missing_dictionary_returns_error_code(self) -> None:
        code, output = self.run_cli(
            "check", "stare", dictionary=Path(self._tmpdir.name) / "missing.txt"
        )
        self.assertEqual(code, 2)
        self.assertEqual(output, "")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
