"""Pretty-print helpers for grids and word reports."""

from __future__ import annotations

import sys
from collections import defaultdict
from typing import TYPE_CHECKING, Dict, Iterable, List

if TYPE_CHECKING:
    from ..engine.grid_search import WordSearchGrid


def format_grid(grid: WordSearchGrid) -> str:
    width = grid.bounds.cols
    header_cells = [f"{c:>2}" for c in range(width)]
    lines = ["    " + " ".join(header_cells)]
    lines.append("    " + "-" * (3 * width - 1))
    for r in range(grid.bounds.rows):
        row_render = " ".join(f"{letter:>2}" for letter in grid.letters[r])
        lines.append(f"{r:>2} | {row_render}")
    return "\n".join(lines)


def group_by_length(words: Iterable[str]) -> Dict[int, List[str]]:
    """Bucket words by length; each bucket keeps the input order."""

    buckets: Dict[int, List[str]] = defaultdict(list)
    for word in words:
        buckets[len(word)].append(word)
    return dict(sorted(buckets.items()))


def print_word_report(words: List[str], *, label: str | None = None, stream=None) -> None:
    """Print word counts grouped by length."""

    stream = stream or sys.stdout
    if label:
        print(label, file=stream)
    print(f"Found {len(words)} words:", file=stream)
    for length, bucket in group_by_length(words).items():
        print(f"  {length} letters ({len(bucket)}): {', '.join(bucket)}", file=stream)
