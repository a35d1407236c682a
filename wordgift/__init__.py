"""Word puzzle engines for a small gift puzzle application.

This package exposes the public API surface via:

- ``wordgift.data.dictionary.WordDictionary``: trie-backed word validation,
  rack search, feasibility checks and wildcard pattern matching.
- ``wordgift.engine.grid_search.WordSearchGrid``: word-search grid solver.
- ``wordgift.engine.rounds`` and ``wordgift.engine.crossword``: round logic
  for the find-words, rearrange and crossword games.
- ``wordgift.state.progress.ProgressStore``: JSON-backed round progress.
"""

from .data.dictionary import DictionaryConfig, WordDictionary
from .engine.grid_search import WordSearchGrid
from .state.progress import ProgressStore

__all__ = [
    "DictionaryConfig",
    "WordDictionary",
    "WordSearchGrid",
    "ProgressStore",
]

__version__ = "0.1.0"
