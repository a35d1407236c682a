"""Custom exception hierarchy for the puzzle engines."""


class WordGiftError(Exception):
    """Base exception for puzzle failures."""


class DictionaryLoadError(WordGiftError):
    """Raised when the word list cannot be fetched or read."""


class PuzzleError(WordGiftError):
    """Raised when a puzzle definition is inconsistent."""


class ProgressError(WordGiftError):
    """Raised when progress is recorded against an unknown game or round."""
