"""Fetch and parse newline-delimited word lists."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator

import requests

from ..core.exceptions import DictionaryLoadError
from ..utils.logger import get_logger
from .normalization import normalize_word

LOGGER = get_logger(__name__)


def is_remote(source: Path | str) -> bool:
    return isinstance(source, str) and source.lower().startswith(("http://", "https://"))


def read_word_list(source: Path | str, timeout: float = 30.0) -> str:
    """Return the raw text of the word list at ``source``.

    ``source`` is either a local path or an ``http(s)://`` URL. Every failure
    is reported as :class:`DictionaryLoadError`.
    """

    if is_remote(source):
        LOGGER.info("Fetching word list from %s", source)
        try:
            response = requests.get(str(source), timeout=timeout)
            response.raise_for_status()
        except requests.RequestException as exc:
            raise DictionaryLoadError(f"Word list request failed: {exc}") from exc
        return response.text

    path = Path(source)
    LOGGER.info("Reading word list from %s", path)
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise DictionaryLoadError(f"Cannot read word list {path}: {exc}") from exc


def parse_word_list(text: str, min_length: int) -> Iterator[str]:
    """Yield normalized words of at least ``min_length`` letters."""

    for line in text.split("\n"):
        word = normalize_word(line)
        if len(word) >= min_length:
            yield word


__all__ = ["is_remote", "read_word_list", "parse_word_list"]
