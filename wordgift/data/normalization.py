"""Shared helpers for word and rack normalization."""

from __future__ import annotations

from typing import Iterable, List


def normalize_word(text: str) -> str:
    """Return ``text`` trimmed and uppercased."""

    if not text:
        return ""
    return text.strip().upper()


def normalize_rack(tokens: Iterable[str]) -> List[str]:
    """Uppercase every rack token, keeping order and duplicates."""

    return [token.strip().upper() for token in tokens if token and token.strip()]


__all__ = ["normalize_word", "normalize_rack"]
