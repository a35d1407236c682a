"""Trie-backed word dictionary and rack search."""

from __future__ import annotations

import threading
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Set, Tuple

from ..core.constants import ALPHABET, DEFAULT_MIN_LENGTH, WILDCARD
from ..core.exceptions import DictionaryLoadError
from ..core.models import FormResult, PatternMatch
from ..utils.logger import get_logger
from .normalization import normalize_rack, normalize_word
from .trie import Trie, TrieNode
from .word_source import parse_word_list, read_word_list

LOGGER = get_logger(__name__)


@dataclass
class DictionaryConfig:
    """Configuration for dictionary loading."""

    source: Path | str | None = None
    min_length: int = DEFAULT_MIN_LENGTH
    wildcard: str = WILDCARD
    fetch_timeout: float = 30.0
    executor: Optional[Executor] = None


class WordDictionary:
    """Word set plus prefix trie, loaded once and read-only afterwards.

    Construct one instance and hand it to every consumer. Queries issued
    before :meth:`load` completes resolve to empty results.
    """

    def __init__(self, config: DictionaryConfig) -> None:
        self.config = config
        self._trie = Trie()
        self._words: Set[str] = set()
        self._loaded = False
        self._load_lock = threading.RLock()
        self._load_future: Optional[Future] = None

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------
    @property
    def loaded(self) -> bool:
        return self._loaded

    def __len__(self) -> int:
        return len(self._words)

    def load(self, timeout: Optional[float] = None) -> None:
        """Block until the word list is loaded; raises :class:`DictionaryLoadError`."""

        self.load_async().result(timeout)

    def load_async(self) -> Future:
        """Start the one-time load, or join the pending or finished one."""

        with self._load_lock:
            if self._load_future is not None:
                return self._load_future

            executor = self.config.executor
            owns_executor = executor is None
            if executor is None:
                executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="wordgift-load")
            future = executor.submit(self._fetch_and_build)
            if owns_executor:
                executor.shutdown(wait=False)
            self._load_future = future
            return future

    def load_words(self, words: Iterable[str]) -> None:
        """Load from an in-memory word iterable instead of the configured source."""

        with self._load_lock:
            if self._load_future is not None:
                LOGGER.debug("Dictionary already loaded or loading; ignoring word iterable")
                return
            try:
                self._build(normalize_word(word) for word in words)
            except Exception as exc:
                LOGGER.error("Dictionary load failed: %s", exc)
                raise DictionaryLoadError(str(exc)) from exc
            future: Future = Future()
            future.set_result(None)
            self._load_future = future

    def _fetch_and_build(self) -> None:
        try:
            if self.config.source is None:
                raise DictionaryLoadError("No word list source configured")
            text = read_word_list(self.config.source, timeout=self.config.fetch_timeout)
            self._build(parse_word_list(text, self.config.min_length))
        except Exception as exc:
            LOGGER.error("Dictionary load failed: %s", exc)
            # Reset before the future settles so a retry starts a fresh load.
            with self._load_lock:
                self._load_future = None
            if isinstance(exc, DictionaryLoadError):
                raise
            raise DictionaryLoadError(str(exc)) from exc

    def _build(self, words: Iterable[str]) -> None:
        trie = Trie()
        word_set: Set[str] = set()
        for word in words:
            if len(word) < self.config.min_length:
                continue
            word_set.add(word)
            trie.insert(word)
        # Publish both structures together so readers never see them diverge.
        self._trie = trie
        self._words = word_set
        self._loaded = True
        LOGGER.info(
            "Loaded %d words (min length %d)", len(word_set), self.config.min_length
        )

    def _ready(self, operation: str) -> bool:
        if not self._loaded:
            LOGGER.warning("%s called before the dictionary was loaded", operation)
        return self._loaded

    # ------------------------------------------------------------------
    # Membership & prefix queries
    # ------------------------------------------------------------------
    def is_valid_word(self, word: str) -> bool:
        if not self._ready("is_valid_word"):
            return False
        return normalize_word(word) in self._words

    def has_prefix(self, prefix: str) -> bool:
        if not self._ready("has_prefix"):
            return False
        return self._trie.walk(normalize_word(prefix)) is not None

    # ------------------------------------------------------------------
    # Rack search
    # ------------------------------------------------------------------
    def find_all_words(self, rack: Sequence[str]) -> List[str]:
        """Return every word spellable from a subset of ``rack``, sorted.

        Each rack position is used at most once; a wildcard tile stands in
        for whichever letters continue the current trie path.
        """

        if not self._ready("find_all_words"):
            return []
        tokens = tuple(normalize_rack(rack))
        results: Set[str] = set()
        self._search(self._trie.root, [], tokens, results)
        LOGGER.debug("Rack %s yields %d words", "".join(tokens), len(results))
        return sorted(results)

    def _search(
        self,
        node: TrieNode,
        path: List[str],
        remaining: Tuple[str, ...],
        results: Set[str],
    ) -> None:
        if node.is_word and len(path) >= self.config.min_length:
            results.add("".join(path))

        tried: Set[str] = set()
        for index, token in enumerate(remaining):
            # Equal tokens at the same depth lead to identical subtrees.
            if token in tried:
                continue
            tried.add(token)
            rest = remaining[:index] + remaining[index + 1:]

            if token == self.config.wildcard:
                branches = list(node.children.items())
            else:
                child = node.children.get(token)
                if child is None:
                    continue
                branches = [(token, child)]

            for letter, child in branches:
                path.append(letter)
                self._search(child, path, rest, results)
                path.pop()

    def can_form_word(self, rack: Sequence[str], word: str) -> FormResult:
        """Check whether ``word`` can be spelled from ``rack``.

        Letters are consumed left to right, literal tiles first; a wildcard is
        spent only when no literal copy remains. Every wildcard use is
        recorded as ``(position, letter)``.
        """

        target = normalize_word(word)
        if not target:
            return FormResult(can_form=False)

        available = normalize_rack(rack)
        substitutions: List[Tuple[int, str]] = []
        for position, char in enumerate(target):
            if char in available:
                available.remove(char)
            elif self.config.wildcard in available:
                available.remove(self.config.wildcard)
                substitutions.append((position, char))
            else:
                return FormResult(can_form=False)
        return FormResult(can_form=True, substitutions=substitutions)

    def match_word_pattern(self, pattern: str) -> Optional[PatternMatch]:
        """Resolve a pattern with at most one wildcard to the first alphabetical word."""

        if not self._ready("match_word_pattern"):
            return None
        candidate = normalize_word(pattern)
        marker = self.config.wildcard
        markers = candidate.count(marker)

        if markers == 0:
            return PatternMatch(word=candidate) if candidate in self._words else None
        if markers > 1:
            LOGGER.debug("Rejecting pattern %s with %d wildcards", candidate, markers)
            return None

        position = candidate.index(marker)
        for letter in ALPHABET:
            word = candidate[:position] + letter + candidate[position + 1:]
            if word in self._words:
                return PatternMatch(word=word, wildcard_letter=letter)
        return None
