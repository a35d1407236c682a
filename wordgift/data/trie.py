"""Prefix tree backing dictionary lookups and rack search."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional


@dataclass
class TrieNode:
    """One prefix; ``is_word`` marks a complete dictionary word."""

    children: Dict[str, "TrieNode"] = field(default_factory=dict)
    is_word: bool = False


class Trie:
    """Rooted prefix tree over uppercase letters.

    Nodes are only ever added, never removed or rewritten, so a loaded trie
    can be shared read-only between callers.
    """

    def __init__(self) -> None:
        self.root = TrieNode()
        self._size = 0

    def insert(self, word: str) -> None:
        node = self.root
        for char in word:
            child = node.children.get(char)
            if child is None:
                child = node.children[char] = TrieNode()
            node = child
        if not node.is_word:
            node.is_word = True
            self._size += 1

    def walk(self, prefix: str) -> Optional[TrieNode]:
        """Return the node reached by ``prefix`` or ``None`` if it leaves the trie."""

        node = self.root
        for char in prefix:
            node = node.children.get(char)
            if node is None:
                return None
        return node

    def __len__(self) -> int:
        return self._size
