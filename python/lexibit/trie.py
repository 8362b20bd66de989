"""Prefix tree for O(length) word membership tests."""

from typing import Iterable, Optional


class TrieNode:
    __slots__ = ("children", "is_terminal")

    def __init__(self):
        self.children: Optional[dict[str, "TrieNode"]] = None
        self.is_terminal = False


class WordTrie:
    """Character-per-edge trie holding a set of words."""

    __slots__ = ("root", "_count")

    def __init__(self, words: Iterable[str] = ()):
        self.root = TrieNode()
        self._count = 0
        for word in words:
            self.add(word)

    def add(self, word: str) -> bool:
        """Insert a word. Returns False if it was already present."""
        node = self.root
        for char in word:
            if node.children is None:
                node.children = {}
            child = node.children.get(char)
            if child is None:
                child = node.children[char] = TrieNode()
            node = child
        if node.is_terminal:
            return False
        node.is_terminal = True
        self._count += 1
        return True

    def find(self, word: str) -> bool:
        """Check whether a word was inserted."""
        node = self.root
        for char in word:
            if not node.children:
                return False
            node = node.children.get(char)
            if node is None:
                return False
        return node.is_terminal

    def __contains__(self, word: str) -> bool:
        return self.find(word)

    def __len__(self) -> int:
        return self._count
