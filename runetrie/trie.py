"""Character-wise prefix trie for word, prefix and unique-suffix lookups."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator

from runetrie.constants import LOGGER_NAME
from runetrie.errors import InvalidInputError

log = logging.getLogger(LOGGER_NAME)


class TrieNode:
    """Single node in the prefix trie."""

    __slots__ = ("children", "is_terminal")

    def __init__(self):
        self.children: dict[str, TrieNode] = {}
        self.is_terminal: bool = False


def _as_text(value: str | bytes) -> str:
    """Return *value* as a str, rejecting anything that is not valid text.

    Bytes are decoded as UTF-8. Strings carrying lone surrogates (e.g. from
    ``surrogateescape``) are rejected since they do not name characters.
    """
    if isinstance(value, bytes):
        try:
            return value.decode("utf-8")
        except UnicodeDecodeError as exc:
            log.debug("Rejected undecodable input %r", value)
            raise InvalidInputError(f"not valid UTF-8: {exc}", value) from exc
    if not isinstance(value, str):
        log.debug("Rejected input of type %s", type(value).__name__)
        raise InvalidInputError(
            f"expected str or bytes, got {type(value).__name__}", value
        )
    try:
        value.encode("utf-8")
    except UnicodeEncodeError as exc:
        log.debug("Rejected input with lone surrogates %r", value)
        raise InvalidInputError(f"not a valid character sequence: {exc}", value) from exc
    return value


class Trie:
    """Prefix trie over characters.

    Children are kept in a plain dict, so enumeration follows the order in
    which edges were first created.

    >>> t = Trie(["cat", "car", "cart"])
    >>> t.contains("ca"), t.starts_with("ca")
    (False, True)
    >>> t.search_by_prefix("car")
    ['car', 'cart']
    """

    def __init__(self, words: Iterable[str | bytes] | None = None):
        self.root = TrieNode()
        self._size = 0
        if words is not None:
            self.update(words)

    # public API

    def insert(self, word: str | bytes) -> bool:
        """Add *word*. Returns True if it was already stored."""
        word = _as_text(word)
        node = self.root
        for ch in word:
            child = node.children.get(ch)
            if child is None:
                child = TrieNode()
                node.children[ch] = child
            node = child

        existed = node.is_terminal
        if not existed:
            node.is_terminal = True
            self._size += 1
        return existed

    def update(self, words: Iterable[str | bytes]) -> int:
        """Insert every word in *words*; returns how many were new."""
        added = 0
        for word in words:
            if not self.insert(word):
                added += 1
        return added

    def contains(self, word: str | bytes) -> bool:
        node = self._walk(_as_text(word))
        return node is not None and node.is_terminal

    def starts_with(self, prefix: str | bytes) -> bool:
        return self._walk(_as_text(prefix)) is not None

    def size(self) -> int:
        """Number of distinct words stored."""
        return self._size

    def search_by_prefix(self, prefix: str | bytes) -> list[str]:
        """All stored words beginning with *prefix*, *prefix* itself included.

        Depth-first, pre-order; siblings come out in edge-creation order.
        Returns an empty list when no word starts with *prefix*.
        """
        prefix = _as_text(prefix)
        node = self._walk(prefix)
        if node is None:
            return []

        words: list[str] = []
        stack: list[tuple[TrieNode, str]] = [(node, prefix)]
        while stack:
            current, acc = stack.pop()
            if current.is_terminal:
                words.append(acc)
            # reversed so the first child is popped first
            for ch, child in reversed(current.children.items()):
                stack.append((child, acc + ch))
        return words

    def find_longest_unique_suffix(self, word: str | bytes) -> tuple[str, bool]:
        """Trailing part of *word* that no other stored word shares.

        Walking *word*, every node past which another word branches off or
        ends cuts the suffix back to nothing. Returns ``(suffix, found)``;
        ``found`` is False when *word* is not stored. A stored word that is
        a strict prefix of other words yields ``("", True)``.
        """
        word = _as_text(word)
        if not word:
            return "", self.root.is_terminal

        suffix = ""
        node = self.root
        for ch in word[:-1]:
            node = node.children.get(ch)
            if node is None:
                return "", False
            if len(node.children) > 1 or node.is_terminal:
                suffix = ""
            else:
                suffix += ch

        last = word[-1]
        node = node.children.get(last)
        if node is None or not node.is_terminal:
            return "", False
        if node.children:
            return "", True
        return suffix + last, True

    def __len__(self) -> int:
        return self._size

    def __contains__(self, word: str | bytes) -> bool:
        return self.contains(word)

    def __iter__(self) -> Iterator[str]:
        return iter(self.search_by_prefix(""))

    def __repr__(self) -> str:
        return f"Trie(size={self._size})"

    def _walk(self, s: str) -> TrieNode | None:
        node = self.root
        for ch in s:
            node = node.children.get(ch)
            if node is None:
                return None
        return node


def new_trie() -> Trie:
    """Create an empty trie."""
    return Trie()
