"""Word list with trie-backed completion and abbreviation lookups."""

from __future__ import annotations

import logging
import os
from typing import Iterable

from runetrie.constants import COMMENT_PREFIX, DEFAULT_WORD_FILES, LOGGER_NAME
from runetrie.errors import InvalidInputError
from runetrie.trie import Trie

log = logging.getLogger(LOGGER_NAME)


class Lexicon:
    """Word list loaded from a file (or given directly) into a Trie."""

    def __init__(
        self,
        path: str | None = None,
        words: Iterable[str] | None = None,
    ):
        self.trie = Trie()
        self.source: str | None = None
        if words is not None:
            self.trie.update(words)
        else:
            self._load(path)

    def _load(self, path: str | None) -> None:
        search_paths: list[str] = []
        if path:
            if os.path.exists(path):
                search_paths.append(path)
            else:
                log.warning("Word file %s not found -- trying defaults.", path)
        search_paths.extend(DEFAULT_WORD_FILES)

        for candidate in search_paths:
            if not os.path.exists(candidate):
                continue
            added = self._read(candidate)
            if added:
                self.source = candidate
                log.info("Loaded %s words from %s", f"{added:,}", candidate)
                return

        log.warning("No word file found -- lexicon is empty.")

    def _read(self, path: str) -> int:
        added = 0
        try:
            with open(path, "r", encoding="utf-8") as f:
                for line in f:
                    word = line.strip()
                    if not word or word.startswith(COMMENT_PREFIX):
                        continue
                    if not self.trie.insert(word):
                        added += 1
        except UnicodeDecodeError as exc:
            raise InvalidInputError(f"{path}: not valid UTF-8 ({exc})", path) from exc
        except OSError as exc:
            raise InvalidInputError(f"{path}: cannot read ({exc})", path) from exc
        return added

    def add(self, word: str) -> bool:
        """Store *word*; True if it was not there before."""
        return not self.trie.insert(word)

    def complete(self, prefix: str, limit: int | None = None) -> list[str]:
        """Stored words starting with *prefix*, sorted by code point."""
        if limit is not None and limit < 0:
            raise InvalidInputError(f"limit must be non-negative, got {limit}", limit)
        matches = sorted(self.trie.search_by_prefix(prefix))
        if limit is not None:
            return matches[:limit]
        return matches

    def unique_suffix(self, word: str) -> str | None:
        suffix, found = self.trie.find_longest_unique_suffix(word)
        return suffix if found else None

    def abbreviations(self) -> dict[str, str]:
        """Map every stored word to its unique suffix."""
        result: dict[str, str] = {}
        for word in self.trie:
            suffix, _ = self.trie.find_longest_unique_suffix(word)
            result[word] = suffix
        return result

    def __len__(self) -> int:
        return len(self.trie)

    def __contains__(self, word: str) -> bool:
        return word in self.trie
