"""runetrie -- character-wise prefix trie."""

from runetrie.errors import InvalidInputError
from runetrie.lexicon import Lexicon
from runetrie.trie import Trie, TrieNode, new_trie

__all__ = [
    "InvalidInputError",
    "Lexicon",
    "Trie",
    "TrieNode",
    "new_trie",
]
