"""Package-wide defaults."""

from __future__ import annotations

import os

LOGGER_NAME = "runetrie"

# Lines starting with this are ignored when reading a word file.
COMMENT_PREFIX = "#"

# Tried in order by Lexicon when no explicit path loads.
DEFAULT_WORD_FILES: list[str] = [
    "words.txt",
    "dictionary.txt",
    os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "words.txt"),
    "/usr/share/dict/words",
]
