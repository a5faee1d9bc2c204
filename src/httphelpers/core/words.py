"""
Word dictionary for human-readable identifiers.

The dictionary is a plain text file with exactly 65536 lines. Line i is
the word for the 16-bit value i, so two random bytes (read big-endian)
pick one word:

    bytes 0x01 0x02  →  value 0x0102 = 258  →  line 258

The file is read once per path and kept as a tuple for the life of the
process. A missing or malformed file is fatal: WordListError is raised
and nothing is cached, so a later call retries the read.
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Tuple

from ..errors import WordListError

logger = logging.getLogger(__name__)

WORD_COUNT = 65536


def load_words(path: str | Path) -> Tuple[str, ...]:
    """
    Read and validate a word dictionary file.

    A single trailing newline is allowed; blank lines elsewhere are not.
    CRLF line endings are accepted.

    Args:
        path: File to read (UTF-8, newline-delimited)

    Returns:
        Tuple of exactly WORD_COUNT words

    Raises:
        WordListError: If the file can't be read or has the wrong shape
    """
    path = Path(path)

    try:
        text = path.read_bytes().decode("utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Cannot read word list {path}: {e}")
        raise WordListError(f"Cannot read word list {path}: {e}", str(path)) from e

    # Only "\n" delimits entries; other line-break characters are part of a word.
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    words = tuple(line.rstrip("\r") for line in lines)

    if len(words) != WORD_COUNT:
        logger.error(f"Word list {path} has {len(words)} lines, expected {WORD_COUNT}")
        raise WordListError(
            f"Word list {path} has {len(words)} lines, expected {WORD_COUNT}",
            str(path),
        )

    if not all(words):
        blank = words.index("")
        logger.error(f"Word list {path} has a blank entry at line {blank + 1}")
        raise WordListError(
            f"Word list {path} has a blank entry at line {blank + 1}", str(path)
        )

    logger.info(f"Loaded {len(words)} words from {path}")
    return words


@lru_cache(maxsize=None)
def _cached_words(path: str) -> Tuple[str, ...]:
    return load_words(path)


def get_words(path: str | Path) -> Tuple[str, ...]:
    """
    Get the word dictionary, loading it on first use.

    Args:
        path: Dictionary file

    Returns:
        The cached tuple of words for that path
    """
    return _cached_words(str(Path(path)))
