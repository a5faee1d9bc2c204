"""
=============================================================================
IDENTIFIER GENERATION
=============================================================================

Two flavours of random identifier:

    generate_id()         →  "3f2b8c1e-9a4d-4e6f-b2c1-7d8e9f0a1b2c"
                             Standard random (version 4) UUID.

    generate_word_id()    →  "maple-harbor-9c1e0f2a7b3d4e5f6a7b8c9d"
                             Words for the first bytes, hex for the rest.
                             Easier to read aloud and to spot in logs.

=============================================================================
WORD ID LAYOUT (total_bytes=16, num_words=2)
=============================================================================

    random bytes:  b0 b1 │ b2 b3 │ b4 b5 … b15
                   ──┬── │ ──┬── │ ────┬─────
                     │   │   │   │     └── 12 bytes → 24 hex chars
                     │   │   └── words[b2 * 256 + b3]
                     └── words[b0 * 256 + b1]

    result:  "<word1>-<word2>-<24 hex chars>"

Both generators draw from the OS CSPRNG (os.urandom via uuid / secrets).

generate_word_id() is handed its dictionary; Responder.generate_word_id()
uses the one loaded from HelperConfig.words_path.

=============================================================================
"""

import secrets
import uuid
from typing import Optional, Sequence

from ..errors import InvalidArgumentError


def generate_id() -> str:
    """
    Generate a random UUID in canonical 8-4-4-4-12 form.

    The version nibble is always 4 and the variant bits are always 10.
    """
    return str(uuid.uuid4())


def words_for_bytes(data: bytes, num_words: int, words: Sequence[str]) -> str:
    """
    Format bytes as dictionary words followed by hex.

    Each of the first ``num_words`` byte pairs (big-endian) indexes into
    ``words``. Leftover bytes are appended as lowercase hex.

    Args:
        data: Source bytes; at least num_words * 2 long
        num_words: How many leading byte pairs become words
        words: 65536-entry dictionary

    Returns:
        e.g. "maple-harbor-0a1b2c" for 5 bytes and 2 words

    Raises:
        InvalidArgumentError: If data is too short for num_words
    """
    bytes_of_words = num_words * 2
    if num_words < 0 or bytes_of_words > len(data):
        raise InvalidArgumentError(
            f"num_words * 2 must be <= number of bytes ({num_words} * 2 > {len(data)})"
        )

    parts = [
        words[int.from_bytes(data[i:i + 2], "big")]
        for i in range(0, bytes_of_words, 2)
    ]

    leftover = data[bytes_of_words:]
    if leftover:
        parts.append(leftover.hex())

    return "-".join(parts)


def generate_word_id(
    total_bytes: int = 16,
    num_words: int = 2,
    words: Optional[Sequence[str]] = None,
) -> str:
    """
    Generate a random identifier that starts with readable words.

    Args:
        total_bytes: Random bytes to draw
        num_words: Leading byte pairs rendered as words
        words: 65536-entry dictionary; required when num_words > 0

    Returns:
        Hyphen-joined words, then the remaining bytes as hex

    Raises:
        InvalidArgumentError: If num_words * 2 > total_bytes, either
            argument is negative, or words is missing when needed
    """
    if total_bytes < 0 or num_words < 0:
        raise InvalidArgumentError(
            f"total_bytes and num_words must be >= 0, got {total_bytes} and {num_words}"
        )
    if num_words * 2 > total_bytes:
        raise InvalidArgumentError(
            f"num_words * 2 must be <= total_bytes ({num_words} * 2 > {total_bytes})"
        )

    if words is None and num_words > 0:
        raise InvalidArgumentError(f"a word dictionary is required for num_words={num_words}")

    return words_for_bytes(secrets.token_bytes(total_bytes), num_words, words or ())
