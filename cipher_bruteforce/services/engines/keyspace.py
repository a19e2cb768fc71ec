"""
Lazy enumeration of periodic shift keys.

A key of length L is a base-26 number; ordinal ``n`` in ``[0, 26**L)``
yields its digits most-significant first, so the key space is never
materialised.
"""

import logging
from collections.abc import Iterator

from cipher_bruteforce.services.engines.alphabet import ALPHABET_SIZE, LETTERS, LOWERCASE, letter_index

logger = logging.getLogger(__name__)


def key_from_ordinal(ordinal: int, length: int) -> tuple[int, ...]:
    """Digits of ``ordinal`` in base 26, zero-padded to ``length``."""
    digits = [0] * length
    for position in range(length - 1, -1, -1):
        ordinal, digits[position] = divmod(ordinal, ALPHABET_SIZE)
    return tuple(digits)


def shift_sequences(length: int) -> Iterator[tuple[int, ...]]:
    """All ``26**length`` keys of one length, in counting order."""
    for ordinal in range(ALPHABET_SIZE ** length):
        yield key_from_ordinal(ordinal, length)


def shift_sequences_up_to(max_length: int, min_length: int = 1) -> Iterator[tuple[int, ...]]:
    """All keys with lengths from ``min_length`` to ``max_length``."""
    for length in range(min_length, max_length + 1):
        logger.debug("Trying %d-character keys (%d keys)", length, ALPHABET_SIZE ** length)
        yield from shift_sequences(length)


def keyspace_size(max_length: int, min_length: int = 1) -> int:
    return sum(ALPHABET_SIZE ** length for length in range(min_length, max_length + 1))


def shifts_to_keyword(shifts: tuple[int, ...]) -> str:
    return "".join(LOWERCASE[shift] for shift in shifts)


def keyword_to_shifts(keyword: str) -> tuple[int, ...]:
    """Letters of ``keyword`` as shifts; other characters are dropped."""
    return tuple(letter_index(char) for char in keyword if char in LETTERS)
