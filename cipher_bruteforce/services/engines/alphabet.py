"""
Letter arithmetic shared by the cipher engines.

Letters are ASCII only and encoded as 0-25 (``a``/``A`` = 0). Case is
preserved by every table here; anything that is not an ASCII letter is
left alone and never consumes a key-stream position.
"""

import string
from collections.abc import Mapping, Sequence

ALPHABET_SIZE = 26
LOWERCASE = string.ascii_lowercase
UPPERCASE = string.ascii_uppercase
LETTERS = frozenset(string.ascii_letters)


def letter_index(char: str) -> int:
    """Position of an ASCII letter in the alphabet, ignoring case."""
    return ord(char.lower()) - ord("a")


def _build_table(mapping) -> dict[str, str]:
    table = {}
    for alphabet in (LOWERCASE, UPPERCASE):
        for index, char in enumerate(alphabet):
            table[char] = alphabet[mapping(index) % ALPHABET_SIZE]
    return table


# SHIFT_TABLES[k] maps x -> x + k.
SHIFT_TABLES: tuple[dict[str, str], ...] = tuple(
    _build_table(lambda x, k=k: x + k) for k in range(ALPHABET_SIZE)
)

# REFLECT_TABLES[k] maps x -> k - x.
REFLECT_TABLES: tuple[dict[str, str], ...] = tuple(
    _build_table(lambda x, k=k: k - x) for k in range(ALPHABET_SIZE)
)

SHIFT_TRANSLATIONS = tuple(str.maketrans(table) for table in SHIFT_TABLES)


def letter_table(mapping) -> dict[str, str]:
    """Case-preserving substitution table for an index mapping ``x -> f(x)``."""
    return _build_table(mapping)


def shift_letter(char: str, offset: int) -> str:
    """Shift a single letter forward by ``offset`` (negative shifts back)."""
    return SHIFT_TABLES[offset % ALPHABET_SIZE].get(char, char)


def shift_text(text: str, offset: int) -> str:
    """Shift every letter of ``text`` forward by ``offset``."""
    return text.translate(SHIFT_TRANSLATIONS[offset % ALPHABET_SIZE])


def transform_periodic(text: str, tables: Sequence[Mapping[str, str]]) -> str:
    """
    Substitute letters through a repeating sequence of tables.

    Letter number ``i`` (counting letters only) goes through
    ``tables[i % len(tables)]``.
    """
    period = len(tables)
    out = []
    position = 0

    for char in text:
        if char in LETTERS:
            out.append(tables[position % period][char])
            position += 1
        else:
            out.append(char)

    return "".join(out)
