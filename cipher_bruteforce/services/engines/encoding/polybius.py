"""
Polybius square.

Each letter is written as its row and column (1-5) in a fixed 5x5 square
of ``abcdefghiklmnopqrstuvwxyz`` (no J). Decoding drops every non-digit
separator, reads the remaining digits in pairs and skips pairs that fall
outside the square.
"""

import string

from cipher_bruteforce.models.schemas import CipherFamily, CipherType
from cipher_bruteforce.services.engines.alphabet import LETTERS
from cipher_bruteforce.services.engines.base import CipherEngine, KeyParams, fixed_label, single_point

POLYBIUS_SQUARE = "abcdefghiklmnopqrstuvwxyz"
COORDINATES = "12345"


def encrypt_polybius(plaintext: str) -> str:
    pairs = []
    for char in plaintext:
        if char not in LETTERS:
            continue
        row, col = divmod(POLYBIUS_SQUARE.index(char.lower().replace("j", "i")), 5)
        pairs.append(COORDINATES[row] + COORDINATES[col])
    return " ".join(pairs)


def decrypt_polybius(ciphertext: str) -> str:
    digits = "".join(char for char in ciphertext if char in string.digits)
    result = []

    for i in range(0, len(digits) - 1, 2):
        row, col = digits[i], digits[i + 1]
        if row in COORDINATES and col in COORDINATES:
            result.append(POLYBIUS_SQUARE[COORDINATES.index(row) * 5 + COORDINATES.index(col)])

    return "".join(result)


def _apply(ciphertext: str, params: KeyParams) -> str:
    return decrypt_polybius(ciphertext)


POLYBIUS_ENGINE = CipherEngine(
    cipher_type=CipherType.POLYBIUS,
    name="Polybius Square",
    family=CipherFamily.ENCODING,
    description="Letters written as row/column coordinates in a fixed 5x5 square (I and J share a cell).",
    apply=_apply,
    keyspace=single_point,
    describe=fixed_label("Polybius Square"),
)
