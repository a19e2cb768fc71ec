"""
Caesar cipher.

Each letter is shifted by a fixed amount. With only 26 possible keys it is
broken by trying every shift.
"""

from collections.abc import Iterator

from cipher_bruteforce.core.config import Settings
from cipher_bruteforce.core.exceptions import InvalidKeyError
from cipher_bruteforce.models.schemas import CipherFamily, CipherType
from cipher_bruteforce.services.engines.alphabet import ALPHABET_SIZE, LETTERS, letter_index, shift_text
from cipher_bruteforce.services.engines.base import CipherEngine, KeyParams, ShiftKey


def encrypt_caesar(plaintext: str, shift: int) -> str:
    """Shift each letter forward by ``shift``."""
    return shift_text(plaintext, shift)


def decrypt_caesar(ciphertext: str, shift: int) -> str:
    """Shift each letter backward by ``shift``."""
    return shift_text(ciphertext, -shift)


def _apply(ciphertext: str, params: KeyParams) -> str:
    return decrypt_caesar(ciphertext, params.shift)


def _keyspace(settings: Settings) -> Iterator[KeyParams]:
    for shift in range(ALPHABET_SIZE):
        yield ShiftKey(shift)


def _describe(params: KeyParams) -> str:
    return f"shift {params.shift}"


def _parse_key(raw: str) -> KeyParams:
    if raw in LETTERS:
        # A single letter names the shift ("d" -> 3)
        return ShiftKey(letter_index(raw))
    try:
        shift = int(raw)
    except ValueError:
        raise InvalidKeyError(CipherType.CAESAR.value, raw, "expected a shift or a single letter") from None
    return ShiftKey(shift % ALPHABET_SIZE)


CAESAR_ENGINE = CipherEngine(
    cipher_type=CipherType.CAESAR,
    name="Caesar Cipher",
    family=CipherFamily.MONOALPHABETIC,
    description=(
        "A substitution cipher where each letter is shifted by a fixed amount. "
        "Named after Julius Caesar who used it for military communications."
    ),
    apply=_apply,
    keyspace=_keyspace,
    describe=_describe,
    parse_key=_parse_key,
)
