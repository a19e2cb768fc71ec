"""
Vigenère cipher.

A polyalphabetic substitution: letter ``i`` of the text (counting letters
only) is shifted back by ``key[i mod len(key)]``. Spaces and punctuation
pass through and do not advance the key.

The brute-force key space is every key of length 1 up to the configured
maximum, enumerated lazily (26 + 26**2 + ... keys).
"""

from collections.abc import Iterator, Sequence

from cipher_bruteforce.core.config import Settings
from cipher_bruteforce.models.schemas import CipherFamily, CipherType
from cipher_bruteforce.services.engines.alphabet import ALPHABET_SIZE, SHIFT_TABLES, transform_periodic
from cipher_bruteforce.services.engines.base import (
    CipherEngine,
    KeyParams,
    ShiftSequenceKey,
    parse_shift_sequence,
)
from cipher_bruteforce.services.engines.keyspace import shift_sequences_up_to


def encrypt_vigenere(plaintext: str, key: Sequence[int]) -> str:
    return transform_periodic(plaintext, [SHIFT_TABLES[shift % ALPHABET_SIZE] for shift in key])


def decrypt_vigenere(ciphertext: str, key: Sequence[int]) -> str:
    return transform_periodic(ciphertext, [SHIFT_TABLES[-shift % ALPHABET_SIZE] for shift in key])


def _apply(ciphertext: str, params: KeyParams) -> str:
    return decrypt_vigenere(ciphertext, params.shifts)


def _keyspace(settings: Settings) -> Iterator[KeyParams]:
    for shifts in shift_sequences_up_to(settings.max_vigenere_key_length):
        yield ShiftSequenceKey(shifts)


def describe_keyword(params: KeyParams) -> str:
    return f"key: {params.keyword}"


def _parse_key(raw: str) -> KeyParams:
    return parse_shift_sequence(CipherType.VIGENERE, raw)


VIGENERE_ENGINE = CipherEngine(
    cipher_type=CipherType.VIGENERE,
    name="Vigenère Cipher",
    family=CipherFamily.POLYALPHABETIC,
    description=(
        "A polyalphabetic substitution cipher using a keyword. "
        "Each letter of the keyword determines a Caesar shift for the corresponding plaintext letter."
    ),
    apply=_apply,
    keyspace=_keyspace,
    describe=describe_keyword,
    parse_key=_parse_key,
)
