from collections.abc import Iterator, Sequence

from cipher_bruteforce.core.config import Settings
from cipher_bruteforce.models.schemas import CipherFamily, CipherType
from cipher_bruteforce.services.engines.alphabet import ALPHABET_SIZE, REFLECT_TABLES, transform_periodic
from cipher_bruteforce.services.engines.base import (
    CipherEngine,
    KeyParams,
    ShiftSequenceKey,
    parse_shift_sequence,
)
from cipher_bruteforce.services.engines.keyspace import shift_sequences_up_to
from cipher_bruteforce.services.engines.polyalphabetic.vigenere import describe_keyword


def decrypt_beaufort(text: str, key: Sequence[int]) -> str:
    """
    Apply the Beaufort transformation: ``result = (K - input) mod 26``.

    The same operation encrypts and decrypts.
    """
    return transform_periodic(text, [REFLECT_TABLES[shift % ALPHABET_SIZE] for shift in key])


def _apply(ciphertext: str, params: KeyParams) -> str:
    return decrypt_beaufort(ciphertext, params.shifts)


def _keyspace(settings: Settings) -> Iterator[KeyParams]:
    for shifts in shift_sequences_up_to(settings.max_beaufort_key_length):
        yield ShiftSequenceKey(shifts)


def _parse_key(raw: str) -> KeyParams:
    return parse_shift_sequence(CipherType.BEAUFORT, raw)


BEAUFORT_ENGINE = CipherEngine(
    cipher_type=CipherType.BEAUFORT,
    name="Beaufort Cipher",
    family=CipherFamily.POLYALPHABETIC,
    description=(
        "A reciprocal cipher where C = (K - P) mod 26. "
        "Unlike Vigenère, Beaufort is self-reciprocal: "
        "encrypting ciphertext with the same key returns plaintext."
    ),
    apply=_apply,
    keyspace=_keyspace,
    describe=describe_keyword,
    parse_key=_parse_key,
)
