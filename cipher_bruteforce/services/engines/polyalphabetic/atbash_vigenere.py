from collections.abc import Iterator, Sequence

from cipher_bruteforce.core.config import Settings
from cipher_bruteforce.models.schemas import CipherFamily, CipherType
from cipher_bruteforce.services.engines.base import (
    CipherEngine,
    KeyParams,
    ShiftSequenceKey,
    parse_shift_sequence,
)
from cipher_bruteforce.services.engines.keyspace import shift_sequences_up_to
from cipher_bruteforce.services.engines.monoalphabetic.atbash import decrypt_atbash
from cipher_bruteforce.services.engines.polyalphabetic.vigenere import decrypt_vigenere, describe_keyword


def decrypt_atbash_vigenere(ciphertext: str, key: Sequence[int]) -> str:
    """Atbash first, then Vigenère decryption with ``key``."""
    return decrypt_vigenere(decrypt_atbash(ciphertext), key)


def _apply(ciphertext: str, params: KeyParams) -> str:
    return decrypt_atbash_vigenere(ciphertext, params.shifts)


def _keyspace(settings: Settings) -> Iterator[KeyParams]:
    for shifts in shift_sequences_up_to(settings.max_hybrid_key_length):
        yield ShiftSequenceKey(shifts)


def _parse_key(raw: str) -> KeyParams:
    return parse_shift_sequence(CipherType.ATBASH_VIGENERE, raw)


ATBASH_VIGENERE_ENGINE = CipherEngine(
    cipher_type=CipherType.ATBASH_VIGENERE,
    name="Atbash + Vigenère Hybrid",
    family=CipherFamily.POLYALPHABETIC,
    description="Atbash mirroring followed by Vigenère decryption with a short keyword.",
    apply=_apply,
    keyspace=_keyspace,
    describe=describe_keyword,
    parse_key=_parse_key,
)
