from cipher_bruteforce.models.schemas import CipherFamily, CipherType
from cipher_bruteforce.services.engines.base import CipherEngine, KeyParams, fixed_label, single_point
from cipher_bruteforce.services.engines.monoalphabetic.caesar import decrypt_caesar

ROT13_SHIFT = 13


def decrypt_rot13(ciphertext: str) -> str:
    """Caesar with a shift of 13; applying it twice restores the input."""
    return decrypt_caesar(ciphertext, ROT13_SHIFT)


def _apply(ciphertext: str, params: KeyParams) -> str:
    return decrypt_rot13(ciphertext)


ROT13_ENGINE = CipherEngine(
    cipher_type=CipherType.ROT13,
    name="ROT13",
    family=CipherFamily.MONOALPHABETIC,
    description=(
        "A Caesar cipher with a fixed shift of 13. "
        "Because 13 is half the alphabet, ROT13 is its own inverse."
    ),
    apply=_apply,
    keyspace=single_point,
    describe=fixed_label("ROT13"),
)
