from cipher_bruteforce.models.schemas import CipherFamily, CipherType
from cipher_bruteforce.services.engines.base import CipherEngine, KeyParams, fixed_label, single_point


def decrypt_reverse(text: str) -> str:
    return text[::-1]


def _apply(ciphertext: str, params: KeyParams) -> str:
    return decrypt_reverse(ciphertext)


REVERSE_ENGINE = CipherEngine(
    cipher_type=CipherType.REVERSE,
    name="Reverse Cipher",
    family=CipherFamily.TRANSPOSITION,
    description="The text written backwards.",
    apply=_apply,
    keyspace=single_point,
    describe=fixed_label("Reverse"),
)
