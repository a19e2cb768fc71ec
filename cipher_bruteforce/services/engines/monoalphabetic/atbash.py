from cipher_bruteforce.models.schemas import CipherFamily, CipherType
from cipher_bruteforce.services.engines.alphabet import LOWERCASE, UPPERCASE
from cipher_bruteforce.services.engines.base import CipherEngine, KeyParams, fixed_label, single_point

_ATBASH = str.maketrans(LOWERCASE + UPPERCASE, LOWERCASE[::-1] + UPPERCASE[::-1])


def decrypt_atbash(text: str) -> str:
    """Mirror the alphabet: a <-> z, b <-> y, ... Self-inverse."""
    return text.translate(_ATBASH)


def _apply(ciphertext: str, params: KeyParams) -> str:
    return decrypt_atbash(ciphertext)


ATBASH_ENGINE = CipherEngine(
    cipher_type=CipherType.ATBASH,
    name="Atbash",
    family=CipherFamily.MONOALPHABETIC,
    description=(
        "A substitution cipher that reverses the alphabet. "
        "Originally used with the Hebrew alphabet."
    ),
    apply=_apply,
    keyspace=single_point,
    describe=fixed_label("Atbash"),
)
