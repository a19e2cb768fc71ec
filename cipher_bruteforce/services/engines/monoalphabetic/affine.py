"""
Affine cipher.

Decryption maps each letter index ``y`` to ``a^-1 * (y + b) mod 26``, where
``a^-1`` is the modular multiplicative inverse of ``a``. The matching
encryption is ``x -> (a*x - b) mod 26``. Only the twelve values of ``a``
coprime with 26 have an inverse, and only those are ever enumerated.
"""

import math
from collections.abc import Iterator

from cipher_bruteforce.core.config import Settings
from cipher_bruteforce.core.exceptions import InvalidKeyError
from cipher_bruteforce.models.schemas import CipherFamily, CipherType
from cipher_bruteforce.services.engines.alphabet import ALPHABET_SIZE, letter_table
from cipher_bruteforce.services.engines.base import AffineKey, CipherEngine, KeyParams

COPRIME_MULTIPLIERS: tuple[int, ...] = tuple(
    a for a in range(1, ALPHABET_SIZE) if math.gcd(a, ALPHABET_SIZE) == 1
)


def extended_gcd(a: int, b: int) -> tuple[int, int, int]:
    """Return ``(g, x, y)`` with ``a*x + b*y == g == gcd(a, b)``."""
    if a == 0:
        return b, 0, 1
    gcd, x1, y1 = extended_gcd(b % a, a)
    return gcd, y1 - (b // a) * x1, x1


def mod_inverse(a: int, m: int = ALPHABET_SIZE) -> int:
    """Modular multiplicative inverse of ``a`` modulo ``m``."""
    gcd, x, _ = extended_gcd(a % m, m)
    if gcd != 1:
        raise ValueError(f"{a} has no inverse modulo {m}")
    return x % m


def encrypt_affine(plaintext: str, a: int, b: int) -> str:
    table = letter_table(lambda x: a * x - b)
    return "".join(table.get(char, char) for char in plaintext)


def decrypt_affine(ciphertext: str, a: int, b: int) -> str:
    a_inv = mod_inverse(a)
    table = letter_table(lambda y: a_inv * (y + b))
    return "".join(table.get(char, char) for char in ciphertext)


def _apply(ciphertext: str, params: KeyParams) -> str:
    return decrypt_affine(ciphertext, params.a, params.b)


def _keyspace(settings: Settings) -> Iterator[KeyParams]:
    for a in COPRIME_MULTIPLIERS:
        for b in range(ALPHABET_SIZE):
            yield AffineKey(a, b)


def _describe(params: KeyParams) -> str:
    return f"a={params.a}, b={params.b}"


def _parse_key(raw: str) -> KeyParams:
    # Accepts "5,8" and "a=5, b=8"
    parts = [part.split("=")[-1].strip() for part in raw.split(",")]
    if len(parts) != 2:
        raise InvalidKeyError(CipherType.AFFINE.value, raw, "expected 'a,b'")

    try:
        a, b = int(parts[0]), int(parts[1])
    except ValueError:
        raise InvalidKeyError(CipherType.AFFINE.value, raw, "a and b must be integers") from None

    if a % ALPHABET_SIZE not in COPRIME_MULTIPLIERS:
        raise InvalidKeyError(CipherType.AFFINE.value, raw, f"a={a} is not coprime with 26")

    return AffineKey(a % ALPHABET_SIZE, b % ALPHABET_SIZE)


AFFINE_ENGINE = CipherEngine(
    cipher_type=CipherType.AFFINE,
    name="Affine Cipher",
    family=CipherFamily.MONOALPHABETIC,
    description=(
        "A monoalphabetic substitution cipher combining a multiplicative and an "
        "additive shift. The 'a' value must be coprime with 26."
    ),
    apply=_apply,
    keyspace=_keyspace,
    describe=_describe,
    parse_key=_parse_key,
)
