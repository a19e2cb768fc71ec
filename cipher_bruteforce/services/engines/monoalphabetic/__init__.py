"""Monoalphabetic cipher engines."""

from cipher_bruteforce.services.engines.monoalphabetic.caesar import decrypt_caesar, encrypt_caesar
from cipher_bruteforce.services.engines.monoalphabetic.rot13 import decrypt_rot13
from cipher_bruteforce.services.engines.monoalphabetic.atbash import decrypt_atbash
from cipher_bruteforce.services.engines.monoalphabetic.affine import decrypt_affine, encrypt_affine, mod_inverse

__all__ = [
    "decrypt_caesar",
    "encrypt_caesar",
    "decrypt_rot13",
    "decrypt_atbash",
    "decrypt_affine",
    "encrypt_affine",
    "mod_inverse",
]
