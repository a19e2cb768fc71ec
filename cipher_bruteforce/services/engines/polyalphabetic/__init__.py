"""Polyalphabetic cipher engines."""

from cipher_bruteforce.services.engines.polyalphabetic.vigenere import decrypt_vigenere, encrypt_vigenere
from cipher_bruteforce.services.engines.polyalphabetic.beaufort import decrypt_beaufort
from cipher_bruteforce.services.engines.polyalphabetic.atbash_vigenere import decrypt_atbash_vigenere

__all__ = [
    "decrypt_vigenere",
    "encrypt_vigenere",
    "decrypt_beaufort",
    "decrypt_atbash_vigenere",
]
