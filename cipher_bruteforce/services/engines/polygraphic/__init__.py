"""Polygraphic cipher engines."""

from cipher_bruteforce.services.engines.polygraphic.playfair import decrypt_playfair, encrypt_playfair

__all__ = [
    "decrypt_playfair",
    "encrypt_playfair",
]
