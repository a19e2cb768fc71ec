"""Letter encodings without a key."""

from cipher_bruteforce.services.engines.encoding.polybius import decrypt_polybius, encrypt_polybius
from cipher_bruteforce.services.engines.encoding.bacon import decrypt_bacon, encrypt_bacon

__all__ = [
    "decrypt_polybius",
    "encrypt_polybius",
    "decrypt_bacon",
    "encrypt_bacon",
]
