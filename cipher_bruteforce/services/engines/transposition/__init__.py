"""Transposition cipher engines."""

from cipher_bruteforce.services.engines.transposition.rail_fence import decrypt_rail_fence, encrypt_rail_fence
from cipher_bruteforce.services.engines.transposition.columnar import decrypt_columnar, encrypt_columnar
from cipher_bruteforce.services.engines.transposition.reverse import decrypt_reverse

__all__ = [
    "decrypt_rail_fence",
    "encrypt_rail_fence",
    "decrypt_columnar",
    "encrypt_columnar",
    "decrypt_reverse",
]
