from cipher_bruteforce.models.schemas import CipherFamily, CipherType
from cipher_bruteforce.services.engines.alphabet import LETTERS, LOWERCASE
from cipher_bruteforce.services.engines.base import CipherEngine, KeyParams, fixed_label, single_point

CHUNK_SIZE = 5

# 26-letter variant: every letter has its own five-bit a/b code
BACON_CODES: dict[str, str] = {
    letter: format(index, "05b").replace("0", "a").replace("1", "b")
    for index, letter in enumerate(LOWERCASE)
}
BACON_LETTERS: dict[str, str] = {code: letter for letter, code in BACON_CODES.items()}


def encrypt_bacon(plaintext: str) -> str:
    return " ".join(BACON_CODES[char.lower()] for char in plaintext if char in LETTERS)


def decrypt_bacon(ciphertext: str) -> str:
    """
    Decode five-letter a/b groups.

    Only letters are kept; complete groups that exactly match a code are
    decoded, anything else is skipped.
    """
    letters = "".join(char for char in ciphertext if char in LETTERS)
    chunks = (letters[i:i + CHUNK_SIZE] for i in range(0, len(letters) - CHUNK_SIZE + 1, CHUNK_SIZE))
    return "".join(BACON_LETTERS[chunk] for chunk in chunks if chunk in BACON_LETTERS)


def _apply(ciphertext: str, params: KeyParams) -> str:
    return decrypt_bacon(ciphertext)


BACON_ENGINE = CipherEngine(
    cipher_type=CipherType.BACON,
    name="Bacon Cipher",
    family=CipherFamily.ENCODING,
    description="Francis Bacon's biliteral cipher: each letter is a five-character group of 'a' and 'b'.",
    apply=_apply,
    keyspace=single_point,
    describe=fixed_label("Bacon"),
)
