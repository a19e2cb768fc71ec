"""
Playfair cipher.

Digraphs (pairs of letters) are substituted using a 5x5 key square built
from the deduplicated keyword letters followed by the rest of the alphabet.
The alphabet is reduced to 25 letters (J is merged into I).

Rules for decryption:
1. Same row: replace each letter with the one to its left
2. Same column: replace each letter with the one above
3. Rectangle: swap columns, keeping rows

Decryption works on the letters only, in lowercase; a trailing unpaired
letter is dropped.
"""

from collections.abc import Iterator

from cipher_bruteforce.core.config import Settings
from cipher_bruteforce.core.exceptions import InvalidKeyError
from cipher_bruteforce.models.schemas import CipherFamily, CipherType
from cipher_bruteforce.services.engines.alphabet import LETTERS, LOWERCASE
from cipher_bruteforce.services.engines.base import CipherEngine, KeyParams, KeywordKey

SQUARE_SIZE = 5


def build_key_square(keyword: str) -> str:
    """The 25 square letters in row-major order."""
    square: list[str] = []

    for char in keyword.lower().replace("j", "i"):
        if char in LOWERCASE and char not in square:
            square.append(char)

    for char in LOWERCASE:
        if char != "j" and char not in square:
            square.append(char)

    return "".join(square)


def _clean(text: str) -> str:
    return "".join(char.lower() for char in text if char in LETTERS).replace("j", "i")


def _substitute(text: str, keyword: str, step: int) -> str:
    """Map consecutive letter pairs; ``step`` is +1 to encrypt, -1 to decrypt."""
    square = build_key_square(keyword)
    positions = {char: divmod(index, SQUARE_SIZE) for index, char in enumerate(square)}
    result = []

    for i in range(0, len(text) - 1, 2):
        row1, col1 = positions[text[i]]
        row2, col2 = positions[text[i + 1]]

        if row1 == row2:
            col1, col2 = (col1 + step) % SQUARE_SIZE, (col2 + step) % SQUARE_SIZE
        elif col1 == col2:
            row1, row2 = (row1 + step) % SQUARE_SIZE, (row2 + step) % SQUARE_SIZE
        else:
            col1, col2 = col2, col1

        result.append(square[row1 * SQUARE_SIZE + col1])
        result.append(square[row2 * SQUARE_SIZE + col2])

    return "".join(result)


def prepare_digraphs(text: str) -> str:
    """
    Prepare text for Playfair encryption.

    - Keep letters only, lowercase, J as I
    - Insert X between double letters
    - Pad with X if odd length
    """
    text = _clean(text)
    result = []
    i = 0

    while i < len(text):
        if i + 1 < len(text) and text[i] != text[i + 1]:
            result.append(text[i] + text[i + 1])
            i += 2
        else:
            result.append(text[i] + "x")
            i += 1

    return "".join(result)


def encrypt_playfair(plaintext: str, keyword: str) -> str:
    return _substitute(prepare_digraphs(plaintext), keyword, 1)


def decrypt_playfair(ciphertext: str, keyword: str) -> str:
    return _substitute(_clean(ciphertext), keyword, -1)


def _apply(ciphertext: str, params: KeyParams) -> str:
    return decrypt_playfair(ciphertext, params.keyword)


def _keyspace(settings: Settings) -> Iterator[KeyParams]:
    for keyword in settings.playfair_keys:
        yield KeywordKey(keyword)


def _describe(params: KeyParams) -> str:
    return f"key: {params.keyword}"


def _parse_key(raw: str) -> KeyParams:
    if not any(char in LETTERS for char in raw):
        raise InvalidKeyError(CipherType.PLAYFAIR.value, raw, "key must contain letters")
    return KeywordKey(raw)


PLAYFAIR_ENGINE = CipherEngine(
    cipher_type=CipherType.PLAYFAIR,
    name="Playfair Cipher",
    family=CipherFamily.POLYGRAPHIC,
    description=(
        "A digraph substitution cipher using a 5x5 key square. "
        "Pairs of letters are encrypted together based on their positions "
        "in the square. I and J are treated as the same letter."
    ),
    apply=_apply,
    keyspace=_keyspace,
    describe=_describe,
    parse_key=_parse_key,
)
