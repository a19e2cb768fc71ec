"""
Columnar Transposition cipher.

The plaintext is written row by row into a grid with one column per key
character; the ciphertext is the columns read top to bottom, taken in the
alphabetical order of their key characters (equal characters keep their
original column order). The last row may be short; its missing cells are
skipped, so no padding is involved.

The brute-force search only tries the ascending key ``"ab..."`` of each
column count, which is the identity column order.
"""

import string
from collections.abc import Iterator

from cipher_bruteforce.core.config import Settings
from cipher_bruteforce.core.exceptions import InvalidKeyError
from cipher_bruteforce.models.schemas import CipherFamily, CipherType
from cipher_bruteforce.services.engines.alphabet import LOWERCASE
from cipher_bruteforce.services.engines.base import CipherEngine, KeyParams, KeywordKey, parse_int


def column_order(keyword: str) -> list[int]:
    """Column indices sorted by key character (stable on ties)."""
    return sorted(range(len(keyword)), key=lambda column: keyword[column])


def _read_order(length: int, keyword: str) -> list[int]:
    """Grid positions in the order the ciphertext lists them."""
    columns = len(keyword)
    rows = -(-length // columns)

    return [
        row * columns + column
        for column in column_order(keyword)
        for row in range(rows)
        if row * columns + column < length
    ]


def encrypt_columnar(plaintext: str, keyword: str) -> str:
    return "".join(plaintext[position] for position in _read_order(len(plaintext), keyword))


def decrypt_columnar(ciphertext: str, keyword: str) -> str:
    result = [""] * len(ciphertext)
    for char, position in zip(ciphertext, _read_order(len(ciphertext), keyword)):
        result[position] = char
    return "".join(result)


def ascending_key(columns: int) -> str:
    """Synthetic strictly increasing key for a column count."""
    return LOWERCASE[:columns]


def _apply(ciphertext: str, params: KeyParams) -> str:
    return decrypt_columnar(ciphertext, params.keyword)


def _keyspace(settings: Settings) -> Iterator[KeyParams]:
    for columns in range(settings.min_columns, min(settings.max_columns, len(LOWERCASE)) + 1):
        yield KeywordKey(ascending_key(columns))


def _describe(params: KeyParams) -> str:
    if params.keyword == ascending_key(len(params.keyword)):
        return f"{len(params.keyword)} cols"
    return f"key: {params.keyword}"


def _parse_key(raw: str) -> KeyParams:
    # A bare number up to 26 is a column count with the ascending key;
    # longer digit strings ("3142") are ordering keys
    if raw and all(char in string.digits for char in raw) and int(raw) <= len(LOWERCASE):
        return KeywordKey(ascending_key(parse_int(CipherType.COLUMNAR, raw, 1, len(LOWERCASE))))
    if any(char.isspace() for char in raw):
        raise InvalidKeyError(CipherType.COLUMNAR.value, raw, "key must not contain whitespace")
    return KeywordKey(raw.lower())


COLUMNAR_ENGINE = CipherEngine(
    cipher_type=CipherType.COLUMNAR,
    name="Columnar Transposition",
    family=CipherFamily.TRANSPOSITION,
    description=(
        "A transposition cipher that writes plaintext in rows under a keyword, "
        "then reads columns in alphabetical order of the keyword letters."
    ),
    apply=_apply,
    keyspace=_keyspace,
    describe=_describe,
    parse_key=_parse_key,
)
