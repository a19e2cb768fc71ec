"""
Rail Fence cipher.

The plaintext is written in a zigzag pattern across a number of "rails"
(rows), then each rail is read off in order to produce the ciphertext.

Example with 3 rails:
Plaintext: WEAREDISCOVEREDFLEEATONCE

    W . . . E . . . C . . . R . . . L . . . T . . . E
    . E . R . D . S . O . E . E . F . E . A . O . C .
    . . A . . . I . . . V . . . D . . . E . . . N . .

Every character, letter or not, occupies a zigzag position.
"""

from collections.abc import Iterator

from cipher_bruteforce.core.config import Settings
from cipher_bruteforce.models.schemas import CipherFamily, CipherType
from cipher_bruteforce.services.engines.base import CipherEngine, KeyParams, RailKey, parse_int

# Largest rail count accepted from outside; matches the default input length cap
MAX_RAILS = 10_000


def _rail_sequence(length: int, rails: int) -> Iterator[int]:
    """Rail index of each position: 0 -> rails-1 -> 0 -> ..."""
    rail = 0
    direction = 1  # 1 = down, -1 = up

    for _ in range(length):
        yield rail

        # Change direction at top or bottom
        if rail == 0:
            direction = 1
        elif rail == rails - 1:
            direction = -1

        rail += direction


def _read_order(length: int, rails: int) -> list[int]:
    """Original positions in the order the ciphertext lists them."""
    # Rails beyond the text length never receive a character
    rails = min(rails, max(length, 2))
    fence: list[list[int]] = [[] for _ in range(rails)]
    for position, rail in enumerate(_rail_sequence(length, rails)):
        fence[rail].append(position)
    return [position for row in fence for position in row]


def encrypt_rail_fence(plaintext: str, rails: int) -> str:
    if rails < 2:
        return plaintext
    return "".join(plaintext[position] for position in _read_order(len(plaintext), rails))


def decrypt_rail_fence(ciphertext: str, rails: int) -> str:
    if rails < 2:
        return ciphertext

    result = [""] * len(ciphertext)
    for char, position in zip(ciphertext, _read_order(len(ciphertext), rails)):
        result[position] = char

    return "".join(result)


def _apply(ciphertext: str, params: KeyParams) -> str:
    return decrypt_rail_fence(ciphertext, params.rails)


def _keyspace(settings: Settings) -> Iterator[KeyParams]:
    for rails in range(settings.min_rails, settings.max_rails + 1):
        yield RailKey(rails)


def _describe(params: KeyParams) -> str:
    return f"{params.rails} rails"


def _parse_key(raw: str) -> KeyParams:
    return RailKey(parse_int(CipherType.RAIL_FENCE, raw, 2, MAX_RAILS))


RAIL_FENCE_ENGINE = CipherEngine(
    cipher_type=CipherType.RAIL_FENCE,
    name="Rail Fence Cipher",
    family=CipherFamily.TRANSPOSITION,
    description=(
        "A transposition cipher that writes plaintext in a zigzag pattern "
        "across multiple 'rails' (rows), then reads each rail in sequence. "
        "The number of rails is the key."
    ),
    apply=_apply,
    keyspace=_keyspace,
    describe=_describe,
    parse_key=_parse_key,
)
