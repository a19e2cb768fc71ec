from collections.abc import Callable, Iterator
from dataclasses import dataclass

from cipher_bruteforce.core.config import Settings
from cipher_bruteforce.core.exceptions import InvalidKeyError
from cipher_bruteforce.models.schemas import CipherFamily, CipherType
from cipher_bruteforce.services.engines.alphabet import ALPHABET_SIZE
from cipher_bruteforce.services.engines.keyspace import keyword_to_shifts, shifts_to_keyword


# ============================================================================
# Key variants
# ============================================================================


@dataclass(frozen=True)
class NoKey:
    """Parameter payload of ciphers that take no key."""


@dataclass(frozen=True)
class ShiftKey:
    shift: int


@dataclass(frozen=True)
class ShiftSequenceKey:
    """Periodic key of letter shifts, each 0-25."""

    shifts: tuple[int, ...]

    @property
    def keyword(self) -> str:
        return shifts_to_keyword(self.shifts)


@dataclass(frozen=True)
class RailKey:
    rails: int


@dataclass(frozen=True)
class AffineKey:
    """Affine key; ``a`` is coprime with 26."""

    a: int
    b: int


@dataclass(frozen=True)
class KeywordKey:
    keyword: str


KeyParams = NoKey | ShiftKey | ShiftSequenceKey | RailKey | AffineKey | KeywordKey


# ============================================================================
# Engine descriptor
# ============================================================================


@dataclass(frozen=True)
class CipherEngine:
    """
    One entry of the closed cipher catalog.

    Each engine bundles:
    - apply(): the pure decryption transform for a key payload
    - keyspace(): the brute-force enumeration of key payloads
    - describe(): the human-readable form of a key payload
    - parse_key(): rebuild a key payload from external input
      (None for ciphers without a key)
    """

    cipher_type: CipherType
    name: str
    family: CipherFamily
    description: str
    apply: Callable[[str, KeyParams], str]
    keyspace: Callable[[Settings], Iterator[KeyParams]]
    describe: Callable[[KeyParams], str]
    parse_key: Callable[[str], KeyParams] | None = None

    @property
    def keyed(self) -> bool:
        return self.parse_key is not None

    def decrypt(self, ciphertext: str, params: KeyParams) -> str:
        return self.apply(ciphertext, params)

    def key_from_text(self, raw: str | None) -> KeyParams:
        """
        Turn an externally supplied key into a key payload.

        Raises:
            InvalidKeyError: If the cipher needs a key and ``raw`` is unusable
        """
        if self.parse_key is None:
            return NoKey()
        if raw is None or not raw.strip():
            raise InvalidKeyError(self.cipher_type.value, raw or "", "a key is required")
        return self.parse_key(_strip_descriptor(raw))


def _strip_descriptor(raw: str) -> str:
    """Reduce a ``describe()`` string ("key: abc", "4 rails") to the bare key."""
    text = raw.strip()
    for prefix in ("key:", "shift "):
        text = text.removeprefix(prefix).strip()
    for suffix in (" rails", " cols"):
        text = text.removesuffix(suffix).strip()
    return text


def single_point(settings: Settings) -> Iterator[KeyParams]:
    """Key space of a cipher without a key: exactly one point."""
    yield NoKey()


def fixed_label(label: str) -> Callable[[KeyParams], str]:
    """``describe`` for ciphers without a key."""

    def describe(params: KeyParams) -> str:
        return label

    return describe


def parse_int(cipher_type: CipherType, raw: str, minimum: int, maximum: int | None = None) -> int:
    """Parse a bounded integer key, raising ``InvalidKeyError`` when it is not one."""
    try:
        value = int(raw)
    except ValueError:
        raise InvalidKeyError(cipher_type.value, raw, "expected an integer") from None

    if value < minimum or (maximum is not None and value > maximum):
        bounds = f">= {minimum}" if maximum is None else f"in [{minimum}, {maximum}]"
        raise InvalidKeyError(cipher_type.value, raw, f"value must be {bounds}")

    return value


def parse_shift_sequence(cipher_type: CipherType, raw: str) -> ShiftSequenceKey:
    """
    Parse a periodic key given as letters (``"lemon"``) or as
    comma-separated shifts (``"11,4,12,14,13"``).
    """
    if "," in raw or raw.isdigit():
        try:
            shifts = tuple(int(part) for part in raw.split(","))
        except ValueError:
            raise InvalidKeyError(cipher_type.value, raw, "shifts must be integers") from None
        if any(not 0 <= shift < ALPHABET_SIZE for shift in shifts):
            raise InvalidKeyError(cipher_type.value, raw, "shifts must be in [0, 25]")
        return ShiftSequenceKey(shifts)

    shifts = keyword_to_shifts(raw)
    if not shifts or len(shifts) != len(raw):
        raise InvalidKeyError(cipher_type.value, raw, "key must be a non-empty run of letters")
    return ShiftSequenceKey(shifts)
