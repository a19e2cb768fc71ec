from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


# ============================================================================
# Enums
# ============================================================================


class CipherFamily(str, Enum):
    """Supported cipher families."""

    MONOALPHABETIC = "monoalphabetic"
    POLYALPHABETIC = "polyalphabetic"
    TRANSPOSITION = "transposition"
    POLYGRAPHIC = "polygraphic"
    ENCODING = "encoding"


class CipherType(str, Enum):
    """Specific cipher types, in catalog order."""

    CAESAR = "caesar"
    ROT13 = "rot13"
    ATBASH = "atbash"
    VIGENERE = "vigenere"
    RAIL_FENCE = "rail_fence"
    AFFINE = "affine"
    BEAUFORT = "beaufort"
    COLUMNAR = "columnar"
    PLAYFAIR = "playfair"
    POLYBIUS = "polybius"
    BACON = "bacon"
    REVERSE = "reverse"
    ATBASH_VIGENERE = "atbash_vigenere"


ALL_CIPHERS = "all"

CrackTarget = CipherType | Literal["all"]


# ============================================================================
# Candidate
# ============================================================================


class Candidate(BaseModel):
    """One scored decryption attempt."""

    model_config = ConfigDict(frozen=True)

    score: int
    cipher_type: CipherType
    params: str
    plaintext_preview: str
    plaintext_full: str


# ============================================================================
# Request Schemas
# ============================================================================


class CrackRequest(BaseModel):
    """Request schema for /crack endpoint."""

    ciphertext: str | None = Field(default=None, min_length=1)
    cipher_type: CrackTarget = ALL_CIPHERS
    top_k: int | None = Field(default=None, ge=1, le=100)


class DecryptRequest(BaseModel):
    """Request schema for /decrypt endpoint."""

    ciphertext: str = Field(min_length=1)
    cipher_type: CipherType
    key: str | None = None


# ============================================================================
# Response Schemas
# ============================================================================


class CrackResponse(BaseModel):
    """Response schema for /crack endpoint."""

    candidates: list[Candidate]
    cipher_types: list[CipherType]
    keys_tried: int


class CipherInfo(BaseModel):
    """Catalog entry for a single cipher."""

    cipher_type: CipherType
    name: str
    family: CipherFamily
    description: str
    keyed: bool


# ============================================================================
# Error Schemas
# ============================================================================


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str
    message: str
    details: dict = Field(default_factory=dict)
