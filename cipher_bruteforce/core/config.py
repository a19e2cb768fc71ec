from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


@dataclass(frozen=True)
class ScoringWeights:
    """Weights of the three additive scoring components."""

    letter_weight: int = 1
    word_bonus: int = 10
    validity_weight: int = 2
    min_word_length: int = 3


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="CRACKER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    app_name: str = "Cipher Brute-Force Engine"
    app_env: Literal["development", "staging", "production"] = "development"
    debug: bool = False
    api_v1_prefix: str = "/api/v1"
    log_level: str = "INFO"

    # Input
    ciphertext: str = "bxrworn, dodcx iy lbks !"
    max_ciphertext_length: int = 10_000

    # Selection
    top_k: int = Field(default=5, ge=1)
    preview_length: int = Field(default=80, ge=1)

    # Search bounds
    max_vigenere_key_length: int = Field(default=5, ge=1)
    max_beaufort_key_length: int = Field(default=5, ge=1)
    max_hybrid_key_length: int = Field(default=4, ge=1)
    min_rails: int = Field(default=2, ge=2)
    max_rails: int = 15
    min_columns: int = Field(default=2, ge=1)
    max_columns: int = 10
    playfair_keys: list[str] = [
        "key",
        "secret",
        "cipher",
        "enigma",
        "cryptography",
        "library",
        "ancient",
        "knowledge",
    ]

    # Scoring
    letter_weight: int = 1
    word_bonus: int = 10
    validity_weight: int = 2
    min_word_length: int = 3

    # Concurrency
    max_parallel_engines: int = Field(default=1, ge=1)

    @property
    def is_development(self) -> bool:
        return self.app_env == "development"

    @property
    def is_production(self) -> bool:
        return self.app_env == "production"

    @property
    def scoring_weights(self) -> ScoringWeights:
        return ScoringWeights(
            letter_weight=self.letter_weight,
            word_bonus=self.word_bonus,
            validity_weight=self.validity_weight,
            min_word_length=self.min_word_length,
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
