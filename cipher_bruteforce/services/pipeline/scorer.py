"""
English-likeness scorer.

Turns any candidate plaintext into an integer score built from three
additive components:
- letter frequency: occurrences of the most frequent English letters
- word matches: a bonus for every token found in the common-word set
- dictionary validity: percentage of tokens that are common words, weighted

Higher is more English-like. The score is a heuristic, not a probability.
"""

import re
import string
from dataclasses import dataclass, field

from cipher_bruteforce.core.config import ScoringWeights
from cipher_bruteforce.data.english import ReferenceData

_NON_ALPHA = re.compile(r"[^A-Za-z]+")
_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


@dataclass(frozen=True)
class ScoreBreakdown:
    """The three components of a score and their weighted total."""

    letter_frequency: int
    word_matches: int
    validity: int
    total: int


@dataclass(frozen=True)
class EnglishScorer:
    """
    Scores plaintext candidates against static English reference data.

    The reference data and weights are fixed at construction, so ``score``
    is a pure function of its input.
    """

    reference: ReferenceData
    weights: ScoringWeights = field(default_factory=ScoringWeights)

    def score(self, text: str) -> int:
        return self.breakdown(text).total

    def breakdown(self, text: str) -> ScoreBreakdown:
        tokens = self.tokenize(text)
        matched = self._count_matches(tokens)
        letters = self.letter_frequency(text)
        validity = self._validity(matched, len(tokens))

        total = (
            letters * self.weights.letter_weight
            + matched * self.weights.word_bonus
            + validity * self.weights.validity_weight
        )
        return ScoreBreakdown(
            letter_frequency=letters,
            word_matches=matched,
            validity=validity,
            total=total,
        )

    def tokenize(self, text: str) -> list[str]:
        """Lowercased alphabetic runs of at least the minimum word length."""
        min_length = self.weights.min_word_length
        return [token.lower() for token in _NON_ALPHA.split(text) if len(token) >= min_length]

    def letter_frequency(self, text: str) -> int:
        """Occurrences of the frequent letters, ASCII case-insensitive."""
        lowered = text.translate(_ASCII_LOWER)
        return sum(lowered.count(letter) for letter in self.reference.frequent_letters)

    def dictionary_validity(self, text: str) -> int:
        """Percentage (0-100, truncated) of tokens that are common words."""
        tokens = self.tokenize(text)
        return self._validity(self._count_matches(tokens), len(tokens))

    def _count_matches(self, tokens: list[str]) -> int:
        words = self.reference.words
        return sum(1 for token in tokens if token in words)

    @staticmethod
    def _validity(matched: int, total: int) -> int:
        if total == 0:
            return 0
        return (matched * 100) // total
