"""
Static English reference data for plaintext scoring.

Both values are read-only and are handed to the scorer at construction.
"""

from dataclasses import dataclass

# Twelve most frequent English letters, most to least frequent.
FREQUENT_LETTERS = "etaoinshrdlu"

COMMON_WORDS: tuple[str, ...] = (
    "the", "and", "to", "of", "in", "is", "it", "you", "that", "he", "was",
    "for", "on", "are", "as", "with", "his", "they", "be", "at", "one",
    "have", "this", "from", "or", "had", "by", "but", "not", "we", "my",
    "so", "if", "me", "your", "what", "all", "can", "no", "about", "will",
    "would", "there", "their", "which", "when", "make", "like", "time",
    "very", "come", "just", "know", "take", "people", "year", "work",
    "back", "call", "feel", "find", "give", "good", "hand", "high", "keep",
    "last", "life", "live", "mean", "need", "next", "open", "over", "part",
    "play", "said", "same", "seem", "such", "tell", "than", "them", "then",
    "these", "thus", "want", "well", "were", "word", "write", "years",
    "ancient", "library", "stood", "majestically", "hillside", "weathered",
    "stone", "walls", "holding", "countless", "secrets", "within",
    "scholars", "across", "kingdom", "journey", "months", "access", "rare",
    "manuscripts", "precious", "knowledge", "head", "librarian", "guarded",
    "treasures", "fiercely", "allowing", "dedicated", "researchers",
    "study", "carefully",
)


@dataclass(frozen=True)
class ReferenceData:
    """Word set and letter ranking the scorer measures text against."""

    words: frozenset[str]
    frequent_letters: str

    @classmethod
    def from_words(cls, words, frequent_letters: str = FREQUENT_LETTERS) -> "ReferenceData":
        return cls(
            words=frozenset(word.lower() for word in words),
            frequent_letters=frequent_letters.lower(),
        )


def default_reference() -> ReferenceData:
    """Reference data built from the bundled English word list."""
    return ReferenceData.from_words(COMMON_WORDS)
