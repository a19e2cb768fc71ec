"""
Brute-force cryptanalysis pipeline.

1. Enumerates each cipher family's key space (orchestrator)
2. Scores every candidate plaintext for English-likeness (scorer)
3. Keeps the best K candidates in constant memory (selector)
"""

from cipher_bruteforce.services.pipeline.orchestrator import BruteForceOrchestrator, CrackResult
from cipher_bruteforce.services.pipeline.scorer import EnglishScorer, ScoreBreakdown
from cipher_bruteforce.services.pipeline.selector import TopKSelector

__all__ = [
    "BruteForceOrchestrator",
    "CrackResult",
    "EnglishScorer",
    "ScoreBreakdown",
    "TopKSelector",
]
