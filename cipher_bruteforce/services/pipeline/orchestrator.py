"""
Brute-force orchestrator - drives the search over the cipher catalog.

For every selected cipher family:
1. Enumerate its key space
2. Decrypt the ciphertext with each key
3. Score the candidate plaintext
4. Offer it to the shared best-of-K selector

Families run one after another into a single selector, or, when
``max_parallel_engines`` > 1, in worker processes whose selectors are
merged at the end.
"""

import logging
from concurrent.futures import ProcessPoolExecutor, as_completed
from dataclasses import dataclass

from cipher_bruteforce.core.config import Settings, get_settings
from cipher_bruteforce.core.exceptions import CiphertextTooLongError
from cipher_bruteforce.models.schemas import ALL_CIPHERS, Candidate, CipherType, CrackTarget
from cipher_bruteforce.services.engines.base import CipherEngine, KeyParams
from cipher_bruteforce.services.engines.registry import EngineRegistry
from cipher_bruteforce.services.pipeline.scorer import EnglishScorer
from cipher_bruteforce.services.pipeline.selector import TopKSelector

logger = logging.getLogger(__name__)


@dataclass
class CrackResult:
    """Result of a brute-force run."""

    # Best candidates, highest score first
    candidates: list[Candidate]

    # Cipher families that were searched
    cipher_types: list[CipherType]

    # Number of keys decrypted and scored
    keys_tried: int

    @property
    def best(self) -> Candidate | None:
        return self.candidates[0] if self.candidates else None


class BruteForceOrchestrator:
    """
    Runs exhaustive key searches and keeps the best-scoring candidates.

    The scorer and settings are injected and never mutated; a fresh
    selector is created for every run.
    """

    def __init__(
        self,
        scorer: EnglishScorer,
        settings: Settings | None = None,
        registry: EngineRegistry | None = None,
    ):
        self.scorer = scorer
        self.settings = settings or get_settings()
        self.registry = registry or EngineRegistry()

    def crack(
        self,
        ciphertext: str | None = None,
        target: CrackTarget = ALL_CIPHERS,
        top_k: int | None = None,
    ) -> CrackResult:
        """
        Brute-force one cipher family, or all of them.

        Args:
            ciphertext: Text to attack (defaults to the configured ciphertext)
            target: A cipher type, or "all" for the whole catalog
            top_k: Number of candidates to keep (defaults to settings.top_k)

        Returns:
            CrackResult with candidates sorted by descending score
        """
        ciphertext = self.settings.ciphertext if ciphertext is None else ciphertext
        self._check_length(ciphertext)

        engines = self._select_engines(target)
        selector = TopKSelector(top_k or self.settings.top_k)

        if self.settings.max_parallel_engines > 1 and len(engines) > 1:
            keys_tried = self._run_parallel(ciphertext, engines, selector)
        else:
            keys_tried = sum(self.run_engine(ciphertext, engine, selector) for engine in engines)

        candidates = selector.sorted_results()
        logger.info(
            "Tried %d keys across %d cipher(s); best score %s",
            keys_tried,
            len(engines),
            candidates[0].score if candidates else "n/a",
        )

        return CrackResult(
            candidates=candidates,
            cipher_types=[engine.cipher_type for engine in engines],
            keys_tried=keys_tried,
        )

    def run_engine(self, ciphertext: str, engine: CipherEngine, selector: TopKSelector) -> int:
        """
        Search one engine's key space into ``selector``.

        Returns:
            Number of keys tried
        """
        logger.info("Testing %s...", engine.name)

        score = self.scorer.score
        keys_tried = 0

        for params in engine.keyspace(self.settings):
            plaintext = engine.apply(ciphertext, params)
            value = score(plaintext)
            keys_tried += 1

            # Only build a candidate when it would make the cut
            if selector.would_accept(value):
                selector.insert(self.make_candidate(engine, params, plaintext, value))

        logger.debug("%s: %d keys tried", engine.name, keys_tried)
        return keys_tried

    def decrypt_with_key(
        self,
        ciphertext: str,
        cipher_type: CipherType | str,
        key: str | None = None,
    ) -> Candidate:
        """
        Decrypt with a known key and score the result.

        Raises:
            EngineNotFoundError: If the cipher type is unknown
            InvalidKeyError: If the key cannot be used with this cipher
            CiphertextTooLongError: If the ciphertext is over the limit
        """
        self._check_length(ciphertext)
        engine = self.registry.require(cipher_type)
        params = engine.key_from_text(key)
        plaintext = engine.apply(ciphertext, params)
        return self.make_candidate(engine, params, plaintext, self.scorer.score(plaintext))

    def make_candidate(
        self,
        engine: CipherEngine,
        params: KeyParams,
        plaintext: str,
        score: int,
    ) -> Candidate:
        return Candidate(
            score=score,
            cipher_type=engine.cipher_type,
            params=engine.describe(params),
            plaintext_preview=plaintext[: self.settings.preview_length],
            plaintext_full=plaintext,
        )

    def _select_engines(self, target: CrackTarget) -> list[CipherEngine]:
        if target == ALL_CIPHERS:
            return self.registry.get_all_engines()
        return [self.registry.require(target)]

    def _check_length(self, ciphertext: str) -> None:
        if len(ciphertext) > self.settings.max_ciphertext_length:
            raise CiphertextTooLongError(len(ciphertext), self.settings.max_ciphertext_length)

    def _run_parallel(
        self,
        ciphertext: str,
        engines: list[CipherEngine],
        selector: TopKSelector,
    ) -> int:
        """Run each engine in a worker process and merge the partial selectors."""
        keys_tried = 0

        with ProcessPoolExecutor(max_workers=self.settings.max_parallel_engines) as pool:
            futures = [
                pool.submit(
                    _run_engine_isolated,
                    engine.cipher_type,
                    ciphertext,
                    self.scorer,
                    self.settings,
                    selector.capacity,
                )
                for engine in engines
            ]
            for future in as_completed(futures):
                partial, tried = future.result()
                selector.merge(partial)
                keys_tried += tried

        return keys_tried


def _run_engine_isolated(
    cipher_type: CipherType,
    ciphertext: str,
    scorer: EnglishScorer,
    settings: Settings,
    capacity: int,
) -> tuple[TopKSelector, int]:
    """Worker entry point: one engine into a private selector."""
    orchestrator = BruteForceOrchestrator(scorer, settings)
    selector = TopKSelector(capacity)
    tried = orchestrator.run_engine(ciphertext, orchestrator.registry.require(cipher_type), selector)
    return selector, tried
