"""
End-to-end tests for the brute-force orchestrator.
"""
import pytest

from cipher_bruteforce.core.config import Settings
from cipher_bruteforce.core.exceptions import (
    CiphertextTooLongError,
    EngineNotFoundError,
    InvalidKeyError,
)
from cipher_bruteforce.data.english import default_reference
from cipher_bruteforce.models.schemas import CipherType
from cipher_bruteforce.services.engines.monoalphabetic.affine import encrypt_affine
from cipher_bruteforce.services.engines.monoalphabetic.caesar import encrypt_caesar
from cipher_bruteforce.services.engines.polyalphabetic.vigenere import encrypt_vigenere
from cipher_bruteforce.services.engines.transposition.rail_fence import encrypt_rail_fence
from cipher_bruteforce.services.pipeline.orchestrator import BruteForceOrchestrator
from cipher_bruteforce.services.pipeline.scorer import EnglishScorer

CIPHERTEXT = "bxrworn, dodcx iy lbks !"
PLAINTEXT = "the ancient library stood within the hillside"
ATBASH_SCORE = 8


def make_orchestrator(**overrides) -> BruteForceOrchestrator:
    settings = Settings(
        max_vigenere_key_length=2,
        max_beaufort_key_length=2,
        max_hybrid_key_length=2,
        **overrides,
    )
    return BruteForceOrchestrator(EnglishScorer(default_reference(), settings.scoring_weights), settings)


@pytest.fixture
def orchestrator():
    return make_orchestrator()


class TestSingleCipherSearch:
    """Forcing one cipher family searches only its key space."""

    @pytest.mark.parametrize(
        "cipher_type, keys",
        [
            (CipherType.CAESAR, 26),
            (CipherType.ATBASH, 1),
            (CipherType.AFFINE, 312),
            (CipherType.RAIL_FENCE, 14),
            (CipherType.COLUMNAR, 9),
            (CipherType.PLAYFAIR, 8),
            (CipherType.VIGENERE, 702),
        ],
    )
    def test_keys_tried(self, orchestrator, cipher_type, keys):
        result = orchestrator.crack(CIPHERTEXT, cipher_type)

        assert result.keys_tried == keys
        assert result.cipher_types == [cipher_type]
        assert all(c.cipher_type == cipher_type for c in result.candidates)

    def test_unkeyed_cipher_yields_one_candidate(self, orchestrator):
        result = orchestrator.crack(CIPHERTEXT, CipherType.ATBASH)

        assert len(result.candidates) == 1
        assert result.best.plaintext_full == "ycidlim, wlwxc rb oyph !"
        assert result.best.params == "Atbash"
        assert result.best.score == ATBASH_SCORE

    def test_cracks_caesar(self, orchestrator):
        result = orchestrator.crack(encrypt_caesar(PLAINTEXT, 7), CipherType.CAESAR)

        assert result.best.plaintext_full == PLAINTEXT
        assert result.best.params == "shift 7"

    def test_cracks_vigenere(self, orchestrator):
        result = orchestrator.crack(encrypt_vigenere(PLAINTEXT, (10, 4)), CipherType.VIGENERE)

        assert result.best.plaintext_full == PLAINTEXT
        assert result.best.params == "key: ke"

    def test_cracks_affine(self, orchestrator):
        result = orchestrator.crack(encrypt_affine(PLAINTEXT, 5, 8), CipherType.AFFINE)

        assert result.best.plaintext_full == PLAINTEXT
        assert result.best.params == "a=5, b=8"

    def test_cracks_rail_fence(self, orchestrator):
        result = orchestrator.crack(encrypt_rail_fence(PLAINTEXT, 4), CipherType.RAIL_FENCE)

        assert result.best.plaintext_full == PLAINTEXT
        assert result.best.params == "4 rails"

    def test_cipher_type_by_label(self, orchestrator):
        assert orchestrator.crack(CIPHERTEXT, "reverse").best.params == "Reverse"

    def test_unknown_cipher(self, orchestrator):
        with pytest.raises(EngineNotFoundError):
            orchestrator.crack(CIPHERTEXT, "enigma")


class TestFullSearch:
    """Searching the whole catalog."""

    @pytest.fixture
    def result(self, orchestrator):
        return orchestrator.crack(CIPHERTEXT, top_k=20)

    def test_every_family_searched(self, result):
        assert result.cipher_types == list(CipherType)
        # 26 + 1 + 1 + 702 + 14 + 312 + 702 + 9 + 8 + 1 + 1 + 1 + 702
        assert result.keys_tried == 2480

    def test_sorted_and_bounded(self, result):
        scores = [c.score for c in result.candidates]

        assert len(scores) == 20
        assert scores == sorted(scores, reverse=True)

    def test_beats_atbash(self, result):
        assert result.best.score > ATBASH_SCORE

    def test_default_top_k(self, orchestrator):
        assert len(orchestrator.crack(CIPHERTEXT).candidates) == 5

    def test_defaults_to_configured_ciphertext(self):
        orchestrator = make_orchestrator(ciphertext="uryyb jbeyq")
        result = orchestrator.crack(target=CipherType.ROT13)

        assert result.best.plaintext_full == "hello world"

    def test_candidates_reproducible_from_params(self, orchestrator, result):
        for candidate in result.candidates:
            again = orchestrator.decrypt_with_key(CIPHERTEXT, candidate.cipher_type, candidate.params)

            assert again.plaintext_full == candidate.plaintext_full
            assert again.score == candidate.score

    def test_deterministic(self, orchestrator, result):
        again = orchestrator.crack(CIPHERTEXT, top_k=20)
        assert [c.score for c in again.candidates] == [c.score for c in result.candidates]

    def test_parallel_matches_sequential(self, result):
        parallel = make_orchestrator(max_parallel_engines=2).crack(CIPHERTEXT, top_k=20)

        assert parallel.keys_tried == result.keys_tried
        assert [c.score for c in parallel.candidates] == [c.score for c in result.candidates]


class TestDecryptWithKey:
    def test_known_key(self, orchestrator):
        candidate = orchestrator.decrypt_with_key(encrypt_caesar(PLAINTEXT, 3), CipherType.CAESAR, "3")

        assert candidate.plaintext_full == PLAINTEXT
        assert candidate.params == "shift 3"
        assert candidate.score == orchestrator.scorer.score(PLAINTEXT)

    def test_unkeyed_cipher(self, orchestrator):
        candidate = orchestrator.decrypt_with_key(CIPHERTEXT, "atbash")
        assert candidate.plaintext_full == "ycidlim, wlwxc rb oyph !"

    def test_invalid_key(self, orchestrator):
        with pytest.raises(InvalidKeyError):
            orchestrator.decrypt_with_key(CIPHERTEXT, CipherType.AFFINE, "13,2")

    def test_unknown_cipher(self, orchestrator):
        with pytest.raises(EngineNotFoundError):
            orchestrator.decrypt_with_key(CIPHERTEXT, "enigma", "key")

    def test_preview_truncated(self):
        orchestrator = make_orchestrator(preview_length=5)
        candidate = orchestrator.decrypt_with_key(PLAINTEXT, CipherType.REVERSE)

        assert candidate.plaintext_preview == PLAINTEXT[::-1][:5]
        assert candidate.plaintext_full == PLAINTEXT[::-1]


class TestLimits:
    def test_ciphertext_too_long(self):
        orchestrator = make_orchestrator(max_ciphertext_length=10)

        with pytest.raises(CiphertextTooLongError):
            orchestrator.crack(CIPHERTEXT, CipherType.CAESAR)
        with pytest.raises(CiphertextTooLongError):
            orchestrator.decrypt_with_key(CIPHERTEXT, CipherType.CAESAR, "1")

    def test_empty_ciphertext(self, orchestrator):
        result = orchestrator.crack("", CipherType.CAESAR)

        assert result.keys_tried == 26
        assert all(c.score == 0 for c in result.candidates)


@pytest.mark.slow
def test_default_search_over_fixed_ciphertext():
    """The full default key space, as shipped."""
    settings = Settings()
    orchestrator = BruteForceOrchestrator(EnglishScorer(default_reference(), settings.scoring_weights), settings)

    result = orchestrator.crack()

    assert result.cipher_types == list(CipherType)
    assert len(result.candidates) == 5
    assert result.best.score > ATBASH_SCORE
