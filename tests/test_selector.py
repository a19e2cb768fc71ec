"""Tests for the bounded top-K selector."""

import random

import pytest

from cipher_bruteforce.models.schemas import Candidate, CipherType
from cipher_bruteforce.services.pipeline.selector import TopKSelector


def make_candidate(score: int, params: str = "shift 0") -> Candidate:
    return Candidate(
        score=score,
        cipher_type=CipherType.CAESAR,
        params=params,
        plaintext_preview="",
        plaintext_full="",
    )


class TestTopKSelector:
    @pytest.fixture
    def selector(self):
        return TopKSelector(capacity=3)

    def test_empty(self, selector):
        assert len(selector) == 0
        assert selector.best() is None
        assert selector.sorted_results() == []
        assert selector.min_score is None

    def test_fills_unconditionally(self, selector):
        for score in (1, 1, 1):
            assert selector.insert(make_candidate(score))
        assert len(selector) == 3

    def test_evicts_minimum(self, selector):
        for score in (10, 20, 30):
            selector.insert(make_candidate(score))

        assert selector.insert(make_candidate(25))
        assert [c.score for c in selector.sorted_results()] == [30, 25, 20]

    def test_discards_equal_or_lower(self, selector):
        for score in (10, 20, 30):
            selector.insert(make_candidate(score))

        assert not selector.insert(make_candidate(10, "late"))
        assert not selector.insert(make_candidate(5))
        assert [c.score for c in selector.sorted_results()] == [30, 20, 10]
        assert all(c.params != "late" for c in selector.sorted_results())

    def test_would_accept(self, selector):
        assert selector.would_accept(-100)
        for score in (10, 20, 30):
            selector.insert(make_candidate(score))

        assert selector.min_score == 10
        assert not selector.would_accept(10)
        assert selector.would_accept(11)

    def test_best(self, selector):
        for score in (4, 40, 7):
            selector.insert(make_candidate(score))
        assert selector.best().score == 40

    def test_ties_do_not_compare_candidates(self, selector):
        for i in range(6):
            selector.insert(make_candidate(5, f"key {i}"))
        assert len(selector) == 3

    def test_bound_holds_over_random_inserts(self):
        rng = random.Random(1234)
        selector = TopKSelector(capacity=5)
        seen = []

        for _ in range(2_000):
            score = rng.randint(-50, 500)
            seen.append(score)
            selector.insert(make_candidate(score))

            held = [c.score for c in selector.sorted_results()]
            assert len(held) <= 5
            assert held == sorted(seen, reverse=True)[: len(held)]

    def test_merge_keeps_global_top_k(self):
        left = TopKSelector(capacity=3)
        right = TopKSelector(capacity=3)
        for score in (1, 9, 5):
            left.insert(make_candidate(score))
        for score in (7, 2, 8):
            right.insert(make_candidate(score))

        merged = left.merge(right)

        assert merged is left
        assert [c.score for c in merged.sorted_results()] == [9, 8, 7]

    def test_invalid_capacity(self):
        with pytest.raises(ValueError):
            TopKSelector(capacity=0)
