"""Tests for mixed-radix key enumeration."""

import itertools

from cipher_bruteforce.services.engines.keyspace import (
    key_from_ordinal,
    keyspace_size,
    keyword_to_shifts,
    shift_sequences,
    shift_sequences_up_to,
    shifts_to_keyword,
)


class TestKeyFromOrdinal:
    """Ordinals map to base-26 digits, most significant first."""

    def test_zero(self):
        assert key_from_ordinal(0, 3) == (0, 0, 0)

    def test_least_significant_digit_last(self):
        assert key_from_ordinal(1, 3) == (0, 0, 1)
        assert key_from_ordinal(26, 3) == (0, 1, 0)
        assert key_from_ordinal(27, 2) == (1, 1)

    def test_last_ordinal(self):
        assert key_from_ordinal(26 ** 4 - 1, 4) == (25, 25, 25, 25)


class TestShiftSequences:
    def test_counting_order(self):
        keys = list(shift_sequences(2))

        assert len(keys) == 676
        assert keys[0] == (0, 0)
        assert keys[1] == (0, 1)
        assert keys[26] == (1, 0)
        assert keys[-1] == (25, 25)
        assert keys == sorted(keys)

    def test_exhaustive_without_duplicates(self):
        keys = list(shift_sequences(3))
        assert set(keys) == set(itertools.product(range(26), repeat=3))
        assert len(keys) == len(set(keys))

    def test_is_lazy(self):
        keys = shift_sequences(5)
        assert next(keys) == (0, 0, 0, 0, 0)

    def test_up_to_covers_every_length(self):
        keys = list(shift_sequences_up_to(2))

        assert len(keys) == 26 + 676
        assert keys[0] == (0,)
        assert keys[25] == (25,)
        assert keys[26] == (0, 0)

    def test_keyspace_size(self):
        assert keyspace_size(1) == 26
        assert keyspace_size(5) == 12_356_630
        assert keyspace_size(4) == 26 + 676 + 17_576 + 456_976


class TestKeywords:
    def test_shifts_to_keyword(self):
        assert shifts_to_keyword((11, 4, 12, 14, 13)) == "lemon"

    def test_keyword_to_shifts(self):
        assert keyword_to_shifts("LEMON") == (11, 4, 12, 14, 13)
        assert keyword_to_shifts("a-z") == (0, 25)
