"""Tests for the seeded Alea generator."""

import pytest
from quadmap.core.alea_prng import AleaPRNG


class TestAleaSequence:
    """Test raw number generation."""

    def test_range(self):
        prng = AleaPRNG("range")
        values = [prng.random() for _ in range(1000)]
        assert all(0.0 <= v < 1.0 for v in values)

    def test_same_seed_same_sequence(self):
        a = AleaPRNG("42")
        b = AleaPRNG("42")
        assert [a.random() for _ in range(50)] == [b.random() for _ in range(50)]

    def test_numeric_and_string_seed_match(self):
        a = AleaPRNG(7)
        b = AleaPRNG("7")
        assert a.random() == b.random()

    def test_different_seeds(self):
        a = AleaPRNG("seed1")
        b = AleaPRNG("seed2")
        assert [a.random() for _ in range(10)] != [b.random() for _ in range(10)]

    def test_call_count(self):
        prng = AleaPRNG("count")
        for _ in range(5):
            prng.random()
        assert prng.call_count == 5


class TestShuffle:
    """Test in-place shuffling."""

    def test_is_permutation(self):
        prng = AleaPRNG("perm")
        items = list(range(100))
        prng.shuffle(items)
        assert sorted(items) == list(range(100))
        assert items != list(range(100))

    def test_reproducible(self):
        a = AleaPRNG("shuffle")
        b = AleaPRNG("shuffle")
        assert a.shuffle(list(range(30))) == b.shuffle(list(range(30)))

    def test_draw_count(self):
        prng = AleaPRNG("draws")
        prng.shuffle(list(range(10)))
        assert prng.call_count == 9

    @pytest.mark.parametrize("items", [[], [1]])
    def test_trivial_sequences(self, items):
        prng = AleaPRNG("trivial")
        assert prng.shuffle(list(items)) == items
        assert prng.call_count == 0

    def test_returns_same_list(self):
        items = [3, 1, 2]
        assert AleaPRNG("same").shuffle(items) is items


class TestRandint:
    """Test integer draws."""

    def test_range(self):
        prng = AleaPRNG("ints")
        values = [prng.randint(7) for _ in range(500)]
        assert min(values) >= 0
        assert max(values) <= 6
        assert prng.call_count == 500
