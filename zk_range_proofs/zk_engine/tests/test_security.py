"""
Tests for randomness and constant-time helpers.
"""

import pytest

from ..exceptions import RandomnessError
from ..security import RandomnessSource, constant_time_compare


class TestRandomnessSource:

    def test_random_bits_range(self, randomness):
        for _ in range(20):
            value = randomness.get_random_bits(256)
            assert 0 <= value < 2**256

    def test_random_bits_distinct(self, randomness):
        values = {randomness.get_random_bits() for _ in range(10)}
        assert len(values) == 10

    def test_random_scalar_range(self, randomness):
        for _ in range(50):
            assert 0 <= randomness.get_random_scalar(7) < 7

    def test_invalid_bounds(self, randomness):
        with pytest.raises(ValueError):
            randomness.get_random_scalar(0)
        with pytest.raises(ValueError):
            randomness.get_random_bits(0)

    def test_random_bytes(self, randomness):
        assert len(randomness.get_random_bytes(32)) == 32

    def test_no_fallback_without_os_source(self, monkeypatch, randomness):
        """Missing OS entropy raises instead of degrading."""

        def _unavailable(*args, **kwargs):
            raise NotImplementedError("no urandom")

        monkeypatch.setattr(randomness._rng, "getrandbits", _unavailable)
        with pytest.raises(RandomnessError):
            randomness.get_random_bits()

    def test_reinitializes_after_fork(self, monkeypatch, randomness):
        """A changed pid triggers a fresh generator."""
        old_rng = randomness._rng
        monkeypatch.setattr(randomness, "_pid", -1)
        randomness.get_random_bits()
        assert randomness._rng is not old_rng


class TestConstantTimeCompare:

    def test_equal(self):
        assert constant_time_compare(b"abc", b"abc")
        assert constant_time_compare("abc", "abc")

    def test_not_equal(self):
        assert not constant_time_compare("abc", "abd")
        assert not constant_time_compare("abc", "abcd")

    def test_mixed_types(self):
        assert constant_time_compare("abc", b"abc")
