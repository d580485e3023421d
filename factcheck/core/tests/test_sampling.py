"""
Tests for the score samplers.
"""

from factcheck.core.sampling import DeterministicSampler, RandomSampler, create_sampler


class TestDeterministicSampler:
    """Test hash-derived values."""

    def test_same_key_same_value(self):
        sampler = DeterministicSampler(seed=1)
        assert sampler.uniform(0.0, 1.0, "claim") == sampler.uniform(0.0, 1.0, "claim")

    def test_independent_of_call_order(self):
        first = DeterministicSampler()
        second = DeterministicSampler()

        first.uniform(0.0, 1.0, "a")
        assert first.uniform(0.0, 1.0, "b") == second.uniform(0.0, 1.0, "b")

    def test_seed_changes_values(self):
        assert DeterministicSampler(1).uniform(0.0, 1.0, "x") != DeterministicSampler(2).uniform(0.0, 1.0, "x")

    def test_values_in_range(self):
        sampler = DeterministicSampler()
        for index in range(200):
            value = sampler.uniform(0.7, 1.0, f"key-{index}")
            assert 0.7 <= value < 1.0


class TestRandomSampler:
    """Test the random sampler."""

    def test_seeded_sequences_repeat(self):
        first = RandomSampler(seed=5)
        second = RandomSampler(seed=5)
        assert [first.uniform(0, 1, "k") for _ in range(3)] == [second.uniform(0, 1, "k") for _ in range(3)]

    def test_values_in_range(self):
        sampler = RandomSampler()
        for _ in range(200):
            assert 0.3 <= sampler.uniform(0.3, 0.7, "k") < 0.7


class TestCreateSampler:
    """Test the sampler factory."""

    def test_integer_seed_is_deterministic(self):
        sampler = create_sampler(4)
        assert isinstance(sampler, DeterministicSampler)
        assert sampler.seed == 4

    def test_none_is_random(self):
        assert isinstance(create_sampler(None), RandomSampler)
