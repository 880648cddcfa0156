"""Tests for GameRNG -- determinism, forking, weighted draws."""

import pytest

from rpg_combat.sim.core.rng import GameRNG


class TestDeterminism:
    def test_same_seed_same_sequence(self):
        a, b = GameRNG(7), GameRNG(7)
        assert [a.random_int(0, 100) for _ in range(20)] == [
            b.random_int(0, 100) for _ in range(20)
        ]

    def test_seed_property(self):
        assert GameRNG(123).seed == 123

    def test_unseeded_gets_a_seed(self):
        assert isinstance(GameRNG().seed, int)


class TestFork:
    def test_fork_is_deterministic(self):
        assert GameRNG(1).fork("combat").seed == GameRNG(1).fork("combat").seed

    def test_fork_names_are_independent(self):
        rng = GameRNG(1)
        assert rng.fork("combat").seed != rng.fork("spawn").seed

    def test_fork_does_not_consume_parent(self):
        a, b = GameRNG(5), GameRNG(5)
        a.fork("combat")
        assert a.random_float() == b.random_float()


class TestChance:
    def test_zero_never(self):
        rng = GameRNG(0)
        assert not any(rng.chance(0.0) for _ in range(500))

    def test_one_always(self):
        rng = GameRNG(0)
        assert all(rng.chance(1.0) for _ in range(500))


class TestWeightedChoice:
    def test_zero_weight_never_drawn(self):
        rng = GameRNG(3)
        draws = {rng.weighted_choice(["a", "b"], [1, 0]) for _ in range(500)}
        assert draws == {"a"}

    def test_empty_sequence_raises(self):
        with pytest.raises(ValueError):
            GameRNG(0).weighted_choice([], [])

    def test_length_mismatch_raises(self):
        with pytest.raises(ValueError):
            GameRNG(0).weighted_choice(["a", "b"], [1])

    def test_negative_weight_raises(self):
        with pytest.raises(ValueError):
            GameRNG(0).weighted_choice(["a", "b"], [2, -1])

    def test_all_zero_raises(self):
        with pytest.raises(ValueError):
            GameRNG(0).weighted_choice(["a", "b"], [0, 0])

    def test_proportions(self):
        rng = GameRNG(11)
        n = 10_000
        hits = sum(rng.weighted_choice(["a", "b"], [3, 1]) == "a" for _ in range(n))
        assert hits / n == pytest.approx(0.75, abs=0.02)
