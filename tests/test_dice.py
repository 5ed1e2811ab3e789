"""
Tests for the dice randomness source.
"""
import random

import pytest

from dice import die_from_draw, roll_die


class TestRollDie:

    def test_value_range(self):
        """Roll 200 times; every value should be 1-6."""
        for _ in range(200):
            assert 1 <= roll_die() <= 6

    def test_all_faces_appear(self):
        rng = random.Random(42)
        faces = {roll_die(rng) for _ in range(300)}
        assert faces == {1, 2, 3, 4, 5, 6}

    def test_seeded_rng_is_reproducible(self):
        first = [roll_die(random.Random(7)) for _ in range(5)]
        second = [roll_die(random.Random(7)) for _ in range(5)]
        assert first == second


class TestDieFromDraw:

    @pytest.mark.parametrize("draw,face", [(0, 1), (5, 6), (6, 1), (11, 6), (2**256 - 1, 4)])
    def test_modulo_mapping(self, draw, face):
        assert die_from_draw(draw) == face

    def test_negative_draw_rejected(self):
        with pytest.raises(ValueError):
            die_from_draw(-1)
