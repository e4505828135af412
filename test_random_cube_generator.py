#!/usr/bin/env python3
"""
Tests for scramble generation and named patterns
"""
import random

import pytest

from cube_rotation import Move, apply_moves, parse_formula
from cube_state import Face, FaceletState
from random_cube_generator import (CHECKER_PATTERN, DEFAULT_SCRAMBLE_LENGTH, ScrambleGenerator,
                                   generate_scramble, pattern_moves)

OPPOSITE = {
    Face.FRONT: Face.BACK, Face.BACK: Face.FRONT,
    Face.UP: Face.DOWN, Face.DOWN: Face.UP,
    Face.RIGHT: Face.LEFT, Face.LEFT: Face.RIGHT,
}


def test_default_length():
    assert DEFAULT_SCRAMBLE_LENGTH == 25
    moves = ScrambleGenerator(seed=1).generate()
    assert len(moves) == 25
    assert all(isinstance(move, Move) for move in moves)


def test_same_seed_same_scramble_and_state():
    first = ScrambleGenerator(seed=42).generate(25)
    second = ScrambleGenerator(seed=42).generate(25)
    assert first == second

    a, b = FaceletState(), FaceletState()
    apply_moves(a, first)
    apply_moves(b, second)
    assert a == b
    assert not a.is_solved()


def test_injected_random_source():
    generator = ScrambleGenerator(rng=random.Random(9))
    expected_rng = random.Random(9)
    assert generator.generate(10) == [expected_rng.choice(list(Move)) for _ in range(10)]


def test_zero_and_negative_counts():
    generator = ScrambleGenerator(seed=0)
    assert generator.generate(0) == []
    with pytest.raises(ValueError):
        generator.generate(-1)


def test_every_move_can_be_drawn():
    moves = ScrambleGenerator(seed=3).generate(2000)
    assert set(moves) == set(Move)


def test_generate_formula_parses_back():
    formula = ScrambleGenerator(seed=5).generate_formula(12)
    assert parse_formula(formula) == ScrambleGenerator(seed=5).generate(12)


def test_generate_scramble_helper():
    assert generate_scramble(8, seed=77) == ScrambleGenerator(seed=77).generate(8)


def test_checker_pattern():
    assert pattern_moves("checker") == parse_formula(CHECKER_PATTERN)
    state = FaceletState()
    apply_moves(state, pattern_moves("checker"))
    for face in Face:
        for position in (0, 2, 4, 6, 8):
            assert state.get(face, position) == face
        for position in (1, 3, 5, 7):
            assert state.get(face, position) == OPPOSITE[face]


def test_unknown_pattern():
    with pytest.raises(ValueError):
        pattern_moves("cube in cube")
