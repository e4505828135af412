#!/usr/bin/env python3
"""
Tests for the sticker grid and the solved check
"""
import numpy as np
import pytest

from cube_rotation import Move, apply_move
from cube_state import CENTER, ColorId, Face, FaceletState, is_solved


def test_new_state_is_solved():
    state = FaceletState()
    for face in Face:
        assert state.face(face) == [face] * 9
    assert is_solved(state)
    assert state.is_solved()


def test_right_face_of_reset_state():
    state = FaceletState()
    apply_move(state, Move.F)
    state.set_solved()
    assert state.get(Face.RIGHT, 4) == Face.RIGHT
    assert all(state.get(Face.RIGHT, p) == Face.RIGHT for p in range(9))


def test_set_solved_is_idempotent():
    state = FaceletState()
    state.set_solved()
    state.set_solved()
    assert state == FaceletState()


def test_get_returns_color_id():
    state = FaceletState()
    color = state.get(Face.BACK, 0)
    assert isinstance(color, ColorId)
    assert color == Face.BACK


@pytest.mark.parametrize("face, position", [(6, 0), (-1, 0), (0, 9), (0, -1)])
def test_get_out_of_range(face, position):
    state = FaceletState()
    with pytest.raises(IndexError):
        state.get(face, position)


def test_clone_is_independent():
    state = FaceletState()
    copy = state.clone()
    apply_move(state, Move.R)
    assert copy.is_solved()
    assert not state.is_solved()

    apply_move(copy, Move.U)
    assert copy != state
    assert state.get(Face.UP, 8) == Face.FRONT


def test_as_array_is_read_only():
    state = FaceletState()
    grid = state.as_array()
    assert grid.shape == (6, 9)
    with pytest.raises(ValueError):
        grid[0, 0] = 3


def test_color_counts():
    state = FaceletState()
    for move in [Move.R, Move.U2, Move.F_PRIME, Move.B]:
        apply_move(state, move)
    assert state.color_counts() == {color: 9 for color in ColorId}


def test_solved_check_ignores_which_face_has_which_color():
    state = FaceletState()
    # Each face a single color, but not its original one
    state._grid[:] = np.array([[5], [3], [4], [1], [2], [0]])
    assert is_solved(state)


def test_solved_check_catches_one_swapped_pair():
    state = FaceletState()
    state._grid[Face.FRONT, 0], state._grid[Face.UP, 0] = Face.UP, Face.FRONT
    assert not is_solved(state)


def test_centers_identify_faces():
    state = FaceletState()
    for move in Move:
        apply_move(state, move)
    for face in Face:
        assert state.get(face, CENTER) == face


@pytest.mark.parametrize("face", [-1, 6])
def test_face_out_of_range(face):
    state = FaceletState()
    with pytest.raises(IndexError):
        state.face(face)
