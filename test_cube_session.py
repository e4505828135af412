#!/usr/bin/env python3
"""
Tests for the lock-guarded cube session
"""
import threading

import pytest

from cube_rotation import InvalidMoveError, Move
from cube_session import CubeSession
from cube_state import ColorId, Face, FaceletState
from random_cube_generator import ScrambleGenerator


def test_apply_and_reset():
    session = CubeSession()
    session.apply(Move.R)
    assert session.get(Face.UP, 8) == Face.FRONT
    assert not session.is_solved()
    session.reset()
    assert session.is_solved()


def test_apply_formula_string_and_moves():
    session = CubeSession()
    moves = session.apply_formula("R U R' U'")
    assert moves == [Move.R, Move.U, Move.R_PRIME, Move.U_PRIME]
    session.apply_formula([Move.U, Move.R, Move.U_PRIME, Move.R_PRIME])
    assert session.is_solved()


def test_invalid_formula_applies_nothing():
    session = CubeSession()
    with pytest.raises(InvalidMoveError):
        session.apply_formula("R U x")
    assert session.is_solved()


def test_scramble_is_reproducible():
    a = CubeSession(generator=ScrambleGenerator(seed=123))
    b = CubeSession(generator=ScrambleGenerator(seed=123))
    assert a.scramble() == b.scramble()
    assert a.snapshot() == b.snapshot()
    assert len(a.history) == 25


def test_undo_scramble_restores_solved():
    session = CubeSession(generator=ScrambleGenerator(seed=8))
    moves = session.scramble(30)
    assert not session.is_solved()
    undo = session.undo_scramble()
    assert len(undo) == len(moves)
    assert session.is_solved()
    assert session.history == []
    assert session.undo_scramble() == []


def test_snapshot_is_a_copy():
    session = CubeSession()
    snapshot = session.snapshot()
    session.apply(Move.F)
    assert snapshot == FaceletState()
    assert session.snapshot() != snapshot


def test_on_turn_callback_sees_each_move():
    seen = []
    session = CubeSession(on_turn=lambda move, state: seen.append((move, state)))
    session.apply_formula("R U2")
    assert [move for move, _ in seen] == [Move.R, Move.U2]
    assert seen[0][1].get(Face.UP, 8) == Face.FRONT


def test_reader_thread_never_sees_partial_turn():
    session = CubeSession(generator=ScrambleGenerator(seed=1))
    stop = threading.Event()
    bad_snapshots = []

    def reader():
        while not stop.is_set():
            counts = session.snapshot().color_counts()
            if counts != {color: 9 for color in ColorId}:
                bad_snapshots.append(counts)

    thread = threading.Thread(target=reader)
    thread.start()
    try:
        for _ in range(20):
            session.scramble(25)
    finally:
        stop.set()
        thread.join()

    assert bad_snapshots == []


def test_after_turn_reports_each_solved_state():
    session = CubeSession()
    seen = []
    assert session.apply(Move.R) is False
    session.apply_formula("R R R U", after_turn=lambda move, solved: seen.append((move, solved)))
    assert seen == [(Move.R, False), (Move.R, False), (Move.R, True), (Move.U, False)]
