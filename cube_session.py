#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Cube Session Module (CubeSession):
- Owns one FaceletState and is the only writer to it
- Serializes turns and reads behind a lock so a reader running on another
  thread (e.g. a renderer) never sees a half-applied turn
- Keeps the last scramble so it can be undone
"""
import threading
import time

from cube_rotation import apply_move, as_moves, inverse_formula
from cube_state import FaceletState
from random_cube_generator import DEFAULT_SCRAMBLE_LENGTH, ScrambleGenerator


class CubeSession:
    """
    A cube shared between the command layer and any readers
    """

    def __init__(self, generator=None, pause=0.0, on_turn=None):
        """
        Args:
            generator: ScrambleGenerator, a fresh unseeded one by default
            pause: Seconds to wait after each turn so a viewer can follow along
            on_turn: Optional callback(move, snapshot) run after each turn
        """
        self._lock = threading.RLock()
        self._state = FaceletState()
        self.generator = generator if generator is not None else ScrambleGenerator()
        self.pause = pause
        self.on_turn = on_turn
        self.history = []

    def apply(self, move):
        """
        Apply one move; the lock is held for the whole permutation

        Returns:
            Whether the cube is solved after this turn
        """
        with self._lock:
            apply_move(self._state, move)
            solved = self._state.is_solved()
            snapshot = self._state.clone() if self.on_turn is not None else None
        if snapshot is not None:
            self.on_turn(move, snapshot)
        if self.pause > 0:
            time.sleep(self.pause)
        return solved

    def apply_formula(self, formula, after_turn=None):
        """
        Execute a sequence of moves

        Args:
            formula: Formula string ("R U R' U'") or iterable of Move members
            after_turn: Optional callback(move, solved) run after every turn

        Returns:
            List of the moves applied

        Raises:
            InvalidMoveError: if any token is invalid; no move is applied then
        """
        moves = as_moves(formula)
        for move in moves:
            solved = self.apply(move)
            if after_turn is not None:
                after_turn(move, solved)
        return moves

    def reset(self):
        """Reset to the solved state and forget the last scramble"""
        with self._lock:
            self._state.set_solved()
            self.history = []

    def scramble(self, count=DEFAULT_SCRAMBLE_LENGTH, after_turn=None):
        """
        Scramble the cube with random moves

        Returns:
            The moves applied, in order
        """
        moves = self.generator.generate(count)
        self.apply_formula(moves, after_turn)
        with self._lock:
            self.history = list(moves)
        return moves

    def undo_scramble(self, after_turn=None):
        """
        Apply the inverse of the last scramble

        Returns:
            The moves applied, empty if there was nothing to undo
        """
        with self._lock:
            moves = inverse_formula(self.history)
            self.history = []
        self.apply_formula(moves, after_turn)
        return moves

    def snapshot(self):
        """Independent copy of the current state"""
        with self._lock:
            return self._state.clone()

    def get(self, face, position):
        with self._lock:
            return self._state.get(face, position)

    def is_solved(self):
        with self._lock:
            return self._state.is_solved()
