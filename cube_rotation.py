#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
This code implements:
1. The 18 face turns (R R' R2 L L' L2 U U' U2 D D' D2 F F' F2 B B' B2) as
   precomputed permutations of the 54 sticker positions
2. apply_move: one generic interpreter that applies whichever table a move selects
3. Move notation parsing and formatting (e.g. "U R U' L2")

Each face turn is described once by the ring of sticker strips around the
turning face. Counter-clockwise tables are the inverse of the clockwise ones
and double turns are the clockwise table composed with itself.
"""
from enum import Enum

import numpy as np

from cube_state import Face, NUM_FACES, STICKERS_PER_FACE

NUM_STICKERS = NUM_FACES * STICKERS_PER_FACE


class InvalidMoveError(ValueError):
    """Raised when a token is not one of the 18 move names"""

    def __init__(self, token):
        super().__init__(f"Unknown move notation: {token!r}")
        self.token = token


class Turn(Enum):
    # Values are the notation suffixes
    CLOCKWISE = ""
    COUNTER_CLOCKWISE = "'"
    DOUBLE = "2"


_INVERSE_TURN = {
    Turn.CLOCKWISE: Turn.COUNTER_CLOCKWISE,
    Turn.COUNTER_CLOCKWISE: Turn.CLOCKWISE,
    Turn.DOUBLE: Turn.DOUBLE,
}


class Move(Enum):
    R = (Face.RIGHT, Turn.CLOCKWISE)
    R_PRIME = (Face.RIGHT, Turn.COUNTER_CLOCKWISE)
    R2 = (Face.RIGHT, Turn.DOUBLE)
    L = (Face.LEFT, Turn.CLOCKWISE)
    L_PRIME = (Face.LEFT, Turn.COUNTER_CLOCKWISE)
    L2 = (Face.LEFT, Turn.DOUBLE)
    U = (Face.UP, Turn.CLOCKWISE)
    U_PRIME = (Face.UP, Turn.COUNTER_CLOCKWISE)
    U2 = (Face.UP, Turn.DOUBLE)
    D = (Face.DOWN, Turn.CLOCKWISE)
    D_PRIME = (Face.DOWN, Turn.COUNTER_CLOCKWISE)
    D2 = (Face.DOWN, Turn.DOUBLE)
    F = (Face.FRONT, Turn.CLOCKWISE)
    F_PRIME = (Face.FRONT, Turn.COUNTER_CLOCKWISE)
    F2 = (Face.FRONT, Turn.DOUBLE)
    B = (Face.BACK, Turn.CLOCKWISE)
    B_PRIME = (Face.BACK, Turn.COUNTER_CLOCKWISE)
    B2 = (Face.BACK, Turn.DOUBLE)

    def __init__(self, face, turn):
        self.face = face
        self.turn = turn

    @property
    def token(self):
        """Standard notation, e.g. "R", "R'" or "R2" """
        return self.face.letter + self.turn.value

    @property
    def inverse(self):
        return Move((self.face, _INVERSE_TURN[self.turn]))

    @classmethod
    def from_token(cls, token):
        """
        Parse single move notation

        Notation is case sensitive: "R" is a right face turn, "r" is not a move.
        """
        try:
            return _MOVES_BY_TOKEN[token]
        except KeyError:
            raise InvalidMoveError(token) from None

    def __str__(self):
        return self.token


_MOVES_BY_TOKEN = {move.token: move for move in Move}

ALL_MOVES = tuple(Move)
MOVE_TOKENS = tuple(move.token for move in ALL_MOVES)

# Stickers on the turning face: new[ring[i]] = old[ring[i + 1]] for a
# clockwise turn, i.e. corners 0 -> 6 -> 8 -> 2 -> 0 and edges 3 -> 7 -> 5 -> 1 -> 3.
FACE_RINGS = ((6, 0, 2, 8), (7, 3, 1, 5))

# The four strips bordering each face. On a clockwise turn every strip takes
# the stickers of the strip listed after it (the last one wraps to the first),
# keeping the order inside the strip.
ADJACENT_STRIPS = {
    Face.FRONT: (
        (Face.UP, (0, 1, 2)),
        (Face.LEFT, (2, 5, 8)),
        (Face.DOWN, (8, 7, 6)),
        (Face.RIGHT, (6, 3, 0)),
    ),
    Face.UP: (
        (Face.FRONT, (6, 7, 8)),
        (Face.RIGHT, (6, 7, 8)),
        (Face.BACK, (6, 7, 8)),
        (Face.LEFT, (6, 7, 8)),
    ),
    Face.RIGHT: (
        (Face.FRONT, (8, 5, 2)),
        (Face.DOWN, (8, 5, 2)),
        (Face.BACK, (0, 3, 6)),
        (Face.UP, (8, 5, 2)),
    ),
    Face.DOWN: (
        (Face.FRONT, (0, 1, 2)),
        (Face.LEFT, (0, 1, 2)),
        (Face.BACK, (0, 1, 2)),
        (Face.RIGHT, (0, 1, 2)),
    ),
    Face.LEFT: (
        (Face.FRONT, (6, 3, 0)),
        (Face.UP, (6, 3, 0)),
        (Face.BACK, (2, 5, 8)),
        (Face.DOWN, (6, 3, 0)),
    ),
    Face.BACK: (
        (Face.UP, (6, 7, 8)),
        (Face.RIGHT, (8, 5, 2)),
        (Face.DOWN, (2, 1, 0)),
        (Face.LEFT, (0, 3, 6)),
    ),
}


def sticker_index(face, position):
    """Flat index of a sticker in the 54-entry state"""
    return int(face) * STICKERS_PER_FACE + position


def _clockwise_cycles(face):
    cycles = [[sticker_index(face, p) for p in ring] for ring in FACE_RINGS]
    strips = ADJACENT_STRIPS[face]
    for k in range(3):
        cycles.append([sticker_index(side, positions[k]) for side, positions in strips])
    return cycles


def _clockwise_permutation(face):
    perm = np.arange(NUM_STICKERS)
    for cycle in _clockwise_cycles(face):
        for i, dst in enumerate(cycle):
            perm[dst] = cycle[(i + 1) % len(cycle)]
    return perm


def _build_move_permutations():
    tables = {}
    for face in Face:
        clockwise = _clockwise_permutation(face)
        tables[Move((face, Turn.CLOCKWISE))] = clockwise
        tables[Move((face, Turn.COUNTER_CLOCKWISE))] = np.argsort(clockwise)
        tables[Move((face, Turn.DOUBLE))] = clockwise[clockwise]
    for perm in tables.values():
        perm.flags.writeable = False
    return tables


# new_state = old_state[MOVE_PERMUTATIONS[move]] over the flattened state
MOVE_PERMUTATIONS = _build_move_permutations()


def apply_move(state, move):
    """
    Turn one face of the cube in place

    Args:
        state: FaceletState to modify
        move: Move member
    """
    flat = state._grid.reshape(-1)
    flat[:] = flat[MOVE_PERMUTATIONS[move]]


def apply_moves(state, moves):
    """Apply a sequence of Move members in order"""
    for move in moves:
        apply_move(state, move)


def parse_formula(formula):
    """
    Parse a formula string into moves

    Every token is checked before any move is returned, so an invalid token
    means no move of the formula gets applied.

    Args:
        formula: Cube formula string, e.g., "R U R' U'"

    Returns:
        List of Move members
    """
    return [Move.from_token(token) for token in formula.split()]


def format_formula(moves):
    """Join moves back into notation, e.g. "R U R' U'" """
    return " ".join(move.token for move in moves)


def inverse_formula(moves):
    """Moves that undo the given sequence: reversed order, each move inverted"""
    return [move.inverse for move in reversed(list(moves))]


def as_moves(formula):
    """Accept either a formula string or an iterable of Move members"""
    if isinstance(formula, str):
        return parse_formula(formula)
    return list(formula)
