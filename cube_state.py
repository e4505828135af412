#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Cube State Module:
- Face enumeration with the stable indices used everywhere (Front=0 ... Back=5)
- FaceletState: the 6x9 grid of color ids, one row per face
- is_solved: per-face monochromaticity check

Sticker positions 0-8 on each face are read row by row starting from the
row at the bottom of the face as drawn in the net (positions 6, 7, 8 are the
top row). The center (position 4) is never moved.
"""
from enum import IntEnum

import numpy as np

NUM_FACES = 6
STICKERS_PER_FACE = 9
CENTER = 4


class Face(IntEnum):
    FRONT = 0
    UP = 1
    RIGHT = 2
    DOWN = 3
    LEFT = 4
    BACK = 5

    @property
    def letter(self):
        return self.name[0]


# Color ids share the face indices: in the solved state every sticker of a
# face carries that face's index.
ColorId = Face


class FaceletState:
    """
    Colors of all 54 stickers.

    Only the move engine in cube_rotation writes to the grid; everything else
    reads through get(), face() or as_array().
    """

    def __init__(self):
        self._grid = np.empty((NUM_FACES, STICKERS_PER_FACE), dtype=np.int8)
        self.set_solved()

    def set_solved(self):
        """Reset every sticker to the color of its face"""
        for face in Face:
            self._grid[face, :] = face

    def get(self, face, position):
        """
        Get the color id of one sticker

        Args:
            face: Face (or index 0-5)
            position: Sticker position 0-8

        Returns:
            ColorId of the sticker
        """
        _check_face(face)
        if not 0 <= position < STICKERS_PER_FACE:
            raise IndexError(
                f"Sticker position {position} out of range 0-{STICKERS_PER_FACE - 1}"
            )
        return ColorId(int(self._grid[face, position]))

    def face(self, face):
        """Return the 9 color ids of one face as a list"""
        _check_face(face)
        return [ColorId(int(c)) for c in self._grid[face]]

    def as_array(self):
        """Return a read-only view of the (6, 9) grid"""
        view = self._grid.view()
        view.flags.writeable = False
        return view

    def color_counts(self):
        """Return how many stickers carry each color id"""
        counts = np.bincount(self._grid.ravel(), minlength=NUM_FACES)
        return {color: int(counts[color]) for color in ColorId}

    def clone(self):
        """Create an independent copy of the state"""
        new_state = FaceletState.__new__(FaceletState)
        new_state._grid = self._grid.copy()
        return new_state

    def is_solved(self):
        return is_solved(self)

    def __eq__(self, other):
        if not isinstance(other, FaceletState):
            return NotImplemented
        return np.array_equal(self._grid, other._grid)

    __hash__ = None

    def __repr__(self):
        rows = " ".join("".join(str(c) for c in row) for row in self._grid)
        return f"FaceletState({rows})"


def _check_face(face):
    if not 0 <= face < NUM_FACES:
        raise IndexError(f"Face index {face} out of range 0-{NUM_FACES - 1}")


def is_solved(state):
    """
    Check if the cube is solved

    A face is solved when all 9 stickers match its center, so the check does
    not depend on which color ended up on which face.

    Returns:
        boolean: Whether every face is a single color
    """
    grid = state.as_array()
    return bool(np.all(grid == grid[:, CENTER:CENTER + 1]))
