#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Color schemes and cube net drawing.

A color scheme only decides how a color id is displayed. Switching schemes
never changes the cube state, and a cube is solved or not regardless of the
scheme in use (the "dodo" scheme paints every face the same color).

Net layout used by both the text and the matplotlib output:

           +-----+
           |  U  |
    +-----+-----+-----+-----+
    |  L  |  F  |  R  |  B  |
    +-----+-----+-----+-----+
           |  D  |
           +-----+
"""
from collections import namedtuple

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.patches import Rectangle

from cube_state import ColorId, Face

ColorScheme = namedtuple("ColorScheme", ["name", "plastic", "colors", "labels"])

# colors and labels are indexed by color id: Front, Up, Right, Down, Left, Back
COLOR_SCHEMES = {
    "basic": ColorScheme(
        name="basic",
        plastic="#000000",
        colors=("#FFFFFF", "#0000FF", "#FF0000", "#00FF00", "#FF8C00", "#FFFF00"),
        labels=("W", "B", "R", "G", "O", "Y"),
    ),
    "white": ColorScheme(
        name="white",
        plastic="#FFFFFF",
        colors=("#000000", "#0000FF", "#FF0000", "#008000", "#FF8C00", "#D2D200"),
        labels=("K", "B", "R", "G", "O", "Y"),
    ),
    # Every face the same mustard yellow
    "dodo": ColorScheme(
        name="dodo",
        plastic="#000000",
        colors=("#FFD700",) * 6,
        labels=("M",) * 6,
    ),
}

DEFAULT_SCHEME = "basic"

# Face offsets on the canvas (x, y), in sticker units
FACE_OFFSETS = {
    Face.UP: (3, 6),
    Face.LEFT: (0, 3),
    Face.FRONT: (3, 3),
    Face.RIGHT: (6, 3),
    Face.BACK: (9, 3),
    Face.DOWN: (3, 0),
}


def get_scheme(name):
    """
    Look up a color scheme by name (case insensitive)

    Raises:
        ValueError: if the name is not one of COLOR_SCHEMES
    """
    try:
        return COLOR_SCHEMES[name.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown color scheme: {name}. Possible options include: {', '.join(COLOR_SCHEMES)}"
        ) from None


def _face_rows(state, face):
    """Rows of a face from the top of the net down (positions 6-8 first)"""
    stickers = state.face(face)
    return [stickers[row * 3:row * 3 + 3] for row in (2, 1, 0)]


def _label(color, scheme):
    if scheme is None:
        return ColorId(color).letter
    return scheme.labels[color]


def format_net(state, scheme=None):
    """
    Build a text net of the cube

    Args:
        state: FaceletState to show
        scheme: Optional ColorScheme; without one stickers are labelled by the
            letter of the face whose color they carry

    Returns:
        Multi-line string
    """
    lines = []

    def row_text(face, row):
        return " ".join(_label(c, scheme) for c in _face_rows(state, face)[row])

    # Print upper layer
    lines.append("      Up")
    for row in range(3):
        lines.append("      " + row_text(Face.UP, row))
    lines.append("Left  Front Right Back")
    for row in range(3):
        lines.append(" ".join(row_text(face, row)
                              for face in (Face.LEFT, Face.FRONT, Face.RIGHT, Face.BACK)))
    lines.append("      Down")
    for row in range(3):
        lines.append("      " + row_text(Face.DOWN, row))
    return "\n".join(lines)


def draw_cube(state, scheme=None, filename="rubik_cube.png"):
    """
    Draw cube net diagram using matplotlib and save it as an image

    Args:
        state: FaceletState to draw
        scheme: ColorScheme, defaults to the basic scheme
        filename: Output image path

    Returns:
        The filename written
    """
    if scheme is None:
        scheme = COLOR_SCHEMES[DEFAULT_SCHEME]

    fig, ax = plt.subplots(figsize=(6, 4.5))
    fig.patch.set_facecolor("#808080")

    # Draw each face; sticker p sits in column p % 3 of row p // 3 counted
    # from the bottom of the face
    for face, (ox, oy) in FACE_OFFSETS.items():
        for position, color in enumerate(state.face(face)):
            x = ox + position % 3
            y = oy + position // 3
            rect = Rectangle((x, y), 1, 1, edgecolor=scheme.plastic,
                             facecolor=scheme.colors[color], lw=2)
            ax.add_patch(rect)
        ax.text(ox + 1.5, oy + 3.1, face.name.title(), fontsize=12, ha='center')

    ax.set_xlim(0, 12)
    ax.set_ylim(0, 9.5)
    ax.set_aspect('equal')
    ax.axis('off')
    plt.tight_layout()
    plt.savefig(filename, dpi=150, facecolor=fig.get_facecolor())
    plt.close(fig)
    return filename
