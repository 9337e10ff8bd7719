"""Facelet layout, addressing and state codec helpers for the 3x3 cube."""

from __future__ import annotations

from enum import Enum
from typing import Any

import numpy as np

FACE_ORDER = ("U", "R", "F", "D", "L", "B")
FACE_INDEX = {face: i for i, face in enumerate(FACE_ORDER)}
N_FACES = 6
STICKERS_PER_FACE = 9
STATE_SIZE = N_FACES * STICKERS_PER_FACE

OPPOSITE_FACE = {"R": "L", "L": "R", "U": "D", "D": "U", "F": "B", "B": "F"}


class StateValidationError(ValueError):
    """Raised when a facelet array or facelet address is invalid."""


class Color(str, Enum):
    WHITE = "W"
    YELLOW = "Y"
    BLUE = "B"
    GREEN = "G"
    RED = "R"
    ORANGE = "O"


COLOR_CODES = tuple(color.value for color in Color)

# Move tables are written relative to this assignment.
FACE_COLORS = {
    "U": Color.YELLOW,
    "R": Color.RED,
    "F": Color.BLUE,
    "D": Color.WHITE,
    "L": Color.ORANGE,
    "B": Color.GREEN,
}


def facelet_index(face: str, position: int) -> int:
    """Map a face letter and 1-based position to an index in the flat state.

    Positions run row-major over the face as seen in the unrolled net:

                 U1 U2 U3
                 U4 U5 U6
                 U7 U8 U9
        L1 L2 L3 F1 F2 F3 R1 R2 R3 B1 B2 B3
        L4 L5 L6 F4 F5 F6 R4 R5 R6 B4 B5 B6
        L7 L8 L9 F7 F8 F9 R7 R8 R9 B7 B8 B9
                 D1 D2 D3
                 D4 D5 D6
                 D7 D8 D9
    """
    if not isinstance(face, str) or face not in FACE_INDEX:
        raise StateValidationError(f"Unknown face {face!r}; expected one of {''.join(FACE_ORDER)}")
    if isinstance(position, bool) or not isinstance(position, (int, np.integer)):
        raise StateValidationError(f"Facelet position must be an integer, got {position!r}")
    if not 1 <= position <= STICKERS_PER_FACE:
        raise StateValidationError(f"Facelet position must be in range 1..9, got {position}")
    return FACE_INDEX[face] * STICKERS_PER_FACE + int(position) - 1


def solved_state() -> np.ndarray:
    """Return the canonical solved flat state of length 54."""
    codes = np.array([FACE_COLORS[face].value for face in FACE_ORDER])
    return np.repeat(codes, STICKERS_PER_FACE)


SOLVED_STATE = solved_state()
SOLVED_STATE.setflags(write=False)


def _color_code(value: Any) -> str:
    try:
        return Color(value).value
    except (ValueError, TypeError):
        raise StateValidationError(
            f"Invalid color {value!r}; allowed values are {', '.join(COLOR_CODES)}"
        ) from None


def validate_state(state: str | list | np.ndarray) -> np.ndarray:
    """Validate state and return canonical flat color codes (length 54)."""
    if isinstance(state, str):
        state = list(state)

    arr = np.asarray(state, dtype=object).reshape(-1)
    if arr.size != STATE_SIZE:
        raise StateValidationError(f"State must have {STATE_SIZE} stickers, got {arr.size}")

    codes = np.array([_color_code(value) for value in arr])
    colors, counts = np.unique(codes, return_counts=True)
    if len(colors) != N_FACES or np.any(counts != STICKERS_PER_FACE):
        raise StateValidationError(
            "Invalid sticker counts; each color must appear exactly 9 times"
        )
    return codes


def is_solved_state(state: np.ndarray) -> bool:
    return bool(np.array_equal(state, SOLVED_STATE))


def state_to_string(state: np.ndarray) -> str:
    return "".join(str(code) for code in state)


def flat_to_faces(state: str | list | np.ndarray) -> dict[str, list[list[str]]]:
    """Return a face -> 3x3 grid view of a flat state."""
    arr = validate_state(state)
    return {
        face: [
            [str(arr[facelet_index(face, row * 3 + col + 1)]) for col in range(3)]
            for row in range(3)
        ]
        for face in FACE_ORDER
    }


def render_net(state: str | list | np.ndarray) -> str:
    """Render the unrolled net with U on top, then L F R B, then D."""
    faces = flat_to_faces(state)
    pad = " " * 6

    lines = [pad + " ".join(row) for row in faces["U"]]
    for row in range(3):
        lines.append(" ".join(" ".join(faces[face][row]) for face in ("L", "F", "R", "B")))
    lines.extend(pad + " ".join(row) for row in faces["D"])
    return "\n".join(lines)
