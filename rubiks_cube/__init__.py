"""Rubik's cube 3x3 facelet model and move engine."""

from .engine import RubiksCube
from .facelets import SOLVED_STATE, Color, StateValidationError, facelet_index
from .moves import Modifier, Move, MoveNotationError, parse_move_sequence

__all__ = [
    "RubiksCube",
    "SOLVED_STATE",
    "Color",
    "StateValidationError",
    "facelet_index",
    "Modifier",
    "Move",
    "MoveNotationError",
    "parse_move_sequence",
]
