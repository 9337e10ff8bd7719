"""Core 3x3 Rubik's cube engine."""

from __future__ import annotations

from typing import Any

import numpy as np

from .facelets import (
    SOLVED_STATE,
    Color,
    StateValidationError,
    facelet_index,
    flat_to_faces,
    is_solved_state,
    state_to_string,
    validate_state,
)
from .moves import Move, apply_moves, format_moves, parse_move_sequence, random_moves

DEFAULT_SCRAMBLE_MOVES = 25


class RubiksCube:
    """Cube whose facelet state is derived by replaying its move history.

    One instance belongs to one caller at a time; it does no locking of its
    own, so concurrent mutation must be serialized by the owner.
    """

    def __init__(
        self,
        moves: str | None = None,
        initial_state: str | list | np.ndarray | None = None,
        seed: int | None = None,
    ):
        if initial_state is None:
            self.initial_state = SOLVED_STATE
        else:
            self.initial_state = validate_state(initial_state)
            self.initial_state.setflags(write=False)

        self._rng = np.random.default_rng(seed)
        self._history: list[Move] = []
        # Derived from initial_state and _history; None means "replay on next read".
        self._state_cache: np.ndarray | None = None

        if moves:
            self.apply_move_sequence(moves)

    def _current_state(self) -> np.ndarray:
        if self._state_cache is None:
            self._state_cache = apply_moves(self.initial_state, self._history)
        return self._state_cache

    def apply_move_sequence(self, sequence: str) -> None:
        """Append every well-formed move in ``sequence`` (e.g. "R U R' U'") to the history."""
        moves = parse_move_sequence(sequence)
        if not moves:
            return
        if self._state_cache is not None:
            self._state_cache = apply_moves(self._state_cache, moves)
        self._history.extend(moves)

    def preview_move_sequence(self, sequence: str) -> np.ndarray:
        """Return the state ``sequence`` would produce, leaving the cube untouched."""
        return apply_moves(self._current_state(), parse_move_sequence(sequence)).copy()

    def reset(self) -> None:
        self._history = []
        self._state_cache = None

    def scramble(self, n: int = DEFAULT_SCRAMBLE_MOVES, seed: int | None = None) -> list[str]:
        """Reset, then apply ``n`` random moves. Returns the applied tokens."""
        if isinstance(n, bool) or not isinstance(n, int) or n < 0:
            raise StateValidationError("Scramble length must be a non-negative integer")

        rng = np.random.default_rng(seed) if seed is not None else self._rng
        self.reset()
        self.apply_move_sequence(format_moves(random_moves(n, rng)))
        return self.get_move_history()

    def get_current_state(self) -> np.ndarray:
        """Return the flat 54-sticker color-code state."""
        return self._current_state().copy()

    def is_solved(self) -> bool:
        return is_solved_state(self._current_state())

    def get_move_history(self) -> list[str]:
        return [move.notation for move in self._history]

    def get_sticker_at(self, face: str, position: int) -> Color:
        return Color(str(self._current_state()[facelet_index(face, position)]))

    def get_faces(self) -> dict[str, list[list[str]]]:
        return flat_to_faces(self._current_state())

    def state_payload(self) -> dict[str, Any]:
        return {
            "state": state_to_string(self._current_state()),
            "move_history": self.get_move_history(),
            "solved": self.is_solved(),
        }
