"""Move notation and face-turn permutations for the 3x3 cube."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable

import numpy as np

from .facelets import FACE_ORDER, OPPOSITE_FACE, STATE_SIZE, facelet_index

logger = logging.getLogger(__name__)

MOVE_PATTERN = re.compile(r"([RLUDFB])(['2]?)")


class MoveNotationError(ValueError):
    """Raised when a single move token is not valid notation."""


class Modifier(Enum):
    PLAIN = ("", 1)
    PRIME = ("'", 3)
    DOUBLE = ("2", 2)

    def __init__(self, suffix: str, turns: int):
        self.suffix = suffix
        self.turns = turns

    @classmethod
    def from_suffix(cls, suffix: str) -> Modifier:
        for modifier in cls:
            if modifier.suffix == suffix:
                return modifier
        raise MoveNotationError(f"Unknown move modifier {suffix!r}")


@dataclass(frozen=True)
class Move:
    face: str
    modifier: Modifier = Modifier.PLAIN

    def __post_init__(self):
        if not isinstance(self.face, str) or self.face not in FACE_ORDER:
            raise MoveNotationError(f"Unknown face {self.face!r}; expected one of {''.join(FACE_ORDER)}")
        if not isinstance(self.modifier, Modifier):
            raise MoveNotationError(f"Unknown move modifier {self.modifier!r}")

    @property
    def notation(self) -> str:
        return f"{self.face}{self.modifier.suffix}"

    def __str__(self) -> str:
        return self.notation

    @classmethod
    def parse(cls, token: str) -> Move:
        match = MOVE_PATTERN.fullmatch(token)
        if match is None:
            raise MoveNotationError(f"Invalid move token {token!r}")
        return cls(match.group(1), Modifier.from_suffix(match.group(2)))

    def inverse(self) -> Move:
        if self.modifier is Modifier.PLAIN:
            return Move(self.face, Modifier.PRIME)
        if self.modifier is Modifier.PRIME:
            return Move(self.face, Modifier.PLAIN)
        return self


def _cycle(*facelets: str) -> tuple[int, ...]:
    return tuple(facelet_index(name[0], int(name[1])) for name in facelets)


# Clockwise quarter turns as seen from outside the turned face. Each cycle
# (a, b, c, d) sends the sticker at a to b, b to c, c to d and d to a.
FACE_CYCLES = {
    "U": (
        _cycle("U1", "U3", "U9", "U7"),
        _cycle("U2", "U6", "U8", "U4"),
        _cycle("F1", "L1", "B1", "R1"),
        _cycle("F2", "L2", "B2", "R2"),
        _cycle("F3", "L3", "B3", "R3"),
    ),
    "R": (
        _cycle("R1", "R3", "R9", "R7"),
        _cycle("R2", "R6", "R8", "R4"),
        _cycle("U9", "B1", "D9", "F9"),
        _cycle("U6", "B4", "D6", "F6"),
        _cycle("U3", "B7", "D3", "F3"),
    ),
    "F": (
        _cycle("F1", "F3", "F9", "F7"),
        _cycle("F2", "F6", "F8", "F4"),
        _cycle("U7", "R1", "D3", "L9"),
        _cycle("U8", "R4", "D2", "L6"),
        _cycle("U9", "R7", "D1", "L3"),
    ),
    "D": (
        _cycle("D1", "D3", "D9", "D7"),
        _cycle("D2", "D6", "D8", "D4"),
        _cycle("F7", "R7", "B7", "L7"),
        _cycle("F8", "R8", "B8", "L8"),
        _cycle("F9", "R9", "B9", "L9"),
    ),
    "L": (
        _cycle("L1", "L3", "L9", "L7"),
        _cycle("L2", "L6", "L8", "L4"),
        _cycle("U1", "F1", "D1", "B9"),
        _cycle("U4", "F4", "D4", "B6"),
        _cycle("U7", "F7", "D7", "B3"),
    ),
    "B": (
        _cycle("B1", "B3", "B9", "B7"),
        _cycle("B2", "B6", "B8", "B4"),
        _cycle("U3", "L1", "D7", "R9"),
        _cycle("U2", "L4", "D8", "R6"),
        _cycle("U1", "L7", "D9", "R3"),
    ),
}


def _permutation_from_cycles(cycles: Iterable[tuple[int, ...]]) -> np.ndarray:
    """Build a gather array so that new_state = old_state[perm]."""
    perm = np.arange(STATE_SIZE, dtype=np.int32)
    for cycle in cycles:
        for src, dst in zip(cycle, cycle[1:] + cycle[:1]):
            perm[dst] = src
    return perm


def _generate_move_permutations() -> dict[str, np.ndarray]:
    perms = {}
    for face in FACE_ORDER:
        perm = _permutation_from_cycles(FACE_CYCLES[face])
        perm.setflags(write=False)
        perms[face] = perm
    return perms


MOVE_PERMUTATIONS = _generate_move_permutations()


def apply_move(state: np.ndarray, move: Move) -> np.ndarray:
    """Return a new state with one move applied; prime and double moves repeat the quarter turn."""
    perm = MOVE_PERMUTATIONS[move.face]
    for _ in range(move.modifier.turns):
        state = state[perm]
    return state


def apply_moves(state: np.ndarray, moves: Iterable[Move]) -> np.ndarray:
    for move in moves:
        state = apply_move(state, move)
    return state


def parse_move_sequence(sequence: str) -> list[Move]:
    """Extract every well-formed move from a notation string.

    Garbled fragments are dropped. A non-empty sequence that yields no move
    at all is logged as a warning; it never raises.
    """
    text = sequence.strip()
    moves = [
        Move(match.group(1), Modifier.from_suffix(match.group(2)))
        for match in MOVE_PATTERN.finditer(text)
    ]

    if not moves:
        if text:
            logger.warning("Could not parse move sequence: %r", sequence)
        return moves

    ignored = MOVE_PATTERN.sub(" ", text).split()
    if ignored:
        logger.debug("Ignored unrecognised notation in %r: %s", sequence, " ".join(ignored))
    return moves


def format_moves(moves: Iterable[Move]) -> str:
    return " ".join(move.notation for move in moves)


def invert_moves(moves: Iterable[Move]) -> list[Move]:
    """Return the sequence that undoes ``moves``."""
    return [move.inverse() for move in reversed(list(moves))]


def random_moves(count: int, rng: np.random.Generator) -> list[Move]:
    """Random moves with no face repeated or followed by its opposite face."""
    modifiers = list(Modifier)
    moves: list[Move] = []
    prev_face: str | None = None

    for _ in range(count):
        if prev_face is None:
            candidates = list(FACE_ORDER)
        else:
            candidates = [f for f in FACE_ORDER if f != prev_face and f != OPPOSITE_FACE[prev_face]]
        face = str(rng.choice(candidates))
        modifier = modifiers[int(rng.integers(len(modifiers)))]
        moves.append(Move(face, modifier))
        prev_face = face

    return moves
