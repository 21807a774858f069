# Copyright (c) 2022-2026, The Isaac Lab Project Developers.
# All rights reserved.
#
# SPDX-License-Identifier: BSD-3-Clause

"""Movement vocabulary: compass directions, turn types and movement keys.

A movement is a directed traversal of the intersection from one approach to
one exit. Movements are identified by a typed MovementKey whose string code
reads "<From>-><To>" for straight movements and "<From>-><To>_<turn>" for
turns, e.g. "S->N" or "N->W_right".
"""

import re
from enum import Enum
from typing import NamedTuple, Optional, Tuple


class Direction(Enum):
    """Compass side of the intersection."""

    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"

    @property
    def code(self) -> str:
        """Single-letter code used in movement keys."""
        return _DIRECTION_CODES[self]

    @property
    def vector(self) -> Tuple[float, float]:
        """Unit vector from the center toward this side, in screen coordinates (y down)."""
        return _DIRECTION_VECTORS[self]

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]

    @classmethod
    def from_code(cls, code: str) -> Optional["Direction"]:
        """Reverse-map a single-letter code; None if unknown."""
        for direction, letter in _DIRECTION_CODES.items():
            if letter == code:
                return direction
        return None

    @classmethod
    def coerce(cls, value) -> Optional["Direction"]:
        """Interpret a member, its value, its name or its letter code.

        Returns:
            The matching Direction, or None for anything unrecognized.
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        text = value.strip()
        for direction in cls:
            if text.lower() == direction.value or text.upper() == direction.name:
                return direction
        return cls.from_code(text.upper()) if len(text) == 1 else None


class TurnType(Enum):
    """Classification of a movement through the intersection."""

    STRAIGHT = "straight"
    LEFT = "left"
    RIGHT = "right"

    @classmethod
    def coerce(cls, value) -> Optional["TurnType"]:
        """Interpret a member, its value or its name; None if unrecognized."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        text = value.strip()
        for turn in cls:
            if text.lower() == turn.value or text.upper() == turn.name:
                return turn
        return None


_DIRECTION_CODES = {
    Direction.NORTH: "N",
    Direction.SOUTH: "S",
    Direction.EAST: "E",
    Direction.WEST: "W",
}

_DIRECTION_VECTORS = {
    Direction.NORTH: (0.0, -1.0),
    Direction.SOUTH: (0.0, 1.0),
    Direction.EAST: (1.0, 0.0),
    Direction.WEST: (-1.0, 0.0),
}

_OPPOSITES = {
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
    Direction.EAST: Direction.WEST,
    Direction.WEST: Direction.EAST,
}

_KEY_PATTERN = re.compile(r"^([NSEW])->([NSEW])(?:_(left|right))?$")


class MovementKey(NamedTuple):
    """Typed identifier of one catalogued movement.

    Attributes:
        origin: Approach the vehicle enters from.
        destination: Side the vehicle exits toward.
        turn: Turn classification of the movement.
    """

    origin: Direction
    destination: Direction
    turn: TurnType

    @property
    def code(self) -> str:
        """String form, e.g. "N->S" or "N->W_right"."""
        return format_key(self.origin.code, self.destination.code, self.turn.value)

    def __str__(self) -> str:
        return self.code

    @classmethod
    def parse(cls, code: str) -> Optional["MovementKey"]:
        """Parse a string code back into a key; None if it is not well formed."""
        if not isinstance(code, str):
            return None
        match = _KEY_PATTERN.match(code)
        if match is None:
            return None
        origin, destination, turn = match.groups()
        return cls(
            origin=Direction.from_code(origin),
            destination=Direction.from_code(destination),
            turn=TurnType(turn) if turn else TurnType.STRAIGHT,
        )


class Movement(NamedTuple):
    """One movement available from a given approach.

    Attributes:
        to_direction: Exit side.
        turn_type: Turn classification.
        key: Registry key of the movement's path.
    """

    to_direction: Direction
    turn_type: TurnType
    key: MovementKey


def format_key(origin_code: str, destination_code: str, turn: str) -> str:
    """Assemble a movement code from letters and a turn name."""
    if turn == TurnType.STRAIGHT.value:
        return f"{origin_code}->{destination_code}"
    return f"{origin_code}->{destination_code}_{turn}"


def resolve_key(from_direction, to_direction, turn_type) -> str:
    """Build the movement code for a (from, to, turn) triple.

    Unrecognized directions map to an empty letter, so the resulting code
    never matches a catalogued movement. No error is raised.

    Args:
        from_direction: Approach, as Direction or any form Direction.coerce accepts.
        to_direction: Exit side, same forms.
        turn_type: TurnType or its value/name. Straight omits the suffix.

    Returns:
        Movement code string.
    """
    origin = Direction.coerce(from_direction)
    destination = Direction.coerce(to_direction)
    turn = TurnType.coerce(turn_type)

    origin_code = origin.code if origin is not None else ""
    destination_code = destination.code if destination is not None else ""
    turn_name = turn.value if turn is not None else str(turn_type)

    return format_key(origin_code, destination_code, turn_name)
