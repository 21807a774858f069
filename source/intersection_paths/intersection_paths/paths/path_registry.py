# Copyright (c) 2022-2026, The Isaac Lab Project Developers.
# All rights reserved.
#
# SPDX-License-Identifier: BSD-3-Clause

"""Fixed catalogue of intersection paths.

The registry maps every realizable movement to a cubic Bezier path. It holds
8 turn paths (a left and a right turn from each approach) and 4 straight
paths, built once from the geometry constants and never modified afterwards.

Placement rules (screen coordinates, y grows downward, north is up):
- P0 is the entry lane point of the approach on the intersection edge.
- P3 is the exit lane point of the destination on the intersection edge.
- Turns: P1 = P0 + k * (approach travel direction),
         P2 = P3 - k * (exit travel direction).
- Straights: P0, P1, P2, P3 at fractions 0, 0.25, 0.75, 1 of P0 -> P3.

The turn rule applies to every turn without exception. Left-turn P2 handles
therefore lie along the exit lane, so each curve joins it tangentially. The
W->S right turn also has P2 = (cx - o, cy + h - k) rather than the
hand-placed (cx - o, cy + o + k) of earlier layouts.

U-turns are not catalogued.
"""

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Dict, Iterator, List, Optional, Tuple

import numpy as np

from ..geometry import IntersectionGeometry
from ..trajectory import BezierPath
from .movement import Direction, MovementKey, TurnType

logger = logging.getLogger(__name__)

N, S, E, W = Direction.NORTH, Direction.SOUTH, Direction.EAST, Direction.WEST

TURN_MOVEMENTS: Tuple[MovementKey, ...] = (
    MovementKey(S, E, TurnType.RIGHT),
    MovementKey(S, W, TurnType.LEFT),
    MovementKey(N, W, TurnType.RIGHT),
    MovementKey(N, E, TurnType.LEFT),
    MovementKey(E, N, TurnType.RIGHT),
    MovementKey(E, S, TurnType.LEFT),
    MovementKey(W, S, TurnType.RIGHT),
    MovementKey(W, N, TurnType.LEFT),
)

STRAIGHT_MOVEMENTS: Tuple[MovementKey, ...] = (
    MovementKey(S, N, TurnType.STRAIGHT),
    MovementKey(N, S, TurnType.STRAIGHT),
    MovementKey(E, W, TurnType.STRAIGHT),
    MovementKey(W, E, TurnType.STRAIGHT),
)

# Positions of P1 and P2 along a straight path, as fractions of P0 -> P3
STRAIGHT_CONTROL_FRACTIONS = (0.0, 0.25, 0.75, 1.0)


def lane_entry_point(geometry: IntersectionGeometry, origin: Direction) -> np.ndarray:
    """Point where traffic arriving from `origin` crosses into the box."""
    cx, cy = geometry.center
    h, o = geometry.half_size, geometry.lane_offset
    points = {
        N: (cx - o, cy - h),
        S: (cx + o, cy + h),
        E: (cx + h, cy - o),
        W: (cx - h, cy + o),
    }
    return np.array(points[origin])


def lane_exit_point(geometry: IntersectionGeometry, destination: Direction) -> np.ndarray:
    """Point where traffic leaving toward `destination` crosses out of the box."""
    cx, cy = geometry.center
    h, o = geometry.half_size, geometry.lane_offset
    points = {
        N: (cx + o, cy - h),
        S: (cx - o, cy + h),
        E: (cx + h, cy + o),
        W: (cx - h, cy - o),
    }
    return np.array(points[destination])


def approach_travel_direction(origin: Direction) -> np.ndarray:
    """Unit travel direction of traffic arriving from `origin`."""
    return np.array(origin.opposite.vector)


def exit_travel_direction(destination: Direction) -> np.ndarray:
    """Unit travel direction of traffic leaving toward `destination`."""
    return np.array(destination.vector)


def turn_control_points(geometry: IntersectionGeometry, key: MovementKey) -> np.ndarray:
    """Quarter-circle-like control points for a turning movement."""
    p0 = lane_entry_point(geometry, key.origin)
    p3 = lane_exit_point(geometry, key.destination)
    p1 = p0 + geometry.k * approach_travel_direction(key.origin)
    p2 = p3 - geometry.k * exit_travel_direction(key.destination)
    return np.stack([p0, p1, p2, p3])


def straight_control_points(geometry: IntersectionGeometry, key: MovementKey) -> np.ndarray:
    """Collinear control points for a straight movement."""
    p0 = lane_entry_point(geometry, key.origin)
    p3 = lane_exit_point(geometry, key.destination)
    _, f1, f2, _ = STRAIGHT_CONTROL_FRACTIONS
    # P0 and P3 are the lane points themselves
    return np.stack([p0, p0 + f1 * (p3 - p0), p0 + f2 * (p3 - p0), p3])


class PathRegistry(Mapping):
    """Immutable mapping from MovementKey to BezierPath.

    Lookups accept either a MovementKey or its string code ("N->W_right").
    Missing movements are reported by get() returning None; they are an
    expected condition for callers, not an error.

    Iteration order: turn paths first, then straight paths, each group in
    catalogue order.
    """

    __slots__ = ("_turn_paths", "_straight_paths", "_paths", "_keys_by_code")

    def __init__(
        self,
        turn_paths: Mapping[MovementKey, BezierPath],
        straight_paths: Mapping[MovementKey, BezierPath],
    ):
        """Initialize the registry.

        Args:
            turn_paths: Left and right turn paths.
            straight_paths: Straight-through paths.
        """
        paths: Dict[MovementKey, BezierPath] = {**turn_paths, **straight_paths}
        if len(paths) != len(turn_paths) + len(straight_paths):
            raise ValueError("Turn and straight paths must not share movement keys")

        self._turn_paths = MappingProxyType(dict(turn_paths))
        self._straight_paths = MappingProxyType(dict(straight_paths))
        self._paths = MappingProxyType(paths)
        self._keys_by_code = MappingProxyType({key.code: key for key in paths})

    def _resolve(self, key) -> Optional[MovementKey]:
        if isinstance(key, MovementKey):
            return key
        if isinstance(key, str):
            return self._keys_by_code.get(key)
        return None

    def __getitem__(self, key) -> BezierPath:
        resolved = self._resolve(key)
        if resolved is None or resolved not in self._paths:
            raise KeyError(key)
        return self._paths[resolved]

    def __iter__(self) -> Iterator[MovementKey]:
        return iter(self._paths)

    def __len__(self) -> int:
        return len(self._paths)

    def get(self, key, default: Optional[BezierPath] = None) -> Optional[BezierPath]:
        """Exact lookup; returns `default` (None) when the movement is not catalogued."""
        resolved = self._resolve(key)
        if resolved is None:
            return default
        return self._paths.get(resolved, default)

    @property
    def turn_paths(self) -> Mapping[MovementKey, BezierPath]:
        """Read-only view of the 8 turn paths."""
        return self._turn_paths

    @property
    def straight_paths(self) -> Mapping[MovementKey, BezierPath]:
        """Read-only view of the 4 straight paths."""
        return self._straight_paths

    def codes(self) -> List[str]:
        """String codes of all movements in catalogue order."""
        return list(self._keys_by_code)

    def __repr__(self) -> str:
        return f"PathRegistry({', '.join(self.codes())})"


def build_path_registry(geometry: IntersectionGeometry) -> PathRegistry:
    """Build the full path catalogue for an intersection.

    Args:
        geometry: Derived intersection constants.

    Returns:
        Immutable PathRegistry with 8 turn paths and 4 straight paths.
    """
    turn_paths = {
        key: BezierPath(turn_control_points(geometry, key), key=key.code)
        for key in TURN_MOVEMENTS
    }
    straight_paths = {
        key: BezierPath(straight_control_points(geometry, key), key=key.code)
        for key in STRAIGHT_MOVEMENTS
    }

    registry = PathRegistry(turn_paths, straight_paths)
    logger.info(
        "Built path registry with %d turn paths and %d straight paths (turn radius %.3f, k %.3f)",
        len(turn_paths),
        len(straight_paths),
        geometry.turn_radius,
        geometry.k,
    )
    return registry
