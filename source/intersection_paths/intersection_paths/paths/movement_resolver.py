# Copyright (c) 2022-2026, The Isaac Lab Project Developers.
# All rights reserved.
#
# SPDX-License-Identifier: BSD-3-Clause

"""Resolve vehicle movements to catalogued paths.

The resolver is the query surface used by motion and decision logic:

    resolver = MovementResolver.from_cfg(IntersectionCfg())
    path = resolver.lookup(Direction.NORTH, Direction.WEST, TurnType.RIGHT)
    if path is not None:
        xy = position(path, 0.5)

A None result from lookup() is the only failure signal. It covers both
movements that are not modeled (U-turns) and unrecognized inputs.
"""

import logging
from typing import List, Optional

from ..geometry import IntersectionCfg, derive_geometry
from ..trajectory import BezierPath
from .movement import Direction, Movement, resolve_key
from .path_registry import PathRegistry, build_path_registry

logger = logging.getLogger(__name__)


class MovementResolver:
    """Movement lookup over an immutable PathRegistry.

    Attributes:
        registry: The path catalogue queried by this resolver.
    """

    def __init__(self, registry: PathRegistry):
        self._registry = registry

    @classmethod
    def from_cfg(cls, cfg: Optional[IntersectionCfg] = None) -> "MovementResolver":
        """Derive geometry, build the registry and wrap it in a resolver.

        Args:
            cfg: Intersection configuration. Uses defaults if None.

        Returns:
            Initialized MovementResolver.
        """
        return cls(build_path_registry(derive_geometry(cfg)))

    @property
    def registry(self) -> PathRegistry:
        return self._registry

    @staticmethod
    def resolve_key(from_direction, to_direction, turn_type) -> str:
        """Movement code for a (from, to, turn) triple. See paths.movement.resolve_key."""
        return resolve_key(from_direction, to_direction, turn_type)

    def lookup(self, from_direction, to_direction, turn_type) -> Optional[BezierPath]:
        """Find the path for a movement.

        Args:
            from_direction: Approach direction.
            to_direction: Exit direction.
            turn_type: Turn classification.

        Returns:
            The catalogued BezierPath, or None if the movement is not modeled.
        """
        key = resolve_key(from_direction, to_direction, turn_type)
        path = self._registry.get(key)
        if path is None:
            logger.debug("No path catalogued for movement %r", key)
        return path

    def available_movements(self, from_direction) -> List[Movement]:
        """List every catalogued movement entering from `from_direction`.

        Args:
            from_direction: Approach direction, in any form Direction.coerce accepts.

        Returns:
            Movements in registry order (turns before straights). Empty for an
            unrecognized direction.
        """
        origin = Direction.coerce(from_direction)
        if origin is None:
            logger.debug("No movements for unrecognized approach %r", from_direction)
            return []

        return [
            Movement(to_direction=key.destination, turn_type=key.turn, key=key)
            for key in self._registry
            if key.origin is origin
        ]
