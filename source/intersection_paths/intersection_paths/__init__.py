# Copyright (c) 2022-2026, The Isaac Lab Project Developers.
# All rights reserved.
#
# SPDX-License-Identifier: BSD-3-Clause

"""
Intersection Bezier Paths.

This package models the navigable paths through a four-way road intersection
as cubic Bezier curves:
1. Geometry derivation turns intersection dimensions into curve constants
2. A fixed path registry maps every movement to a curve
3. Curve evaluation gives position, tangent, heading and arc length at t
4. A movement resolver maps (from, to, turn) to a catalogued curve

It is a pure geometry service: it does not simulate motion or draw anything.

Usage:
    from intersection_paths import Direction, MovementResolver, TurnType, position

    resolver = MovementResolver.from_cfg()
    path = resolver.lookup(Direction.SOUTH, Direction.EAST, TurnType.RIGHT)
    xy = position(path, 0.25)
"""

__version__ = "0.1.0"
__author__ = "Isaac Lab Project Developers"

from . import geometry
from . import paths
from . import trajectory
from . import utils

from .geometry import IntersectionCfg, IntersectionGeometry, derive_geometry
from .paths import (
    Direction,
    Movement,
    MovementKey,
    MovementResolver,
    PathRegistry,
    TurnType,
    build_path_registry,
    resolve_key,
)
from .trajectory import BezierPath, arc_length, heading, position, sample, tangent

__all__ = [
    # Modules
    "geometry",
    "paths",
    "trajectory",
    "utils",
    # Geometry
    "IntersectionCfg",
    "IntersectionGeometry",
    "derive_geometry",
    # Movements and catalogue
    "Direction",
    "TurnType",
    "MovementKey",
    "Movement",
    "PathRegistry",
    "build_path_registry",
    "MovementResolver",
    "resolve_key",
    # Curve evaluation
    "BezierPath",
    "position",
    "tangent",
    "heading",
    "sample",
    "arc_length",
]
