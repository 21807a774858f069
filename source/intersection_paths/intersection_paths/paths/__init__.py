# Copyright (c) 2022-2026, The Isaac Lab Project Developers.
# All rights reserved.
#
# SPDX-License-Identifier: BSD-3-Clause

"""Movement vocabulary, path catalogue and movement resolution."""

from .movement import Direction, Movement, MovementKey, TurnType, resolve_key
from .movement_resolver import MovementResolver
from .path_registry import (
    STRAIGHT_MOVEMENTS,
    TURN_MOVEMENTS,
    PathRegistry,
    build_path_registry,
    lane_entry_point,
    lane_exit_point,
)

__all__ = [
    "Direction",
    "TurnType",
    "MovementKey",
    "Movement",
    "resolve_key",
    "PathRegistry",
    "build_path_registry",
    "lane_entry_point",
    "lane_exit_point",
    "TURN_MOVEMENTS",
    "STRAIGHT_MOVEMENTS",
    "MovementResolver",
]
