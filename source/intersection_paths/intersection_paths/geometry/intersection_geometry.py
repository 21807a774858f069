# Copyright (c) 2022-2026, The Isaac Lab Project Developers.
# All rights reserved.
#
# SPDX-License-Identifier: BSD-3-Clause

"""Scalar constants derived from the intersection configuration.

Every catalogued curve is placed from these five values:

    center       = (canvas_width / 2, canvas_height / 2)
    half_size    = intersection_size / 2
    lane_offset  = lane_width / 2
    turn_radius  = half_size - lane_offset
    k            = 0.5522847498307936 * turn_radius

k is the handle length that makes a cubic Bezier approximate a quarter
circle of radius turn_radius.
"""

from dataclasses import dataclass
from typing import Dict, Tuple

from .intersection_cfg import IntersectionCfg


# 4/3 * (sqrt(2) - 1)
BEZIER_CIRCLE_CONSTANT = 0.5522847498307936


@dataclass(frozen=True)
class IntersectionGeometry:
    """Immutable geometry constants of one intersection.

    Attributes:
        center: (x, y) of the intersection center.
        half_size: Half the side length of the intersection box.
        lane_offset: Half a lane width; distance of a lane centerline from
            the road axis.
        turn_radius: Radius used to place turn curve endpoints.
        k: Bezier handle length for a quarter-circle arc of turn_radius.
    """

    center: Tuple[float, float]
    half_size: float
    lane_offset: float
    turn_radius: float
    k: float

    @classmethod
    def from_cfg(cls, cfg: IntersectionCfg) -> "IntersectionGeometry":
        """Derive geometry constants from an intersection configuration."""
        half_size = cfg.intersection_size / 2
        lane_offset = cfg.lane_width / 2
        turn_radius = half_size - lane_offset

        return cls(
            center=(cfg.canvas_width / 2, cfg.canvas_height / 2),
            half_size=half_size,
            lane_offset=lane_offset,
            turn_radius=turn_radius,
            k=BEZIER_CIRCLE_CONSTANT * turn_radius,
        )

    @property
    def cx(self) -> float:
        return self.center[0]

    @property
    def cy(self) -> float:
        return self.center[1]

    def to_dict(self) -> Dict[str, object]:
        """Convert to dictionary for serialization."""
        return {
            "center": self.center,
            "half_size": self.half_size,
            "lane_offset": self.lane_offset,
            "turn_radius": self.turn_radius,
            "k": self.k,
        }


def derive_geometry(cfg: IntersectionCfg | None = None) -> IntersectionGeometry:
    """Derive geometry constants, using the default configuration if none is given."""
    if cfg is None:
        cfg = IntersectionCfg()
    return IntersectionGeometry.from_cfg(cfg)
