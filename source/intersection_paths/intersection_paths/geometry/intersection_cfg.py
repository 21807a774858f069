# Copyright (c) 2022-2026, The Isaac Lab Project Developers.
# All rights reserved.
#
# SPDX-License-Identifier: BSD-3-Clause

"""Intersection sizing configuration.

The embedding application supplies four numbers describing the drawing
surface and the intersection box. Defaults describe a 1200 x 1200 canvas
with a 120 unit box and 30 unit lanes, which gives a 45 unit turn radius.
"""

import math
import numbers
from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping


@dataclass
class IntersectionCfg:
    """Dimensions of a single four-way intersection.

    All values share one length unit (canvas pixels in the default setup).

    Attributes:
        canvas_width: Width of the surface the intersection is centered on.
        canvas_height: Height of the surface the intersection is centered on.
        intersection_size: Side length of the square intersection box.
        lane_width: Width of one lane. Each approach has one lane per
            travel direction.
    """

    canvas_width: float = 1200.0
    canvas_height: float = 1200.0
    intersection_size: float = 120.0
    lane_width: float = 30.0

    def __post_init__(self):
        """Validate that all dimensions are finite and positive."""
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, numbers.Real):
                raise ValueError(f"{f.name} must be a number, got {value!r}")
            if not math.isfinite(value) or value <= 0:
                raise ValueError(f"{f.name} must be finite and positive, got {value}")
            setattr(self, f.name, float(value))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "IntersectionCfg":
        """Create a configuration from a plain mapping.

        Args:
            data: Mapping with any subset of the dataclass field names.
                Missing fields keep their defaults.

        Returns:
            IntersectionCfg instance.

        Raises:
            ValueError: If the mapping contains unknown keys or invalid values.
        """
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown intersection settings: {sorted(unknown)}. Valid keys: {sorted(known)}")
        return cls(**dict(data))

    def to_dict(self) -> Dict[str, float]:
        """Convert to dictionary for serialization."""
        return {f.name: getattr(self, f.name) for f in fields(self)}
