# Copyright (c) 2022-2026, The Isaac Lab Project Developers.
# All rights reserved.
#
# SPDX-License-Identifier: BSD-3-Clause

"""Cubic Bezier paths and the functions that evaluate them.

A BezierPath is one directed path segment through the intersection, defined
by four 2D control points in travel order. The evaluator functions are
stateless and accept either a BezierPath or a raw (4, D) array of control
points.

Bezier Curve Formula (cubic):
    B(t) = (1-t)³P₀ + 3(1-t)²tP₁ + 3(1-t)t²P₂ + t³P₃

The parameter t is not clamped: t in [0, 1] stays on the path, values
outside extrapolate the same polynomial.
"""

import logging
from dataclasses import dataclass
from typing import Mapping, Optional, Sequence, Union

import numpy as np

from ..utils.math_utils import (
    cubic_bezier_curve,
    cubic_bezier_point,
    cubic_bezier_tangent,
    heading_from_tangent,
    polyline_length,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class BezierPath:
    """Immutable cubic Bezier path.

    Attributes:
        control_points: Read-only array with shape (4, 2), rows P0..P3.
        key: Code of the movement the path was catalogued under, if any.
    """

    control_points: np.ndarray
    key: Optional[str] = None

    def __post_init__(self):
        """Copy control points into a read-only float array and validate shape."""
        points = np.array(self.control_points, dtype=float)
        if points.shape != (4, 2):
            raise ValueError(f"Cubic Bezier path requires 4 control points of dimension 2, got shape {points.shape}")
        if not np.all(np.isfinite(points)):
            raise ValueError("Control points must be finite")
        points.setflags(write=False)
        object.__setattr__(self, "control_points", points)

    @property
    def p0(self) -> np.ndarray:
        return self.control_points[0]

    @property
    def p1(self) -> np.ndarray:
        return self.control_points[1]

    @property
    def p2(self) -> np.ndarray:
        return self.control_points[2]

    @property
    def p3(self) -> np.ndarray:
        return self.control_points[3]

    def position(self, t: float) -> np.ndarray:
        return position(self, t)

    def tangent(self, t: float) -> np.ndarray:
        return tangent(self, t)

    def heading(self, t: float) -> float:
        return heading(self, t)

    def arc_length(self, segments: int = 100) -> float:
        return arc_length(self, segments)

    def to_dict(self) -> dict:
        """Convert to dictionary with P0..P3 as [x, y] lists."""
        return {f"P{i}": point.tolist() for i, point in enumerate(self.control_points)}

    def __repr__(self) -> str:
        points = ", ".join(f"({x:g}, {y:g})" for x, y in self.control_points)
        return f"BezierPath(key={self.key!r}, control_points=[{points}])"


CurveLike = Union[BezierPath, np.ndarray, Mapping[str, Sequence[float]]]


def _control_points(curve: CurveLike) -> np.ndarray:
    """Control points of a BezierPath, a (4, D) array or a {"P0": .., "P3": ..} mapping."""
    if isinstance(curve, BezierPath):
        return curve.control_points
    if isinstance(curve, Mapping):
        return np.asarray([curve[f"P{i}"] for i in range(4)], dtype=float)
    return np.asarray(curve, dtype=float)


def position(curve: CurveLike, t: float) -> np.ndarray:
    """Evaluate the path position at parameter t.

    Args:
        curve: BezierPath or control points with shape (4, D).
        t: Curve parameter; 0 is the entry point, 1 the exit point.

    Returns:
        Position with shape (D,).
    """
    return cubic_bezier_point(_control_points(curve), t)


def tangent(curve: CurveLike, t: float) -> np.ndarray:
    """Evaluate the un-normalized derivative dB/dt at parameter t.

    Args:
        curve: BezierPath or control points with shape (4, D).
        t: Curve parameter.

    Returns:
        Tangent vector with shape (D,), pointing in the direction of travel.
    """
    return cubic_bezier_tangent(_control_points(curve), t)


def heading(curve: CurveLike, t: float) -> float:
    """Travel heading atan2(dy, dx) at parameter t, in radians.

    In the default screen coordinates (y down) east is 0 and south is +pi/2.
    """
    return heading_from_tangent(tangent(curve, t))


def sample(curve: CurveLike, num_samples: int) -> np.ndarray:
    """Evaluate the path at uniform parameter values.

    Args:
        curve: BezierPath or control points with shape (4, D).
        num_samples: Number of points, including both endpoints.

    Returns:
        Sampled points with shape (num_samples, D).
    """
    if num_samples < 2:
        raise ValueError("num_samples must be >= 2")
    t_values = np.linspace(0, 1, num_samples)
    return cubic_bezier_curve(_control_points(curve), t_values)


def arc_length(curve: Optional[CurveLike], segments: int = 100) -> float:
    """Approximate the path length by a polyline through segments + 1 samples.

    Accuracy grows with segments; the polyline never exceeds the true length.

    Args:
        curve: BezierPath or control points. None or a curve without
            exactly four control points yields 0.0.
        segments: Number of polyline segments.

    Returns:
        Approximate arc length.
    """
    if curve is None:
        logger.debug("Arc length requested for a missing path")
        return 0.0

    try:
        control_points = _control_points(curve)
    except (KeyError, TypeError, ValueError) as exc:
        logger.debug("Arc length requested for a malformed path: %s", exc)
        return 0.0

    if control_points.ndim != 2 or control_points.shape[0] != 4:
        logger.debug("Arc length requested for a malformed path with shape %s", control_points.shape)
        return 0.0

    if segments < 1:
        return 0.0

    points = cubic_bezier_curve(control_points, np.linspace(0, 1, int(segments) + 1))
    return polyline_length(points)
