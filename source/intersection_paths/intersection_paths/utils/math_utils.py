# Copyright (c) 2022-2026, The Isaac Lab Project Developers.
# All rights reserved.
#
# SPDX-License-Identifier: BSD-3-Clause

"""Mathematical utility functions for intersection path geometry.

This module provides common mathematical operations for:
- Bernstein basis evaluation for cubic Bezier curves
- Heading extraction from tangent vectors
"""

from typing import Union

import numpy as np
from scipy.special import comb


CUBIC_DEGREE = 3

# Binomial coefficients C(3, i) of the cubic Bernstein polynomials
CUBIC_BINOMIALS = np.array(
    [comb(CUBIC_DEGREE, i, exact=True) for i in range(CUBIC_DEGREE + 1)],
    dtype=float,
)


# =============================================================================
# Bezier Curve Operations
# =============================================================================

def cubic_bernstein_basis(t: Union[float, np.ndarray]) -> np.ndarray:
    """Evaluate the four cubic Bernstein polynomials.

    bᵢ,₃(t) = C(3,i) tⁱ (1-t)^(3-i)

    No clamping is applied, so values outside [0, 1] extrapolate the same
    polynomials.

    Args:
        t: Parameter value, scalar or shape (N,).

    Returns:
        Basis weights with shape (4,) for scalar t or (N, 4) otherwise.
    """
    t = np.asarray(t, dtype=float)
    one_minus_t = 1 - t

    basis = np.stack(
        [
            CUBIC_BINOMIALS[i] * (t ** i) * (one_minus_t ** (CUBIC_DEGREE - i))
            for i in range(CUBIC_DEGREE + 1)
        ],
        axis=-1,
    )
    return basis


def cubic_bezier_point(control_points: np.ndarray, t: float) -> np.ndarray:
    """Evaluate a cubic Bezier at a single parameter value.

    Cubic Bezier: B(t) = (1-t)³P₀ + 3(1-t)²tP₁ + 3(1-t)t²P₂ + t³P₃

    The weighted sum is accumulated term by term so that t=0 and t=1
    reproduce P₀ and P₃ bit for bit.

    Args:
        control_points: Control points with shape (4, D).
        t: Parameter value.

    Returns:
        Point with shape (D,).
    """
    b0, b1, b2, b3 = cubic_bernstein_basis(t)
    return (
        b0 * control_points[0]
        + b1 * control_points[1]
        + b2 * control_points[2]
        + b3 * control_points[3]
    )


def cubic_bezier_curve(control_points: np.ndarray, t_values: np.ndarray) -> np.ndarray:
    """Evaluate a cubic Bezier at many parameter values.

    Args:
        control_points: Control points with shape (4, D).
        t_values: Parameter values with shape (N,).

    Returns:
        Curve points with shape (N, D).
    """
    basis = cubic_bernstein_basis(np.asarray(t_values, dtype=float))
    return basis @ control_points


def cubic_bezier_tangent(control_points: np.ndarray, t: float) -> np.ndarray:
    """Compute tangent vector of cubic Bezier at parameter t.

    The derivative of a cubic Bezier curve is:
        B'(t) = 3(1-t)²(P₁-P₀) + 6(1-t)t(P₂-P₁) + 3t²(P₃-P₂)

    Args:
        control_points: Control points with shape (4, D).
        t: Parameter value. Not clamped.

    Returns:
        Tangent vector with shape (D,).
    """
    one_minus_t = 1 - t

    q0 = control_points[1] - control_points[0]
    q1 = control_points[2] - control_points[1]
    q2 = control_points[3] - control_points[2]

    tangent = 3 * (
        (one_minus_t ** 2) * q0
        + 2 * one_minus_t * t * q1
        + (t ** 2) * q2
    )

    return tangent


def heading_from_tangent(tangent_xy: np.ndarray) -> float:
    """Compute heading angle from a 2D tangent vector.

    Args:
        tangent_xy: 2D tangent vector (dx, dy).

    Returns:
        Heading in radians, computed as atan2(dy, dx). Zero for a
        vanishing tangent.
    """
    tx, ty = float(tangent_xy[0]), float(tangent_xy[1])
    if abs(tx) < 1e-9 and abs(ty) < 1e-9:
        return 0.0
    return float(np.arctan2(ty, tx))


def polyline_length(points: np.ndarray) -> float:
    """Sum of Euclidean distances between consecutive points.

    Args:
        points: Points with shape (N, D).

    Returns:
        Total length; 0.0 for fewer than two points.
    """
    if len(points) < 2:
        return 0.0
    return float(np.sum(np.linalg.norm(np.diff(points, axis=0), axis=1)))
