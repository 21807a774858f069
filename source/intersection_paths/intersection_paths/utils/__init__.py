# Copyright (c) 2022-2026, The Isaac Lab Project Developers.
# All rights reserved.
#
# SPDX-License-Identifier: BSD-3-Clause

"""Mathematical utilities for intersection path geometry."""

from .math_utils import (
    cubic_bernstein_basis,
    cubic_bezier_curve,
    cubic_bezier_point,
    cubic_bezier_tangent,
    heading_from_tangent,
    polyline_length,
)

__all__ = [
    "cubic_bernstein_basis",
    "cubic_bezier_point",
    "cubic_bezier_curve",
    "cubic_bezier_tangent",
    "heading_from_tangent",
    "polyline_length",
]
