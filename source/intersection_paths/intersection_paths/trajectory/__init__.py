# Copyright (c) 2022-2026, The Isaac Lab Project Developers.
# All rights reserved.
#
# SPDX-License-Identifier: BSD-3-Clause

"""Cubic Bezier path representation and evaluation."""

from .bezier_path import BezierPath, arc_length, heading, position, sample, tangent

__all__ = ["BezierPath", "position", "tangent", "heading", "sample", "arc_length"]
