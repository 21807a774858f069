# Copyright (c) 2022-2026, The Isaac Lab Project Developers.
# All rights reserved.
#
# SPDX-License-Identifier: BSD-3-Clause

"""Intersection configuration and derived geometry constants."""

from .intersection_cfg import IntersectionCfg
from .intersection_geometry import BEZIER_CIRCLE_CONSTANT, IntersectionGeometry, derive_geometry

__all__ = ["IntersectionCfg", "IntersectionGeometry", "derive_geometry", "BEZIER_CIRCLE_CONSTANT"]
