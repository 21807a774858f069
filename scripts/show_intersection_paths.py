#!/usr/bin/env python3
# Copyright (c) 2022-2026, The Isaac Lab Project Developers.
# All rights reserved.
#
# SPDX-License-Identifier: BSD-3-Clause

"""Print and plot the intersection path catalogue.

This script builds the path registry for a given intersection size and:
1. Prints every movement with its endpoints, arc length and exit heading
2. Plots all curves with their control points (turns red, straights blue)

Usage:
    python scripts/show_intersection_paths.py
    python scripts/show_intersection_paths.py --lane-width 24 --save paths.png
    python scripts/show_intersection_paths.py --no-plot

Requirements:
    - numpy, scipy
    - matplotlib for the plot (pip install matplotlib)
"""

import argparse
import logging
import math
import sys
from pathlib import Path

import numpy as np

try:
    import matplotlib
    matplotlib.use("Agg")
    import matplotlib.pyplot as plt
    HAS_MATPLOTLIB = True
except ImportError:
    HAS_MATPLOTLIB = False
    print("Warning: matplotlib not available. Install with: pip install matplotlib")

# Add the source directory to path
SOURCE_DIR = Path(__file__).parent.parent / "source" / "intersection_paths"
sys.path.insert(0, str(SOURCE_DIR))

from intersection_paths import (
    IntersectionCfg,
    MovementResolver,
    arc_length,
    derive_geometry,
    heading,
    sample,
)

logger = logging.getLogger("show_intersection_paths")


def print_catalogue(resolver: MovementResolver) -> None:
    """Print one line per catalogued movement."""
    print("=" * 72)
    print(f"{'movement':<12} {'entry':>18} {'exit':>18} {'length':>9} {'heading':>9}")
    print("=" * 72)

    for key, path in resolver.registry.items():
        entry = f"({path.p0[0]:.1f}, {path.p0[1]:.1f})"
        exit_ = f"({path.p3[0]:.1f}, {path.p3[1]:.1f})"
        length = arc_length(path)
        exit_heading = math.degrees(heading(path, 1.0))
        print(f"{key.code:<12} {entry:>18} {exit_:>18} {length:>9.2f} {exit_heading:>8.1f}°")


def plot_paths(resolver: MovementResolver, cfg: IntersectionCfg, save_path: str) -> None:
    """Draw every path and its control points.

    Args:
        resolver: Resolver holding the registry to draw.
        cfg: Intersection configuration, used to outline the box.
        save_path: Output image path.
    """
    geometry = derive_geometry(cfg)
    registry = resolver.registry
    cx, cy = geometry.center
    h = geometry.half_size

    fig, ax = plt.subplots(figsize=(8, 8))
    ax.set_title("Intersection paths")
    ax.set_aspect("equal")
    ax.grid(True, alpha=0.3)

    # Intersection box
    box = np.array([
        [cx - h, cy - h], [cx + h, cy - h], [cx + h, cy + h], [cx - h, cy + h], [cx - h, cy - h]
    ])
    ax.plot(box[:, 0], box[:, 1], "k-", linewidth=1)

    groups = [
        (registry.turn_paths, "red", "turn"),
        (registry.straight_paths, "blue", "straight"),
    ]
    for paths, color, label in groups:
        for i, (key, path) in enumerate(paths.items()):
            points = sample(path, 50)
            ax.plot(
                points[:, 0],
                points[:, 1],
                color=color,
                linestyle="--",
                linewidth=2,
                alpha=0.8,
                label=label if i == 0 else None,
            )

            # Endpoints larger than handles
            cps = path.control_points
            ax.scatter(cps[[0, 3], 0], cps[[0, 3], 1], c="gold", s=36, zorder=3)
            ax.scatter(cps[[1, 2], 0], cps[[1, 2], 1], c="gold", s=9, zorder=3)

            mid = (path.p0 + path.p3) / 2
            ax.text(mid[0], mid[1], key.code, ha="center", va="center", fontsize=8)

    # Screen coordinates: y grows downward
    ax.invert_yaxis()
    ax.legend()

    plt.tight_layout()
    plt.savefig(save_path, dpi=150)
    print(f"\nFigure saved to: {save_path}")


def main():
    """Build the catalogue and show it."""
    parser = argparse.ArgumentParser(description="Show the intersection Bezier path catalogue")
    defaults = IntersectionCfg()
    parser.add_argument("--canvas-size", type=float, default=defaults.canvas_width,
                        help="Width and height of the canvas")
    parser.add_argument("--intersection-size", type=float, default=defaults.intersection_size,
                        help="Side length of the intersection box")
    parser.add_argument("--lane-width", type=float, default=defaults.lane_width,
                        help="Width of a single lane")
    parser.add_argument("--no-plot", action="store_true",
                        help="Skip plotting (useful when matplotlib is unavailable)")
    parser.add_argument("--save", type=str, default="intersection_paths.png",
                        help="Path to save the plot")
    parser.add_argument("--log-level", type=str, default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        cfg = IntersectionCfg(
            canvas_width=args.canvas_size,
            canvas_height=args.canvas_size,
            intersection_size=args.intersection_size,
            lane_width=args.lane_width,
        )
    except ValueError as e:
        logger.error("Invalid intersection configuration: %s", e)
        sys.exit(1)

    resolver = MovementResolver.from_cfg(cfg)
    print_catalogue(resolver)

    if not args.no_plot:
        if HAS_MATPLOTLIB:
            plot_paths(resolver, cfg, args.save)
        else:
            logger.warning("matplotlib not available, skipping plot")


if __name__ == "__main__":
    main()
