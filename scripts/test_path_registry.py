#!/usr/bin/env python3
# Copyright (c) 2022-2026, The Isaac Lab Project Developers.
# All rights reserved.
#
# SPDX-License-Identifier: BSD-3-Clause

"""Tests for the intersection path catalogue.

Checks the placement of all 12 catalogued curves against the lane layout,
their continuity with the straight lanes, and the immutability of the
registry.

Run with:
    python scripts/test_path_registry.py
    pytest scripts/test_path_registry.py
"""

import logging
import math
import sys
from pathlib import Path

import numpy as np
import pytest

# Add the source directory to path
SOURCE_DIR = Path(__file__).parent.parent / "source" / "intersection_paths"
sys.path.insert(0, str(SOURCE_DIR))

from intersection_paths.geometry import IntersectionCfg, derive_geometry
from intersection_paths.paths import (
    STRAIGHT_MOVEMENTS,
    TURN_MOVEMENTS,
    Direction,
    MovementKey,
    TurnType,
    build_path_registry,
    lane_entry_point,
    lane_exit_point,
)
from intersection_paths.trajectory import arc_length, position, tangent

N, S, E, W = Direction.NORTH, Direction.SOUTH, Direction.EAST, Direction.WEST


@pytest.fixture(scope="module")
def geometry():
    return derive_geometry(IntersectionCfg())


@pytest.fixture(scope="module")
def registry(geometry):
    return build_path_registry(geometry)


def unit(v: np.ndarray) -> np.ndarray:
    return v / np.linalg.norm(v)


def angle_difference(a1: float, a2: float) -> float:
    """Shortest signed difference a1 - a2, wrapped to [-pi, pi)."""
    return (a1 - a2 + math.pi) % (2 * math.pi) - math.pi


def test_catalogue_contents(registry):
    """8 turns then 4 straights, one per realizable movement, no U-turns."""
    assert len(registry) == 12
    assert len(registry.turn_paths) == 8
    assert len(registry.straight_paths) == 4
    assert list(registry) == list(TURN_MOVEMENTS) + list(STRAIGHT_MOVEMENTS)
    assert registry.codes() == [
        "S->E_right", "S->W_left", "N->W_right", "N->E_left",
        "E->N_right", "E->S_left", "W->S_right", "W->N_left",
        "S->N", "N->S", "E->W", "W->E",
    ]

    for key in registry:
        assert key.origin is not key.destination
        if key.turn is TurnType.STRAIGHT:
            assert key.destination is key.origin.opposite
        else:
            assert key.destination not in (key.origin, key.origin.opposite)

    # Two turns and one straight per approach
    for origin in Direction:
        turns = [k.turn for k in registry if k.origin is origin]
        assert sorted(t.value for t in turns) == ["left", "right", "straight"]


def test_default_layout_matches_canvas_constants(registry, geometry):
    k = geometry.k

    np.testing.assert_array_equal(
        registry["S->E_right"].control_points,
        [[615, 660], [615, 660 - k], [660 - k, 615], [660, 615]],
    )
    np.testing.assert_array_equal(
        registry["N->W_right"].control_points,
        [[585, 540], [585, 540 + k], [540 + k, 585], [540, 585]],
    )
    np.testing.assert_array_equal(
        registry["E->N_right"].control_points,
        [[660, 585], [660 - k, 585], [615, 540 + k], [615, 540]],
    )
    np.testing.assert_array_equal(
        registry["W->S_right"].control_points,
        [[540, 615], [540 + k, 615], [585, 660 - k], [585, 660]],
    )
    np.testing.assert_array_equal(
        registry["S->W_left"].control_points,
        [[615, 660], [615, 660 - k], [540 + k, 585], [540, 585]],
    )
    np.testing.assert_array_equal(
        registry["N->E_left"].control_points,
        [[585, 540], [585, 540 + k], [660 - k, 615], [660, 615]],
    )
    np.testing.assert_array_equal(
        registry["E->S_left"].control_points,
        [[660, 585], [660 - k, 585], [585, 660 - k], [585, 660]],
    )
    np.testing.assert_array_equal(
        registry["W->N_left"].control_points,
        [[540, 615], [540 + k, 615], [615, 540 + k], [615, 540]],
    )

    np.testing.assert_array_equal(registry["S->N"].control_points, [[615, 660], [615, 630], [615, 570], [615, 540]])
    np.testing.assert_array_equal(registry["N->S"].control_points, [[585, 540], [585, 570], [585, 630], [585, 660]])
    np.testing.assert_array_equal(registry["E->W"].control_points, [[660, 585], [630, 585], [570, 585], [540, 585]])
    np.testing.assert_array_equal(registry["W->E"].control_points, [[540, 615], [570, 615], [630, 615], [660, 615]])


def test_endpoints_lie_on_lanes(registry, geometry):
    for key, path in registry.items():
        np.testing.assert_array_equal(path.p0, lane_entry_point(geometry, key.origin))
        np.testing.assert_array_equal(path.p3, lane_exit_point(geometry, key.destination))

        # Entry and exit sit on the box edge
        offset_in = path.p0 - np.array(geometry.center)
        offset_out = path.p3 - np.array(geometry.center)
        assert np.dot(offset_in, key.origin.vector) == pytest.approx(geometry.half_size)
        assert np.dot(offset_out, key.destination.vector) == pytest.approx(geometry.half_size)


def test_position_reaches_endpoints_exactly(registry):
    for path in registry.values():
        assert np.array_equal(position(path, 0.0), path.p0)
        assert np.array_equal(position(path, 1.0), path.p3)


def test_tangents_continue_the_lanes(registry):
    """Every curve leaves along its approach lane and arrives along its exit lane."""
    for key, path in registry.items():
        approach = -np.array(key.origin.vector)
        departure = np.array(key.destination.vector)

        np.testing.assert_allclose(unit(tangent(path, 0.0)), approach, atol=1e-12)
        np.testing.assert_allclose(unit(tangent(path, 1.0)), departure, atol=1e-12)


def test_turn_handedness(registry):
    """In screen coordinates (y down) a right turn has a positive heading change."""
    for key, path in registry.turn_paths.items():
        change = angle_difference(path.heading(1.0), path.heading(0.0))
        if key.turn is TurnType.RIGHT:
            assert change == pytest.approx(math.pi / 2)
        else:
            assert change == pytest.approx(-math.pi / 2)


def test_straight_paths_keep_heading(registry):
    for key, path in registry.straight_paths.items():
        expected = math.atan2(*reversed(np.array(key.destination.vector)))
        for t in np.linspace(0.0, 1.0, 21):
            assert angle_difference(path.heading(t), expected) == pytest.approx(0.0, abs=1e-12)
            np.testing.assert_allclose(unit(tangent(path, t)), key.destination.vector, atol=1e-12)


def test_arc_lengths(registry, geometry):
    for key, path in registry.items():
        length = arc_length(path)
        fine = arc_length(path, segments=1000)
        assert abs(length - fine) < 1e-3 * fine

        if key.turn is TurnType.STRAIGHT:
            assert length == pytest.approx(2 * geometry.half_size)
        elif key.turn is TurnType.RIGHT:
            assert fine == pytest.approx(math.pi / 2 * geometry.turn_radius, rel=1e-3)
        else:
            # Left turns cross the far lane and are longer than right turns
            chord = np.linalg.norm(path.p3 - path.p0)
            assert fine > chord
            assert fine > math.pi / 2 * geometry.turn_radius


def test_arc_length_converges_under_refinement(registry):
    for path in registry.values():
        lengths = [arc_length(path, segments=2 ** i) for i in range(11)]
        assert all(b >= a - 1e-9 for a, b in zip(lengths, lengths[1:]))

        # Consecutive counts do not nest their samples
        lengths = [arc_length(path, segments=n) for n in range(1, 200)]
        assert all(b >= a - 1e-9 for a, b in zip(lengths, lengths[1:]))


def test_lane_width_rescales_turns_only(registry, geometry):
    narrow_geometry = derive_geometry(IntersectionCfg(lane_width=20))
    narrow = build_path_registry(narrow_geometry)
    scale = narrow_geometry.turn_radius / geometry.turn_radius

    assert narrow_geometry.k == pytest.approx(geometry.k * scale)

    for key in TURN_MOVEMENTS:
        base, other = registry[key], narrow[key]
        assert np.linalg.norm(other.p1 - other.p0) == pytest.approx(scale * np.linalg.norm(base.p1 - base.p0))
        assert np.linalg.norm(other.p3 - other.p2) == pytest.approx(scale * np.linalg.norm(base.p3 - base.p2))
        if key.turn is TurnType.RIGHT:
            assert np.linalg.norm(other.p3 - other.p0) == pytest.approx(scale * np.linalg.norm(base.p3 - base.p0))

    for key in STRAIGHT_MOVEMENTS:
        for path in (registry[key], narrow[key]):
            span = path.p3 - path.p0
            np.testing.assert_allclose(path.p1 - path.p0, 0.25 * span)
            np.testing.assert_allclose(path.p2 - path.p0, 0.75 * span)
        assert arc_length(narrow[key]) == pytest.approx(arc_length(registry[key]))


def test_build_is_deterministic(geometry, registry):
    again = build_path_registry(geometry)
    for key in registry:
        assert np.array_equal(again[key].control_points, registry[key].control_points)


def test_get_by_key_and_code(registry):
    key = MovementKey(N, W, TurnType.RIGHT)
    path = registry.get(key)

    assert path is registry["N->W_right"]
    assert path is registry.get("N->W_right")
    assert path.key == "N->W_right"
    assert key in registry
    assert "N->W_right" in registry


@pytest.mark.parametrize("missing", ["N->N", "N->W", "N->W_left", "north", "", None, 42, ("N", "S")])
def test_get_missing_returns_none(registry, missing):
    assert registry.get(missing) is None
    assert missing not in registry


def test_get_missing_typed_key_returns_none(registry):
    assert registry.get(MovementKey(N, N, TurnType.STRAIGHT)) is None
    with pytest.raises(KeyError):
        registry[MovementKey(E, E, TurnType.LEFT)]


def test_registry_is_read_only(registry):
    with pytest.raises(TypeError):
        registry["N->N"] = registry["N->S"]
    with pytest.raises(TypeError):
        registry.turn_paths[MovementKey(N, N, TurnType.LEFT)] = registry["N->S"]
    with pytest.raises(TypeError):
        registry.straight_paths[MovementKey(N, N, TurnType.STRAIGHT)] = registry["N->S"]
    with pytest.raises(AttributeError):
        registry.extra = {}


def test_build_logs_catalogue_size(geometry, caplog):
    with caplog.at_level(logging.INFO, logger="intersection_paths"):
        build_path_registry(geometry)

    assert "8 turn paths and 4 straight paths" in caplog.text


if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-v"]))
