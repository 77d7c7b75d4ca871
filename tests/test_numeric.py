"""Tests for the numeric helpers shared by the curve kinds."""

import math

import pytest

from planar.core.numeric import (
    TWO_PI,
    contains_angle,
    format_angle,
    from_unit,
    horizontal_angle,
    real_roots,
    reach,
    solve_quadratic,
    to_unit,
)


def test_solve_quadratic_cases() -> None:
    assert solve_quadratic(1.0, -3.0, 2.0) == pytest.approx([1.0, 2.0])
    assert solve_quadratic(1.0, 2.0, 1.0) == pytest.approx([-1.0])
    assert solve_quadratic(1.0, 0.0, 1.0) == []
    assert solve_quadratic(0.0, 2.0, -4.0) == pytest.approx([2.0])
    assert solve_quadratic(0.0, 0.0, 0.0) == []


def test_real_roots_strips_leading_zeros() -> None:
    assert real_roots([0.0, 1.0, 0.0, -1.0]) == pytest.approx([-1.0, 1.0])
    assert real_roots([1.0, 0.0, 1.0]) == []


def test_angles_fold_into_one_turn() -> None:
    assert format_angle(-math.pi / 2.0) == pytest.approx(1.5 * math.pi)
    assert format_angle(TWO_PI) == 0.0
    assert horizontal_angle((0.0, -1.0)) == pytest.approx(1.5 * math.pi)


def test_contains_angle_respects_sweep_direction() -> None:
    assert contains_angle(0.0, math.pi / 2.0, math.pi / 4.0)
    assert not contains_angle(0.0, math.pi / 2.0, math.pi)
    assert contains_angle(0.0, -math.pi / 2.0, -math.pi / 4.0)
    assert contains_angle(1.0, TWO_PI, 5.0)


def test_unit_interval_maps_are_monotone_and_inverse() -> None:
    for t0, t1 in ((0.0, 2.0), (-math.inf, 1.0), (0.0, math.inf), (-math.inf, math.inf)):
        us = [to_unit(t, t0, t1) for t in (-3.0, 0.5, 0.9, 4.0)]
        assert us == sorted(us)
        for u in (0.1, 0.5, 0.8):
            assert to_unit(from_unit(u, t0, t1), t0, t1) == pytest.approx(u)


def test_reach_scales_with_magnitude() -> None:
    assert reach(1e-9, (0.1, 0.2)) == pytest.approx(1e-9)
    assert reach(1e-9, (1e3, -5.0)) == pytest.approx(1e-6)
