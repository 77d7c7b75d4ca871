"""Tests for open polylines and closed linear rings."""

import math

import numpy as np
import pytest

from planar import AffineTransform
from planar.curves import LinearRing, Polyline, straight_line


def test_polyline_parameterization() -> None:
    pl = Polyline([[0.0, 0.0], [1.0, 0.0], [1.0, 1.0]])
    assert pl.t1 == 2.0
    assert np.allclose(pl.point_at(1.5), [1.0, 0.5])
    assert np.allclose(pl.tangent(0.5), [1.0, 0.0])
    assert pl.position_of((1.0, 0.25)) == pytest.approx(1.25)
    assert math.isnan(pl.position_of((0.5, 0.5)))
    assert pl.length() == pytest.approx(2.0)


def test_polyline_sub_curve_keeps_inner_vertices() -> None:
    pl = Polyline([[0.0, 0.0], [1.0, 0.0], [1.0, 1.0]])
    sub = pl.sub_curve(0.5, 1.5)
    assert np.allclose(sub.vertices, [[0.5, 0.0], [1.0, 0.0], [1.0, 0.5]])
    assert np.allclose(pl.reversed().first_point(), [1.0, 1.0])


def test_polyline_needs_two_points() -> None:
    with pytest.raises(ValueError):
        Polyline([[0.0, 0.0]])
    with pytest.raises(ValueError):
        Polyline(np.zeros((3, 3)))


def test_ring_strips_closing_vertex(square_pts) -> None:
    closed = np.vstack((square_pts, square_pts[:1]))
    ring = LinearRing(closed)
    assert ring.vertices.shape == (4, 2)
    assert ring.t1 == 4.0
    assert ring.is_closed
    assert ring.area() == pytest.approx(1.0)
    assert ring.length() == pytest.approx(4.0)


def test_ring_signed_distance_and_reversal(square_pts) -> None:
    ring = LinearRing(square_pts)
    assert ring.signed_distance((0.5, 0.5)) == pytest.approx(-0.5)
    assert ring.signed_distance((0.5, -1.0)) == pytest.approx(1.0)
    # the nearest point is a convex corner
    assert ring.signed_distance((2.0, 2.0)) == pytest.approx(math.sqrt(2.0))
    rev = ring.reversed()
    assert rev.area() == pytest.approx(-1.0)
    assert rev.signed_distance((0.5, 0.5)) == pytest.approx(0.5)


def test_reflex_corner_inside_test() -> None:
    # L-shaped CCW polygon with a reflex corner at (1, 1)
    ring = LinearRing([[0, 0], [2, 0], [2, 1], [1, 1], [1, 2], [0, 2]])
    assert ring.is_inside((0.9, 0.9))
    assert not ring.is_inside((1.5, 1.5))
    assert ring.signed_distance((1.5, 1.5)) == pytest.approx(0.5)


def test_ring_sub_curve_wraps_through_vertex_zero(square_pts) -> None:
    ring = LinearRing(square_pts)
    part = ring.sub_curve(3.5, 0.5)
    assert isinstance(part, Polyline)
    assert np.allclose(part.vertices, [[0.0, 0.5], [0.0, 0.0], [0.5, 0.0]])
    assert ring.position_of((0.0, 0.0)) == 0.0


def test_ring_intersections_and_transform(square_pts) -> None:
    ring = LinearRing(square_pts)
    pts = ring.intersections(straight_line((0.0, 0.5), (1.0, 0.0)))
    assert sorted(round(p[0], 12) for p in pts) == [0.0, 1.0]
    # a line through a corner meets it once
    assert len(ring.intersections(straight_line((0.0, 0.0), (1.0, -1.0)))) == 1

    moved = ring.transform(AffineTransform.scaling(2.0))
    assert moved.area() == pytest.approx(4.0)
