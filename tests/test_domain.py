"""Tests for boundaries and the domains they enclose."""

import math

import numpy as np
import pytest

from planar import AffineTransform, Boundary, Domain
from planar.curves import circle, segment
from planar.domain import disk, ellipse_domain, half_plane, polygon


def test_boundary_rejects_non_curves() -> None:
    with pytest.raises(ValueError):
        Boundary([circle((0, 0), 1.0), (0.0, 0.0)])


def test_empty_boundary_is_the_empty_domain() -> None:
    empty = Boundary()
    assert len(empty) == 0
    assert empty.signed_distance((0.0, 0.0)) == math.inf
    assert not Domain(empty).contains((0.0, 0.0))


def test_disk_and_half_plane_membership() -> None:
    d = disk((1.0, 1.0), 2.0)
    assert d.contains((2.0, 2.0))
    assert not d.contains((4.0, 1.0))
    assert d.is_bounded()
    assert d.distance((4.0, 1.0)) == pytest.approx(1.0)
    assert d.distance((1.0, 1.0)) == 0.0

    h = half_plane((0.0, 0.0), (0.0, 1.0))
    assert h.contains((-1.0, 5.0))
    assert not h.contains((1.0, 5.0))
    assert not h.is_bounded()


def test_ellipse_domain() -> None:
    e = ellipse_domain((0.0, 0.0), 2.0, 1.0)
    assert e.contains((1.5, 0.0))
    assert not e.contains((0.0, 1.5))
    rotated = ellipse_domain((0.0, 0.0), 2.0, 1.0, theta=math.pi / 2.0)
    assert rotated.contains((0.0, 1.5))


def test_polygon_is_oriented_ccw_whatever_the_input() -> None:
    cw = polygon([(0.0, 0.0), (0.0, 1.0), (1.0, 1.0), (1.0, 0.0)])
    ccw = polygon([(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0), (0.0, 0.0)])
    for d in (cw, ccw):
        assert d.boundary[0].area() == pytest.approx(1.0)
        assert d.contains((0.5, 0.5))
        assert not d.contains((1.5, 0.5))


def test_complement_swaps_inside_and_outside() -> None:
    d = disk((0.0, 0.0), 1.0)
    c = d.complement()
    assert not c.contains((0.0, 0.0))
    assert c.contains((3.0, 0.0))


def test_transform_keeps_membership_under_reflection() -> None:
    d = disk((2.0, 0.0), 1.0)
    mirror = AffineTransform.line_reflection((0.0, 0.0), (0.0, 1.0))
    image = d.transform(mirror)
    assert image.contains((-2.0, 0.0))
    assert not image.contains((2.0, 0.0))

    p = polygon([(0.0, 0.0), (2.0, 0.0), (0.0, 1.0)])
    image = p.transform(mirror)
    assert image.contains((-0.5, 0.25))
    assert image.boundary[0].area() > 0.0


def test_boundary_reversed_and_repr() -> None:
    b = Boundary([circle((0.0, 0.0), 1.0), segment((2.0, 0.0), (3.0, 0.0))])
    r = b.reversed()
    assert len(r) == 2
    assert np.allclose(r[0].first_point(), [3.0, 0.0])
    assert "circle_arc" in repr(b)
    assert len(b.sample(50)) == 2
