"""Tests for composite curve chains."""

import math

import numpy as np
import pytest

from planar import AffineTransform
from planar.curves import PolyCurve, circle_arc, ray, segment


@pytest.fixture
def half_disk():
    """Upper half disk: CCW arc from (1, 0) to (-1, 0), then the diameter back."""
    arc = circle_arc((0.0, 0.0), 1.0, 0.0, math.pi)
    return PolyCurve([arc, segment((-1.0, 0.0), (1.0, 0.0))], closed=True)


def test_chain_parameterization(half_disk) -> None:
    assert len(half_disk) == 2
    assert half_disk.t1 == 2.0
    assert half_disk.is_closed
    assert np.allclose(half_disk.point_at(0.5), [0.0, 1.0])
    assert np.allclose(half_disk.point_at(1.5), [0.0, 0.0])
    assert half_disk.position_of((0.0, 1.0)) == pytest.approx(0.5)
    assert half_disk.position_of((1.0, 0.0)) == 0.0
    assert half_disk.length() == pytest.approx(math.pi + 2.0)


def test_chain_signed_distance(half_disk) -> None:
    assert half_disk.signed_distance((0.0, 0.3)) == pytest.approx(-0.3)
    assert half_disk.signed_distance((0.0, -0.5)) == pytest.approx(0.5)
    assert half_disk.signed_distance((0.0, 1.5)) == pytest.approx(0.5)
    assert not half_disk.is_inside((2.0, 0.1))


def test_chain_must_be_contiguous() -> None:
    with pytest.raises(ValueError):
        PolyCurve([segment((0, 0), (1, 0)), segment((2, 0), (3, 0))])
    with pytest.raises(ValueError):
        PolyCurve([])


def test_unbounded_children_only_at_open_ends() -> None:
    r = ray((0.0, 0.0), (1.0, 0.0))
    with pytest.raises(ValueError):
        PolyCurve([r, segment((0, 0), (0, 1))])
    chain = PolyCurve([segment((0, 1), (0, 0)), r])
    assert not chain.is_bounded()
    assert np.allclose(chain.first_point(), [0.0, 1.0])


def test_closed_sub_curve_wraps(half_disk) -> None:
    part = half_disk.sub_curve(1.5, 0.5)
    assert not part.is_closed
    assert np.allclose(part.first_point(), [0.0, 0.0])
    assert np.allclose(part.last_point(), [0.0, 1.0])
    with pytest.raises(ValueError):
        PolyCurve([segment((0, 0), (1, 0))]).sub_curve(0.8, 0.2)


def test_reversed_and_transform(half_disk) -> None:
    rev = half_disk.reversed()
    assert rev.signed_distance((0.0, 0.3)) == pytest.approx(0.3)
    moved = half_disk.transform(AffineTransform.translation(5.0, 0.0))
    assert moved.is_inside((5.0, 0.3))
    assert len(half_disk.intersections(segment((0.0, -1.0), (0.0, 2.0)))) == 2
