"""Tests for loop closure, orientation and winding numbers."""

import numpy as np
import pytest

from planar.topology import (
    close_and_orient,
    ensure_closed,
    is_closed,
    orientation,
    signed_area,
    total_winding,
    winding_number,
)


def test_closure_helpers(square_pts) -> None:
    assert not is_closed(square_pts)
    closed = ensure_closed(square_pts)
    assert closed.shape == (5, 2)
    assert is_closed(closed)
    assert ensure_closed(closed) is closed


def test_area_and_orientation(square_pts) -> None:
    closed = ensure_closed(square_pts)
    assert signed_area(closed) == pytest.approx(1.0)
    assert orientation(closed) == "CCW"
    assert orientation(closed[::-1]) == "CW"


def test_close_and_orient_reverses_when_needed(square_pts) -> None:
    cw = square_pts[::-1]
    out = close_and_orient(cw, "CCW")
    assert orientation(out) == "CCW"
    assert is_closed(out)
    with pytest.raises(ValueError):
        close_and_orient(cw, "up")


def test_winding_numbers(square_pts) -> None:
    assert winding_number(square_pts, (0.5, 0.5)) == 1
    assert winding_number(square_pts[::-1], (0.5, 0.5)) == -1
    assert winding_number(square_pts, (2.0, 0.5)) == 0
    twice = np.vstack((square_pts, square_pts))
    assert winding_number(twice, (0.5, 0.5)) == 2


def test_total_winding_with_a_hole(square_pts) -> None:
    outer = square_pts * 4.0
    hole = (square_pts + 1.5)[::-1]
    assert total_winding([outer, hole], (0.5, 0.5)) == 1
    assert total_winding([outer, hole], (2.0, 2.0)) == 0


def test_winding_rejects_bad_input() -> None:
    with pytest.raises(ValueError):
        winding_number(np.array([[0.0, 0.0], [1.0, 0.0]]), (0.0, 1.0))
    with pytest.raises(ValueError):
        winding_number(np.zeros((4, 3)), (0.0, 0.0))
