"""Tests for fragment pooling and ring reconstruction."""

import math
import warnings

import numpy as np
import pytest

from planar import AmbiguousStitchWarning, DegenerateGeometryError, make_box
from planar.clip import (
    CurveFragment,
    FragmentPool,
    boundary_portion,
    clip_to_pool,
    find_next_index,
    reconstruct,
)
from planar.curves import PolyCurve, circle, segment, straight_line


# -----------------------
# find_next_index
# -----------------------
def test_next_start_is_the_first_one_ahead() -> None:
    starts = np.array([0.5, 1.5, 2.5])
    assert find_next_index(starts, 1.0) == 1
    assert find_next_index(starts, 2.0) == 2
    # wraps past 4 -> 0
    assert find_next_index(starts, 3.0) == 0


def test_start_at_the_end_position_counts_as_a_full_turn() -> None:
    assert find_next_index(np.array([1.0, 2.0]), 1.0) == 1
    assert find_next_index(np.array([1.0]), 1.0) == 0


def test_exact_tie_goes_to_first_index_silently() -> None:
    with warnings.catch_warnings():
        warnings.simplefilter("error", AmbiguousStitchWarning)
        assert find_next_index(np.array([3.0, 2.0, 2.0]), 1.0) == 1


def test_near_tie_warns_and_keeps_the_nearer_start() -> None:
    starts = np.array([2.0 + 5e-10, 2.0])
    with pytest.warns(AmbiguousStitchWarning):
        assert find_next_index(starts, 1.0, tol=1e-9) == 1
    with warnings.catch_warnings():
        warnings.simplefilter("error", AmbiguousStitchWarning)
        assert find_next_index(starts, 1.0, tol=1e-9, warn=False) == 1


def test_nan_starts_are_skipped() -> None:
    assert find_next_index(np.array([math.nan, 3.0]), 1.0) == 1
    with pytest.raises(DegenerateGeometryError):
        find_next_index(np.array([math.nan]), 1.0)
    with pytest.raises(DegenerateGeometryError):
        find_next_index(np.array([1.0]), math.nan)


# -----------------------
# boundary_portion
# -----------------------
@pytest.fixture
def outline():
    return make_box(0.0, 1.0, 0.0, 1.0).boundary()


def test_portion_on_one_edge_is_a_segment(outline) -> None:
    pl = boundary_portion(outline, (0.2, 0.0), (0.8, 0.0), 0.2, 0.8)
    assert np.allclose(pl.vertices, [[0.2, 0.0], [0.8, 0.0]])


def test_portion_inserts_passed_corners(outline) -> None:
    pl = boundary_portion(outline, (1.0, 0.5), (0.5, 1.0), 1.5, 2.5)
    assert np.allclose(pl.vertices, [[1.0, 0.5], [1.0, 1.0], [0.5, 1.0]])


def test_portion_backwards_on_one_edge_goes_all_around(outline) -> None:
    pl = boundary_portion(outline, (0.8, 0.0), (0.2, 0.0), 0.8, 0.2)
    assert np.allclose(pl.vertices, [[0.8, 0.0], [1.0, 0.0], [1.0, 1.0],
                                     [0.0, 1.0], [0.0, 0.0], [0.2, 0.0]])


def test_portion_does_not_repeat_corner_end_points(outline) -> None:
    pl = boundary_portion(outline, (1.0, 0.0), (0.0, 1.0), 1.0, 3.0)
    assert np.allclose(pl.vertices, [[1.0, 0.0], [1.0, 1.0], [0.0, 1.0]])
    pl = boundary_portion(outline, (1.0, 0.5), (1.0, 1.0), 1.5, 2.0)
    assert np.allclose(pl.vertices, [[1.0, 0.5], [1.0, 1.0]])


def test_coincident_points_need_no_portion(outline) -> None:
    assert boundary_portion(outline, (0.3, 0.0), (0.3, 0.0), 0.3, 0.3) is None


# -----------------------
# Pool and reconstruction
# -----------------------
def test_pool_records_outline_positions(unit_box) -> None:
    pool = clip_to_pool([straight_line((0.0, 0.0), (1.0, 0.0)), circle((0.0, 0.0), 0.5)], unit_box)
    assert len(pool) == 2
    assert pool.open_indices() == [0]
    assert pool.closed_indices() == [1]
    assert pool.starts[0] == pytest.approx(3.5)
    assert pool.ends[0] == pytest.approx(1.5)
    assert math.isnan(pool.starts[1])


def test_open_piece_ending_inside_is_degenerate(unit_box) -> None:
    with pytest.raises(DegenerateGeometryError):
        clip_to_pool([segment((0.0, 0.0), (5.0, 0.0))], unit_box)


def test_reconstruct_closes_a_line_with_the_outline(unit_box) -> None:
    pool = clip_to_pool([straight_line((0.0, 0.0), (1.0, 0.0))], unit_box)
    rings = reconstruct(pool, unit_box)
    assert len(rings) == 1
    ring = rings[0]
    assert isinstance(ring, PolyCurve)
    assert ring.is_closed
    assert len(ring) == 2
    assert np.allclose(ring.children[1].vertices,
                       [[1.0, 0.0], [1.0, 1.0], [-1.0, 1.0], [-1.0, 0.0]])


def _chord(outline, s, e) -> CurveFragment:
    return CurveFragment(segment(outline.point_at(s), outline.point_at(e)), s, e)


def test_revisiting_a_consumed_fragment_is_degenerate() -> None:
    box = make_box(0.0, 1.0, 0.0, 1.0)
    outline = box.boundary()
    pool = FragmentPool([
        _chord(outline, 0.5, 1.5),
        _chord(outline, 1.6, 1.7),
        _chord(outline, 1.65, 0.6),
    ])
    with pytest.raises(DegenerateGeometryError):
        reconstruct(pool, box)
