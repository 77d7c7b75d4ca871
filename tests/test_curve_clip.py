"""Tests for clipping single curves against a box."""

import math

import numpy as np
import pytest

from planar import UnboundedClipError, clip_curve, make_box
from planar.clip import clip_curve_set, crossing_params
from planar.curves import (
    CurveKind,
    Polyline,
    circle,
    line_through,
    parabola,
    segment,
    straight_line,
)


def _on_outline(box, p, tol=1e-9) -> bool:
    return not math.isnan(box.boundary().position(p, tol))


def test_curve_inside_is_returned_unchanged(unit_box) -> None:
    s = segment((-0.5, 0.0), (0.5, 0.5))
    assert clip_curve(s, unit_box) == [s]
    c = circle((0.0, 0.0), 0.5)
    assert clip_curve(c, unit_box)[0] is c


def test_curve_outside_gives_nothing(unit_box) -> None:
    assert clip_curve(segment((2.0, 2.0), (3.0, 2.0)), unit_box) == []
    assert clip_curve(circle((0.0, 0.0), 3.0), unit_box) == []


def test_segment_crossing_the_box(unit_box) -> None:
    pieces = clip_curve(segment((-2.0, 0.0), (2.0, 0.0)), unit_box)
    assert len(pieces) == 1
    assert np.allclose(pieces[0].first_point(), [-1.0, 0.0])
    assert np.allclose(pieces[0].last_point(), [1.0, 0.0])


def test_infinite_line_becomes_a_segment(unit_box) -> None:
    pieces = clip_curve(straight_line((0.0, 0.5), (1.0, 0.0)), unit_box)
    assert len(pieces) == 1
    assert pieces[0].kind is CurveKind.SEGMENT
    assert np.allclose(pieces[0].first_point(), [-1.0, 0.5])
    assert np.allclose(pieces[0].last_point(), [1.0, 0.5])


def test_line_through_corners_dedupes_crossings(unit_box) -> None:
    line = line_through((-1.0, -1.0), (1.0, 1.0))
    assert len(crossing_params(line, unit_box)) == 2
    pieces = clip_curve(line, unit_box)
    assert len(pieces) == 1
    assert np.allclose(pieces[0].first_point(), [-1.0, -1.0])


def test_circle_overlapping_corners_gives_four_arcs(unit_box) -> None:
    pieces = clip_curve(circle((0.0, 0.0), 1.2), unit_box)
    assert len(pieces) == 4
    for arc in pieces:
        assert arc.kind is CurveKind.CIRCLE_ARC
        assert not arc.is_closed
        assert _on_outline(unit_box, arc.first_point())
        assert _on_outline(unit_box, arc.last_point())
        mid = arc.point_at(0.5 * (arc.t0 + arc.t1))
        assert abs(mid[0]) > 0.5 and abs(mid[1]) > 0.5


def test_tangent_contacts_do_not_split(unit_box) -> None:
    c = circle((0.0, 0.0), 1.0)
    assert len(crossing_params(c, unit_box)) == 4
    assert clip_curve(c, unit_box) == [c]


def test_crossing_at_a_curve_end_does_not_split(unit_box) -> None:
    s = segment((0.0, 0.0), (1.0, 0.0))
    assert clip_curve(s, unit_box) == [s]


def test_polyline_leaving_and_reentering(unit_box) -> None:
    pl = Polyline([[-0.5, 0.0], [2.0, 0.0], [2.0, 0.5], [-0.5, 0.5]])
    pieces = clip_curve(pl, unit_box)
    assert len(pieces) == 2
    assert np.allclose(pieces[0].last_point(), [1.0, 0.0])
    assert np.allclose(pieces[1].first_point(), [1.0, 0.5])
    assert np.allclose(pieces[1].last_point(), [-0.5, 0.5])


def test_unbounded_parabola_is_cut_to_an_arc(unit_box) -> None:
    pieces = clip_curve(parabola((0.0, -0.5), 1.0), unit_box)
    assert len(pieces) == 1
    arc = pieces[0]
    assert arc.is_bounded()
    assert np.allclose(arc.first_point(), [-1.0, 0.5])
    assert np.allclose(arc.last_point(), [1.0, 0.5])


def test_clip_curve_set_flattens(unit_box) -> None:
    curves = [segment((-2.0, 0.0), (2.0, 0.0)), segment((5.0, 5.0), (6.0, 5.0)), circle((0, 0), 1.2)]
    assert len(clip_curve_set(curves, unit_box)) == 5


def test_unbounded_box_is_refused() -> None:
    box = make_box(-1.0, 1.0, 0.0, math.inf)
    with pytest.raises(UnboundedClipError):
        clip_curve(segment((0.0, 0.0), (1.0, 1.0)), box)


def test_thin_excursion_outside_the_box_is_cut(unit_box) -> None:
    # leaves through x = 1 by less than the tolerance, far from any vertex crossing
    pl = Polyline([[1.0 - 5e-10, -0.5], [1.0 + 5e-10, 0.0], [1.0 - 5e-10, 0.5]])
    pieces = clip_curve(pl, unit_box)
    assert len(pieces) == 2
    assert pieces[0].last_point() == pytest.approx([1.0, -0.25], abs=1e-9)
    assert pieces[1].first_point() == pytest.approx([1.0, 0.25], abs=1e-9)
