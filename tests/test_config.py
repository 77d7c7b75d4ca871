"""Tests for configuration merging, typed errors and the api façade options."""

import warnings

import pytest

from planar import (
    AmbiguousStitchWarning,
    Boundary,
    DegenerateGeometryError,
    GeometryError,
    UnboundedClipError,
    clip,
    clip_curve,
)
from planar.config import DEFAULTS, get_tolerance, load_config
from planar.curves import circle, segment


def test_defaults_are_returned_as_a_copy() -> None:
    cfg = load_config()
    cfg["stitch"]["warn_on_ambiguous"] = False
    assert DEFAULTS["stitch"]["warn_on_ambiguous"] is True


def test_overrides_merge_deeply() -> None:
    cfg = load_config({"tolerance": 1e-6, "plot": {"samples": 50}})
    assert cfg["tolerance"] == 1e-6
    assert cfg["plot"]["samples"] == 50
    assert cfg["plot"]["unbounded_extent"] == DEFAULTS["plot"]["unbounded_extent"]
    assert cfg["stitch"]["warn_on_ambiguous"] is True
    assert get_tolerance({"tolerance": "1e-4"}) == pytest.approx(1e-4)


@pytest.mark.parametrize("overrides", [
    {"tolerance": 0.0},
    {"tolerance": -1.0},
    {"tolerance": float("nan")},
    {"tolerance": "abc"},
    {"plot": {"samples": 1}},
    {"plot": {"unbounded_extent": 0.0}},
])
def test_invalid_options_are_rejected(overrides) -> None:
    with pytest.raises(ValueError):
        load_config(overrides)


def test_error_hierarchy_and_context() -> None:
    assert issubclass(UnboundedClipError, GeometryError)
    assert issubclass(DegenerateGeometryError, GeometryError)
    assert issubclass(AmbiguousStitchWarning, UserWarning)
    err = UnboundedClipError("Cannot clip", {"box": (0.0, 1.0)})
    assert str(err) == "Cannot clip | box=(0.0, 1.0)"
    assert str(DegenerateGeometryError("plain")) == "plain"
    long = GeometryError("x", {"v": "a" * 500})
    assert str(long).endswith("...")


def test_api_reads_tolerance_from_config(unit_box) -> None:
    # an end point 1e-7 off the outline only counts as on it with a loose tolerance
    s = segment((1.0 + 1e-7, 0.0), (0.0, 0.0))
    assert clip_curve(s, unit_box) != [s]
    assert clip_curve(s, unit_box, config={"tolerance": 1e-6}) == [s]


def test_api_can_silence_stitch_warnings(unit_box) -> None:
    with warnings.catch_warnings():
        warnings.simplefilter("error", AmbiguousStitchWarning)
        result = clip(Boundary([circle((0.0, 0.0), 1.2)]), unit_box,
                      config={"stitch": {"warn_on_ambiguous": False}})
    assert len(result) == 1
