"""Smoke tests for the matplotlib QA plots (headless backend)."""

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import pytest  # noqa: E402

from planar import Boundary, clip  # noqa: E402
from planar.curves import circle, parabola, straight_line  # noqa: E402
from planar.domain import disk  # noqa: E402
from post.plot_geo import plot_boundary, plot_clip, plot_curve  # noqa: E402


def test_plot_curve_saves_a_file(tmp_path) -> None:
    out = tmp_path / "curve.png"
    plot_curve(parabola((0.0, 0.0), 1.0), show=False, save_path=str(out),
               config={"plot": {"samples": 20, "unbounded_extent": 2.0}})
    assert out.exists()


def test_plot_boundary_on_existing_axes(unit_box) -> None:
    fig, ax = plt.subplots()
    plot_boundary(Boundary([circle((0, 0), 1.2), straight_line((0, 0), (1, 1))]),
                  box=unit_box, show=False, ax=ax)
    assert len(ax.lines) >= 3
    assert ax.get_title() == "Boundary: boundary"
    plt.close(fig)


def test_plot_clip_overlays_input_box_and_result(unit_box, tmp_path) -> None:
    domain = disk((0.0, 0.0), 1.2)
    out = tmp_path / "clip.png"
    plot_clip(domain, unit_box, clip(domain, unit_box), show=False, save_path=str(out))
    assert out.exists()


def test_plot_rejects_wrong_input() -> None:
    with pytest.raises(ValueError):
        plot_curve("not a curve", show=False)
    with pytest.raises(ValueError):
        plot_boundary([circle((0, 0), 1.0)], show=False)
