# -*- coding: utf-8 -*-
# Clipxus/post/plot_geo.py

"""
Project: Clipxus
Author: Erfan Vaezi
Date: 7/14/2025 (Updated: 10/19/2026)

Purpose:
--------
Plotting utilities for curves, boundaries and clip results using matplotlib. These are
QA helpers: they draw sampled curves with a traversal arrow so orientation mistakes
(inside on the wrong side) are visible at a glance, and overlay the clip box.
"""

import logging
from typing import Any, Dict, Optional

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.axes import Axes

from planar.config import load_config
from planar.core.box import Box
from planar.curves.base import ContinuousCurve
from planar.domain.boundary import Boundary
from planar.domain.domain import Domain

logger = logging.getLogger(__name__)

__all__ = ["plot_curve", "plot_boundary", "plot_clip"]


def _new_axes(ax: Optional[Axes], figsize=(6, 6)):
    if ax is None:
        plt.figure(figsize=figsize)
        return plt.gca(), True
    return ax, False


def _finish(ax: Axes, title: str, created_fig: bool, show: bool, save_path: Optional[str]) -> None:
    ax.set_aspect("equal", adjustable="box")
    ax.set_title(title)
    ax.set_xlabel("x")
    ax.set_ylabel("y")
    ax.grid(True)
    if save_path:
        ax.figure.savefig(save_path, dpi=300)
        logger.info("[plot] saved %s", save_path)
    if show and created_fig:
        plt.show()
    elif created_fig:
        plt.close(ax.figure)


def _draw(ax: Axes, P: np.ndarray, style: str, lw: float, label: Optional[str]) -> None:
    ax.plot(P[:, 0], P[:, 1], style, lw=lw, label=label)
    # direction marker at mid-curve
    if P.shape[0] >= 2:
        i = max(0, P.shape[0] // 2 - 1)
        d = P[i + 1] - P[i]
        if np.linalg.norm(d) > 0.0:
            ax.annotate("", xy=P[i + 1], xytext=P[i],
                        arrowprops=dict(arrowstyle="->", color=ax.lines[-1].get_color(), lw=lw))


def _draw_box(ax: Axes, box: Box) -> None:
    V = box.vertices()
    V = np.vstack((V, V[:1]))
    ax.plot(V[:, 0], V[:, 1], "b--", lw=1.0, label="box")


def plot_curve(curve: ContinuousCurve,
               *,
               name: str = "curve",
               config: Optional[Dict[str, Any]] = None,
               show: bool = True,
               save_path: Optional[str] = None,
               ax: Optional[Axes] = None) -> None:
    """
        Plot one curve with an arrow in its traversal direction.

        Parameters
        ----------
        curve : ContinuousCurve
            Curve to draw; unbounded curves are drawn over a window of the parameter.
        name : str
            Title label for the figure.
        config : dict, optional
            Overrides for `plot.samples` and `plot.unbounded_extent`.
        show : bool
            If True and we created the figure, display it.
        save_path : Optional[str]
            If given, save the figure to this path.
        ax : Optional[matplotlib.axes.Axes]
            Existing Axes to draw on; if None, a figure is created.
        """
    if not isinstance(curve, ContinuousCurve):
        raise ValueError("Expected a ContinuousCurve, got {}.".format(type(curve).__name__))
    opts = load_config(config)["plot"]
    ax, created_fig = _new_axes(ax)
    P = curve.sample(int(opts["samples"]), float(opts["unbounded_extent"]))
    _draw(ax, P, "-", 1.5, curve.kind.value)
    _finish(ax, "Curve: {}".format(name), created_fig, show, save_path)


def plot_boundary(boundary,
                  *,
                  name: str = "boundary",
                  box: Optional[Box] = None,
                  config: Optional[Dict[str, Any]] = None,
                  show: bool = True,
                  save_path: Optional[str] = None,
                  ax: Optional[Axes] = None) -> None:
    """
       Plot every component of a boundary (or domain), optionally with a box.

       Parameters
       ----------
       boundary : Boundary or Domain
           Components to draw, one color per component.
       box : Box, optional
           Bounded box drawn dashed.
       name, config, show, save_path, ax
           Same semantics as `plot_curve`.
       """
    if isinstance(boundary, Domain):
        boundary = boundary.boundary
    if not isinstance(boundary, Boundary):
        raise ValueError("Expected a Boundary or Domain, got {}.".format(type(boundary).__name__))
    opts = load_config(config)["plot"]
    ax, created_fig = _new_axes(ax)

    for i, P in enumerate(boundary.sample(int(opts["samples"]), float(opts["unbounded_extent"]))):
        _draw(ax, P, "-", 1.5, "component {}".format(i))
    if box is not None:
        _draw_box(ax, box)
    if len(boundary) or box is not None:
        ax.legend()
    _finish(ax, "Boundary: {}".format(name), created_fig, show, save_path)


def plot_clip(boundary,
              box: Box,
              clipped,
              *,
              config: Optional[Dict[str, Any]] = None,
              show: bool = True,
              save_path: Optional[str] = None,
              ax: Optional[Axes] = None) -> None:
    """
       Overlay an input boundary (thin gray), the clip box (dashed) and the clipped
       rings (thick).

       Parameters
       ----------
       boundary : Boundary or Domain
           Input of the clip.
       box : Box
           Clip rectangle.
       clipped : Boundary or Domain
           Result of `planar.clip(boundary, box)`.
       config, show, save_path, ax
           Same semantics as `plot_curve`.
       """
    if isinstance(boundary, Domain):
        boundary = boundary.boundary
    if isinstance(clipped, Domain):
        clipped = clipped.boundary
    opts = load_config(config)["plot"]
    n, extent = int(opts["samples"]), float(opts["unbounded_extent"])
    ax, created_fig = _new_axes(ax)

    for P in boundary.sample(n, extent):
        ax.plot(P[:, 0], P[:, 1], color=(0.6, 0.6, 0.6), lw=1.0)
    _draw_box(ax, box)
    for i, P in enumerate(clipped.sample(n, extent)):
        _draw(ax, P, "-", 2.0, "ring {}".format(i))
    ax.legend()
    _finish(ax, "Clip: {} ring(s)".format(len(clipped)), created_fig, show, save_path)
