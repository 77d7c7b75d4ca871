# -*- coding: utf-8 -*-
# Clipxus/planar/api.py

"""
Project: Clipxus
Author: Erfan Vaezi
Date: 7/15/2025 (Updated: 10/19/2026)

Purpose
-------
Thin, import-only façade for Clipxus clipping workflows. Exposes the two entry points
and a box helper, reading the tolerance and stitch options from the merged config.

Main Tasks
----------
    1. `make_box` → validated `Box` from four bounds.
    2. `clip` → boundary (or domain) of the part inside a box.
    3. `clip_curve` → pieces of one curve inside a box.

Notes
-----
- This module is a convenience façade; detailed behaviour lives in `planar.clip`.
- `config` is a partial dict shaped like `planar.config.DEFAULTS`.
"""

import logging
from typing import Any, Dict, List, Optional, Union

from .clip.boundary_clip import clip_boundary
from .clip.curve_clip import clip_curve as _clip_curve
from .config import get_tolerance, load_config
from .core.box import Box
from .curves.base import ContinuousCurve
from .domain.boundary import Boundary
from .domain.domain import Domain

logger = logging.getLogger(__name__)

__all__ = [
    "make_box",
    "clip",
    "clip_curve",
]


# --------
# Helpers
# --------
def make_box(xmin: float, xmax: float, ymin: float, ymax: float) -> Box:
    """
    Build an axis-aligned box.

    Raises
    ------
    ValueError
        If a bound is NaN or the bounds are inverted.
    """
    return Box(xmin, xmax, ymin, ymax)


def clip(
    boundary: Union[Boundary, Domain],
    box: Box,
    *,
    config: Optional[Dict[str, Any]] = None,
) -> Union[Boundary, Domain]:
    """
    Clip a boundary (or a domain) against `box`.

    Args
    ----
    boundary : Boundary or Domain
        Oriented boundary; a Domain is clipped through its boundary and returned as
        a Domain.
    box : Box
        Bounded clip rectangle.
    config : dict, optional
        Overrides for `tolerance` and `stitch.warn_on_ambiguous`.

    Returns
    -------
    Boundary or Domain
        Same type as the input.

    Raises
    ------
    UnboundedClipError
        If `box` has an infinite bound.
    """
    if isinstance(boundary, Domain):
        return Domain(clip(boundary.boundary, box, config=config))
    cfg = load_config(config)
    tol = get_tolerance(cfg)
    result = clip_boundary(
        boundary, box,
        tol=tol,
        warn_on_ambiguous=bool(cfg["stitch"]["warn_on_ambiguous"]),
    )
    logger.info("[clip] box=%s tol=%g -> %d ring(s)", box.as_tuple(), tol, len(result))
    return result


def clip_curve(
    curve: ContinuousCurve,
    box: Box,
    *,
    config: Optional[Dict[str, Any]] = None,
) -> List[ContinuousCurve]:
    """
    Pieces of `curve` inside `box`, in traversal order.

    Raises
    ------
    UnboundedClipError
        If `box` has an infinite bound.
    """
    return _clip_curve(curve, box, tol=get_tolerance(config))
