# -*- coding: utf-8 -*-
# Clipxus/planar/clip/curve_clip.py

"""
Project: Clipxus
Author: Erfan Vaezi
Date: 10/4/2025 (Updated: 10/19/2026)

Purpose
-------
Clip a single continuous curve against a bounded axis-aligned box, returning the
pieces of the curve that lie inside, in the curve's own traversal order.

Main Tasks
----------
    1. Collect crossings with the four outline edges as curve parameters.
    2. Partition the parameter range at the crossings (cyclically for closed curves).
    3. Classify each interval by an interior sample and merge equal neighbours, so a
       tangential touch never produces an extra fragment.
    4. Emit `sub_curve` pieces for inside intervals (wrapping ones for closed curves).

Notes
-----
- Works with infinite parameter bounds (lines, rays, parabolas, hyperbola branches).
- Intersection points the curve cannot invert (NaN position) are ignored.
"""

import logging
import math
from typing import Iterable, List, Optional

from ..config import DEFAULT_TOL
from ..core.box import Box
from ..core.numeric import choose_position, reach
from ..curves.base import ContinuousCurve
from ..errors import UnboundedClipError

logger = logging.getLogger(__name__)

# points computed on the outline may land this far outside (scaled like `reach`)
_ROUNDING = 64.0 * 2.0 ** -52

__all__ = ["crossing_params", "clip_curve", "clip_curve_set"]


def _same(a: float, b: float, tol: float) -> bool:
    return abs(a - b) <= tol * max(1.0, abs(a), abs(b))


def _dedupe(params: List[float], tol: float, period: Optional[float] = None) -> List[float]:
    out: List[float] = []
    for t in sorted(params):
        if out and _same(t, out[-1], tol):
            continue
        out.append(t)
    if period is not None and len(out) > 1 and _same(out[0] + period, out[-1], tol):
        out.pop()
    return out


def crossing_params(curve: ContinuousCurve, box: Box, tol: float = DEFAULT_TOL) -> List[float]:
    """
    Sorted, de-duplicated parameters where `curve` meets the outline of `box`.
    Closed curves get parameters folded into [t0, t1).
    """
    params = []
    for edge in box.edges():
        for p in curve.intersections(edge, tol):
            t = curve.position_of(p, tol)
            if math.isnan(t):
                continue
            params.append(t)
    if curve.is_closed:
        period = curve.t1 - curve.t0
        params = [t - period if t >= curve.t1 else t for t in params]
        return _dedupe(params, tol, period)
    return _dedupe(params, tol)


def _inside_point(box: Box, p) -> bool:
    return box.offset(p) <= reach(_ROUNDING, p)


def _inside(curve: ContinuousCurve, box: Box, a: float, b: float) -> bool:
    return _inside_point(box, curve.point_at(choose_position(a, b)))


def _clip_open(curve: ContinuousCurve, box: Box, params: List[float], tol: float) -> List[ContinuousCurve]:
    t0, t1 = curve.t0, curve.t1
    # crossings at a finite end of the curve do not split anything
    params = [t for t in params
              if not (math.isfinite(t0) and _same(t, t0, tol))
              and not (math.isfinite(t1) and _same(t, t1, tol))]
    bounds = [t0] + params + [t1]
    status = [_inside(curve, box, bounds[k], bounds[k + 1]) for k in range(len(bounds) - 1)]

    cuts, states = [t0], [status[0]]
    for k in range(1, len(status)):
        if status[k] != states[-1]:
            cuts.append(bounds[k])
            states.append(status[k])
    cuts.append(t1)

    out = []
    for k, inside in enumerate(states):
        if not inside:
            continue
        a, b = cuts[k], cuts[k + 1]
        out.append(curve if (a == t0 and b == t1) else curve.sub_curve(a, b))
    return out


def _clip_closed(curve: ContinuousCurve, box: Box, params: List[float], tol: float) -> List[ContinuousCurve]:
    t0, t1 = curve.t0, curve.t1
    if not params:
        return [curve] if _inside(curve, box, t0, t1) else []

    period = t1 - t0
    m = len(params)
    status = []
    for k in range(m):
        a = params[k]
        b = params[k + 1] if k + 1 < m else params[0] + period
        mid = 0.5 * (a + b)
        if mid >= t1:
            mid -= period
        status.append(_inside_point(box, curve.point_at(mid)))

    # crossing k separates interval k-1 from interval k
    keep = [k for k in range(m) if status[k - 1] != status[k]]
    if not keep:
        return [curve] if status[0] else []

    out = []
    for j, k in enumerate(keep):
        if not status[k]:
            continue
        a = params[k]
        b = params[keep[(j + 1) % len(keep)]]
        out.append(curve.sub_curve(a, b))
    return out


def clip_curve(curve: ContinuousCurve, box: Box, *, tol: float = DEFAULT_TOL) -> List[ContinuousCurve]:
    """
    Pieces of `curve` inside `box`, in traversal order.

    Returns
    -------
    List[ContinuousCurve]
        `[curve]` when the curve lies entirely inside, `[]` when it misses the box,
        otherwise open sub-curves whose ends lie on the box outline.

    Raises
    ------
    UnboundedClipError
        If `box` has an infinite bound.
    """
    if not box.is_bounded():
        raise UnboundedClipError("Cannot clip against an unbounded box", {"box": box.as_tuple()})
    params = crossing_params(curve, box, tol)
    if curve.is_closed:
        pieces = _clip_closed(curve, box, params, tol)
    else:
        pieces = _clip_open(curve, box, params, tol)
    logger.debug("[clip_curve] %s: %d crossing(s) -> %d fragment(s)",
                 curve.kind.value, len(params), len(pieces))
    return pieces


def clip_curve_set(curves: Iterable[ContinuousCurve], box: Box, *,
                   tol: float = DEFAULT_TOL) -> List[ContinuousCurve]:
    """Clip every curve of `curves` and flatten the pieces."""
    out: List[ContinuousCurve] = []
    for c in curves:
        out.extend(clip_curve(c, box, tol=tol))
    return out
