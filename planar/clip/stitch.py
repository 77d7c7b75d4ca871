# -*- coding: utf-8 -*-
# Clipxus/planar/clip/stitch.py

"""
Project: Clipxus
Author: Erfan Vaezi
Date: 10/4/2025 (Updated: 10/19/2026)

Purpose
-------
Rebuild closed rings from a fragment pool by splicing open fragments with portions of
the box outline.

Main Tasks
----------
    1. `find_next_index`: from an end position, pick the fragment whose start comes
       next when walking the outline forward (CCW, wrapping 4 -> 0).
    2. `boundary_portion`: polyline along the outline from one point to another,
       inserting the corners passed on the way.
    3. `reconstruct`: walk fragments into rings until every open fragment is consumed.

Notes
-----
- Walking forward only preserves the cyclic order of crossings along the outline,
  which keeps rings simple for simple inputs.
- A start within `tol` of the current end counts as a full turn away.
- Near-ties resolve to the first index in pool order and emit AmbiguousStitchWarning.
"""

import logging
import math
import warnings
from typing import List, Optional

import numpy as np

from ..config import DEFAULT_TOL
from ..core.box import Box, BoxBoundary
from ..core.numeric import reach
from ..curves.polycurve import PolyCurve
from ..curves.polyline import Polyline
from ..domain.boundary import Boundary
from ..errors import AmbiguousStitchWarning, DegenerateGeometryError
from .pool import FragmentPool

logger = logging.getLogger(__name__)

__all__ = ["find_next_index", "boundary_portion", "reconstruct"]


def find_next_index(starts: np.ndarray, end_pos: float, *, tol: float = DEFAULT_TOL,
                    warn: bool = True) -> int:
    """
    Index of the fragment whose start position is the closest one strictly ahead of
    `end_pos` along the outline.

    Parameters
    ----------
    starts : np.ndarray
        Start positions of all fragments (NaN entries are never chosen).
    end_pos : float
        Current end position in [0, 4).
    tol : float
        Positions closer than `tol` count as equal.
    warn : bool
        Emit `AmbiguousStitchWarning` when another candidate lies within `tol` of the
        chosen one without being equal to it.

    Raises
    ------
    DegenerateGeometryError
        If `end_pos` is NaN or there is no candidate at all.
    """
    if math.isnan(end_pos):
        raise DegenerateGeometryError("Undefined outline position for a fragment end")
    d = np.mod(np.asarray(starts, dtype=np.float64) - end_pos, 4.0)
    d[d < tol] += 4.0
    d[np.isnan(d)] = np.inf
    if d.size == 0 or not np.isfinite(d).any():
        raise DegenerateGeometryError("No fragment start on the outline", {"end_pos": end_pos})
    idx = int(np.argmin(d))
    if warn:
        gap = d - d[idx]
        near = np.nonzero((gap > 0.0) & (gap <= tol))[0]
        if near.size:
            warnings.warn(
                "Ambiguous stitch at outline position {:.12g}: fragments {} and {} start "
                "within tolerance; using {}.".format(end_pos, idx, int(near[0]), idx),
                AmbiguousStitchWarning,
                stacklevel=2,
            )
    return idx


def boundary_portion(outline: BoxBoundary, p0, p1, t0: float, t1: float, *,
                     tol: float = DEFAULT_TOL) -> Optional[Polyline]:
    """
    Polyline walking the outline forward from `p0` (position `t0`) to `p1` (position `t1`).

    Returns None when the two points coincide within `tol`. When both positions lie
    on the same edge with t0 < t1 the portion is a single segment; otherwise the corners
    at the start of edges floor(t0)+1 ... floor(t1) (mod 4) are inserted.
    """
    p0 = np.asarray(p0, dtype=np.float64)
    p1 = np.asarray(p1, dtype=np.float64)
    eps = reach(tol, p0, p1)
    if np.linalg.norm(p1 - p0) <= eps:
        return None
    i0, i1 = outline.edge_index(t0), outline.edge_index(t1)
    pts = [p0]
    if not (i0 == i1 and t0 < t1):
        k = (i0 + 1) % 4
        while True:
            pts.append(outline.corner(k))
            if k == i1:
                break
            k = (k + 1) % 4
    pts.append(p1)
    # drop corners that coincide with an end point
    clean = [pts[0]]
    for q in pts[1:]:
        if np.linalg.norm(q - clean[-1]) > eps:
            clean.append(q)
    if np.linalg.norm(clean[-1] - p1) > eps:
        clean.append(p1)
    else:
        clean[-1] = p1
    return Polyline(np.array(clean))


def reconstruct(pool: FragmentPool, box: Box, *, tol: float = DEFAULT_TOL,
                warn_on_ambiguous: bool = True) -> Boundary:
    """
    Assemble the fragments of `pool` into closed rings.

    Closed fragments are emitted as they are. Open fragments are chained: each ring
    starts from the lowest unconsumed index, jumps to the next start along the outline,
    bridges the gap with a `boundary_portion`, and stops when it comes back to its
    first fragment.

    Raises
    ------
    DegenerateGeometryError
        If the walk selects an already consumed fragment other than the ring start.
    """
    outline = box.boundary(tol)
    n = len(pool)
    rings: List = [pool[i].curve for i in pool.closed_indices()]
    consumed = np.zeros(n, dtype=bool)
    consumed[pool.closed_indices()] = True

    for first in pool.open_indices():
        if consumed[first]:
            continue
        consumed[first] = True
        pieces = [pool[first].curve]
        cur = first
        while True:
            nxt = find_next_index(pool.starts, pool.ends[cur], tol=tol, warn=warn_on_ambiguous)
            portion = boundary_portion(outline,
                                       pool[cur].curve.last_point(), pool[nxt].curve.first_point(),
                                       pool.ends[cur], pool.starts[nxt], tol=tol)
            if portion is not None:
                pieces.append(portion)
            if nxt == first:
                break
            if consumed[nxt]:
                raise DegenerateGeometryError(
                    "Stitch walk revisited a consumed fragment",
                    {"ring_start": first, "index": nxt},
                )
            pieces.append(pool[nxt].curve)
            consumed[nxt] = True
            cur = nxt
        rings.append(PolyCurve(pieces, closed=True, tol=max(tol, 1e-6)))

    logger.debug("[reconstruct] %d ring(s) from %d fragment(s)", len(rings), n)
    return Boundary(rings)
