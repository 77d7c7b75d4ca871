# -*- coding: utf-8 -*-
# Clipxus/planar/config.py

"""
Project: Clipxus
Author: Erfan Vaezi
Date: 8/29/2025 (Updated: 10/19/2026)

Purpose:
--------
Central policy for tolerances and optional behaviour of the clipping pipeline and the
QA plots. Callers pass a partial dict with the same structure as `DEFAULTS`; it is
deep-merged on top of the defaults without mutating either input.

Schema:
-------
{
  "tolerance": float,               # absolute epsilon for on-curve / on-outline tests
  "stitch": {
      "warn_on_ambiguous": bool,    # emit AmbiguousStitchWarning on near-ties
  },
  "plot": {
      "samples": int,               # samples per bounded curve
      "unbounded_extent": float,    # parameter half-width used to draw unbounded curves
  },
}
"""

from typing import Any, Dict, Optional
import copy
import math

__all__ = ["DEFAULTS", "DEFAULT_TOL", "load_config", "get_tolerance"]

DEFAULT_TOL = 1e-9

DEFAULTS: Dict[str, Any] = {
    "tolerance": DEFAULT_TOL,
    "stitch": {
        "warn_on_ambiguous": True,
    },
    "plot": {
        "samples": 200,
        "unbounded_extent": 10.0,
    },
}


def _deep_merge(base: Dict[str, Any], upd: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Deep-merge two nested dicts (right-biased), preserving types and not mutating inputs.
    """
    if not upd:
        return copy.deepcopy(base)
    out = copy.deepcopy(base)
    for k, v in upd.items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = _deep_merge(out[k], v)  # type: ignore[arg-type]
        else:
            out[k] = copy.deepcopy(v)
    return out


def load_config(overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Return `DEFAULTS` merged with `overrides` and validated.

    Raises
    ------
    ValueError
        If the tolerance is not a finite positive number or plot options are invalid.
    """
    cfg = _deep_merge(DEFAULTS, overrides or {})
    try:
        tol = float(cfg["tolerance"])
    except (TypeError, ValueError):
        raise ValueError("config['tolerance'] must be a number")
    if not math.isfinite(tol) or tol <= 0.0:
        raise ValueError("config['tolerance'] must be finite and > 0 (got {})".format(tol))
    cfg["tolerance"] = tol

    plot = cfg.get("plot", {})
    if int(plot.get("samples", 0)) < 2:
        raise ValueError("config['plot']['samples'] must be >= 2")
    if not float(plot.get("unbounded_extent", 0.0)) > 0.0:
        raise ValueError("config['plot']['unbounded_extent'] must be > 0")
    return cfg


def get_tolerance(config: Optional[Dict[str, Any]] = None) -> float:
    """Tolerance from a (partial) config dict."""
    return load_config(config)["tolerance"]
