# -*- coding: utf-8 -*-
# Clipxus/planar/errors.py

"""
Project: Clipxus
Author: Erfan Vaezi
Date: 10/4/2025 (Updated: 10/19/2026)

Purpose
-------
Provide typed exceptions for the clipping layer with compact, context-aware messages
so that box checks, fragment bookkeeping and boundary stitching report failures in a
uniform way.

Main Tasks
----------
    1. Define GeometryError(message, context) with a compact context suffix in __str__.
    2. Provide typed subclasses: UnboundedClipError, DegenerateGeometryError.
    3. Provide the advisory AmbiguousStitchWarning (issued via `warnings.warn`).

Notes
-----
- Context is optional; long values are truncated for readability.
- Only box-unboundedness is a hard error callers are expected to handle; degenerate
  geometry errors signal inputs that violate the boundary contract.
"""

__all__ = [
    "GeometryError",
    "UnboundedClipError",
    "DegenerateGeometryError",
    "AmbiguousStitchWarning",
]


def _format_context(ctx):
    """Return a compact ' | key1=val1, key2=val2' string or '' if no context."""
    if not ctx:
        return ""
    try:
        parts = []
        for k in sorted(ctx.keys()):
            sv = repr(ctx[k])
            if len(sv) > 120:
                sv = sv[:117] + "..."
            parts.append("{}={}".format(k, sv))
        return " | " + ", ".join(parts)
    except Exception:
        # Context should never break error rendering
        return ""


class GeometryError(Exception):
    """
    Base class for all geometry/clipping errors.

    Parameters
    ----------
    message : str
        Human-readable error.
    context : dict, optional
        Extra fields to append in the string form (e.g., {"box": (0, 1, 0, inf)}).
    """
    def __init__(self, message, context=None):
        self.context = dict(context) if context else None
        super().__init__(message)

    def __str__(self):
        base = super().__str__()
        return base + _format_context(self.context)


class UnboundedClipError(GeometryError):
    """
    A finite shape was required but an unbounded one was given:
      - clipping against a box with an infinite bound
      - asking for the length/extent of an unbounded curve
    """


class DegenerateGeometryError(GeometryError):
    """
    Undefined lookups while stitching clipped fragments:
      - an open fragment endpoint that does not lie on the box outline (NaN position)
      - a stitch walk that revisits an already consumed fragment
    """


class AmbiguousStitchWarning(UserWarning):
    """
    Two candidate fragments start closer than the tolerance on the box outline.
    The first one in pool order is used; the result may be topologically wrong.
    """
