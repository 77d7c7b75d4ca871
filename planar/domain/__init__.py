# -*- coding: utf-8 -*-
# Clipxus/planar/domain/__init__.py

"""
Project: Clipxus
Author: Erfan Vaezi
Date: 7/12/2025 (Updated: 10/19/2026)

Domain Subfolder:
-----------------
- boundary: `Boundary`, a set of continuous oriented curves with signed distance,
            inside test, reversal, transforms and clipping.

- domain:   `Domain` (region inside a boundary) and the `half_plane`, `disk`,
            `ellipse_domain`, `polygon` factories.
"""

from .boundary import Boundary
from .domain import Domain, half_plane, disk, ellipse_domain, polygon

__all__ = ["Boundary", "Domain", "half_plane", "disk", "ellipse_domain", "polygon"]
