# -*- coding: utf-8 -*-
# Clipxus/post/__init__.py

"""
Project: Clipxus
Author: Erfan Vaezi
Date: 7/14/2025 (Updated: 10/19/2026)

Modules:
--------
- plot_geo: matplotlib QA plots for curves, boundaries and clip results.
"""

from .plot_geo import plot_curve, plot_boundary, plot_clip

__all__ = ["plot_curve", "plot_boundary", "plot_clip"]
