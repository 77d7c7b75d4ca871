# -*- coding: utf-8 -*-
# Clipxus/tests/conftest.py

"""Shared fixtures."""

import numpy as np
import pytest

from planar import make_box


@pytest.fixture
def unit_box():
    """[-1, 1] x [-1, 1]."""
    return make_box(-1.0, 1.0, -1.0, 1.0)


@pytest.fixture
def square_pts():
    """CCW unit square, open (no repeated closing vertex)."""
    return np.array([[0.0, 0.0], [1.0, 0.0], [1.0, 1.0], [0.0, 1.0]])
