# -*- coding: utf-8 -*-
# Clipxus/main.py

"""
End-to-end driver:
  1) Build a few domains (disk, half-plane, polygon, parabola region)
  2) Clip each against a box
  3) Log ring counts, pieces and enclosed windings
  4) QA plots of the inputs and the clipped rings
"""

import os
import logging

import numpy as np

from planar import make_box, clip, AffineTransform
from planar.curves import parabola
from planar.domain import Domain, disk, half_plane, polygon
from planar.topology import total_winding
from post.plot_geo import plot_clip


if __name__ == "__main__":
    # ------------------------------------------------------------------
    # 0) Logging
    # ------------------------------------------------------------------
    logging.basicConfig(level=logging.INFO, format="%(levelname)s:%(name)s:%(message)s")
    log = logging.getLogger("Clipxus")

    os.makedirs("plots", exist_ok=True)

    # ------------------------------------------------------------------
    # 1) Inputs
    # ------------------------------------------------------------------
    box = make_box(-1.0, 1.0, -1.0, 1.0)
    cases = {
        "disk": disk((0.0, 0.0), 1.2),
        "half_plane": half_plane((0.0, 0.25), (1.0, 0.0)).transform(AffineTransform.rotation(0.3)),
        "polygon": polygon([(-2.0, -0.5), (0.5, -2.0), (2.0, 0.5), (0.0, 0.3)]),
        "parabola": Domain([parabola((0.0, -0.5), 1.0)]),
    }

    # ------------------------------------------------------------------
    # 2-4) Clip, report, plot
    # ------------------------------------------------------------------
    probe = np.array([0.1, 0.1])
    for name, domain in cases.items():
        clipped = clip(domain, box)
        rings = clipped.boundary
        pieces = [len(r) if hasattr(r, "__len__") else 1 for r in rings]
        samples = rings.sample(400)
        log.info("%s: %d ring(s), pieces=%s, winding at %s = %d",
                 name, len(rings), pieces, probe.tolist(), total_winding(samples, probe))
        plot_clip(domain, box, clipped, show=False, save_path=os.path.join("plots", "{}.png".format(name)))
