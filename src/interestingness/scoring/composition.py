"""Composition pass: spatial importance of a pixel position.

Importance favours the center, penalizes a band along the border and
optionally boosts the rule-of-thirds lines. The constants are tuned
empirically and scores are only comparable under this exact formula.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

from interestingness.scoring.types import DEFAULT_OPTIONS, Dimensions, Options


def thirds(v: ArrayLike) -> NDArray[np.float64]:
    """Rule-of-thirds weight (0-1) for a distance from the center.

    Args:
        v: Distance from the center, 0 at the center and 1 at the edge.

    Returns:
        Narrow bump peaking at 1.0 on v = 1/3, periodic with period 2.
    """
    v = np.asarray(v, dtype=np.float64)
    t = (np.fmod(v - (1 / 3) + 1.0, 2.0) * 0.5 - 0.5) * 16
    return np.maximum(1.0 - t * t, 0.0)


def importance(
    dimensions: Dimensions,
    x: ArrayLike,
    y: ArrayLike,
    options: Options = DEFAULT_OPTIONS,
) -> NDArray[np.float64]:
    """Spatial weight of pixel (x, y).

    Args:
        dimensions: Size of the original image. Coordinates are normalized
            by this even when scoring a downsampled raster.
        x: Column in original-image coordinates (scalar or array).
        y: Row in original-image coordinates (scalar or array).
        options: Scoring options (edge radius/weight, rule of thirds).

    Returns:
        Weight, roughly -1 to 2 inside the safe area and strongly
        negative near the border with the default edge weight.
    """
    nx = np.asarray(x, dtype=np.float64) / dimensions.width
    ny = np.asarray(y, dtype=np.float64) / dimensions.height

    px = np.abs(0.5 - nx) * 2
    py = np.abs(0.5 - ny) * 2

    # distance into the border band
    dx = np.maximum(px - 1.0 + options.edge_radius, 0)
    dy = np.maximum(py - 1.0 + options.edge_radius, 0)
    d = (dx * dx + dy * dy) * options.edge_weight

    s = 1.41 - np.sqrt(px * px + py * py)

    if options.rule_of_thirds:
        s = s + (np.maximum(0, s + d + 0.5) * 1.2) * (thirds(px) + thirds(py))

    return s + d
