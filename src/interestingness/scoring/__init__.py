"""Scoring passes for image interestingness.

Passes:
    1. Detail - Laplacian edge response on luminance (green channel)
    2. Color - saturation above a threshold within brightness bounds (blue channel)
    3. Composition - spatial importance of each pixel position

The scorer weights the per-pixel detail and saturation measures by
importance and sums them into a Score.
"""

from __future__ import annotations

import logging

import numpy as np

from interestingness.raster import Raster

# Re-export types for convenience
from interestingness.scoring.types import DEFAULT_OPTIONS, Dimensions, Options, Score

# Import pass functions for direct use
from interestingness.scoring.color import (
    SATURATION_CHANNEL,
    luminance,
    normalized_luminance,
    saturation,
    saturation_detect,
)
from interestingness.scoring.composition import importance, thirds
from interestingness.scoring.detail import DETAIL_CHANNEL, edge_detect

logger = logging.getLogger(__name__)

__all__ = [
    # Types
    "Options",
    "DEFAULT_OPTIONS",
    "Dimensions",
    "Score",
    # Main scoring
    "score_raster",
    # Pass functions
    "edge_detect",
    "saturation_detect",
    "importance",
    "thirds",
    # Per-pixel math
    "luminance",
    "normalized_luminance",
    "saturation",
]


def score_raster(
    raster: Raster,
    dimensions: Dimensions,
    options: Options = DEFAULT_OPTIONS,
) -> Score:
    """Aggregate a detail/saturation raster into a Score.

    The raster may be a downsampled copy of the original. Pixel (col, row)
    stands for original coordinate (col * ds, row * ds), where ds is
    ``options.score_down_sample``, so importance is always evaluated on
    the original image's scale.

    Args:
        raster: Output raster with detail in channel 1, saturation in channel 2.
        dimensions: Size of the original image.
        options: Scoring options.

    Returns:
        Score with detail, saturation and total. Zero for empty input.
    """
    rows, cols = raster.shape[:2]
    if rows == 0 or cols == 0 or dimensions.width <= 0 or dimensions.height <= 0:
        return Score()

    step = options.score_down_sample
    xs = np.arange(cols, dtype=np.float64) * step
    ys = np.arange(rows, dtype=np.float64) * step
    weight = importance(dimensions, xs[np.newaxis, :], ys[:, np.newaxis], options)

    detail = raster[..., DETAIL_CHANNEL] / 255
    sat = raster[..., SATURATION_CHANNEL] / 255

    score = Score()
    score.detail = float((detail * weight).sum())
    score.saturation = float((sat * (detail + options.saturation_bias) * weight).sum())
    score.total = (
        score.detail * options.detail_weight
        + score.saturation * options.saturation_weight
    )

    logger.debug(
        "Scored %dx%d raster for %dx%d image: %s", cols, rows, *dimensions, score
    )
    return score
