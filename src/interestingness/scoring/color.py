"""Color pass: luminance, saturation and the saturation channel.

All per-pixel functions work elementwise on scalars or numpy arrays.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

from interestingness.raster import Raster, to_channel
from interestingness.scoring.types import DEFAULT_OPTIONS, Options

# Channel of the output raster holding the saturation measure
SATURATION_CHANNEL = 2


def luminance(r: ArrayLike, g: ArrayLike, b: ArrayLike) -> NDArray[np.float64]:
    """Weighted luminance of 8-bit channel values.

    The weights are fixed constants of the scoring formula: blue gets
    the largest, red the smallest. They sum to 1.3, so bright pixels
    can exceed 255.
    """
    r = np.asarray(r, dtype=np.float64)
    g = np.asarray(g, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)
    return 0.5126 * b + 0.7152 * g + 0.0722 * r


def normalized_luminance(r: ArrayLike, g: ArrayLike, b: ArrayLike) -> NDArray[np.float64]:
    """Luminance scaled by 1/255."""
    return luminance(r, g, b) / 255


def saturation(r: ArrayLike, g: ArrayLike, b: ArrayLike) -> NDArray[np.float64]:
    """HSL saturation (0-1) of 8-bit channel values.

    Achromatic pixels (r == g == b) have saturation 0. Lightness of
    exactly 0.5 uses the dark-side formula.
    """
    r = np.asarray(r, dtype=np.float64) / 255
    g = np.asarray(g, dtype=np.float64) / 255
    b = np.asarray(b, dtype=np.float64) / 255
    cmax = np.maximum(np.maximum(r, g), b)
    cmin = np.minimum(np.minimum(r, g), b)

    lightness = (cmax + cmin) / 2
    delta = cmax - cmin

    # Achromatic pixels divide by zero on one branch; they are masked below
    with np.errstate(divide="ignore", invalid="ignore"):
        sat = np.where(
            lightness > 0.5,
            delta / (2 - cmax - cmin),
            delta / (cmax + cmin),
        )
    return np.where(cmax == cmin, 0.0, sat)


def saturation_detect(
    source: Raster, output: Raster, options: Options = DEFAULT_OPTIONS
) -> None:
    """Write the saturation measure into the output raster's blue channel.

    Pixels more saturated than the threshold, with normalized luminance
    inside the brightness bounds, get the excess saturation rescaled to
    0-255. Everything else gets 0.

    Args:
        source: Input raster (read only).
        output: Raster of the same size; only channel 2 is written.
        options: Scoring options.
    """
    r, g, b = source[..., 0], source[..., 1], source[..., 2]
    lightness = normalized_luminance(r, g, b)
    sat = saturation(r, g, b)

    threshold = options.saturation_threshold
    mask = (
        (sat > threshold)
        & (lightness >= options.saturation_brightness_min)
        & (lightness <= options.saturation_brightness_max)
    )
    values = np.where(mask, (sat - threshold) * (255 / (1 - threshold)), 0.0)
    output[..., SATURATION_CHANNEL] = to_channel(values)
