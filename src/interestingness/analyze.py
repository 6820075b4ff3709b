"""Analyze module: run the full interestingness pipeline over an image."""

from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Any

from PIL import Image

from interestingness.raster import (
    Raster,
    check_raster,
    load_image,
    raster_from_image,
    resample_raster,
)
from interestingness.scoring import (
    DEFAULT_OPTIONS,
    Dimensions,
    Options,
    Score,
    edge_detect,
    saturation_detect,
    score_raster,
)

logger = logging.getLogger(__name__)


class ImageInterestingness:
    """Scores how interesting an image is, for automatic cropping.

    More detail, more saturated color and better composition give a
    higher total. One instance can score any number of images; it holds
    no state besides its (immutable) options.

    Attributes:
        options: Scoring options used for every call.
    """

    def __init__(self, options: Options | None = None, **overrides: Any) -> None:
        """Create a scorer.

        Args:
            options: Base options (default: DEFAULT_OPTIONS).
            **overrides: Individual options by camelCase or snake_case name,
                e.g. ``scoreDownSample=2`` or ``rule_of_thirds=False``.

        Raises:
            InvalidConfigurationError: On unknown names or invalid values.
        """
        self.options = Options.from_dict(overrides, base=options or DEFAULT_OPTIONS)

    def analyze(self, image: Image.Image) -> Score:
        """Score a decoded image.

        Args:
            image: PIL Image in any mode.

        Returns:
            Score for the whole image. Zero if the image has no pixels.
        """
        width, height = image.size
        if width <= 0 or height <= 0:
            logger.debug("Degenerate %dx%d image, returning zero score", width, height)
            return Score()
        return self.analyze_array(raster_from_image(image))

    def analyze_array(self, source: Raster) -> Score:
        """Score an RGBA raster of shape (height, width, 4).

        The input raster is not modified.

        Raises:
            ValueError: If source is not a (height, width, 4) uint8 array.
        """
        check_raster(source)
        height, width = source.shape[:2]
        if width <= 0 or height <= 0:
            logger.debug("Degenerate %dx%d raster, returning zero score", width, height)
            return Score()

        output = source.copy()
        edge_detect(source, output)
        saturation_detect(source, output, self.options)

        step = self.options.score_down_sample
        score_width = math.ceil(width / step)
        score_height = math.ceil(height / step)
        if (score_width, score_height) != (width, height):
            logger.debug(
                "Downsampling %dx%d to %dx%d for scoring",
                width,
                height,
                score_width,
                score_height,
            )
            # Pillow resamples RGBA premultiplied; alpha must not weight the channels
            output[..., 3] = 255
            output = resample_raster(output, score_width, score_height)

        return score_raster(output, Dimensions(width, height), self.options)

    def analyze_file(self, path: Path | str) -> Score:
        """Decode an image file and score it.

        Raises:
            FileNotFoundError: If path does not exist.
            PIL.UnidentifiedImageError: If the file is not a readable image.
        """
        image = load_image(path)
        logger.debug("Loaded %s (%dx%d)", path, *image.size)
        return self.analyze(image)

    def __repr__(self) -> str:
        """Return string representation."""
        return f"ImageInterestingness(options={self.options!r})"
