"""interestingness: score how interesting an image is, for automatic cropping."""

from __future__ import annotations

from interestingness.analyze import ImageInterestingness
from interestingness.errors import InterestingnessError, InvalidConfigurationError
from interestingness.scoring import (
    DEFAULT_OPTIONS,
    Dimensions,
    Options,
    Score,
    importance,
    score_raster,
    thirds,
)

__version__ = "0.1.0"

__all__ = [
    "ImageInterestingness",
    "Options",
    "DEFAULT_OPTIONS",
    "Dimensions",
    "Score",
    "importance",
    "thirds",
    "score_raster",
    "InterestingnessError",
    "InvalidConfigurationError",
]
