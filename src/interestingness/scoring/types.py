"""Value types for the scoring pipeline."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Mapping, NamedTuple

from interestingness.errors import InvalidConfigurationError

# Option names as exposed by the library contract -> dataclass field names
OPTION_ALIASES = {
    "detailWeight": "detail_weight",
    "saturationBrightnessMin": "saturation_brightness_min",
    "saturationBrightnessMax": "saturation_brightness_max",
    "saturationThreshold": "saturation_threshold",
    "saturationBias": "saturation_bias",
    "saturationWeight": "saturation_weight",
    "scoreDownSample": "score_down_sample",
    "edgeRadius": "edge_radius",
    "edgeWeight": "edge_weight",
    "ruleOfThirds": "rule_of_thirds",
}


@dataclass(frozen=True)
class Options:
    """Scoring parameters, fixed for the lifetime of a scorer."""

    detail_weight: float = 1.0
    saturation_brightness_min: float = 0.05  # normalized luminance, inclusive
    saturation_brightness_max: float = 0.9  # normalized luminance, inclusive
    saturation_threshold: float = 0.4  # must stay below 1
    saturation_bias: float = 5.0
    saturation_weight: float = 0.5
    score_down_sample: float = 1.0  # stride between scored pixels
    edge_radius: float = 0.4
    edge_weight: float = -20.0  # negative = penalize pixels near the border
    rule_of_thirds: bool = True

    def __post_init__(self) -> None:
        if not self.saturation_threshold < 1:
            raise InvalidConfigurationError(
                f"saturation_threshold must be < 1, got {self.saturation_threshold}"
            )
        if not self.score_down_sample > 0:
            raise InvalidConfigurationError(
                f"score_down_sample must be > 0, got {self.score_down_sample}"
            )
        if self.saturation_brightness_min > self.saturation_brightness_max:
            raise InvalidConfigurationError(
                "saturation_brightness_min must not exceed saturation_brightness_max "
                f"({self.saturation_brightness_min} > {self.saturation_brightness_max})"
            )

    @classmethod
    def from_dict(
        cls, values: Mapping[str, Any], base: Options | None = None
    ) -> Options:
        """Build options from a mapping of camelCase or snake_case names.

        Args:
            values: Option overrides.
            base: Options supplying everything not overridden
                  (default: the dataclass defaults).

        Returns:
            Validated Options.

        Raises:
            InvalidConfigurationError: On unknown or repeated names, or invalid values.
        """
        fields = {f.name for f in dataclasses.fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, value in values.items():
            name = OPTION_ALIASES.get(key, key)
            if name not in fields:
                raise InvalidConfigurationError(f"Unknown option: {key!r}")
            if name in kwargs:
                raise InvalidConfigurationError(f"Option {name!r} given more than once")
            kwargs[name] = value
        if base is None:
            return cls(**kwargs)
        return dataclasses.replace(base, **kwargs)

    def replace(self, **changes: Any) -> Options:
        """Return a copy with some options changed."""
        return dataclasses.replace(self, **changes)


DEFAULT_OPTIONS = Options()


class Dimensions(NamedTuple):
    """Size of the original image, used to normalize pixel coordinates."""

    width: int
    height: int


@dataclass
class Score:
    """Result of one scoring run."""

    detail: float = 0.0  # importance-weighted detail
    saturation: float = 0.0  # importance-weighted saturation
    total: float = 0.0  # weighted combination of the two
