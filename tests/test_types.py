"""Tests for interestingness.scoring.types."""

import dataclasses

import pytest

from interestingness import DEFAULT_OPTIONS, Dimensions, Options, Score
from interestingness.errors import InterestingnessError, InvalidConfigurationError


class TestOptions:
    def test_defaults(self):
        o = Options()
        assert o.detail_weight == 1
        assert o.saturation_brightness_min == 0.05
        assert o.saturation_brightness_max == 0.9
        assert o.saturation_threshold == 0.4
        assert o.saturation_bias == 5
        assert o.saturation_weight == 0.5
        assert o.score_down_sample == 1
        assert isinstance(o.score_down_sample, float)
        assert o.edge_radius == 0.4
        assert o.edge_weight == -20.0
        assert o.rule_of_thirds is True

    def test_default_instance(self):
        assert DEFAULT_OPTIONS == Options()

    def test_frozen(self):
        o = Options()
        with pytest.raises(dataclasses.FrozenInstanceError):
            o.edge_weight = 0  # type: ignore[misc]

    def test_threshold_of_one_rejected(self):
        with pytest.raises(InvalidConfigurationError, match="saturation_threshold"):
            Options(saturation_threshold=1.0)

    def test_threshold_above_one_rejected(self):
        with pytest.raises(InvalidConfigurationError):
            Options(saturation_threshold=1.5)

    def test_threshold_nan_rejected(self):
        with pytest.raises(InvalidConfigurationError):
            Options(saturation_threshold=float("nan"))

    def test_down_sample_must_be_positive(self):
        with pytest.raises(InvalidConfigurationError, match="score_down_sample"):
            Options(score_down_sample=0)

    def test_inverted_brightness_bounds_rejected(self):
        with pytest.raises(InvalidConfigurationError):
            Options(saturation_brightness_min=0.8, saturation_brightness_max=0.2)

    def test_error_hierarchy(self):
        with pytest.raises(ValueError):
            Options(saturation_threshold=2)
        with pytest.raises(InterestingnessError):
            Options(saturation_threshold=2)

    def test_replace_validates(self):
        o = Options().replace(edge_radius=0.2)
        assert o.edge_radius == 0.2
        with pytest.raises(InvalidConfigurationError):
            o.replace(saturation_threshold=1)


class TestOptionsFromDict:
    def test_camel_case_names(self):
        o = Options.from_dict({"scoreDownSample": 4, "ruleOfThirds": False})
        assert o.score_down_sample == 4
        assert o.rule_of_thirds is False

    def test_snake_case_names(self):
        o = Options.from_dict({"edge_weight": -5.0})
        assert o.edge_weight == -5.0
        assert o.edge_radius == 0.4

    def test_unknown_name(self):
        with pytest.raises(InvalidConfigurationError, match="Unknown option"):
            Options.from_dict({"sharpness": 1})

    def test_same_option_under_both_names(self):
        with pytest.raises(InvalidConfigurationError, match="more than once"):
            Options.from_dict({"scoreDownSample": 2, "score_down_sample": 3})

    def test_empty_gives_defaults(self):
        assert Options.from_dict({}) == Options()

    def test_base_is_kept(self):
        base = Options(detail_weight=2.0)
        o = Options.from_dict({"saturationWeight": 0}, base=base)
        assert o.detail_weight == 2.0
        assert o.saturation_weight == 0

    def test_invalid_value(self):
        with pytest.raises(InvalidConfigurationError):
            Options.from_dict({"saturationThreshold": 1})


class TestScore:
    def test_defaults(self):
        s = Score()
        assert s.detail == 0.0
        assert s.saturation == 0.0
        assert s.total == 0.0

    def test_equality_by_value(self):
        assert Score(1.0, 2.0, 3.0) == Score(detail=1.0, saturation=2.0, total=3.0)


class TestDimensions:
    def test_fields(self):
        d = Dimensions(640, 480)
        assert d.width == 640
        assert d.height == 480
        assert tuple(d) == (640, 480)
