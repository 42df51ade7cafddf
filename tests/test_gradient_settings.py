"""
Тесты параметров градиента и их нормализации.
"""

import math

import pytest

from fadeforge.gradient_settings import (
    DEFAULT_SETTINGS, GradientSettings, GradientShape,
    clamp_percent, normalize_angle, normalize_fade_zone
)


class TestNormalization:
    """Нормализация процентов, углов и зоны перехода."""

    def test_fade_zone_is_ordered(self):
        assert normalize_fade_zone(80, 20) == (0.2, 0.8)
        assert normalize_fade_zone(20, 80) == (0.2, 0.8)

    def test_fade_zone_clamps_each_bound(self):
        assert normalize_fade_zone(150, -20) == (0.0, 1.0)
        assert normalize_fade_zone(-5, -10) == (0.0, 0.0)

    @pytest.mark.parametrize("value,expected", [
        (-1, 0.0), (0, 0.0), (42.5, 42.5), (100, 100.0), (1e9, 100.0),
        (float("nan"), 0.0), (float("inf"), 100.0), (float("-inf"), 0.0),
    ])
    def test_clamp_percent(self, value, expected):
        assert clamp_percent(value) == expected

    @pytest.mark.parametrize("angle,expected", [
        (0, 0.0), (180, 180.0), (360, 0.0), (370, 10.0), (-90, 270.0),
        (float("nan"), 0.0), (float("inf"), 0.0),
    ])
    def test_normalize_angle(self, angle, expected):
        assert math.isclose(normalize_angle(angle), expected)


class TestGradientSettings:

    def test_defaults_match_editor_defaults(self):
        assert DEFAULT_SETTINGS.angle == 180
        assert DEFAULT_SETTINGS.fade_start == 20
        assert DEFAULT_SETTINGS.fade_end == 80
        assert DEFAULT_SETTINGS.invert is False
        assert DEFAULT_SETTINGS.shape is GradientShape.LINEAR

    def test_shape_accepts_strings(self):
        assert GradientSettings(shape="radial").shape is GradientShape.RADIAL
        assert GradientSettings(shape="LINEAR").shape is GradientShape.LINEAR

    def test_unknown_shape_rejected(self):
        with pytest.raises(ValueError):
            GradientSettings(shape="conic")

    def test_settings_are_immutable(self):
        with pytest.raises(AttributeError):
            DEFAULT_SETTINGS.angle = 90

    def test_replace_returns_copy(self):
        changed = DEFAULT_SETTINGS.replace(angle=45, invert=True)
        assert changed.angle == 45 and changed.invert is True
        assert DEFAULT_SETTINGS.angle == 180

    def test_dict_conversion(self):
        settings = GradientSettings(angle=30, fade_start=5, fade_end=95, invert=True, shape=GradientShape.RADIAL)
        data = settings.to_dict()
        assert data["shape"] == "radial"
        assert GradientSettings.from_dict(data) == settings

    def test_from_dict_ignores_unknown_keys(self):
        settings = GradientSettings.from_dict({"angle": 90, "colour": "red"})
        assert settings == DEFAULT_SETTINGS.replace(angle=90)

    def test_fade_zone(self):
        assert GradientSettings(fade_start=90, fade_end=10).fade_zone() == (0.1, 0.9)
