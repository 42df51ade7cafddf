# Файл: fadeforge/gradient_settings.py
# Параметры градиента прозрачности и их нормализация.

import math
from dataclasses import dataclass, asdict, replace as dataclass_replace
from enum import Enum


class GradientShape(str, Enum):
    """Форма градиента."""
    LINEAR = "linear"
    RADIAL = "radial"


def _finite_or(value, fallback):
    value = float(value)
    return value if math.isfinite(value) else fallback


def clamp_percent(value):
    """Приводит процент к диапазону [0, 100]. NaN считается нулём."""
    value = float(value)
    if math.isnan(value):
        return 0.0
    return min(max(value, 0.0), 100.0)


def normalize_angle(angle):
    """Приводит угол к диапазону [0, 360). Бесконечности и NaN дают 0."""
    return _finite_or(angle, 0.0) % 360.0


def normalize_fade_zone(fade_start, fade_end):
    """
    Возвращает зону перехода как упорядоченную пару долей (lo, hi) в [0, 1].

    Границы ограничиваются независимо друг от друга, порядок аргументов не важен.
    """
    start = clamp_percent(fade_start) / 100.0
    end = clamp_percent(fade_end) / 100.0
    return min(start, end), max(start, end)


@dataclass(frozen=True)
class GradientSettings:
    """
    Настройки затухания.

    Значения вне допустимых диапазонов не отклоняются: они нормализуются
    в момент использования (см. normalize_fade_zone и normalize_angle).
    """
    angle: float = 180.0
    fade_start: float = 20.0
    fade_end: float = 80.0
    invert: bool = False
    shape: GradientShape = GradientShape.LINEAR

    def __post_init__(self):
        # Строки 'linear'/'radial' принимаются наравне с GradientShape
        if not isinstance(self.shape, GradientShape):
            object.__setattr__(self, "shape", GradientShape(str(self.shape).lower()))
        object.__setattr__(self, "invert", bool(self.invert))

    def fade_zone(self):
        return normalize_fade_zone(self.fade_start, self.fade_end)

    def replace(self, **changes):
        """Возвращает копию настроек с изменёнными полями."""
        return dataclass_replace(self, **changes)

    def to_dict(self):
        data = asdict(self)
        data["shape"] = self.shape.value
        return data

    @classmethod
    def from_dict(cls, data):
        known = {key: data[key] for key in ("angle", "fade_start", "fade_end", "invert", "shape") if key in data}
        return cls(**known)


DEFAULT_SETTINGS = GradientSettings()
