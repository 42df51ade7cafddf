# Файл: fadeforge/gradient_utils.py
# Геометрия градиента и профиль коэффициента прозрачности.
#
# Каждый пиксель получает параметр t в [0, 1] вдоль оси градиента:
#   - линейный: проекция центра пикселя на отрезок через центр изображения
#     длиной в диагональ, повёрнутый на angle (0° - вверх);
#   - радиальный: расстояние до центра, делённое на max(w, h) / 2.
# Затем t переводится в коэффициент по профилю из четырёх опорных точек
# (0, lo, hi, 1).

import math

import numpy as np
from PIL import Image

from .errors import InvalidDimensionsError
from .gradient_settings import GradientShape, normalize_angle


def check_dimensions(width, height):
    if width <= 0 or height <= 0:
        raise InvalidDimensionsError(width, height)


def axis_positions(width, height, settings, row_start=0, row_stop=None):
    """
    Вычисляет параметр t для каждого пикселя в строках [row_start, row_stop).

    Args:
        width (int): Ширина изображения.
        height (int): Высота изображения.
        settings (GradientSettings): Настройки градиента.
        row_start (int): Первая строка полосы.
        row_stop (int | None): Строка после последней; по умолчанию height.

    Returns:
        np.ndarray: Массив float64 формы (rows, width) со значениями в [0, 1].
    """
    check_dimensions(width, height)
    if row_stop is None:
        row_stop = height

    # Центры пикселей
    xs = np.arange(width, dtype=np.float64) + 0.5
    ys = np.arange(row_start, row_stop, dtype=np.float64)[:, np.newaxis] + 0.5
    cx, cy = width / 2.0, height / 2.0

    if settings.shape == GradientShape.RADIAL:
        radius = max(max(width, height) / 2.0, 1.0)
        t = np.hypot(xs - cx, ys - cy) / radius
    else:
        # 0° указывает вверх, поэтому поворачиваем на -90°
        theta = math.radians(normalize_angle(settings.angle) - 90.0)
        dx, dy = math.cos(theta), math.sin(theta)
        diagonal = max(math.hypot(width, height), 1.0)
        t = 0.5 + ((xs - cx) * dx + (ys - cy) * dy) / diagonal

    return np.clip(t, 0.0, 1.0)


def _opaque_fraction(t, lo, hi):
    """Доля сохраняемой непрозрачности без инверсии: 1 до lo, 0 после hi."""
    if hi > lo:
        return np.clip((hi - t) / (hi - lo), 0.0, 1.0)
    # Совпадающие границы: жёсткая ступенька в точке lo
    return (t < lo).astype(np.float64)


def alpha_factor(t, lo, hi, invert=False):
    """
    Коэффициент прозрачности для параметра t.

    Без инверсии: 1 на [0, lo], линейно 1 -> 0 на (lo, hi), 0 на [hi, 1].
    С инверсией профиль зеркальный. Принимает скаляр или массив.
    """
    t_arr = np.clip(np.asarray(t, dtype=np.float64), 0.0, 1.0)
    kept = _opaque_fraction(t_arr, lo, hi)
    factor = 1.0 - kept if invert else kept
    if factor.ndim == 0:
        return float(factor)
    return factor


def fade_alpha(alpha, t, lo, hi, invert=False):
    """
    Умножает 8-битный альфа-канал на коэффициент профиля.

    Округление к ближайшему (половина вверх). Инвертированный результат
    считается как alpha - round(alpha * k), где k - коэффициент без инверсии,
    чтобы для непрозрачного источника оба варианта в сумме давали ровно 255.
    """
    alpha = np.asarray(alpha, dtype=np.float64)
    kept = np.floor(alpha * _opaque_fraction(t, lo, hi) + 0.5)
    kept = np.clip(kept, 0.0, alpha)
    result = alpha - kept if invert else kept
    return np.clip(result, 0, 255).astype(np.uint8)


def create_gradient_mask(width, height, settings):
    """Создаёт маску коэффициента в виде PIL-изображения в режиме 'L' (255 - непрозрачно)."""
    check_dimensions(width, height)
    lo, hi = settings.fade_zone()
    t = axis_positions(width, height, settings)
    opaque = np.full(t.shape, 255.0)
    return Image.fromarray(fade_alpha(opaque, t, lo, hi, settings.invert))
