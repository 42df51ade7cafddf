"""
FadeForge - конфигурация pytest и общие фикстуры.
"""

import sys
from pathlib import Path

import numpy as np
import pytest
from PIL import Image

# Добавляет корень проекта в путь
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


def make_noise_image(width, height, alpha=255, seed=0):
    """RGBA-изображение со случайными цветами и заданной альфой."""
    rng = np.random.default_rng(seed)
    pixels = rng.integers(0, 256, size=(height, width, 4), dtype=np.uint8)
    pixels[..., 3] = alpha
    return Image.fromarray(pixels)


@pytest.fixture
def opaque_image():
    """Непрозрачное 40×40 RGBA со случайными цветами."""
    return make_noise_image(40, 40)


@pytest.fixture
def wide_image():
    """Непрозрачное 64×24 RGBA."""
    return make_noise_image(64, 24, seed=1)


@pytest.fixture
def translucent_image():
    """Изображение со случайной альфой."""
    rng = np.random.default_rng(7)
    pixels = rng.integers(0, 256, size=(30, 50, 4), dtype=np.uint8)
    return Image.fromarray(pixels)


@pytest.fixture
def png_bytes():
    """PNG достаточного размера, чтобы его можно было обрезать посередине данных."""
    import io
    buffer = io.BytesIO()
    make_noise_image(64, 64, seed=3).save(buffer, format="PNG")
    return buffer.getvalue()
