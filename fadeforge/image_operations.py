# Файл: fadeforge/image_operations.py
# Наложение градиента прозрачности, чтение и запись изображений с использованием Pillow.

import io
import os

import numpy as np
from PIL import Image, UnidentifiedImageError

from . import config
from .errors import CorruptDataError, EncodeFailureError, UnsupportedFormatError
from .gradient_utils import axis_positions, check_dimensions, fade_alpha
from .logging_setup import get_logger

logger = get_logger("image_operations")


def composite(source, settings, band_rows=None):
    """
    Применяет затухание к изображению и возвращает новое RGBA-изображение.

    Каналы RGB копируются без изменений, альфа-канал умножается на коэффициент
    градиента. Исходное изображение не изменяется.

    Args:
        source (PIL.Image.Image): Исходное изображение в любом режиме.
        settings (GradientSettings): Настройки градиента.
        band_rows (int | None): Высота полосы обработки, по умолчанию config.BAND_ROWS.

    Returns:
        PIL.Image.Image: Изображение того же размера в режиме RGBA.

    Raises:
        InvalidDimensionsError: Если ширина или высота не положительны.
    """
    width, height = source.size
    check_dimensions(width, height)
    band_rows = max(1, int(band_rows or config.BAND_ROWS))

    rgba = source if source.mode == "RGBA" else source.convert("RGBA")
    pixels = np.array(rgba, dtype=np.uint8)  # всегда копия
    lo, hi = settings.fade_zone()

    for row_start in range(0, height, band_rows):
        row_stop = min(row_start + band_rows, height)
        t = axis_positions(width, height, settings, row_start, row_stop)
        pixels[row_start:row_stop, :, 3] = fade_alpha(pixels[row_start:row_stop, :, 3], t, lo, hi, settings.invert)

    logger.debug("Затухание %s применено к %dx%d (зона %.2f-%.2f, инверсия=%s)",
                 settings.shape.value, width, height, lo, hi, settings.invert)
    return Image.fromarray(pixels)


def decode_image(data):
    """
    Декодирует байты изображения в RGBA.

    Raises:
        UnsupportedFormatError: Pillow не распознал формат.
        CorruptDataError: Формат распознан, но данные не читаются.
    """
    try:
        image = Image.open(io.BytesIO(data))
    except UnidentifiedImageError as e:
        raise UnsupportedFormatError("Не удалось распознать формат изображения") from e
    return _load_rgba(image)


def open_image(file_path):
    """Открывает файл изображения и приводит его к RGBA. FileNotFoundError не перехватывается."""
    try:
        image = Image.open(file_path)
    except UnidentifiedImageError as e:
        raise UnsupportedFormatError(f"Не удалось распознать формат файла: {file_path}") from e
    rgba = _load_rgba(image)
    logger.info("Открыто изображение %s (%dx%d)", file_path, *rgba.size)
    return rgba


def _load_rgba(image):
    try:
        image.load()
        return image.convert("RGBA")
    except (OSError, ValueError, SyntaxError) as e:
        raise CorruptDataError(f"Данные изображения повреждены: {e}") from e
    finally:
        image.close()


def encode_png(image):
    """Кодирует изображение в PNG с полным альфа-каналом и возвращает байты."""
    buffer = io.BytesIO()
    try:
        image.convert("RGBA").save(buffer, format="PNG")
    except (OSError, ValueError) as e:
        raise EncodeFailureError(f"Не удалось закодировать PNG: {e}") from e
    return buffer.getvalue()


def save_png(image, file_path):
    """Сохраняет изображение как PNG. Расширение пути принудительно заменяется на .png."""
    root, ext = os.path.splitext(file_path)
    if ext.lower() != ".png":
        file_path = root + ".png"
    data = encode_png(image)
    try:
        with open(file_path, "wb") as f:
            f.write(data)
    except OSError as e:
        raise EncodeFailureError(f"Не удалось записать файл '{file_path}': {e}") from e
    logger.info("Сохранено: %s (%d байт)", file_path, len(data))
    return file_path


def export_file_name(original_name, suffix=None):
    """
    Имя файла для экспорта: последнее расширение отбрасывается, добавляется суффикс и .png.

    photo.jpg -> photo-fade.png, archive.tar.gz -> archive.tar-fade.png, README -> README-fade.png
    """
    if suffix is None:
        suffix = config.EXPORT_SUFFIX
    name = os.path.basename(original_name or "")
    parts = name.split(".")
    if len(parts) > 1:
        parts.pop()
    base = ".".join(parts) or os.path.splitext(config.DEFAULT_FILE_NAME)[0]
    return f"{base}{suffix}.png"


def checkerboard_preview(image, cell=None):
    """Накладывает изображение на шахматный фон для отображения прозрачности."""
    cell = max(1, int(cell or config.CHECKER_CELL))
    width, height = image.size
    ys, xs = np.indices((height, width))
    checker = ((xs // cell + ys // cell) % 2).astype(bool)

    background = np.empty((height, width, 4), dtype=np.uint8)
    background[~checker] = config.CHECKER_LIGHT
    background[checker] = config.CHECKER_DARK

    preview = Image.fromarray(background)
    preview.alpha_composite(image.convert("RGBA"))
    return preview
