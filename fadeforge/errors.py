# Файл: fadeforge/errors.py
# Исключения предметной области FadeForge.


class FadeForgeError(Exception):
    """Базовое исключение для всех ошибок FadeForge."""
    pass


class InvalidDimensionsError(FadeForgeError):
    """Изображение нулевой или отрицательной площади."""

    def __init__(self, width, height):
        super().__init__(f"Недопустимый размер изображения: {width}x{height}")
        self.width = width
        self.height = height


class ImageDecodeError(FadeForgeError):
    """Ошибка при чтении исходного изображения."""
    pass


class UnsupportedFormatError(ImageDecodeError):
    """Формат данных не распознан Pillow."""
    pass


class CorruptDataError(ImageDecodeError):
    """Формат распознан, но данные повреждены или обрезаны."""
    pass


class EncodeFailureError(FadeForgeError):
    """Не удалось закодировать или записать PNG."""
    pass


class NoImageLoadedError(FadeForgeError):
    """Операция требует загруженного изображения."""
    pass
