# Файл: fadeforge/session.py
# Состояние редактора: загруженное изображение, имя файла и текущие настройки градиента.

import os

from PySide6.QtCore import QObject, Signal

from . import config
from . import image_operations
from .errors import NoImageLoadedError
from .gradient_settings import DEFAULT_SETTINGS, GradientSettings
from .logging_setup import get_logger

logger = get_logger("session")


class FadeSession(QObject):
    """
    Хранит состояние одного сеанса редактирования и передаёт его в компоновщик.

    Исходное изображение никогда не изменяется: каждый render() строит новый
    результат по текущим настройкам.
    """
    image_changed = Signal()
    settings_changed = Signal(object)  # Передаёт новые GradientSettings

    def __init__(self, settings=None):
        super().__init__()
        self.source_image = None  # PIL Image (RGBA)
        self.file_name = config.DEFAULT_FILE_NAME
        self._settings = settings or DEFAULT_SETTINGS

    @property
    def settings(self):
        return self._settings

    def has_image(self):
        return self.source_image is not None

    def load_file(self, file_path):
        """Загружает изображение из файла. Ошибки декодирования пробрасываются вызывающему."""
        image = image_operations.open_image(file_path)
        self.set_image(image, os.path.basename(file_path))
        return image

    def load_bytes(self, data, file_name=None):
        image = image_operations.decode_image(data)
        self.set_image(image, file_name or config.DEFAULT_FILE_NAME)
        return image

    def set_image(self, image, file_name=None):
        self.source_image = image.convert("RGBA")
        if file_name:
            self.file_name = file_name
        self.image_changed.emit()

    def clear_image(self):
        self.source_image = None
        self.file_name = config.DEFAULT_FILE_NAME
        self.image_changed.emit()

    def update_settings(self, **changes):
        """Изменяет отдельные поля настроек. Сигнал отправляется только при реальном изменении."""
        new_settings = self._settings.replace(**changes)
        if new_settings != self._settings:
            self._settings = new_settings
            self.settings_changed.emit(new_settings)
        return self._settings

    def set_settings(self, settings):
        if not isinstance(settings, GradientSettings):
            settings = GradientSettings.from_dict(settings)
        if settings != self._settings:
            self._settings = settings
            self.settings_changed.emit(settings)

    def reset_settings(self):
        self.set_settings(DEFAULT_SETTINGS)

    def render(self):
        """Возвращает результат наложения затухания на текущее изображение."""
        if not self.has_image():
            raise NoImageLoadedError("Нет загруженного изображения")
        return image_operations.composite(self.source_image, self._settings)

    def export_png(self):
        """Возвращает байты PNG для экспорта."""
        return image_operations.encode_png(self.render())

    def export_file_name(self):
        return image_operations.export_file_name(self.file_name)

    def save(self, file_path):
        saved_path = image_operations.save_png(self.render(), file_path)
        logger.info("Экспорт завершён: %s", saved_path)
        return saved_path
