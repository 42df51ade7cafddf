# Файл: fadeforge/config.py
# Константы приложения. Часть значений можно переопределить переменными окружения.

import os

APP_NAME = "FadeForge"

# Обработка больших изображений полосами по BAND_ROWS строк
BAND_ROWS = max(1, int(os.environ.get("FADEFORGE_BAND_ROWS", 512)))

# Суффикс имени экспортируемого файла: photo.jpg -> photo-fade.png
EXPORT_SUFFIX = os.environ.get("FADEFORGE_EXPORT_SUFFIX", "-fade")
DEFAULT_FILE_NAME = "image.png"

LOG_LEVEL = os.environ.get("FADEFORGE_LOG_LEVEL", "INFO").upper()
LOG_FILE = os.environ.get("FADEFORGE_LOG_FILE") or None

# Интерфейс
ANGLE_RANGE = (0, 360)
PERCENT_RANGE = (0, 100)
CHECKER_CELL = 16
CHECKER_LIGHT = (60, 64, 72, 255)
CHECKER_DARK = (40, 43, 50, 255)

OPEN_FILE_FILTER = "Файлы изображений (*.png *.jpg *.jpeg *.webp *.bmp *.gif *.tif *.tiff);;Все файлы (*)"
SAVE_FILE_FILTER = "PNG файл (*.png)"
