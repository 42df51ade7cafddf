# Файл: main.py
# Точка входа в приложение. Инициализирует QApplication и главное окно.

import os
import sys

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import QFile, QTextStream

from fadeforge.logging_setup import setup_logging
from fadeforge.main_window import FadeEditorWindow


def load_stylesheet(app, styles_path, logger):
    style_file = QFile(styles_path)
    if not style_file.open(QFile.OpenModeFlag.ReadOnly | QFile.OpenModeFlag.Text):
        logger.warning("Не удалось открыть файл стилей: %s, ошибка: %s", styles_path, style_file.errorString())
        return False
    stream = QTextStream(style_file)
    app.setStyleSheet(stream.readAll())
    style_file.close()
    logger.info("Стили успешно загружены из: %s", styles_path)
    return True


def main():
    logger = setup_logging()
    app = QApplication(sys.argv)

    # Путь к ресурсам при обычном запуске и при сборке PyInstaller'ом
    if getattr(sys, 'frozen', False):
        application_path = os.path.dirname(sys.executable)
    else:
        application_path = os.path.dirname(os.path.abspath(__file__))

    resources_path = os.path.join(application_path, "resources")
    load_stylesheet(app, os.path.join(resources_path, "styles", "style.qss"), logger)

    window = FadeEditorWindow(resources_path)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
