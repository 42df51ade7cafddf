# Файл: fadeforge/logging_setup.py
# Централизованная настройка стандартного модуля logging.

import logging
import sys

from . import config


def setup_logging(level=None, log_file=None):
    """
    Настраивает корневой логгер приложения.

    Args:
        level (str | int | None): Уровень логирования. По умолчанию берётся из config.LOG_LEVEL.
        log_file (str | None): Необязательный путь к файлу журнала.

    Returns:
        logging.Logger: Логгер приложения.
    """
    logger = logging.getLogger(config.APP_NAME)

    # Повторный вызов не добавляет обработчики второй раз
    if logger.handlers:
        return logger

    if level is None:
        level = config.LOG_LEVEL
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logger.setLevel(level)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
    logger.addHandler(console_handler)

    log_file = log_file or config.LOG_FILE
    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
        logger.addHandler(file_handler)

    logging.captureWarnings(True)
    return logger


def get_logger(name):
    """Возвращает дочерний логгер в пространстве имён приложения."""
    return logging.getLogger(f"{config.APP_NAME}.{name}")
