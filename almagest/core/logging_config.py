"""
Logging Configuration

Единая точка получения логгеров almagest. Модули используют
`logger = get_logger(__name__)`.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def get_logger(name: str, level: int = logging.INFO) -> logging.Logger:
    """
    Логгер almagest с обработчиком stdout.

    Обработчик добавляется один раз на логгер; повторные вызовы только
    обновляют уровень.

    Args:
        name: Имя логгера (обычно __name__)
        level: Уровень логирования

    Returns:
        Настроенный logging.Logger
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
        logger.addHandler(handler)

    logger.setLevel(level)
    return logger
