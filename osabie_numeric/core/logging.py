"""
Logging — логирование числового ядра

Библиотека пишет только DEBUG-сообщения (рост Prime Cache, пропуск нечисловых
элементов). Обработчики ставит приложение-хост через setup_logging.
"""

import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from osabie_numeric.config import Settings, get_settings

PACKAGE_LOGGER_NAME = "osabie_numeric"


class StructuredFormatter(logging.Formatter):
    """JSON structured log formatter"""

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data)


class TextFormatter(logging.Formatter):
    """Human-readable text log formatter"""

    def __init__(self) -> None:
        super().__init__(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )


def setup_logging(settings: Optional[Settings] = None) -> logging.Logger:
    """
    Настройка логгера пакета.

    Повторный вызов заменяет ранее установленный обработчик.

    Args:
        settings: Настройки (default: get_settings())

    Returns:
        Корневой логгер пакета
    """
    settings = settings or get_settings()

    formatter: logging.Formatter
    if settings.log_format == "json":
        formatter = StructuredFormatter()
    else:
        formatter = TextFormatter()

    handler = logging.StreamHandler()
    handler.setFormatter(formatter)

    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.handlers.clear()
    package_logger.addHandler(handler)
    package_logger.setLevel(getattr(logging, settings.log_level, logging.WARNING))
    package_logger.propagate = False

    return package_logger


def get_logger(name: str) -> logging.Logger:
    """Логгер модуля внутри пакета."""
    return logging.getLogger(name)
