"""
Configuration — настройки числового ядра

Настройки иммутабельны и читаются из окружения один раз (get_settings).

Переменные окружения:
- OSABIE_NUMERIC_LOG_LEVEL: уровень логирования (default: WARNING)
- OSABIE_NUMERIC_LOG_FORMAT: "text" или "json" (default: text)
- OSABIE_NUMERIC_PRIME_CACHE_LOCK: блокировка при расширении Prime Cache (default: true)
"""

from functools import lru_cache
from typing import Final

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_PREFIX: Final[str] = "OSABIE_NUMERIC_"

LOG_FORMATS: Final[tuple[str, ...]] = ("text", "json")


class Settings(BaseSettings):
    """Настройки пакета.

    prime_cache_lock влияет только на производительность: расширение
    Prime Cache корректно и без блокировки (идемпотентная сходимость).
    """

    # Logging
    log_level: str = "WARNING"
    log_format: str = "text"

    # Prime Cache
    prime_cache_lock: bool = True

    model_config = SettingsConfigDict(env_prefix=ENV_PREFIX, frozen=True)

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        return value.upper()

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, value: str) -> str:
        value = value.lower()
        if value not in LOG_FORMATS:
            raise ValueError(f"log_format must be one of {LOG_FORMATS}, got {value!r}")
        return value


@lru_cache()
def get_settings() -> Settings:
    """Кэшированные настройки процесса."""
    return Settings()
