"""
═══════════════════════════════════════════════════════════════════════════════
inn_validator — Настройки (Application Configuration)
═══════════════════════════════════════════════════════════════════════════════

Класс ValidatorSettings содержит настройки:
    • среды выполнения и HTTP-сервера (host, port, уровень логов)
    • CORS
    • опций проверки по умолчанию для HTTP-запросов без ``options``
    • названия поля для UI-сообщений

Ядро валидатора настроек не читает: функции ``validate_*`` зависят только
от своих аргументов. Настройки использует HTTP-слой.
"""

from __future__ import annotations

import json
from functools import lru_cache
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from inn_validator.models.result import ValidationOptions


class ValidatorSettings(BaseSettings):
    """
    Настройки валидатора.

    Все параметры читаются из переменных окружения (префикс
    ``INN_VALIDATOR_``) или .env файла.
    """

    model_config = SettingsConfigDict(
        env_prefix="INN_VALIDATOR_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ── Среда выполнения ──────────────────────────────────────────────────
    app_env: str = Field(
        default="development",
        description="Application environment: development | staging | production",
    )

    # ── API server ────────────────────────────────────────────────────────
    api_host: str = Field(default="0.0.0.0")
    api_port: int = Field(default=8300, ge=1, le=65535)
    log_level: str = Field(default="INFO")
    cors_origins: List[str] = Field(
        default=["http://localhost:3000", "http://localhost:5173"]
    )

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors(cls, v: str | List[str]) -> List[str]:
        """Парсит CORS_ORIGINS из JSON-строки."""
        if isinstance(v, str):
            return json.loads(v)
        return v

    # ── Опции проверки по умолчанию ───────────────────────────────────────
    validate_structure: bool = Field(
        default=True,
        description="Check NNYY structure (region code, FNS index)",
    )
    allow_foreign_orgs: bool = Field(
        default=True,
        description="Accept INNs with the reserved foreign-organization prefix",
    )
    strict_mode: bool = Field(default=False)

    # ── UI ────────────────────────────────────────────────────────────────
    ui_field_name: str = Field(
        default="ИНН",
        description="Field label used in UI messages when a request omits it",
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level

    def default_options(self) -> ValidationOptions:
        """Опции проверки для запросов, в которых они не переданы."""
        return ValidationOptions(
            validate_structure=self.validate_structure,
            allow_foreign_orgs=self.allow_foreign_orgs,
            strict_mode=self.strict_mode,
        )


@lru_cache
def get_settings() -> ValidatorSettings:
    """
    Возвращает единственный экземпляр ValidatorSettings (singleton).

    Декоратор ``@lru_cache`` гарантирует, что объект создаётся
    только при первом вызове.
    """
    return ValidatorSettings()


__all__ = ["ValidatorSettings", "get_settings"]
