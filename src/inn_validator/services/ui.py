"""
inn_validator/services/ui.py — Человекочитаемые сообщения для интерфейса.

Обёртка над ``validate_inn``: переводит код ошибки в сообщение для
пользователя. Сообщения для пустого значения и нецифровых символов
содержат название поля.
"""

from __future__ import annotations

from typing import Any

from inn_validator.messages import UI_ERROR_MESSAGES, UI_GENERIC_MESSAGE
from inn_validator.models.result import UIValidationResult
from inn_validator.services.inn import OptionsLike, validate_inn

DEFAULT_FIELD_NAME = "ИНН"


def validate_inn_for_ui(
    inn: Any,
    field_name: str = DEFAULT_FIELD_NAME,
    options: OptionsLike = None,
) -> UIValidationResult:
    """Проверяет ИНН и возвращает сообщение, готовое к показу."""
    validation = validate_inn(inn, options)

    if validation.is_valid:
        return UIValidationResult(is_valid=True, message="", details=validation.details)

    template = UI_ERROR_MESSAGES.get(validation.error_code, UI_GENERIC_MESSAGE)
    return UIValidationResult(
        is_valid=False,
        message=template.format(field_name=field_name),
        details=validation.details,
    )


__all__ = ["DEFAULT_FIELD_NAME", "validate_inn_for_ui"]
