"""
inn_validator/services/inn.py — Валидация ИНН (оркестратор).

Проверки выполняются в фиксированном порядке, первая неудачная завершает
проверку:
    1. Пустое значение
    2. Только цифры
    3. Длина 10 или 12
    4. Определение типа (организация / физ. лицо)
    5. Структура NNYY (если включена)
    6. Контрольное число

Поддерживает ИНН, выданные как до 2026 года, так и по новым правилам
(приказ ФНС № ЕД-7-14/559@). Функции чистые: никакого общего состояния,
никакого ввода-вывода.

References:
    - Приказ ФНС № ЕД-7-14/559@ от 26.06.2025
    - Приказ ФНС № ММВ-7-6/435@ от 29.06.2012 (утратил силу)
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import Any

from inn_validator.exceptions import InnValidationError, KppValidationError
from inn_validator.messages import VALIDATION_ERROR_MESSAGES
from inn_validator.models.enums import InnType, ValidationErrorCode
from inn_validator.models.result import (
    ValidationDetails,
    ValidationOptions,
    ValidationResult,
)
from inn_validator.services._coerce import is_falsy, to_trimmed_str
from inn_validator.services.checksum import compute_checksum_valid
from inn_validator.services.kpp import validate_kpp
from inn_validator.services.structure import check_structure

logger = logging.getLogger(__name__)

DIGITS_PATTERN = re.compile(r"[0-9]+")

ORGANIZATION_LENGTH = 10
INDIVIDUAL_LENGTH = 12

OptionsLike = ValidationOptions | Mapping[str, Any] | None


def resolve_options(options: OptionsLike) -> ValidationOptions:
    """Приводит опции к ValidationOptions (ключи snake_case или camelCase)."""
    if options is None:
        return ValidationOptions()
    if isinstance(options, ValidationOptions):
        return options
    return ValidationOptions.model_validate(dict(options))


def _fail(code: ValidationErrorCode, details: ValidationDetails) -> ValidationResult:
    logger.debug("INN rejected: %s (length=%s)", code.name, details.length)
    return ValidationResult(
        is_valid=False,
        error_code=code,
        error_message=VALIDATION_ERROR_MESSAGES[code],
        details=details,
    )


# ═══════════════════════════════════════════════════════════════════════════
# ОСНОВНАЯ ПРОВЕРКА
# ═══════════════════════════════════════════════════════════════════════════


def validate_inn(inn: Any, options: OptionsLike = None) -> ValidationResult:
    """
    Проверяет ИНН и возвращает результат с деталями.

    Args:
        inn: ИНН строкой или числом. Любое другое значение приводится к
            строке и, как правило, отклоняется проверкой на цифры.
        options: ValidationOptions или словарь опций
            (``validate_structure``, ``allow_foreign_orgs``, ``strict_mode``).

    Returns:
        ValidationResult. Исключений для входного значения не выбрасывает.
    """
    opts = resolve_options(options)
    details = ValidationDetails()

    # ── Шаг 1: пустое значение ──
    if inn is None or (isinstance(inn, str) and inn == ""):
        return _fail(ValidationErrorCode.EMPTY, details)

    # ── Шаг 2: только цифры ──
    str_inn = to_trimmed_str(inn)
    if str_inn is None:
        return _fail(ValidationErrorCode.NOT_DIGITS, details)
    details.length = len(str_inn)
    if not DIGITS_PATTERN.fullmatch(str_inn):
        return _fail(ValidationErrorCode.NOT_DIGITS, details)

    # ── Шаг 3: длина ──
    if details.length not in (ORGANIZATION_LENGTH, INDIVIDUAL_LENGTH):
        return _fail(ValidationErrorCode.INVALID_LENGTH, details)

    # ── Шаг 4: тип ИНН ──
    details.type = (
        InnType.ORGANIZATION if details.length == ORGANIZATION_LENGTH else InnType.INDIVIDUAL
    )

    # ── Шаг 5: структура NNYY ──
    if opts.validate_structure and details.length >= 4:
        check = check_structure(str_inn)
        details.is_foreign_org = check.is_foreign
        details.region_code = check.region_code
        details.yy_index = check.yy_index
        # TODO: выразить правило «нового формата» по приказу ЕД-7-14/559@,
        # пока любой ИНН с вычисленным YY считается новым
        details.is_new_format = check.yy_index is not None and check.yy_index >= 0

        if check.is_foreign and not opts.allow_foreign_orgs:
            return _fail(ValidationErrorCode.FOREIGN_ORG_INVALID, details)
        if not check.is_valid:
            return _fail(check.error_code, details)

    # ── Шаг 6: контрольное число ──
    if not compute_checksum_valid(str_inn):
        return _fail(ValidationErrorCode.INVALID_CHECKSUM, details)

    return ValidationResult(is_valid=True, error_code=None, error_message="", details=details)


def validate_inn_legacy(inn: Any) -> ValidationResult:
    """
    Упрощённая проверка без структуры NNYY.

    Для ИНН, выданных по правилам, действовавшим до 2026 года.
    """
    return validate_inn(inn, ValidationOptions(validate_structure=False))


# ═══════════════════════════════════════════════════════════════════════════
# ИНН + КПП
# ═══════════════════════════════════════════════════════════════════════════


def validate_inn_with_kpp(inn: Any, kpp: Any = None) -> ValidationResult:
    """
    Проверяет ИНН и, если он корректен и КПП передан, — КПП.

    Пустой КПП (None, "") означает «КПП не указан» и ошибкой не считается.
    """
    inn_result = validate_inn(inn)
    if not inn_result.is_valid:
        return inn_result

    if not is_falsy(kpp):
        kpp_result = validate_kpp(kpp)
        if not kpp_result.is_valid:
            return inn_result.model_copy(
                update={
                    "is_valid": False,
                    "error_code": ValidationErrorCode.INVALID_PP_CODE,
                    "error_message": kpp_result.error_message,
                    "details": inn_result.details.model_copy(update={"kpp_error": True}),
                }
            )

    return inn_result


# ═══════════════════════════════════════════════════════════════════════════
# СТРОГИЕ ВАРИАНТЫ ДЛЯ СЕРВИСНОГО КОДА
# ═══════════════════════════════════════════════════════════════════════════


def ensure_valid_inn(inn: Any, options: OptionsLike = None) -> str:
    """
    Возвращает нормализованный ИНН или выбрасывает InnValidationError.

    Raises:
        InnValidationError: ИНН не прошёл проверку; ``details`` содержит
            числовой код ошибки и детали проверки.
    """
    result = validate_inn(inn, options)
    if not result.is_valid:
        raise InnValidationError(
            result.error_message,
            details={
                "error_code": int(result.error_code),
                "validation": result.details.model_dump(mode="json", by_alias=True),
            },
        )
    return to_trimmed_str(inn)


def ensure_valid_kpp(kpp: Any) -> str:
    """
    Возвращает нормализованный КПП или выбрасывает KppValidationError.

    Raises:
        KppValidationError: КПП пуст или не прошёл проверку.
    """
    result = validate_kpp(kpp)
    if not result.is_valid:
        raise KppValidationError(
            result.error_message,
            details={"error_code": int(ValidationErrorCode.INVALID_PP_CODE)},
        )
    return to_trimmed_str(kpp)


__all__ = [
    "resolve_options",
    "validate_inn",
    "validate_inn_legacy",
    "validate_inn_with_kpp",
    "ensure_valid_inn",
    "ensure_valid_kpp",
]
