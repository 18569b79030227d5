"""
inn_validator/services/kpp.py — Валидация КПП.

Структура КПП: NNNN PP XXX
    • NNNN — код налогового органа;
    • PP   — причина постановки на учет: 01–50 для российских
             организаций, 50–99 для иностранных, либо буквенный код;
    • XXX  — порядковый номер постановки.
"""

from __future__ import annotations

import logging
import re
from typing import Any

from inn_validator.messages import (
    KPP_CAUSE_CODE_MESSAGE,
    KPP_EMPTY_MESSAGE,
    KPP_FORMAT_MESSAGE,
    KPP_LENGTH_MESSAGE,
)
from inn_validator.models.result import KPPValidationResult
from inn_validator.services._coerce import is_falsy, to_trimmed_str

logger = logging.getLogger(__name__)

KPP_LENGTH = 9
KPP_PATTERN = re.compile(r"\d{4}[0-9A-Z]{2}\d{3}", re.ASCII)

CAUSE_CODE_MIN = 1
CAUSE_CODE_MAX = 99


def _reject(message: str) -> KPPValidationResult:
    logger.debug("KPP rejected: %s", message)
    return KPPValidationResult(is_valid=False, error_message=message)


def validate_kpp(kpp: Any) -> KPPValidationResult:
    """
    Проверяет КПП: пустоту, длину, формат и код причины постановки.

    Код причины считается числовым, только если обе его позиции — цифры.
    Любой код с буквой принимается как буквенный, в том числе ``0A``.
    JS-библиотека разбирала его через ``parseInt`` как 0 и отклоняла.

    Никогда не выбрасывает исключений — результат единственный канал
    сообщения об ошибке.
    """
    if is_falsy(kpp):
        return _reject(KPP_EMPTY_MESSAGE)

    str_kpp = to_trimmed_str(kpp)
    if str_kpp is None or len(str_kpp) != KPP_LENGTH:
        return _reject(KPP_LENGTH_MESSAGE)

    if not KPP_PATTERN.fullmatch(str_kpp):
        return _reject(KPP_FORMAT_MESSAGE)

    cause_code = str_kpp[4:6]
    # Буквенный код причины допустим без дополнительных ограничений
    if cause_code.isdigit() and not CAUSE_CODE_MIN <= int(cause_code) <= CAUSE_CODE_MAX:
        return _reject(KPP_CAUSE_CODE_MESSAGE)

    return KPPValidationResult(is_valid=True, error_message="")


__all__ = ["KPP_LENGTH", "KPP_PATTERN", "validate_kpp"]
