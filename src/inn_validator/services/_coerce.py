"""
inn_validator/services/_coerce.py — Приведение входных значений.

Валидаторы принимают строку, число или пустое значение, а на практике —
что угодно. Приведение к строке не должно выбрасывать исключений:
значение, которое не удаётся превратить в строку, считается нецифровым.
"""

from __future__ import annotations

import logging
from typing import Any

logger = logging.getLogger(__name__)


def to_trimmed_str(value: Any) -> str | None:
    """
    Возвращает ``str(value).strip()`` или None, если str() упал.

    Целое число в виде float (``7707083893.0``) записывается без дробной
    части, как число в исходной JS-библиотеке.
    """
    try:
        if isinstance(value, float) and value.is_integer():
            value = int(value)
        return str(value).strip()
    except Exception as exc:
        logger.debug("Cannot coerce %s to str: %s", type(value).__name__, exc)
        return None


def is_falsy(value: Any) -> bool:
    """Проверка «пустоты» в смысле ``not value`` без риска исключения."""
    try:
        return not value
    except Exception as exc:
        logger.debug("Truth value of %s is undefined: %s", type(value).__name__, exc)
        return False
