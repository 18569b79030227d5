"""
inn_validator/services/generator.py — Генерация тестовых ИНН.

Создаёт случайные ИНН с правильными контрольными числами для фикстур и
демонстрационных данных. Для воспроизводимости передайте
``random.Random`` с фиксированным seed.
"""

from __future__ import annotations

import random

from inn_validator.models.enums import InnType
from inn_validator.services.checksum import (
    INDIVIDUAL_WEIGHTS_1,
    INDIVIDUAL_WEIGHTS_2,
    ORGANIZATION_WEIGHTS,
    control_digit,
)


def generate_inn(
    kind: InnType = InnType.INDIVIDUAL,
    rng: random.Random | None = None,
    region_code: int | None = None,
) -> str:
    """
    Генерирует ИНН с корректными контрольными числами.

    Args:
        kind: тип ИНН — организация (10 цифр) или физ. лицо (12 цифр).
        rng: источник случайности; по умолчанию новый ``random.Random()``.
        region_code: код региона 1–99 (первые 2 цифры). Если не задан,
            выбирается случайно, поэтому результат проходит и проверку
            структуры.
    """
    rng = rng or random.Random()
    kind = InnType(kind)

    if region_code is None:
        region_code = rng.randint(1, 99)
    if not 1 <= region_code <= 99:
        raise ValueError(f"region_code must be within 1..99, got {region_code}")

    body_length = 9 if kind is InnType.ORGANIZATION else 10
    body = f"{region_code:02d}" + "".join(
        str(rng.randint(0, 9)) for _ in range(body_length - 2)
    )

    if kind is InnType.ORGANIZATION:
        return body + str(control_digit(body, ORGANIZATION_WEIGHTS))

    body += str(control_digit(body, INDIVIDUAL_WEIGHTS_1))
    return body + str(control_digit(body, INDIVIDUAL_WEIGHTS_2))


__all__ = ["generate_inn"]
