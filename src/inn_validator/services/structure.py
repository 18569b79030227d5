"""
inn_validator/services/structure.py — Проверка структуры ИНН (NNYY).

Согласно приказу ФНС № ЕД-7-14/559@ (действует с 01.01.2026):
    • NN (цифры 1–2) — код управления ФНС России по субъекту РФ;
    • YY (цифры 3–4) — индекс, определяемый ФНС (00–99).

Префикс 99 зарезервирован для иностранных организаций. Такой ИНН
структурно корректен; запрет иностранных организаций — решение
вызывающего кода (см. ``validate_inn``, опция ``allow_foreign_orgs``).
"""

from inn_validator.models.enums import ValidationErrorCode
from inn_validator.models.result import StructureCheck

# Коды управлений ФНС по субъектам РФ: 01–99
VALID_REGION_CODES = frozenset(f"{code:02d}" for code in range(1, 100))

FOREIGN_ORG_PREFIXES = frozenset({"99"})


def check_structure(inn: str) -> StructureCheck:
    """
    Проверяет первые 4 цифры ИНН.

    Ожидает строку из цифр длиной не менее 4 символов. Код региона
    возвращается числом в обеих ветках (и для иностранных, и для
    российских организаций).
    """
    prefix = inn[:2]
    yy = int(inn[2:4])

    if prefix in FOREIGN_ORG_PREFIXES:
        return StructureCheck(
            is_valid=True,
            is_foreign=True,
            region_code=int(prefix),
            yy_index=yy,
        )

    if prefix not in VALID_REGION_CODES:
        return StructureCheck(
            is_valid=False,
            error_code=ValidationErrorCode.INVALID_REGION_CODE,
            yy_index=yy,
        )

    # Недостижимо для двух цифр, но граница задана приказом явно
    if not 0 <= yy <= 99:
        return StructureCheck(
            is_valid=False,
            error_code=ValidationErrorCode.INVALID_YY_INDEX,
            region_code=int(prefix),
            yy_index=yy,
        )

    return StructureCheck(
        is_valid=True,
        region_code=int(prefix),
        yy_index=yy,
    )


__all__ = ["VALID_REGION_CODES", "FOREIGN_ORG_PREFIXES", "check_structure"]
