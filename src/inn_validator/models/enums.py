"""
inn_validator/models/enums.py — Перечисления домена валидации.

Содержит:
    • ValidationErrorCode — закрытый набор причин отклонения
    • InnType — тип налогоплательщика по длине ИНН

Числовые значения кодов совпадают с исходной библиотекой
(``ValidationErrorCodes``), чтобы внешние потребители могли сравнивать их
как обычные числа.
"""

from enum import Enum


class ValidationErrorCode(int, Enum):
    """Код ошибки валидации ИНН/КПП."""
    EMPTY = 1
    NOT_DIGITS = 2
    INVALID_LENGTH = 3
    INVALID_CHECKSUM = 4
    INVALID_REGION_CODE = 5  # NN — код управления ФНС по субъекту
    INVALID_YY_INDEX = 6  # YY — индекс ФНС
    FOREIGN_ORG_INVALID = 7
    INVALID_PP_CODE = 8  # для КПП


class InnType(str, Enum):
    """Тип налогоплательщика."""
    ORGANIZATION = "organization"
    INDIVIDUAL = "individual"
