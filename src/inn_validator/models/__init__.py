"""
inn_validator.models — Модели данных валидатора.

Реэкспорт основных классов для удобства:
    from inn_validator.models import ValidationResult, ValidationErrorCode

Привязка к полям (InnStr, KppStr, запросы HTTP) находится в
``inn_validator.models.identifiers``.
"""

from inn_validator.models.enums import InnType, ValidationErrorCode  # noqa: F401
from inn_validator.models.result import (  # noqa: F401
    KPPValidationResult,
    StructureCheck,
    UIValidationResult,
    ValidationDetails,
    ValidationOptions,
    ValidationResult,
)
