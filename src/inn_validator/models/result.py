"""
inn_validator/models/result.py — Результаты и опции валидации.

Все модели имеют фиксированную форму: каждое поле определено и имеет
значение по умолчанию, даже если проверка завершилась раньше, чем оно было
вычислено. Это позволяет сравнивать результаты целиком.
"""

from pydantic import Field, model_validator

from inn_validator.models.common import ValidatorBase
from inn_validator.models.enums import InnType, ValidationErrorCode


class ValidationOptions(ValidatorBase):
    """
    Опции проверки ИНН.

    Неизвестные ключи игнорируются. ``strict_mode`` принимается для
    совместимости интерфейса и на результат не влияет.
    """
    validate_structure: bool = True
    allow_foreign_orgs: bool = True
    strict_mode: bool = False


class ValidationDetails(ValidatorBase):
    """Детали, накопленные по мере прохождения проверок."""
    length: int = 0
    type: InnType | None = None
    region_code: int | None = None
    yy_index: int | None = None
    is_foreign_org: bool = False
    is_new_format: bool = False
    kpp_error: bool = False


class ValidationResult(ValidatorBase):
    """Результат проверки ИНН (или пары ИНН + КПП)."""
    is_valid: bool = False
    error_code: ValidationErrorCode | None = None
    error_message: str = ""
    details: ValidationDetails = Field(default_factory=ValidationDetails)

    @model_validator(mode="after")
    def _check_consistency(self) -> "ValidationResult":
        """is_valid ⇔ error_code is None ⇔ error_message == ""."""
        has_code = self.error_code is not None
        has_message = self.error_message != ""
        if self.is_valid == has_code or has_code != has_message:
            raise ValueError(
                "Inconsistent validation result: is_valid, error_code and "
                "error_message must agree"
            )
        return self


class UIValidationResult(ValidatorBase):
    """Результат проверки для отображения в интерфейсе."""
    is_valid: bool
    message: str = ""
    details: ValidationDetails = Field(default_factory=ValidationDetails)


class KPPValidationResult(ValidatorBase):
    """Результат проверки КПП."""
    is_valid: bool
    error_message: str = ""


class StructureCheck(ValidatorBase):
    """Результат проверки структуры NNYY."""
    is_valid: bool
    error_code: ValidationErrorCode | None = None
    is_foreign: bool = False
    region_code: int | None = None
    yy_index: int | None = None
