"""
inn_validator/models/identifiers.py — Привязка валидаторов к полям моделей.

    • InnStr / KppStr — аннотированные типы для Pydantic-схем: значение
      проверяется ядром валидатора, при ошибке поднимается ValueError с
      каноническим сообщением;
    • TaxpayerIdentifiers — пара ИНН + КПП организации;
    • *Request — тела запросов HTTP-слоя. Они принимают значение «как есть»
      (без обрезки пробелов), чтобы результат проверки совпадал с прямым
      вызовом функции.
"""

from typing import Annotated, Any

from pydantic import BeforeValidator, ConfigDict, Field

from inn_validator.models.common import ValidatorBase
from inn_validator.models.result import ValidationOptions, ValidationResult
from inn_validator.services._coerce import to_trimmed_str
from inn_validator.services.inn import validate_inn, validate_inn_with_kpp
from inn_validator.services.kpp import validate_kpp


def _check_inn(value: Any) -> str:
    result = validate_inn(value)
    if not result.is_valid:
        raise ValueError(result.error_message)
    return to_trimmed_str(value)


def _check_kpp(value: Any) -> str:
    result = validate_kpp(value)
    if not result.is_valid:
        raise ValueError(result.error_message)
    return to_trimmed_str(value)


InnStr = Annotated[str, BeforeValidator(_check_inn)]
KppStr = Annotated[str, BeforeValidator(_check_kpp)]


class TaxpayerIdentifiers(ValidatorBase):
    """Реквизиты налогоплательщика: ИНН и (для организаций) КПП."""
    inn: InnStr = Field(..., examples=["7707083893"])
    kpp: KppStr | None = Field(default=None, examples=["770701001"])

    def validation_result(self) -> ValidationResult:
        """Полный результат проверки пары с деталями."""
        return validate_inn_with_kpp(self.inn, self.kpp)


# ═══════════════════════════════════════════════════════════════════════════
# ТЕЛА ЗАПРОСОВ HTTP
# ═══════════════════════════════════════════════════════════════════════════

# Любое JSON-значение, включая объект и true, уходит в ядро без приведения
RawIdentifier = Any


class _RawRequest(ValidatorBase):
    model_config = ConfigDict(str_strip_whitespace=False)


class InnValidationRequest(_RawRequest):
    """Запрос на проверку ИНН."""
    inn: RawIdentifier = Field(default=None, examples=["7707083893"])
    options: ValidationOptions | None = None


class InnUIValidationRequest(InnValidationRequest):
    """Запрос на проверку ИНН с сообщением для интерфейса."""
    field_name: str | None = Field(default=None, examples=["ИНН организации"])


class KppValidationRequest(_RawRequest):
    """Запрос на проверку КПП."""
    kpp: RawIdentifier = Field(default=None, examples=["770701001"])


class InnWithKppValidationRequest(_RawRequest):
    """Запрос на совместную проверку ИНН и КПП."""
    inn: RawIdentifier = Field(default=None, examples=["7707083893"])
    kpp: RawIdentifier = Field(default=None, examples=["770701001"])
