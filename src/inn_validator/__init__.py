"""
inn_validator — Валидация ИНН и КПП согласно требованиям ФНС РФ.

    from inn_validator import validate_inn, validate_kpp

    result = validate_inn("7707083893")
    if result.is_valid:
        ...
"""

__version__ = "1.0.0"

from inn_validator.exceptions import (  # noqa: E402
    InnValidationError,
    InnValidatorError,
    KppValidationError,
)
from inn_validator.messages import UI_ERROR_MESSAGES, VALIDATION_ERROR_MESSAGES  # noqa: E402
from inn_validator.models import (  # noqa: E402
    InnType,
    KPPValidationResult,
    UIValidationResult,
    ValidationDetails,
    ValidationErrorCode,
    ValidationOptions,
    ValidationResult,
)
from inn_validator.models.identifiers import InnStr, KppStr, TaxpayerIdentifiers  # noqa: E402
from inn_validator.services import (  # noqa: E402
    compute_checksum_valid,
    ensure_valid_inn,
    ensure_valid_kpp,
    generate_inn,
    validate_inn,
    validate_inn_for_ui,
    validate_inn_legacy,
    validate_inn_with_kpp,
    validate_kpp,
)

__all__ = [
    "__version__",
    "InnValidatorError",
    "InnValidationError",
    "KppValidationError",
    "VALIDATION_ERROR_MESSAGES",
    "UI_ERROR_MESSAGES",
    "InnType",
    "KPPValidationResult",
    "UIValidationResult",
    "ValidationDetails",
    "ValidationErrorCode",
    "ValidationOptions",
    "ValidationResult",
    "InnStr",
    "KppStr",
    "TaxpayerIdentifiers",
    "compute_checksum_valid",
    "ensure_valid_inn",
    "ensure_valid_kpp",
    "generate_inn",
    "validate_inn",
    "validate_inn_for_ui",
    "validate_inn_legacy",
    "validate_inn_with_kpp",
    "validate_kpp",
]
