"""
inn_validator/api/validation.py — Эндпоинты проверки ИНН и КПП.

Все эндпоинты проверки отвечают 200 и структурированным результатом:
результат и есть канал сообщения об ошибке. Исключение — ``/inn/check``,
который при некорректном ИНН отвечает 422 (см. ``inn_validator.main``).

Эндпоинты синхронные: FastAPI выполняет их в пуле потоков.
"""

from fastapi import APIRouter, Depends

from inn_validator.config import ValidatorSettings, get_settings
from inn_validator.messages import UI_ERROR_MESSAGES, UI_GENERIC_MESSAGE, VALIDATION_ERROR_MESSAGES
from inn_validator.models.enums import ValidationErrorCode
from inn_validator.models.identifiers import (
    InnUIValidationRequest,
    InnValidationRequest,
    InnWithKppValidationRequest,
    KppValidationRequest,
)
from inn_validator.models.result import (
    KPPValidationResult,
    UIValidationResult,
    ValidationResult,
)
from inn_validator.services import inn as inn_service
from inn_validator.services.kpp import validate_kpp
from inn_validator.services.ui import validate_inn_for_ui

router = APIRouter(tags=["validation"])


@router.post(
    "/inn/validate",
    response_model=ValidationResult,
    summary="Проверить ИНН",
)
def validate_inn(
    body: InnValidationRequest,
    settings: ValidatorSettings = Depends(get_settings),
):
    """Проверяет ИНН с опциями запроса или опциями по умолчанию."""
    options = body.options or settings.default_options()
    return inn_service.validate_inn(body.inn, options)


@router.post(
    "/inn/validate/ui",
    response_model=UIValidationResult,
    summary="Проверить ИНН (сообщение для интерфейса)",
)
def validate_inn_ui(
    body: InnUIValidationRequest,
    settings: ValidatorSettings = Depends(get_settings),
):
    """Возвращает человекочитаемое сообщение с названием поля."""
    options = body.options or settings.default_options()
    field_name = settings.ui_field_name if body.field_name is None else body.field_name
    return validate_inn_for_ui(body.inn, field_name, options)


@router.post(
    "/inn/validate/legacy",
    response_model=ValidationResult,
    summary="Проверить ИНН без проверки структуры",
)
def validate_inn_legacy(body: InnValidationRequest):
    """Упрощённая проверка для ИНН, выданных до 2026 года."""
    return inn_service.validate_inn_legacy(body.inn)


@router.post(
    "/inn/check",
    summary="Строгая проверка ИНН (422 при ошибке)",
)
def check_inn(
    body: InnValidationRequest,
    settings: ValidatorSettings = Depends(get_settings),
):
    """Возвращает нормализованный ИНН или ошибку 422."""
    options = body.options or settings.default_options()
    return {"inn": inn_service.ensure_valid_inn(body.inn, options)}


@router.post(
    "/kpp/validate",
    response_model=KPPValidationResult,
    summary="Проверить КПП",
)
def validate_kpp_endpoint(body: KppValidationRequest):
    """Проверяет длину, формат и код причины постановки КПП."""
    return validate_kpp(body.kpp)


@router.post(
    "/inn-kpp/validate",
    response_model=ValidationResult,
    summary="Проверить ИНН вместе с КПП",
)
def validate_inn_with_kpp(body: InnWithKppValidationRequest):
    """КПП проверяется только для корректного ИНН."""
    return inn_service.validate_inn_with_kpp(body.inn, body.kpp)


@router.get("/error-codes", summary="Таблица кодов ошибок")
def list_error_codes():
    """Коды ошибок с каноническими и UI-сообщениями."""
    return [
        {
            "code": int(code),
            "name": code.name,
            "message": VALIDATION_ERROR_MESSAGES[code],
            "uiMessage": UI_ERROR_MESSAGES.get(code, UI_GENERIC_MESSAGE),
        }
        for code in ValidationErrorCode
    ]
