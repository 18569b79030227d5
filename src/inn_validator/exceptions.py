"""
═══════════════════════════════════════════════════════════════════════════════
inn_validator — Иерархия ошибок (Custom Exception Hierarchy)
═══════════════════════════════════════════════════════════════════════════════

Валидаторы (``validate_*``) исключений не выбрасывают: результат проверки —
единственный канал сообщения об ошибке. Исключения используются только
«строгими» помощниками ``ensure_valid_inn`` / ``ensure_valid_kpp`` для
сервисного кода. HTTP-маппинг кодов выполняется в
``inn_validator.main:validator_error_handler``.
"""


class InnValidatorError(Exception):
    """
    Базовое исключение пакета.

    Атрибуты
    ────────
        message (str):  Описание ошибки. Передаётся клиенту в JSON.
        code (str):     Строковый код. Используется для маппинга на HTTP-статус.
        details (dict): Дополнительные данные (код ошибки валидации, детали).
    """

    def __init__(
        self,
        message: str,
        code: str = "INN_VALIDATOR_ERROR",
        details: dict | None = None,
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(message)


class InnValidationError(InnValidatorError):
    """ИНН не прошёл проверку: 422 Unprocessable Entity."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message, code="INN_VALIDATION_ERROR", details=details)


class KppValidationError(InnValidatorError):
    """КПП не прошёл проверку: 422 Unprocessable Entity."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message, code="KPP_VALIDATION_ERROR", details=details)


__all__ = [
    "InnValidatorError",
    "InnValidationError",
    "KppValidationError",
]
