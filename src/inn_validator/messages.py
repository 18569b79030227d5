"""
inn_validator/messages.py — Таблицы сообщений об ошибках.

Два независимых набора:
    • VALIDATION_ERROR_MESSAGES — канонические сообщения, по одному на код;
    • UI_ERROR_MESSAGES — шаблоны для интерфейса, часть из них
      подставляет название поля (``{field_name}``).

Таблицы доступны только для чтения (MappingProxyType) и могут
использоваться для локализации.
"""

from types import MappingProxyType

from inn_validator.models.enums import ValidationErrorCode

VALIDATION_ERROR_MESSAGES = MappingProxyType({
    ValidationErrorCode.EMPTY: "ИНН не может быть пустым",
    ValidationErrorCode.NOT_DIGITS: "ИНН должен содержать только цифры",
    ValidationErrorCode.INVALID_LENGTH: (
        "ИНН должен содержать 10 цифр (организация) или 12 цифр (физ. лицо/ИП)"
    ),
    ValidationErrorCode.INVALID_CHECKSUM: "Неверное контрольное число",
    ValidationErrorCode.INVALID_REGION_CODE: "Неверный код управления ФНС (первые 2 цифры)",
    ValidationErrorCode.INVALID_YY_INDEX: "Неверный индекс ФНС (третья и четвертая цифры)",
    ValidationErrorCode.FOREIGN_ORG_INVALID: "Неверный формат ИНН иностранной организации",
    ValidationErrorCode.INVALID_PP_CODE: "Неверный код причины постановки на учет (КПП)",
})

UI_ERROR_MESSAGES = MappingProxyType({
    ValidationErrorCode.EMPTY: 'Поле "{field_name}" обязательно для заполнения',
    ValidationErrorCode.NOT_DIGITS: 'Поле "{field_name}" должно содержать только цифры',
    ValidationErrorCode.INVALID_LENGTH: (
        "ИНН должен содержать 10 цифр (для организаций) или 12 цифр (для физ. лиц)"
    ),
    ValidationErrorCode.INVALID_REGION_CODE: "Неверный код управления ФНС в ИНН",
    ValidationErrorCode.INVALID_YY_INDEX: "Неверный индекс ФНС в ИНН",
    ValidationErrorCode.INVALID_CHECKSUM: (
        "Неверное контрольное число ИНН. Проверьте правильность ввода"
    ),
    ValidationErrorCode.FOREIGN_ORG_INVALID: "Неверный формат ИНН иностранной организации",
})

UI_GENERIC_MESSAGE = "Некорректный ИНН"

# ── КПП ───────────────────────────────────────────────────────────────────
KPP_EMPTY_MESSAGE = "КПП не может быть пустым"
KPP_LENGTH_MESSAGE = "КПП должен содержать 9 знаков"
KPP_FORMAT_MESSAGE = "Неверный формат КПП"
KPP_CAUSE_CODE_MESSAGE = "Неверный код причины постановки на учет"


__all__ = [
    "VALIDATION_ERROR_MESSAGES",
    "UI_ERROR_MESSAGES",
    "UI_GENERIC_MESSAGE",
    "KPP_EMPTY_MESSAGE",
    "KPP_LENGTH_MESSAGE",
    "KPP_FORMAT_MESSAGE",
    "KPP_CAUSE_CODE_MESSAGE",
]
