"""Tests for the UI message translator."""

import pytest

from inn_validator.messages import UI_ERROR_MESSAGES, VALIDATION_ERROR_MESSAGES
from inn_validator.models.enums import ValidationErrorCode
from inn_validator.models.result import ValidationResult
from inn_validator.services import ui
from inn_validator.services.ui import validate_inn_for_ui


class TestValidateInnForUI:
    def test_valid_inn_has_empty_message(self) -> None:
        result = validate_inn_for_ui("7707083893", "ИНН организации")
        assert result.is_valid is True
        assert result.message == ""
        assert result.details.region_code == 77

    def test_empty_interpolates_field_name(self) -> None:
        result = validate_inn_for_ui("", "ИНН")
        assert result.is_valid is False
        assert result.message == 'Поле "ИНН" обязательно для заполнения'

    def test_not_digits_interpolates_field_name(self) -> None:
        result = validate_inn_for_ui("ABC", "ИНН контрагента")
        assert result.message == 'Поле "ИНН контрагента" должно содержать только цифры'

    def test_default_field_name(self) -> None:
        assert validate_inn_for_ui(None).message == 'Поле "ИНН" обязательно для заполнения'

    def test_invalid_length(self) -> None:
        result = validate_inn_for_ui("123", "Любое поле")
        assert result.message == (
            "ИНН должен содержать 10 цифр (для организаций) или 12 цифр (для физ. лиц)"
        )
        assert result.details.length == 3

    @pytest.mark.parametrize(
        "inn, options, code",
        [
            ("7707083894", None, ValidationErrorCode.INVALID_CHECKSUM),
            ("0007083893", None, ValidationErrorCode.INVALID_REGION_CODE),
            ("9912345672", {"allow_foreign_orgs": False}, ValidationErrorCode.FOREIGN_ORG_INVALID),
        ],
    )
    def test_fixed_messages(self, inn: str, options: dict | None, code: ValidationErrorCode) -> None:
        result = validate_inn_for_ui(inn, "ИНН", options)
        assert result.is_valid is False
        assert result.message == UI_ERROR_MESSAGES[code]

    @pytest.mark.parametrize("code", [c for c in ValidationErrorCode if c in UI_ERROR_MESSAGES])
    def test_every_ui_message_is_non_empty(self, code: ValidationErrorCode) -> None:
        assert UI_ERROR_MESSAGES[code].format(field_name="ИНН")

    @pytest.mark.parametrize("code", [ValidationErrorCode.EMPTY, ValidationErrorCode.INVALID_LENGTH])
    def test_ui_messages_differ_from_canonical(self, code: ValidationErrorCode) -> None:
        assert UI_ERROR_MESSAGES[code].format(field_name="ИНН") != VALIDATION_ERROR_MESSAGES[code]

    def test_unmapped_code_falls_back_to_generic(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def fake_validate(inn, options=None):
            return ValidationResult(
                is_valid=False,
                error_code=ValidationErrorCode.INVALID_PP_CODE,
                error_message="КПП",
            )

        monkeypatch.setattr(ui, "validate_inn", fake_validate)
        assert validate_inn_for_ui("7707083893").message == "Некорректный ИНН"
