"""Tests for binding validators to pydantic model fields."""

import pytest
from pydantic import BaseModel, ValidationError

from inn_validator.messages import KPP_LENGTH_MESSAGE, VALIDATION_ERROR_MESSAGES
from inn_validator.models.enums import ValidationErrorCode
from inn_validator.models.identifiers import (
    InnStr,
    InnValidationRequest,
    KppStr,
    KppValidationRequest,
    TaxpayerIdentifiers,
)


class Counterparty(BaseModel):
    inn: InnStr
    kpp: KppStr | None = None


class TestAnnotatedTypes:
    def test_valid_values_are_normalized(self) -> None:
        model = Counterparty(inn=" 7707083893 ", kpp="770701001 ")
        assert model.inn == "7707083893"
        assert model.kpp == "770701001"

    def test_integer_inn(self) -> None:
        assert Counterparty(inn=7707083893).inn == "7707083893"

    def test_invalid_inn_message(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            Counterparty(inn="123")
        errors = exc_info.value.errors()
        assert errors[0]["loc"] == ("inn",)
        assert VALIDATION_ERROR_MESSAGES[ValidationErrorCode.INVALID_LENGTH] in errors[0]["msg"]

    def test_invalid_kpp_message(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            Counterparty(inn="7707083893", kpp="123")
        errors = exc_info.value.errors()
        assert errors[0]["loc"][0] == "kpp"
        assert KPP_LENGTH_MESSAGE in errors[0]["msg"]


class TestTaxpayerIdentifiers:
    def test_validate_from_dict(self) -> None:
        model = TaxpayerIdentifiers.model_validate({"inn": "7707083893", "kpp": "770701001"})
        assert model.validation_result().is_valid is True

    def test_kpp_is_optional(self) -> None:
        model = TaxpayerIdentifiers(inn="639116743110")
        assert model.kpp is None
        assert model.validation_result().is_valid is True

    def test_invalid_inn(self) -> None:
        with pytest.raises(ValidationError):
            TaxpayerIdentifiers(inn="7707083894")


class TestRequests:
    def test_whitespace_is_not_stripped(self) -> None:
        assert InnValidationRequest(inn="   ").inn == "   "

    def test_camel_case_options(self) -> None:
        body = InnValidationRequest.model_validate(
            {"inn": 7707083893, "options": {"allowForeignOrgs": False}}
        )
        assert body.inn == 7707083893
        assert body.options.allow_foreign_orgs is False
        assert body.options.validate_structure is True

    @pytest.mark.parametrize("raw", [{"x": 1}, ["7707083893"], True, 7707083893.0])
    def test_any_json_value_is_kept_as_is(self, raw: object) -> None:
        inn = InnValidationRequest.model_validate({"inn": raw}).inn
        kpp = KppValidationRequest.model_validate({"kpp": raw}).kpp
        assert inn == raw and type(inn) is type(raw)
        assert kpp == raw and type(kpp) is type(raw)
