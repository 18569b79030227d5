"""
inn_validator.services — Проверки ИНН и КПП.

Реэкспорт основных функций:
    from inn_validator.services import validate_inn, validate_kpp
"""

from inn_validator.services.checksum import compute_checksum_valid  # noqa: F401
from inn_validator.services.generator import generate_inn  # noqa: F401
from inn_validator.services.inn import (  # noqa: F401
    ensure_valid_inn,
    ensure_valid_kpp,
    validate_inn,
    validate_inn_legacy,
    validate_inn_with_kpp,
)
from inn_validator.services.kpp import validate_kpp  # noqa: F401
from inn_validator.services.structure import check_structure  # noqa: F401
from inn_validator.services.ui import validate_inn_for_ui  # noqa: F401
