"""
inn_validator/models/common.py — Базовые типы домена валидации.

Все схемы наследуют ValidatorBase: строки очищаются от пробелов по краям,
а для каждого поля генерируется camelCase-алиас (``isValid``,
``errorCode``, ``regionCode``), совпадающий с форматом исходного
JS-интерфейса. Заполнение по имени поля тоже разрешено.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ValidatorBase(BaseModel):
    """Базовая Pydantic-модель для схем валидатора."""

    model_config = ConfigDict(
        str_strip_whitespace=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )
