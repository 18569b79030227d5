"""
inn_validator/services/checksum.py — Контрольные числа ИНН.

Алгоритм не менялся с 2012 года и не затронут приказом ФНС
№ ЕД-7-14/559@:
    • 10 цифр (организация): одно контрольное число в позиции 9;
    • 12 цифр (физ. лицо/ИП): два контрольных числа в позициях 10 и 11,
      второе считается с учётом первого.

Контрольное число = (взвешенная сумма mod 11) mod 10.
"""

from collections.abc import Sequence

ORGANIZATION_WEIGHTS = (2, 4, 10, 3, 5, 9, 4, 6, 8)
INDIVIDUAL_WEIGHTS_1 = (7, 2, 4, 10, 3, 5, 9, 4, 6, 8)
INDIVIDUAL_WEIGHTS_2 = (3, 7, 2, 4, 10, 3, 5, 9, 4, 6, 8)


def control_digit(digits: str, weights: Sequence[int]) -> int:
    """Контрольное число по первым ``len(weights)`` цифрам строки."""
    total = sum(w * int(d) for w, d in zip(weights, digits))
    return total % 11 % 10


def compute_checksum_valid(digits: str) -> bool:
    """
    Проверяет контрольные числа ИНН.

    Предусловие: строка из ASCII-цифр (гарантирует вызывающий код).
    Для длины, отличной от 10 и 12, возвращает False.
    """
    if len(digits) == 10:
        return control_digit(digits, ORGANIZATION_WEIGHTS) == int(digits[9])

    if len(digits) == 12:
        if control_digit(digits, INDIVIDUAL_WEIGHTS_1) != int(digits[10]):
            return False
        return control_digit(digits, INDIVIDUAL_WEIGHTS_2) == int(digits[11])

    return False


__all__ = [
    "ORGANIZATION_WEIGHTS",
    "INDIVIDUAL_WEIGHTS_1",
    "INDIVIDUAL_WEIGHTS_2",
    "control_digit",
    "compute_checksum_valid",
]
