"""
Integer Safeguards — Целочисленные примитивы для точной арифметики

Модуль задаёт границы и проверки для целочисленных значений, с которыми
работает движок рескейлинга:
- Границы int64 и sentinel-значения (NOPTS, INT64_MIN/MAX)
- Строгая валидация int (bool и float отклоняются)
- Деление с усечением к нулю (семантика C, а не floor-деление Python)
- Трёхзначное сравнение

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Никаких float в промежуточных вычислениях
2. Промежуточные произведения не переполняются (int произвольной точности)
3. Все операции детерминированы и воспроизводимы
"""

from typing import Final

# =============================================================================
# ГРАНИЦЫ ЦЕЛЫХ ТИПОВ
# =============================================================================

INT64_MIN: Final[int] = -(2**63)
INT64_MAX: Final[int] = 2**63 - 1

# "Нет временной метки" — совпадает с INT64_MIN
NOPTS_VALUE: Final[int] = INT64_MIN


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def is_strict_int(value: object) -> bool:
    """
    Проверка, что значение — int, но не bool.

    Args:
        value: Проверяемое значение

    Returns:
        True для int (включая подклассы), False для bool и прочих типов
    """
    return isinstance(value, int) and not isinstance(value, bool)


def validate_int(value: object, name: str) -> int:
    """
    Валидация целочисленного аргумента.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        value как int

    Raises:
        TypeError: Если value не int (bool тоже отклоняется)
    """
    if not is_strict_int(value):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}: {value!r}")
    return int(value)


def is_int64(value: int) -> bool:
    """True если value помещается в знаковый 64-битный диапазон."""
    return INT64_MIN <= value <= INT64_MAX


def validate_int64(value: object, name: str) -> int:
    """
    Валидация 64-битной временной метки.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        value как int

    Raises:
        TypeError: Если value не int
        ValueError: Если value вне диапазона int64
    """
    result = validate_int(value, name)
    if not is_int64(result):
        raise ValueError(f"{name} must fit in int64 [{INT64_MIN}, {INT64_MAX}], got {result}")
    return result


def is_sentinel(value: int) -> bool:
    """
    Проверка sentinel-значения (INT64_MIN или INT64_MAX).

    Sentinel-значения означают "неизвестно/неограничено" и пропускаются
    без изменений при рескейлинге с флагом PASS_MINMAX.
    """
    return value == INT64_MIN or value == INT64_MAX


# =============================================================================
# ЦЕЛОЧИСЛЕННЫЕ ОПЕРАЦИИ
# =============================================================================


def sign(value: int) -> int:
    """
    Знак целого числа.

    Returns:
        -1, 0 или 1
    """
    if value > 0:
        return 1
    if value < 0:
        return -1
    return 0


def three_way_compare(a: int, b: int) -> int:
    """
    Трёхзначное сравнение двух целых.

    Returns:
        -1 если a < b, 0 если a == b, 1 если a > b

    Examples:
        >>> three_way_compare(1, 2)
        -1
        >>> three_way_compare(5, 5)
        0
    """
    return sign(a - b)


def trunc_divmod(numerator: int, denominator: int) -> tuple[int, int]:
    """
    Деление с усечением к нулю.

    Оператор // в Python округляет к -inf; здесь частное усекается к нулю,
    а остаток имеет знак числителя (как в C и BigInt).

    Args:
        numerator: Делимое
        denominator: Делитель (ненулевой)

    Returns:
        (quotient, remainder), где numerator == quotient * denominator + remainder

    Raises:
        ZeroDivisionError: Если denominator == 0

    Examples:
        >>> trunc_divmod(7, 2)
        (3, 1)
        >>> trunc_divmod(-7, 2)
        (-3, -1)
        >>> trunc_divmod(7, -2)
        (-3, 1)
    """
    if denominator == 0:
        raise ZeroDivisionError("integer division by zero")

    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        quotient = -quotient

    return quotient, numerator - quotient * denominator
