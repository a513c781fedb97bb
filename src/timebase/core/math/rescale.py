"""
Rescale Engine — Рескейлинг и сравнение временных меток

Перевод целых "тиков" из одного timebase в другой с выбираемой политикой
округления и точное сравнение меток из разных timebase.

ФОРМУЛЫ:
    rescale(a, b, c) = a · b.num · c.den / (b.den · c.num)
    compare(ts1, tb1, ts2, tb2) = sign(ts1·tb1.num·tb2.den − ts2·tb2.num·tb1.den)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Промежуточные произведения вычисляются в int произвольной точности —
   переполнение невозможно для любых int64 входов
2. Округление применяется ровно один раз, к точной дроби
3. rescale(a, b, b, mode) == a для любого режима
4. PASS_MINMAX: INT64_MIN / INT64_MAX возвращаются без изменений
5. Результат не усекается до int64 (точное целое)
"""

import logging
from enum import IntFlag
from typing import Any, Final

from timebase.core.math.integer_safeguards import (
    NOPTS_VALUE,
    is_sentinel,
    sign,
    three_way_compare,
    trunc_divmod,
    validate_int,
)
from timebase.core.math.rational import Rational, RationalDivisionByZero, as_rational

logger = logging.getLogger(__name__)


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Внутренний timebase высокого разрешения (микросекунды)
TIME_BASE: Final[int] = 1_000_000

TIME_BASE_Q: Final[Rational] = Rational(1, TIME_BASE)


# =============================================================================
# ROUNDING
# =============================================================================


class Rounding(IntFlag):
    """
    Политика округления (нумерация как в FFmpeg AVRounding).

    PASS_MINMAX — модификатор, комбинируется с базовым режимом через |.
    """

    ZERO = 0  # К нулю (усечение)
    INF = 1  # Обрабатывается как NEAR_INF
    DOWN = 2  # К -inf
    UP = 3  # К +inf
    NEAR_INF = 5  # К ближайшему, половины — от нуля
    NEAREST = 5  # Алиас NEAR_INF
    PASS_MINMAX = 8192  # INT64_MIN/MAX пропускаются без рескейлинга


_BASE_ROUNDING_MODES: Final[frozenset[int]] = frozenset(
    {Rounding.ZERO, Rounding.INF, Rounding.DOWN, Rounding.UP, Rounding.NEAR_INF}
)


def split_rounding(rounding: int) -> tuple[int, bool]:
    """
    Разделение режима на базовый режим и флаг PASS_MINMAX.

    Args:
        rounding: Rounding или int (например, Rounding.UP | Rounding.PASS_MINMAX)

    Returns:
        (base_mode, pass_minmax)

    Raises:
        TypeError: Если rounding не int
        ValueError: Если базовый режим неизвестен
    """
    mode = validate_int(rounding, "rounding")
    pass_minmax = bool(mode & Rounding.PASS_MINMAX)
    base = mode & ~int(Rounding.PASS_MINMAX)

    if base not in _BASE_ROUNDING_MODES:
        raise ValueError(f"Unknown rounding mode: {base}")

    return base, pass_minmax


def round_quotient(numerator: int, denominator: int, rounding: int = Rounding.NEAR_INF) -> int:
    """
    Округление точной дроби numerator/denominator до целого.

    Режимы:
    - ZERO: усечение
    - DOWN: усечение, −1 если частное отрицательно и остаток ненулевой
    - UP: усечение, +1 если частное положительно и остаток ненулевой
    - NEAR_INF / INF: к ближайшему; при |остаток| ≥ знаменатель/2 — от нуля

    Args:
        numerator: Числитель (любой int)
        denominator: Знаменатель (ненулевой)
        rounding: Базовый режим округления (флаг PASS_MINMAX игнорируется)

    Returns:
        Округлённое целое

    Raises:
        RationalDivisionByZero: Если denominator == 0

    Examples:
        >>> round_quotient(3, 2, Rounding.ZERO)
        1
        >>> round_quotient(3, 2, Rounding.NEAR_INF)
        2
        >>> round_quotient(-3, 2, Rounding.DOWN)
        -2
    """
    if denominator == 0:
        raise RationalDivisionByZero(f"Division by zero: {numerator} / 0")

    base, _ = split_rounding(rounding)

    # Нормализация знака: знаменатель всегда положительный
    if denominator < 0:
        numerator, denominator = -numerator, -denominator

    quotient, remainder = trunc_divmod(numerator, denominator)

    if remainder == 0 or base == Rounding.ZERO:
        return quotient

    if base == Rounding.DOWN:
        return quotient - 1 if numerator < 0 else quotient

    if base == Rounding.UP:
        return quotient + 1 if numerator > 0 else quotient

    # NEAR_INF / INF
    if 2 * abs(remainder) >= denominator:
        return quotient + sign(numerator)
    return quotient


# =============================================================================
# RESCALE
# =============================================================================


def rescale_rnd(a: int, b: int, c: int, rounding: int = Rounding.NEAR_INF) -> int:
    """
    Целочисленный рескейлинг a · b / c с округлением.

    Args:
        a: Масштабируемое значение
        b: Множитель
        c: Делитель (ненулевой)
        rounding: Режим округления, опционально с флагом PASS_MINMAX

    Returns:
        Округлённое a · b / c

    Raises:
        RationalDivisionByZero: Если c == 0
        TypeError: Если аргументы не int
        ValueError: Если режим округления неизвестен

    Examples:
        >>> rescale_rnd(1024, 44100, 48000, Rounding.UP)
        941
        >>> rescale_rnd(1024, 44100, 48000, Rounding.DOWN)
        940
    """
    a = validate_int(a, "a")
    b = validate_int(b, "b")
    c = validate_int(c, "c")

    if c == 0:
        raise RationalDivisionByZero(f"Division by zero in rescale: {a} * {b} / 0")

    base, pass_minmax = split_rounding(rounding)
    if pass_minmax and is_sentinel(a):
        return a

    return round_quotient(a * b, c, base)


def rescale(a: int, b: Any, c: Any, rounding: int = Rounding.NEAR_INF) -> int:
    """
    Перевод значения из единиц timebase b в единицы timebase c.

    Вычисляет a · (b.num/b.den) · (c.den/c.num) точно и округляет один раз.

    Args:
        a: Значение в тиках timebase b
        b: Исходный timebase (Rational или rational-подобное значение)
        c: Целевой timebase
        rounding: Режим округления, опционально с флагом PASS_MINMAX

    Returns:
        Значение в тиках timebase c

    Raises:
        RationalDivisionByZero: Если c.num == 0 или b.den == 0
        TypeError: Если a не int
        ValueError: Если режим округления неизвестен

    Examples:
        >>> rescale(90000, Rational(1, 90000), Rational(1, 1000))
        1000
        >>> rescale(3, Rational(1, 1), Rational(2, 1), Rounding.ZERO)
        1
    """
    a = validate_int(a, "a")
    b, c = as_rational(b), as_rational(c)

    if c.num == 0 or b.den == 0:
        raise RationalDivisionByZero(f"Division by zero in rescale: {b} -> {c}")

    base, pass_minmax = split_rounding(rounding)
    if pass_minmax and is_sentinel(a):
        logger.debug("rescale: sentinel %d passed through (%s -> %s)", a, b, c)
        return a

    numerator = a * b.num * c.den
    denominator = b.den * c.num
    return round_quotient(numerator, denominator, base)


def rescale_timestamp(ts: int | None, src_time_base: Any, dst_time_base: Any) -> int:
    """
    Рескейлинг временной метки с округлением NEAR_INF.

    None трактуется как NOPTS_VALUE (INT64_MIN) и рескейлится как обычное
    значение; для сохранения sentinel используйте rescale с PASS_MINMAX.

    Examples:
        >>> rescale_timestamp(450000, Rational(1, 90000), Rational(1, 1000))
        5000
    """
    if ts is None:
        ts = NOPTS_VALUE
    return rescale(ts, src_time_base, dst_time_base, Rounding.NEAR_INF)


# =============================================================================
# СРАВНЕНИЕ
# =============================================================================


def compare_timestamps(ts1: int | None, tb1: Any, ts2: int | None, tb2: Any) -> int:
    """
    Точное сравнение двух меток в разных timebase без промежуточного рескейлинга.

    Сравниваются ts1·tb1.num·tb2.den и ts2·tb2.num·tb1.den; знак произведения
    знаменателей учитывается. None трактуется как NOPTS_VALUE.

    Returns:
        -1 если ts1 < ts2, 0 если равны, 1 если ts1 > ts2

    Examples:
        >>> compare_timestamps(1, Rational(1, 2), 2, Rational(1, 4))
        0
        >>> compare_timestamps(1, Rational(1, 2), 3, Rational(1, 4))
        -1
    """
    ts1 = NOPTS_VALUE if ts1 is None else validate_int(ts1, "ts1")
    ts2 = NOPTS_VALUE if ts2 is None else validate_int(ts2, "ts2")
    tb1, tb2 = as_rational(tb1), as_rational(tb2)

    left = ts1 * tb1.num * tb2.den
    right = ts2 * tb2.num * tb1.den
    return three_way_compare(left, right) * sign(tb1.den * tb2.den)
