"""
Rational Arithmetic — Элементарные операции над дробями

Сложение, вычитание, умножение и деление работают только с парами
числитель/знаменатель и НЕ редуцируют результат:

    add(a, b)      = (a.num·b.den + b.num·a.den) / (a.den·b.den)
    subtract(a, b) = (a.num·b.den − b.num·a.den) / (a.den·b.den)
    multiply(a, b) = (a.num·b.num) / (a.den·b.den)
    divide(a, b)   = (a.num·b.den) / (a.den·b.num)

Нередуцированный результат совпадает бит-в-бит с эталонными векторами
(add(1/2, 1/2) == 4/4, а не 1/1). Каноническая форма — только явно,
через reduce_rational.
"""

from typing import Any

from timebase.core.math.integer_safeguards import sign, three_way_compare
from timebase.core.math.rational import Rational, RationalDivisionByZero, as_rational


def add_rationals(a: Any, b: Any) -> Rational:
    """
    Сумма двух дробей без редукции.

    Examples:
        >>> add_rationals(Rational(1, 2), Rational(1, 3))
        Rational(num=5, den=6)
        >>> add_rationals(Rational(1, 2), Rational(1, 2))
        Rational(num=4, den=4)
    """
    a, b = as_rational(a), as_rational(b)
    return Rational(a.num * b.den + b.num * a.den, a.den * b.den)


def subtract_rationals(a: Any, b: Any) -> Rational:
    """
    Разность двух дробей без редукции.

    Examples:
        >>> subtract_rationals(Rational(3, 4), Rational(1, 4))
        Rational(num=8, den=16)
    """
    a, b = as_rational(a), as_rational(b)
    return Rational(a.num * b.den - b.num * a.den, a.den * b.den)


def multiply_rationals(a: Any, b: Any) -> Rational:
    """Произведение двух дробей без редукции."""
    a, b = as_rational(a), as_rational(b)
    return Rational(a.num * b.num, a.den * b.den)


def divide_rationals(a: Any, b: Any) -> Rational:
    """
    Частное двух дробей без редукции.

    Raises:
        RationalDivisionByZero: Если b.num == 0
    """
    a, b = as_rational(a), as_rational(b)
    if b.num == 0:
        raise RationalDivisionByZero(f"Division by zero: {a} / {b}")
    return Rational(a.num * b.den, a.den * b.num)


def invert_rational(a: Any) -> Rational:
    """
    Обратная дробь den/num (например, frame rate → длительность кадра).

    Raises:
        RationalDivisionByZero: Если a.num == 0
    """
    a = as_rational(a)
    if a.num == 0:
        raise RationalDivisionByZero(f"Cannot invert zero rational {a}")
    return Rational(a.den, a.num)


def reduce_rational(a: Any) -> Rational:
    """Явная GCD-редукция с положительным знаменателем."""
    return as_rational(a).reduced()


def compare_rationals(a: Any, b: Any) -> int:
    """
    Трёхзначное сравнение дробей по значению (cross-multiplication).

    Знак произведения знаменателей учитывается, поэтому результат верен и
    для отрицательных знаменателей.

    Returns:
        -1 если a < b, 0 если a == b (по значению), 1 если a > b

    Examples:
        >>> compare_rationals(Rational(2, 4), Rational(1, 2))
        0
        >>> compare_rationals(Rational(1, 3), Rational(1, 2))
        -1
    """
    a, b = as_rational(a), as_rational(b)
    return three_way_compare(a.num * b.den, b.num * a.den) * sign(a.den * b.den)
