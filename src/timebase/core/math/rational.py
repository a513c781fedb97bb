"""
Rational — Точная дробь num/den

Immutable Pydantic модель для timebase, frame rate, aspect ratio и других
дробных величин, где float недопустим.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. den != 0 (нарушение → RationalDivisionByZero при создании)
2. Никакой автоматической GCD-редукции: Rational(2, 4) и Rational(1, 2) —
   разные значения для == (сравнение по полям)
3. Сравнение по значению — только через cross-multiplication (equals)
4. Любая операция возвращает новый экземпляр (frozen=True)
"""

import math
import re
from collections.abc import Mapping
from fractions import Fraction
from typing import Any

from pydantic import BaseModel, Field, StrictInt, model_validator

# Формат "num/den" или "num:den" (как в ffmpeg CLI, например "30000:1001")
_RATIONAL_RE = re.compile(r"^\s*([+-]?\d+)\s*(?:[/:]\s*([+-]?\d+)\s*)?$")


# =============================================================================
# EXCEPTIONS
# =============================================================================


class RationalDivisionByZero(ZeroDivisionError):
    """
    Деление на ноль в рациональной арифметике.

    Возникает при:
    - создании Rational с den == 0
    - rescale с нулевым числителем целевого timebase или нулевым
      знаменателем исходного timebase
    - делении на Rational с нулевым числителем
    """

    pass


# =============================================================================
# RATIONAL MODEL
# =============================================================================


class Rational(BaseModel):
    """
    Точная дробь num/den.

    Используется как timebase (1/90000), frame rate (30000/1001) и т.п.

    Examples:
        >>> tb = Rational(1, 90000)
        >>> str(tb)
        '1/90000'
        >>> Rational(2, 4) == Rational(1, 2)
        False
        >>> Rational(2, 4).equals(Rational(1, 2))
        True
    """

    num: StrictInt = Field(..., description="Числитель")
    den: StrictInt = Field(..., description="Знаменатель (ненулевой, обычно положительный)")

    model_config = {"frozen": True}  # Immutable

    def __init__(self, num: int, den: int) -> None:
        super().__init__(num=num, den=den)

    @model_validator(mode="after")
    def validate_denominator(self) -> "Rational":
        """Знаменатель не может быть нулём."""
        if self.den == 0:
            raise RationalDivisionByZero(f"Denominator cannot be zero: {self.num}/{self.den}")
        return self

    def __str__(self) -> str:
        return f"{self.num}/{self.den}"

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def parse(cls, text: str) -> "Rational":
        """
        Разбор строки "num/den", "num:den" или "num" (den = 1).

        Args:
            text: Строковое представление дроби

        Returns:
            Rational без редукции

        Raises:
            ValueError: Если строка не является дробью
            RationalDivisionByZero: Если знаменатель равен нулю

        Examples:
            >>> Rational.parse("30000:1001")
            Rational(num=30000, den=1001)
        """
        match = _RATIONAL_RE.match(text)
        if match is None:
            raise ValueError(f"Invalid rational string: {text!r}")

        num = int(match.group(1))
        den = int(match.group(2)) if match.group(2) is not None else 1
        return cls(num, den)

    @classmethod
    def from_fraction(cls, value: Fraction) -> "Rational":
        """Rational из fractions.Fraction (уже редуцированной)."""
        return cls(value.numerator, value.denominator)

    # -------------------------------------------------------------------------
    # Преобразования
    # -------------------------------------------------------------------------

    def to_fraction(self) -> Fraction:
        """Значение как fractions.Fraction (редуцированное, den > 0)."""
        return Fraction(self.num, self.den)

    def as_tuple(self) -> tuple[int, int]:
        """Пара (num, den) без изменений."""
        return self.num, self.den

    def reduced(self) -> "Rational":
        """
        Явная редукция по GCD с нормализацией знака (den > 0).

        Examples:
            >>> Rational(4, -8).reduced()
            Rational(num=-1, den=2)
        """
        divisor = math.gcd(self.num, self.den)
        num, den = self.num // divisor, self.den // divisor
        if den < 0:
            num, den = -num, -den
        return Rational(num, den)

    def equals(self, other: "Rational") -> bool:
        """
        Равенство по значению (cross-multiplication): a/b == c/d ⇔ a·d == c·b.

        В отличие от ==, не зависит от редукции.
        """
        return self.num * other.den == other.num * self.den


# =============================================================================
# КОЭРЦИЯ
# =============================================================================


def as_rational(value: Any) -> Rational:
    """
    Приведение rational-подобного значения к Rational.

    Поддерживаемые формы:
    - Rational (возвращается как есть)
    - fractions.Fraction
    - строка "num/den" / "num:den"
    - Mapping с ключами "num" и "den" (JSON-форма)
    - пара (num, den)
    - объект с атрибутами num и den

    Raises:
        TypeError: Если значение не похоже на дробь
        ValueError: Если строка/словарь невалидны
        RationalDivisionByZero: Если den == 0
    """
    if isinstance(value, Rational):
        return value

    if isinstance(value, Fraction):
        return Rational.from_fraction(value)

    if isinstance(value, str):
        return Rational.parse(value)

    if isinstance(value, Mapping):
        return Rational.model_validate(dict(value))

    if isinstance(value, (tuple, list)):
        if len(value) != 2:
            raise ValueError(f"Rational pair must have exactly 2 items, got {len(value)}")
        return Rational(value[0], value[1])

    if hasattr(value, "num") and hasattr(value, "den"):
        return Rational(value.num, value.den)

    raise TypeError(f"Cannot interpret {type(value).__name__} as Rational: {value!r}")
