"""
Тесты для модели Rational

Проверяет:
1. Создание и валидацию (den != 0, строгие int)
2. Immutability (frozen=True) и hashability
3. Равенство по полям vs равенство по значению
4. Разбор строк, Fraction, коэрцию rational-подобных значений
5. Сериализацию JSON
"""

import json
from fractions import Fraction
from types import SimpleNamespace

import pytest
from pydantic import ValidationError

from timebase.core.math import Rational, RationalDivisionByZero, as_rational


class TestRationalCreation:
    """Тесты создания Rational"""

    def test_positional_and_keyword(self) -> None:
        """Позиционные и именованные аргументы"""
        r = Rational(1, 2)
        assert r.num == 1
        assert r.den == 2
        assert Rational(num=1, den=2) == r

    def test_negative_components_kept_as_is(self) -> None:
        """Знаки не нормализуются при создании"""
        assert Rational(-1, 2).as_tuple() == (-1, 2)
        assert Rational(1, -2).as_tuple() == (1, -2)
        assert Rational(-1, -2).as_tuple() == (-1, -2)

    def test_zero_numerator(self) -> None:
        r = Rational(0, 1)
        assert r.num == 0
        assert r.to_fraction() == 0

    def test_zero_denominator_raises(self) -> None:
        """den == 0 → деление на ноль"""
        with pytest.raises(ZeroDivisionError, match="Denominator cannot be zero"):
            Rational(1, 0)

    def test_zero_denominator_via_model_validate_raises(self) -> None:
        """Проверка работает и при валидации словаря"""
        with pytest.raises(RationalDivisionByZero):
            Rational.model_validate({"num": 1, "den": 0})

    def test_large_components(self) -> None:
        """Компоненты не ограничены 32 битами"""
        r = Rational(2**40, 1001)
        assert r.num == 2**40

    @pytest.mark.parametrize("bad", [1.5, "1", True, None])
    def test_non_int_rejected(self, bad: object) -> None:
        """Строгие int: float, str, bool, None отклоняются"""
        with pytest.raises(ValidationError):
            Rational(bad, 2)
        with pytest.raises(ValidationError):
            Rational(1, bad)

    def test_immutable(self) -> None:
        """Rational должен быть immutable (frozen=True)"""
        r = Rational(1, 25)
        with pytest.raises(ValidationError):
            r.num = 2  # type: ignore[misc]


class TestRationalEquality:
    """Тесты равенства"""

    def test_field_equality_distinguishes_unreduced(self) -> None:
        """2/4 и 1/2 — разные значения для =="""
        assert Rational(2, 4) != Rational(1, 2)
        assert Rational(1, 2) == Rational(1, 2)

    def test_value_equality_by_cross_multiplication(self) -> None:
        """equals: a·d == c·b"""
        assert Rational(2, 4).equals(Rational(1, 2))
        assert Rational(-1, -2).equals(Rational(1, 2))
        assert Rational(1, -2).equals(Rational(-1, 2))
        assert not Rational(3, 4).equals(Rational(1, 2))

    def test_hashable(self) -> None:
        """Можно использовать как ключ словаря"""
        lookup = {Rational(1, 90000): "mpegts", Rational(1, 1000): "ms"}
        assert lookup[Rational(1, 90000)] == "mpegts"


class TestRationalConversions:
    """Тесты преобразований"""

    def test_str(self) -> None:
        assert str(Rational(30000, 1001)) == "30000/1001"
        assert f"Timebase: {Rational(1, 90000)}" == "Timebase: 1/90000"

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("1/90000", (1, 90000)),
            ("30000:1001", (30000, 1001)),
            (" -1 / 2 ", (-1, 2)),
            ("25", (25, 1)),
            ("2/4", (2, 4)),
        ],
    )
    def test_parse(self, text: str, expected: tuple[int, int]) -> None:
        """Разбор без редукции"""
        assert Rational.parse(text).as_tuple() == expected

    @pytest.mark.parametrize("text", ["", "1/", "a/b", "1.5/2", "1/2/3"])
    def test_parse_invalid(self, text: str) -> None:
        with pytest.raises(ValueError, match="Invalid rational string"):
            Rational.parse(text)

    def test_parse_zero_denominator(self) -> None:
        with pytest.raises(ZeroDivisionError):
            Rational.parse("1/0")

    def test_fraction_round_trip(self) -> None:
        """Fraction всегда редуцирована"""
        assert Rational(2, 4).to_fraction() == Fraction(1, 2)
        assert Rational.from_fraction(Fraction(2, 4)) == Rational(1, 2)

    def test_reduced(self) -> None:
        """Явная редукция с положительным знаменателем"""
        assert Rational(4, 4).reduced() == Rational(1, 1)
        assert Rational(6, -9).reduced() == Rational(-2, 3)
        assert Rational(0, -5).reduced() == Rational(0, 1)
        assert Rational(1, 90000).reduced() == Rational(1, 90000)

    def test_json_serialization(self) -> None:
        r = Rational(30000, 1001)
        data = json.loads(r.model_dump_json())
        assert data == {"num": 30000, "den": 1001}
        assert Rational.model_validate(data) == r


class TestAsRational:
    """Тесты коэрции rational-подобных значений"""

    def test_rational_returned_as_is(self) -> None:
        r = Rational(1, 25)
        assert as_rational(r) is r

    def test_supported_forms(self) -> None:
        expected = Rational(1, 25)
        assert as_rational((1, 25)) == expected
        assert as_rational([1, 25]) == expected
        assert as_rational({"num": 1, "den": 25}) == expected
        assert as_rational("1/25") == expected
        assert as_rational(Fraction(1, 25)) == expected
        assert as_rational(SimpleNamespace(num=1, den=25)) == expected

    def test_wrong_pair_length(self) -> None:
        with pytest.raises(ValueError, match="exactly 2 items"):
            as_rational((1, 2, 3))

    def test_unsupported_type(self) -> None:
        with pytest.raises(TypeError, match="Cannot interpret"):
            as_rational(0.04)

    def test_zero_denominator_mapping(self) -> None:
        with pytest.raises(ZeroDivisionError):
            as_rational({"num": 1, "den": 0})
