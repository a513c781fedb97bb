"""
Timestamp strings — Строковое представление временных меток

- ts_to_str: метка как целое ("NOPTS" для отсутствующей)
- ts_to_time_str: метка в секундах с фиксированным числом знаков

Секунды вычисляются точно: метка рескейлится в timebase 1/10^decimals,
после чего целая и дробная части форматируются как целые числа.
"""

from dataclasses import dataclass
from typing import Any, Optional

from timebase.core.math.integer_safeguards import NOPTS_VALUE, validate_int
from timebase.core.math.rational import Rational
from timebase.core.math.rescale import Rounding, rescale


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class TimeFormatConfig:
    """Конфигурация форматирования временных меток."""

    # Количество знаков после точки в ts_to_time_str
    decimals: int = 6

    # Представление отсутствующей метки (None / NOPTS_VALUE)
    nopts_label: str = "NOPTS"

    def __post_init__(self) -> None:
        validate_int(self.decimals, "decimals")
        if self.decimals < 0:
            raise ValueError(f"decimals must be non-negative, got {self.decimals}")


DEFAULT_TIME_FORMAT = TimeFormatConfig()


# =============================================================================
# ФОРМАТИРОВАНИЕ
# =============================================================================


def is_nopts(ts: Optional[int]) -> bool:
    """True если метка отсутствует (None или NOPTS_VALUE)."""
    return ts is None or ts == NOPTS_VALUE


def ts_to_str(ts: Optional[int], config: TimeFormatConfig = DEFAULT_TIME_FORMAT) -> str:
    """
    Метка как строка.

    Examples:
        >>> ts_to_str(123456)
        '123456'
        >>> ts_to_str(None)
        'NOPTS'
    """
    if is_nopts(ts):
        return config.nopts_label
    return str(validate_int(ts, "ts"))


def ts_to_time_str(
    ts: Optional[int],
    time_base: Any,
    config: TimeFormatConfig = DEFAULT_TIME_FORMAT,
) -> str:
    """
    Метка в секундах, например "5.000000".

    Округление последнего знака — NEAR_INF (половины от нуля).

    Args:
        ts: Метка в тиках time_base (None → NOPTS)
        time_base: Timebase метки; None → ts_to_str
        config: Параметры форматирования

    Returns:
        Строка секунд с config.decimals знаками после точки

    Examples:
        >>> ts_to_time_str(450000, Rational(1, 90000))
        '5.000000'
        >>> ts_to_time_str(-1, Rational(1, 1000), TimeFormatConfig(decimals=3))
        '-0.001'
    """
    if is_nopts(ts):
        return config.nopts_label
    if time_base is None:
        return ts_to_str(ts, config)

    scale = 10**config.decimals
    ticks = rescale(ts, time_base, Rational(1, scale), Rounding.NEAR_INF)

    sign = "-" if ticks < 0 else ""
    whole, frac = divmod(abs(ticks), scale)
    if config.decimals == 0:
        return f"{sign}{whole}"
    return f"{sign}{whole}.{frac:0{config.decimals}d}"
