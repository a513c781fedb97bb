"""
Units — Централизованный модуль конверсии единиц времени

Единственный допустимый способ преобразований между:
- тиками произвольного timebase
- микросекундами (TIME_BASE_Q, внутренний timebase высокого разрешения)
- миллисекундами
- кадрами (frame rate) и аудио-сэмплами (sample rate)

ЗАПРЕЩЕНО переводить метки через float (секунды как float теряют точность).
Все конверсии — через rescale с явной политикой округления.
"""

from typing import Any, Final

from timebase.core.math.arithmetic import invert_rational
from timebase.core.math.integer_safeguards import validate_int
from timebase.core.math.rational import Rational, as_rational
from timebase.core.math.rescale import TIME_BASE_Q, Rounding, rescale, rescale_timestamp

# =============================================================================
# РАСПРОСТРАНЁННЫЕ TIMEBASE
# =============================================================================

# Миллисекунды (FLV, Matroska по умолчанию)
MS_TIME_BASE_Q: Final[Rational] = Rational(1, 1000)

# 90 kHz (MPEG-TS, RTP video)
MPEG_TS_TIME_BASE_Q: Final[Rational] = Rational(1, 90000)


# =============================================================================
# БАЗОВЫЕ КОНВЕРТЕРЫ
# =============================================================================


def ts_to_us(ts: int, time_base: Any) -> int:
    """
    Конверсия: тики time_base → микросекунды.

    Examples:
        >>> ts_to_us(90000, MPEG_TS_TIME_BASE_Q)
        1000000
    """
    return rescale_timestamp(ts, time_base, TIME_BASE_Q)


def us_to_ts(us: int, time_base: Any) -> int:
    """Конверсия: микросекунды → тики time_base."""
    return rescale_timestamp(us, TIME_BASE_Q, time_base)


def ts_to_ms(ts: int, time_base: Any) -> int:
    """Конверсия: тики time_base → миллисекунды."""
    return rescale_timestamp(ts, time_base, MS_TIME_BASE_Q)


def ms_to_ts(ms: int, time_base: Any) -> int:
    """
    Конверсия: миллисекунды → тики time_base.

    Examples:
        >>> ms_to_ts(40, MPEG_TS_TIME_BASE_Q)
        3600
    """
    return rescale_timestamp(ms, MS_TIME_BASE_Q, time_base)


# =============================================================================
# КАДРЫ И СЭМПЛЫ
# =============================================================================


def frame_duration_ts(frame_rate: Any, time_base: Any) -> int:
    """
    Длительность одного кадра в тиках time_base.

    Формула: rescale(1, 1/frame_rate, time_base)

    Args:
        frame_rate: Частота кадров (например, 30000/1001)
        time_base: Timebase потока

    Returns:
        Длительность кадра (NEAR_INF)

    Raises:
        RationalDivisionByZero: Если frame_rate == 0

    Examples:
        >>> frame_duration_ts(Rational(25, 1), MPEG_TS_TIME_BASE_Q)
        3600
        >>> frame_duration_ts(Rational(30000, 1001), MPEG_TS_TIME_BASE_Q)
        3003
    """
    return rescale(1, invert_rational(frame_rate), time_base, Rounding.NEAR_INF)


def frame_index_to_ts(index: int, frame_rate: Any, time_base: Any) -> int:
    """
    Метка начала кадра с номером index.

    Вычисляется от нуля, а не накоплением frame_duration_ts, поэтому ошибка
    округления не растёт с номером кадра.
    """
    index = validate_int(index, "index")
    return rescale(index, invert_rational(frame_rate), time_base, Rounding.NEAR_INF)


def samples_to_ts(nb_samples: int, sample_rate: int, time_base: Any) -> int:
    """
    Длительность nb_samples аудио-сэмплов в тиках time_base.

    Examples:
        >>> samples_to_ts(1024, 48000, MPEG_TS_TIME_BASE_Q)
        1920
    """
    nb_samples = validate_int(nb_samples, "nb_samples")
    sample_rate = validate_int(sample_rate, "sample_rate")
    if sample_rate <= 0:
        raise ValueError(f"sample_rate must be positive, got {sample_rate}")

    return rescale(nb_samples, Rational(1, sample_rate), as_rational(time_base), Rounding.NEAR_INF)
