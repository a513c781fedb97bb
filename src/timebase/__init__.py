"""
timebase — точная рациональная арифметика и рескейлинг временных меток.

Метки и длительности — целые "тики" произвольного rational timebase
(1/90000, 1/25, ...). Пакет переводит их между timebase, сравнивает и
комбинирует без потери точности и без переполнения, с политиками
округления в соглашениях FFmpeg.
"""

from timebase.core.domain import (
    MPEG_TS_TIME_BASE_Q,
    MS_TIME_BASE_Q,
    PacketTiming,
    TimeFormatConfig,
    frame_duration_ts,
    frame_index_to_ts,
    ms_to_ts,
    samples_to_ts,
    ts_to_ms,
    ts_to_str,
    ts_to_time_str,
    ts_to_us,
    us_to_ts,
)
from timebase.core.math import (
    INT64_MAX,
    INT64_MIN,
    NOPTS_VALUE,
    TIME_BASE,
    TIME_BASE_Q,
    Rational,
    RationalDivisionByZero,
    Rounding,
    add_rationals,
    as_rational,
    compare_rationals,
    compare_timestamps,
    divide_rationals,
    invert_rational,
    multiply_rationals,
    reduce_rational,
    rescale,
    rescale_rnd,
    rescale_timestamp,
    subtract_rationals,
)

__version__ = "0.1.0"

__all__ = [
    # Constants
    "INT64_MAX",
    "INT64_MIN",
    "NOPTS_VALUE",
    "TIME_BASE",
    "TIME_BASE_Q",
    "MS_TIME_BASE_Q",
    "MPEG_TS_TIME_BASE_Q",
    # Types
    "Rational",
    "RationalDivisionByZero",
    "Rounding",
    "PacketTiming",
    "TimeFormatConfig",
    # Rescale engine
    "rescale",
    "rescale_rnd",
    "rescale_timestamp",
    "compare_timestamps",
    # Rational arithmetic
    "as_rational",
    "add_rationals",
    "subtract_rationals",
    "multiply_rationals",
    "divide_rationals",
    "invert_rational",
    "reduce_rational",
    "compare_rationals",
    # Units & strings
    "ts_to_us",
    "us_to_ts",
    "ts_to_ms",
    "ms_to_ts",
    "frame_duration_ts",
    "frame_index_to_ts",
    "samples_to_ts",
    "ts_to_str",
    "ts_to_time_str",
]
