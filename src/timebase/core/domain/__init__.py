"""
Domain models and value objects.

Contains timing consumers of the rescale engine: unit conversions,
timestamp strings, and packet timing.
"""

from timebase.core.domain.packet_timing import PacketTiming
from timebase.core.domain.timestamp import (
    DEFAULT_TIME_FORMAT,
    TimeFormatConfig,
    is_nopts,
    ts_to_str,
    ts_to_time_str,
)
from timebase.core.domain.units import (
    MPEG_TS_TIME_BASE_Q,
    MS_TIME_BASE_Q,
    frame_duration_ts,
    frame_index_to_ts,
    ms_to_ts,
    samples_to_ts,
    ts_to_ms,
    ts_to_us,
    us_to_ts,
)

__all__ = [
    # Units module
    "MS_TIME_BASE_Q",
    "MPEG_TS_TIME_BASE_Q",
    "ts_to_us",
    "us_to_ts",
    "ts_to_ms",
    "ms_to_ts",
    "frame_duration_ts",
    "frame_index_to_ts",
    "samples_to_ts",
    # Timestamp strings
    "DEFAULT_TIME_FORMAT",
    "TimeFormatConfig",
    "is_nopts",
    "ts_to_str",
    "ts_to_time_str",
    # Packet timing model
    "PacketTiming",
]
