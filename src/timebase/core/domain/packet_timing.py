"""
PacketTiming — Временные поля пакета

Immutable Pydantic модель: pts, dts, duration и timebase, в котором они
выражены. Потребитель rescale-движка на стороне контейнеров и кодеков.

Рескейлинг (как av_packet_rescale_ts):
- pts/dts == NOPTS_VALUE сохраняются без изменений
- duration рескейлится только если > 0
- результат вне int64 становится NOPTS_VALUE (как av_rescale_rnd при переполнении)
- при совпадающих (по полям) timebase возвращается тот же экземпляр
"""

import logging
from typing import Any

from pydantic import BaseModel, Field, StrictInt, ValidationInfo, field_validator

from timebase.core.math.integer_safeguards import NOPTS_VALUE, is_int64, validate_int64
from timebase.core.math.rational import Rational, as_rational
from timebase.core.math.rescale import compare_timestamps, rescale_timestamp
from timebase.core.domain.timestamp import ts_to_time_str

logger = logging.getLogger(__name__)


def _rescale_field(value: int, src: Rational, dst: Rational) -> int:
    """Рескейлинг одного поля; переполнение int64 → NOPTS_VALUE."""
    result = rescale_timestamp(value, src, dst)
    if not is_int64(result):
        logger.debug("rescaled value %d overflows int64 (%s -> %s)", value, src, dst)
        return NOPTS_VALUE
    return result


class PacketTiming(BaseModel):
    """
    Временные поля пакета в его timebase.

    Все изменения создают новый экземпляр (frozen=True).
    """

    pts: StrictInt = Field(NOPTS_VALUE, description="Presentation timestamp (NOPTS_VALUE если нет)")
    dts: StrictInt = Field(NOPTS_VALUE, description="Decoding timestamp (NOPTS_VALUE если нет)")
    duration: StrictInt = Field(0, description="Длительность в тиках (0 если неизвестна)")
    time_base: Rational = Field(..., description="Timebase, в котором выражены pts/dts/duration")

    model_config = {"frozen": True}  # Immutable

    @field_validator("pts", "dts", "duration")
    @classmethod
    def validate_int64_range(cls, v: int, info: ValidationInfo) -> int:
        """Метки и длительность — 64-битные знаковые целые."""
        return validate_int64(v, info.field_name)

    @field_validator("time_base", mode="before")
    @classmethod
    def coerce_time_base(cls, v: Any) -> Rational:
        """Timebase принимается в любой rational-подобной форме ("1/90000", {"num", "den"})."""
        try:
            return as_rational(v)
        except TypeError as exc:
            raise ValueError(str(exc)) from exc

    @property
    def has_pts(self) -> bool:
        return self.pts != NOPTS_VALUE

    @property
    def has_dts(self) -> bool:
        return self.dts != NOPTS_VALUE

    def rescale_ts(self, dst_time_base: Any) -> "PacketTiming":
        """
        Перевод pts/dts/duration в dst_time_base.

        Args:
            dst_time_base: Целевой timebase

        Returns:
            Новый PacketTiming (или self, если timebase совпадает по полям)

        Examples:
            >>> p = PacketTiming(pts=90000, dts=90000, duration=3600, time_base=Rational(1, 90000))
            >>> q = p.rescale_ts(Rational(1, 1000))
            >>> (q.pts, q.dts, q.duration)
            (1000, 1000, 40)
        """
        dst = as_rational(dst_time_base)
        src = self.time_base

        # Только если timebase действительно различаются
        if src.as_tuple() == dst.as_tuple():
            return self

        pts = _rescale_field(self.pts, src, dst) if self.has_pts else NOPTS_VALUE
        dts = _rescale_field(self.dts, src, dst) if self.has_dts else NOPTS_VALUE
        duration = _rescale_field(self.duration, src, dst) if self.duration > 0 else self.duration

        logger.debug("packet timing rescaled %s -> %s: pts=%d dts=%d", src, dst, pts, dts)
        return PacketTiming(pts=pts, dts=dts, duration=duration, time_base=dst)

    def compare_dts(self, other: "PacketTiming") -> int:
        """
        Порядок двух пакетов по dts (для interleaving потоков с разными timebase).

        Отсутствующий dts (NOPTS_VALUE) меньше любого существующего в любом
        timebase; два отсутствующих dts равны.

        Returns:
            -1, 0 или 1
        """
        if not self.has_dts or not other.has_dts:
            return int(self.has_dts) - int(other.has_dts)
        return compare_timestamps(self.dts, self.time_base, other.dts, other.time_base)

    def pts_time_str(self) -> str:
        """pts в секундах ("NOPTS" если отсутствует)."""
        return ts_to_time_str(self.pts, self.time_base)
