"""
Тесты для модели PacketTiming

Проверяет:
1. Создание и валидацию (int64, строгие int, коэрцию timebase)
2. Рескейлинг pts/dts/duration с сохранением NOPTS
3. Immutability (frozen=True)
4. Порядок пакетов по dts между timebase
"""

import pytest
from pydantic import ValidationError

from timebase.core.domain import PacketTiming
from timebase.core.math import INT64_MAX, INT64_MIN, NOPTS_VALUE, Rational

MPEG_TS = Rational(1, 90000)
MS = Rational(1, 1000)


class TestPacketTimingCreation:
    """Тесты создания PacketTiming"""

    def test_defaults(self) -> None:
        """pts/dts отсутствуют, длительность неизвестна"""
        packet = PacketTiming(time_base=MPEG_TS)
        assert packet.pts == NOPTS_VALUE
        assert packet.dts == NOPTS_VALUE
        assert packet.duration == 0
        assert not packet.has_pts
        assert not packet.has_dts

    def test_time_base_coercion(self) -> None:
        """Timebase в JSON-форме или строкой"""
        assert PacketTiming(time_base="1/90000").time_base == MPEG_TS
        assert PacketTiming(time_base={"num": 1, "den": 90000}).time_base == MPEG_TS

    def test_invalid_time_base(self) -> None:
        with pytest.raises(ValidationError):
            PacketTiming(time_base=0.001)

    def test_out_of_int64_range(self) -> None:
        with pytest.raises(ValidationError):
            PacketTiming(pts=INT64_MAX + 1, time_base=MPEG_TS)

    def test_float_timestamp_rejected(self) -> None:
        with pytest.raises(ValidationError):
            PacketTiming(pts=1.0, time_base=MPEG_TS)

    def test_immutable(self) -> None:
        """PacketTiming должен быть immutable (frozen=True)"""
        packet = PacketTiming(pts=0, time_base=MPEG_TS)
        with pytest.raises(ValidationError):
            packet.pts = 1  # type: ignore[misc]


class TestPacketTimingRescale:
    """Тесты rescale_ts"""

    def test_rescale_90k_to_ms(self) -> None:
        """1 секунда при 90 kHz → 1000 ms, 40 ms длительность"""
        packet = PacketTiming(pts=90000, dts=90000, duration=3600, time_base=MPEG_TS)
        result = packet.rescale_ts(MS)
        assert (result.pts, result.dts, result.duration) == (1000, 1000, 40)
        assert result.time_base == MS

    def test_original_unchanged(self) -> None:
        packet = PacketTiming(pts=90000, dts=90000, duration=3600, time_base=MPEG_TS)
        packet.rescale_ts(MS)
        assert packet.pts == 90000
        assert packet.time_base == MPEG_TS

    def test_nopts_preserved(self) -> None:
        """NOPTS pts/dts не рескейлятся"""
        packet = PacketTiming(pts=90000, duration=3600, time_base=MPEG_TS)
        result = packet.rescale_ts(MS)
        assert result.pts == 1000
        assert result.dts == NOPTS_VALUE

    @pytest.mark.parametrize("duration", [0, -1])
    def test_non_positive_duration_unchanged(self, duration: int) -> None:
        packet = PacketTiming(pts=90000, dts=90000, duration=duration, time_base=MPEG_TS)
        assert packet.rescale_ts(MS).duration == duration

    def test_same_time_base_returns_self(self) -> None:
        """Совпадающий по полям timebase — без рескейлинга"""
        packet = PacketTiming(pts=1, dts=1, time_base=MPEG_TS)
        assert packet.rescale_ts(Rational(1, 90000)) is packet
        assert packet.rescale_ts("1/90000") is packet

    def test_equal_value_time_base_still_rescaled(self) -> None:
        """2/180000 — другая пара полей: новый экземпляр с тем же значением"""
        packet = PacketTiming(pts=90000, dts=90000, time_base=MPEG_TS)
        result = packet.rescale_ts(Rational(2, 180000))
        assert result is not packet
        assert result.pts == 90000
        assert result.time_base == Rational(2, 180000)

    def test_rounding_is_near_inf(self) -> None:
        """1 тик 90 kHz (0.0111 ms) → 0 ms; 45 тиков (0.5 ms) → 1 ms"""
        assert PacketTiming(pts=1, time_base=MPEG_TS).rescale_ts(MS).pts == 0
        assert PacketTiming(pts=45, time_base=MPEG_TS).rescale_ts(MS).pts == 1

    def test_overflow_to_finer_time_base_becomes_nopts(self) -> None:
        """Результат вне int64 → NOPTS_VALUE, а не ошибка валидации"""
        packet = PacketTiming(pts=INT64_MAX // 10, dts=0, duration=1, time_base=Rational(1, 1))
        result = packet.rescale_ts(MS)
        assert result.pts == NOPTS_VALUE
        assert not result.has_pts
        assert result.dts == 0
        assert result.duration == 1000

    def test_negative_overflow_becomes_nopts(self) -> None:
        packet = PacketTiming(dts=INT64_MIN + 1, duration=INT64_MAX, time_base=Rational(1, 1))
        result = packet.rescale_ts(MPEG_TS)
        assert result.dts == NOPTS_VALUE
        assert result.duration == NOPTS_VALUE


class TestPacketTimingOrdering:
    """Тесты порядка по dts и форматирования"""

    def test_compare_dts_across_time_bases(self) -> None:
        a = PacketTiming(dts=90000, time_base=MPEG_TS)
        b = PacketTiming(dts=1000, time_base=MS)
        c = PacketTiming(dts=1001, time_base=MS)
        assert a.compare_dts(b) == 0
        assert a.compare_dts(c) == -1
        assert c.compare_dts(a) == 1

    def test_missing_dts_sorts_first(self) -> None:
        missing = PacketTiming(time_base=MS)
        present = PacketTiming(dts=0, time_base=MS)
        assert missing.compare_dts(present) == -1

    def test_missing_dts_sorts_first_across_time_bases(self) -> None:
        """NOPTS в мелком timebase меньше большой отрицательной метки в грубом"""
        missing = PacketTiming(time_base=Rational(1, 1000000))
        early = PacketTiming(dts=-(10**13), time_base=Rational(1, 1))
        assert missing.compare_dts(early) == -1
        assert early.compare_dts(missing) == 1

    def test_both_missing_dts_equal(self) -> None:
        a = PacketTiming(time_base=MS)
        b = PacketTiming(time_base=MPEG_TS)
        assert a.compare_dts(b) == 0

    def test_pts_time_str(self) -> None:
        assert PacketTiming(pts=450000, time_base=MPEG_TS).pts_time_str() == "5.000000"
        assert PacketTiming(time_base=MPEG_TS).pts_time_str() == "NOPTS"

    def test_json_round_trip(self) -> None:
        packet = PacketTiming(pts=1, dts=0, duration=3600, time_base=MPEG_TS)
        data = packet.model_dump()
        assert data["time_base"] == {"num": 1, "den": 90000}
        assert PacketTiming.model_validate(data) == packet
