"""
core/utils/timezone.py 테스트
"""

from datetime import datetime, timezone

from core.utils.timezone import now_ms, now_utc, to_timestamp_ms, utc_from_timestamp_ms


class TestTimezone:
    """시간 변환 테스트"""

    def test_now_utc_is_aware(self) -> None:
        """UTC 타임존 명시"""
        assert now_utc().tzinfo == timezone.utc

    def test_now_ms_magnitude(self) -> None:
        """밀리초 단위 (13자리)"""
        assert len(str(now_ms())) == 13

    def test_from_timestamp_ms(self) -> None:
        """밀리초 -> UTC datetime"""
        assert utc_from_timestamp_ms(1708444800000) == datetime(
            2024, 2, 20, 16, 0, 0, tzinfo=timezone.utc
        )

    def test_naive_treated_as_utc(self) -> None:
        """naive datetime은 UTC로 간주"""
        assert to_timestamp_ms(datetime(2024, 1, 1)) == 1704067200000

    def test_round_trip(self) -> None:
        """변환 왕복"""
        assert to_timestamp_ms(utc_from_timestamp_ms(1666600519000)) == 1666600519000
