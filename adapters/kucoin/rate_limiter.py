"""
KuCoin Rate Limit 관리

응답 헤더에서 Rate Limit 정보를 추적하고,
임계값 도달 시 경고 또는 요청 제한.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from core.constants import RateLimitThresholds


class RateLimitError(Exception):
    """Rate Limit 초과 에러

    429 응답(또는 code 429000) 수신 시 발생.
    retry_after 초 후 재시도 필요.
    """

    def __init__(self, retry_after: float, message: str = "Rate limit exceeded"):
        self.retry_after = retry_after
        self.message = message
        super().__init__(f"{message}. Retry after {retry_after} seconds.")


class KucoinApiError(Exception):
    """KuCoin API 에러

    HTTP 에러 또는 code != "200000" 응답을 받았을 때 발생.
    """

    def __init__(self, code: str, message: str, status_code: int | None = None):
        self.code = code
        self.message = message
        self.status_code = status_code
        super().__init__(f"KuCoin API Error [{code}]: {message}")


class OrderError(KucoinApiError):
    """주문 관련 에러

    주문 생성/취소 실패 시 발생.
    """
    pass


@dataclass
class RateLimitTracker:
    """Rate Limit 추적기

    KuCoin API 응답 헤더에서 Rate Limit 정보를 추출하여 추적.
    남은 쿼터 기준으로 요청 속도 조절 여부 결정.

    KuCoin Rate Limit 헤더:
    - gw-ratelimit-limit: 리소스 풀의 총 쿼터
    - gw-ratelimit-remaining: 남은 쿼터
    - gw-ratelimit-reset: 쿼터 리셋까지 남은 시간 (밀리초)
    """

    limit: int | None = None
    remaining: int | None = None
    reset_ms: int = 0
    last_updated: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def update_from_headers(self, headers: dict[str, Any]) -> None:
        """응답 헤더에서 Rate Limit 정보 업데이트

        Args:
            headers: HTTP 응답 헤더 (대소문자 무관)
        """
        headers_lower = {k.lower(): v for k, v in headers.items()}

        limit = headers_lower.get("gw-ratelimit-limit")
        if limit is not None:
            self.limit = int(limit)

        remaining = headers_lower.get("gw-ratelimit-remaining")
        if remaining is not None:
            self.remaining = int(remaining)

        reset = headers_lower.get("gw-ratelimit-reset")
        if reset is not None:
            self.reset_ms = int(reset)

        self.last_updated = datetime.now(timezone.utc)

    @property
    def reset_seconds(self) -> float:
        """쿼터 리셋까지 남은 시간 (초)"""
        return self.reset_ms / 1000

    def _remaining_at_most(self, threshold: int) -> bool:
        # 헤더를 아직 받지 못했으면 제한하지 않음
        return self.remaining is not None and self.remaining <= threshold

    @property
    def should_warn(self) -> bool:
        """경고 임계값 도달 여부"""
        return self._remaining_at_most(RateLimitThresholds.REMAINING_WARN)

    @property
    def should_slow_down(self) -> bool:
        """속도 저하 필요 여부"""
        return self._remaining_at_most(RateLimitThresholds.REMAINING_SLOW)

    @property
    def should_stop(self) -> bool:
        """요청 중단 필요 여부

        리셋 시간이 지났으면 쿼터가 복구된 것으로 간주.
        """
        if not self._remaining_at_most(RateLimitThresholds.REMAINING_STOP):
            return False
        elapsed_ms = (datetime.now(timezone.utc) - self.last_updated).total_seconds() * 1000
        return elapsed_ms < self.reset_ms

    def reset(self) -> None:
        """카운터 리셋"""
        self.limit = None
        self.remaining = None
        self.reset_ms = 0
        self.last_updated = datetime.now(timezone.utc)

    def to_dict(self) -> dict[str, Any]:
        """딕셔너리로 변환 (로깅용)"""
        return {
            "limit": self.limit,
            "remaining": self.remaining,
            "reset_ms": self.reset_ms,
            "last_updated": self.last_updated.isoformat(),
            "should_warn": self.should_warn,
            "should_slow_down": self.should_slow_down,
            "should_stop": self.should_stop,
        }
