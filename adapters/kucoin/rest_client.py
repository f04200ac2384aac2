"""
KuCoin REST API 클라이언트

HMAC-SHA256(base64) 서명, Rate Limit 추적, 응답 envelope 해제.
도메인별 엔드포인트는 spot / deposit / sub_account / transfer / withdrawal 핸들러로 노출.
"""

import asyncio
import json
import logging
from typing import Any
from urllib.parse import urlencode

import httpx

from adapters.kucoin.auth import Credentials, build_auth_headers
from adapters.kucoin.endpoints.deposit import DepositEndpoints
from adapters.kucoin.endpoints.spot import SpotEndpoints
from adapters.kucoin.endpoints.sub_account import SubAccountEndpoints
from adapters.kucoin.endpoints.transfer import TransferEndpoints
from adapters.kucoin.endpoints.withdrawal import WithdrawalEndpoints
from adapters.kucoin.rate_limiter import (
    KucoinApiError,
    RateLimitError,
    RateLimitTracker,
)
from core.config.loader import ExchangeConfig
from core.constants import Defaults, KucoinCodes, KucoinEndpoints
from core.utils.timezone import now_ms

logger = logging.getLogger(__name__)


class KucoinRestClient:
    """KuCoin REST API 클라이언트

    요청 1건 = HTTP 호출 1회 (429/타임스탬프 오류/네트워크 오류 시에만 재시도).
    모든 금액/수량은 Decimal 타입으로 반환.

    Args:
        credentials: API 인증 정보
        base_url: REST API 베이스 URL
        timeout: 요청 타임아웃 (초)
        max_retries: 최대 시도 횟수

    사용 예시:
    ```python
    async with KucoinRestClient(Credentials(key, secret, passphrase)) as client:
        order = SpotOrderRequest.market("BTC-USDT", "buy", funds=Decimal("100"))
        ack = await client.spot.place_order(order)
    ```
    """

    def __init__(
        self,
        credentials: Credentials,
        base_url: str = KucoinEndpoints.REST_URL,
        timeout: float = Defaults.REQUEST_TIMEOUT_SEC,
        max_retries: int = Defaults.MAX_RETRIES,
    ):
        if max_retries < 1:
            raise ValueError("max_retries must be >= 1")

        self.credentials = credentials
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.max_retries = max_retries

        self.rate_tracker = RateLimitTracker()
        self._client: httpx.AsyncClient | None = None

        # 서버 시간 동기화용 오프셋 (밀리초)
        self._time_offset: int = 0

        # 도메인별 엔드포인트 핸들러
        self.spot = SpotEndpoints(self)
        self.deposit = DepositEndpoints(self)
        self.sub_account = SubAccountEndpoints(self)
        self.transfer = TransferEndpoints(self)
        self.withdrawal = WithdrawalEndpoints(self)

    @classmethod
    def from_config(cls, config: ExchangeConfig, **kwargs: Any) -> "KucoinRestClient":
        """ExchangeConfig로부터 클라이언트 생성"""
        credentials = Credentials(
            api_key=config.api_key,
            api_secret=config.api_secret,
            api_passphrase=config.api_passphrase,
        )
        return cls(credentials, base_url=config.rest_url, **kwargs)

    def set_credentials(self, credentials: Credentials) -> None:
        """인증 정보 교체 (다른 계정으로 전환)"""
        self.credentials = credentials
        logger.info("Credentials replaced")

    async def _get_client(self) -> httpx.AsyncClient:
        """HTTP 클라이언트 가져오기 (lazy initialization)"""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(timeout=self.timeout)
        return self._client

    async def close(self) -> None:
        """HTTP 클라이언트 종료"""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    def _get_timestamp(self) -> str:
        """서버 시간 오프셋이 적용된 타임스탬프 반환 (밀리초 문자열)"""
        return str(now_ms() + self._time_offset)

    async def get_server_time(self) -> int:
        """서버 시간 조회 (밀리초, 인증 불필요)"""
        data = await self._request("GET", KucoinEndpoints.SERVER_TIME, signed=False)
        return int(data)

    async def sync_time(self) -> int:
        """서버 시간과 동기화

        로컬 시간과 서버 시간의 차이를 계산하여 오프셋 저장.

        Returns:
            계산된 시간 오프셋 (밀리초)
        """
        local_time = now_ms()
        server_time = await self.get_server_time()
        self._time_offset = server_time - local_time

        logger.info(
            "서버 시간 동기화 완료",
            extra={"offset_ms": self._time_offset},
        )

        return self._time_offset

    @staticmethod
    def _build_endpoint(path: str, params: dict[str, Any] | None) -> str:
        """쿼리 스트링을 포함한 엔드포인트 (서명 대상과 전송 URL에 동일하게 사용)"""
        if not params:
            return path
        return f"{path}?{urlencode(params)}"

    @staticmethod
    def _parse_payload(response: httpx.Response) -> dict[str, Any] | None:
        try:
            payload = response.json()
        except ValueError:
            return None
        return payload if isinstance(payload, dict) else None

    @staticmethod
    def _retry_after(response: httpx.Response) -> float:
        """429 응답 시 대기 시간 (초)

        해당 응답의 gw-ratelimit-reset(ms) -> Retry-After(초) -> 1초 순으로 사용.
        """
        headers = {k.lower(): v for k, v in dict(response.headers).items()}

        reset = headers.get("gw-ratelimit-reset")
        if reset is not None:
            try:
                reset_ms = int(reset)
            except ValueError:
                reset_ms = 0
            if reset_ms > 0:
                return reset_ms / 1000

        retry_after = headers.get("retry-after")
        if retry_after is not None:
            try:
                return float(retry_after)
            except ValueError:
                pass

        return 1.0

    async def _request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        body: dict[str, Any] | list[Any] | None = None,
        signed: bool = True,
    ) -> Any:
        """API 요청 실행

        Args:
            method: HTTP 메서드 (GET, POST, DELETE)
            path: API 경로 (예: /api/v1/deposits)
            params: 쿼리 파라미터
            body: JSON 요청 본문
            signed: 서명 필요 여부

        Returns:
            응답 envelope의 data 필드

        Raises:
            RateLimitError: 429 응답이 재시도 후에도 계속될 때
            KucoinApiError: API 에러 응답 시
        """
        method = method.upper()

        # Rate Limit 체크
        if self.rate_tracker.should_stop:
            logger.warning(
                "Rate limit threshold reached",
                extra={"rate_info": self.rate_tracker.to_dict()},
            )
            raise RateLimitError(
                retry_after=self.rate_tracker.reset_seconds,
                message="Remaining quota threshold reached",
            )

        endpoint = self._build_endpoint(path, params)
        body_str = json.dumps(body, separators=(",", ":")) if body is not None else ""
        url = f"{self.base_url}{endpoint}"
        client = await self._get_client()

        for attempt in range(self.max_retries):
            # 매 시도마다 헤더 새로 생성 (타임스탬프 갱신)
            if signed:
                headers = build_auth_headers(
                    self.credentials,
                    method,
                    endpoint,
                    body_str,
                    self._get_timestamp(),
                )
            else:
                headers = {"Content-Type": "application/json"}

            try:
                response = await client.request(
                    method,
                    url,
                    content=body_str.encode("utf-8") if body_str else None,
                    headers=headers,
                )
            except httpx.TimeoutException:
                logger.warning(
                    "Request timeout",
                    extra={"path": path, "attempt": attempt + 1},
                )
                if attempt < self.max_retries - 1:
                    await asyncio.sleep(1 * (attempt + 1))
                    continue
                raise
            except httpx.RequestError as e:
                logger.error(
                    "Request error",
                    extra={"path": path, "error": str(e), "attempt": attempt + 1},
                )
                if attempt < self.max_retries - 1:
                    await asyncio.sleep(1 * (attempt + 1))
                    continue
                raise

            # Rate Limit 헤더 추적
            self.rate_tracker.update_from_headers(dict(response.headers))
            if self.rate_tracker.should_slow_down:
                logger.warning(
                    "Rate limit quota nearly exhausted",
                    extra={"rate_info": self.rate_tracker.to_dict()},
                )
            elif self.rate_tracker.should_warn:
                logger.info(
                    "Rate limit quota running low",
                    extra={"rate_info": self.rate_tracker.to_dict()},
                )

            payload = self._parse_payload(response)
            code = str(payload.get("code")) if payload and "code" in payload else None

            # 429 처리
            if response.status_code == 429 or code == KucoinCodes.TOO_MANY_REQUESTS:
                retry_after = self._retry_after(response)
                logger.warning(
                    "Rate limited by KuCoin",
                    extra={"retry_after": retry_after, "attempt": attempt + 1},
                )

                if attempt < self.max_retries - 1:
                    await asyncio.sleep(retry_after)
                    continue

                raise RateLimitError(retry_after=retry_after)

            # HTTP 에러 또는 실패 코드
            if response.status_code >= 400 or code != KucoinCodes.SUCCESS:
                error_code = code or str(response.status_code)
                message = (payload or {}).get("msg") or response.text

                # 타임스탬프 오류 시 시간 재동기화 후 재시도
                if (
                    signed
                    and error_code == KucoinCodes.INVALID_TIMESTAMP
                    and attempt < self.max_retries - 1
                ):
                    logger.warning(
                        "타임스탬프 오류, 시간 재동기화",
                        extra={"code": error_code, "attempt": attempt + 1},
                    )
                    await self.sync_time()
                    continue

                logger.error(
                    "KuCoin API error",
                    extra={
                        "method": method,
                        "path": path,
                        "status_code": response.status_code,
                        "error_code": error_code,
                        "error_message": message,
                    },
                )
                raise KucoinApiError(
                    code=error_code,
                    message=message,
                    status_code=response.status_code,
                )

            logger.debug(
                "KuCoin request completed",
                extra={"method": method, "path": path, "attempt": attempt + 1},
            )
            return payload.get("data")

        # 모든 재시도 실패 (재동기화 후에도 타임스탬프 오류)
        raise KucoinApiError(code="-1", message="All retries failed")

    async def __aenter__(self) -> "KucoinRestClient":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()
