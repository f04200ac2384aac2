"""
KuCoin 어댑터

KuCoin REST API 연동을 담당.
요청 서명, 응답 변환, 도메인별 엔드포인트 핸들러 제공.
"""

from adapters.kucoin.auth import (
    Credentials,
    build_auth_headers,
    sign_passphrase,
    sign_prehash,
)
from adapters.kucoin.rate_limiter import (
    KucoinApiError,
    OrderError,
    RateLimitError,
    RateLimitTracker,
)
from adapters.kucoin.rest_client import KucoinRestClient

__all__ = [
    "Credentials",
    "build_auth_headers",
    "sign_passphrase",
    "sign_prehash",
    "KucoinApiError",
    "OrderError",
    "RateLimitError",
    "RateLimitTracker",
    "KucoinRestClient",
]
