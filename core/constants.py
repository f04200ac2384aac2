"""
하드코딩 상수 - 변경될 일이 거의 없는 고정값

중요: 경로는 반드시 pathlib.Path 사용 (Windows/Linux 크로스 플랫폼)
"""

from pathlib import Path


# 프로젝트 루트 (이 파일 기준 2단계 상위: core/constants.py → 프로젝트 루트)
PROJECT_ROOT: Path = Path(__file__).resolve().parent.parent


class KucoinEndpoints:
    """KuCoin API 엔드포인트 (고정값)

    공식 문서: https://www.kucoin.com/docs-new/introduction
    """

    # Production (Spot / Account)
    REST_URL: str = "https://api.kucoin.com"

    # 서버 시간 (인증 불필요)
    SERVER_TIME: str = "/api/v1/timestamp"

    # Spot (HF)
    SPOT_ORDER: str = "/api/v1/hf/orders"
    SPOT_BATCH_ORDER: str = "/api/v1/hf/orders/multi"
    SPOT_CANCEL_BY_CLIENT_OID: str = "/api/v1/hf/orders/client-order"
    SPOT_CANCEL_PARTIAL: str = "/api/v1/hf/orders/cancel"

    # Deposit
    DEPOSITS: str = "/api/v1/deposits"

    # Sub-account
    SUB_API_KEY: str = "/api/v1/sub/api-key"
    SUB_USERS: str = "/api/v2/sub/user"
    SUB_ACCOUNTS: str = "/api/v1/sub-accounts"

    # Transfer / Withdrawal
    UNIVERSAL_TRANSFER: str = "/api/v3/accounts/universal-transfer"
    WITHDRAWALS: str = "/api/v3/withdrawals"


class KucoinCodes:
    """KuCoin 응답 코드"""

    SUCCESS: str = "200000"
    INVALID_TIMESTAMP: str = "400002"
    TOO_MANY_REQUESTS: str = "429000"


class Defaults:
    """기본값 상수"""

    EXCHANGE: str = "KUCOIN"
    API_KEY_VERSION: str = "3"

    REQUEST_TIMEOUT_SEC: float = 30.0
    MAX_RETRIES: int = 3

    LOG_LEVEL: str = "INFO"


class Paths:
    """프로젝트 경로 상수 (pathlib 사용 - OS 독립적)"""

    # 디렉토리
    CONFIG_DIR: Path = PROJECT_ROOT / "config"
    LOGS_DIR: Path = PROJECT_ROOT / "logs"

    # 설정 파일
    SECRETS_FILE: Path = CONFIG_DIR / "secrets.yaml"


class RateLimitThresholds:
    """Rate Limit 임계값 (남은 쿼터 기준)

    KuCoin은 30초 단위 리소스 풀마다 쿼터를 부여하고
    gw-ratelimit-remaining 헤더로 남은 양을 알려준다.
    """

    REMAINING_WARN: int = 200  # 경고
    REMAINING_SLOW: int = 100  # 속도 저하
    REMAINING_STOP: int = 10  # 요청 중단
