"""
타입 정의 모듈

KuCoin API 요청/응답에 쓰이는 Enum 정의
모든 Enum은 str을 상속하여 문자열 직렬화 가능
"""

from enum import Enum


class Side(str, Enum):
    """주문 방향"""

    BUY = "buy"
    SELL = "sell"


class TradeType(str, Enum):
    """주문 유형

    LIMIT: 가격과 수량 필수
    MARKET: size 또는 funds 중 하나만 지정
    """

    LIMIT = "limit"
    MARKET = "market"


class TimeInForce(str, Enum):
    """주문 유효 기간 (시장가 주문은 지원하지 않음)"""

    GTC = "GTC"  # Good Till Cancel
    GTT = "GTT"  # Good Till Time (cancel_after 사용)
    IOC = "IOC"  # Immediate Or Cancel
    FOK = "FOK"  # Fill Or Kill


class Stp(str, Enum):
    """Self Trade Prevention 전략"""

    CN = "CN"  # Cancel Newest
    CO = "CO"  # Cancel Oldest
    CB = "CB"  # Cancel Both
    DC = "DC"  # Decrease and Cancel


class DepositStatus(str, Enum):
    """입금 상태"""

    PROCESSING = "PROCESSING"
    SUCCESS = "SUCCESS"
    FAILURE = "FAILURE"
    WAIT_TRM_MGT = "WAIT_TRM_MGT"
    TRM_MGT_REJECTED = "TRM_MGT_REJECTED"


class AccountType(str, Enum):
    """계정 유형 (universal transfer용)"""

    MAIN = "MAIN"
    TRADE = "TRADE"
    CONTRACT = "CONTRACT"
    MARGIN = "MARGIN"
    ISOLATED = "ISOLATED"
    MARGIN_V2 = "MARGIN_V2"
    ISOLATED_V2 = "ISOLATED_V2"

    @property
    def is_isolated(self) -> bool:
        """격리 마진 계정 여부 (account tag 필수)"""
        return self in (AccountType.ISOLATED, AccountType.ISOLATED_V2)


class TransferType(str, Enum):
    """이체 유형"""

    INTERNAL = "INTERNAL"
    PARENT_TO_SUB = "PARENT_TO_SUB"
    SUB_TO_PARENT = "SUB_TO_PARENT"


class WithdrawType(str, Enum):
    """출금 유형

    UID/MAIL/PHONE 출금은 10초 3회, 24시간 50회 제한이 있음
    """

    ADDRESS = "ADDRESS"
    UID = "UID"
    MAIL = "MAIL"
    PHONE = "PHONE"


class FeeDeductType(str, Enum):
    """출금 수수료 차감 방식"""

    INTERNAL = "INTERNAL"  # 출금액에서 차감
    EXTERNAL = "EXTERNAL"  # 메인 계정에서 차감


class ApiKeyExpire(str, Enum):
    """Sub-account API 키 만료 기간 (일)"""

    NEVER = "-1"
    DAYS_30 = "30"
    DAYS_90 = "90"
    DAYS_180 = "180"
    DAYS_360 = "360"


class ApiPermission(str, Enum):
    """Sub-account API 키에 부여 가능한 권한"""

    GENERAL = "General"
    SPOT = "Spot"
    FUTURES = "Futures"
    MARGIN = "Margin"
    UNIFIED = "Unified"
    INNER_TRANSFER = "InnerTransfer"
