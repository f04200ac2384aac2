"""
어댑터 공통 데이터 모델

요청 모델: 생성 시점에 필수 필드/조합을 검증하고 to_dict()/to_params()로 직렬화.
응답 모델: 거래소 API 응답을 표준화한 불변 도메인 모델.
모든 금액/수량은 Decimal 타입 사용.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Any

from core.types import (
    AccountType,
    ApiKeyExpire,
    ApiPermission,
    DepositStatus,
    FeeDeductType,
    Side,
    Stp,
    TimeInForce,
    TradeType,
    TransferType,
    WithdrawType,
)
from core.utils.idempotency import (
    CLIENT_OID_MAX_LENGTH,
    make_client_oid,
    validate_client_oid,
)
from core.utils.timezone import to_timestamp_ms


# 주문 remark/tags 최대 길이 (ASCII)
ORDER_TEXT_MAX_LENGTH = 20

# 배치 주문 최대 개수
MAX_BATCH_ORDERS = 5

# 입금 내역 페이지 크기 범위
DEPOSIT_PAGE_SIZE_MIN = 10
DEPOSIT_PAGE_SIZE_MAX = 500

# Sub-account API 키 제약
SUB_REMARK_MAX_LENGTH = 24
SUB_PASSPHRASE_MIN_LENGTH = 7
SUB_PASSPHRASE_MAX_LENGTH = 32
MAX_IP_WHITELIST = 20


class MissingIsolatedTagError(ValueError):
    """격리 마진 계정 이체 시 account tag(심볼) 누락"""

    def __init__(self, party: str):
        self.party = party
        super().__init__(f"Account tag is required for {party} ISOLATED account")


def to_decimal(value: Any, name: str) -> Decimal:
    """숫자 입력을 Decimal로 변환 (float는 문자열 경유, NaN/Infinity 불가)"""
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value))
        except InvalidOperation as e:
            raise ValueError(f"{name} must be numeric: {value!r}") from e
    if not result.is_finite():
        raise ValueError(f"{name} must be finite: {value!r}")
    return result


def decimal_str(value: Decimal) -> str:
    """Decimal -> API 문자열 (지수 표기 없이)"""
    return format(value, "f")


def _positive(value: Any, name: str) -> Decimal:
    result = to_decimal(value, name)
    if result <= Decimal("0"):
        raise ValueError(f"{name} must be positive")
    return result


def _ms(value: int | datetime | None) -> int | None:
    if isinstance(value, datetime):
        return to_timestamp_ms(value)
    return value


# =============================================================================
# Spot 요청
# =============================================================================


@dataclass
class SpotOrderRequest:
    """Spot 주문 요청

    place_order 메서드에 전달되는 주문 요청 정보.

    Attributes:
        symbol: 거래 심볼 (예: BTC-USDT)
        side: 주문 방향 (buy/sell)
        order_type: 주문 유형 (limit/market)
        client_oid: 클라이언트 주문 ID (기본: UUID4 자동 생성)
        price: 지정가 (LIMIT 주문 필수)
        size: 주문 수량 (base 자산)
        funds: 주문 금액 (quote 자산, MARKET 주문 전용)
        time_in_force: 주문 유효 기간 (LIMIT 전용)
        cancel_after: GTT 주문 자동 취소까지의 초
        post_only: 메이커 전용 여부
        hidden: 호가창 비공개 여부
        iceberg: 아이스버그 주문 여부
        visible_size: 아이스버그 노출 수량
        stp: Self Trade Prevention 전략
        remark: 주문 메모 (최대 20자)
        tags: 주문 태그 (최대 20자)
        client_timestamp: 클라이언트 타임스탬프 (밀리초)
        allow_max_time_window: client_timestamp 기준 허용 지연 (밀리초)
    """

    symbol: str
    side: str  # buy / sell
    order_type: str  # limit / market
    client_oid: str = field(default_factory=make_client_oid)
    price: Decimal | None = None
    size: Decimal | None = None
    funds: Decimal | None = None
    time_in_force: str | None = None
    cancel_after: int | None = None
    post_only: bool | None = None
    hidden: bool | None = None
    iceberg: bool | None = None
    visible_size: Decimal | None = None
    stp: str | None = None
    remark: str | None = None
    tags: str | None = None
    client_timestamp: int | None = None
    allow_max_time_window: int | None = None

    def __post_init__(self) -> None:
        """유효성 검증"""
        if not self.symbol:
            raise ValueError("symbol is required")

        # Enum 또는 문자열 모두 허용 (잘못된 값이면 ValueError)
        self.side = Side(self.side).value
        self.order_type = TradeType(self.order_type).value
        if self.time_in_force is not None:
            self.time_in_force = TimeInForce(self.time_in_force).value
        if self.stp is not None:
            self.stp = Stp(self.stp).value

        if not validate_client_oid(self.client_oid):
            raise ValueError(
                f"client_oid must be 1-{CLIENT_OID_MAX_LENGTH} chars of "
                "letters, digits, '_' or '-'"
            )

        if self.price is not None:
            self.price = _positive(self.price, "price")
        if self.size is not None:
            self.size = _positive(self.size, "size")
        if self.funds is not None:
            self.funds = _positive(self.funds, "funds")
        if self.visible_size is not None:
            self.visible_size = _positive(self.visible_size, "visible_size")

        if self.order_type == TradeType.LIMIT.value:
            self._validate_limit()
        else:
            self._validate_market()

        # 아이스버그 전용 필드
        if self.visible_size is not None and not self.iceberg:
            raise ValueError("visible_size is only allowed for iceberg orders")

        # GTT 전용 필드
        if self.cancel_after is not None:
            if self.time_in_force != TimeInForce.GTT.value:
                raise ValueError("cancel_after requires time_in_force GTT")
            if self.cancel_after <= 0 and self.cancel_after != -1:
                raise ValueError("cancel_after must be positive or -1")

        for name in ("remark", "tags"):
            text = getattr(self, name)
            if text is not None and len(text) > ORDER_TEXT_MAX_LENGTH:
                raise ValueError(
                    f"{name} cannot exceed {ORDER_TEXT_MAX_LENGTH} characters"
                )

        if self.allow_max_time_window is not None and self.client_timestamp is None:
            raise ValueError("client_timestamp is required with allow_max_time_window")

    def _validate_limit(self) -> None:
        # LIMIT 주문은 가격과 수량 필수
        if self.price is None:
            raise ValueError("price is required for limit orders")
        if self.size is None:
            raise ValueError("size is required for limit orders")
        if self.funds is not None:
            raise ValueError("funds is only allowed for market orders")

        if self.post_only and self.time_in_force in (
            TimeInForce.IOC.value,
            TimeInForce.FOK.value,
        ):
            raise ValueError("post_only is not allowed with IOC or FOK")

    def _validate_market(self) -> None:
        # MARKET 주문은 size/funds 중 정확히 하나
        if (self.size is None) == (self.funds is None):
            raise ValueError("market orders require exactly one of size or funds")
        if self.price is not None:
            raise ValueError("price is not allowed for market orders")

        limit_only = {
            "time_in_force": self.time_in_force,
            "post_only": self.post_only,
            "hidden": self.hidden,
            "iceberg": self.iceberg,
        }
        for name, value in limit_only.items():
            if value is not None:
                raise ValueError(f"{name} is not supported for market orders")

    @classmethod
    def market(
        cls,
        symbol: str,
        side: str,
        size: Decimal | None = None,
        funds: Decimal | None = None,
        client_oid: str | None = None,
        remark: str | None = None,
        stp: str | None = None,
    ) -> "SpotOrderRequest":
        """시장가 주문 생성 (size 또는 funds 중 하나)"""
        return cls(
            symbol=symbol,
            side=side,
            order_type=TradeType.MARKET.value,
            client_oid=client_oid or make_client_oid(),
            size=size,
            funds=funds,
            remark=remark,
            stp=stp,
        )

    @classmethod
    def limit(
        cls,
        symbol: str,
        side: str,
        price: Decimal,
        size: Decimal,
        client_oid: str | None = None,
        time_in_force: str = TimeInForce.GTC.value,
        post_only: bool | None = None,
        remark: str | None = None,
        stp: str | None = None,
    ) -> "SpotOrderRequest":
        """지정가 주문 생성"""
        return cls(
            symbol=symbol,
            side=side,
            order_type=TradeType.LIMIT.value,
            client_oid=client_oid or make_client_oid(),
            price=price,
            size=size,
            time_in_force=time_in_force,
            post_only=post_only,
            remark=remark,
            stp=stp,
        )

    def to_dict(self) -> dict[str, Any]:
        """딕셔너리로 변환 (API 요청 본문용, 미지정 필드 생략)"""
        result: dict[str, Any] = {
            "clientOid": self.client_oid,
            "symbol": self.symbol,
            "side": self.side,
            "type": self.order_type,
        }

        decimals = {
            "price": self.price,
            "size": self.size,
            "funds": self.funds,
            "visibleSize": self.visible_size,
        }
        for key, value in decimals.items():
            if value is not None:
                result[key] = decimal_str(value)

        optional = {
            "timeInForce": self.time_in_force,
            "cancelAfter": self.cancel_after,
            "postOnly": self.post_only,
            "hidden": self.hidden,
            "iceberg": self.iceberg,
            "stp": self.stp,
            "remark": self.remark,
            "tags": self.tags,
            "clientTimestamp": self.client_timestamp,
            "allowMaxTimeWindow": self.allow_max_time_window,
        }
        for key, value in optional.items():
            if value is not None:
                result[key] = value

        return result


@dataclass
class BatchSpotOrderRequest:
    """Spot 배치 주문 요청 (최대 5건)"""

    orders: list[SpotOrderRequest] = field(default_factory=list)

    def add_order(self, order: SpotOrderRequest) -> "BatchSpotOrderRequest":
        """주문 추가 (체이닝 가능)"""
        if len(self.orders) >= MAX_BATCH_ORDERS:
            raise ValueError(f"batch cannot exceed {MAX_BATCH_ORDERS} orders")
        self.orders.append(order)
        return self

    def validate(self) -> None:
        """전송 전 검증"""
        if not self.orders:
            raise ValueError("batch requires at least one order")
        if len(self.orders) > MAX_BATCH_ORDERS:
            raise ValueError(f"batch cannot exceed {MAX_BATCH_ORDERS} orders")

        client_oids = [order.client_oid for order in self.orders]
        if len(set(client_oids)) != len(client_oids):
            raise ValueError("client_oid must be unique within a batch")

    def to_dict(self) -> dict[str, Any]:
        """딕셔너리로 변환 (API 요청 본문용)"""
        self.validate()
        return {"orderList": [order.to_dict() for order in self.orders]}


@dataclass(frozen=True)
class SpotCancelRequest:
    """Spot 부분 취소 요청

    Attributes:
        order_id: 거래소 주문 ID
        symbol: 거래 심볼
        cancel_size: 취소할 수량
    """

    order_id: str
    symbol: str
    cancel_size: Decimal

    def __post_init__(self) -> None:
        """유효성 검증"""
        if not self.order_id:
            raise ValueError("order_id is required")
        if not self.symbol:
            raise ValueError("symbol is required")
        object.__setattr__(self, "cancel_size", _positive(self.cancel_size, "cancel_size"))

    def to_params(self) -> dict[str, Any]:
        """쿼리 파라미터로 변환"""
        return {
            "symbol": self.symbol,
            "cancelSize": decimal_str(self.cancel_size),
        }


# =============================================================================
# Deposit 요청
# =============================================================================


@dataclass
class DepositHistoryRequest:
    """입금 내역 조회 조건

    모든 필드 선택. 지정하지 않은 필드는 쿼리에서 제외되며,
    status가 없으면 모든 상태를 조회.

    Attributes:
        currency: 자산 코드 (예: BTC, USDT)
        status: 입금 상태
        start_at: 시작 시간 (밀리초 또는 datetime)
        end_at: 종료 시간 (밀리초 또는 datetime)
        current_page: 페이지 번호 (1부터)
        page_size: 페이지 크기 (10~500)
    """

    currency: str | None = None
    status: str | None = None
    start_at: int | None = None
    end_at: int | None = None
    current_page: int | None = None
    page_size: int | None = None

    def __post_init__(self) -> None:
        """유효성 검증"""
        if self.status is not None:
            self.status = DepositStatus(self.status).value

        self.start_at = _ms(self.start_at)
        self.end_at = _ms(self.end_at)
        if (
            self.start_at is not None
            and self.end_at is not None
            and self.start_at > self.end_at
        ):
            raise ValueError("start_at must not be after end_at")

        if self.current_page is not None and self.current_page < 1:
            raise ValueError("current_page must be >= 1")

        if self.page_size is not None and not (
            DEPOSIT_PAGE_SIZE_MIN <= self.page_size <= DEPOSIT_PAGE_SIZE_MAX
        ):
            raise ValueError(
                f"page_size must be between {DEPOSIT_PAGE_SIZE_MIN} "
                f"and {DEPOSIT_PAGE_SIZE_MAX}"
            )

    def to_params(self) -> dict[str, Any]:
        """쿼리 파라미터로 변환 (미지정 필드 생략)"""
        params = {
            "currency": self.currency,
            "status": self.status,
            "startAt": self.start_at,
            "endAt": self.end_at,
            "currentPage": self.current_page,
            "pageSize": self.page_size,
        }
        return {k: v for k, v in params.items() if v is not None and v != ""}


# =============================================================================
# Transfer / Withdrawal 요청
# =============================================================================


@dataclass
class TransferRequest:
    """Universal transfer 요청

    Attributes:
        currency: 자산 코드
        amount: 이체 수량
        from_account_type: 출금 계정 유형
        to_account_type: 입금 계정 유형
        transfer_type: 이체 유형 (INTERNAL/PARENT_TO_SUB/SUB_TO_PARENT)
        client_oid: 클라이언트 주문 ID (기본: UUID4 자동 생성)
        from_account_tag: 출금 격리 마진 심볼 (ISOLATED 계정 필수)
        to_account_tag: 입금 격리 마진 심볼 (ISOLATED 계정 필수)
        from_user_id: 출금 UserId (SUB_TO_PARENT 필수)
        to_user_id: 입금 UserId (PARENT_TO_SUB 필수)
    """

    currency: str
    amount: Decimal
    from_account_type: str
    to_account_type: str
    transfer_type: str = TransferType.INTERNAL.value
    client_oid: str = field(default_factory=make_client_oid)
    from_account_tag: str | None = None
    to_account_tag: str | None = None
    from_user_id: str | None = None
    to_user_id: str | None = None

    def __post_init__(self) -> None:
        """유효성 검증"""
        if not self.currency:
            raise ValueError("currency is required")
        self.amount = _positive(self.amount, "amount")

        if not validate_client_oid(self.client_oid):
            raise ValueError(
                f"client_oid must be 1-{CLIENT_OID_MAX_LENGTH} chars of "
                "letters, digits, '_' or '-'"
            )

        from_type = AccountType(self.from_account_type)
        to_type = AccountType(self.to_account_type)
        self.from_account_type = from_type.value
        self.to_account_type = to_type.value
        self.transfer_type = TransferType(self.transfer_type).value

        if from_type.is_isolated and not self.from_account_tag:
            raise MissingIsolatedTagError("Sender")
        if to_type.is_isolated and not self.to_account_tag:
            raise MissingIsolatedTagError("Receiver")

        if self.transfer_type == TransferType.SUB_TO_PARENT.value and not self.from_user_id:
            raise ValueError("from_user_id is required for SUB_TO_PARENT transfers")
        if self.transfer_type == TransferType.PARENT_TO_SUB.value and not self.to_user_id:
            raise ValueError("to_user_id is required for PARENT_TO_SUB transfers")

    @classmethod
    def internal(
        cls,
        currency: str,
        amount: Decimal,
        from_account_type: str,
        to_account_type: str,
        from_account_tag: str | None = None,
        to_account_tag: str | None = None,
    ) -> "TransferRequest":
        """같은 사용자 계정 간 이체 생성"""
        return cls(
            currency=currency,
            amount=amount,
            from_account_type=from_account_type,
            to_account_type=to_account_type,
            transfer_type=TransferType.INTERNAL.value,
            from_account_tag=from_account_tag,
            to_account_tag=to_account_tag,
        )

    @classmethod
    def parent_to_sub(
        cls,
        currency: str,
        amount: Decimal,
        to_user_id: str,
        from_account_type: str = AccountType.MAIN.value,
        to_account_type: str = AccountType.MAIN.value,
    ) -> "TransferRequest":
        """마스터 -> 서브 계정 이체 생성"""
        return cls(
            currency=currency,
            amount=amount,
            from_account_type=from_account_type,
            to_account_type=to_account_type,
            transfer_type=TransferType.PARENT_TO_SUB.value,
            to_user_id=to_user_id,
        )

    @classmethod
    def sub_to_parent(
        cls,
        currency: str,
        amount: Decimal,
        from_user_id: str,
        from_account_type: str = AccountType.MAIN.value,
        to_account_type: str = AccountType.MAIN.value,
    ) -> "TransferRequest":
        """서브 -> 마스터 계정 이체 생성"""
        return cls(
            currency=currency,
            amount=amount,
            from_account_type=from_account_type,
            to_account_type=to_account_type,
            transfer_type=TransferType.SUB_TO_PARENT.value,
            from_user_id=from_user_id,
        )

    def to_dict(self) -> dict[str, Any]:
        """딕셔너리로 변환 (API 요청 본문용)"""
        result: dict[str, Any] = {
            "clientOid": self.client_oid,
            "currency": self.currency,
            "amount": decimal_str(self.amount),
            "type": self.transfer_type,
            "fromAccountType": self.from_account_type,
            "toAccountType": self.to_account_type,
        }

        optional = {
            "fromAccountTag": self.from_account_tag,
            "toAccountTag": self.to_account_tag,
            "fromUserId": self.from_user_id,
            "toUserId": self.to_user_id,
        }
        for key, value in optional.items():
            if value is not None:
                result[key] = value

        return result


@dataclass
class WithdrawRequest:
    """출금 요청

    Attributes:
        currency: 자산 코드
        to_address: 출금 주소 (withdraw_type에 따라 UID/이메일/전화번호)
        amount: 출금 수량
        withdraw_type: 출금 유형 (ADDRESS/UID/MAIL/PHONE)
        chain: 체인 ID (예: trx, eth)
        memo: 주소 메모(tag)
        is_inner: 내부 출금 여부
        remark: 메모
        fee_deduct_type: 수수료 차감 방식 (INTERNAL/EXTERNAL)
    """

    currency: str
    to_address: str
    amount: Decimal
    withdraw_type: str = WithdrawType.ADDRESS.value
    chain: str | None = None
    memo: str | None = None
    is_inner: bool | None = None
    remark: str | None = None
    fee_deduct_type: str | None = None

    def __post_init__(self) -> None:
        """유효성 검증"""
        if not self.currency:
            raise ValueError("currency is required")
        if not self.to_address:
            raise ValueError("to_address is required")
        self.amount = _positive(self.amount, "amount")
        self.withdraw_type = WithdrawType(self.withdraw_type).value
        if self.fee_deduct_type is not None:
            self.fee_deduct_type = FeeDeductType(self.fee_deduct_type).value

    def to_dict(self) -> dict[str, Any]:
        """딕셔너리로 변환 (API 요청 본문용)"""
        result: dict[str, Any] = {
            "currency": self.currency,
            "toAddress": self.to_address,
            "amount": decimal_str(self.amount),
            "withdrawType": self.withdraw_type,
        }

        optional = {
            "chain": self.chain,
            "memo": self.memo,
            "isInner": self.is_inner,
            "remark": self.remark,
            "feeDeductType": self.fee_deduct_type,
        }
        for key, value in optional.items():
            if value is not None:
                result[key] = value

        return result


# =============================================================================
# Sub-account 요청
# =============================================================================


@dataclass
class SubAccRequest:
    """Sub-account API 키 생성 요청

    Attributes:
        sub_name: 서브 계정 이름
        remark: 메모 (1~24자)
        passphrase: API 키 passphrase (7~32자, 공백 불가)
        permission: 권한 목록 (General, Spot, Futures, Margin, Unified, InnerTransfer)
        ip_whitelist: IP 화이트리스트 (최대 20개)
        expire: 만료 기간
    """

    sub_name: str
    remark: str
    passphrase: str = field(repr=False)
    permission: list[str] | None = None
    ip_whitelist: list[str] = field(default_factory=list)
    expire: str | None = None

    def __post_init__(self) -> None:
        """유효성 검증"""
        if not self.sub_name:
            raise ValueError("sub_name is required")

        if not 1 <= len(self.remark) <= SUB_REMARK_MAX_LENGTH:
            raise ValueError(f"remark must be 1-{SUB_REMARK_MAX_LENGTH} characters")

        if not (
            SUB_PASSPHRASE_MIN_LENGTH <= len(self.passphrase) <= SUB_PASSPHRASE_MAX_LENGTH
        ):
            raise ValueError(
                f"passphrase must be {SUB_PASSPHRASE_MIN_LENGTH}-"
                f"{SUB_PASSPHRASE_MAX_LENGTH} characters"
            )
        if any(ch.isspace() for ch in self.passphrase):
            raise ValueError("passphrase cannot contain spaces")

        if self.permission is not None:
            self.permission = [ApiPermission(p).value for p in self.permission]

        self.ip_whitelist = list(self.ip_whitelist)
        if len(self.ip_whitelist) > MAX_IP_WHITELIST:
            raise ValueError(f"ip_whitelist cannot exceed {MAX_IP_WHITELIST} entries")

        if self.expire is not None:
            # 정수 일수(30, -1 등)도 허용
            if isinstance(self.expire, int):
                self.expire = str(self.expire)
            self.expire = ApiKeyExpire(self.expire).value

    def add_ip_whitelist(self, ip: str) -> "SubAccRequest":
        """IP 추가 (체이닝 가능, 최대 20개)"""
        if not ip:
            raise ValueError("ip is required")
        if len(self.ip_whitelist) >= MAX_IP_WHITELIST:
            raise ValueError(f"ip_whitelist cannot exceed {MAX_IP_WHITELIST} entries")
        self.ip_whitelist.append(ip)
        return self

    def to_dict(self) -> dict[str, Any]:
        """딕셔너리로 변환 (API 요청 본문용)"""
        result: dict[str, Any] = {
            "subName": self.sub_name,
            "remark": self.remark,
            "passphrase": self.passphrase,
        }

        if self.permission:
            result["permission"] = ",".join(self.permission)

        if self.ip_whitelist:
            result["ipWhitelist"] = ",".join(self.ip_whitelist)

        if self.expire is not None:
            result["expire"] = self.expire

        return result


# =============================================================================
# 응답 모델
# =============================================================================


@dataclass(frozen=True)
class SpotOrderAck:
    """주문 접수 결과

    Attributes:
        order_id: 거래소 주문 ID
        client_oid: 클라이언트 주문 ID
    """

    order_id: str
    client_oid: str


@dataclass(frozen=True)
class SpotOrderResult:
    """배치 주문 개별 결과

    Attributes:
        success: 접수 성공 여부
        order_id: 거래소 주문 ID (실패 시 None)
        client_oid: 클라이언트 주문 ID
        fail_msg: 실패 사유
    """

    success: bool
    order_id: str | None = None
    client_oid: str | None = None
    fail_msg: str | None = None


@dataclass(frozen=True)
class SpotCancelResult:
    """부분 취소 결과"""

    order_id: str
    cancel_size: Decimal


@dataclass(frozen=True)
class SpotOrder:
    """주문 상세

    Attributes:
        order_id: 거래소 주문 ID
        client_oid: 클라이언트 주문 ID
        symbol: 거래 심볼
        side: 주문 방향
        order_type: 주문 유형
        price: 지정가
        size: 주문 수량
        funds: 주문 금액
        deal_size: 체결 수량
        deal_funds: 체결 금액
        fee: 수수료
        fee_currency: 수수료 자산
        time_in_force: 주문 유효 기간
        active: 활성(미체결) 여부
        in_order_book: 호가창 등록 여부
        cancel_exist: 취소 기록 존재 여부
        created_at: 주문 생성 시간
        updated_at: 주문 업데이트 시간
    """

    order_id: str
    client_oid: str | None
    symbol: str
    side: str
    order_type: str
    price: Decimal | None = None
    size: Decimal | None = None
    funds: Decimal | None = None
    deal_size: Decimal = Decimal("0")
    deal_funds: Decimal = Decimal("0")
    fee: Decimal = Decimal("0")
    fee_currency: str | None = None
    time_in_force: str | None = None
    post_only: bool = False
    hidden: bool = False
    iceberg: bool = False
    stp: str | None = None
    remark: str | None = None
    tags: str | None = None
    active: bool = False
    in_order_book: bool = False
    cancel_exist: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def is_open(self) -> bool:
        """미체결 주문 여부"""
        return self.active

    @property
    def remaining_size(self) -> Decimal | None:
        """잔여 수량 (size 기준 주문만)"""
        if self.size is None:
            return None
        return self.size - self.deal_size


@dataclass(frozen=True)
class Deposit:
    """입금 내역

    Attributes:
        currency: 자산 코드
        amount: 입금 수량
        fee: 입금 수수료
        address: 입금 주소
        memo: 주소 메모
        chain: 체인 이름
        is_inner: 내부 입금 여부
        wallet_tx_id: 지갑 트랜잭션 해시
        status: 입금 상태
        remark: 메모
        arrears: 미상환 여부 (롤백 시 상환 필요)
        created_at: 생성 시간
        updated_at: 업데이트 시간
    """

    currency: str | None = None
    amount: Decimal | None = None
    fee: Decimal | None = None
    address: str | None = None
    memo: str | None = None
    chain: str | None = None
    is_inner: bool | None = None
    wallet_tx_id: str | None = None
    status: str | None = None
    remark: str | None = None
    arrears: bool | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def is_success(self) -> bool:
        """입금 완료 여부"""
        return self.status == DepositStatus.SUCCESS.value


@dataclass(frozen=True)
class DepositPage:
    """입금 내역 페이지"""

    current_page: int
    page_size: int
    total_num: int
    total_page: int
    items: list[Deposit] = field(default_factory=list)

    @property
    def has_next(self) -> bool:
        """다음 페이지 존재 여부"""
        return self.current_page < self.total_page


@dataclass(frozen=True)
class SubAccApiKey:
    """생성된 Sub-account API 키

    api_secret/passphrase는 생성 시에만 반환되므로 호출자가 보관해야 함.
    """

    sub_name: str
    remark: str
    api_key: str
    api_secret: str = field(repr=False)
    passphrase: str = field(repr=False)
    api_version: int = 3
    permission: str = ""
    ip_whitelist: str | None = None
    created_at: datetime | None = None


@dataclass(frozen=True)
class SubAccount:
    """Sub-account 요약 정보"""

    user_id: str
    sub_name: str
    uid: int | None = None
    status: int | None = None
    account_type: int | None = None
    access: str | None = None
    remarks: str | None = None
    created_at: datetime | None = None


@dataclass(frozen=True)
class SubAccountPage:
    """Sub-account 목록 페이지"""

    current_page: int
    page_size: int
    total_num: int
    total_page: int
    items: list[SubAccount] = field(default_factory=list)


@dataclass(frozen=True)
class SubAccountAsset:
    """Sub-account 계정별 자산 잔고"""

    currency: str
    balance: Decimal
    available: Decimal
    holds: Decimal
    base_currency: str | None = None
    base_currency_price: Decimal | None = None
    base_amount: Decimal | None = None
    tag: str | None = None


@dataclass(frozen=True)
class SubAccountBalance:
    """Sub-account 잔고 (계정 유형별)"""

    sub_user_id: str
    sub_name: str
    main_accounts: list[SubAccountAsset] = field(default_factory=list)
    trade_accounts: list[SubAccountAsset] = field(default_factory=list)
    margin_accounts: list[SubAccountAsset] = field(default_factory=list)
    trade_hf_accounts: list[SubAccountAsset] = field(default_factory=list)

    def total_balance(self, currency: str) -> Decimal:
        """모든 계정 유형에 걸친 특정 자산 합계"""
        accounts = (
            self.main_accounts
            + self.trade_accounts
            + self.margin_accounts
            + self.trade_hf_accounts
        )
        return sum(
            (a.balance for a in accounts if a.currency == currency),
            Decimal("0"),
        )
