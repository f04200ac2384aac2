"""
어댑터 레이어

외부 서비스(거래소)와의 연동을 담당.
요청/응답 모델은 adapters.models, 거래소 구현은 adapters.kucoin.
"""

from adapters.models import (
    BatchSpotOrderRequest,
    Deposit,
    DepositHistoryRequest,
    DepositPage,
    MissingIsolatedTagError,
    SpotCancelRequest,
    SpotCancelResult,
    SpotOrder,
    SpotOrderAck,
    SpotOrderRequest,
    SpotOrderResult,
    SubAccApiKey,
    SubAccount,
    SubAccountAsset,
    SubAccountBalance,
    SubAccountPage,
    SubAccRequest,
    TransferRequest,
    WithdrawRequest,
)

__all__ = [
    # Requests
    "SpotOrderRequest",
    "BatchSpotOrderRequest",
    "SpotCancelRequest",
    "DepositHistoryRequest",
    "TransferRequest",
    "WithdrawRequest",
    "SubAccRequest",
    "MissingIsolatedTagError",
    # Responses
    "SpotOrderAck",
    "SpotOrderResult",
    "SpotCancelResult",
    "SpotOrder",
    "Deposit",
    "DepositPage",
    "SubAccApiKey",
    "SubAccount",
    "SubAccountPage",
    "SubAccountAsset",
    "SubAccountBalance",
]
