"""
KuCoin 도메인별 엔드포인트 핸들러
"""

from adapters.kucoin.endpoints.base import EndpointHandler
from adapters.kucoin.endpoints.deposit import DepositEndpoints
from adapters.kucoin.endpoints.spot import SpotEndpoints
from adapters.kucoin.endpoints.sub_account import SubAccountEndpoints
from adapters.kucoin.endpoints.transfer import TransferEndpoints
from adapters.kucoin.endpoints.withdrawal import WithdrawalEndpoints

__all__ = [
    "EndpointHandler",
    "DepositEndpoints",
    "SpotEndpoints",
    "SubAccountEndpoints",
    "TransferEndpoints",
    "WithdrawalEndpoints",
]
