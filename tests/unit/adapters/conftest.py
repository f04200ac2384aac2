"""
어댑터 테스트 픽스처

KuCoin 응답 샘플 및 HTTP mock 헬퍼 제공.
"""

from typing import Any, Callable
from unittest.mock import MagicMock

import pytest

from adapters.kucoin.auth import Credentials
from adapters.kucoin.rest_client import KucoinRestClient


# -------------------------------------------------------------------------
# HTTP mock 헬퍼
# -------------------------------------------------------------------------

@pytest.fixture
def make_response() -> Callable[..., MagicMock]:
    """httpx.Response 대용 MagicMock 생성기"""

    def _make(
        payload: Any,
        status_code: int = 200,
        headers: dict[str, str] | None = None,
    ) -> MagicMock:
        response = MagicMock()
        response.status_code = status_code
        response.json.return_value = payload
        response.headers = headers or {}
        response.text = str(payload)
        return response

    return _make


@pytest.fixture
def ok() -> Callable[[Any], dict[str, Any]]:
    """성공 envelope 생성기"""

    def _ok(data: Any) -> dict[str, Any]:
        return {"code": "200000", "data": data}

    return _ok


@pytest.fixture
def kucoin_client(credentials: Credentials) -> KucoinRestClient:
    """테스트용 KuCoin 클라이언트"""
    return KucoinRestClient(credentials, base_url="https://api.kucoin.test")


# -------------------------------------------------------------------------
# KuCoin 응답 샘플 (data 필드)
# -------------------------------------------------------------------------

@pytest.fixture
def kucoin_spot_order_response() -> dict[str, Any]:
    """주문 상세 응답 샘플"""
    return {
        "id": "6717422bd51c29000775ea03",
        "clientOid": "5c52e11203aa677f33e493fb",
        "symbol": "BTC-USDT",
        "opType": "DEAL",
        "type": "limit",
        "side": "buy",
        "price": "70000",
        "size": "0.00001",
        "funds": "0.7",
        "dealSize": "0.000004",
        "dealFunds": "0.28",
        "remainSize": "0.000006",
        "remainFunds": "0.42",
        "fee": "0.00028",
        "feeCurrency": "USDT",
        "stp": None,
        "timeInForce": "GTC",
        "postOnly": False,
        "hidden": False,
        "iceberg": False,
        "visibleSize": "0",
        "cancelAfter": 0,
        "channel": "API",
        "remark": "order remarks",
        "tags": None,
        "cancelExist": False,
        "tradeType": "TRADE",
        "inOrderBook": True,
        "active": True,
        "tax": "0",
        "createdAt": 1729577515444,
        "lastUpdatedAt": 1729577515481,
    }


@pytest.fixture
def kucoin_deposit_response() -> dict[str, Any]:
    """입금 내역 항목 샘플"""
    return {
        "currency": "XRP",
        "chain": "xrp",
        "status": "SUCCESS",
        "address": "rNFugeoj3ZN8Wv6xhuLegUBBPXKCyWLRkB",
        "memo": "1919537769",
        "isInner": False,
        "amount": "20.50000000",
        "fee": "0.00000000",
        "walletTxId": "2C24A6D5B3E7D5B6AA6534025B9B107AC910309A98825BF5581E25BEC94AD83B",
        "createdAt": 1666600519000,
        "updatedAt": 1666600549000,
        "remark": "Deposit",
        "arrears": False,
    }


@pytest.fixture
def kucoin_deposit_page_response(
    kucoin_deposit_response: dict[str, Any],
) -> dict[str, Any]:
    """입금 내역 페이지 샘플 (단일 페이지)"""
    return {
        "currentPage": 1,
        "pageSize": 50,
        "totalNum": 1,
        "totalPage": 1,
        "items": [kucoin_deposit_response],
    }


@pytest.fixture
def kucoin_sub_api_key_response() -> dict[str, Any]:
    """Sub-account API 키 생성 응답 샘플"""
    return {
        "subName": "AAAAAAAAAA0007",
        "remark": "remark",
        "apiKey": "630325e0e750870001829864",
        "apiSecret": "110f31fc-61c5-4baf-a29f-3f19a62bbf5d",
        "apiVersion": 3,
        "passphrase": "11111111",
        "permission": "General",
        "createdAt": 1661150688000,
    }


@pytest.fixture
def kucoin_sub_users_response() -> dict[str, Any]:
    """Sub-account 목록 응답 샘플"""
    return {
        "currentPage": 1,
        "pageSize": 10,
        "totalNum": 1,
        "totalPage": 1,
        "items": [
            {
                "userId": "63743f07e0c5230001761d08",
                "uid": 169579801,
                "subName": "testapi6",
                "status": 2,
                "type": 0,
                "access": "All",
                "createdAt": 1668562696000,
                "remarks": "remarks",
            }
        ],
    }


@pytest.fixture
def kucoin_sub_balance_response() -> dict[str, Any]:
    """Sub-account 잔고 응답 샘플"""
    return {
        "subUserId": "63743f07e0c5230001761d08",
        "subName": "testapi6",
        "mainAccounts": [
            {
                "currency": "USDT",
                "balance": "0.01",
                "available": "0.01",
                "holds": "0",
                "baseCurrency": "BTC",
                "baseCurrencyPrice": "62384.3",
                "baseAmount": "0.00000016",
                "tag": "DEFAULT",
            }
        ],
        "tradeAccounts": [
            {
                "currency": "USDT",
                "balance": "1.5",
                "available": "1.0",
                "holds": "0.5",
            }
        ],
        "marginAccounts": [],
        "tradeHFAccounts": [],
    }
