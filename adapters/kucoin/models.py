"""
KuCoin API 응답 -> 공통 모델 변환

KuCoin 응답의 data 필드를 adapters.models의 표준 모델로 변환.
모든 금액/수량은 문자열에서 Decimal로 변환.
"""

from datetime import datetime
from decimal import Decimal
from typing import Any

from adapters.models import (
    Deposit,
    DepositPage,
    SpotCancelResult,
    SpotOrder,
    SpotOrderAck,
    SpotOrderResult,
    SubAccApiKey,
    SubAccount,
    SubAccountAsset,
    SubAccountBalance,
    SubAccountPage,
)
from core.utils.timezone import utc_from_timestamp_ms


def _decimal(value: Any) -> Decimal | None:
    # 빈 문자열/None은 None 처리
    if value is None or value == "":
        return None
    return Decimal(str(value))


def _datetime(value: Any) -> datetime | None:
    if not value:
        return None
    return utc_from_timestamp_ms(int(value))


def parse_order_ack(data: dict[str, Any]) -> SpotOrderAck:
    """주문 접수 응답 -> SpotOrderAck

    POST /api/v1/hf/orders 응답 data 예시:
    {
        "orderId": "670fd33bf9406e0007ab3945",
        "clientOid": "5c52e11203aa677f33e493fb"
    }
    """
    return SpotOrderAck(
        order_id=data["orderId"],
        client_oid=data.get("clientOid", ""),
    )


def parse_order_result(data: dict[str, Any]) -> SpotOrderResult:
    """배치 주문 개별 결과 -> SpotOrderResult

    POST /api/v1/hf/orders/multi 응답 data 항목 예시:
    {
        "orderId": "6710d8336afcdb0007319c27",
        "clientOid": "client order id 12",
        "success": true
    }
    {
        "success": false,
        "failMsg": "The order funds should more then 0.1 USDT."
    }
    """
    return SpotOrderResult(
        success=bool(data.get("success", False)),
        order_id=data.get("orderId"),
        client_oid=data.get("clientOid"),
        fail_msg=data.get("failMsg"),
    )


def parse_cancel_result(data: dict[str, Any]) -> SpotCancelResult:
    """부분 취소 응답 -> SpotCancelResult

    DELETE /api/v1/hf/orders/cancel/{orderId} 응답 data 예시:
    {
        "orderId": "6711f73c1ef16c000717bb31",
        "cancelSize": "0.00001"
    }
    """
    return SpotCancelResult(
        order_id=data["orderId"],
        cancel_size=Decimal(data["cancelSize"]),
    )


def parse_spot_order(data: dict[str, Any]) -> SpotOrder:
    """주문 상세 응답 -> SpotOrder

    GET /api/v1/hf/orders/{orderId} 응답 data 예시:
    {
        "id": "6717422bd51c29000775ea03",
        "clientOid": "5c52e11203aa677f33e493fb",
        "symbol": "BTC-USDT",
        "opType": "DEAL",
        "type": "limit",
        "side": "buy",
        "price": "70000",
        "size": "0.00001",
        "funds": "0.7",
        "dealSize": "0.00001",
        "dealFunds": "0.677176",
        "remainSize": "0",
        "remainFunds": "0.022824",
        "fee": "0.000677176",
        "feeCurrency": "USDT",
        "stp": null,
        "timeInForce": "GTC",
        "postOnly": false,
        "hidden": false,
        "iceberg": false,
        "visibleSize": "0",
        "cancelAfter": 0,
        "channel": "API",
        "remark": "order remarks",
        "tags": null,
        "cancelExist": false,
        "tradeType": "TRADE",
        "inOrderBook": false,
        "active": false,
        "tax": "0",
        "createdAt": 1729577515444,
        "lastUpdatedAt": 1729577515481
    }
    """
    # 시장가 주문은 price가 "0"으로 내려옴
    price = _decimal(data.get("price"))
    if price is not None and price == Decimal("0"):
        price = None

    return SpotOrder(
        order_id=data["id"],
        client_oid=data.get("clientOid"),
        symbol=data["symbol"],
        side=data["side"],
        order_type=data["type"],
        price=price,
        size=_decimal(data.get("size")),
        funds=_decimal(data.get("funds")),
        deal_size=_decimal(data.get("dealSize")) or Decimal("0"),
        deal_funds=_decimal(data.get("dealFunds")) or Decimal("0"),
        fee=_decimal(data.get("fee")) or Decimal("0"),
        fee_currency=data.get("feeCurrency"),
        time_in_force=data.get("timeInForce"),
        post_only=bool(data.get("postOnly", False)),
        hidden=bool(data.get("hidden", False)),
        iceberg=bool(data.get("iceberg", False)),
        stp=data.get("stp") or None,
        remark=data.get("remark"),
        tags=data.get("tags"),
        active=bool(data.get("active", False)),
        in_order_book=bool(data.get("inOrderBook", False)),
        cancel_exist=bool(data.get("cancelExist", False)),
        created_at=_datetime(data.get("createdAt")),
        updated_at=_datetime(data.get("lastUpdatedAt")),
    )


def parse_deposit(data: dict[str, Any]) -> Deposit:
    """입금 내역 항목 -> Deposit

    GET /api/v1/deposits 응답 items 항목 예시:
    {
        "currency": "XRP",
        "chain": "xrp",
        "status": "SUCCESS",
        "address": "xxxxxxx",
        "memo": "1919537769",
        "isInner": false,
        "amount": "20.50000000",
        "fee": "0.00000000",
        "walletTxId": "2C24A6D5B3E7D5B6AA6534025B9B107AC910309A98825BF5581E25BEC94AD83B",
        "createdAt": 1666600519000,
        "updatedAt": 1666600549000,
        "remark": "Deposit",
        "arrears": false
    }
    """
    return Deposit(
        currency=data.get("currency"),
        amount=_decimal(data.get("amount")),
        fee=_decimal(data.get("fee")),
        address=data.get("address"),
        memo=data.get("memo") or None,
        chain=data.get("chain"),
        is_inner=data.get("isInner"),
        wallet_tx_id=data.get("walletTxId"),
        status=data.get("status"),
        remark=data.get("remark"),
        arrears=data.get("arrears"),
        created_at=_datetime(data.get("createdAt")),
        updated_at=_datetime(data.get("updatedAt")),
    )


def parse_deposit_page(data: dict[str, Any]) -> DepositPage:
    """입금 내역 페이지 -> DepositPage"""
    return DepositPage(
        current_page=int(data.get("currentPage", 1)),
        page_size=int(data.get("pageSize", 0)),
        total_num=int(data.get("totalNum", 0)),
        total_page=int(data.get("totalPage", 0)),
        items=[parse_deposit(item) for item in data.get("items") or []],
    )


def parse_sub_api_key(data: dict[str, Any]) -> SubAccApiKey:
    """Sub-account API 키 생성 응답 -> SubAccApiKey

    POST /api/v1/sub/api-key 응답 data 예시:
    {
        "subName": "AAAAAAAAAA0007",
        "remark": "remark",
        "apiKey": "630325e0e750870001829864",
        "apiSecret": "110f31fc-61c5-4baf-a29f-3f19a62bbf5d",
        "apiVersion": 3,
        "passphrase": "11111111",
        "permission": "General",
        "createdAt": 1661150688000
    }
    """
    return SubAccApiKey(
        sub_name=data["subName"],
        remark=data.get("remark", ""),
        api_key=data["apiKey"],
        api_secret=data["apiSecret"],
        passphrase=data["passphrase"],
        api_version=int(data.get("apiVersion", 3)),
        permission=data.get("permission", ""),
        ip_whitelist=data.get("ipWhitelist") or None,
        created_at=_datetime(data.get("createdAt")),
    )


def parse_sub_account(data: dict[str, Any]) -> SubAccount:
    """Sub-account 요약 -> SubAccount

    GET /api/v2/sub/user 응답 items 항목 예시:
    {
        "userId": "63743f07e0c5230001761d08",
        "uid": 169579801,
        "subName": "testapi6",
        "status": 2,
        "type": 0,
        "access": "All",
        "createdAt": 1668562696000,
        "remarks": "remarks"
    }
    """
    return SubAccount(
        user_id=data["userId"],
        sub_name=data["subName"],
        uid=data.get("uid"),
        status=data.get("status"),
        account_type=data.get("type"),
        access=data.get("access"),
        remarks=data.get("remarks"),
        created_at=_datetime(data.get("createdAt")),
    )


def parse_sub_account_page(data: dict[str, Any]) -> SubAccountPage:
    """Sub-account 목록 페이지 -> SubAccountPage"""
    return SubAccountPage(
        current_page=int(data.get("currentPage", 1)),
        page_size=int(data.get("pageSize", 0)),
        total_num=int(data.get("totalNum", 0)),
        total_page=int(data.get("totalPage", 0)),
        items=[parse_sub_account(item) for item in data.get("items") or []],
    )


def parse_sub_account_asset(data: dict[str, Any]) -> SubAccountAsset:
    """Sub-account 자산 항목 -> SubAccountAsset

    {
        "currency": "USDT",
        "balance": "0.01",
        "available": "0.01",
        "holds": "0",
        "baseCurrency": "BTC",
        "baseCurrencyPrice": "62384.3",
        "baseAmount": "0.00000016",
        "tag": "DEFAULT"
    }
    """
    return SubAccountAsset(
        currency=data["currency"],
        balance=Decimal(data.get("balance", "0")),
        available=Decimal(data.get("available", "0")),
        holds=Decimal(data.get("holds", "0")),
        base_currency=data.get("baseCurrency"),
        base_currency_price=_decimal(data.get("baseCurrencyPrice")),
        base_amount=_decimal(data.get("baseAmount")),
        tag=data.get("tag"),
    )


def parse_sub_account_balance(data: dict[str, Any]) -> SubAccountBalance:
    """Sub-account 잔고 응답 -> SubAccountBalance

    GET /api/v1/sub-accounts/{subUserId} 응답 data 예시:
    {
        "subUserId": "63743f07e0c5230001761d08",
        "subName": "testapi6",
        "mainAccounts": [...],
        "tradeAccounts": [...],
        "marginAccounts": [...],
        "tradeHFAccounts": []
    }
    """

    def assets(key: str) -> list[SubAccountAsset]:
        return [parse_sub_account_asset(item) for item in data.get(key) or []]

    return SubAccountBalance(
        sub_user_id=data["subUserId"],
        sub_name=data.get("subName", ""),
        main_accounts=assets("mainAccounts"),
        trade_accounts=assets("tradeAccounts"),
        margin_accounts=assets("marginAccounts"),
        trade_hf_accounts=assets("tradeHFAccounts"),
    )
