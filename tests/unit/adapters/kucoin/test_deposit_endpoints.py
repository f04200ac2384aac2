"""
입금 내역 엔드포인트 테스트
"""

from typing import Any
from unittest.mock import AsyncMock, patch

import pytest

from adapters.kucoin.rest_client import KucoinRestClient
from adapters.models import DepositHistoryRequest


def _page(items: list[dict[str, Any]], current: int, total_page: int) -> dict[str, Any]:
    return {
        "currentPage": current,
        "pageSize": 500,
        "totalNum": len(items),
        "totalPage": total_page,
        "items": items,
    }


class TestGetDepositHistory:
    """입금 내역 조회 테스트"""

    @pytest.mark.asyncio
    async def test_query_params(
        self,
        kucoin_client: KucoinRestClient,
        kucoin_deposit_page_response: dict[str, Any],
    ) -> None:
        """조건이 쿼리 파라미터로 전달됨"""
        mock = AsyncMock(return_value=kucoin_deposit_page_response)
        request = DepositHistoryRequest(currency="XRP", status="SUCCESS", page_size=50)

        with patch.object(kucoin_client, "_request", mock):
            page = await kucoin_client.deposit.get_deposit_history(request)

        assert page.items[0].currency == "XRP"
        mock.assert_awaited_once_with(
            "GET",
            "/api/v1/deposits",
            params={"currency": "XRP", "status": "SUCCESS", "pageSize": 50},
        )

    @pytest.mark.asyncio
    async def test_no_conditions(self, kucoin_client: KucoinRestClient) -> None:
        """조건 없이 조회"""
        mock = AsyncMock(return_value=_page([], 1, 0))

        with patch.object(kucoin_client, "_request", mock):
            page = await kucoin_client.deposit.get_deposit_history()

        assert page.items == []
        assert mock.call_args.kwargs["params"] == {}


class TestFindDepositByTxHash:
    """트랜잭션 해시 검색 테스트"""

    @pytest.mark.asyncio
    async def test_found_on_first_page(
        self,
        kucoin_client: KucoinRestClient,
        kucoin_deposit_response: dict[str, Any],
    ) -> None:
        """첫 페이지에서 발견"""
        tx_hash = kucoin_deposit_response["walletTxId"]
        mock = AsyncMock(return_value=_page([kucoin_deposit_response], 1, 1))

        with patch.object(kucoin_client, "_request", mock):
            deposit = await kucoin_client.deposit.find_deposit_by_tx_hash(tx_hash, currency="XRP")

        assert deposit is not None
        assert deposit.wallet_tx_id == tx_hash
        assert mock.call_args.kwargs["params"] == {
            "currency": "XRP",
            "currentPage": 1,
            "pageSize": 500,
        }

    @pytest.mark.asyncio
    async def test_found_on_later_page(
        self,
        kucoin_client: KucoinRestClient,
        kucoin_deposit_response: dict[str, Any],
    ) -> None:
        """다음 페이지까지 순회"""
        other = dict(kucoin_deposit_response, walletTxId="OTHER")
        mock = AsyncMock(
            side_effect=[
                _page([other], 1, 2),
                _page([kucoin_deposit_response], 2, 2),
            ]
        )

        with patch.object(kucoin_client, "_request", mock):
            deposit = await kucoin_client.deposit.find_deposit_by_tx_hash(
                kucoin_deposit_response["walletTxId"]
            )

        assert deposit is not None
        assert mock.await_count == 2
        assert mock.call_args.kwargs["params"]["currentPage"] == 2

    @pytest.mark.asyncio
    async def test_not_found(
        self,
        kucoin_client: KucoinRestClient,
        kucoin_deposit_response: dict[str, Any],
    ) -> None:
        """없으면 None"""
        mock = AsyncMock(return_value=_page([kucoin_deposit_response], 1, 1))

        with patch.object(kucoin_client, "_request", mock):
            deposit = await kucoin_client.deposit.find_deposit_by_tx_hash("MISSING")

        assert deposit is None

    @pytest.mark.asyncio
    async def test_max_pages(
        self,
        kucoin_client: KucoinRestClient,
        kucoin_deposit_response: dict[str, Any],
    ) -> None:
        """max_pages 도달 시 중단"""
        mock = AsyncMock(return_value=_page([kucoin_deposit_response], 1, 10))

        with patch.object(kucoin_client, "_request", mock):
            deposit = await kucoin_client.deposit.find_deposit_by_tx_hash(
                "MISSING", max_pages=1
            )

        assert deposit is None
        assert mock.await_count == 1

    @pytest.mark.asyncio
    async def test_empty_tx_hash(self, kucoin_client: KucoinRestClient) -> None:
        """빈 해시는 ValueError"""
        with pytest.raises(ValueError):
            await kucoin_client.deposit.find_deposit_by_tx_hash("")
