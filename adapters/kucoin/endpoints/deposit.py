"""
입금 내역 엔드포인트

조건별 입금 내역 조회 및 트랜잭션 해시 기반 단건 검색.
"""

import logging
from dataclasses import replace

from adapters.kucoin.endpoints.base import EndpointHandler
from adapters.kucoin.models import parse_deposit_page
from adapters.models import (
    DEPOSIT_PAGE_SIZE_MAX,
    Deposit,
    DepositHistoryRequest,
    DepositPage,
)
from core.constants import KucoinEndpoints

logger = logging.getLogger(__name__)


class DepositEndpoints(EndpointHandler):
    """입금 내역 핸들러"""

    async def get_deposit_history(
        self,
        request: DepositHistoryRequest | None = None,
    ) -> DepositPage:
        """입금 내역 조회

        Args:
            request: 조회 조건 (None이면 조건 없이 첫 페이지)

        Returns:
            입금 내역 페이지
        """
        if request is None:
            request = DepositHistoryRequest()

        data = await self._client._request(
            "GET",
            KucoinEndpoints.DEPOSITS,
            params=request.to_params(),
        )
        page = parse_deposit_page(data or {})

        logger.debug(
            "입금 내역 조회 완료",
            extra={
                "currency": request.currency,
                "page": page.current_page,
                "items": len(page.items),
                "total": page.total_num,
            },
        )
        return page

    async def find_deposit_by_tx_hash(
        self,
        tx_hash: str,
        currency: str | None = None,
        max_pages: int | None = None,
    ) -> Deposit | None:
        """트랜잭션 해시(walletTxId)로 입금 내역 검색

        찾을 때까지 페이지를 순회.

        Args:
            tx_hash: 검색할 트랜잭션 해시
            currency: 자산 코드 (지정 시 검색 범위 축소)
            max_pages: 최대 조회 페이지 수 (None이면 전체)

        Returns:
            일치하는 입금 내역 (없으면 None)
        """
        if not tx_hash:
            raise ValueError("tx_hash is required")

        request = DepositHistoryRequest(
            currency=currency,
            current_page=1,
            page_size=DEPOSIT_PAGE_SIZE_MAX,
        )

        pages_read = 0
        while True:
            page = await self.get_deposit_history(request)
            pages_read += 1

            for item in page.items:
                if item.wallet_tx_id == tx_hash:
                    logger.info(
                        "입금 내역 검색 성공",
                        extra={"tx_hash": tx_hash, "currency": item.currency},
                    )
                    return item

            if not page.has_next or (max_pages is not None and pages_read >= max_pages):
                break

            request = replace(request, current_page=page.current_page + 1)

        logger.info(
            "입금 내역 없음",
            extra={"tx_hash": tx_hash, "pages_read": pages_read},
        )
        return None
