"""
Sub-account 관리 엔드포인트

API 키 생성, 서브 계정 목록, 서브 계정 잔고 조회.
"""

import logging
from typing import Any
from urllib.parse import quote

from adapters.kucoin.endpoints.base import EndpointHandler
from adapters.kucoin.models import (
    parse_sub_account_balance,
    parse_sub_account_page,
    parse_sub_api_key,
)
from adapters.models import (
    SubAccApiKey,
    SubAccountBalance,
    SubAccountPage,
    SubAccRequest,
)
from core.constants import KucoinEndpoints

logger = logging.getLogger(__name__)


class SubAccountEndpoints(EndpointHandler):
    """Sub-account 핸들러"""

    async def add_api(self, request: SubAccRequest) -> SubAccApiKey:
        """Sub-account API 키 생성

        반환된 api_secret/passphrase는 다시 조회할 수 없음.
        """
        data = await self._client._request(
            "POST",
            KucoinEndpoints.SUB_API_KEY,
            body=request.to_dict(),
        )
        api_key = parse_sub_api_key(data)

        logger.info(
            "Sub-account API 키 생성 완료",
            extra={
                "sub_name": api_key.sub_name,
                "permission": api_key.permission,
            },
        )
        return api_key

    async def fetch_all(
        self,
        current_page: int | None = None,
        page_size: int | None = None,
    ) -> SubAccountPage:
        """모든 Sub-account 요약 조회 (페이지 단위)"""
        params: dict[str, Any] = {}
        if current_page is not None:
            params["currentPage"] = current_page
        if page_size is not None:
            params["pageSize"] = page_size

        data = await self._client._request(
            "GET",
            KucoinEndpoints.SUB_USERS,
            params=params or None,
        )
        return parse_sub_account_page(data or {})

    async def balance(self, sub_user_id: str) -> SubAccountBalance:
        """특정 Sub-account 잔고 조회"""
        if not sub_user_id:
            raise ValueError("sub_user_id is required")

        data = await self._client._request(
            "GET",
            f"{KucoinEndpoints.SUB_ACCOUNTS}/{quote(sub_user_id, safe='')}",
        )
        return parse_sub_account_balance(data)
