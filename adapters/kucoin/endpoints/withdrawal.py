"""
출금 엔드포인트
"""

import logging

from adapters.kucoin.endpoints.base import EndpointHandler
from adapters.models import WithdrawRequest
from core.constants import KucoinEndpoints

logger = logging.getLogger(__name__)


class WithdrawalEndpoints(EndpointHandler):
    """출금 핸들러"""

    async def withdraw(self, request: WithdrawRequest) -> str:
        """출금 요청

        Returns:
            출금 ID
        """
        data = await self._client._request(
            "POST",
            KucoinEndpoints.WITHDRAWALS,
            body=request.to_dict(),
        )
        withdrawal_id = data["withdrawalId"]

        logger.info(
            "출금 요청 완료",
            extra={
                "withdrawal_id": withdrawal_id,
                "currency": request.currency,
                "amount": str(request.amount),
                "chain": request.chain,
                "withdraw_type": request.withdraw_type,
            },
        )
        return withdrawal_id
