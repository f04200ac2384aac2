"""
계정 간 이체 엔드포인트 (universal transfer)
"""

import logging

from adapters.kucoin.endpoints.base import EndpointHandler
from adapters.models import TransferRequest
from core.constants import KucoinEndpoints

logger = logging.getLogger(__name__)


class TransferEndpoints(EndpointHandler):
    """이체 핸들러"""

    async def transfer(self, request: TransferRequest) -> str:
        """계정 간 이체 실행

        Returns:
            이체 주문 ID
        """
        data = await self._client._request(
            "POST",
            KucoinEndpoints.UNIVERSAL_TRANSFER,
            body=request.to_dict(),
        )
        order_id = data["orderId"]

        logger.info(
            "이체 완료",
            extra={
                "order_id": order_id,
                "client_oid": request.client_oid,
                "currency": request.currency,
                "amount": str(request.amount),
                "from": request.from_account_type,
                "to": request.to_account_type,
                "type": request.transfer_type,
            },
        )
        return order_id
