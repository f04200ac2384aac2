"""
Spot 주문 엔드포인트 (HF)

주문 생성/배치 생성/취소/부분 취소/조회.
"""

import logging
from urllib.parse import quote

from adapters.kucoin.endpoints.base import EndpointHandler
from adapters.kucoin.models import (
    parse_cancel_result,
    parse_order_ack,
    parse_order_result,
    parse_spot_order,
)
from adapters.kucoin.rate_limiter import KucoinApiError, OrderError
from adapters.models import (
    BatchSpotOrderRequest,
    SpotCancelRequest,
    SpotCancelResult,
    SpotOrder,
    SpotOrderAck,
    SpotOrderRequest,
    SpotOrderResult,
)
from core.constants import KucoinEndpoints

logger = logging.getLogger(__name__)


class SpotEndpoints(EndpointHandler):
    """Spot 주문 핸들러"""

    async def place_order(self, request: SpotOrderRequest) -> SpotOrderAck:
        """주문 생성"""
        body = request.to_dict()

        try:
            data = await self._client._request(
                "POST",
                KucoinEndpoints.SPOT_ORDER,
                body=body,
            )
        except KucoinApiError as e:
            logger.error(
                "주문 생성 실패",
                extra={
                    "error_code": e.code,
                    "error_message": e.message,
                    "request": body,
                },
            )
            raise OrderError(code=e.code, message=e.message, status_code=e.status_code) from e

        ack = parse_order_ack(data)
        logger.info(
            "주문 생성 완료",
            extra={
                "order_id": ack.order_id,
                "client_oid": ack.client_oid,
                "symbol": request.symbol,
                "side": request.side,
                "type": request.order_type,
            },
        )
        return ack

    async def place_batch_orders(
        self,
        request: BatchSpotOrderRequest,
    ) -> list[SpotOrderResult]:
        """배치 주문 생성 (최대 5건)

        개별 주문 실패는 예외가 아닌 success=False 결과로 반환.
        """
        body = request.to_dict()

        try:
            data = await self._client._request(
                "POST",
                KucoinEndpoints.SPOT_BATCH_ORDER,
                body=body,
            )
        except KucoinApiError as e:
            logger.error(
                "배치 주문 생성 실패",
                extra={
                    "error_code": e.code,
                    "error_message": e.message,
                    "order_count": len(request.orders),
                },
            )
            raise OrderError(code=e.code, message=e.message, status_code=e.status_code) from e

        results = [parse_order_result(item) for item in data or []]

        failed = [r for r in results if not r.success]
        if failed:
            logger.warning(
                "배치 주문 일부 실패",
                extra={
                    "failed": len(failed),
                    "total": len(results),
                    "fail_msgs": [r.fail_msg for r in failed],
                },
            )
        else:
            logger.info("배치 주문 생성 완료", extra={"total": len(results)})

        return results

    async def cancel_order(self, order_id: str, symbol: str) -> str:
        """주문 취소 (orderId 기준)

        Returns:
            취소된 주문 ID
        """
        if not order_id:
            raise ValueError("order_id is required")

        try:
            data = await self._client._request(
                "DELETE",
                f"{KucoinEndpoints.SPOT_ORDER}/{quote(order_id, safe='')}",
                params={"symbol": symbol},
            )
        except KucoinApiError as e:
            logger.error(
                "주문 취소 실패",
                extra={
                    "error_code": e.code,
                    "error_message": e.message,
                    "symbol": symbol,
                    "order_id": order_id,
                },
            )
            raise OrderError(code=e.code, message=e.message, status_code=e.status_code) from e

        logger.info("주문 취소 완료", extra={"order_id": order_id, "symbol": symbol})
        return data["orderId"]

    async def cancel_order_by_client_oid(self, client_oid: str, symbol: str) -> str:
        """주문 취소 (clientOid 기준)

        Returns:
            취소된 주문의 clientOid
        """
        if not client_oid:
            raise ValueError("client_oid is required")

        try:
            data = await self._client._request(
                "DELETE",
                f"{KucoinEndpoints.SPOT_CANCEL_BY_CLIENT_OID}/{quote(client_oid, safe='')}",
                params={"symbol": symbol},
            )
        except KucoinApiError as e:
            logger.error(
                "주문 취소 실패",
                extra={
                    "error_code": e.code,
                    "error_message": e.message,
                    "symbol": symbol,
                    "client_oid": client_oid,
                },
            )
            raise OrderError(code=e.code, message=e.message, status_code=e.status_code) from e

        logger.info("주문 취소 완료", extra={"client_oid": client_oid, "symbol": symbol})
        return data["clientOid"]

    async def cancel_partial(self, request: SpotCancelRequest) -> SpotCancelResult:
        """주문 부분 취소 (지정 수량만큼)"""
        try:
            data = await self._client._request(
                "DELETE",
                f"{KucoinEndpoints.SPOT_CANCEL_PARTIAL}/{quote(request.order_id, safe='')}",
                params=request.to_params(),
            )
        except KucoinApiError as e:
            logger.error(
                "부분 취소 실패",
                extra={
                    "error_code": e.code,
                    "error_message": e.message,
                    "order_id": request.order_id,
                    "cancel_size": str(request.cancel_size),
                },
            )
            raise OrderError(code=e.code, message=e.message, status_code=e.status_code) from e

        result = parse_cancel_result(data)
        logger.info(
            "부분 취소 완료",
            extra={"order_id": result.order_id, "cancel_size": str(result.cancel_size)},
        )
        return result

    async def get_order(self, order_id: str, symbol: str) -> SpotOrder:
        """주문 상세 조회"""
        if not order_id:
            raise ValueError("order_id is required")

        data = await self._client._request(
            "GET",
            f"{KucoinEndpoints.SPOT_ORDER}/{quote(order_id, safe='')}",
            params={"symbol": symbol},
        )
        return parse_spot_order(data)
