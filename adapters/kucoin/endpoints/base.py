"""
엔드포인트 핸들러 기본 클래스

도메인별 핸들러는 KucoinRestClient._request를 통해서만 HTTP 호출.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from adapters.kucoin.rest_client import KucoinRestClient


class EndpointHandler:
    """도메인별 엔드포인트 핸들러

    Args:
        client: 서명/전송을 담당하는 KucoinRestClient
    """

    def __init__(self, client: "KucoinRestClient"):
        self._client = client
