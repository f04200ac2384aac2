"""
유틸리티 패키지

clientOid 관리, 시간 변환 등 공통 유틸리티
"""

from core.utils.idempotency import make_client_oid, validate_client_oid
from core.utils.timezone import (
    now_utc,
    now_ms,
    utc_from_timestamp_ms,
    to_timestamp_ms,
)

__all__ = [
    "make_client_oid",
    "validate_client_oid",
    "now_utc",
    "now_ms",
    "utc_from_timestamp_ms",
    "to_timestamp_ms",
]
