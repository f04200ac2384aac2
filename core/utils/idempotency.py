"""
Idempotency 유틸리티

clientOid 생성 및 검증 기능 제공.
KuCoin 규칙: 최대 40자, 영문/숫자/밑줄(_)/하이픈(-)만 허용.
"""

import re
import uuid

CLIENT_OID_MAX_LENGTH: int = 40

_CLIENT_OID_PATTERN = re.compile(r"[A-Za-z0-9_-]+")


def make_client_oid() -> str:
    """새 clientOid 생성 (UUID4, 36자)

    Example:
        >>> len(make_client_oid())
        36
    """
    return str(uuid.uuid4())


def validate_client_oid(client_oid: str) -> bool:
    """clientOid 형식 유효성 검사

    Args:
        client_oid: 검증할 clientOid

    Returns:
        True: 유효한 형식
        False: 비어 있거나, 40자 초과이거나, 허용되지 않는 문자 포함

    Example:
        >>> validate_client_oid("550e8400-e29b-41d4-a716-446655440000")
        True
        >>> validate_client_oid("order#1")
        False
    """
    if not client_oid or len(client_oid) > CLIENT_OID_MAX_LENGTH:
        return False

    return _CLIENT_OID_PATTERN.fullmatch(client_oid) is not None
