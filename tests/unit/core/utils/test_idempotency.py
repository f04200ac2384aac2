"""
core/utils/idempotency.py 테스트

clientOid 생성 및 검증 기능 테스트
"""

import pytest

from core.utils.idempotency import (
    CLIENT_OID_MAX_LENGTH,
    make_client_oid,
    validate_client_oid,
)


class TestMakeClientOid:
    """make_client_oid 함수 테스트"""

    def test_uuid_format(self) -> None:
        """UUID4 문자열 (36자)"""
        client_oid = make_client_oid()
        assert len(client_oid) == 36
        assert client_oid.count("-") == 4

    def test_unique(self) -> None:
        """매번 다른 값"""
        assert len({make_client_oid() for _ in range(100)}) == 100

    def test_generated_is_valid(self) -> None:
        """생성된 값은 항상 유효"""
        assert validate_client_oid(make_client_oid())


class TestValidateClientOid:
    """validate_client_oid 함수 테스트"""

    @pytest.mark.parametrize(
        "client_oid",
        ["abc", "order_1", "550e8400-e29b-41d4-a716-446655440000", "a" * CLIENT_OID_MAX_LENGTH],
    )
    def test_valid(self, client_oid: str) -> None:
        """허용 형식"""
        assert validate_client_oid(client_oid)

    @pytest.mark.parametrize(
        "client_oid",
        ["", "order#1", "with space", "a" * (CLIENT_OID_MAX_LENGTH + 1), "주문"],
    )
    def test_invalid(self, client_oid: str) -> None:
        """빈 값, 특수문자, 길이 초과"""
        assert not validate_client_oid(client_oid)

    @pytest.mark.parametrize("client_oid", ["order_1\n", "\norder_1", "order\n_1"])
    def test_newline_rejected(self, client_oid: str) -> None:
        """줄바꿈 포함 값은 전체 일치 실패"""
        assert not validate_client_oid(client_oid)
