"""
KuCoin 요청 서명

prehash 문자열 {timestamp + METHOD + endpoint + body}를 API Secret으로
HMAC-SHA256 서명 후 base64 인코딩. Passphrase도 같은 방식으로 서명 (Key Version 2 이상).
"""

import base64
import hashlib
import hmac
from dataclasses import dataclass, field

from core.constants import Defaults


@dataclass(frozen=True)
class Credentials:
    """API 인증 정보 (Key, Secret, Passphrase)

    repr/로그에 키 값이 노출되지 않도록 repr=False 처리.
    """

    api_key: str = field(repr=False)
    api_secret: str = field(repr=False)
    api_passphrase: str = field(repr=False)

    def __post_init__(self) -> None:
        """유효성 검증"""
        if not self.api_key:
            raise ValueError("api_key is required")
        if not self.api_secret:
            raise ValueError("api_secret is required")
        if not self.api_passphrase:
            raise ValueError("api_passphrase is required")


def _hmac_sha256_base64(secret: str, message: str) -> str:
    digest = hmac.new(
        secret.encode("utf-8"),
        message.encode("utf-8"),
        hashlib.sha256,
    ).digest()
    return base64.b64encode(digest).decode("utf-8")


def sign_prehash(
    api_secret: str,
    timestamp: str,
    method: str,
    endpoint: str,
    body: str = "",
) -> str:
    """요청 서명 (KC-API-SIGN)

    Args:
        api_secret: API 시크릿
        timestamp: KC-API-TIMESTAMP 헤더와 동일한 밀리초 문자열
        method: HTTP 메서드 (대문자로 정규화)
        endpoint: 쿼리 스트링을 포함한 API 경로 (예: /api/v1/deposits?currency=BTC)
        body: 전송되는 JSON 본문 문자열 (GET/DELETE는 빈 문자열)

    Returns:
        base64 인코딩된 서명
    """
    prehash = f"{timestamp}{method.upper()}{endpoint}{body}"
    return _hmac_sha256_base64(api_secret, prehash)


def sign_passphrase(api_secret: str, api_passphrase: str) -> str:
    """Passphrase 서명 (KC-API-PASSPHRASE)

    Returns:
        base64 인코딩된 서명된 passphrase
    """
    return _hmac_sha256_base64(api_secret, api_passphrase)


def build_auth_headers(
    credentials: Credentials,
    method: str,
    endpoint: str,
    body: str,
    timestamp: str,
) -> dict[str, str]:
    """인증 헤더 생성

    Args:
        credentials: API 인증 정보
        method: HTTP 메서드
        endpoint: 쿼리 스트링을 포함한 API 경로
        body: 전송되는 JSON 본문 문자열
        timestamp: 밀리초 타임스탬프 문자열

    Returns:
        KC-API-* 헤더 딕셔너리
    """
    return {
        "Content-Type": "application/json",
        "KC-API-KEY": credentials.api_key,
        "KC-API-SIGN": sign_prehash(
            credentials.api_secret, timestamp, method, endpoint, body
        ),
        "KC-API-TIMESTAMP": timestamp,
        "KC-API-PASSPHRASE": sign_passphrase(
            credentials.api_secret, credentials.api_passphrase
        ),
        "KC-API-KEY-VERSION": Defaults.API_KEY_VERSION,
    }
