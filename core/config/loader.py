"""
설정 로더

secrets.yaml 로드 및 거래소 설정 생성
"""

from dataclasses import dataclass, field
from pathlib import Path

import yaml

from core.constants import KucoinEndpoints, Paths


@dataclass(frozen=True)
class Secrets:
    """보안 설정 (secrets.yaml에서 로드)

    불변 데이터 구조로 설정 변경 방지.
    repr에 키 값이 노출되지 않도록 처리.
    """

    api_key: str = field(repr=False)
    api_secret: str = field(repr=False)
    api_passphrase: str = field(repr=False)
    rest_url: str = KucoinEndpoints.REST_URL


@dataclass(frozen=True)
class ExchangeConfig:
    """거래소 연결 설정

    API 키와 엔드포인트 정보를 포함
    """

    rest_url: str
    api_key: str = field(repr=False)
    api_secret: str = field(repr=False)
    api_passphrase: str = field(repr=False)


class SecretsLoadError(Exception):
    """Secrets 로드 실패 예외"""

    pass


def load_secrets(path: Path | None = None) -> Secrets:
    """secrets.yaml 파일 로드

    형식:
        kucoin:
          api_key: "..."
          api_secret: "..."
          api_passphrase: "..."
          rest_url: "https://api.kucoin.com"   # 선택

    Args:
        path: secrets.yaml 경로 (None이면 기본 경로 사용)

    Returns:
        Secrets 인스턴스

    Raises:
        SecretsLoadError: 파일이 없거나 형식이 잘못된 경우
    """
    if path is None:
        path = Paths.SECRETS_FILE

    if not path.exists():
        raise SecretsLoadError(f"secrets.yaml 파일을 찾을 수 없습니다: {path}")

    try:
        content = path.read_text(encoding="utf-8")
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise SecretsLoadError(f"secrets.yaml 파싱 실패: {e}") from e

    if data is None:
        raise SecretsLoadError("secrets.yaml이 비어 있습니다")

    section = data.get("kucoin")
    if not isinstance(section, dict):
        raise SecretsLoadError("secrets.yaml에 'kucoin' 설정이 없습니다")

    values: dict[str, str] = {}
    for key in ("api_key", "api_secret", "api_passphrase"):
        value = section.get(key)
        if not value:
            raise SecretsLoadError(
                f"secrets.yaml의 kucoin 섹션에 '{key}'가 없습니다"
            )
        values[key] = str(value)

    rest_url = section.get("rest_url") or KucoinEndpoints.REST_URL

    return Secrets(
        api_key=values["api_key"],
        api_secret=values["api_secret"],
        api_passphrase=values["api_passphrase"],
        rest_url=str(rest_url).rstrip("/"),
    )


def get_exchange_config(secrets: Secrets) -> ExchangeConfig:
    """Secrets에서 거래소 설정 생성

    Args:
        secrets: Secrets 인스턴스

    Returns:
        ExchangeConfig 인스턴스
    """
    return ExchangeConfig(
        rest_url=secrets.rest_url,
        api_key=secrets.api_key,
        api_secret=secrets.api_secret,
        api_passphrase=secrets.api_passphrase,
    )


class Settings:
    """애플리케이션 설정 (싱글턴 패턴)

    secrets.yaml을 로드하고 관련 설정을 제공
    """

    _instance: "Settings | None" = None
    _secrets: Secrets | None = None

    def __new__(cls, secrets_path: Path | None = None) -> "Settings":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self, secrets_path: Path | None = None) -> None:
        if self._secrets is None:
            type(self)._secrets = load_secrets(secrets_path)

    @property
    def secrets(self) -> Secrets:
        """로드된 Secrets"""
        assert self._secrets is not None
        return self._secrets

    @property
    def exchange_config(self) -> ExchangeConfig:
        """거래소 설정"""
        assert self._secrets is not None
        return get_exchange_config(self._secrets)

    @classmethod
    def reset(cls) -> None:
        """싱글턴 인스턴스 초기화 (테스트용)"""
        cls._instance = None
        cls._secrets = None


def get_settings(secrets_path: Path | None = None) -> Settings:
    """Settings 인스턴스 반환

    Args:
        secrets_path: secrets.yaml 경로 (None이면 기본 경로 사용)

    Returns:
        Settings 싱글턴 인스턴스
    """
    return Settings(secrets_path)
