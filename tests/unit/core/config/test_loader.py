"""
core/config/loader.py 테스트

secrets.yaml 로드, 검증, 거래소 설정 생성 테스트
"""

from pathlib import Path

import pytest

from core.config.loader import (
    ExchangeConfig,
    Secrets,
    SecretsLoadError,
    Settings,
    get_exchange_config,
    get_settings,
    load_secrets,
)
from core.constants import KucoinEndpoints


class TestSecrets:
    """Secrets 데이터클래스 테스트"""

    def test_default_rest_url(self) -> None:
        """rest_url 기본값"""
        secrets = Secrets(api_key="k", api_secret="s", api_passphrase="p")
        assert secrets.rest_url == KucoinEndpoints.REST_URL

    def test_frozen(self) -> None:
        """불변성 확인"""
        secrets = Secrets(api_key="k", api_secret="s", api_passphrase="p")
        with pytest.raises(AttributeError):
            secrets.api_key = "new_key"  # type: ignore

    def test_repr_hides_keys(self) -> None:
        """repr에 키 노출 안 됨"""
        secrets = Secrets(api_key="key123", api_secret="secret456", api_passphrase="pass789")
        text = repr(secrets)
        assert "key123" not in text
        assert "secret456" not in text
        assert "pass789" not in text


class TestLoadSecrets:
    """load_secrets 함수 테스트"""

    def test_load_valid(self, temp_secrets_file: Path) -> None:
        """정상 로드"""
        secrets = load_secrets(temp_secrets_file)

        assert secrets.api_key == "test_api_key_abcde"
        assert secrets.api_secret == "test_api_secret_fghij"
        assert secrets.api_passphrase == "test_passphrase"
        assert secrets.rest_url == KucoinEndpoints.REST_URL

    def test_custom_rest_url(self, temp_dir: Path) -> None:
        """rest_url 지정 (끝의 / 제거)"""
        path = temp_dir / "secrets.yaml"
        path.write_text(
            "kucoin:\n"
            "  api_key: k\n"
            "  api_secret: s\n"
            "  api_passphrase: p\n"
            "  rest_url: https://openapi-sandbox.kucoin.com/\n",
            encoding="utf-8",
        )
        secrets = load_secrets(path)
        assert secrets.rest_url == "https://openapi-sandbox.kucoin.com"

    def test_numeric_values_become_strings(self, temp_dir: Path) -> None:
        """숫자로 파싱된 값도 문자열로 변환"""
        path = temp_dir / "secrets.yaml"
        path.write_text(
            "kucoin:\n  api_key: 12345\n  api_secret: s\n  api_passphrase: 1111111\n",
            encoding="utf-8",
        )
        secrets = load_secrets(path)
        assert secrets.api_key == "12345"
        assert secrets.api_passphrase == "1111111"

    def test_missing_file(self, temp_dir: Path) -> None:
        """파일 없음"""
        with pytest.raises(SecretsLoadError, match="찾을 수 없습니다"):
            load_secrets(temp_dir / "nonexistent.yaml")

    def test_empty_file(self, temp_dir: Path) -> None:
        """빈 파일"""
        path = temp_dir / "secrets.yaml"
        path.write_text("", encoding="utf-8")
        with pytest.raises(SecretsLoadError, match="비어 있습니다"):
            load_secrets(path)

    def test_invalid_yaml(self, temp_dir: Path) -> None:
        """YAML 파싱 실패"""
        path = temp_dir / "secrets.yaml"
        path.write_text("kucoin: [unclosed", encoding="utf-8")
        with pytest.raises(SecretsLoadError, match="파싱 실패"):
            load_secrets(path)

    def test_missing_section(self, temp_dir: Path) -> None:
        """kucoin 섹션 없음"""
        path = temp_dir / "secrets.yaml"
        path.write_text("binance:\n  api_key: k\n", encoding="utf-8")
        with pytest.raises(SecretsLoadError, match="kucoin"):
            load_secrets(path)

    @pytest.mark.parametrize("missing", ["api_key", "api_secret", "api_passphrase"])
    def test_missing_key(self, temp_dir: Path, missing: str) -> None:
        """필수 키 누락"""
        keys = {"api_key": "k", "api_secret": "s", "api_passphrase": "p"}
        del keys[missing]
        body = "".join(f"  {k}: {v}\n" for k, v in keys.items())
        path = temp_dir / "secrets.yaml"
        path.write_text("kucoin:\n" + body, encoding="utf-8")

        with pytest.raises(SecretsLoadError, match=missing):
            load_secrets(path)


class TestGetExchangeConfig:
    """get_exchange_config 함수 테스트"""

    def test_from_secrets(self) -> None:
        """Secrets -> ExchangeConfig"""
        secrets = Secrets(
            api_key="k",
            api_secret="s",
            api_passphrase="p",
            rest_url="https://api.kucoin.test",
        )
        config = get_exchange_config(secrets)

        assert isinstance(config, ExchangeConfig)
        assert config.rest_url == "https://api.kucoin.test"
        assert config.api_key == "k"
        assert config.api_passphrase == "p"


class TestSettings:
    """Settings 싱글턴 테스트"""

    def setup_method(self) -> None:
        Settings.reset()

    def teardown_method(self) -> None:
        Settings.reset()

    def test_singleton(self, temp_secrets_file: Path) -> None:
        """동일 인스턴스 반환"""
        first = get_settings(temp_secrets_file)
        second = get_settings()
        assert first is second
        assert second.secrets.api_key == "test_api_key_abcde"

    def test_exchange_config(self, temp_secrets_file: Path) -> None:
        """거래소 설정 제공"""
        settings = get_settings(temp_secrets_file)
        assert settings.exchange_config.rest_url == KucoinEndpoints.REST_URL

    def test_reset(self, temp_secrets_file: Path, temp_dir: Path) -> None:
        """reset 후 다시 로드"""
        get_settings(temp_secrets_file)
        Settings.reset()
        with pytest.raises(SecretsLoadError):
            get_settings(temp_dir / "missing.yaml")
