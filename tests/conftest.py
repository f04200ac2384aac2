"""
pytest 공통 fixture 정의

설정 파일, 인증 정보 등 전역 fixture
"""

import tempfile
from pathlib import Path

import pytest

from adapters.kucoin.auth import Credentials


@pytest.fixture
def temp_dir() -> Path:
    """OS 독립적인 임시 디렉토리 생성"""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def temp_secrets_file(temp_dir: Path) -> Path:
    """테스트용 secrets.yaml 파일 생성"""
    secrets_content = """# 테스트용 secrets.yaml
kucoin:
  api_key: "test_api_key_abcde"
  api_secret: "test_api_secret_fghij"
  api_passphrase: "test_passphrase"
"""
    secrets_path = temp_dir / "secrets.yaml"
    secrets_path.write_text(secrets_content, encoding="utf-8")
    return secrets_path


@pytest.fixture
def credentials() -> Credentials:
    """테스트용 인증 정보"""
    return Credentials(
        api_key="test_key",
        api_secret="test_secret",
        api_passphrase="test_passphrase",
    )
