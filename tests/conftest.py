"""
Pytest fixtures for the front end tests.

구성:
- 백엔드는 respx로 모킹 (respx_mock fixture, 실제 네트워크 없음)
- 업로드 staging 디렉토리는 tmp_path 아래로 격리
"""

from collections.abc import Generator
from pathlib import Path

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.app.main import create_app

# 테스트 모듈들도 같은 값 사용
BACKEND_URL = "http://backend.test"

# =============================================================================
# Path Fixtures
# =============================================================================


@pytest.fixture
def project_root() -> Path:
    """프로젝트 루트 경로."""
    return Path(__file__).parent.parent


@pytest.fixture
def default_config_path(project_root: Path) -> Path:
    """default.yaml 경로."""
    return project_root / "default.yaml"


@pytest.fixture
def staging_dir(tmp_path: Path) -> Path:
    """업로드 staging 디렉토리 (생성은 staged_upload가 담당)."""
    return tmp_path / "staging"


# =============================================================================
# Config Fixtures
# =============================================================================


@pytest.fixture
def test_config(staging_dir: Path) -> dict:
    """테스트용 설정."""
    return {
        "backend": {
            "base_url": BACKEND_URL,
            "timeout": 5.0,
            "paths": {
                "users": "/api/users",
                "products": "/api/products",
                "products_list": "/api/products/lihat",
            },
        },
        "uploads": {"staging_dir": str(staging_dir)},
        "logging": {"level": "DEBUG"},
    }


# =============================================================================
# App Fixtures
# =============================================================================


@pytest.fixture
def app(test_config: dict) -> FastAPI:
    """테스트용 FastAPI 앱."""
    return create_app(test_config)


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    """
    테스트 클라이언트.

    lifespan 실행 (BackendClient 생성/종료), 리다이렉트는 따라가지 않음.
    """
    with TestClient(app, follow_redirects=False) as client:
        yield client
