"""
FastAPI 애플리케이션 진입점.

실행:
- 개발: uv run uvicorn src.app.main:app --reload --port 3000
- 프로덕션: uv run python -m src.app.main
"""

import logging
import os
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any

import yaml
from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles

from src.app.middleware import MethodOverrideMiddleware
from src.app.routes import products, users
from src.app.routes.common import render
from src.app.services.backend import BackendClient
from src.core.logging import setup_logging
from src.core.uploads import resolve_staging_dir
from src.domain.constants import DEFAULT_HOST, DEFAULT_PORT

logger = logging.getLogger(__name__)

# =============================================================================
# Configuration
# =============================================================================


def load_config(config_path: Path | None = None) -> dict:
    """
    설정 파일 로드.

    환경변수 오버라이드:
    - BACKEND_BASE_URL → backend.base_url
    - PORT → server.port
    """
    if config_path is None:
        # 프로젝트 루트의 default.yaml
        config_path = Path(__file__).parent.parent.parent / "default.yaml"

    data: dict[Any, Any] = {}
    if config_path.exists():
        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

    if base_url := os.environ.get("BACKEND_BASE_URL"):
        data.setdefault("backend", {})["base_url"] = base_url
    if port := os.environ.get("PORT"):
        try:
            data.setdefault("server", {})["port"] = int(port)
        except ValueError:
            logger.warning(f"Ignoring invalid PORT={port!r}, falling back to {DEFAULT_PORT}")
            data.setdefault("server", {})["port"] = DEFAULT_PORT

    return data


# =============================================================================
# Lifespan
# =============================================================================


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    애플리케이션 생명주기 관리.

    시작 시: 백엔드 클라이언트 생성, staging 경로 결정
    종료 시: 백엔드 클라이언트 close
    """
    config = app.state.config

    # Startup
    app.state.backend = BackendClient.from_config(config)
    app.state.staging_dir = resolve_staging_dir(config)
    logger.info(f"Proxying to backend at {app.state.backend.base_url}")

    yield

    # Shutdown
    await app.state.backend.aclose()


# =============================================================================
# App Factory
# =============================================================================


def create_app(config: dict | None = None) -> FastAPI:
    """앱 생성. config가 None이면 default.yaml 로드."""
    if config is None:
        config = load_config()
    setup_logging(config)

    app = FastAPI(
        title="CRUD Front End",
        description="Users/Products 화면 → 원격 REST API 프록시",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.config = config

    # HTML form의 PUT/DELETE 지원
    app.add_middleware(MethodOverrideMiddleware)

    # Static files (CSS, JS)
    static_dir = Path(__file__).parent / "static"
    if static_dir.exists():
        app.mount("/static", StaticFiles(directory=static_dir), name="static")

    # 페이지 라우트 (HTML)
    app.include_router(users.router, prefix="/users", tags=["Users"])
    app.include_router(products.router, prefix="/products", tags=["Products"])

    # Root endpoints
    @app.get("/", response_class=HTMLResponse)
    async def home(request: Request) -> HTMLResponse:
        """홈 페이지."""
        return render(request, "index.html")

    @app.get("/health")
    async def health() -> dict[str, str]:
        """헬스 체크."""
        return {"status": "ok"}

    return app


app = create_app()


# =============================================================================
# CLI Entry Point
# =============================================================================

if __name__ == "__main__":
    import uvicorn

    server_config = app.state.config.get("server", {})
    host = server_config.get("host", DEFAULT_HOST)
    port = int(server_config.get("port", DEFAULT_PORT))

    logger.info(f"Server running at http://{host}:{port}")
    uvicorn.run(app, host=host, port=port)
