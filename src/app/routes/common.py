"""
Shared helpers for page routes.

- Jinja2 템플릿 렌더링
- app.state에서 백엔드 클라이언트/스테이징 경로 조회
- 일반 500 응답, 303 리다이렉트
"""

from pathlib import Path
from typing import Any

from fastapi import Request
from fastapi.responses import HTMLResponse, PlainTextResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from src.app.services.backend import BackendClient

# Jinja2 템플릿 설정
_templates_dir = Path(__file__).parent.parent / "templates"
jinja_templates = Jinja2Templates(directory=_templates_dir)


def get_backend(request: Request) -> BackendClient:
    """Request에서 공유 BackendClient 가져오기."""
    return request.app.state.backend


def get_staging_dir(request: Request) -> Path:
    """Request에서 업로드 staging 경로 가져오기."""
    return request.app.state.staging_dir


def render(request: Request, name: str, context: dict[str, Any] | None = None) -> HTMLResponse:
    """템플릿 렌더링."""
    return jinja_templates.TemplateResponse(request, name, context or {})


def server_error(message: str) -> PlainTextResponse:
    """
    일반 500 응답.

    원인은 호출한 라우트에서 로그로만 남긴다.
    """
    return PlainTextResponse(message, status_code=500)


def redirect_to(url: str) -> RedirectResponse:
    """POST/PUT/DELETE 후 목록으로 (303 → 브라우저는 GET)."""
    return RedirectResponse(url=url, status_code=303)
