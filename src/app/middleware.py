"""Front end middleware components."""

import logging

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

from src.domain.constants import (
    METHOD_OVERRIDE_ALLOWED,
    METHOD_OVERRIDE_HEADER,
    METHOD_OVERRIDE_PARAM,
)

logger = logging.getLogger(__name__)


def resolve_override(request: Request) -> str | None:
    """
    POST 요청의 대체 메서드.

    우선순위: ?_method= 쿼리 → X-HTTP-Method-Override 헤더.
    허용 목록(PUT/PATCH/DELETE) 외에는 None.
    """
    if request.method != "POST":
        return None

    candidate = request.query_params.get(METHOD_OVERRIDE_PARAM) or request.headers.get(
        METHOD_OVERRIDE_HEADER
    )
    if not candidate:
        return None

    method = candidate.upper()
    return method if method in METHOD_OVERRIDE_ALLOWED else None


class MethodOverrideMiddleware(BaseHTTPMiddleware):
    """HTML form(POST)으로 PUT/DELETE 라우트를 호출할 수 있게 한다."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        override = resolve_override(request)
        if override:
            logger.debug(f"Method override POST -> {override} for {request.url.path}")
            request.scope["method"] = override
        return await call_next(request)
