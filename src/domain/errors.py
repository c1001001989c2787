"""
Error definitions for the front end.

규칙:
- 원인은 서버 로그에만 남긴다 (사용자에게는 일반 메시지)
- 네트워크 실패 / 백엔드 4xx·5xx / JSON 파싱 실패 구분 없이 500
- 재시도 없음
"""

from typing import Any


class ProxyError(Exception):
    """
    프록시 처리 중 발생하는 에러의 공통 부모.

    라우트는 이 타입만 잡아서 500으로 변환한다.

    Usage:
        raise BackendError(ErrorCodes.BACKEND_STATUS, "unexpected status", status=404)
    """

    def __init__(self, code: str, message: str, **context: Any) -> None:
        self.code = code
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
        if ctx_str:
            return f"[{self.code}] {self.message} ({ctx_str})"
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """로그/JSON 직렬화용."""
        return {
            "code": self.code,
            "message": self.message,
            **self.context,
        }


class BackendError(ProxyError):
    """백엔드 API 호출 실패 (전송 오류, 상태 코드, 응답 본문)."""
    pass


class InvalidPayloadError(BackendError):
    """백엔드 응답이 기대한 형태(객체/배열)가 아님."""
    pass


class PasswordHashError(ProxyError):
    """비밀번호 해시 실패 (bcrypt가 거부한 입력 등)."""
    pass


# =============================================================================
# Error Codes
# =============================================================================

class ErrorCodes:
    """에러 코드 상수."""

    # === Backend ===
    BACKEND_UNREACHABLE = "BACKEND_UNREACHABLE"
    BACKEND_STATUS = "BACKEND_STATUS"
    BACKEND_INVALID_JSON = "BACKEND_INVALID_JSON"
    INVALID_PAYLOAD = "INVALID_PAYLOAD"

    # === Security ===
    PASSWORD_HASH_FAILED = "PASSWORD_HASH_FAILED"
