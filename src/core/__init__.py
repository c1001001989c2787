"""
Core layer: 요청 처리의 리소스/보안 핵심 모듈.

역할:
- 업로드 임시 파일 스테이징과 보장된 정리
- 비밀번호 해시
- 로깅 설정
"""

from .logging import setup_logging
from .security import hash_password, verify_password
from .uploads import StagedUpload, resolve_staging_dir, staged_upload

__all__ = [
    # uploads
    "StagedUpload",
    "staged_upload",
    "resolve_staging_dir",
    # security
    "hash_password",
    "verify_password",
    # logging
    "setup_logging",
]
