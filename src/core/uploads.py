"""
Upload staging: 업로드 파일 → 임시 파일 → 백엔드 전달 → 삭제.

규칙:
- 임시 파일은 staging 디렉토리 안에서만 생성 (고유 이름)
- 컨텍스트 종료 시 항상 삭제: 성공 / 백엔드 에러 / 예외 모두
- 파일이 없는 폼(필드 누락, 빈 파일명)은 None
"""

import asyncio
import logging
import tempfile
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO

from fastapi import UploadFile

from src.domain.constants import UPLOAD_STAGING_DIRNAME, UPLOAD_STAGING_SUFFIX

logger = logging.getLogger(__name__)

# 업로드 복사 단위 (1MB)
COPY_CHUNK_SIZE = 1024 * 1024


@dataclass
class StagedUpload:
    """스테이징된 업로드 파일."""
    path: Path
    filename: str
    content_type: str | None = None

    def open(self) -> BinaryIO:
        """전송용 바이너리 스트림."""
        return open(self.path, "rb")


def resolve_staging_dir(config: dict) -> Path:
    """
    설정에서 staging 디렉토리 결정.

    uploads.staging_dir 미설정 시 시스템 temp 아래 전용 폴더.
    """
    configured = config.get("uploads", {}).get("staging_dir")
    if configured:
        return Path(configured)
    return Path(tempfile.gettempdir()) / UPLOAD_STAGING_DIRNAME


def _discard(path: Path) -> None:
    try:
        path.unlink(missing_ok=True)
        logger.debug(f"Removed staged upload {path}")
    except OSError as e:
        logger.warning(f"Failed to remove staged upload {path}: {e}")


@asynccontextmanager
async def staged_upload(
    upload: UploadFile | None,
    staging_dir: Path,
) -> AsyncIterator[StagedUpload | None]:
    """
    업로드를 임시 파일로 스테이징.

    Usage:
        async with staged_upload(image, staging_dir) as staged:
            await backend.create_product(fields, staged)
        # 여기서는 staged.path가 존재하지 않음

    Args:
        upload: 폼의 파일 필드 (없으면 None)
        staging_dir: 임시 파일 디렉토리 (없으면 생성)

    Yields:
        StagedUpload 또는 None (첨부 없음)
    """
    if upload is None or not upload.filename:
        yield None
        return

    staging_dir.mkdir(parents=True, exist_ok=True)

    temp_path: Path | None = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="wb",
            dir=staging_dir,
            suffix=UPLOAD_STAGING_SUFFIX,
            delete=False,
        ) as f:
            temp_path = Path(f.name)
            while chunk := await upload.read(COPY_CHUNK_SIZE):
                await asyncio.to_thread(f.write, chunk)

        logger.debug(f"Staged upload {upload.filename!r} at {temp_path}")
        yield StagedUpload(
            path=temp_path,
            filename=upload.filename,
            content_type=upload.content_type,
        )
    finally:
        if temp_path is not None:
            _discard(temp_path)
