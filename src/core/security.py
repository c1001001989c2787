"""
Password hashing (bcrypt).

평문 비밀번호는 백엔드로 절대 전송하지 않는다.
"""

import bcrypt

from src.domain.constants import BCRYPT_ROUNDS
from src.domain.errors import ErrorCodes, PasswordHashError


def hash_password(plain: str, rounds: int = BCRYPT_ROUNDS) -> str:
    """
    bcrypt 해시 생성.

    Args:
        plain: 평문 비밀번호
        rounds: cost factor (기본 10)

    Returns:
        "$2b$10$..." 형식 해시 문자열

    Raises:
        PasswordHashError: bcrypt가 입력을 거부한 경우 (72바이트 초과 등)
    """
    try:
        hashed = bcrypt.hashpw(plain.encode("utf-8"), bcrypt.gensalt(rounds=rounds))
    except ValueError as e:
        raise PasswordHashError(
            ErrorCodes.PASSWORD_HASH_FAILED,
            "password rejected by bcrypt",
            reason=str(e),
        ) from e
    return hashed.decode("ascii")


def verify_password(plain: str, hashed: str) -> bool:
    """해시 검증."""
    try:
        return bcrypt.checkpw(plain.encode("utf-8"), hashed.encode("ascii"))
    except ValueError:
        return False
