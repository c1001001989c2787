"""
test_security.py - 비밀번호 해시 테스트
"""

import bcrypt
import pytest

from src.core.security import hash_password, verify_password
from src.domain.errors import ErrorCodes, PasswordHashError


class TestHashPassword:
    """hash_password 테스트."""

    def test_bcrypt_format_with_cost_10(self):
        hashed = hash_password("secret")

        assert hashed.startswith("$2b$10$")
        assert len(hashed) == 60

    def test_never_equals_plaintext(self):
        assert hash_password("secret") != "secret"

    def test_salted(self):
        """같은 입력도 매번 다른 해시."""
        assert hash_password("secret") != hash_password("secret")

    def test_custom_rounds(self):
        assert hash_password("secret", rounds=4).startswith("$2b$04$")

    def test_unicode_password(self):
        hashed = hash_password("비밀번호123")

        assert verify_password("비밀번호123", hashed)

    def test_rejected_input_raises_password_hash_error(self, monkeypatch):
        """bcrypt가 거부하면 PasswordHashError."""

        def reject(password: bytes, salt: bytes) -> bytes:
            raise ValueError("password cannot be longer than 72 bytes")

        monkeypatch.setattr(bcrypt, "hashpw", reject)

        with pytest.raises(PasswordHashError) as exc_info:
            hash_password("x" * 100)

        assert exc_info.value.code == ErrorCodes.PASSWORD_HASH_FAILED
        assert "72 bytes" in exc_info.value.context["reason"]


class TestVerifyPassword:
    """verify_password 테스트."""

    def test_matches(self):
        assert verify_password("secret", hash_password("secret", rounds=4))

    def test_mismatch(self):
        assert not verify_password("wrong", hash_password("secret", rounds=4))

    def test_malformed_hash(self):
        assert not verify_password("secret", "not-a-bcrypt-hash")
