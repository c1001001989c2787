"""
Data schemas for the users/products front end.

규칙:
- 백엔드 JSON은 경계에서 레코드로 변환 (dict 그대로 템플릿에 넘기지 않음)
- 필드는 모두 optional: 검증/비즈니스 규칙은 백엔드 책임
- password는 write-only: 읽기 레코드에는 없음, 전송 시 항상 해시
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, TypeVar

from src.domain.errors import ErrorCodes, InvalidPayloadError

Scalar = str | int | float | None

# =============================================================================
# Read Records (백엔드 → 템플릿)
# =============================================================================


def _require_mapping(data: Any, resource: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise InvalidPayloadError(
            ErrorCodes.INVALID_PAYLOAD,
            f"{resource} must be a JSON object",
            received=type(data).__name__,
        )
    return data


@dataclass
class User:
    """사용자 레코드 (password 제외)."""
    id: int | str | None = None
    name: str | None = None
    email: str | None = None

    @classmethod
    def from_dict(cls, data: Any) -> "User":
        obj = _require_mapping(data, "user")
        return cls(
            id=obj.get("id"),
            name=obj.get("name"),
            email=obj.get("email"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name, "email": self.email}


@dataclass
class Product:
    """상품 레코드. image는 백엔드가 돌려준 참조(경로/URL) 그대로."""
    id: int | str | None = None
    name: str | None = None
    description: str | None = None
    price: Scalar = None
    stock: Scalar = None
    image: str | None = None

    @classmethod
    def from_dict(cls, data: Any) -> "Product":
        obj = _require_mapping(data, "product")
        return cls(
            id=obj.get("id"),
            name=obj.get("name"),
            description=obj.get("description"),
            price=obj.get("price"),
            stock=obj.get("stock"),
            image=obj.get("image"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "price": self.price,
            "stock": self.stock,
            "image": self.image,
        }


RecordT = TypeVar("RecordT", User, Product)


def parse_collection(data: Any, model: type[RecordT]) -> list[RecordT]:
    """
    목록 응답 → 레코드 리스트.

    허용 형태:
    - [ {...}, {...} ]
    - { "data": [ {...}, ... ] }  (Laravel resource envelope)
    - { "data": {...} }           → 레코드 1개
    - { "users": [ {...} ], ... } → 첫 번째 배열 값
    - { ... } (배열 값 없음)      → 객체 자체를 레코드 1개로
    """
    return [model.from_dict(item) for item in _collection_items(data, model)]


def _collection_items(data: Any, model: type[RecordT]) -> list[Any]:
    if isinstance(data, list):
        return data

    if not isinstance(data, Mapping):
        raise InvalidPayloadError(
            ErrorCodes.INVALID_PAYLOAD,
            f"{model.__name__.lower()} list must be a JSON array or object",
            received=type(data).__name__,
        )

    envelope = data.get("data")
    if isinstance(envelope, list):
        return envelope
    if isinstance(envelope, Mapping):
        return [envelope]

    for value in data.values():
        if isinstance(value, list):
            return value
    return [data]


def parse_item(data: Any, model: type[RecordT]) -> RecordT:
    """단건 응답 → 레코드. { "data": {...} } envelope도 허용."""
    if isinstance(data, Mapping) and isinstance(data.get("data"), Mapping):
        data = data["data"]
    return model.from_dict(data)


# =============================================================================
# Form Records (HTML form → 백엔드)
# =============================================================================


def _blank_to_none(value: str | None) -> str | None:
    if value is None or value == "":
        return None
    return value


@dataclass
class UserForm:
    """사용자 생성 폼. password는 평문 (전송 전 해시)."""
    name: str
    email: str
    password: str

    def to_payload(self, password_hash: str) -> dict[str, Any]:
        """POST /api/users 본문. 평문 password는 절대 포함하지 않음."""
        return {
            "name": self.name,
            "email": self.email,
            "password": password_hash,
        }


@dataclass
class UserUpdateForm:
    """사용자 수정 폼. password가 비어 있으면 변경하지 않음."""
    name: str
    email: str
    password: str | None = None

    def __post_init__(self) -> None:
        self.password = _blank_to_none(self.password)

    @property
    def has_password(self) -> bool:
        return self.password is not None

    def to_payload(self, password_hash: str | None = None) -> dict[str, Any]:
        """PUT /api/users/{id} 본문. password 키는 해시가 있을 때만."""
        payload: dict[str, Any] = {"name": self.name, "email": self.email}
        if password_hash is not None:
            payload["password"] = password_hash
        return payload


@dataclass
class ProductForm:
    """상품 생성/수정 폼 (텍스트 필드). 값은 제출된 그대로 전달."""
    name: str
    description: str
    price: str
    stock: str

    def to_payload(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "price": self.price,
            "stock": self.stock,
        }
