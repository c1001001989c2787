"""Domain layer: errors and schemas."""

from .errors import BackendError, InvalidPayloadError, PasswordHashError, ProxyError
from .schemas import (
    Product,
    ProductForm,
    User,
    UserForm,
    UserUpdateForm,
    parse_collection,
    parse_item,
)

__all__ = [
    "ProxyError",
    "BackendError",
    "InvalidPayloadError",
    "PasswordHashError",
    "User",
    "Product",
    "UserForm",
    "UserUpdateForm",
    "ProductForm",
    "parse_collection",
    "parse_item",
]
