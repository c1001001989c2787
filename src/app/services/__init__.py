"""
Application Services.

역할:
- backend: 원격 REST API 호출 (httpx)
"""

from .backend import BackendClient

__all__ = [
    "BackendClient",
]
