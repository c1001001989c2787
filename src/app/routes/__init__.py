"""
FastAPI Routes.

페이지 라우트 (HTML + form 처리)
"""

from . import products, users

__all__ = ["products", "users"]
