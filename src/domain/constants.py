"""
Domain Constants: 전역 상수.

백엔드 경로, 서버 기본값 등 시스템 전반에서 사용되는 값들.
모든 값은 default.yaml에서 오버라이드 가능.
"""

# =============================================================================
# Server (프론트엔드 서버)
# =============================================================================

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 3000

# =============================================================================
# Backend API (원격 REST API)
# =============================================================================
# 상품 목록만 /api/products/lihat 을 사용한다 (백엔드 라우팅 호환).
# 생성/조회/수정/삭제는 /api/products 기준.

DEFAULT_BACKEND_BASE_URL = "http://127.0.0.1:8000"

DEFAULT_BACKEND_PATHS = {
    "users": "/api/users",
    "products": "/api/products",
    "products_list": "/api/products/lihat",
}

# =============================================================================
# Security
# =============================================================================

BCRYPT_ROUNDS = 10

# =============================================================================
# Uploads (임시 스테이징)
# =============================================================================

UPLOAD_STAGING_DIRNAME = "crud-frontend-uploads"
UPLOAD_STAGING_SUFFIX = ".upload"
PRODUCT_IMAGE_FIELD = "image"

# =============================================================================
# Method Override (HTML form은 GET/POST만 지원)
# =============================================================================

METHOD_OVERRIDE_PARAM = "_method"
METHOD_OVERRIDE_HEADER = "x-http-method-override"
METHOD_OVERRIDE_ALLOWED = ("PUT", "PATCH", "DELETE")
