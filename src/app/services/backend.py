"""
Backend Client: 원격 REST API 호출.

- 요청당 정확히 한 번 호출, 재시도 없음
- 전송 오류 / 4xx·5xx / JSON 파싱 실패 → BackendError 하나로 수렴
- 경로는 config(backend.paths)에서 주입, 상품 목록만 별도 경로
"""

import logging
from typing import Any

import httpx

from src.core.uploads import StagedUpload
from src.domain.constants import (
    DEFAULT_BACKEND_BASE_URL,
    DEFAULT_BACKEND_PATHS,
    PRODUCT_IMAGE_FIELD,
)
from src.domain.errors import BackendError, ErrorCodes

logger = logging.getLogger(__name__)

DEFAULT_HEADERS = {"Accept": "application/json"}


class BackendClient:
    """
    원격 API 클라이언트.

    Usage:
        client = BackendClient.from_config(config)
        users = await client.list_users()
        await client.aclose()
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        paths: dict[str, str] | None = None,
    ):
        """
        Args:
            http_client: base_url이 설정된 AsyncClient (공유)
            paths: 리소스별 경로 (None이면 기본값)
        """
        self.http_client = http_client
        self.paths = {**DEFAULT_BACKEND_PATHS, **(paths or {})}

    @classmethod
    def from_config(cls, config: dict) -> "BackendClient":
        """backend 설정 섹션으로 클라이언트 생성."""
        backend_config = config.get("backend", {})
        # timeout: null → 무제한
        timeout = backend_config.get("timeout")
        http_client = httpx.AsyncClient(
            base_url=backend_config.get("base_url", DEFAULT_BACKEND_BASE_URL),
            timeout=httpx.Timeout(timeout),
            headers=DEFAULT_HEADERS,
        )
        return cls(http_client, paths=backend_config.get("paths"))

    @property
    def base_url(self) -> str:
        return str(self.http_client.base_url)

    async def aclose(self) -> None:
        await self.http_client.aclose()

    # =========================================================================
    # Transport
    # =========================================================================

    async def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        logger.debug(f"{method} {path}")
        try:
            response = await self.http_client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            raise BackendError(
                ErrorCodes.BACKEND_UNREACHABLE,
                f"{type(e).__name__}: {e}",
                method=method,
                path=path,
            ) from e

        if response.is_error:
            raise BackendError(
                ErrorCodes.BACKEND_STATUS,
                "unexpected status",
                method=method,
                path=path,
                status=response.status_code,
            )
        return response

    async def _request_json(self, method: str, path: str, **kwargs: Any) -> Any:
        response = await self._request(method, path, **kwargs)
        try:
            return response.json()
        except ValueError as e:
            raise BackendError(
                ErrorCodes.BACKEND_INVALID_JSON,
                "response body is not valid JSON",
                method=method,
                path=path,
            ) from e

    def _item_path(self, resource: str, item_id: int | str) -> str:
        return f"{self.paths[resource]}/{item_id}"

    # =========================================================================
    # Users
    # =========================================================================

    async def list_users(self) -> Any:
        return await self._request_json("GET", self.paths["users"])

    async def get_user(self, user_id: int | str) -> Any:
        return await self._request_json("GET", self._item_path("users", user_id))

    async def create_user(self, payload: dict[str, Any]) -> None:
        await self._request("POST", self.paths["users"], json=payload)

    async def update_user(self, user_id: int | str, payload: dict[str, Any]) -> None:
        await self._request("PUT", self._item_path("users", user_id), json=payload)

    async def delete_user(self, user_id: int | str) -> None:
        await self._request("DELETE", self._item_path("users", user_id))

    # =========================================================================
    # Products
    # =========================================================================

    async def list_products(self) -> Any:
        return await self._request_json("GET", self.paths["products_list"])

    async def get_product(self, product_id: int | str) -> Any:
        return await self._request_json("GET", self._item_path("products", product_id))

    async def create_product(
        self,
        fields: dict[str, Any],
        image: StagedUpload | None = None,
    ) -> None:
        """
        상품 생성 (항상 multipart).

        image가 있으면 스테이징 파일을 스트림으로 첨부.
        파일 삭제는 호출자(staged_upload 컨텍스트) 책임.
        """
        path = self.paths["products"]
        if image is None:
            # httpx는 files가 비어 있으면 urlencoded로 보내므로 텍스트 필드를 part로 구성
            parts = {key: (None, str(value)) for key, value in fields.items()}
            await self._request("POST", path, files=parts)
            return

        with image.open() as stream:
            files = {
                PRODUCT_IMAGE_FIELD: (
                    image.filename,
                    stream,
                    image.content_type or "application/octet-stream",
                )
            }
            await self._request("POST", path, data=fields, files=files)

    async def update_product(self, product_id: int | str, payload: dict[str, Any]) -> None:
        await self._request("PUT", self._item_path("products", product_id), json=payload)

    async def delete_product(self, product_id: int | str) -> None:
        await self._request("DELETE", self._item_path("products", product_id))
