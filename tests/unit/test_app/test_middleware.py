"""
test_middleware.py - Method override 미들웨어 테스트
"""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.app.middleware import MethodOverrideMiddleware


@pytest.fixture
def override_client() -> TestClient:
    """PUT/DELETE/POST 라우트만 있는 최소 앱."""
    app = FastAPI()
    app.add_middleware(MethodOverrideMiddleware)

    @app.put("/items/{item_id}")
    async def put_item(item_id: str) -> dict[str, str]:
        return {"method": "PUT", "id": item_id}

    @app.delete("/items/{item_id}")
    async def delete_item(item_id: str) -> dict[str, str]:
        return {"method": "DELETE", "id": item_id}

    @app.post("/items")
    async def post_item() -> dict[str, str]:
        return {"method": "POST"}

    return TestClient(app)


class TestMethodOverride:
    """POST → PUT/DELETE 변환."""

    def test_query_param_put(self, override_client):
        response = override_client.post("/items/1?_method=PUT")

        assert response.json() == {"method": "PUT", "id": "1"}

    def test_query_param_lowercase(self, override_client):
        response = override_client.post("/items/1?_method=delete")

        assert response.json() == {"method": "DELETE", "id": "1"}

    def test_header(self, override_client):
        response = override_client.post(
            "/items/1", headers={"X-HTTP-Method-Override": "DELETE"}
        )

        assert response.json()["method"] == "DELETE"

    def test_plain_post_untouched(self, override_client):
        assert override_client.post("/items").json() == {"method": "POST"}

    def test_disallowed_method_ignored(self, override_client):
        """GET 등 허용 목록 밖은 무시 → POST 그대로."""
        assert override_client.post("/items?_method=GET").json() == {"method": "POST"}

    def test_only_post_is_overridden(self, override_client):
        """GET 요청의 _method는 무시."""
        response = override_client.get("/items/1?_method=DELETE")

        assert response.status_code == 405
