"""
test_pages.py - 앱 진입점 E2E 테스트

엔드포인트:
- GET /          (홈)
- GET /health
- GET /static/css/style.css
- load_config (default.yaml + 환경변수)
"""

from pathlib import Path

from src.app.main import create_app, load_config


class TestRootPages:
    """홈/헬스/정적 파일."""

    def test_home_page_links_resources(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert "text/html" in response.headers["content-type"]
        assert 'href="/users"' in response.text
        assert 'href="/products"' in response.text

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

    def test_static_css_served(self, client):
        response = client.get("/static/css/style.css")

        assert response.status_code == 200
        assert "text/css" in response.headers["content-type"]

    def test_lifespan_wires_backend_and_staging(self, app, client, staging_dir):
        assert app.state.backend.base_url.startswith("http://backend.test")
        assert app.state.staging_dir == staging_dir


class TestLoadConfig:
    """load_config 테스트."""

    def test_default_yaml(self, default_config_path: Path, monkeypatch):
        monkeypatch.delenv("BACKEND_BASE_URL", raising=False)
        monkeypatch.delenv("PORT", raising=False)

        config = load_config(default_config_path)

        assert config["server"]["port"] == 3000
        assert config["backend"]["base_url"] == "http://127.0.0.1:8000"
        assert config["backend"]["paths"]["products_list"] == "/api/products/lihat"

    def test_missing_file_is_empty(self, tmp_path: Path, monkeypatch):
        monkeypatch.delenv("BACKEND_BASE_URL", raising=False)
        monkeypatch.delenv("PORT", raising=False)

        assert load_config(tmp_path / "nope.yaml") == {}

    def test_env_overrides(self, default_config_path: Path, monkeypatch):
        monkeypatch.setenv("BACKEND_BASE_URL", "http://laravel:8080")
        monkeypatch.setenv("PORT", "4000")

        config = load_config(default_config_path)

        assert config["backend"]["base_url"] == "http://laravel:8080"
        assert config["server"]["port"] == 4000

    def test_invalid_port_env_falls_back(self, tmp_path: Path, monkeypatch, caplog):
        """PORT가 숫자가 아니면 경고 후 기본 포트 (import 시 예외 없음)."""
        config_path = tmp_path / "config.yaml"
        config_path.write_text("server:\n  port: 8080\n", encoding="utf-8")
        monkeypatch.setenv("PORT", "not-a-port")

        with caplog.at_level("WARNING", logger="src.app.main"):
            config = load_config(config_path)

        assert config["server"]["port"] == 3000
        assert "not-a-port" in caplog.text

    def test_create_app_with_explicit_config(self):
        app = create_app({"backend": {"base_url": "http://other"}})

        assert app.state.config["backend"]["base_url"] == "http://other"
