"""Tests for the FastAPI routes."""

from __future__ import annotations

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from scamfinder.api.app import create_app
from scamfinder.api.routes import get_scanner
from scamfinder.llm.base import LLMResult
from scamfinder.models.request import FilePayload
from scamfinder.scanner import Scanner
from scamfinder.settings.config import Settings


@pytest.fixture()
def client(mock_provider):
    app = create_app()
    app.dependency_overrides[get_scanner] = lambda: Scanner(provider=mock_provider, settings=Settings())
    return TestClient(app)


class TestMetaEndpoints:
    def test_health(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok"}

    def test_file_types(self, client):
        body = client.get("/file-types").json()
        assert "eml" in body["web"]
        assert "pdf" in body["docs"]
        assert set(body) == {"images", "docs", "web", "all"}


class TestScanEndpoint:
    def test_text_scan(self, client):
        resp = client.post("/scan", data={"text": "Congratulations! You won $1,000,000"})
        assert resp.status_code == 200
        body = resp.json()
        assert body["verdict"] == "SCAM"
        assert body["urls"][0]["risk"] == "High"
        assert "ai_image_probability" not in body

    def test_file_scan_uses_declared_content_type(self, client, mock_provider):
        resp = client.post(
            "/scan",
            data={"text": "From a dating profile"},
            files={"file": ("avatar", b"\x89PNG\r\n", "image/png")},
        )
        assert resp.status_code == 200
        args, _ = mock_provider.generate.call_args
        parts = list(args[0])
        assert parts[0].mime_type == "image/png"
        assert "From a dating profile" in parts[-1].text

    def test_empty_request(self, client, mock_provider):
        resp = client.post("/scan", data={"text": ""})
        assert resp.status_code == 400
        mock_provider.generate.assert_not_called()

    def test_oversize_file(self, mock_provider):
        app = create_app()
        app.dependency_overrides[get_scanner] = lambda: Scanner(
            provider=mock_provider, settings=Settings(limits={"max_file_bytes": 16})
        )
        resp = TestClient(app).post("/scan", files={"file": ("big.png", b"x" * 17, "image/png")})
        assert resp.status_code == 413
        mock_provider.generate.assert_not_called()

    def test_oversize_upload_read_is_bounded(self, mock_provider):
        app = create_app()
        app.dependency_overrides[get_scanner] = lambda: Scanner(
            provider=mock_provider, settings=Settings(limits={"max_file_bytes": 16})
        )
        with patch("scamfinder.api.routes.FilePayload", wraps=FilePayload) as payload_cls:
            resp = TestClient(app).post("/scan", files={"file": ("big.png", b"x" * 4096, "image/png")})
        assert resp.status_code == 413
        assert "4096 bytes" in resp.json()["detail"]
        assert len(payload_cls.call_args.kwargs["raw_bytes"]) <= 17

    def test_analysis_failure(self, client, mock_provider):
        mock_provider.generate.return_value = LLMResult(content="")
        resp = client.post("/scan", data={"text": "hello"})
        assert resp.status_code == 502
        assert resp.json()["reason"] == "empty_response"

    def test_transport_failure(self, client, mock_provider):
        mock_provider.generate.side_effect = TimeoutError("deadline exceeded")
        resp = client.post("/scan", data={"text": "hello"})
        assert resp.status_code == 502
        body = resp.json()
        assert body["reason"] == "transport"
        assert "deadline exceeded" in body["detail"]

    def test_missing_credential(self):
        app = create_app()
        app.dependency_overrides[get_scanner] = lambda: Scanner(settings=Settings())
        resp = TestClient(app).post("/scan", data={"text": "hello"})
        assert resp.status_code == 503
        assert "API key" in resp.json()["detail"]
