import io

import pytest

from observability.metrics import snapshot
from routes.upload import CONFIG_KEY


def test_post_upload_reaches_handler(client):
    resp = client.post("/api/upload")
    assert resp.status_code == 501
    assert resp.get_json() == {"error": "Upload not implemented yet"}
    assert snapshot()["upload_requests"] == 1
    assert snapshot()["upload_keys_generated"] == 1


def test_post_upload_with_file(client):
    data = {"file": (io.BytesIO(b"png bytes"), "photo.png")}
    resp = client.post("/api/upload", data=data, content_type="multipart/form-data")
    assert resp.status_code == 501
    assert "url" not in resp.get_json()


@pytest.mark.parametrize("method", ["get", "put", "patch", "delete", "options"])
def test_other_methods_are_rejected(client, method):
    resp = getattr(client, method)("/api/upload")
    assert resp.status_code == 405
    assert resp.mimetype == "text/plain"
    assert resp.get_data(as_text=True) == "Method not allowed"
    assert "POST" in resp.headers["Allow"]
    assert snapshot()["upload_requests"] == 0
    assert snapshot()["method_not_allowed"] == 1


def test_head_is_rejected(client):
    resp = client.head("/api/upload")
    assert resp.status_code == 405


def test_handler_failure_returns_500(client, monkeypatch):
    def boom(name):
        raise RuntimeError("clock broke")

    monkeypatch.setattr("routes.upload.generate_unique_filename", boom)
    resp = client.post("/api/upload")
    assert resp.status_code == 500
    assert resp.get_json() == {"error": "Upload failed"}
    assert snapshot()["upload_failures"] == 1


def test_app_holds_config(app, valid_config):
    assert app.config[CONFIG_KEY] is valid_config


def test_responses_carry_request_id(client):
    resp = client.get("/api/health")
    assert resp.status_code == 200
    assert resp.get_json() == {"status": "ok"}
    assert len(resp.headers["X-Request-ID"]) == 12


def test_request_ids_differ(client):
    first = client.post("/api/upload").headers["X-Request-ID"]
    second = client.post("/api/upload").headers["X-Request-ID"]
    assert first != second


def test_metrics_endpoint(client):
    client.post("/api/upload")
    client.get("/api/upload")
    resp = client.get("/api/metrics")
    body = resp.get_json()
    assert body["upload_requests"] == 1
    assert body["method_not_allowed"] == 1


def test_unknown_path_is_404(client):
    assert client.post("/api/other").status_code == 404
