"""Error envelope: not-found handler, framework HTTP errors, unhandled exceptions."""

import pytest
from fastapi.testclient import TestClient

from lms.api.deps import get_user_usecase
from lms.main import app


def _assert_envelope(body):
    assert set(body) >= {"code", "message", "trace_id"}
    assert body["trace_id"] != "-"


def test_unknown_route_is_json_404(client):
    res = client.get("/api/courses")
    assert res.status_code == 404

    body = res.json()
    _assert_envelope(body)
    assert body["code"] == "NOT_FOUND"
    assert body["message"] == "route not found: GET /api/courses"


def test_method_not_allowed_keeps_status(client):
    res = client.put("/api/users")
    assert res.status_code == 405

    body = res.json()
    _assert_envelope(body)
    assert body["code"] == "HTTP_405"
    assert "allow" in {k.lower() for k in res.headers}


def test_validation_error_envelope(client):
    res = client.post("/api/users", json={"name": "Ada"})
    assert res.status_code == 422

    body = res.json()
    _assert_envelope(body)
    assert body["message"] == "invalid request"
    assert isinstance(body["detail"], list)


class _BrokenUsecase:
    def list_users(self, db, **kwargs):
        raise RuntimeError("db exploded")


@pytest.fixture
def broken_client(client):  # noqa: ARG001 - reuse the get_db override
    app.dependency_overrides[get_user_usecase] = _BrokenUsecase
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c
    app.dependency_overrides.pop(get_user_usecase, None)


def test_unhandled_error_is_500_without_internals(broken_client):
    res = broken_client.get("/api/users", headers={"X-Request-Id": "req-500"})
    assert res.status_code == 500

    body = res.json()
    assert body == {"code": "INTERNAL_ERROR", "message": "internal server error", "trace_id": "req-500"}
    assert "db exploded" not in res.text
    assert res.headers["X-Trace-Id"] == "req-500"


def test_health(client):
    res = client.get("/health")
    assert res.status_code == 200
    assert res.json() == {"status": "ok"}
