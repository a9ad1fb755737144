"""Tests for the FastAPI webhook server."""

import logging

import pytest
from fastapi.testclient import TestClient

from linear_bridge.config import BridgeConfig
from linear_bridge.server import create_app

from helpers import LARK_URL, SECRET, load_resource, sign


@pytest.fixture
def config() -> BridgeConfig:
    return BridgeConfig(webhook_secret=SECRET, lark_webhook_url=LARK_URL)


@pytest.fixture
def client(config, deliverer) -> TestClient:
    return TestClient(create_app(config, deliverer=deliverer))


def post_webhook(client: TestClient, body: bytes, signature=None):
    headers = {"Content-Type": "application/json"}
    if signature is not None:
        headers["linear-signature"] = signature
    return client.post("/webhook", content=body, headers=headers)


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_missing_signature_returns_401(client, deliverer):
    response = post_webhook(client, b"{}")

    assert response.status_code == 401
    assert response.json() == {
        "status": "unauthorized",
        "message": "Missing linear-signature header",
    }
    assert deliverer.calls == []


def test_wrong_signature_returns_401(client, deliverer):
    response = post_webhook(client, b"{}", signature="deadbeef")

    assert response.status_code == 401
    assert deliverer.calls == []


def test_unparsable_body_returns_400(client):
    body = b"{oops"
    response = post_webhook(client, body, signature=sign(body))

    assert response.status_code == 400
    assert response.json()["status"] == "bad_request"
    assert "Invalid JSON payload" in response.json()["message"]


def test_comment_returns_200_without_delivery(client, deliverer):
    body = load_resource("comment_create.json")
    response = post_webhook(client, body, signature=sign(body))

    assert response.status_code == 200
    assert response.json()["status"] == "ignored"
    assert deliverer.calls == []


def test_issue_create_is_delivered(client, deliverer):
    body = load_resource("issue_create_urgent.json")
    response = post_webhook(client, body, signature=sign(body))

    assert response.status_code == 200
    assert response.json()["status"] == "acknowledged"
    card, endpoint = deliverer.calls[0]
    assert endpoint == LARK_URL
    assert card.field_value("Priority") == "Urgent"
    assert card.field_value("Assignee") == "QA Bot"


def test_issue_update_unassigned(client, deliverer):
    body = load_resource("issue_update_unassigned.json")
    response = post_webhook(client, body, signature=sign(body))

    assert response.status_code == 200
    card, _ = deliverer.calls[0]
    assert card.field_value("Assignee") == "Unassigned"
    assert card.field_value("Priority") == "Medium"


def test_get_on_webhook_is_not_allowed(client):
    assert client.get("/webhook").status_code == 405


def test_unknown_path_returns_404(client):
    response = client.get("/nope")

    assert response.status_code == 404
    assert response.json()["path"] == "/nope"


def test_unconfigured_secret_returns_500(deliverer):
    app = create_app(BridgeConfig(webhook_secret="", lark_webhook_url=LARK_URL), deliverer=deliverer)
    response = post_webhook(TestClient(app), b"{}", signature="deadbeef")

    assert response.status_code == 500
    assert deliverer.calls == []


def test_custom_endpoint(deliverer):
    config = BridgeConfig(webhook_secret=SECRET, lark_webhook_url=LARK_URL, webhook_endpoint="/hooks/linear")
    client = TestClient(create_app(config, deliverer=deliverer))
    body = load_resource("issue_create_urgent.json")

    response = client.post("/hooks/linear", content=body, headers={"linear-signature": sign(body)})

    assert response.status_code == 200
    assert len(deliverer.calls) == 1


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_startup_runs_with_lifespan(config, deliverer, tmp_path, restore_logging):
    config.log_dir = str(tmp_path)
    with TestClient(create_app(config, deliverer=deliverer)) as client:
        assert client.get("/health").status_code == 200

    assert (tmp_path / "linear_bridge.log").exists()


def test_non_positive_delivery_timeout_is_rejected_at_startup():
    config = BridgeConfig(webhook_secret=SECRET, lark_webhook_url=LARK_URL, delivery_timeout=0)

    with pytest.raises(ValueError):
        create_app(config)
