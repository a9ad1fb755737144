"""Sample payloads, signing and fakes shared by the tests."""

import hashlib
import hmac
import json
from pathlib import Path
from typing import List, Tuple

from linear_bridge.models import ChatCard, Delivered, DeliveryResult

RESOURCES = Path(__file__).parent / "resources"

SECRET = "test-webhook-secret"
LARK_URL = "https://open.larksuite.com/open-apis/bot/v2/hook/test-hook"


def load_resource(name: str) -> bytes:
    """Return the raw bytes of a sample webhook payload."""
    return (RESOURCES / name).read_bytes()


def load_payload(name: str) -> dict:
    return json.loads(load_resource(name))


def sign(body: bytes, secret: str = SECRET) -> str:
    """Sign a body the way Linear does, independently of the code under test."""
    return hmac.new(secret.encode("utf-8"), body, hashlib.sha256).hexdigest()


class RecordingDeliverer:
    """Deliverer that records cards instead of posting them."""

    def __init__(self, result: DeliveryResult = Delivered(status_code=200)):
        self.result = result
        self.calls: List[Tuple[ChatCard, str]] = []

    def deliver(self, card: ChatCard, endpoint: str) -> DeliveryResult:
        self.calls.append((card, endpoint))
        return self.result
