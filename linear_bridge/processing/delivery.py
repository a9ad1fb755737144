"""Deliver chat cards to a Lark custom-bot webhook."""

import logging
import time
from typing import Any, Callable, Dict, Optional

import requests

from ..common import lark_sign
from ..models import ChatCard, Delivered, DeliveryFailed, DeliveryResult, build_lark_message

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 10.0

# Lark answers HTTP 200 with a non-zero "code" when it rejects a message
LARK_OK_CODE = 0
LARK_RATE_LIMITED_CODE = 11232


class LarkDeliverer:
    """Posts ChatCards to a Lark incoming webhook and classifies the outcome.

    deliver() never raises; every failure comes back as DeliveryFailed.
    """

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        signing_secret: Optional[str] = None,
        session: Optional[requests.Session] = None,
        clock: Callable[[], float] = time.time,
    ):
        """Initialize the deliverer.

        Args:
            timeout: Seconds to wait for Lark before giving up.
            signing_secret: Secret of a Lark bot with signature checks enabled.
            session: requests session to send with (a new one by default).
            clock: Source of the signing timestamp.
        """
        if timeout <= 0:
            raise ValueError(f"Delivery timeout must be positive, got {timeout}")

        self.timeout = timeout
        self.signing_secret = signing_secret
        self.session = session or requests.Session()
        self.clock = clock

    def build_payload(self, card: ChatCard) -> Dict[str, Any]:
        """Serialize a card to the JSON body Lark expects."""
        message = build_lark_message(card)
        if self.signing_secret:
            timestamp = int(self.clock())
            message.timestamp = str(timestamp)
            message.sign = lark_sign(timestamp, self.signing_secret)
        return message.model_dump(mode="json", exclude_none=True)

    def deliver(self, card: ChatCard, endpoint: str) -> DeliveryResult:
        """Send a card to endpoint with a single POST."""
        if not endpoint:
            return DeliveryFailed(reason="Lark webhook URL not configured", retryable=False)

        try:
            payload = self.build_payload(card)
        except (TypeError, ValueError) as e:
            return DeliveryFailed(reason=f"Could not serialize card: {e}", retryable=False)

        try:
            response = self.session.post(endpoint, json=payload, timeout=self.timeout)
        except requests.Timeout:
            return DeliveryFailed(reason=f"Lark did not answer within {self.timeout}s", retryable=True)
        except requests.ConnectionError as e:
            return DeliveryFailed(reason=f"Could not connect to Lark: {e}", retryable=True)
        except requests.RequestException as e:
            return DeliveryFailed(reason=f"Request to Lark failed: {e}", retryable=False)
        except Exception as e:
            logger.exception("Unexpected error posting to Lark")
            return DeliveryFailed(reason=f"Unexpected error posting to Lark: {e}", retryable=False)

        return self._classify(response)

    def _classify(self, response: requests.Response) -> DeliveryResult:
        status = response.status_code
        text = response.text

        if status >= 500 or status == 429:
            return DeliveryFailed(reason=f"Lark returned {status}: {text}", retryable=True, status_code=status)
        if not 200 <= status < 300:
            return DeliveryFailed(reason=f"Lark returned {status}: {text}", retryable=False, status_code=status)

        try:
            body = response.json()
        except ValueError:
            body = None

        code = body.get("code", body.get("StatusCode")) if isinstance(body, dict) else None
        if code is not None and code != LARK_OK_CODE:
            message = body.get("msg") or body.get("StatusMessage") or text
            return DeliveryFailed(
                reason=f"Lark rejected message (code {code}): {message}",
                retryable=code == LARK_RATE_LIMITED_CODE,
                status_code=status,
            )

        logger.debug(f"Lark acknowledged message: {text}")
        return Delivered(status_code=status)
