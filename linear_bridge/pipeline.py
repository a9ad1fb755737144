"""Per-request webhook pipeline: verify, parse, filter, format, deliver.

Each stage can end the request early. The HTTP status sent back to Linear is
decided here and does not depend on whether Lark accepted the card.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Union

from .common import log_error, truncate, verify_signature
from .errors import AuthError, MissingSignatureError, ParseError
from .models import (
    Accept,
    ChatCard,
    DeliveryFailed,
    DeliveryResult,
    InboundRequest,
    NotificationDecision,
    TrackerEvent,
)
from .processing import LarkDeliverer, decide, format_card, parse_event

logger = logging.getLogger(__name__)


class PipelineState(str, Enum):
    """Terminal states of a webhook request."""
    UNAUTHORIZED = "unauthorized"
    BAD_REQUEST = "bad_request"
    IGNORED = "ignored"
    ACKNOWLEDGED = "acknowledged"

    @property
    def status_code(self) -> int:
        return STATUS_CODES[self]


STATUS_CODES = {
    PipelineState.UNAUTHORIZED: 401,
    PipelineState.BAD_REQUEST: 400,
    PipelineState.IGNORED: 200,
    PipelineState.ACKNOWLEDGED: 200,
}


@dataclass(frozen=True)
class PipelineResult:
    """What happened to one webhook request."""
    state: PipelineState
    message: str
    event: Optional[TrackerEvent] = None
    decision: Optional[NotificationDecision] = None
    card: Optional[ChatCard] = None
    delivery: Optional[DeliveryResult] = None

    @property
    def status_code(self) -> int:
        return self.state.status_code


class WebhookPipeline:
    """Runs one webhook request through every stage.

    Holds only read-only configuration, so a single instance serves
    concurrent requests.
    """

    def __init__(
        self,
        secret: Union[str, bytes],
        lark_webhook_url: str,
        deliverer: Optional[LarkDeliverer] = None,
        formatter: Callable[[TrackerEvent], ChatCard] = format_card,
    ):
        self.secret = secret
        self.lark_webhook_url = lark_webhook_url
        self.deliverer = deliverer or LarkDeliverer()
        self.formatter = formatter

    def handle(self, request: InboundRequest) -> PipelineResult:
        """Process a webhook request and return its outcome."""
        # Verification must run on the raw bytes before anything decodes them
        try:
            verified = verify_signature(request.body, request.signature, self.secret)
        except MissingSignatureError as e:
            logger.warning("Rejected webhook: missing linear-signature header")
            return PipelineResult(PipelineState.UNAUTHORIZED, str(e))
        except AuthError as e:
            # Never log the attempted signature
            logger.warning("Rejected webhook: invalid signature")
            return PipelineResult(PipelineState.UNAUTHORIZED, str(e))

        try:
            event = parse_event(verified)
        except ParseError as e:
            log_error(f"Failed to parse payload: {e}", request.body.decode("utf-8", errors="replace"))
            return PipelineResult(PipelineState.BAD_REQUEST, str(e))

        decision = decide(event)
        if not isinstance(decision, Accept):
            logger.info(
                f"Ignoring event: type={event.entity_type}, action={event.action} "
                f"({decision.reason.value})"
            )
            return PipelineResult(
                PipelineState.IGNORED,
                f"Ignored {event.entity_type} event",
                event=event,
                decision=decision,
            )

        logger.info(f"Processing {event.action} {event.issue.identifier} - {event.issue.title or ''}")
        card = self.formatter(event)
        delivery = self.deliverer.deliver(card, self.lark_webhook_url)

        if isinstance(delivery, DeliveryFailed):
            logger.error(
                f"Lark notification failed for {event.issue.identifier} "
                f"(retryable={delivery.retryable}): {truncate(delivery.reason)}"
            )
        else:
            logger.info(f"Lark notification sent for {event.issue.identifier}")

        return PipelineResult(
            PipelineState.ACKNOWLEDGED,
            f"Processed {event.action} {event.issue.identifier}",
            event=event,
            decision=decision,
            card=card,
            delivery=delivery,
        )
