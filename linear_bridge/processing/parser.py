"""Decode verified webhook bodies into TrackerEvent models."""

import json
import logging

from pydantic import ValidationError

from ..errors import MalformedPayloadError
from ..models import TrackerEvent, VerifiedBody

logger = logging.getLogger(__name__)


def parse_event(body: VerifiedBody) -> TrackerEvent:
    """Parse a verified body into a TrackerEvent.

    Raises:
        MalformedPayloadError: If the body is not a JSON object or lacks
            action, type, data.id or data.identifier.
    """
    if not isinstance(body, VerifiedBody):
        raise TypeError("parse_event() requires a VerifiedBody")

    try:
        payload = json.loads(body.content)
    except (json.JSONDecodeError, UnicodeDecodeError, RecursionError) as e:
        raise MalformedPayloadError(f"Invalid JSON payload: {e}") from e

    if not isinstance(payload, dict):
        raise MalformedPayloadError(
            f"Expected a JSON object, got {type(payload).__name__}"
        )

    try:
        event = TrackerEvent.model_validate(payload)
    except ValidationError as e:
        missing = ", ".join(
            ".".join(str(part) for part in err["loc"]) for err in e.errors()
        )
        raise MalformedPayloadError(f"Invalid webhook payload ({missing})") from e

    logger.debug(f"Parsed {event.entity_type} {event.action} for {event.issue.identifier}")
    return event
