"""Outcomes produced by the filter and the deliverer."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from .linear_models import TrackerEvent


class IgnoreReason(str, Enum):
    """Why an event did not produce a notification."""
    ENTITY_TYPE_NOT_NOTIFIED = "entity_type_not_notified"


@dataclass(frozen=True)
class Accept:
    """The event should be posted to Lark."""
    event: TrackerEvent


@dataclass(frozen=True)
class Ignore:
    """The event is dropped without a notification."""
    reason: IgnoreReason


NotificationDecision = Union[Accept, Ignore]


@dataclass(frozen=True)
class Delivered:
    """Lark acknowledged the message."""
    status_code: int


@dataclass(frozen=True)
class DeliveryFailed:
    """The message did not reach Lark.

    ``retryable`` marks transient failures (timeouts, 5xx, rate limits) as
    opposed to configuration problems. Nothing retries; the flag is logged.
    """
    reason: str
    retryable: bool
    status_code: Optional[int] = None


DeliveryResult = Union[Delivered, DeliveryFailed]
