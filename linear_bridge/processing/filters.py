"""Notification policy for parsed events."""

from ..models import Accept, EntityType, Ignore, IgnoreReason, NotificationDecision, TrackerEvent


def decide(event: TrackerEvent) -> NotificationDecision:
    """Accept every Issue event, whatever its action; ignore everything else."""
    if event.entity_kind is EntityType.ISSUE:
        return Accept(event)
    return Ignore(IgnoreReason.ENTITY_TYPE_NOT_NOTIFIED)
