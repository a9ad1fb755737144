"""Shared models for webhook processing."""

from .inbound import (
    InboundRequest,
    VerifiedBody,
)

from .linear_models import (
    EntityType,
    EventAction,
    LinearAssignee,
    LinearIssue,
    LinearIssueState,
    TrackerEvent,
)

from .lark_models import (
    CardField,
    ChatCard,
    LarkCard,
    LarkHeader,
    LarkMessage,
    LarkText,
    build_lark_message,
)

from .outcomes import (
    Accept,
    Delivered,
    DeliveryFailed,
    DeliveryResult,
    Ignore,
    IgnoreReason,
    NotificationDecision,
)

__all__ = [
    # Request wrappers
    "InboundRequest",
    "VerifiedBody",
    # Linear models
    "EntityType",
    "EventAction",
    "LinearAssignee",
    "LinearIssue",
    "LinearIssueState",
    "TrackerEvent",
    # Card and Lark models
    "CardField",
    "ChatCard",
    "LarkCard",
    "LarkHeader",
    "LarkMessage",
    "LarkText",
    "build_lark_message",
    # Outcomes
    "Accept",
    "Delivered",
    "DeliveryFailed",
    "DeliveryResult",
    "Ignore",
    "IgnoreReason",
    "NotificationDecision",
]
