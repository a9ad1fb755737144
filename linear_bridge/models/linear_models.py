"""Pydantic models for Linear webhook payloads."""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class EventAction(str, Enum):
    """Known Linear webhook actions.

    Anything Linear adds later maps to OTHER; the raw value stays on the event.
    """
    CREATE = "create"
    UPDATE = "update"
    REMOVE = "remove"
    OTHER = "other"

    @classmethod
    def from_raw(cls, value: str) -> "EventAction":
        try:
            return cls(value)
        except ValueError:
            return cls.OTHER


class EntityType(str, Enum):
    """Known Linear entity types carried in the payload "type" field."""
    ISSUE = "Issue"
    COMMENT = "Comment"
    ISSUE_LABEL = "IssueLabel"
    PROJECT = "Project"
    CYCLE = "Cycle"
    REACTION = "Reaction"
    OTHER = "Other"

    @classmethod
    def from_raw(cls, value: str) -> "EntityType":
        try:
            return cls(value)
        except ValueError:
            return cls.OTHER


class LinearAssignee(BaseModel):
    """Linear user an issue is assigned to."""
    model_config = ConfigDict(extra="ignore")

    id: Optional[str] = None
    name: Optional[str] = None
    displayName: Optional[str] = None
    email: Optional[str] = None

    @property
    def display_name(self) -> Optional[str]:
        return self.name or self.displayName or self.email


class LinearIssueState(BaseModel):
    """Workflow state of an issue."""
    model_config = ConfigDict(extra="ignore")

    id: Optional[str] = None
    name: Optional[str] = None
    type: Optional[str] = None


class LinearIssue(BaseModel):
    """The "data" object of a Linear webhook."""
    model_config = ConfigDict(extra="ignore")

    # Required fields
    id: str
    identifier: str

    # Optional fields, absent or null in some payloads
    title: Optional[str] = None
    priority: int = 0
    state: Optional[LinearIssueState] = None
    assignee: Optional[LinearAssignee] = None

    @field_validator("priority", mode="before")
    @classmethod
    def _null_priority(cls, value: Any) -> Any:
        # Linear sends null for issues that never had a priority set
        return 0 if value is None else value

    @property
    def state_name(self) -> Optional[str]:
        return self.state.name if self.state else None

    @property
    def assignee_name(self) -> Optional[str]:
        return self.assignee.display_name if self.assignee else None


class TrackerEvent(BaseModel):
    """A Linear webhook event.

    ``action`` and ``entity_type`` keep the raw strings Linear sent; use
    ``action_kind`` and ``entity_kind`` for the known variants.
    """
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    action: str
    entity_type: str = Field(alias="type")
    url: Optional[str] = None
    issue: LinearIssue = Field(alias="data")

    @property
    def action_kind(self) -> EventAction:
        return EventAction.from_raw(self.action)

    @property
    def entity_kind(self) -> EntityType:
        return EntityType.from_raw(self.entity_type)
