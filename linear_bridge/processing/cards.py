"""Build Lark chat cards from Linear issue events."""

from typing import List

from ..models import CardField, ChatCard, EventAction, TrackerEvent

PRIORITY_LABELS = {
    0: "No priority",
    1: "Urgent",
    2: "High",
    3: "Medium",
    4: "Low",
}

PRIORITY_TEMPLATES = {
    1: "red",
    2: "orange",
    3: "yellow",
}

ACTION_LABELS = {
    EventAction.CREATE: "Created",
    EventAction.UPDATE: "Updated",
    EventAction.REMOVE: "Removed",
}

DEFAULT_TEMPLATE = "blue"
UNASSIGNED = "Unassigned"


def priority_label(priority: int) -> str:
    """Name a Linear priority; unknown values render as "Priority <n>"."""
    return PRIORITY_LABELS.get(priority, f"Priority {priority}")


def priority_template(priority: int) -> str:
    """Header colour for a priority. No priority and Low share the default."""
    return PRIORITY_TEMPLATES.get(priority, DEFAULT_TEMPLATE)


def action_label(event: TrackerEvent) -> str:
    return ACTION_LABELS.get(event.action_kind, event.action)


def format_card(event: TrackerEvent) -> ChatCard:
    """Format an accepted event as a ChatCard.

    The result depends only on the event, so equal events give equal cards.
    """
    issue = event.issue

    title = f"{issue.identifier}: {issue.title}" if issue.title else issue.identifier

    lines: List[CardField] = []
    if issue.state_name:
        lines.append(CardField(label="Status", value=issue.state_name))
    lines.append(CardField(label="Priority", value=priority_label(issue.priority)))
    lines.append(CardField(label="Assignee", value=issue.assignee_name or UNASSIGNED))

    return ChatCard(
        header=f"[Linear] {action_label(event)}: {issue.identifier}",
        template=priority_template(issue.priority),
        title=title,
        lines=lines,
        link_url=event.url or None,
    )
