"""Processing stages applied to each verified webhook.

- parser: decode the body into a TrackerEvent
- filters: decide whether the event is notified
- cards: format accepted events as ChatCards
- delivery: post cards to Lark
"""

from .parser import parse_event
from .filters import decide
from .cards import format_card, priority_label, priority_template
from .delivery import LarkDeliverer

__all__ = [
    "parse_event",
    "decide",
    "format_card",
    "priority_label",
    "priority_template",
    "LarkDeliverer",
]
