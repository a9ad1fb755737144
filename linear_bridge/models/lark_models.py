"""Chat card model and the Lark wire models it is serialized to."""

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class CardField(BaseModel):
    """A short "label: value" metadata line on a card."""
    model_config = ConfigDict(frozen=True)

    label: str
    value: str


class ChatCard(BaseModel):
    """A formatted notification, independent of the Lark wire shape."""
    model_config = ConfigDict(frozen=True)

    header: str
    template: str = "blue"
    title: str
    lines: List[CardField] = Field(default_factory=list)
    link_url: Optional[str] = None
    link_text: str = "View in Linear"

    def field_value(self, label: str) -> Optional[str]:
        """Return the value of the first field with the given label."""
        for card_field in self.lines:
            if card_field.label == label:
                return card_field.value
        return None


# Models for the outgoing Lark custom-bot payload

class LarkText(BaseModel):
    """Text element, either plain_text or lark_md."""
    tag: str
    content: str


class LarkHeader(BaseModel):
    """Card header with colour template."""
    template: str
    title: LarkText


class LarkCard(BaseModel):
    """Interactive card body."""
    header: LarkHeader
    elements: List[Dict[str, Any]]


class LarkMessage(BaseModel):
    """Top-level message posted to a Lark incoming webhook."""
    msg_type: Literal["interactive"] = "interactive"
    card: LarkCard

    # Only present when the bot requires signed requests
    timestamp: Optional[str] = None
    sign: Optional[str] = None


def _markdown(content: str) -> Dict[str, Any]:
    return {"tag": "lark_md", "content": content}


def build_lark_message(card: ChatCard) -> LarkMessage:
    """Map a ChatCard to Lark's interactive message shape."""
    elements: List[Dict[str, Any]] = [
        {"tag": "div", "text": _markdown(f"**{card.title}**")},
    ]

    if card.lines:
        elements.append({
            "tag": "div",
            "fields": [
                {
                    "is_short": True,
                    "text": _markdown(f"**{f.label}:** {f.value}"),
                }
                for f in card.lines
            ],
        })

    if card.link_url:
        elements.append({
            "tag": "action",
            "actions": [
                {
                    "tag": "button",
                    "text": {"tag": "plain_text", "content": card.link_text},
                    "type": "primary",
                    "url": card.link_url,
                }
            ],
        })

    return LarkMessage(
        card=LarkCard(
            header=LarkHeader(
                template=card.template,
                title=LarkText(tag="plain_text", content=card.header),
            ),
            elements=elements,
        )
    )
