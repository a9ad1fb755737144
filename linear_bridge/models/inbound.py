"""Request-scoped wrappers around the raw webhook body."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class InboundRequest:
    """A webhook request as received, before any checks."""
    body: bytes
    signature: Optional[str] = None
    content_type: Optional[str] = None


@dataclass(frozen=True)
class VerifiedBody:
    """A request body whose signature has been checked.

    Only verify_signature() should build one; the parser refuses anything else.
    """
    content: bytes
