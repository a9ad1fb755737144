"""Linear Lark Bridge - forwards Linear issue webhooks to Lark.

This package is organized as:

- linear_bridge.common: Signature and logging utilities
- linear_bridge.models: Request wrappers, Linear payloads, cards and outcomes
- linear_bridge.processing: Parsing, filtering, formatting and delivery
- linear_bridge.pipeline: Per-request orchestration
- linear_bridge.server: FastAPI application
"""

__version__ = "1.0.0"

from .pipeline import PipelineResult, PipelineState, WebhookPipeline

__all__ = [
    "PipelineResult",
    "PipelineState",
    "WebhookPipeline",
]
