"""Configuration for the Linear to Lark bridge."""

import os
from dataclasses import dataclass
from typing import List, Optional

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


@dataclass
class BridgeConfig:
    """Configuration for the Linear to Lark bridge."""

    # Webhook settings
    webhook_secret: str
    webhook_endpoint: str = "/webhook"

    # Lark settings
    lark_webhook_url: str = ""
    lark_signing_secret: Optional[str] = None
    delivery_timeout: float = 10.0

    # Server settings
    host: str = "0.0.0.0"
    port: int = 3000

    # Logging
    log_dir: Optional[str] = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "BridgeConfig":
        """Create configuration from environment variables."""
        return cls(
            webhook_secret=os.getenv("LINEAR_WEBHOOK_SECRET", ""),
            webhook_endpoint=os.getenv("LINEAR_BRIDGE_WEBHOOK_ENDPOINT", "/webhook"),
            lark_webhook_url=os.getenv("LARK_WEBHOOK_URL", ""),
            lark_signing_secret=os.getenv("LARK_SIGNING_SECRET") or None,
            delivery_timeout=float(os.getenv("LARK_TIMEOUT_SECONDS", "10")),
            host=os.getenv("LINEAR_BRIDGE_HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "3000")),
            log_dir=os.getenv("LINEAR_BRIDGE_LOG_DIR") or None,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )

    def validate(self) -> List[str]:
        """Return a list of configuration problems, empty when usable."""
        problems = []
        if not self.webhook_secret:
            problems.append("LINEAR_WEBHOOK_SECRET is not set; all webhooks will be rejected")
        if not self.lark_webhook_url:
            problems.append("LARK_WEBHOOK_URL is not set; Lark notifications will fail")
        if self.delivery_timeout <= 0:
            problems.append("LARK_TIMEOUT_SECONDS must be positive")
        return problems
