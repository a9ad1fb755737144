"""Common utilities and shared functionality."""

from .hmac_utils import (
    compute_hmac_sha256,
    lark_sign,
    verify_signature,
)

from .logging_utils import (
    setup_logging,
    log_server_message,
    log_error,
    truncate,
)

__all__ = [
    # HMAC utilities
    "compute_hmac_sha256",
    "lark_sign",
    "verify_signature",
    # Logging utilities
    "setup_logging",
    "log_server_message",
    "log_error",
    "truncate",
]
