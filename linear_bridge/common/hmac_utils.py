"""HMAC utilities for webhook signature validation."""

import base64
import hashlib
import hmac
from typing import Optional, Union

from ..errors import MissingSignatureError, SignatureMismatchError
from ..models.inbound import VerifiedBody


def _as_bytes(secret: Union[str, bytes]) -> bytes:
    if isinstance(secret, bytes):
        return secret
    return secret.encode("utf-8")


def compute_hmac_sha256(data: bytes, secret: Union[str, bytes]) -> str:
    """Compute the lowercase hex HMAC-SHA256 of data keyed with secret."""
    return hmac.new(_as_bytes(secret), data, hashlib.sha256).hexdigest()


def verify_signature(
    raw_body: bytes,
    signature_header: Optional[str],
    secret: Union[str, bytes],
) -> VerifiedBody:
    """Verify the linear-signature header against the raw request body.

    The digest is computed over the exact bytes received, before any
    decoding, and compared in constant time. A header of the wrong length
    or with non-hex characters is reported as a plain mismatch.

    Args:
        raw_body: Request body bytes as received.
        signature_header: Value of the linear-signature header, or None.
        secret: Shared webhook secret.

    Returns:
        VerifiedBody wrapping the unchanged body.

    Raises:
        MissingSignatureError: If the header is absent.
        SignatureMismatchError: If the header is not the expected digest.
    """
    if signature_header is None:
        raise MissingSignatureError("Missing linear-signature header")

    expected = compute_hmac_sha256(raw_body, secret)
    # compare_digest only accepts ASCII strings, so compare bytes instead
    provided = signature_header.encode("utf-8", errors="replace")
    if not hmac.compare_digest(expected.encode("ascii"), provided):
        raise SignatureMismatchError("Invalid webhook signature")

    return VerifiedBody(content=raw_body)


def lark_sign(timestamp: int, secret: str) -> str:
    """Compute the signature Lark expects from signed custom bots.

    Lark keys the HMAC with "<timestamp>\\n<secret>" and signs an empty
    message, then base64-encodes the digest.
    """
    string_to_sign = f"{timestamp}\n{secret}"
    digest = hmac.new(string_to_sign.encode("utf-8"), b"", hashlib.sha256).digest()
    return base64.b64encode(digest).decode("utf-8")
