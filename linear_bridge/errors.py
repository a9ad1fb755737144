"""Exceptions raised while processing Linear webhooks."""


class BridgeError(Exception):
    """Base exception for the Linear to Lark bridge"""
    pass


class AuthError(BridgeError):
    """Raised when a webhook request cannot be authenticated"""
    pass


class MissingSignatureError(AuthError):
    """Raised when the linear-signature header is absent"""
    pass


class SignatureMismatchError(AuthError):
    """Raised when the signature does not match the request body"""
    pass


class ParseError(BridgeError):
    """Raised when a verified body cannot be turned into an event"""
    pass


class MalformedPayloadError(ParseError):
    """Raised on invalid JSON or missing required fields"""
    pass
