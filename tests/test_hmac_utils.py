"""Tests for webhook signature verification."""

import pytest

from linear_bridge.common import compute_hmac_sha256, lark_sign, verify_signature
from linear_bridge.errors import AuthError, MissingSignatureError, SignatureMismatchError
from linear_bridge.models import VerifiedBody

from helpers import SECRET, load_resource, sign

BODIES = [
    b"",
    b"{}",
    b'{"action": "create",   "type": "Issue"}',
    "{\"title\": \"café ☕\"}".encode("utf-8"),
    bytes(range(256)),
]


@pytest.mark.parametrize("body", BODIES)
def test_correct_signature_returns_same_bytes(body):
    verified = verify_signature(body, sign(body), SECRET)

    assert isinstance(verified, VerifiedBody)
    assert verified.content == body


def test_compute_matches_reference_digest():
    body = load_resource("issue_create_urgent.json")
    assert compute_hmac_sha256(body, SECRET) == sign(body)
    assert compute_hmac_sha256(body, SECRET.encode()) == sign(body)


def test_secret_may_be_bytes():
    body = b'{"a": 1}'
    assert verify_signature(body, sign(body), SECRET.encode("utf-8")).content == body


def test_missing_header_is_missing_signature():
    with pytest.raises(MissingSignatureError):
        verify_signature(b"{}", None, SECRET)


def test_missing_header_never_reports_mismatch():
    with pytest.raises(AuthError) as exc_info:
        verify_signature(b"anything", None, SECRET)
    assert not isinstance(exc_info.value, SignatureMismatchError)


def test_empty_header_is_mismatch_not_missing():
    with pytest.raises(SignatureMismatchError):
        verify_signature(b"{}", "", SECRET)


@pytest.mark.parametrize(
    "mangle",
    [
        lambda sig: sig.upper(),
        lambda sig: sig[:-1],
        lambda sig: sig[:32],
        lambda sig: sig + "0",
        lambda sig: "sha256=" + sig,
        lambda sig: " " + sig,
        lambda sig: "deadbeef",
        lambda sig: "z" * len(sig),
        lambda sig: "é" * len(sig),
    ],
)
def test_altered_signature_is_mismatch(mangle):
    body = load_resource("issue_create_urgent.json")
    with pytest.raises(SignatureMismatchError):
        verify_signature(body, mangle(sign(body)), SECRET)


def test_signature_over_mutated_body_is_mismatch():
    body = load_resource("issue_create_urgent.json")
    tampered = body.replace(b'"priority":1', b'"priority":4')
    assert tampered != body

    with pytest.raises(SignatureMismatchError):
        verify_signature(tampered, sign(body), SECRET)


def test_reserialized_body_does_not_verify():
    body = b'{"action":"create","type":"Issue"}'
    reserialized = b'{"action": "create", "type": "Issue"}'

    with pytest.raises(SignatureMismatchError):
        verify_signature(reserialized, sign(body), SECRET)


def test_wrong_secret_is_mismatch():
    body = b"{}"
    with pytest.raises(SignatureMismatchError):
        verify_signature(body, sign(body, "other-secret"), SECRET)


def test_lark_sign_known_value():
    # Empty-message HMAC keyed with "<timestamp>\n<secret>", base64 encoded
    import base64
    import hashlib
    import hmac

    expected = base64.b64encode(
        hmac.new(b"1700000000\nbot-secret", b"", hashlib.sha256).digest()
    ).decode()
    assert lark_sign(1700000000, "bot-secret") == expected
