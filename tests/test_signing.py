import hashlib
import hmac

import pytest

from navigableai import (
    ConfigurationError,
    InvalidSignatureError,
    NavigableAI,
    SignatureRequiredError,
    SignatureVerifier,
    compute_signature,
    verify_signature,
)


def expected_signature(payload, secret):
    return hmac.new(secret.encode(), payload.encode(), hashlib.sha256).hexdigest()


@pytest.mark.parametrize("payload", ["user-1", "", "héllo wörld", "a" * 1000])
def test_compute_signature_is_hex_hmac_sha256(payload):
    assert compute_signature(payload, "secret") == expected_signature(payload, "secret")


@pytest.mark.parametrize("payload", ["user-1", "", "How much does it cost?"])
def test_correct_signature_verifies(payload):
    sig = expected_signature(payload, "secret")
    assert verify_signature(payload, sig, "secret") is True


@pytest.mark.parametrize("signature", [
    "",
    "garbage",
    None,
    expected_signature("user-1", "other-secret"),
    expected_signature("user-2", "secret"),
    expected_signature("user-1", "secret").upper(),
    expected_signature("user-1", "secret")[:-1],
])
def test_wrong_signature_fails(signature):
    assert verify_signature("user-1", signature, "secret") is False


@pytest.mark.parametrize("signature", [None, "", "garbage", "0" * 64])
def test_no_secret_always_verifies(signature):
    assert verify_signature("user-1", signature) is True
    assert verify_signature("user-1", signature, None) is True


def test_verifier_check():
    verifier = SignatureVerifier("secret")
    assert verifier.enabled is True
    verifier.check("user-1", expected_signature("user-1", "secret"))

    with pytest.raises(SignatureRequiredError):
        verifier.check("user-1", None)
    with pytest.raises(SignatureRequiredError):
        verifier.check("user-1", "")
    with pytest.raises(InvalidSignatureError):
        verifier.check("user-1", "nope")


def test_disabled_verifier_accepts_anything():
    verifier = SignatureVerifier()
    assert verifier.enabled is False
    verifier.check("user-1", None)
    verifier.check("user-1", "nope")
    assert verifier.verify("user-1", "nope") is True


def test_client_sign():
    client = NavigableAI("key", "secret")
    assert client.sign("user-1") == expected_signature("user-1", "secret")


def test_client_sign_without_secret():
    with pytest.raises(ConfigurationError):
        NavigableAI("key").sign("user-1")
