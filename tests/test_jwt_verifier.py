import asyncio
import time

import jwt
import pytest

from jai_backend.domain.exceptions import AuthError
from jai_backend.infrastructure.auth import JwtCredentialVerifier
from tests.conftest import AUD, ISS, SERVICE_AUTH_SECRET, _service_token


def _verify(verifier, token):
    return asyncio.run(verifier.verify(token))


def test_valid_token_yields_credential(verifier):
    credential = _verify(verifier, _service_token(user_id="uid-42", email="a@b.dev"))

    assert credential.user_id.value == "uid-42"
    assert credential.email == "a@b.dev"
    assert credential.email_verified is True
    assert credential.sign_in_provider == "password"


def test_firebase_style_user_id_claim(verifier):
    now = int(time.time())
    token = jwt.encode(
        {"user_id": "fb-uid", "iat": now, "exp": now + 60, "aud": AUD, "iss": ISS},
        SERVICE_AUTH_SECRET,
        algorithm="HS256",
    )
    assert _verify(verifier, token).user_id.value == "fb-uid"


def test_expired_token_rejected(verifier):
    with pytest.raises(AuthError, match="expired"):
        _verify(verifier, _service_token(expires_in=-10))


def test_wrong_audience_rejected():
    verifier = JwtCredentialVerifier(secret=SERVICE_AUTH_SECRET, audience="someone-else", issuer=ISS)
    with pytest.raises(AuthError):
        _verify(verifier, _service_token())


def test_missing_subject_rejected(verifier):
    now = int(time.time())
    token = jwt.encode(
        {"iat": now, "exp": now + 60, "aud": AUD, "iss": ISS},
        SERVICE_AUTH_SECRET,
        algorithm="HS256",
    )
    with pytest.raises(AuthError):
        _verify(verifier, token)


def test_missing_issued_at_rejected(verifier):
    token = jwt.encode(
        {"sub": "u", "exp": int(time.time()) + 60, "aud": AUD, "iss": ISS},
        SERVICE_AUTH_SECRET,
        algorithm="HS256",
    )
    with pytest.raises(AuthError):
        _verify(verifier, token)


def test_garbage_rejected(verifier):
    with pytest.raises(AuthError):
        _verify(verifier, "definitely.not.ajwt")


def test_needs_a_key_source():
    with pytest.raises(ValueError):
        JwtCredentialVerifier()
