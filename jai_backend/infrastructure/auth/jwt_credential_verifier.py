"""
JWT credential verifier.

Two modes, picked from configuration:
- JWKS (RS256): keys fetched from AUTH_JWKS_URL. With a Firebase service
  account configured this verifies Firebase ID tokens (audience = project id,
  issuer = https://securetoken.google.com/<project id>).
- Shared secret (HS256): AUTH_SECRET, used for service tokens and tests.

Claims used: sub (or user_id) → user id, email, email_verified,
firebase.sign_in_provider.
"""

import asyncio
import logging
from typing import Any, Optional

import jwt

from jai_backend.config.settings import Config
from jai_backend.domain.exceptions import AuthError
from jai_backend.domain.ports.credential_verifier import (
    CredentialVerifier,
    VerifiedCredential,
)
from jai_backend.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)


class JwtCredentialVerifier(CredentialVerifier):
    def __init__(
        self,
        secret: Optional[str] = None,
        jwks_url: Optional[str] = None,
        audience: Optional[str] = None,
        issuer: Optional[str] = None,
    ):
        if not secret and not jwks_url:
            raise ValueError("Either AUTH_SECRET or AUTH_JWKS_URL must be configured")
        self._secret = secret
        self._jwks_client = jwt.PyJWKClient(jwks_url) if jwks_url else None
        self._audience = audience or None
        self._issuer = issuer or None

    @classmethod
    def from_config(cls, config: type[Config] = Config) -> "JwtCredentialVerifier":
        return cls(
            secret=config.AUTH_SECRET or None,
            jwks_url=config.AUTH_JWKS_URL or None,
            audience=config.AUTH_AUDIENCE,
            issuer=config.AUTH_ISSUER,
        )

    async def _signing_key(self, token: str) -> tuple[Any, list[str]]:
        if self._jwks_client is not None:
            # PyJWKClient fetches keys with blocking urllib
            signing_key = await asyncio.to_thread(
                self._jwks_client.get_signing_key_from_jwt, token
            )
            return signing_key.key, ["RS256"]
        return self._secret, ["HS256"]

    async def verify(self, token: str) -> VerifiedCredential:
        required = ["exp", "iat"]
        if self._audience:
            required.append("aud")
        if self._issuer:
            required.append("iss")
        try:
            key, algorithms = await self._signing_key(token)
            claims = jwt.decode(
                token,
                key,
                algorithms=algorithms,
                audience=self._audience,
                issuer=self._issuer,
                options={"require": required},
            )
        except jwt.ExpiredSignatureError as e:
            raise AuthError("Token has expired") from e
        except (jwt.InvalidTokenError, jwt.PyJWKClientError) as e:
            raise AuthError(f"Invalid token: {e}") from e

        user_id = claims.get("sub") or claims.get("user_id")
        if not user_id:
            raise AuthError("Missing subject claim in token")

        firebase_claims = claims.get("firebase") or {}
        return VerifiedCredential(
            user_id=UserId(str(user_id)),
            email=claims.get("email"),
            email_verified=bool(claims.get("email_verified", False)),
            sign_in_provider=firebase_claims.get("sign_in_provider"),
        )
