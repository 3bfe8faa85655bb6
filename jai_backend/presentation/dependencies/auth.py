"""
Authentication Dependency for FastAPI.

- Extracts the bearer token from the Authorization header
- Verifies it with the CredentialVerifier registered in the DI container
- Returns AuthUser for use in route handlers
- Raises HTTPException 403 when the token is missing, invalid or expired
"""

import logging
from dataclasses import dataclass
from typing import Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from jai_backend.domain.exceptions import AuthError
from jai_backend.domain.ports.credential_verifier import CredentialVerifier
from jai_backend.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)

NO_TOKEN_DETAIL = "Unauthorized: No token provided."
INVALID_TOKEN_DETAIL = "Unauthorized: Invalid token."


@dataclass
class AuthUser:
    user_id: UserId
    email: Optional[str] = None
    email_verified: bool = False


security = HTTPBearer(auto_error=False)


async def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> AuthUser:
    if credentials is None or not credentials.credentials:
        logger.info("Unauthorized: No token provided.")
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=NO_TOKEN_DETAIL)

    verifier = await request.app.state.dishka_container.get(CredentialVerifier)
    try:
        credential = await verifier.verify(credentials.credentials)
    except AuthError as e:
        logger.info(f"Authentication error: {e}")
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN, detail=INVALID_TOKEN_DETAIL
        ) from e

    logger.info(
        f"User authenticated: {credential.user_id} "
        f"(Provider: {credential.sign_in_provider}, Email: {credential.email})"
    )
    return AuthUser(
        user_id=credential.user_id,
        email=credential.email,
        email_verified=credential.email_verified,
    )
