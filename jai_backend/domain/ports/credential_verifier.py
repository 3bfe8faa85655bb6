"""
Credential Verifier Port - verify a bearer credential.

Implementation: jai_backend/infrastructure/auth/jwt_credential_verifier.py
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from jai_backend.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class VerifiedCredential:
    user_id: UserId
    email: Optional[str] = None
    email_verified: bool = False
    sign_in_provider: Optional[str] = None


class CredentialVerifier(ABC):
    @abstractmethod
    async def verify(self, token: str) -> VerifiedCredential:
        """Raise AuthError when the token is invalid or expired."""
