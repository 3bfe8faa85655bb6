"""Credential verification adapters."""

from jai_backend.infrastructure.auth.jwt_credential_verifier import (
    JwtCredentialVerifier,
)

__all__ = ["JwtCredentialVerifier"]
