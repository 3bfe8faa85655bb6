"""
PORTS - Interfaces that infrastructure implements

A "port" is an abstract interface that defines WHAT the domain needs,
without specifying HOW it's done.

- repositories/          → conversation persistence
- model_provider.py      → language-model completion service
- credential_verifier.py → bearer credential verification
"""

from jai_backend.domain.ports.credential_verifier import (
    CredentialVerifier,
    VerifiedCredential,
)
from jai_backend.domain.ports.model_provider import ChatTurn, ModelProvider
from jai_backend.domain.ports.repositories import ConversationRepository

__all__ = [
    "ChatTurn",
    "ConversationRepository",
    "CredentialVerifier",
    "ModelProvider",
    "VerifiedCredential",
]
