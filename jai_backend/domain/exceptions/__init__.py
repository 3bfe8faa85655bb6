"""
DOMAIN EXCEPTIONS - Business rule violations

These exceptions are raised by domain logic and caught by presentation layer.
Presentation layer maps them to HTTP status codes.
"""

from jai_backend.domain.exceptions.auth_error import AuthError
from jai_backend.domain.exceptions.entity_not_found import EntityNotFoundError
from jai_backend.domain.exceptions.provider_error import ProviderError
from jai_backend.domain.exceptions.storage_error import StorageError
from jai_backend.domain.exceptions.validation_error import (
    DomainValidationError,
    MissingPromptError,
)

__all__ = [
    "AuthError",
    "EntityNotFoundError",
    "ProviderError",
    "StorageError",
    "DomainValidationError",
    "MissingPromptError",
]
