"""
ProviderError - Raised when the language-model call fails or returns non-success.
Maps to: HTTP 500 Internal Server Error
"""

from typing import Optional


class ProviderError(Exception):
    """The model provider failed; never retried."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code
