"""
AuthError - Raised when a bearer credential is missing, invalid or expired.
Maps to: HTTP 403 Forbidden
"""


class AuthError(Exception):
    """Raised when a credential cannot be verified"""

    def __init__(self, message: str = "Invalid credential"):
        super().__init__(message)
