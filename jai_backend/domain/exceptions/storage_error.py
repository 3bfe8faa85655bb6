"""
StorageError - Raised when the conversation store cannot be read or written.
Maps to: HTTP 500 Internal Server Error
"""


class StorageError(Exception):
    """Exception raised for persistence failures."""

    def __init__(self, message: str = "Storage operation failed"):
        super().__init__(message)
