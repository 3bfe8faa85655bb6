"""
UserId Value Object - identifier issued by the credential provider.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class UserId:
    value: str  # user_id (e.g. Firebase uid)

    def __post_init__(self):
        if not self.value:
            raise ValueError("UserId cannot be empty")

    def __str__(self) -> str:
        return self.value
