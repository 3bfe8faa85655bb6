"""Chat commands."""

from .send_message import SendMessageCommand, SendMessageHandler, SendMessageResult

__all__ = [
    "SendMessageCommand",
    "SendMessageHandler",
    "SendMessageResult",
]
