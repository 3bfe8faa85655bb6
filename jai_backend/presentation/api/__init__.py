"""
API Routers - FastAPI endpoint definitions.
"""

from jai_backend.presentation.api.auth import router as auth_router
from jai_backend.presentation.api.chat import router as chat_router
from jai_backend.presentation.api.conversations import router as conversations_router
from jai_backend.presentation.api.metrics import router as metrics_router

__all__ = [
    "auth_router",
    "chat_router",
    "conversations_router",
    "metrics_router",
]
