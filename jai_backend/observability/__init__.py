"""Observability package for the Jai backend."""

from jai_backend.observability.metrics import (
    increment_active_chats,
    decrement_active_chats,
    observe_request_latency,
    increment_chat_route,
    observe_llm_latency,
    observe_llm_tokens,
    increment_error,
    get_metrics_content,
    MetricsErrorType,
)

__all__ = [
    "increment_active_chats",
    "decrement_active_chats",
    "observe_request_latency",
    "increment_chat_route",
    "observe_llm_latency",
    "observe_llm_tokens",
    "increment_error",
    "get_metrics_content",
    "MetricsErrorType",
]
