"""
Prometheus Metrics for the Jai backend.

DATA FLOW:
    This file                  presentation/api/metrics.py         Observability Stack
    ─────────                  ────────────────────────────         ───────────────────
    Define metrics ──────────► /metrics endpoint ──────────────►   Prometheus scraper

METRIC TYPES:
    - Gauge: Value goes up/down (current count, e.g., active chats)
    - Counter: Value only goes up (total count, e.g., routed chats)
    - Histogram: Distribution (for percentiles like P95, e.g., latency)
"""

from prometheus_client import (
    Gauge,
    Histogram,
    Counter,
    generate_latest,
    CONTENT_TYPE_LATEST,
)


# =============================================================================
# METRICS DEFINITIONS
# =============================================================================
ACTIVE_CHATS = Gauge(
    "jai_active_chats", "Number of chat requests currently being processed"
)

REQUEST_LATENCY = Histogram(
    "http_server_request_duration_seconds",
    "Http request latency in seconds",
    ["method", "route", "http_status_code"],
    buckets=[0.05, 0.1, 0.5, 1, 2, 5, 10, 30, 60, 120],
)

CHAT_ROUTE_TOTAL = Counter(
    "jai_chat_route_total",
    "Total number of chat requests by route (shortcut category or model)",
    ["route"],
)

LLM_LATENCY = Histogram(
    "jai_llm_latency_seconds",
    "Latency of language-model calls in seconds",
    ["provider"],
    buckets=[0.5, 1, 2, 5, 10, 20, 30, 60, 120],
)

LLM_TOKENS_TOTAL = Histogram(
    "jai_llm_tokens_total",
    "Total number of LLM tokens used",
    ["type", "model"],
    buckets=[100, 500, 1000, 2000, 5000, 10000, 20000, 50000],
)

ERRORS_TOTAL = Counter(
    "jai_errors_total",
    "Total number of errors by type",
    ["error_type"],
)


# =============================================================================
# LABEL CONSTANTS
# =============================================================================
class MetricsErrorType:
    """Error type labels for jai_errors_total metric."""

    LLM_FAILED = "llm_failed"
    STORAGE_FAILED = "storage_failed"
    MEMORY_UNAVAILABLE = "memory_unavailable"


# =============================================================================
# RECORDING FUNCTIONS
# =============================================================================
def increment_active_chats():
    ACTIVE_CHATS.inc()


def decrement_active_chats():
    ACTIVE_CHATS.dec()


def observe_request_latency(method: str, route: str, status_code: int, duration: float):
    """Integration point: fastapi_app.MetricsMiddleware"""
    REQUEST_LATENCY.labels(
        method=method, route=route, http_status_code=str(status_code)
    ).observe(duration)


def increment_chat_route(route: str):
    """Integration point: SendMessageHandler after classification"""
    CHAT_ROUTE_TOTAL.labels(route=route).inc()


def observe_llm_latency(provider: str, duration: float):
    """Integration point: services/model_gateway.py"""
    LLM_LATENCY.labels(provider=provider).observe(duration)


def observe_llm_tokens(type: str, model: str, token_count: int):
    """Integration point: infrastructure/llm providers when usage is reported"""
    LLM_TOKENS_TOTAL.labels(type=type, model=model).observe(token_count)


def increment_error(error_type: str):
    """
    Call to record an error occurrence.

    Integration points:
        - services/model_gateway.py: llm_failed
        - services/memory_synthesizer.py: memory_unavailable
        - presentation/api routers: storage_failed
    """
    ERRORS_TOTAL.labels(error_type=error_type).inc()


# =============================================================================
# HELPER FOR /metrics ENDPOINT
# =============================================================================
def get_metrics_content():
    """
    Generate Prometheus metrics output.

    Returns:
        Tuple of (content_bytes, content_type_string)
    """
    return generate_latest(), CONTENT_TYPE_LATEST
