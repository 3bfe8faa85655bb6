"""
Prometheus Metrics Endpoint.

Exposes everything recorded in observability/metrics.py in the Prometheus
text format. Unauthenticated, like the health routes.

    curl http://localhost:5000/metrics
"""

from fastapi import APIRouter, Response

from jai_backend.observability.metrics import get_metrics_content

router = APIRouter(prefix="/metrics", tags=["observability"])


@router.get("")
async def metrics():
    content, content_type = get_metrics_content()
    return Response(content=content, media_type=content_type)
