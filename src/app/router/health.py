"""Router – health check."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from src.app.config import HEALTH_OK

router = APIRouter(tags=["Health"])


@router.api_route("/health", methods=["GET", "HEAD"], response_class=PlainTextResponse)
def health_check() -> str:
    """Liveness / readiness probe for the load balancer target group."""
    return HEALTH_OK
