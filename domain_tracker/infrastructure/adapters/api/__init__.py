"""API adapter for HTTP endpoints."""

from .app import ApiServices, create_app
from .models import HealthResponse, MutationResponse, OverviewResponse

__all__ = [
    "ApiServices",
    "HealthResponse",
    "MutationResponse",
    "OverviewResponse",
    "create_app",
]
