"""Meta endpoints for Hunk Label API."""

import logging

from fastapi import APIRouter

from .. import __version__
from ..models import HealthResponse, VersionResponse

router = APIRouter(tags=["meta"])

logger = logging.getLogger(__name__)


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Health check endpoint."""
    logger.debug("Health check invoked")
    return HealthResponse(status="healthy", version=__version__)


@router.get("/version", response_model=VersionResponse)
async def version_info() -> VersionResponse:
    """Version information endpoint."""
    return VersionResponse(version=__version__, api_version="v1")


@router.get("/", include_in_schema=False)
async def root() -> dict:
    """Root endpoint providing basic API metadata."""
    return {
        "name": "Hunk Label API",
        "version": __version__,
        "description": "Label unified diff hunks and export them as JSON",
        "endpoints": {
            "load": "POST /session/load - Load a unified diff or exported document",
            "labels": "GET/POST /labels - List or create labels",
            "hunks": "GET /hunks - Visible hunks with counters",
            "filter": "GET /filter - Labels selected in the filter",
            "export": "GET /export - Labeled JSON document",
            "health": "GET /health - Health check",
            "version": "GET /version - Version information",
        },
    }
