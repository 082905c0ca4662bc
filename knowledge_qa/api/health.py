"""
Health check endpoint.

Routes: GET /api/health
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from knowledge_qa.services import HealthService

from .deps import get_health_service

router = APIRouter(prefix="/api/health", tags=["health"])


@router.get("")
async def health_check(health_service: HealthService = Depends(get_health_service)):
    """Database connectivity, document statistics and LLM configuration."""
    report = await health_service.check()
    return JSONResponse(report.model_dump(mode="json"), status_code=report.http_status)
