from fastapi import APIRouter

from usermanagement.presentation.api.config import API_VERSION, get_api_settings
from usermanagement.presentation.api.schemas import HealthResponse

router = APIRouter()


@router.get("/health", summary="Service health")
async def health_check() -> HealthResponse:
    """Liveness check. Does not touch the database."""
    return HealthResponse(
        status="UP",
        service=get_api_settings().app_name,
        version=API_VERSION,
    )
