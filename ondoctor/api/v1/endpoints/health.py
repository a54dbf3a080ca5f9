"""Health check endpoints."""

from fastapi import APIRouter, status
from pydantic import BaseModel

from ondoctor.config import settings
from ondoctor.dependencies import AIClientDep, AlarmServiceDep, AppointmentServiceDep

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    version: str
    environment: str


class DetailedHealthResponse(BaseModel):
    """Detailed health check response model."""

    status: str
    version: str
    environment: str
    ai: str
    appointments: int
    alarms: int


@router.get(
    "/health",
    response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
    tags=["Health"],
    summary="Basic health check",
)
async def health_check() -> HealthResponse:
    """
    Basic health check endpoint.

    Returns:
        Basic health status
    """
    return HealthResponse(
        status="healthy",
        version=settings.app_version,
        environment=settings.environment,
    )


@router.get(
    "/health/detailed",
    response_model=DetailedHealthResponse,
    status_code=status.HTTP_200_OK,
    tags=["Health"],
    summary="Detailed health check",
)
async def detailed_health_check(
    ai_client: AIClientDep,
    appointment_service: AppointmentServiceDep,
    alarm_service: AlarmServiceDep,
) -> DetailedHealthResponse:
    """
    Detailed health check with AI configuration and in-memory store sizes.

    An unconfigured AI client reports the service as degraded; booking and
    reminders keep working without it.
    """
    ai_ready = ai_client.is_configured
    return DetailedHealthResponse(
        status="healthy" if ai_ready else "degraded",
        version=settings.app_version,
        environment=settings.environment,
        ai="configured" if ai_ready else "unconfigured",
        appointments=len(appointment_service),
        alarms=len(alarm_service),
    )


@router.get(
    "/ping",
    status_code=status.HTTP_200_OK,
    tags=["Health"],
    summary="Simple ping",
)
async def ping() -> dict[str, str]:
    """
    Simple ping endpoint.

    Returns:
        Pong response
    """
    return {"message": "pong"}
