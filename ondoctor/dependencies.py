"""FastAPI dependencies."""

from functools import lru_cache
from typing import Annotated

import structlog
from fastapi import Depends

from ondoctor.config import settings
from ondoctor.core.ai_client import AIClient
from ondoctor.core.clock import Clock, clinic_now
from ondoctor.services.alarm_service import AlarmService
from ondoctor.services.appointment_service import AppointmentService
from ondoctor.services.assistant_service import AssistantService
from ondoctor.services.doctor_service import DoctorService
from ondoctor.services.meal_plan_service import MealPlanService
from ondoctor.services.prescription_service import PrescriptionService

logger = structlog.get_logger()


def get_clock() -> Clock:
    """Get the clock used for "now" in request handlers."""
    return clinic_now


@lru_cache
def get_doctor_service() -> DoctorService:
    """Get the process-wide doctor directory."""
    return DoctorService()


@lru_cache
def get_appointment_service() -> AppointmentService:
    """Get the process-wide appointment store, seeded with demo data when enabled."""
    service = AppointmentService(
        doctors=get_doctor_service(),
        video_link_base_url=settings.video_link_base_url,
    )
    if settings.seed_demo_data:
        service.seed_demo_data()
    return service


@lru_cache
def get_alarm_service() -> AlarmService:
    """Get the process-wide medicine alarm book."""
    return AlarmService()


@lru_cache
def get_ai_client() -> AIClient:
    """Get the shared AI client."""
    client = AIClient(settings)
    if not client.is_configured:
        logger.warning("ai_client_unconfigured", note="Set OPENAI_API_KEY to enable AI features.")
    return client


# Type aliases for dependency injection
ClockDep = Annotated[Clock, Depends(get_clock)]
DoctorServiceDep = Annotated[DoctorService, Depends(get_doctor_service)]
AppointmentServiceDep = Annotated[AppointmentService, Depends(get_appointment_service)]
AlarmServiceDep = Annotated[AlarmService, Depends(get_alarm_service)]
AIClientDep = Annotated[AIClient, Depends(get_ai_client)]


def get_meal_plan_service(ai_client: AIClientDep) -> MealPlanService:
    return MealPlanService(ai_client)


def get_prescription_service(ai_client: AIClientDep) -> PrescriptionService:
    return PrescriptionService(ai_client)


def get_assistant_service(ai_client: AIClientDep) -> AssistantService:
    return AssistantService(ai_client)


MealPlanServiceDep = Annotated[MealPlanService, Depends(get_meal_plan_service)]
PrescriptionServiceDep = Annotated[PrescriptionService, Depends(get_prescription_service)]
AssistantServiceDep = Annotated[AssistantService, Depends(get_assistant_service)]
