import os
from datetime import timedelta
from collections.abc import AsyncGenerator
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from dotenv import load_dotenv

# Tests run against a fixed clinic timezone and an empty appointment store
os.environ["CLINIC_TIMEZONE"] = "UTC"
os.environ["SEED_DEMO_DATA"] = "false"
os.environ.setdefault("LOG_FORMAT", "console")

load_dotenv()

from httpx import ASGITransport, AsyncClient

from ondoctor.config import settings
from ondoctor.core.ai_client import AIClient
from ondoctor.dependencies import (
    get_ai_client,
    get_alarm_service,
    get_appointment_service,
    get_clock,
    get_doctor_service,
)
from ondoctor.main import app
from ondoctor.services.alarm_service import AlarmService
from ondoctor.services.appointment_service import AppointmentService
from ondoctor.services.doctor_service import DoctorService

from helpers import FIXED_NOW, MutableClock, completion


@pytest.fixture
def clock() -> MutableClock:
    return MutableClock(FIXED_NOW)


@pytest.fixture
def doctor_service() -> DoctorService:
    return DoctorService()


@pytest.fixture
def appointment_service(doctor_service: DoctorService, clock: MutableClock) -> AppointmentService:
    """Fresh, empty appointment store on the test clock."""
    return AppointmentService(
        doctors=doctor_service,
        clock=clock,
        video_link_base_url="https://meet.example.com",
    )


@pytest.fixture
def alarm_service(clock: MutableClock) -> AlarmService:
    return AlarmService(clock=clock)


@pytest.fixture
def openai_mock() -> MagicMock:
    """Stand-in for the AsyncOpenAI SDK client."""
    mock = MagicMock()
    mock.chat.completions.create = AsyncMock(return_value=completion("Hello!"))
    return mock


@pytest.fixture
def ai_client(openai_mock: MagicMock) -> AIClient:
    return AIClient(settings, client=openai_mock)


@pytest_asyncio.fixture
async def client(
    clock: MutableClock,
    doctor_service: DoctorService,
    appointment_service: AppointmentService,
    alarm_service: AlarmService,
    ai_client: AIClient,
) -> AsyncGenerator[AsyncClient, None]:
    """Create a test HTTP client wired to the per-test services."""
    app.dependency_overrides[get_clock] = lambda: clock
    app.dependency_overrides[get_doctor_service] = lambda: doctor_service
    app.dependency_overrides[get_appointment_service] = lambda: appointment_service
    app.dependency_overrides[get_alarm_service] = lambda: alarm_service
    app.dependency_overrides[get_ai_client] = lambda: ai_client

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def sample_appointment_data() -> dict:
    """Booking for tomorrow 10:00 with doc1."""
    return {
        "patient_name": "John Doe",
        "patient_email": "john.doe@example.com",
        "reason": "Chest pain follow-up visit",
        "date_time": (FIXED_NOW + timedelta(days=1)).replace(hour=10).isoformat(),
        "appointment_type": "Video",
        "doctor_id": "doc1",
    }
