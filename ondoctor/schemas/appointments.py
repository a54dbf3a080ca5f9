"""Appointment schemas for request/response validation."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from ondoctor.schemas.doctors import DoctorSnapshot


class AppointmentStatus(str, Enum):
    """Stored appointment status."""

    UPCOMING = "Upcoming"
    PAST = "Past"
    CANCELLED = "Cancelled"


class AppointmentDisplayStatus(str, Enum):
    """Status as presented to the patient; Missed is never stored."""

    UPCOMING = "Upcoming"
    PAST = "Past"
    CANCELLED = "Cancelled"
    MISSED = "Missed"


class AppointmentType(str, Enum):
    """Consultation channel."""

    VIDEO = "Video"
    PHONE = "Phone"


class AppointmentDraft(BaseModel):
    """Patient-supplied appointment fields."""

    patient_name: str = Field(..., max_length=200)
    patient_email: EmailStr
    reason: str = Field(..., min_length=10, max_length=500)
    date_time: datetime
    appointment_type: AppointmentType = AppointmentType.VIDEO

    @field_validator("patient_name")
    @classmethod
    def validate_patient_name(cls, v: str) -> str:
        """Require at least two non-blank characters."""
        v = v.strip()
        if len(v) < 2:
            raise ValueError("Name must be at least 2 characters")
        return v

    @field_validator("patient_email", mode="before")
    @classmethod
    def strip_patient_email(cls, v: object) -> object:
        """Trim surrounding whitespace before address validation."""
        return v.strip() if isinstance(v, str) else v


class AppointmentCreate(AppointmentDraft):
    """Schema for booking a new appointment."""

    doctor_id: str = Field(..., min_length=1)


class Appointment(BaseModel):
    """Stored appointment record."""

    model_config = ConfigDict(frozen=True)

    id: str
    patient_name: str
    patient_email: str
    doctor_id: str
    doctor: DoctorSnapshot
    date_time: datetime
    reason: str
    status: AppointmentStatus
    appointment_type: AppointmentType
    video_link: str | None = None
    created_at: datetime
    cancelled_at: datetime | None = None


class AppointmentResponse(Appointment):
    """Appointment as returned to clients."""

    display_status: AppointmentDisplayStatus
    can_join: bool


class AppointmentListResponse(BaseModel):
    """Appointments split into the upcoming and past/cancelled tabs."""

    total: int
    upcoming: list[AppointmentResponse]
    past_or_cancelled: list[AppointmentResponse]
