"""Medicine alarm schemas."""

import re
from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

TIME_PART_PATTERN = re.compile(r"^(0?[1-9]|1[0-2]):([0-5]\d)$")
MOBILE_NUMBER_PATTERN = re.compile(r"^\+?[1-9]\d{1,14}$")


class AlarmPeriod(str, Enum):
    """12-hour clock period."""

    AM = "AM"
    PM = "PM"


class AlarmSound(str, Enum):
    """Bundled alarm sounds."""

    DEFAULT_BEEP = "alarm-sound.mp3"
    CHIME = "chime.mp3"
    DIGITAL_BEEP = "digital-beep.mp3"


class MedicineAlarmCreate(BaseModel):
    """Schema for setting a medicine alarm."""

    medicine_name: str = Field(..., max_length=200)
    time_part: str = Field(..., description="12-hour time, e.g. 09:30 or 1:00")
    period: AlarmPeriod
    sound_file: AlarmSound = AlarmSound.DEFAULT_BEEP
    mobile_number: str | None = Field(None, description="Number for simulated SMS reminders")

    @field_validator("medicine_name")
    @classmethod
    def validate_medicine_name(cls, v: str) -> str:
        """Require a non-blank medicine name."""
        v = v.strip()
        if not v:
            raise ValueError("Medicine name is required")
        return v

    @field_validator("time_part")
    @classmethod
    def validate_time_part(cls, v: str) -> str:
        """Validate HH:MM 12-hour format."""
        v = v.strip()
        if not TIME_PART_PATTERN.match(v):
            raise ValueError("Enter time in HH:MM format (e.g., 09:30 or 01:00)")
        return v

    @field_validator("mobile_number")
    @classmethod
    def validate_mobile_number(cls, v: str | None) -> str | None:
        """Treat blank as unset; otherwise require an E.164-like number."""
        if v is None or not v.strip():
            return None
        v = v.strip()
        if not MOBILE_NUMBER_PATTERN.match(v):
            raise ValueError("Enter a valid phone number (e.g., +1234567890) or leave blank")
        return v


class MedicineAlarm(BaseModel):
    """Stored medicine alarm."""

    model_config = ConfigDict(frozen=True)

    id: str
    medicine_name: str
    time: str = Field(..., description="24-hour HH:MM")
    display_time: str = Field(..., description="12-hour hh:MM AM/PM")
    sound_file: AlarmSound
    mobile_number: str | None = None
    created_at: datetime


class MedicineAlarmListResponse(BaseModel):
    """Alarms ordered by time of day."""

    total: int
    items: list[MedicineAlarm]


class MedicineReminder(BaseModel):
    """An alarm that is due."""

    alarm_id: str
    medicine_name: str
    time: str
    message: str
    sound_file: AlarmSound
    sms_simulated: bool
    mobile_number: str | None = None


class MedicineReminderListResponse(BaseModel):
    """Reminders due at a given minute."""

    at: str
    items: list[MedicineReminder]
