"""Time slot schemas."""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict


class TimeSlot(BaseModel):
    """A 30-minute bookable interval for one doctor."""

    model_config = ConfigDict(frozen=True)

    id: str
    start_time: datetime
    end_time: datetime
    is_available: bool


class TimeSlotListResponse(BaseModel):
    """Slots for one doctor on one day."""

    doctor_id: str
    day: date
    total: int
    available: int
    items: list[TimeSlot]
