"""
Slot generation.

Produces the bookable 30-minute slots for a doctor on one day, 09:00 to 17:00
in the clinic timezone. Availability is a deterministic placeholder pattern
until real schedules exist:

    seed      = first_code_unit(doctor_id) + day_of_month
    modulus   = (day_of_month % 3) + 2
    available = (index + seed) % modulus != 0

where index is the slot's position in the full day (0 for 09:00, 15 for
16:30). first_code_unit is the first UTF-16 code unit of the id, so an id
starting outside the Basic Multilingual Plane seeds from its high surrogate.
Slots that have already started are left out of the result.
"""

from datetime import date, datetime, time, timedelta

from ondoctor.config import settings
from ondoctor.core.clock import clinic_now, to_clinic_time
from ondoctor.core.exceptions import ValidationException
from ondoctor.schemas.slots import TimeSlot

DAY_START = time(9, 0)
SLOT_MINUTES = 30
SLOTS_PER_DAY = 16


def slot_id(start_time: datetime, doctor_id: str) -> str:
    """Build the stable id for a doctor's slot."""
    return f"slot-{start_time:%Y%m%d%H%M}-{doctor_id}"


def first_code_unit(doctor_id: str) -> int:
    """First UTF-16 code unit of a non-empty id."""
    return int.from_bytes(doctor_id[:1].encode("utf-16-be", "surrogatepass")[:2], "big")


def _normalize_day(day: date | datetime) -> date:
    if isinstance(day, datetime):
        return to_clinic_time(day).date()
    return day


def get_available_time_slots(
    day: date | datetime,
    doctor_id: str,
    now: datetime | None = None,
) -> list[TimeSlot]:
    """
    Generate the slots for a doctor on a given day.

    Args:
        day: Calendar day; a datetime is reduced to its clinic-local date
        doctor_id: Doctor identifier
        now: Reference instant, defaults to the current clinic time

    Returns:
        Slots not yet started, ordered by start time

    Raises:
        ValidationException: If doctor_id is empty
    """
    if not doctor_id:
        raise ValidationException("doctor_id must be a non-empty string")

    day = _normalize_day(day)
    now = to_clinic_time(now) if now is not None else clinic_now()

    seed = first_code_unit(doctor_id) + day.day
    modulus = (day.day % 3) + 2
    day_start = datetime.combine(day, DAY_START, tzinfo=settings.clinic_tz)
    length = timedelta(minutes=SLOT_MINUTES)

    slots = []
    for index in range(SLOTS_PER_DAY):
        start_time = day_start + index * length
        if start_time < now:
            continue
        slots.append(
            TimeSlot(
                id=slot_id(start_time, doctor_id),
                start_time=start_time,
                end_time=start_time + length,
                is_available=(index + seed) % modulus != 0,
            )
        )
    return slots
