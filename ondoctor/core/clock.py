"""Clinic-local time helpers."""

from collections.abc import Callable
from datetime import datetime

from ondoctor.config import settings

Clock = Callable[[], datetime]


def clinic_now() -> datetime:
    """Current time as an aware datetime in the clinic timezone."""
    return datetime.now(settings.clinic_tz)


def to_clinic_time(value: datetime) -> datetime:
    """
    Express a datetime in the clinic timezone.

    Naive values are taken to already be clinic wall-clock time.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=settings.clinic_tz)
    return value.astimezone(settings.clinic_tz)
