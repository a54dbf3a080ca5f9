"""Medicine alarm service."""

import itertools
import threading
from datetime import datetime

import structlog

from ondoctor.core.clock import Clock, clinic_now, to_clinic_time
from ondoctor.core.exceptions import NotFoundException
from ondoctor.schemas.alarms import (
    AlarmPeriod,
    MedicineAlarm,
    MedicineAlarmCreate,
    MedicineReminder,
)

logger = structlog.get_logger()


def to_24_hour(time_part: str, period: AlarmPeriod) -> str:
    """Convert a validated 12-hour time to HH:MM 24-hour; 12 AM is midnight."""
    hours_str, minutes_str = time_part.split(":")
    hours = int(hours_str) % 12
    if period == AlarmPeriod.PM:
        hours += 12
    return f"{hours:02d}:{int(minutes_str):02d}"


def to_12_hour(time_24: str) -> str:
    """Format HH:MM 24-hour as hh:MM AM/PM."""
    hours_str, minutes_str = time_24.split(":")
    hours = int(hours_str)
    period = "PM" if hours >= 12 else "AM"
    return f"{hours % 12 or 12:02d}:{minutes_str} {period}"


class AlarmService:
    """In-memory medicine alarm book."""

    def __init__(self, clock: Clock = clinic_now):
        """Initialize an empty alarm book."""
        self.clock = clock
        self._alarms: dict[str, MedicineAlarm] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._alarms)

    def create_alarm(self, data: MedicineAlarmCreate) -> MedicineAlarm:
        """Set a new alarm."""
        time_24 = to_24_hour(data.time_part, data.period)
        with self._lock:
            alarm = MedicineAlarm(
                id=f"alarm{next(self._ids)}",
                medicine_name=data.medicine_name,
                time=time_24,
                display_time=to_12_hour(time_24),
                sound_file=data.sound_file,
                mobile_number=data.mobile_number,
                created_at=to_clinic_time(self.clock()),
            )
            self._alarms[alarm.id] = alarm

        logger.info(
            "medicine_alarm_created",
            alarm_id=alarm.id,
            time=alarm.time,
            sms=alarm.mobile_number is not None,
        )
        return alarm

    def list_alarms(self) -> list[MedicineAlarm]:
        """List alarms by time of day."""
        return sorted(self._alarms.values(), key=lambda a: a.time)

    def delete_alarm(self, alarm_id: str) -> None:
        """
        Remove an alarm.

        Raises:
            NotFoundException: If alarm not found
        """
        with self._lock:
            if self._alarms.pop(alarm_id, None) is None:
                raise NotFoundException("Alarm not found")
        logger.info("medicine_alarm_deleted", alarm_id=alarm_id)

    def due(self, at: datetime | None = None) -> list[MedicineReminder]:
        """Reminders for alarms set to the minute of `at` (defaults to now)."""
        at = to_clinic_time(at) if at is not None else to_clinic_time(self.clock())
        minute = f"{at:%H:%M}"
        return [
            MedicineReminder(
                alarm_id=alarm.id,
                medicine_name=alarm.medicine_name,
                time=alarm.time,
                message=f"Time to take your {alarm.medicine_name}.",
                sound_file=alarm.sound_file,
                sms_simulated=alarm.mobile_number is not None,
                mobile_number=alarm.mobile_number,
            )
            for alarm in self.list_alarms()
            if alarm.time == minute
        ]
