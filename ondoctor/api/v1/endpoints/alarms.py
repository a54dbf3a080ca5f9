"""Medicine alarm endpoints."""

from datetime import datetime

from fastapi import APIRouter, Query, status

from ondoctor.core.clock import to_clinic_time
from ondoctor.dependencies import AlarmServiceDep
from ondoctor.schemas.alarms import (
    MedicineAlarm,
    MedicineAlarmCreate,
    MedicineAlarmListResponse,
    MedicineReminderListResponse,
)

router = APIRouter()


@router.get(
    "/",
    response_model=MedicineAlarmListResponse,
    status_code=status.HTTP_200_OK,
    summary="List medicine alarms",
)
async def list_alarms(service: AlarmServiceDep) -> MedicineAlarmListResponse:
    """List alarms ordered by time of day."""
    items = service.list_alarms()
    return MedicineAlarmListResponse(total=len(items), items=items)


@router.post(
    "/",
    response_model=MedicineAlarm,
    status_code=status.HTTP_201_CREATED,
    summary="Set medicine alarm",
)
async def create_alarm(data: MedicineAlarmCreate, service: AlarmServiceDep) -> MedicineAlarm:
    """
    Set a daily medicine alarm.

    Args:
        data: Medicine name, 12-hour time with AM/PM, sound and optional mobile number
        service: Alarm book

    Returns:
        Created alarm with its 24-hour time
    """
    return service.create_alarm(data)


@router.get(
    "/due",
    response_model=MedicineReminderListResponse,
    status_code=status.HTTP_200_OK,
    summary="Get due reminders",
)
async def get_due_reminders(
    service: AlarmServiceDep,
    at: datetime | None = Query(None, description="Instant to check, defaults to now"),
) -> MedicineReminderListResponse:
    """List reminders for alarms set to the given minute."""
    at = to_clinic_time(at) if at is not None else to_clinic_time(service.clock())
    return MedicineReminderListResponse(at=f"{at:%H:%M}", items=service.due(at))


@router.delete(
    "/{alarm_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete medicine alarm",
)
async def delete_alarm(alarm_id: str, service: AlarmServiceDep) -> None:
    """
    Delete an alarm.

    Raises:
        NotFoundException: If alarm not found
    """
    service.delete_alarm(alarm_id)
