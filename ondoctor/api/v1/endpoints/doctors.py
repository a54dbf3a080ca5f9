"""Doctor directory and slot endpoints."""

from datetime import date

from fastapi import APIRouter, Query, status

from ondoctor.core.clock import to_clinic_time
from ondoctor.dependencies import ClockDep, DoctorServiceDep
from ondoctor.schemas.doctors import DoctorListResponse, DoctorResponse
from ondoctor.schemas.slots import TimeSlotListResponse
from ondoctor.services.slot_service import get_available_time_slots

router = APIRouter()


@router.get(
    "/",
    response_model=DoctorListResponse,
    status_code=status.HTTP_200_OK,
    summary="List doctors",
)
async def list_doctors(doctor_service: DoctorServiceDep) -> DoctorListResponse:
    """List all doctors available for consultations."""
    items = doctor_service.list_doctors()
    return DoctorListResponse(total=len(items), items=items)


@router.get(
    "/{doctor_id}",
    response_model=DoctorResponse,
    status_code=status.HTTP_200_OK,
    summary="Get doctor by ID",
)
async def get_doctor(doctor_id: str, doctor_service: DoctorServiceDep) -> DoctorResponse:
    """
    Get a specific doctor.

    Raises:
        DoctorNotFoundException: If the doctor is not in the directory
    """
    return doctor_service.require_doctor(doctor_id)


@router.get(
    "/{doctor_id}/slots",
    response_model=TimeSlotListResponse,
    status_code=status.HTTP_200_OK,
    summary="Get bookable time slots",
)
async def get_doctor_slots(
    doctor_id: str,
    doctor_service: DoctorServiceDep,
    clock: ClockDep,
    day: date | None = Query(None, alias="date", description="Day to list, defaults to today"),
) -> TimeSlotListResponse:
    """
    List a doctor's 30-minute slots for one day.

    Slots that have already started are omitted.

    Args:
        doctor_id: Doctor ID
        doctor_service: Doctor directory
        clock: Source of the current time
        day: Calendar day (YYYY-MM-DD)

    Returns:
        Slots ordered by start time
    """
    doctor_service.require_doctor(doctor_id)
    now = to_clinic_time(clock())
    day = day or now.date()
    slots = get_available_time_slots(day, doctor_id, now=now)
    return TimeSlotListResponse(
        doctor_id=doctor_id,
        day=day,
        total=len(slots),
        available=sum(1 for slot in slots if slot.is_available),
        items=slots,
    )
