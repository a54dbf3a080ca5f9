"""Appointment endpoints."""

from fastapi import APIRouter, Query, status

from ondoctor.dependencies import AppointmentServiceDep
from ondoctor.schemas.appointments import (
    AppointmentCreate,
    AppointmentListResponse,
    AppointmentResponse,
    AppointmentStatus,
)
from ondoctor.services.appointment_service import to_response

router = APIRouter()


@router.post(
    "/",
    response_model=AppointmentResponse,
    status_code=status.HTTP_201_CREATED,
    tags=["Appointments"],
    summary="Create new appointment",
)
async def create_appointment(
    data: AppointmentCreate,
    service: AppointmentServiceDep,
) -> AppointmentResponse:
    """
    Book a consultation with a doctor.

    Args:
        data: Appointment creation data
        service: Appointment store

    Returns:
        Created appointment

    Raises:
        DoctorNotFoundException: If doctor_id is unknown
    """
    appointment = service.create(data, data.doctor_id)
    return to_response(appointment, service.now())


@router.get(
    "/",
    response_model=AppointmentListResponse,
    status_code=status.HTTP_200_OK,
    tags=["Appointments"],
    summary="List appointments",
)
async def list_appointments(
    service: AppointmentServiceDep,
    patient_email: str | None = Query(None),
    status_filter: AppointmentStatus | None = Query(None, alias="status"),
) -> AppointmentListResponse:
    """
    List appointments split into upcoming and past/cancelled, most recent first.

    Args:
        service: Appointment store
        patient_email: Only this patient's appointments
        status_filter: Filter by stored status

    Returns:
        Partitioned appointments
    """
    return service.list_partitioned(patient_email=patient_email, status=status_filter)


@router.get(
    "/{appointment_id}",
    response_model=AppointmentResponse,
    status_code=status.HTTP_200_OK,
    tags=["Appointments"],
    summary="Get appointment by ID",
)
async def get_appointment(
    appointment_id: str,
    service: AppointmentServiceDep,
) -> AppointmentResponse:
    """
    Get a specific appointment by ID.

    Raises:
        NotFoundException: If appointment not found
    """
    return to_response(service.get(appointment_id), service.now())


@router.post(
    "/{appointment_id}/cancel",
    response_model=AppointmentResponse,
    status_code=status.HTTP_200_OK,
    tags=["Appointments"],
    summary="Cancel appointment",
)
async def cancel_appointment(
    appointment_id: str,
    service: AppointmentServiceDep,
) -> AppointmentResponse:
    """
    Cancel an upcoming appointment.

    Cancelling an already cancelled appointment is a no-op.

    Raises:
        NotFoundException: If appointment not found
        ConflictException: If the appointment is already past
    """
    return to_response(service.cancel(appointment_id), service.now())
