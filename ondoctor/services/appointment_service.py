"""Appointment store and status rules."""

import itertools
import threading
from datetime import datetime, time, timedelta

import structlog

from ondoctor.core.clock import Clock, clinic_now, to_clinic_time
from ondoctor.core.exceptions import ConflictException, NotFoundException
from ondoctor.schemas.appointments import (
    Appointment,
    AppointmentDisplayStatus,
    AppointmentDraft,
    AppointmentListResponse,
    AppointmentResponse,
    AppointmentStatus,
    AppointmentType,
)
from ondoctor.services.doctor_service import DoctorService

logger = structlog.get_logger()


def is_missed(appointment: Appointment, now: datetime) -> bool:
    """Upcoming in storage but its time has already passed."""
    return appointment.status == AppointmentStatus.UPCOMING and appointment.date_time < now


def display_status(appointment: Appointment, now: datetime) -> AppointmentDisplayStatus:
    """Status shown to the patient; adds Missed on top of the stored status."""
    if is_missed(appointment, now):
        return AppointmentDisplayStatus.MISSED
    return AppointmentDisplayStatus(appointment.status.value)


def partition(
    appointments: list[Appointment],
    now: datetime,
) -> tuple[list[Appointment], list[Appointment]]:
    """
    Split appointments into upcoming and past-or-cancelled.

    Input order is preserved within each group.
    """
    upcoming = []
    past_or_cancelled = []
    for appointment in appointments:
        if appointment.status == AppointmentStatus.UPCOMING and not is_missed(appointment, now):
            upcoming.append(appointment)
        else:
            past_or_cancelled.append(appointment)
    return upcoming, past_or_cancelled


def to_response(appointment: Appointment, now: datetime) -> AppointmentResponse:
    """Attach display-time fields to a stored appointment."""
    status = display_status(appointment, now)
    return AppointmentResponse(
        **appointment.model_dump(),
        display_status=status,
        can_join=status == AppointmentDisplayStatus.UPCOMING and appointment.video_link is not None,
    )


class AppointmentService:
    """
    In-memory appointment store.

    One instance lives for the whole process. Writes are serialized with a
    lock; reads return snapshots of the current records.
    """

    def __init__(
        self,
        doctors: DoctorService,
        clock: Clock = clinic_now,
        video_link_base_url: str = "https://meet.example.com",
    ):
        """Initialize an empty store."""
        self.doctors = doctors
        self.clock = clock
        self.video_link_base_url = video_link_base_url.rstrip("/")
        self._appointments: dict[str, Appointment] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._appointments)

    def now(self) -> datetime:
        """Current time according to the store's clock."""
        return to_clinic_time(self.clock())

    def create(self, draft: AppointmentDraft, doctor_id: str) -> Appointment:
        """
        Book a new appointment.

        Args:
            draft: Patient-supplied fields
            doctor_id: Directory id of the doctor

        Returns:
            Created appointment

        Raises:
            DoctorNotFoundException: If the doctor is not in the directory
        """
        date_time = to_clinic_time(draft.date_time)
        appointment = self._store(
            doctor_id,
            patient_name=draft.patient_name,
            patient_email=draft.patient_email,
            date_time=date_time,
            reason=draft.reason,
            status=(
                AppointmentStatus.PAST if date_time < self.now() else AppointmentStatus.UPCOMING
            ),
            appointment_type=draft.appointment_type,
        )

        logger.info(
            "appointment_created",
            appointment_id=appointment.id,
            doctor_id=doctor_id,
            status=appointment.status.value,
        )
        return appointment

    def _store(
        self,
        doctor_id: str,
        *,
        patient_name: str,
        patient_email: str,
        date_time: datetime,
        reason: str,
        status: AppointmentStatus,
        appointment_type: AppointmentType = AppointmentType.VIDEO,
    ) -> Appointment:
        """Assign an id and video link, then save the record as given."""
        doctor = self.doctors.snapshot(doctor_id)
        now = self.now()

        with self._lock:
            appointment_id = f"apt{next(self._ids)}"
            video_link = None
            if appointment_type == AppointmentType.VIDEO:
                video_link = f"{self.video_link_base_url}/{appointment_id}"

            appointment = Appointment(
                id=appointment_id,
                patient_name=patient_name,
                patient_email=patient_email,
                doctor_id=doctor_id,
                doctor=doctor,
                date_time=date_time,
                reason=reason,
                status=status,
                appointment_type=appointment_type,
                video_link=video_link,
                created_at=now,
                cancelled_at=now if status == AppointmentStatus.CANCELLED else None,
            )
            self._appointments[appointment_id] = appointment
        return appointment

    def get(self, appointment_id: str) -> Appointment:
        """
        Get appointment by ID.

        Raises:
            NotFoundException: If appointment not found
        """
        appointment = self._appointments.get(appointment_id)
        if appointment is None:
            raise NotFoundException("Appointment not found")
        return appointment

    def cancel(self, appointment_id: str) -> Appointment:
        """
        Cancel an appointment.

        Upcoming appointments (including missed ones) become Cancelled.
        Cancelling an already cancelled appointment returns it unchanged.

        Raises:
            NotFoundException: If appointment not found
            ConflictException: If the appointment is Past
        """
        with self._lock:
            appointment = self.get(appointment_id)

            if appointment.status == AppointmentStatus.CANCELLED:
                return appointment
            if appointment.status == AppointmentStatus.PAST:
                raise ConflictException("Past appointments cannot be cancelled")

            appointment = appointment.model_copy(
                update={
                    "status": AppointmentStatus.CANCELLED,
                    "cancelled_at": self.now(),
                }
            )
            self._appointments[appointment_id] = appointment

        logger.info("appointment_cancelled", appointment_id=appointment_id)
        return appointment

    def list_appointments(
        self,
        patient_email: str | None = None,
        status: AppointmentStatus | None = None,
    ) -> list[Appointment]:
        """List appointments, most recent first."""
        items = list(self._appointments.values())
        if patient_email:
            email = patient_email.strip().lower()
            items = [a for a in items if a.patient_email.lower() == email]
        if status:
            items = [a for a in items if a.status == status]
        return sorted(items, key=lambda a: a.date_time, reverse=True)

    def list_partitioned(
        self,
        patient_email: str | None = None,
        status: AppointmentStatus | None = None,
    ) -> AppointmentListResponse:
        """List appointments grouped the way the appointments page shows them."""
        now = self.now()
        items = self.list_appointments(patient_email=patient_email, status=status)
        upcoming, past_or_cancelled = partition(items, now)
        return AppointmentListResponse(
            total=len(items),
            upcoming=[to_response(a, now) for a in upcoming],
            past_or_cancelled=[to_response(a, now) for a in past_or_cancelled],
        )

    def seed_demo_data(self) -> None:
        """Load the demo appointments shown by the front end, dated relative to today."""
        now = self.now()
        today = now.date()

        def at(days: int, hour: int, minute: int = 0) -> datetime:
            return datetime.combine(
                today + timedelta(days=days), time(hour, minute), tzinfo=now.tzinfo
            )

        today_status = AppointmentStatus.PAST if at(0, 10) < now else AppointmentStatus.UPCOMING
        demo = [
            ("John Doe", "john.doe@example.com", "doc1", at(0, 10),
             "Chest pain follow-up", today_status),
            ("Jane Roe", "jane.roe@example.com", "doc2", at(1, 14, 30),
             "Child regular checkup", AppointmentStatus.UPCOMING),
            ("Peter Pan", "peter.pan@example.com", "doc3", at(-1, 11),
             "Skin rash", AppointmentStatus.PAST),
            ("Alice Wonderland", "alice.wonderland@example.com", "doc1", at(3, 16),
             "Annual heart checkup", AppointmentStatus.UPCOMING),
            ("Cancelled Appointment", "test@example.com", "doc2", at(-2, 9),
             "Routine check", AppointmentStatus.CANCELLED),
        ]
        # Saved directly: some demo reasons are below the booking minimum length
        for name, email, doctor_id, date_time, reason, status in demo:
            self._store(
                doctor_id,
                patient_name=name,
                patient_email=email,
                date_time=date_time,
                reason=reason,
                status=status,
            )

        logger.info("demo_appointments_seeded", count=len(self))
