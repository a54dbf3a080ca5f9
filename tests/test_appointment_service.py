"""Tests for the appointment store."""

from datetime import datetime, timedelta

import pytest
from pydantic import ValidationError

from ondoctor.core.exceptions import (
    ConflictException,
    DoctorNotFoundException,
    NotFoundException,
)
from ondoctor.schemas.appointments import (
    AppointmentDisplayStatus,
    AppointmentDraft,
    AppointmentStatus,
    AppointmentType,
)
from ondoctor.schemas.doctors import DoctorSnapshot
from ondoctor.services.appointment_service import (
    AppointmentService,
    display_status,
    partition,
    to_response,
)
from ondoctor.services.doctor_service import DoctorService

from helpers import FIXED_NOW, MutableClock

TOMORROW_10AM = (FIXED_NOW + timedelta(days=1)).replace(hour=10)
YESTERDAY_11AM = (FIXED_NOW - timedelta(days=1)).replace(hour=11)


def make_draft(date_time: datetime, **overrides) -> AppointmentDraft:
    data = {
        "patient_name": "John Doe",
        "patient_email": "john.doe@example.com",
        "reason": "Chest pain follow-up visit",
        "date_time": date_time,
    }
    data.update(overrides)
    return AppointmentDraft(**data)


# ============================================================================
# Creation
# ============================================================================


def test_create_future_appointment_is_upcoming(appointment_service: AppointmentService):
    """Test booking tomorrow 10:00 with doc1 yields an Upcoming appointment."""
    appointment = appointment_service.create(make_draft(TOMORROW_10AM), "doc1")

    assert appointment.status == AppointmentStatus.UPCOMING
    assert appointment.doctor == DoctorSnapshot(name="Dr. Alice Smith", specialty="Cardiology")
    assert appointment.doctor_id == "doc1"
    assert appointment.date_time == TOMORROW_10AM
    assert appointment.video_link == f"https://meet.example.com/{appointment.id}"

    listing = appointment_service.list_partitioned()
    assert [a.id for a in listing.upcoming] == [appointment.id]
    assert listing.past_or_cancelled == []


def test_create_past_appointment_is_past(appointment_service: AppointmentService):
    """Test an appointment dated yesterday is Past from the start."""
    appointment = appointment_service.create(make_draft(YESTERDAY_11AM), "doc3")

    assert appointment.status == AppointmentStatus.PAST
    listing = appointment_service.list_partitioned()
    assert listing.upcoming == []
    assert [a.display_status for a in listing.past_or_cancelled] == [AppointmentDisplayStatus.PAST]


def test_create_unknown_doctor_leaves_store_unchanged(appointment_service: AppointmentService):
    """Test booking with an unknown doctor fails."""
    with pytest.raises(DoctorNotFoundException) as exc_info:
        appointment_service.create(make_draft(TOMORROW_10AM), "doc-unknown")

    assert exc_info.value.status_code == 404
    assert len(appointment_service) == 0
    assert appointment_service.list_appointments() == []


def test_create_round_trip(appointment_service: AppointmentService):
    """Test list contains exactly one record matching the submitted fields."""
    appointment_service.create(
        make_draft(TOMORROW_10AM, patient_name="Jane Roe", patient_email="jane.roe@example.com"),
        "doc2",
    )

    matches = [
        a
        for a in appointment_service.list_appointments()
        if a.patient_name == "Jane Roe" and a.date_time == TOMORROW_10AM
    ]
    assert len(matches) == 1
    assert matches[0].patient_email == "jane.roe@example.com"
    assert matches[0].reason == "Chest pain follow-up visit"


def test_phone_appointment_has_no_video_link(appointment_service: AppointmentService):
    """Test only video consultations get a meeting link."""
    appointment = appointment_service.create(
        make_draft(TOMORROW_10AM, appointment_type=AppointmentType.PHONE), "doc1"
    )

    assert appointment.video_link is None
    assert to_response(appointment, FIXED_NOW).can_join is False


def test_ids_are_unique(appointment_service: AppointmentService):
    """Test every booking gets its own id."""
    ids = {appointment_service.create(make_draft(TOMORROW_10AM), "doc1").id for _ in range(5)}
    assert len(ids) == 5


def test_naive_datetime_taken_as_clinic_time(appointment_service: AppointmentService):
    """Test naive times are interpreted in the clinic timezone."""
    naive = TOMORROW_10AM.replace(tzinfo=None)
    appointment = appointment_service.create(make_draft(naive), "doc1")

    assert appointment.date_time == TOMORROW_10AM
    assert appointment.date_time.tzinfo is not None


def test_snapshot_is_copied_from_directory(clock: MutableClock):
    """Test the stored doctor details do not follow later directory changes."""
    directory = DoctorService()
    service = AppointmentService(doctors=directory, clock=clock)
    appointment = service.create(make_draft(TOMORROW_10AM), "doc1")

    directory._doctors.clear()

    assert service.get(appointment.id).doctor.name == "Dr. Alice Smith"


# ============================================================================
# Cancellation
# ============================================================================


def test_cancel_moves_to_past_or_cancelled(appointment_service: AppointmentService):
    """Test a cancelled appointment never shows as upcoming."""
    appointment = appointment_service.create(make_draft(TOMORROW_10AM), "doc1")

    cancelled = appointment_service.cancel(appointment.id)

    assert cancelled.status == AppointmentStatus.CANCELLED
    assert cancelled.cancelled_at == FIXED_NOW
    assert cancelled.date_time == appointment.date_time
    assert cancelled.reason == appointment.reason

    listing = appointment_service.list_partitioned()
    assert listing.upcoming == []
    assert [a.id for a in listing.past_or_cancelled] == [appointment.id]
    assert listing.past_or_cancelled[0].can_join is False


def test_cancel_twice_is_idempotent(appointment_service: AppointmentService, clock: MutableClock):
    """Test cancelling an already cancelled appointment is a no-op."""
    appointment = appointment_service.create(make_draft(TOMORROW_10AM), "doc1")
    first = appointment_service.cancel(appointment.id)

    clock.advance(timedelta(minutes=5))
    second = appointment_service.cancel(appointment.id)

    assert second.status == AppointmentStatus.CANCELLED
    assert second == first


def test_cancel_past_appointment_conflicts(appointment_service: AppointmentService):
    """Test Past is terminal."""
    appointment = appointment_service.create(make_draft(YESTERDAY_11AM), "doc1")

    with pytest.raises(ConflictException):
        appointment_service.cancel(appointment.id)

    assert appointment_service.get(appointment.id).status == AppointmentStatus.PAST


def test_cancel_unknown_appointment(appointment_service: AppointmentService):
    """Test cancelling an unknown id fails."""
    with pytest.raises(NotFoundException):
        appointment_service.cancel("apt-missing")


def test_get_unknown_appointment(appointment_service: AppointmentService):
    """Test get of an unknown id fails."""
    with pytest.raises(NotFoundException):
        appointment_service.get("apt-missing")


# ============================================================================
# Missed appointments and listing
# ============================================================================


def test_elapsed_upcoming_is_displayed_as_missed(
    appointment_service: AppointmentService, clock: MutableClock
):
    """Test an Upcoming appointment whose time passed shows as Missed but stays Upcoming."""
    appointment = appointment_service.create(
        make_draft(FIXED_NOW + timedelta(hours=1)), "doc1"
    )
    clock.advance(timedelta(hours=2))

    stored = appointment_service.get(appointment.id)
    assert stored.status == AppointmentStatus.UPCOMING
    assert display_status(stored, clock()) == AppointmentDisplayStatus.MISSED

    listing = appointment_service.list_partitioned()
    assert listing.upcoming == []
    assert listing.past_or_cancelled[0].display_status == AppointmentDisplayStatus.MISSED
    assert listing.past_or_cancelled[0].status == AppointmentStatus.UPCOMING


def test_missed_appointment_can_be_cancelled(
    appointment_service: AppointmentService, clock: MutableClock
):
    """Test the stored Upcoming status still allows cancellation once missed."""
    appointment = appointment_service.create(
        make_draft(FIXED_NOW + timedelta(hours=1)), "doc1"
    )
    clock.advance(timedelta(hours=2))

    assert appointment_service.cancel(appointment.id).status == AppointmentStatus.CANCELLED


def test_list_is_most_recent_first(appointment_service: AppointmentService):
    """Test appointments are sorted by date descending."""
    for days in (1, 3, -1, 2):
        appointment_service.create(make_draft(FIXED_NOW + timedelta(days=days)), "doc1")

    dates = [a.date_time for a in appointment_service.list_appointments()]
    assert dates == sorted(dates, reverse=True)


def test_list_filters(appointment_service: AppointmentService):
    """Test filtering by patient email and stored status."""
    appointment_service.create(make_draft(TOMORROW_10AM), "doc1")
    appointment_service.create(make_draft(YESTERDAY_11AM), "doc2")
    appointment_service.create(
        make_draft(TOMORROW_10AM, patient_email="other@example.com"), "doc3"
    )

    mine = appointment_service.list_appointments(patient_email="John.Doe@example.com")
    assert len(mine) == 2

    past = appointment_service.list_appointments(status=AppointmentStatus.PAST)
    assert [a.doctor_id for a in past] == ["doc2"]


def test_partition_keeps_order():
    """Test partition preserves the input order in each group."""
    service = AppointmentService(doctors=DoctorService(), clock=lambda: FIXED_NOW)
    created = [
        service.create(make_draft(FIXED_NOW + timedelta(days=days)), "doc1")
        for days in (3, 1, -1, -2)
    ]

    upcoming, past_or_cancelled = partition(created, FIXED_NOW)

    assert upcoming == created[:2]
    assert past_or_cancelled == created[2:]


def test_seed_demo_data(appointment_service: AppointmentService):
    """Test the demo data covers each status."""
    appointment_service.seed_demo_data()

    statuses = [a.status for a in appointment_service.list_appointments()]
    assert len(statuses) == 5
    # Today 10:00 is already past at the fixed noon clock, as is yesterday's visit
    assert statuses.count(AppointmentStatus.PAST) == 2
    assert statuses.count(AppointmentStatus.UPCOMING) == 2
    assert statuses.count(AppointmentStatus.CANCELLED) == 1


def test_seed_demo_data_keeps_cancelled_history(appointment_service: AppointmentService):
    """Test the cancelled demo visit is dated two days ago with its short reason."""
    appointment_service.seed_demo_data()

    cancelled = appointment_service.list_appointments(status=AppointmentStatus.CANCELLED)
    assert len(cancelled) == 1
    assert cancelled[0].patient_name == "Cancelled Appointment"
    assert cancelled[0].date_time == (FIXED_NOW - timedelta(days=2)).replace(hour=9)
    assert cancelled[0].reason == "Routine check"
    assert cancelled[0].cancelled_at == FIXED_NOW

    reasons = {a.patient_name: a.reason for a in appointment_service.list_appointments()}
    assert reasons["Peter Pan"] == "Skin rash"


# ============================================================================
# Draft validation
# ============================================================================


@pytest.mark.parametrize(
    "overrides",
    [
        {"patient_name": " J "},
        {"patient_email": "not-an-email"},
        {"patient_email": "john..doe@example.com"},
        {"patient_email": "a@-bad-.com"},
        {"patient_email": ".a@b.co"},
        {"patient_email": "a@b..com"},
        {"reason": "too short"},
        {"appointment_type": "Fax"},
    ],
)
def test_invalid_draft_rejected(overrides: dict):
    """Test malformed booking fields fail before reaching the store."""
    with pytest.raises(ValidationError):
        make_draft(TOMORROW_10AM, **overrides)


def test_draft_trims_patient_fields():
    """Test names and emails are trimmed."""
    draft = make_draft(TOMORROW_10AM, patient_name="  John Doe ", patient_email=" j@example.com ")
    assert draft.patient_name == "John Doe"
    assert draft.patient_email == "j@example.com"
