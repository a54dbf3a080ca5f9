"""Doctor directory service."""

from collections.abc import Iterable

from ondoctor.core.exceptions import DoctorNotFoundException
from ondoctor.schemas.doctors import DoctorResponse, DoctorSnapshot

DEFAULT_DOCTORS = (
    DoctorResponse(id="doc1", name="Dr. Alice Smith", specialty="Cardiology"),
    DoctorResponse(id="doc2", name="Dr. Bob Johnson", specialty="Pediatrics"),
    DoctorResponse(id="doc3", name="Dr. Carol Williams", specialty="Dermatology"),
)


class DoctorService:
    """Read-only directory of doctors."""

    def __init__(self, doctors: Iterable[DoctorResponse] = DEFAULT_DOCTORS):
        """Initialize service with the directory entries, keyed by id."""
        self._doctors = {doctor.id: doctor for doctor in doctors}

    def list_doctors(self) -> list[DoctorResponse]:
        """List doctors in directory order."""
        return list(self._doctors.values())

    def get_doctor(self, doctor_id: str) -> DoctorResponse | None:
        """Get doctor by ID."""
        return self._doctors.get(doctor_id)

    def require_doctor(self, doctor_id: str) -> DoctorResponse:
        """
        Get doctor by ID or fail.

        Raises:
            DoctorNotFoundException: If the id is not in the directory
        """
        doctor = self.get_doctor(doctor_id)
        if doctor is None:
            raise DoctorNotFoundException(doctor_id)
        return doctor

    def snapshot(self, doctor_id: str) -> DoctorSnapshot:
        """Copy the doctor's name and specialty for storing on an appointment."""
        doctor = self.require_doctor(doctor_id)
        return DoctorSnapshot(name=doctor.name, specialty=doctor.specialty)
