"""E-prescription generation."""

from datetime import date

import structlog

from ondoctor.core.ai_client import AIClient
from ondoctor.core.clock import clinic_now
from ondoctor.schemas.ai import MedicationItem, PrescriptionRequest, PrescriptionResponse

logger = structlog.get_logger()

PRESCRIPTION_SYSTEM = (
    "You are an assistant that formats formal e-prescriptions. Output plain text only, "
    "clearly and professionally laid out."
)

PRESCRIPTION_PROMPT = """Generate a formal e-prescription from the information below, following this layout.

Clinic Information:
Clinic Name: {clinic_name}
Address: {clinic_address}
{clinic_phone_line}
--------------------------------------------------
E-PRESCRIPTION
--------------------------------------------------
Date: {prescription_date}

Patient Details:
Name: {patient_name}
Age: {patient_age} years
Gender: {patient_gender}

Diagnosis:
{diagnosis}

--------------------------------------------------
Rx (Medications):
--------------------------------------------------

{medications}
--------------------------------------------------

Prescribing Doctor:
Dr. {doctor_name}
Registration No: {doctor_registration_number}

(Digital Signature Placeholder / Verified via OnDoctor Platform)
--------------------------------------------------

Instructions to Patient:
- Follow the dosage and frequency instructions carefully.
- Complete the full course of medication as prescribed, even if you start feeling better.
- If you experience any adverse effects, contact your doctor or clinic immediately.
- Keep this prescription and all medications out of reach of children.
- This prescription is valid as per local regulations.

Disclaimer: This e-prescription is generated based on information provided by the healthcare professional.
"""


def format_prescription_date(day: date) -> str:
    """Format like "October 26, 2023"."""
    return f"{day:%B} {day.day}, {day.year}"


def format_medications(medications: list[MedicationItem]) -> str:
    """Render the numbered Rx block."""
    blocks = []
    for number, medication in enumerate(medications, start=1):
        lines = [
            f"{number}. {medication.name}",
            f"   Dosage: {medication.dosage}",
            f"   Frequency: {medication.frequency}",
            f"   Duration: {medication.duration}",
        ]
        if medication.notes:
            lines.append(f"   Notes: {medication.notes}")
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks) + "\n"


class PrescriptionService:
    """Generates e-prescriptions through the AI client."""

    def __init__(self, ai_client: AIClient):
        self.ai = ai_client

    @staticmethod
    def build_prompt(data: PrescriptionRequest) -> str:
        """Render the prescription prompt."""
        return PRESCRIPTION_PROMPT.format(
            clinic_name=data.clinic_name,
            clinic_address=data.clinic_address,
            clinic_phone_line=(
                f"Phone: {data.clinic_phone_number}\n" if data.clinic_phone_number else ""
            ),
            prescription_date=data.prescription_date
            or format_prescription_date(clinic_now().date()),
            patient_name=data.patient_name,
            patient_age=data.patient_age,
            patient_gender=data.patient_gender.value,
            diagnosis=data.diagnosis,
            medications=format_medications(data.medications),
            doctor_name=data.doctor_name,
            doctor_registration_number=data.doctor_registration_number,
        )

    async def generate_prescription(self, data: PrescriptionRequest) -> PrescriptionResponse:
        """Generate the e-prescription text."""
        text = await self.ai.complete_text(PRESCRIPTION_SYSTEM, self.build_prompt(data))
        logger.info("eprescription_generated", medications=len(data.medications))
        return PrescriptionResponse(prescription_text=text)
