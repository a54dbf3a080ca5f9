"""Schemas for the AI-assisted flows."""

from enum import Enum

from pydantic import BaseModel, Field, field_validator


class Gender(str, Enum):
    MALE = "Male"
    FEMALE = "Female"
    OTHER = "Other"


class DietaryPreference(str, Enum):
    VEGETARIAN = "Vegetarian"
    NON_VEGETARIAN = "Non-Vegetarian"


class MealType(str, Enum):
    BREAKFAST = "Breakfast"
    LUNCH = "Lunch"
    DINNER = "Dinner"


# ============================================================================
# Meal planner
# ============================================================================


class MealPlanRequest(BaseModel):
    """Profile used to generate a one-day meal plan."""

    age: int = Field(..., gt=0, le=130)
    gender: Gender
    dietary_preference: DietaryPreference


class MealSuggestion(BaseModel):
    meal_type: MealType
    description: str = Field(..., min_length=1)


class MealPlanResponse(BaseModel):
    """Three meal suggestions plus optional advice."""

    meal_plan: list[MealSuggestion] = Field(..., min_length=3, max_length=3)
    general_advice: str | None = None


# ============================================================================
# E-prescription
# ============================================================================


class MedicationItem(BaseModel):
    name: str = Field(..., min_length=1)
    dosage: str = Field(..., min_length=1, description='e.g. "1 tablet", "10mg"')
    frequency: str = Field(..., min_length=1, description='e.g. "Twice a day"')
    duration: str = Field(..., min_length=1, description='e.g. "7 days"')
    notes: str | None = None


class PrescriptionRequest(BaseModel):
    """Details the prescribing doctor supplies for an e-prescription."""

    patient_name: str = Field(..., min_length=1)
    patient_age: int = Field(..., gt=0, le=130)
    patient_gender: Gender
    diagnosis: str = Field(..., min_length=1)
    medications: list[MedicationItem] = Field(..., min_length=1)
    doctor_name: str = Field(..., min_length=1)
    doctor_registration_number: str = Field(..., min_length=1)
    clinic_name: str = Field(..., min_length=1)
    clinic_address: str = Field(..., min_length=1)
    clinic_phone_number: str | None = None
    prescription_date: str | None = Field(
        None, description='Issue date, e.g. "October 26, 2023"; defaults to today'
    )


class PrescriptionResponse(BaseModel):
    prescription_text: str


# ============================================================================
# Chat assistant
# ============================================================================


class AssistantRequest(BaseModel):
    user_message: str = Field(..., max_length=4000)

    @field_validator("user_message")
    @classmethod
    def validate_user_message(cls, v: str) -> str:
        """Reject blank messages."""
        if not v.strip():
            raise ValueError("Message must not be empty")
        return v


class AssistantResponse(BaseModel):
    assistant_response: str
