"""AI-assisted flow endpoints."""

from fastapi import APIRouter, status

from ondoctor.dependencies import (
    AssistantServiceDep,
    MealPlanServiceDep,
    PrescriptionServiceDep,
)
from ondoctor.schemas.ai import (
    AssistantRequest,
    AssistantResponse,
    MealPlanRequest,
    MealPlanResponse,
    PrescriptionRequest,
    PrescriptionResponse,
)

router = APIRouter()


@router.post(
    "/meal-plan",
    response_model=MealPlanResponse,
    status_code=status.HTTP_200_OK,
    summary="Generate meal plan",
)
async def generate_meal_plan(
    data: MealPlanRequest,
    service: MealPlanServiceDep,
) -> MealPlanResponse:
    """
    Generate a protein and mineral focused one-day meal plan.

    Args:
        data: Age, gender and dietary preference
        service: Meal plan service

    Returns:
        Breakfast, lunch and dinner suggestions with general advice

    Raises:
        AIConfigurationException: If no OpenAI API key is configured
        AIServiceException: If the model call fails or returns malformed output
    """
    return await service.generate_meal_plan(data)


@router.post(
    "/eprescription",
    response_model=PrescriptionResponse,
    status_code=status.HTTP_200_OK,
    summary="Generate e-prescription",
)
async def generate_eprescription(
    data: PrescriptionRequest,
    service: PrescriptionServiceDep,
) -> PrescriptionResponse:
    """
    Generate a formatted e-prescription.

    Raises:
        AIConfigurationException: If no OpenAI API key is configured
        AIServiceException: If the model call fails
    """
    return await service.generate_prescription(data)


@router.post(
    "/assistant",
    response_model=AssistantResponse,
    status_code=status.HTTP_200_OK,
    summary="Chat with the AI assistant",
)
async def chat_with_assistant(
    data: AssistantRequest,
    service: AssistantServiceDep,
) -> AssistantResponse:
    """Send a message to the general-purpose AI assistant."""
    return await service.chat(data)
