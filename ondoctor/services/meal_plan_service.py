"""Meal plan generation."""

import structlog
from pydantic import ValidationError

from ondoctor.core.ai_client import AIClient
from ondoctor.core.exceptions import AIServiceException
from ondoctor.schemas.ai import MealPlanRequest, MealPlanResponse, MealType

logger = structlog.get_logger()

MEAL_PLAN_SYSTEM = "You are an expert nutritionist. Always answer with a single valid JSON object."

MEAL_PLAN_PROMPT = """Generate a sample one-day meal plan and brief general dietary advice for this person.

User Details:
Age: {age} years
Gender: {gender}
Dietary Preference: {dietary_preference}

Instructions:
- Provide exactly three meal suggestions, in the order Breakfast, Lunch, Dinner.
- Suggestions must be balanced and appropriate for the profile.
- Prioritize foods rich in protein and essential minerals: lean meats, fish, poultry, beans,
  lentils, tofu, nuts, seeds, dairy or fortified plant-based alternatives, and a variety of
  fruits and vegetables, especially leafy greens.
- {preference_rule}
- Add 1-2 sentences of general advice, reinforcing protein and mineral intake where helpful.

Respond in JSON format:
{{
    "meal_plan": [
        {{"meal_type": "Breakfast", "description": "concise dish description"}},
        {{"meal_type": "Lunch", "description": "concise dish description"}},
        {{"meal_type": "Dinner", "description": "concise dish description"}}
    ],
    "general_advice": "1-2 sentences"
}}
"""

VEGETARIAN_RULE = (
    "All suggestions must be strictly vegetarian (no meat or fish), getting protein "
    "and minerals from plant-based and dairy sources."
)
NON_VEGETARIAN_RULE = (
    "Meat, fish or poultry may be included, emphasizing lean protein and mineral-dense "
    "options with variety."
)

EXPECTED_ORDER = [MealType.BREAKFAST, MealType.LUNCH, MealType.DINNER]


class MealPlanService:
    """Generates meal plans through the AI client."""

    def __init__(self, ai_client: AIClient):
        self.ai = ai_client

    @staticmethod
    def build_prompt(data: MealPlanRequest) -> str:
        """Render the meal plan prompt for a profile."""
        vegetarian = data.dietary_preference.value == "Vegetarian"
        return MEAL_PLAN_PROMPT.format(
            age=data.age,
            gender=data.gender.value,
            dietary_preference=data.dietary_preference.value,
            preference_rule=VEGETARIAN_RULE if vegetarian else NON_VEGETARIAN_RULE,
        )

    async def generate_meal_plan(self, data: MealPlanRequest) -> MealPlanResponse:
        """
        Generate a one-day meal plan.

        Raises:
            AIConfigurationException: If the AI client has no API key
            AIServiceException: If the model fails or its output does not fit the schema
        """
        raw = await self.ai.complete_json(MEAL_PLAN_SYSTEM, self.build_prompt(data))

        try:
            plan = MealPlanResponse.model_validate(raw)
        except ValidationError as e:
            logger.error("meal_plan_invalid_output", errors=e.error_count())
            raise AIServiceException("AI returned a meal plan in an unexpected format") from e

        order = [meal.meal_type for meal in plan.meal_plan]
        if order != EXPECTED_ORDER:
            logger.warning("meal_plan_unexpected_order", order=[m.value for m in order])

        return plan
