"""General-purpose chat assistant."""

from ondoctor.core.ai_client import AIClient
from ondoctor.schemas.ai import AssistantRequest, AssistantResponse

ASSISTANT_SYSTEM = "You are a helpful assistant."


class AssistantService:
    """Relays a single user message to the AI model."""

    def __init__(self, ai_client: AIClient):
        self.ai = ai_client

    async def chat(self, data: AssistantRequest) -> AssistantResponse:
        reply = await self.ai.complete_text(ASSISTANT_SYSTEM, data.user_message)
        return AssistantResponse(assistant_response=reply)
