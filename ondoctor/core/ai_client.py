"""OpenAI chat completions client."""

import json
from typing import Any

import structlog
from openai import AsyncOpenAI, OpenAIError

from ondoctor.config import Settings, settings
from ondoctor.core.exceptions import AIConfigurationException, AIServiceException

logger = structlog.get_logger()


class AIClient:
    """
    Wrapper around the OpenAI chat completions API.

    The SDK client is created on first use so the service starts without an
    API key; flows fail with AIConfigurationException until one is set.
    """

    def __init__(self, config: Settings = settings, client: AsyncOpenAI | None = None):
        """Initialize with settings and an optional preconstructed SDK client."""
        self.config = config
        self._client = client

    @property
    def is_configured(self) -> bool:
        """Check whether requests can be sent."""
        return self._client is not None or self.config.ai_configured

    def _get_client(self) -> AsyncOpenAI:
        if self._client is None:
            if not self.config.ai_configured:
                logger.error("ai_not_configured", reason="OPENAI_API_KEY missing or placeholder")
                raise AIConfigurationException(
                    "AI features are not configured. Set a valid OPENAI_API_KEY and restart the server."
                )
            self._client = AsyncOpenAI(
                api_key=self.config.openai_api_key,
                timeout=self.config.openai_timeout_seconds,
            )
        return self._client

    async def _complete(self, system: str, prompt: str, **kwargs: Any) -> str:
        client = self._get_client()
        try:
            response = await client.chat.completions.create(
                model=self.config.openai_model,
                messages=[
                    {"role": "system", "content": system},
                    {"role": "user", "content": prompt},
                ],
                **kwargs,
            )
        except OpenAIError as e:
            logger.error("ai_request_failed", model=self.config.openai_model, error=str(e))
            raise AIServiceException(f"AI service request failed: {e}") from e

        content = response.choices[0].message.content if response.choices else None
        if not content or not content.strip():
            logger.error("ai_empty_response", model=self.config.openai_model)
            raise AIServiceException("No response content from AI model")
        return content

    async def complete_text(self, system: str, prompt: str) -> str:
        """Send a prompt and return the model's text reply."""
        return (await self._complete(system, prompt)).strip()

    async def complete_json(self, system: str, prompt: str) -> dict[str, Any]:
        """Send a prompt in JSON mode and return the decoded object."""
        content = await self._complete(
            system,
            prompt,
            response_format={"type": "json_object"},
        )
        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            logger.error("ai_invalid_json", error=str(e))
            raise AIServiceException("AI model returned malformed JSON") from e
        if not isinstance(data, dict):
            raise AIServiceException("AI model returned JSON that is not an object")
        return data
