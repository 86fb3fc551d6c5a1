"""
OpenAI Chat Completions API Provider

- client.chat.completions.create()
- messages (system / user / assistant)
- response.choices[0].message.content
- response.usage for token accounting
"""

import logging

from openai import AsyncOpenAI, OpenAIError

from curriculum_tutor.core.exceptions import ProviderUnavailable
from curriculum_tutor.models.answer import TokenUsage
from curriculum_tutor.services.llm.base import LLMProvider
from curriculum_tutor.services.llm.models import LLMResponse

logger = logging.getLogger(__name__)


class OpenAIChatProvider(LLMProvider):
    """Provider for OpenAI Chat Completions API (GPT-4o, GPT-4o-mini, etc.)."""

    provider_name = "openai_chat"

    def __init__(self, api_key: str, model: str = "gpt-4o-mini", client: AsyncOpenAI | None = None):
        self.client = client or AsyncOpenAI(api_key=api_key)
        self.model = model

    async def chat(
        self,
        messages: list[dict],
        max_output_tokens: int,
        temperature: float,
    ) -> LLMResponse:
        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                messages=messages,
                max_completion_tokens=max_output_tokens,
                temperature=temperature,
            )
        except OpenAIError as e:
            raise ProviderUnavailable("generation", str(e)) from e

        content = response.choices[0].message.content if response.choices else None
        if not content:
            logger.warning(f"[LLM] Empty completion from model={self.model}")

        usage = response.usage
        return LLMResponse(
            text=content or "",
            usage=TokenUsage(
                prompt_tokens=getattr(usage, "prompt_tokens", 0) or 0,
                completion_tokens=getattr(usage, "completion_tokens", 0) or 0,
                total_tokens=getattr(usage, "total_tokens", 0) or 0,
            ),
        )
