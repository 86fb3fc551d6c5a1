"""
Generation Gateway

Assembles chat messages around a system prompt and forwards them to the
configured LLMProvider. Performs no retries; provider errors propagate.
"""

import logging

from curriculum_tutor.models.answer import ChatTurn
from curriculum_tutor.services.llm.base import LLMProvider
from curriculum_tutor.services.llm.models import LLMResponse

logger = logging.getLogger(__name__)


class ResponseGenerator:
    def __init__(
        self,
        provider: LLMProvider,
        default_max_tokens: int = 1024,
        default_temperature: float = 0.7,
    ):
        self.provider = provider
        self.default_max_tokens = default_max_tokens
        self.default_temperature = default_temperature

    async def generate(
        self,
        system_prompt: str,
        user_prompt: str,
        max_tokens: int | None = None,
        temperature: float | None = None,
    ) -> LLMResponse:
        """Single-turn generation: system prompt followed by one user message."""
        messages = [
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": user_prompt},
        ]
        return await self._complete(messages, max_tokens, temperature)

    async def generate_with_history(
        self,
        system_prompt: str,
        history: list[ChatTurn],
        new_message: str,
        max_tokens: int | None = None,
        temperature: float | None = None,
    ) -> LLMResponse:
        """Prior turns go between the system prompt and the new user turn, in order."""
        messages = [{"role": "system", "content": system_prompt}]
        messages += [{"role": turn.role, "content": turn.content} for turn in history]
        messages.append({"role": "user", "content": new_message})
        return await self._complete(messages, max_tokens, temperature)

    async def _complete(
        self,
        messages: list[dict],
        max_tokens: int | None,
        temperature: float | None,
    ) -> LLMResponse:
        # None means "use the default"; 0 is a valid temperature
        if max_tokens is None:
            max_tokens = self.default_max_tokens
        if temperature is None:
            temperature = self.default_temperature

        response = await self.provider.chat(
            messages=messages,
            max_output_tokens=max_tokens,
            temperature=temperature,
        )

        logger.info(
            f"[LLM] provider={self.provider.provider_name} turns={len(messages)} "
            f"tokens prompt={response.usage.prompt_tokens} "
            f"completion={response.usage.completion_tokens} "
            f"total={response.usage.total_tokens}"
        )
        return response
