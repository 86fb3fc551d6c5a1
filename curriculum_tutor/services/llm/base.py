"""
Abstract base classes for LLM-side providers.

Each provider implements the API-specific translation layer. Prompt
assembly, history ordering and token-usage logging are handled by the
generation gateway; fail-open behaviour by the moderation gate.
"""

from abc import ABC, abstractmethod

from curriculum_tutor.services.llm.models import LLMResponse, ModerationResult


class LLMProvider(ABC):
    """Abstract base class for chat-completion providers."""

    provider_name: str = "base"

    @abstractmethod
    async def chat(
        self,
        messages: list[dict],
        max_output_tokens: int,
        temperature: float,
    ) -> LLMResponse:
        """
        Send an ordered message list and return text plus token usage.

        Args:
            messages: List of message dicts with "role" (system|user|assistant)
                      and "content", in conversation order
            max_output_tokens: Maximum tokens in the response
            temperature: Sampling temperature

        Raises:
            ProviderUnavailable: if the provider call fails
        """
        ...


class ModerationProvider(ABC):
    """Abstract base class for content moderation providers."""

    provider_name: str = "base"

    @abstractmethod
    async def moderate(self, text: str) -> ModerationResult:
        ...
