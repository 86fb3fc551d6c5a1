"""
LLM Provider Abstraction Layer

Generation gateway, moderation gate and response post-processing over
pluggable providers (OpenAI by default).
"""

from curriculum_tutor.services.llm.base import LLMProvider, ModerationProvider
from curriculum_tutor.services.llm.models import LLMResponse, ModerationResult
from curriculum_tutor.services.llm.generation import ResponseGenerator
from curriculum_tutor.services.llm.moderation import ModerationGate
from curriculum_tutor.services.llm.structured import Parsed, Empty, ParseResult, extract_structured

__all__ = [
    "LLMProvider",
    "ModerationProvider",
    "LLMResponse",
    "ModerationResult",
    "ResponseGenerator",
    "ModerationGate",
    "Parsed",
    "Empty",
    "ParseResult",
    "extract_structured",
]
