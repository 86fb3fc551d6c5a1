"""
Pydantic models shared by the LLM providers and the generation gateway.
"""

from pydantic import BaseModel, Field

from curriculum_tutor.models.answer import TokenUsage


class LLMResponse(BaseModel):
    text: str
    usage: TokenUsage = Field(default_factory=TokenUsage)


class ModerationResult(BaseModel):
    flagged: bool = False
    categories: list[str] = Field(default_factory=list)
