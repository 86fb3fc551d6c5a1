"""
Pipeline request/response models.

GeneratedAnswer is created once per request and is immutable afterwards;
the calling application owns persistence.
"""

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class PipelineMode(str, Enum):
    LEARNING = "learning"
    PRACTICE = "practice"
    ASSESSMENT_SOFT = "assessment-soft"
    ASSESSMENT_STRICT = "assessment-strict"


class ResponseType(str, Enum):
    EXPLANATION = "explanation"
    HINT = "hint"
    RESTRICTED = "restricted"


class ChatTurn(BaseModel):
    role: Literal["user", "assistant"]
    content: str


class TokenUsage(BaseModel):
    model_config = ConfigDict(frozen=True)

    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0


class Source(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    relevance: float


class StructuredResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    summary: str = ""
    explanation: str = ""
    key_points: tuple[str, ...] = ()
    suggested_practice: str | None = None


class GeneratedAnswer(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str
    response_type: ResponseType
    sources: tuple[Source, ...] = ()
    concepts: tuple[str, ...] = ()
    structured: StructuredResponse = Field(default_factory=StructuredResponse)
    usage: TokenUsage = Field(default_factory=TokenUsage)
    flagged: bool = False  # moderation replaced the generated text

    @property
    def is_restricted(self) -> bool:
        return self.response_type == ResponseType.RESTRICTED


class TutorRequest(BaseModel):
    """What the calling application supplies for one tutoring turn."""

    query: str
    topic_id: str
    course_id: str
    mode: PipelineMode = PipelineMode.LEARNING
    student_level: str = "beginner"
    mastery_score: float = Field(default=0, ge=0, le=100)
    topic_name: str | None = None
    history: list[ChatTurn] = Field(default_factory=list)
