from curriculum_tutor.models.chunk import (
    TextChunk,
    RetrievedChunk,
    RetrievalFilter,
    VectorRecord,
    VectorMatch,
)
from curriculum_tutor.models.answer import (
    PipelineMode,
    ResponseType,
    Source,
    StructuredResponse,
    TokenUsage,
    GeneratedAnswer,
    TutorRequest,
    ChatTurn,
)
from curriculum_tutor.models.content import (
    QuestionDifficulty,
    ContentPurpose,
    GeneratedQuestion,
    Flashcard,
    BossNarrative,
)

__all__ = [
    "TextChunk",
    "RetrievedChunk",
    "RetrievalFilter",
    "VectorRecord",
    "VectorMatch",
    "PipelineMode",
    "ResponseType",
    "Source",
    "StructuredResponse",
    "TokenUsage",
    "GeneratedAnswer",
    "TutorRequest",
    "ChatTurn",
    "QuestionDifficulty",
    "ContentPurpose",
    "GeneratedQuestion",
    "Flashcard",
    "BossNarrative",
]
