"""
Chunk and vector models shared by the chunker, the vector index gateway
and the retriever.
"""

from typing import Any

from pydantic import BaseModel, Field


class TextChunk(BaseModel):
    text: str
    index: int  # ordinal position within the source document
    start_char: int
    end_char: int


class RetrievedChunk(BaseModel):
    id: str
    text: str
    score: float  # similarity in [0, 1], higher is more relevant
    metadata: dict[str, Any] = Field(default_factory=dict)


class RetrievalFilter(BaseModel):
    """Scope for a similarity query. Both fields empty means unscoped."""

    topic_id: str | None = None
    course_id: str | None = None

    def as_predicates(self) -> dict[str, str]:
        """Exact-match equality predicates keyed by index metadata field."""
        predicates: dict[str, str] = {}
        if self.topic_id:
            predicates["topicId"] = self.topic_id
        if self.course_id:
            predicates["courseId"] = self.course_id
        return predicates


class VectorRecord(BaseModel):
    id: str
    values: list[float]
    metadata: dict[str, Any] = Field(default_factory=dict)


class VectorMatch(BaseModel):
    id: str
    score: float
    metadata: dict[str, Any] = Field(default_factory=dict)
