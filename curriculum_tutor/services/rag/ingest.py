"""
Curriculum Ingestion Service

Turns a curriculum document into searchable vectors.

How it works:
1. SPLIT  – the chunker breaks the document into paragraph-aligned chunks
           (or sentence windows), one strategy per document
2. EMBED  – all chunk texts are embedded in a single provider call
3. STORE  – vectors + text + topic/course metadata are upserted into the
           vector index in fixed-size batches, one batch at a time
"""

import logging
import time
from typing import Any, Literal

from pydantic import BaseModel

from curriculum_tutor.models.chunk import TextChunk, VectorRecord
from curriculum_tutor.services.rag.chunker import (
    DEFAULT_CHUNK_OVERLAP,
    DEFAULT_CHUNK_SIZE,
    DEFAULT_SENTENCES_PER_CHUNK,
    chunk_by_sentences,
    chunk_text,
)
from curriculum_tutor.services.rag.embedder import EmbeddingProvider
from curriculum_tutor.services.rag.vector_store import VectorIndex

logger = logging.getLogger(__name__)

ChunkStrategy = Literal["paragraph", "sentence"]


class IngestResult(BaseModel):
    embedding_ids: list[str]
    chunk_count: int


class IngestionService:
    def __init__(
        self,
        embedder: EmbeddingProvider,
        index: VectorIndex,
        namespace: str = "curriculum",
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        chunk_overlap: int = DEFAULT_CHUNK_OVERLAP,
        sentences_per_chunk: int = DEFAULT_SENTENCES_PER_CHUNK,
        batch_size: int = 100,
    ):
        self.embedder = embedder
        self.index = index
        self.namespace = namespace
        self.chunk_size = chunk_size
        self.chunk_overlap = chunk_overlap
        self.sentences_per_chunk = sentences_per_chunk
        self.batch_size = batch_size

    def split(self, content: str, strategy: ChunkStrategy = "paragraph") -> list[TextChunk]:
        if strategy == "paragraph":
            return chunk_text(content, self.chunk_size, self.chunk_overlap)
        elif strategy == "sentence":
            return chunk_by_sentences(content, self.sentences_per_chunk)
        else:
            raise ValueError(f"Unknown chunk strategy: {strategy}")

    async def ingest(
        self,
        content: str,
        topic_id: str,
        course_id: str,
        metadata: dict[str, Any] | None = None,
        strategy: ChunkStrategy = "paragraph",
    ) -> IngestResult:
        """
        Chunk, embed and store one curriculum document.

        Args:
            content: Raw document text
            topic_id: Topic the document belongs to
            course_id: Course the topic belongs to
            metadata: Extra scalar metadata stored with every chunk
            strategy: "paragraph" or "sentence" chunking

        Returns:
            IngestResult with the ids of the stored vectors
        """
        chunks = self.split(content, strategy)
        logger.info(f"[Ingest] {len(chunks)} chunks ({strategy}) for topic {topic_id}")
        if not chunks:
            return IngestResult(embedding_ids=[], chunk_count=0)

        embeddings = await self.embedder.embed_batch([c.text for c in chunks])

        stamp = int(time.time() * 1000)
        records = [
            VectorRecord(
                id=f"{topic_id}_chunk_{chunk.index}_{stamp}",
                values=embedding,
                metadata={
                    **(metadata or {}),
                    "text": chunk.text,
                    "chunkIndex": chunk.index,
                    "topicId": topic_id,
                    "courseId": course_id,
                },
            )
            for chunk, embedding in zip(chunks, embeddings)
        ]

        for start in range(0, len(records), self.batch_size):
            batch = records[start:start + self.batch_size]
            await self.index.upsert(self.namespace, batch)
            logger.info(f"[Ingest] Upserted batch of {len(batch)} vectors")

        return IngestResult(
            embedding_ids=[r.id for r in records],
            chunk_count=len(chunks),
        )
