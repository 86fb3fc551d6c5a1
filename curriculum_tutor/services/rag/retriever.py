"""
RAG Retriever Service

Finds curriculum chunks semantically similar to a student's question.

How retrieval works:
1. The query string is converted into a vector by the embedding gateway.
2. The vector index compares it against stored chunk vectors, restricted by
   a topic and/or course filter.
3. Matches below the minimum relevance score are dropped.
4. The remaining chunks are returned best-first, at most top_k of them.

retrieve_with_fallback widens the scope from topic to course when the topic
alone yields fewer than two chunks. It never lowers the relevance floor.

Embedding or index failures propagate to the caller; a failed retrieval is
never reported as "no context".
"""

import logging

from curriculum_tutor.models.chunk import RetrievalFilter, RetrievedChunk
from curriculum_tutor.services.rag.embedder import EmbeddingProvider
from curriculum_tutor.services.rag.vector_store import VectorIndex

logger = logging.getLogger(__name__)

# Topic-level results below this count trigger course-level expansion
MIN_TOPIC_RESULTS = 2


class Retriever:
    def __init__(
        self,
        embedder: EmbeddingProvider,
        index: VectorIndex,
        namespace: str = "curriculum",
        top_k: int = 5,
        min_relevance_score: float = 0.7,
    ):
        self.embedder = embedder
        self.index = index
        self.namespace = namespace
        self.top_k = top_k
        self.min_relevance_score = min_relevance_score

    async def retrieve(
        self,
        query: str,
        filters: RetrievalFilter | None = None,
        top_k: int | None = None,
    ) -> list[RetrievedChunk]:
        """
        Retrieve relevant curriculum chunks for a query.

        Args:
            query: The student's question (or a content-generation seed query)
            filters: Optional topic/course scope
            top_k: Maximum number of chunks; defaults to the retriever's top_k

        Returns:
            Chunks with score >= min_relevance_score, sorted best-first.
        """
        if top_k is None:
            top_k = self.top_k

        query_embedding = await self.embedder.embed(query)

        predicates = filters.as_predicates() if filters else {}
        matches = await self.index.query(
            self.namespace,
            vector=query_embedding,
            top_k=top_k,
            filter=predicates or None,
            include_metadata=True,
        )

        chunks = [
            RetrievedChunk(
                id=match.id,
                text=str(match.metadata.get("text") or ""),
                score=match.score,
                metadata=match.metadata,
            )
            for match in matches
            if match.score >= self.min_relevance_score
        ]
        chunks.sort(key=lambda c: c.score, reverse=True)
        chunks = chunks[:top_k]

        logger.info(
            f"[RAG] Retrieved {len(chunks)}/{len(matches)} chunks above "
            f"{self.min_relevance_score} for scope {predicates or 'unscoped'}"
        )
        return chunks

    async def retrieve_with_fallback(
        self,
        query: str,
        topic_id: str,
        course_id: str,
    ) -> list[RetrievedChunk]:
        """
        Retrieve with topic -> course expansion.

        Topic-scoped results take precedence over course-scoped results that
        share an id. The merged set is re-sorted and truncated to top_k.
        """
        chunks = await self.retrieve(query, RetrievalFilter(topic_id=topic_id), self.top_k)

        if len(chunks) < MIN_TOPIC_RESULTS:
            logger.info(
                f"[RAG] Only {len(chunks)} topic chunks for {topic_id}, "
                f"expanding to course {course_id}"
            )
            course_chunks = await self.retrieve(
                query, RetrievalFilter(course_id=course_id), self.top_k
            )

            seen = {c.id for c in chunks}
            for chunk in course_chunks:
                if chunk.id not in seen:
                    chunks.append(chunk)
                    seen.add(chunk.id)

        chunks.sort(key=lambda c: c.score, reverse=True)
        return chunks[:self.top_k]
