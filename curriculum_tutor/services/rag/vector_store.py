"""
Vector Index Gateway

Stores and queries curriculum vectors with metadata filters.

Uses the chromadb client directly. Each namespace is a ChromaDB collection in
cosine space, so a match's relevance score is ``1 - distance``. Filters are
exact-match equality predicates over metadata fields (e.g. ``topicId``).

VectorStoreManager wraps the gateway with the topic/course level
maintenance operations used when curriculum content is replaced.
"""

import logging
import os
from abc import ABC, abstractmethod
from typing import Any

import chromadb
from chromadb.errors import ChromaError

from curriculum_tutor.core.exceptions import ProviderUnavailable
from curriculum_tutor.models.chunk import VectorMatch, VectorRecord

logger = logging.getLogger(__name__)


class VectorIndex(ABC):
    """Abstract base class for vector index providers."""

    provider_name: str = "base"

    @abstractmethod
    async def upsert(self, namespace: str, records: list[VectorRecord]) -> None:
        ...

    @abstractmethod
    async def query(
        self,
        namespace: str,
        vector: list[float],
        top_k: int,
        filter: dict[str, str] | None = None,
        include_metadata: bool = True,
    ) -> list[VectorMatch]:
        """Return up to top_k matches, most similar first."""
        ...

    @abstractmethod
    async def delete_many(self, namespace: str, filter: dict[str, str]) -> None:
        ...

    @abstractmethod
    async def describe_stats(self, namespace: str) -> dict[str, Any]:
        ...


def build_where(filter: dict[str, str] | None) -> dict | None:
    """
    Translate equality predicates into a ChromaDB ``where`` clause.

    {"topicId": "t1"}                  -> {"topicId": {"$eq": "t1"}}
    {"topicId": "t1", "courseId": "c"} -> {"$and": [{...}, {...}]}
    """
    if not filter:
        return None
    clauses = [{field: {"$eq": value}} for field, value in filter.items()]
    if len(clauses) == 1:
        return clauses[0]
    return {"$and": clauses}


class ChromaVectorIndex(VectorIndex):
    """ChromaDB-backed vector index (one collection per namespace)."""

    provider_name = "chromadb"

    def __init__(self, persist_dir: str | None = None, client=None):
        if client is None:
            client = chromadb.PersistentClient(path=persist_dir or "chroma_data")
            logger.info(f"[RAG] ChromaDB opened at {os.path.abspath(persist_dir or 'chroma_data')}")
        self.client = client

    def _collection(self, namespace: str):
        return self.client.get_or_create_collection(
            namespace,
            metadata={"hnsw:space": "cosine"},
        )

    async def upsert(self, namespace: str, records: list[VectorRecord]) -> None:
        if not records:
            return
        try:
            self._collection(namespace).upsert(
                ids=[r.id for r in records],
                embeddings=[r.values for r in records],
                metadatas=[r.metadata for r in records],
                documents=[str(r.metadata.get("text", "")) for r in records],
            )
        except (ChromaError, ValueError) as e:
            raise ProviderUnavailable("vector_index", str(e)) from e

    async def query(
        self,
        namespace: str,
        vector: list[float],
        top_k: int,
        filter: dict[str, str] | None = None,
        include_metadata: bool = True,
    ) -> list[VectorMatch]:
        include = ["distances", "metadatas"] if include_metadata else ["distances"]
        try:
            result = self._collection(namespace).query(
                query_embeddings=[vector],
                n_results=top_k,
                where=build_where(filter),
                include=include,
            )
        except (ChromaError, ValueError) as e:
            raise ProviderUnavailable("vector_index", str(e)) from e

        # result["ids"] = [[id1, id2, ...]], one inner list per query vector
        ids = result["ids"][0] if result.get("ids") else []
        distances = result["distances"][0] if result.get("distances") else []
        metadatas = (
            result["metadatas"][0]
            if include_metadata and result.get("metadatas")
            else [None] * len(ids)
        )

        return [
            VectorMatch(
                id=match_id,
                score=min(1.0, max(0.0, 1.0 - distance)),
                metadata=dict(meta or {}),
            )
            for match_id, distance, meta in zip(ids, distances, metadatas)
        ]

    async def delete_many(self, namespace: str, filter: dict[str, str]) -> None:
        if not filter:
            raise ValueError("delete_many requires at least one filter predicate")
        try:
            self._collection(namespace).delete(where=build_where(filter))
        except (ChromaError, ValueError) as e:
            raise ProviderUnavailable("vector_index", str(e)) from e

    async def describe_stats(self, namespace: str) -> dict[str, Any]:
        try:
            count = self._collection(namespace).count()
        except (ChromaError, ValueError) as e:
            raise ProviderUnavailable("vector_index", str(e)) from e
        return {"namespace": namespace, "vector_count": count}


# ── Management ────────────────────────────────────────────────────────────────

class VectorStoreManager:
    """Topic/course level maintenance over a vector index namespace."""

    def __init__(self, index: VectorIndex, namespace: str, dimension: int = 1536):
        self.index = index
        self.namespace = namespace
        self.dimension = dimension

    async def delete_topic_vectors(self, topic_id: str) -> None:
        await self.index.delete_many(self.namespace, {"topicId": topic_id})
        logger.info(f"[RAG] Deleted vectors for topic {topic_id}")

    async def delete_course_vectors(self, course_id: str) -> None:
        await self.index.delete_many(self.namespace, {"courseId": course_id})
        logger.info(f"[RAG] Deleted vectors for course {course_id}")

    async def get_stats(self) -> dict[str, Any]:
        return await self.index.describe_stats(self.namespace)

    async def has_vectors(self, topic_id: str) -> bool:
        """Probe with a zero vector; any match means the topic is indexed."""
        matches = await self.index.query(
            self.namespace,
            vector=[0.0] * self.dimension,
            top_k=1,
            filter={"topicId": topic_id},
            include_metadata=False,
        )
        return len(matches) > 0
