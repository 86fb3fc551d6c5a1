"""
RAG (Retrieval-Augmented Generation) Pipeline

Provides curriculum-grounded context to the LLM by:
1. Chunking curriculum documents and storing their embeddings in a vector index
2. Retrieving relevant chunks at query time, scoped by topic and course
3. Handing those chunks to the prompt builders
"""

from curriculum_tutor.services.rag.chunker import chunk_text, chunk_by_sentences
from curriculum_tutor.services.rag.embedder import EmbeddingProvider, OpenAIEmbeddingProvider
from curriculum_tutor.services.rag.vector_store import (
    VectorIndex,
    ChromaVectorIndex,
    VectorStoreManager,
)
from curriculum_tutor.services.rag.retriever import Retriever
from curriculum_tutor.services.rag.ingest import IngestionService, IngestResult

__all__ = [
    "chunk_text",
    "chunk_by_sentences",
    "EmbeddingProvider",
    "OpenAIEmbeddingProvider",
    "VectorIndex",
    "ChromaVectorIndex",
    "VectorStoreManager",
    "Retriever",
    "IngestionService",
    "IngestResult",
]
