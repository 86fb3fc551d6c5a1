"""
Embedding Gateway

Converts text into fixed-length vectors through an external embedding
provider. The vector dimensionality is fixed by the model and must match the
dimensionality the index was populated with (1536 for text-embedding-3-small).
"""

import logging
from abc import ABC, abstractmethod

from langchain_openai import OpenAIEmbeddings
from openai import OpenAIError

from curriculum_tutor.core.exceptions import ProviderUnavailable

logger = logging.getLogger(__name__)


class EmbeddingProvider(ABC):
    """Abstract base class for embedding providers."""

    provider_name: str = "base"

    @abstractmethod
    async def embed(self, text: str) -> list[float]:
        """Embed a single text (used for queries)."""
        ...

    @abstractmethod
    async def embed_batch(self, texts: list[str]) -> list[list[float]]:
        """Embed many texts in one provider call (used at ingestion time)."""
        ...


class OpenAIEmbeddingProvider(EmbeddingProvider):
    """OpenAI embeddings through langchain-openai."""

    provider_name = "openai_embeddings"

    def __init__(self, api_key: str, model: str = "text-embedding-3-small"):
        self.model = model
        self.embeddings = OpenAIEmbeddings(
            model=model,
            openai_api_key=api_key,
        )

    async def embed(self, text: str) -> list[float]:
        try:
            return await self.embeddings.aembed_query(text)
        except OpenAIError as e:
            logger.error(f"[RAG] Query embedding failed: {e}")
            raise ProviderUnavailable("embedding", str(e)) from e

    async def embed_batch(self, texts: list[str]) -> list[list[float]]:
        if not texts:
            return []
        try:
            return await self.embeddings.aembed_documents(texts)
        except OpenAIError as e:
            logger.error(f"[RAG] Batch embedding of {len(texts)} texts failed: {e}")
            raise ProviderUnavailable("embedding", str(e)) from e
