"""
Composition root.

Gateways are constructed once here and passed into the orchestrators
explicitly; nothing below this module reaches for a global client.
"""

import logging
from dataclasses import dataclass
from functools import lru_cache

from curriculum_tutor.core.config import Settings, get_settings
from curriculum_tutor.core.log_config import configure_logging
from curriculum_tutor.services.llm.base import LLMProvider, ModerationProvider
from curriculum_tutor.services.llm.generation import ResponseGenerator
from curriculum_tutor.services.llm.moderation import ModerationGate
from curriculum_tutor.services.llm.openai_chat import OpenAIChatProvider
from curriculum_tutor.services.llm.openai_moderation import OpenAIModerationProvider
from curriculum_tutor.services.pipelines.assessment import AssessmentPipeline
from curriculum_tutor.services.pipelines.content import ContentGenerationPipeline
from curriculum_tutor.services.pipelines.learning import LearningPipeline
from curriculum_tutor.services.pipelines.tutor import TutorPipeline
from curriculum_tutor.services.rag.embedder import EmbeddingProvider, OpenAIEmbeddingProvider
from curriculum_tutor.services.rag.ingest import IngestionService
from curriculum_tutor.services.rag.retriever import Retriever
from curriculum_tutor.services.rag.vector_store import (
    ChromaVectorIndex,
    VectorIndex,
    VectorStoreManager,
)

logger = logging.getLogger(__name__)


@dataclass
class Pipelines:
    tutor: TutorPipeline
    learning: LearningPipeline
    assessment: AssessmentPipeline
    content: ContentGenerationPipeline
    ingestion: IngestionService
    vector_store: VectorStoreManager


def wire_pipelines(
    settings: Settings,
    embedder: EmbeddingProvider,
    index: VectorIndex,
    llm: LLMProvider,
    moderator: ModerationProvider,
) -> Pipelines:
    """Wire orchestrators around already-constructed gateways."""
    retriever = Retriever(
        embedder,
        index,
        namespace=settings.vector_namespace,
        top_k=settings.top_k_results,
        min_relevance_score=settings.min_relevance_score,
    )
    generator = ResponseGenerator(
        llm,
        default_max_tokens=settings.default_max_tokens,
        default_temperature=settings.default_temperature,
    )
    moderation = ModerationGate(moderator)

    learning = LearningPipeline(retriever, generator, moderation)
    assessment = AssessmentPipeline(
        retriever, generator, moderation, soft_top_k=settings.assessment_soft_top_k
    )

    return Pipelines(
        tutor=TutorPipeline(learning, assessment),
        learning=learning,
        assessment=assessment,
        content=ContentGenerationPipeline(retriever, generator, top_k=settings.content_top_k),
        ingestion=IngestionService(
            embedder,
            index,
            namespace=settings.vector_namespace,
            chunk_size=settings.chunk_size,
            chunk_overlap=settings.chunk_overlap,
            sentences_per_chunk=settings.sentences_per_chunk,
            batch_size=settings.upsert_batch_size,
        ),
        vector_store=VectorStoreManager(
            index, settings.vector_namespace, dimension=settings.embedding_dimension
        ),
    )


def build_pipelines(settings: Settings | None = None) -> Pipelines:
    """Construct the OpenAI + ChromaDB gateways and wire every pipeline."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    if not settings.openai_api_key:
        logger.warning("[LLM] OPENAI_API_KEY is not set; provider calls will fail")

    return wire_pipelines(
        settings,
        embedder=OpenAIEmbeddingProvider(settings.openai_api_key, settings.embedding_model),
        index=ChromaVectorIndex(settings.chroma_persist_dir),
        llm=OpenAIChatProvider(settings.openai_api_key, settings.openai_model),
        moderator=OpenAIModerationProvider(settings.openai_api_key, settings.moderation_model),
    )


@lru_cache()
def get_pipelines() -> Pipelines:
    """Process-wide pipelines, built on first use from environment settings."""
    return build_pipelines()
