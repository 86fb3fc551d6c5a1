"""
Assessment Pipeline

Strict mode never touches the retriever. Soft mode retrieves a narrow,
topic-only context (no course fallback) to reduce leakage breadth.
Responses are always "restricted" (strict) or "hint" (soft).
"""

import logging

from curriculum_tutor.core.policy import generation_profile_for, response_type_for
from curriculum_tutor.models.answer import GeneratedAnswer, PipelineMode, Source
from curriculum_tutor.models.chunk import RetrievalFilter, RetrievedChunk
from curriculum_tutor.services.llm import response_parser
from curriculum_tutor.services.llm.generation import ResponseGenerator
from curriculum_tutor.services.llm.moderation import ModerationGate
from curriculum_tutor.services.pipelines.learning import SAFE_FALLBACK_MESSAGE
from curriculum_tutor.services.prompts.builder import build_prompt
from curriculum_tutor.services.rag.retriever import Retriever

logger = logging.getLogger(__name__)


class AssessmentPipeline:
    def __init__(
        self,
        retriever: Retriever,
        generator: ResponseGenerator,
        moderation: ModerationGate,
        soft_top_k: int = 2,
    ):
        self.retriever = retriever
        self.generator = generator
        self.moderation = moderation
        self.soft_top_k = soft_top_k

    async def process(
        self,
        query: str,
        topic_id: str,
        course_id: str,
        strict_mode: bool,
    ) -> GeneratedAnswer:
        mode = PipelineMode.ASSESSMENT_STRICT if strict_mode else PipelineMode.ASSESSMENT_SOFT

        chunks: list[RetrievedChunk] = []
        if not strict_mode:
            chunks = await self.retriever.retrieve(
                query, RetrievalFilter(topic_id=topic_id), self.soft_top_k
            )

        prompt = build_prompt(mode, query, context=chunks)
        profile = generation_profile_for(mode)
        llm_response = await self.generator.generate(
            prompt.system,
            prompt.user,
            max_tokens=profile.max_tokens,
            temperature=profile.temperature,
        )

        response_type = response_type_for(mode)

        if not await self.moderation.validate_response(llm_response.text):
            logger.warning(f"[LLM] Assessment response withheld by moderation (course={course_id})")
            return GeneratedAnswer(
                text=SAFE_FALLBACK_MESSAGE,
                response_type=response_type,
                usage=llm_response.usage,
                flagged=True,
            )

        cleaned = response_parser.clean(llm_response.text)
        return GeneratedAnswer(
            text=cleaned,
            response_type=response_type,
            sources=[Source(id=c.id, relevance=c.score) for c in chunks],
            structured=response_parser.structure_response(cleaned),
            usage=llm_response.usage,
        )
