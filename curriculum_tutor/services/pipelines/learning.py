"""
Learning / Practice Pipeline

query -> retrieve (topic, then course fallback) -> prompt by mode
      -> generate -> moderate -> clean / extract / structure

Retrieval and generation errors propagate to the caller.
"""

import logging

from curriculum_tutor.core.policy import generation_profile_for, response_type_for
from curriculum_tutor.models.answer import (
    ChatTurn,
    GeneratedAnswer,
    PipelineMode,
    Source,
    StructuredResponse,
)
from curriculum_tutor.services.llm import response_parser
from curriculum_tutor.services.llm.generation import ResponseGenerator
from curriculum_tutor.services.llm.moderation import ModerationGate
from curriculum_tutor.services.prompts.builder import build_prompt
from curriculum_tutor.services.rag.retriever import Retriever

logger = logging.getLogger(__name__)

SAFE_FALLBACK_MESSAGE = (
    "I apologize, but I could not generate an appropriate response. "
    "Please try rephrasing your question."
)

TUTORING_MODES = (PipelineMode.LEARNING, PipelineMode.PRACTICE)


class LearningPipeline:
    def __init__(
        self,
        retriever: Retriever,
        generator: ResponseGenerator,
        moderation: ModerationGate,
    ):
        self.retriever = retriever
        self.generator = generator
        self.moderation = moderation

    async def process(
        self,
        query: str,
        topic_id: str,
        course_id: str,
        mode: PipelineMode = PipelineMode.LEARNING,
        student_level: str = "beginner",
        mastery_score: float = 0,
        topic_name: str | None = None,
        history: list[ChatTurn] | None = None,
    ) -> GeneratedAnswer:
        if mode not in TUTORING_MODES:
            raise ValueError(f"LearningPipeline does not handle mode {mode.value}")

        # Step 1: Retrieve relevant curriculum chunks
        chunks = await self.retriever.retrieve_with_fallback(query, topic_id, course_id)

        # Step 2: Build the mode's prompt
        prompt = build_prompt(
            mode,
            query,
            context=chunks,
            student_level=student_level,
            mastery_score=mastery_score,
            topic_name=topic_name,
        )

        # Step 3: Generate
        profile = generation_profile_for(mode)
        if history:
            llm_response = await self.generator.generate_with_history(
                prompt.system,
                history,
                prompt.user,
                max_tokens=profile.max_tokens,
                temperature=profile.temperature,
            )
        else:
            llm_response = await self.generator.generate(
                prompt.system,
                prompt.user,
                max_tokens=profile.max_tokens,
                temperature=profile.temperature,
            )

        response_type = response_type_for(mode)

        # Step 4: Moderate
        if not await self.moderation.validate_response(llm_response.text):
            logger.warning(f"[LLM] Response withheld by moderation (mode={mode.value})")
            return GeneratedAnswer(
                text=SAFE_FALLBACK_MESSAGE,
                response_type=response_type,
                structured=StructuredResponse(),
                usage=llm_response.usage,
                flagged=True,
            )

        # Step 5: Parse and structure
        cleaned = response_parser.clean(llm_response.text)
        return GeneratedAnswer(
            text=cleaned,
            response_type=response_type,
            sources=[Source(id=c.id, relevance=c.score) for c in chunks],
            concepts=response_parser.extract_concepts(cleaned),
            structured=response_parser.structure_response(cleaned),
            usage=llm_response.usage,
        )
