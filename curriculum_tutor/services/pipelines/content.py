"""
Content Generation Pipeline

Generates gamified content (quiz questions, flashcards, boss narratives)
from curriculum chunks using structured-output prompts.

Unlike the tutoring path, malformed or missing structured output never
raises: bulk content degrades to an empty list and single-item content to
a templated fallback. Retrieval and generation errors still propagate.
"""

import logging

from pydantic import BaseModel, ValidationError

from curriculum_tutor.core.policy import GenerationProfile
from curriculum_tutor.models.chunk import RetrievalFilter
from curriculum_tutor.models.content import (
    BossNarrative,
    ContentPurpose,
    Flashcard,
    GeneratedQuestion,
    QuestionDifficulty,
)
from curriculum_tutor.services.llm.generation import ResponseGenerator
from curriculum_tutor.services.llm.structured import Empty, Parsed, extract_structured
from curriculum_tutor.services.prompts.content import (
    build_boss_narrative_prompt,
    build_flashcard_prompt,
    build_question_prompt,
)
from curriculum_tutor.services.rag.retriever import Retriever

logger = logging.getLogger(__name__)

QUESTION_PROFILE = GenerationProfile(max_tokens=2048, temperature=0.7)
FLASHCARD_PROFILE = GenerationProfile(max_tokens=1536, temperature=0.6)
BOSS_PROFILE = GenerationProfile(max_tokens=256, temperature=0.8)

QUESTION_SEED_QUERY = "Key concepts and facts for quiz generation"
FLASHCARD_SEED_QUERY = "Key concepts, definitions, and facts"


def fallback_boss(topic_name: str) -> BossNarrative:
    return BossNarrative(
        bossName=f"The {topic_name} Guardian",
        bossDescription=f"Master of {topic_name}. Defeat them to prove your mastery!",
        victoryMessage="Congratulations! You have conquered this topic!",
        defeatMessage="Keep studying! You can defeat this boss next time.",
    )


def _validate_items(items: list, model: type[BaseModel]) -> list:
    """Keep the items that fit the model, log and drop the rest."""
    valid = []
    for i, item in enumerate(items):
        try:
            valid.append(model.model_validate(item))
        except ValidationError as e:
            logger.warning(f"[Content] Dropping malformed {model.__name__} #{i}: {e.error_count()} error(s)")
    return valid


class ContentGenerationPipeline:
    def __init__(
        self,
        retriever: Retriever,
        generator: ResponseGenerator,
        top_k: int = 5,
    ):
        self.retriever = retriever
        self.generator = generator
        self.top_k = top_k

    async def _context_text(self, seed_query: str, topic_id: str, course_id: str) -> str:
        chunks = await self.retriever.retrieve(
            seed_query,
            RetrievalFilter(topic_id=topic_id, course_id=course_id),
            self.top_k,
        )
        return "\n\n".join(c.text for c in chunks)

    async def generate_questions(
        self,
        topic_id: str,
        course_id: str,
        difficulty: QuestionDifficulty = QuestionDifficulty.INTERMEDIATE,
        count: int = 5,
        purpose: ContentPurpose = ContentPurpose.SPRINT_QUIZ,
    ) -> list[GeneratedQuestion]:
        """Multiple-choice questions answerable from the topic's content."""
        context_text = await self._context_text(QUESTION_SEED_QUERY, topic_id, course_id)
        prompt = build_question_prompt(context_text, difficulty, count, purpose)

        response = await self.generator.generate(
            prompt.system,
            prompt.user,
            max_tokens=QUESTION_PROFILE.max_tokens,
            temperature=QUESTION_PROFILE.temperature,
        )

        match extract_structured(response.text, "array"):
            case Parsed(value=items):
                return _validate_items(items, GeneratedQuestion)[:count]
            case Empty(reason=reason):
                logger.error(f"[Content] Failed to parse questions for topic {topic_id}: {reason}")
                return []

    async def generate_flashcards(
        self,
        topic_id: str,
        course_id: str,
        count: int = 10,
    ) -> list[Flashcard]:
        context_text = await self._context_text(FLASHCARD_SEED_QUERY, topic_id, course_id)
        prompt = build_flashcard_prompt(context_text, count)

        response = await self.generator.generate(
            prompt.system,
            prompt.user,
            max_tokens=FLASHCARD_PROFILE.max_tokens,
            temperature=FLASHCARD_PROFILE.temperature,
        )

        match extract_structured(response.text, "array"):
            case Parsed(value=items):
                return _validate_items(items, Flashcard)
            case Empty(reason=reason):
                logger.error(f"[Content] Failed to parse flashcards for topic {topic_id}: {reason}")
                return []

    async def generate_boss_narrative(self, topic_name: str) -> BossNarrative:
        """Themed boss character; falls back to a fixed template on bad output."""
        prompt = build_boss_narrative_prompt(topic_name)

        response = await self.generator.generate(
            prompt.system,
            prompt.user,
            max_tokens=BOSS_PROFILE.max_tokens,
            temperature=BOSS_PROFILE.temperature,
        )

        match extract_structured(response.text, "object"):
            case Parsed(value=data):
                try:
                    return BossNarrative.model_validate(data)
                except ValidationError as e:
                    logger.error(f"[Content] Boss narrative missing fields, using template: {e.error_count()} error(s)")
                    return fallback_boss(topic_name)
            case Empty(reason=reason):
                logger.error(f"[Content] Failed to parse boss narrative, using template: {reason}")
                return fallback_boss(topic_name)
