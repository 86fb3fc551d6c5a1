"""
Policy-Aware Prompt Builder

Maps a PipelineMode to its (system, user) prompt pair. Stateless: the mode
is chosen by the caller on every request and nothing is carried between
calls.

Core invariant: the model may only answer from the supplied curriculum
context, and during assessment it must never reveal graded answers.
"""

from typing import NamedTuple, assert_never

from curriculum_tutor.models.answer import PipelineMode
from curriculum_tutor.models.chunk import RetrievedChunk
from curriculum_tutor.services.prompts.assessment_mode import (
    build_assessment_prompt,
    build_assessment_system_prompt,
)
from curriculum_tutor.services.prompts.governed import (
    build_governed_prompt,
    build_governed_system_prompt,
)
from curriculum_tutor.services.prompts.hint_mode import (
    build_hint_prompt,
    build_hint_system_prompt,
)


class PromptPair(NamedTuple):
    system: str
    user: str


def build_prompt(
    mode: PipelineMode,
    query: str,
    context: list[RetrievedChunk] | None = None,
    student_level: str = "beginner",
    mastery_score: float = 0,
    topic_name: str | None = None,
) -> PromptPair:
    context = context or []

    match mode:
        case PipelineMode.LEARNING:
            return PromptPair(
                system=build_governed_system_prompt(),
                user=build_governed_prompt(
                    query, context, student_level, mastery_score, topic_name
                ),
            )
        case PipelineMode.PRACTICE:
            return PromptPair(
                system=build_hint_system_prompt(),
                user=build_hint_prompt(query, context, topic_name),
            )
        case PipelineMode.ASSESSMENT_SOFT:
            return PromptPair(
                system=build_assessment_system_prompt(strict_mode=False),
                user=build_assessment_prompt(query, strict_mode=False),
            )
        case PipelineMode.ASSESSMENT_STRICT:
            return PromptPair(
                system=build_assessment_system_prompt(strict_mode=True),
                user=build_assessment_prompt(query, strict_mode=True),
            )
        case _:
            assert_never(mode)
