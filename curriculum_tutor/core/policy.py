"""
Pipeline Policy

Single place that maps a PipelineMode to its response type and generation
profile, plus the failure policy of each collaborator.

Failure policy:
    embedding / vector_index / generation  -> PROPAGATE  (ProviderUnavailable reaches the caller)
    moderation                             -> FAIL_OPEN  (logged, content passes)
    structured_output                      -> DEGRADE    (empty list or templated fallback)
"""

from enum import Enum
from typing import NamedTuple, assert_never

from curriculum_tutor.models.answer import PipelineMode, ResponseType


class FailurePolicy(str, Enum):
    PROPAGATE = "propagate"
    FAIL_OPEN = "fail_open"
    DEGRADE = "degrade"


FAILURE_POLICY: dict[str, FailurePolicy] = {
    "embedding": FailurePolicy.PROPAGATE,
    "vector_index": FailurePolicy.PROPAGATE,
    "generation": FailurePolicy.PROPAGATE,
    "moderation": FailurePolicy.FAIL_OPEN,
    "structured_output": FailurePolicy.DEGRADE,
}


class GenerationProfile(NamedTuple):
    max_tokens: int
    temperature: float


def response_type_for(mode: PipelineMode) -> ResponseType:
    match mode:
        case PipelineMode.LEARNING:
            return ResponseType.EXPLANATION
        case PipelineMode.PRACTICE | PipelineMode.ASSESSMENT_SOFT:
            return ResponseType.HINT
        case PipelineMode.ASSESSMENT_STRICT:
            return ResponseType.RESTRICTED
        case _:
            assert_never(mode)


def generation_profile_for(mode: PipelineMode) -> GenerationProfile:
    """Token budget and temperature per mode. Assessment modes run cold and short."""
    match mode:
        case PipelineMode.LEARNING:
            return GenerationProfile(max_tokens=1024, temperature=0.7)
        case PipelineMode.PRACTICE:
            return GenerationProfile(max_tokens=512, temperature=0.7)
        case PipelineMode.ASSESSMENT_SOFT:
            return GenerationProfile(max_tokens=256, temperature=0.3)
        case PipelineMode.ASSESSMENT_STRICT:
            return GenerationProfile(max_tokens=150, temperature=0.3)
        case _:
            assert_never(mode)
