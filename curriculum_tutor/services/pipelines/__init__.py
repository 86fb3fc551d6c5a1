from curriculum_tutor.services.pipelines.learning import LearningPipeline
from curriculum_tutor.services.pipelines.assessment import AssessmentPipeline
from curriculum_tutor.services.pipelines.content import ContentGenerationPipeline
from curriculum_tutor.services.pipelines.tutor import TutorPipeline
from curriculum_tutor.services.pipelines.factory import (
    Pipelines,
    build_pipelines,
    get_pipelines,
    wire_pipelines,
)

__all__ = [
    "LearningPipeline",
    "AssessmentPipeline",
    "ContentGenerationPipeline",
    "TutorPipeline",
    "Pipelines",
    "build_pipelines",
    "get_pipelines",
    "wire_pipelines",
]
