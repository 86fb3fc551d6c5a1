"""
Tutor Pipeline

Entry point for the calling application. Executes exactly the mode it is
told to execute; deciding which mode applies (e.g. an institution-wide
strict exam toggle) is the caller's concern.
"""

from typing import assert_never

from curriculum_tutor.models.answer import GeneratedAnswer, PipelineMode, TutorRequest
from curriculum_tutor.services.pipelines.assessment import AssessmentPipeline
from curriculum_tutor.services.pipelines.learning import LearningPipeline


class TutorPipeline:
    def __init__(self, learning: LearningPipeline, assessment: AssessmentPipeline):
        self.learning = learning
        self.assessment = assessment

    async def answer(self, request: TutorRequest) -> GeneratedAnswer:
        match request.mode:
            case PipelineMode.LEARNING | PipelineMode.PRACTICE:
                return await self.learning.process(
                    request.query,
                    request.topic_id,
                    request.course_id,
                    mode=request.mode,
                    student_level=request.student_level,
                    mastery_score=request.mastery_score,
                    topic_name=request.topic_name,
                    history=request.history,
                )
            case PipelineMode.ASSESSMENT_SOFT | PipelineMode.ASSESSMENT_STRICT:
                return await self.assessment.process(
                    request.query,
                    request.topic_id,
                    request.course_id,
                    strict_mode=request.mode == PipelineMode.ASSESSMENT_STRICT,
                )
            case _:
                assert_never(request.mode)
