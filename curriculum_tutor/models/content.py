"""
Structured-output models for gamified content.

Field names mirror the JSON schema the model is asked to emit.
"""

from enum import Enum
from typing import Literal

from pydantic import BaseModel


class QuestionDifficulty(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class ContentPurpose(str, Enum):
    SPRINT_QUIZ = "sprint_quiz"
    BOSS_BATTLE = "boss_battle"
    FLASHCARD = "flashcard"


class GeneratedQuestion(BaseModel):
    questionText: str
    optionA: str
    optionB: str
    optionC: str
    optionD: str
    correctOption: Literal["A", "B", "C", "D"]
    explanation: str


class Flashcard(BaseModel):
    front: str
    back: str


class BossNarrative(BaseModel):
    bossName: str
    bossDescription: str
    victoryMessage: str
    defeatMessage: str
