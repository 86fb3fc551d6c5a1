"""
Content-generation prompts (quizzes, flashcards, boss narratives).

Unlike the tutoring prompts these are structured-output instructions: the
user prompt spells out the exact JSON schema expected back.
"""

from curriculum_tutor.models.content import ContentPurpose, QuestionDifficulty
from curriculum_tutor.services.prompts.builder import PromptPair


def build_question_prompt(
    context_text: str,
    difficulty: QuestionDifficulty,
    count: int,
    purpose: ContentPurpose,
) -> PromptPair:
    system = f"""You are an academic quiz generator. Generate multiple choice questions based ONLY on the provided curriculum content.

RULES:
1. Questions must be answerable from the provided content only.
2. All four options must be plausible.
3. Difficulty level: {difficulty.value}
4. Questions should test understanding, not just memorization.
5. Return valid JSON only."""

    user = f"""CURRICULUM CONTENT:
{context_text}

Generate {count} multiple choice questions at {difficulty.value} difficulty level.
Purpose: {purpose.value}

Return as a JSON array with this exact format:
[{{
  "questionText": "...",
  "optionA": "...",
  "optionB": "...",
  "optionC": "...",
  "optionD": "...",
  "correctOption": "A|B|C|D",
  "explanation": "..."
}}]

Return ONLY valid JSON, no other text."""

    return PromptPair(system=system, user=user)


def build_flashcard_prompt(context_text: str, count: int) -> PromptPair:
    system = """You are an academic flashcard generator. Create flashcards from curriculum content.
Each flashcard should have a clear question/concept on the front and a concise answer on the back.
Return valid JSON only."""

    user = f"""CURRICULUM CONTENT:
{context_text}

Generate {count} flashcards.

Return as JSON array:
[{{"front": "question or concept", "back": "answer or explanation"}}]

Return ONLY valid JSON, no other text."""

    return PromptPair(system=system, user=user)


def build_boss_narrative_prompt(topic_name: str) -> PromptPair:
    system = "Generate a fun, academic-themed boss character for a learning game. Return JSON only."

    user = f"""Create a boss character for the topic: "{topic_name}"

The boss should be themed around this academic topic in a fun, game-like way.

Return JSON:
{{
  "bossName": "...",
  "bossDescription": "A short, fun description",
  "victoryMessage": "Congratulatory message when student wins",
  "defeatMessage": "Encouraging message when student loses"
}}

Return ONLY valid JSON."""

    return PromptPair(system=system, user=user)
