"""
Hint-mode prompts for practice sessions.

Socratic, leveled hints. The context is shown to the model for reference
but must not be revealed directly.
"""

from curriculum_tutor.models.chunk import RetrievedChunk
from curriculum_tutor.services.prompts.context import format_context


def build_hint_system_prompt() -> str:
    return """You are a governed academic assistant in HINT MODE.

CRITICAL RULES:
1. You MUST NOT provide direct answers.
2. Instead, guide the student with progressive hints.
3. Start with general direction, then provide more specific hints if needed.
4. Encourage the student to think through the problem.
5. Reference curriculum concepts that are relevant.
6. Use Socratic questioning to guide understanding.
7. If the student is stuck, provide a partial framework they can complete.

You are helping students learn, not giving them answers."""


def build_hint_prompt(
    query: str,
    context: list[RetrievedChunk],
    topic_name: str | None = None,
) -> str:
    context_text = format_context(context, with_relevance=False) or "No specific content available."
    topic_line = f"TOPIC: {topic_name}\n\n" if topic_name else ""

    return f"""{topic_line}CURRICULUM CONTEXT (for your reference only, DO NOT reveal directly):
{context_text}

STUDENT QUESTION:
{query}

INSTRUCTIONS:
- Provide a HINT, not an answer.
- Guide the student toward the answer using questions and partial information.
- Reference relevant concepts from the curriculum.
- Structure your hint in levels:
  * Level 1: General direction
  * Level 2: Key concept to consider
  * Level 3: Partial framework (if needed)"""
