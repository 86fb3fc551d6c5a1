"""
Governed (learning mode) prompts.

Restricts the model to the supplied curriculum context and adapts the
explanation to the student's mastery of the topic.
"""

from curriculum_tutor.models.chunk import RetrievedChunk
from curriculum_tutor.services.prompts.context import format_context

NO_CONTEXT = "No specific curriculum content found for this query."


def get_level_guidance(mastery: float) -> str:
    """Mastery-tier framing: <30 beginner, 30-59 bridging, 60-79 moderate, >=80 advanced."""
    if mastery < 30:
        return "This student is a beginner. Use simple language, analogies, and foundational explanations."
    elif mastery < 60:
        return "This student has developing understanding. Bridge basic and intermediate concepts."
    elif mastery < 80:
        return "This student has good understanding. Can handle moderate complexity."
    else:
        return "This student has strong mastery. Can handle advanced concepts and nuances."


def get_mastery_instruction(mastery: float) -> str:
    if mastery < 40:
        return "Student is struggling. Use simpler language and more examples."
    elif mastery > 80:
        return "Student has strong understanding. You can use more advanced explanations and nuance."
    return ""


def build_governed_system_prompt() -> str:
    return """You are a governed academic assistant for university students.

CRITICAL RULES:
1. You MUST ONLY use information from the provided curriculum context to answer questions.
2. You MUST NOT generate information outside the curriculum materials.
3. If the curriculum context does not contain relevant information, say so clearly.
4. Provide step-by-step explanations when possible.
5. Encourage critical thinking rather than just giving direct answers.
6. Adapt your language complexity to the student's level and mastery.
7. Never fabricate citations, sources, or facts.
8. Be encouraging but academically rigorous.

You are an educational assistant, not a general-purpose chatbot."""


def build_governed_prompt(
    query: str,
    context: list[RetrievedChunk],
    student_level: str,
    mastery_score: float,
    topic_name: str | None = None,
) -> str:
    """
    Build the learning-mode user prompt.

    Args:
        query: The student's question
        context: Retrieved chunks, best-first
        student_level: Caller-supplied level label (e.g. "beginner")
        mastery_score: Topic mastery 0-100
        topic_name: Optional human-readable topic

    Returns:
        User prompt string
    """
    context_text = format_context(context) or NO_CONTEXT

    instructions = ["Answer ONLY using the curriculum context provided above."]
    mastery_instruction = get_mastery_instruction(mastery_score)
    if mastery_instruction:
        instructions.append(mastery_instruction)
    instructions += [
        "Provide a clear, structured response.",
        "Include step-by-step reasoning where appropriate.",
    ]
    instruction_lines = "\n".join(f"- {line}" for line in instructions)

    topic_line = f"- Topic: {topic_name}\n" if topic_name else ""

    return f"""CURRICULUM CONTEXT:
{context_text}

---

STUDENT CONTEXT:
{topic_line}- Level: {student_level}
- Topic Mastery: {mastery_score:g}%
- {get_level_guidance(mastery_score)}

STUDENT QUESTION:
{query}

INSTRUCTIONS:
{instruction_lines}"""
