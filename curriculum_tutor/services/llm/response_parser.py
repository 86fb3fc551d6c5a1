"""
Response Parser

Cleans LLM output and decomposes it into sections for the frontend.

structure_response is a best-effort heuristic, not a parser with a grammar:
it must accept arbitrary model output without raising.
"""

import re

from curriculum_tutor.models.answer import StructuredResponse

SUMMARY_CHAR_CAP = 200

EXCESS_NEWLINES = re.compile(r"\n{3,}")
BOLD_SPAN = re.compile(r"\*\*([^*]+)\*\*")
LIST_ITEM = re.compile(r"^\s*(?:[-•*]|\d+\.)\s")
LIST_MARKER = re.compile(r"^\s*(?:[-•*]|\d+\.)\s*")
PRACTICE_WORDS = ("practice", "try")


def clean(text: str) -> str:
    """Trim, collapse 3+ newlines to 2, tabs to two spaces."""
    text = text.strip()
    text = EXCESS_NEWLINES.sub("\n\n", text)
    return text.replace("\t", "  ")


def extract_concepts(text: str) -> list[str]:
    """Bold (**concept**) spans, trimmed and deduplicated in first-seen order."""
    concepts: list[str] = []
    for match in BOLD_SPAN.findall(text):
        concept = match.strip()
        if concept and concept not in concepts:
            concepts.append(concept)
    return concepts


def structure_response(text: str) -> StructuredResponse:
    """
    Split text into summary / explanation / key points / suggested practice.

    - list items ("- ", "* ", "• ", "1. ") become key points, marker stripped
    - lines mentioning "practice" or "try" go to suggested practice
    - other lines fill the summary until it reaches 200 characters,
      then spill into the explanation
    """
    lines = [line for line in text.split("\n") if line.strip()]
    key_points: list[str] = []
    summary = ""
    explanation = ""
    practice = ""

    for line in lines:
        lowered = line.lower()
        if LIST_ITEM.match(line):
            key_points.append(LIST_MARKER.sub("", line, count=1).strip())
        elif any(word in lowered for word in PRACTICE_WORDS):
            practice += line + "\n"
        elif len(summary) < SUMMARY_CHAR_CAP:
            summary += line + " "
        else:
            explanation += line + "\n"

    return StructuredResponse(
        summary=summary.strip() or (lines[0].strip() if lines else ""),
        explanation=explanation.strip() or text,
        key_points=key_points,
        suggested_practice=practice.strip() or None,
    )
