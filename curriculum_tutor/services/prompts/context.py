"""Formatting of retrieved chunks into prompt context blocks."""

from curriculum_tutor.models.chunk import RetrievedChunk

CONTEXT_SEPARATOR = "\n\n---\n\n"


def format_context(chunks: list[RetrievedChunk], with_relevance: bool = True) -> str:
    """
    Number the chunks as sources, best-first as retrieved.

    [Source 1] (Relevance: 92%)
    <chunk text>
    """
    blocks = []
    for i, chunk in enumerate(chunks, start=1):
        header = f"[Source {i}]"
        if with_relevance:
            header += f" (Relevance: {chunk.score * 100:.0f}%)"
        blocks.append(f"{header}\n{chunk.text.strip()}")
    return CONTEXT_SEPARATOR.join(blocks)
