"""
Curriculum Chunker

Splits raw curriculum text into overlapping chunks for embedding.

Two strategies, never mixed within one document:
- paragraph (default): greedy accumulation of blank-line separated paragraphs
  up to a character budget, with the tail of each emitted chunk carried into
  the next one as overlap.
- sentence: fixed windows of N sentences, no overlap.

A single paragraph longer than the budget is emitted whole rather than split
mid-paragraph; chunks favour semantic coherence over a hard size bound.
"""

import re

from curriculum_tutor.models.chunk import TextChunk

DEFAULT_CHUNK_SIZE = 1000
DEFAULT_CHUNK_OVERLAP = 200
DEFAULT_SENTENCES_PER_CHUNK = 5

PARAGRAPH_BREAK = re.compile(r"\n\n+")
PARAGRAPH_JOINER = "\n\n"
EXCESS_NEWLINES = re.compile(r"\n{3,}")
SENTENCE = re.compile(r"[^.!?]+(?:[.!?]+|$)")


def normalize_text(text: str) -> str:
    """Normalize line endings, collapse 3+ newlines to 2 and trim."""
    text = text.replace("\r\n", "\n")
    text = EXCESS_NEWLINES.sub("\n\n", text)
    return text.strip()


def _make_chunk(buffer: str, buffer_start: int, index: int) -> TextChunk:
    """Strip the buffer; offsets are moved so they bound the stripped text."""
    lead = len(buffer) - len(buffer.lstrip())
    text = buffer.strip()
    return TextChunk(
        text=text,
        index=index,
        start_char=buffer_start + lead,
        end_char=buffer_start + lead + len(text),
    )


def chunk_text(
    text: str,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    chunk_overlap: int = DEFAULT_CHUNK_OVERLAP,
) -> list[TextChunk]:
    """
    Split text into overlapping, paragraph-aligned chunks.

    Args:
        text: Raw source document
        chunk_size: Character budget per chunk (soft, see module docstring)
        chunk_overlap: Characters carried from the end of one chunk into the next

    Returns:
        Chunks in strictly increasing index order; empty list for empty input.
        ``start_char``/``end_char`` index into ``normalize_text(text)``, so
        ``normalize_text(text)[c.start_char:c.end_char] == c.text``.
    """
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")
    if chunk_overlap < 0 or chunk_overlap >= chunk_size:
        raise ValueError(
            f"chunk_overlap must be in [0, chunk_size), got {chunk_overlap}"
        )

    chunks: list[TextChunk] = []
    if not text:
        return chunks

    cleaned = normalize_text(text)
    if not cleaned:
        return chunks

    current = ""
    start_char = 0  # offset of current[0] in cleaned

    for paragraph in PARAGRAPH_BREAK.split(cleaned):
        if len(current + paragraph) > chunk_size and current:
            chunks.append(_make_chunk(current, start_char, len(chunks)))

            # Seed the next chunk with the tail of this one. A seed that
            # starts on whitespace would be stripped from the emitted text.
            overlap = current[-chunk_overlap:].lstrip() if chunk_overlap else ""
            if overlap:
                start_char += len(current) - len(overlap)
            else:
                start_char += len(current) + len(PARAGRAPH_JOINER)
            current = overlap

        current += (PARAGRAPH_JOINER if current else "") + paragraph

    if current.strip():
        chunks.append(_make_chunk(current, start_char, len(chunks)))

    return chunks


def chunk_by_sentences(
    text: str,
    sentences_per_chunk: int = DEFAULT_SENTENCES_PER_CHUNK,
) -> list[TextChunk]:
    """
    Split text into windows of ``sentences_per_chunk`` sentences.

    A trailing run without a terminator counts as a final sentence. Each
    chunk is the source slice from its first to its last sentence, stripped,
    and its offsets index into ``text``.
    """
    if sentences_per_chunk <= 0:
        raise ValueError(
            f"sentences_per_chunk must be positive, got {sentences_per_chunk}"
        )
    if not text or not text.strip():
        return []

    sentences = [m for m in SENTENCE.finditer(text) if m.group().strip()]
    if not sentences:
        # Punctuation only
        return [_make_chunk(text, 0, 0)]

    chunks: list[TextChunk] = []
    for i in range(0, len(sentences), sentences_per_chunk):
        window = sentences[i:i + sentences_per_chunk]
        start, end = window[0].start(), window[-1].end()
        chunks.append(_make_chunk(text[start:end], start, len(chunks)))

    return chunks
