# /tests/test_chunker.py

import pytest

from curriculum_tutor.services.rag.chunker import chunk_by_sentences, chunk_text, normalize_text


def _paragraphs(*letters, size=40):
    return [letter * size for letter in letters]


def test_headings_and_paragraphs_fit_in_one_chunk():
    chunks = chunk_text("# A\n\nPara1.\n\n# B\n\nPara2.", chunk_size=100, chunk_overlap=10)

    assert len(chunks) == 1
    assert chunks[0].index == 0
    assert chunks[0].text == "# A\n\nPara1.\n\n# B\n\nPara2."


@pytest.mark.parametrize("text", ["", "   ", "\n\n\n\n"])
def test_empty_input_yields_no_chunks(text):
    assert chunk_text(text, chunk_size=100, chunk_overlap=10) == []


def test_overlap_carries_tail_of_previous_chunk():
    paragraphs = _paragraphs("a", "b", "c", "d")
    chunks = chunk_text("\n\n".join(paragraphs), chunk_size=100, chunk_overlap=10)

    assert len(chunks) == 2
    assert chunks[0].text == f"{paragraphs[0]}\n\n{paragraphs[1]}"
    assert chunks[1].text.startswith(chunks[0].text[-10:])
    assert chunks[1].text == f"{'b' * 10}\n\n{paragraphs[2]}\n\n{paragraphs[3]}"


def test_offsets_and_indices_are_ordered():
    paragraphs = _paragraphs(*"abcdefgh")
    chunks = chunk_text("\n\n".join(paragraphs), chunk_size=100, chunk_overlap=10)

    assert [c.index for c in chunks] == list(range(len(chunks)))
    for chunk in chunks:
        assert chunk.end_char >= chunk.start_char
    assert chunks[0].start_char == 0
    assert chunks[0].end_char == 82
    # next chunk starts where the overlap begins
    assert chunks[1].start_char == 72


def test_every_paragraph_is_covered_in_order():
    paragraphs = _paragraphs(*"abcdefgh", size=35)
    chunks = chunk_text("\n\n".join(paragraphs), chunk_size=90, chunk_overlap=5)

    positions = []
    for paragraph in paragraphs:
        holders = [c.index for c in chunks if paragraph in c.text]
        assert holders, f"paragraph {paragraph[0]} missing"
        positions.append(holders[0])
    assert positions == sorted(positions)


def test_oversized_paragraph_is_emitted_whole():
    big = "z" * 250
    chunks = chunk_text(f"short\n\n{big}\n\ntail", chunk_size=100, chunk_overlap=10)

    assert any(big in c.text for c in chunks)
    assert max(len(c.text) for c in chunks) > 100


def test_zero_overlap_does_not_repeat_text():
    paragraphs = _paragraphs("a", "b", "c")
    chunks = chunk_text("\n\n".join(paragraphs), chunk_size=50, chunk_overlap=0)

    assert [c.text for c in chunks] == paragraphs


def test_line_endings_and_blank_runs_are_normalized():
    assert normalize_text("One\r\n\r\n\r\n\r\nTwo  ") == "One\n\nTwo"

    chunks = chunk_text("One\r\n\r\n\r\n\r\nTwo", chunk_size=100, chunk_overlap=10)
    assert chunks[0].text == "One\n\nTwo"


@pytest.mark.parametrize("size, overlap", [(0, 0), (100, 100), (100, -1)])
def test_invalid_budgets_are_rejected(size, overlap):
    with pytest.raises(ValueError):
        chunk_text("text", chunk_size=size, chunk_overlap=overlap)


def test_sentence_windows():
    chunks = chunk_by_sentences("One. Two! Three? Four. Five. Six.", sentences_per_chunk=5)

    assert len(chunks) == 2
    assert [c.index for c in chunks] == [0, 1]
    assert chunks[0].text.startswith("One.")
    assert chunks[0].text.endswith("Five.")
    assert chunks[1].text == "Six."
    assert chunks[1].start_char == chunks[0].end_char + 1


def test_sentence_mode_without_terminator_keeps_whole_text():
    chunks = chunk_by_sentences("no punctuation here", sentences_per_chunk=3)

    assert len(chunks) == 1
    assert chunks[0].text == "no punctuation here"


def test_sentence_mode_empty_input():
    assert chunk_by_sentences("") == []


def test_overlap_that_starts_on_a_paragraph_break():
    paragraphs = ["a" * 40, "b" * 4, "c" * 60]
    text = "\n\n".join(paragraphs)

    chunks = chunk_text(text, chunk_size=50, chunk_overlap=6)

    assert len(chunks) == 2
    assert chunks[0].text == f"{'a' * 40}\n\nbbbb"
    assert chunks[1].text.startswith("bbbb\n\n")
    assert chunks[1].text.startswith(chunks[0].text[-6:].lstrip())
    assert chunks[1].start_char == 42


@pytest.mark.parametrize("overlap", [0, 3, 10, 25])
def test_offsets_bound_the_chunk_text(overlap):
    text = "Intro line.\n\n" + "\n\n".join(_paragraphs(*"abcdef", size=30)) + "\n\n\n\nEnd."
    cleaned = normalize_text(text)

    chunks = chunk_text(text, chunk_size=70, chunk_overlap=overlap)

    assert len(chunks) > 1
    for chunk in chunks:
        assert cleaned[chunk.start_char:chunk.end_char] == chunk.text


def test_sentence_mode_keeps_unterminated_tail():
    text = "Cells divide. Mitosis has phases. Trailing note without terminator"

    chunks = chunk_by_sentences(text, sentences_per_chunk=2)

    assert [c.text for c in chunks] == [
        "Cells divide. Mitosis has phases.",
        "Trailing note without terminator",
    ]


def test_sentence_offsets_point_into_source():
    text = "  One.  Two!\nThree? Four. Five and no end"

    chunks = chunk_by_sentences(text, sentences_per_chunk=2)

    assert [c.text for c in chunks] == ["One.  Two!", "Three? Four.", "Five and no end"]
    for chunk in chunks:
        assert text[chunk.start_char:chunk.end_char] == chunk.text


def test_sentence_mode_punctuation_only():
    chunks = chunk_by_sentences(" ...! ")

    assert [c.text for c in chunks] == ["...!"]
    assert (chunks[0].start_char, chunks[0].end_char) == (1, 5)
