"""
Structured Output Extraction

Best-effort extraction of a JSON array/object from free-form model output.
Returns a tagged result (Parsed | Empty) instead of raising, so callers
branch explicitly on the outcome.

Fenced code blocks are searched first, then the raw text. Within each
candidate, decoding is attempted from every opening bracket in turn and the
first literal of the requested kind wins; trailing prose is ignored.
"""

import json
import re
from dataclasses import dataclass
from typing import Any, Literal

CODE_BLOCK = re.compile(r"```(?:json)?\s*([\s\S]*?)```")
KINDS = {
    "array": ("[", list),
    "object": ("{", dict),
}

_decoder = json.JSONDecoder()


@dataclass(frozen=True)
class Parsed:
    value: Any


@dataclass(frozen=True)
class Empty:
    reason: str


ParseResult = Parsed | Empty


def _candidates(text: str) -> list[str]:
    """Fenced code blocks first, then the raw text."""
    return CODE_BLOCK.findall(text) + [text]


def extract_structured(text: str, kind: Literal["array", "object"] = "array") -> ParseResult:
    """
    Find and decode the first well-formed JSON literal of the given kind.

    Returns:
        Parsed(value) with a list (kind="array") or dict (kind="object"),
        or Empty(reason) when nothing usable was found.
    """
    opener, expected = KINDS[kind]
    if not text:
        return Empty("empty response")

    found_opener = False
    error = ""
    for candidate in _candidates(text):
        start = candidate.find(opener)
        while start != -1:
            found_opener = True
            try:
                value, _ = _decoder.raw_decode(candidate, start)
            except json.JSONDecodeError as e:
                error = str(e)
            else:
                if isinstance(value, expected):
                    return Parsed(value)
            start = candidate.find(opener, start + 1)

    if not found_opener:
        return Empty(f"no JSON {kind} found")
    return Empty(f"malformed JSON {kind}: {error}")
