"""Decoder for generation provider responses.

Providers (and SDK versions of the same provider) hand back answer text in
structurally different places. Rather than probing optional attributes ad hoc,
the decoder walks a closed set of recognised shapes in a fixed preference
order and returns the first one that yields non-empty text.
"""

from collections.abc import Callable, Mapping
from typing import Any

from app.domain.entities import DecodedResponse, ResponseShape


def _direct_text(payload: Mapping[str, Any]) -> str:
    value = payload.get("text")
    return value.strip() if isinstance(value, str) else ""


def _output_text(payload: Mapping[str, Any]) -> str:
    value = payload.get("output_text")
    return value.strip() if isinstance(value, str) else ""


def _candidate_parts(payload: Mapping[str, Any]) -> str:
    candidates = payload.get("candidates")
    if not isinstance(candidates, list) or not candidates:
        return ""
    first = candidates[0]
    if not isinstance(first, Mapping):
        return ""
    content = first.get("content")
    if not isinstance(content, Mapping):
        return ""
    parts = content.get("parts")
    if not isinstance(parts, list):
        return ""

    texts = [
        part["text"]
        for part in parts
        if isinstance(part, Mapping) and isinstance(part.get("text"), str) and part["text"]
    ]
    return " ".join(texts).strip()


# Preference order matters: the first shape with text wins.
_EXTRACTORS: tuple[tuple[ResponseShape, Callable[[Mapping[str, Any]], str]], ...] = (
    (ResponseShape.DIRECT_TEXT, _direct_text),
    (ResponseShape.OUTPUT_TEXT, _output_text),
    (ResponseShape.CANDIDATE_PARTS, _candidate_parts),
)


def decode_response(payload: Mapping[str, Any] | None) -> DecodedResponse | None:
    """Extract answer text from a raw provider response.

    Returns ``None`` when no recognised shape yields non-empty text.
    """
    if not isinstance(payload, Mapping):
        return None
    for shape, extract in _EXTRACTORS:
        text = extract(payload)
        if text:
            return DecodedResponse(shape=shape, text=text)
    return None
