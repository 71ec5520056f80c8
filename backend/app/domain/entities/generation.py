"""Domain types for generation prompts and provider response shapes."""

from dataclasses import dataclass
from enum import Enum


class PromptTemplate(str, Enum):
    """Which prompt variant the answer synthesizer selected."""

    CONTEXT_AWARE = "context_aware"
    CONTEXT_FREE = "context_free"


class ResponseShape(str, Enum):
    """Recognised generation response shapes, in preference order.

    DIRECT_TEXT     — ``{"text": "..."}``
    OUTPUT_TEXT     — ``{"output_text": "..."}``
    CANDIDATE_PARTS — ``{"candidates": [{"content": {"parts": [{"text": "..."}]}}]}``
    """

    DIRECT_TEXT = "direct_text"
    OUTPUT_TEXT = "output_text"
    CANDIDATE_PARTS = "candidate_parts"


@dataclass(frozen=True)
class DecodedResponse:
    """Text extracted from a provider response, tagged with the shape it came from."""

    shape: ResponseShape
    text: str


@dataclass(frozen=True)
class AnswerPrompt:
    """A rendered prompt plus the template it was rendered from."""

    template: PromptTemplate
    text: str
