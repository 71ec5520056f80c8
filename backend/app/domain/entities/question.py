"""Domain entity for questions asked about a room's recorded session."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


@dataclass
class Question:
    """A question asked in a room, with the generated answer.

    ``answer`` is ``None`` when answer synthesis failed; the question is
    still stored so the room keeps a record of it.
    """

    room_id: str
    question: str
    answer: str | None = None
    id: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass(frozen=True)
class QuestionResult:
    """What the question pipeline hands back to its caller."""

    question_id: str
    answer: str | None


class PipelineState(str, Enum):
    """Stages a question passes through on its way to an answer.

    ANSWER_FAILED is entered only from SYNTHESIZING; the question is still
    persisted afterwards, with a null answer.
    """

    EMBEDDING = "embedding"
    RETRIEVING = "retrieving"
    ASSEMBLING = "assembling"
    SYNTHESIZING = "synthesizing"
    ANSWER_FAILED = "answer_failed"
    PERSISTING = "persisting"
    DONE = "done"
