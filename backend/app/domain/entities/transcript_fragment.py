"""Domain entities for transcript fragments and similarity matches."""

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass
class TranscriptFragment:
    """A transcribed piece of a room's audio, with its embedding vector.

    Fragments are written by the audio ingestion flow and are read-only to
    the question pipeline. Every fragment belongs to exactly one room.
    """

    room_id: str
    transcription: str
    embedding: list[float] = field(default_factory=list)
    id: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass(frozen=True)
class SimilarityMatch:
    """A single result from a room-scoped similarity search."""

    fragment_id: str
    transcription: str
    similarity: float  # 1 - cosine distance; 1.0 means identical direction


@dataclass(frozen=True)
class RetrievalPolicy:
    """Threshold and cap applied when retrieving context fragments."""

    min_score: float = 0.7
    limit: int = 3

    def __post_init__(self) -> None:
        if self.limit < 1:
            raise ValueError("RetrievalPolicy.limit must be at least 1")
