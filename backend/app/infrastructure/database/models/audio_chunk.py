"""SQLAlchemy ORM model for transcribed audio chunks with pgvector embeddings."""

import uuid
from datetime import datetime, timezone

from pgvector.sqlalchemy import Vector
from sqlalchemy import DateTime, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.config import get_settings
from app.infrastructure.database.base import Base

# Must match the embedding provider output; both read Settings.embedding_dimensions.
EMBEDDING_DIMENSIONS = get_settings().embedding_dimensions


class AudioChunkModel(Base):
    """A transcribed chunk of a room's audio, with its vector embedding.

    Rows are written by the audio upload flow; the question pipeline only
    reads them through cosine-similarity search.
    """

    __tablename__ = "audio_chunks"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid.uuid4())
    )
    room_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    transcription: Mapped[str] = mapped_column(Text, nullable=False)
    embedding = mapped_column(Vector(EMBEDDING_DIMENSIONS), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    __table_args__ = (
        Index(
            "idx_audio_chunks_embedding_hnsw",
            "embedding",
            postgresql_using="hnsw",
            postgresql_ops={"embedding": "vector_cosine_ops"},
        ),
    )

    def __repr__(self) -> str:
        return f"<AudioChunkModel(id={self.id}, room_id='{self.room_id}')>"
