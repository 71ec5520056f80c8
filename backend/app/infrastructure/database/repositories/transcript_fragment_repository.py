"""SQLAlchemy implementation of TranscriptFragmentRepository — pgvector-powered search."""

import logging

from sqlalchemy import Select, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.interfaces import TranscriptFragmentRepository
from app.domain.entities import SimilarityMatch, TranscriptFragment
from app.domain.exceptions import RetrievalError
from app.infrastructure.database.models import AudioChunkModel

logger = logging.getLogger(__name__)


class PgTranscriptFragmentRepository(TranscriptFragmentRepository):
    """Room-scoped similarity search over audio chunks, backed by PostgreSQL + pgvector."""

    def __init__(self, session: AsyncSession):
        self._session = session

    @staticmethod
    def _to_model(fragment: TranscriptFragment) -> AudioChunkModel:
        model = AudioChunkModel(
            room_id=fragment.room_id,
            transcription=fragment.transcription,
            embedding=fragment.embedding,
            created_at=fragment.created_at,
        )
        if fragment.id:
            model.id = fragment.id
        return model

    async def add_many(self, fragments: list[TranscriptFragment]) -> list[TranscriptFragment]:
        """Store transcribed fragments. Used by ingestion, not by the question pipeline."""
        models = [self._to_model(f) for f in fragments]
        try:
            self._session.add_all(models)
            await self._session.flush()
        except SQLAlchemyError as e:
            logger.error("Failed to store %d fragment(s): %s", len(models), e)
            raise

        return [
            TranscriptFragment(
                id=m.id,
                room_id=m.room_id,
                transcription=m.transcription,
                embedding=list(m.embedding),
                created_at=m.created_at,
            )
            for m in models
        ]

    @staticmethod
    def build_similarity_query(
        room_id: str,
        query_embedding: list[float],
        *,
        min_score: float,
        limit: int,
    ) -> Select:
        """Build the top-K cosine similarity query for one room.

        ``<=>`` is pgvector's cosine distance, so similarity = 1 - distance.
        Ordering by ascending distance is ordering by descending similarity;
        creation time and id make ties deterministic.
        """
        distance = AudioChunkModel.embedding.cosine_distance(query_embedding)
        similarity = (1 - distance).label("similarity")

        return (
            select(
                AudioChunkModel.id,
                AudioChunkModel.transcription,
                similarity,
            )
            .where(AudioChunkModel.room_id == room_id)
            .where(1 - distance >= min_score)
            .order_by(distance.asc(), AudioChunkModel.created_at.asc(), AudioChunkModel.id.asc())
            .limit(limit)
        )

    async def top_similar(
        self,
        room_id: str,
        query_embedding: list[float],
        *,
        min_score: float,
        limit: int,
    ) -> list[SimilarityMatch]:
        query = self.build_similarity_query(
            room_id, query_embedding, min_score=min_score, limit=limit
        )
        try:
            result = await self._session.execute(query)
            rows = result.all()
        except SQLAlchemyError as e:
            logger.error("Similarity search failed for room %s: %s", room_id, e)
            raise RetrievalError(f"Similarity search failed: {e}") from e

        matches = [
            SimilarityMatch(
                fragment_id=row.id,
                transcription=row.transcription,
                similarity=float(row.similarity),
            )
            for row in rows
        ]
        logger.debug("Room %s: %d fragment(s) above %.2f", room_id, len(matches), min_score)
        return matches
