"""Abstract repository interface (port) for room-scoped similarity search."""

from abc import ABC, abstractmethod

from app.domain.entities import SimilarityMatch


class TranscriptFragmentRepository(ABC):
    """Port for querying transcript fragments by vector similarity."""

    @abstractmethod
    async def top_similar(
        self,
        room_id: str,
        query_embedding: list[float],
        *,
        min_score: float,
        limit: int,
    ) -> list[SimilarityMatch]:
        """Find the fragments of a room most similar to the query embedding.

        Args:
            room_id: Only fragments of this room are candidates.
            query_embedding: The query vector.
            min_score: Matches with a lower cosine similarity are excluded.
            limit: Maximum number of results.

        Returns:
            Matches ordered by descending similarity. Empty when nothing
            clears the threshold.

        Raises:
            RetrievalError: The underlying datastore query failed.
        """
        ...
