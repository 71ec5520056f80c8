"""Abstract repository interface (port) for question persistence."""

from abc import ABC, abstractmethod

from app.domain.entities import Question


class QuestionRepository(ABC):
    """Port for question persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def create(self, question: Question) -> Question | None:
        """Persist a new question and return it with its assigned ID.

        Returns ``None`` when the datastore did not hand back a stored row.
        """
        ...

    @abstractmethod
    async def list_by_room(
        self, room_id: str, skip: int = 0, limit: int = 100
    ) -> list[Question]:
        """Retrieve a room's questions, newest first."""
        ...
