"""Concrete question repository backed by SQLAlchemy."""

import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.interfaces import QuestionRepository
from app.domain.entities import Question
from app.domain.exceptions import PersistenceError
from app.infrastructure.database.models import QuestionModel

logger = logging.getLogger(__name__)


class SQLAlchemyQuestionRepository(QuestionRepository):
    """Implements the QuestionRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: QuestionModel) -> Question:
        """Map ORM model → domain entity."""
        return Question(
            id=model.id,
            room_id=model.room_id,
            question=model.question,
            answer=model.answer,
            created_at=model.created_at,
        )

    def _to_model(self, entity: Question) -> QuestionModel:
        """Map domain entity → ORM model (for creation)."""
        return QuestionModel(
            room_id=entity.room_id,
            question=entity.question,
            answer=entity.answer,
        )

    async def create(self, question: Question) -> Question | None:
        model = self._to_model(question)
        try:
            self._session.add(model)
            await self._session.flush()
        except SQLAlchemyError as e:
            logger.error("Failed to insert question for room %s: %s", question.room_id, e)
            raise PersistenceError(f"Failed to store question: {e}") from e

        if model.id is None:
            return None
        logger.info("Stored question %s (answered=%s)", model.id, model.answer is not None)
        return self._to_entity(model)

    async def list_by_room(
        self, room_id: str, skip: int = 0, limit: int = 100
    ) -> list[Question]:
        stmt = (
            select(QuestionModel)
            .where(QuestionModel.room_id == room_id)
            .order_by(QuestionModel.created_at.desc())
            .offset(skip)
            .limit(limit)
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]
