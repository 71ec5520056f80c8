"""Room question endpoints — ask a question about a recorded session, list questions."""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status

from app.application.schemas import (
    QuestionCreate,
    QuestionCreatedResponse,
    QuestionResponse,
)
from app.application.services import QuestionService
from app.domain.exceptions import EmbeddingError, PersistenceError, RetrievalError
from app.infrastructure.dependencies import get_question_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/rooms/{room_id}/questions", tags=["Questions"])


@router.post("", response_model=QuestionCreatedResponse, status_code=status.HTTP_201_CREATED)
async def create_question(
    room_id: UUID,
    data: QuestionCreate,
    service: QuestionService = Depends(get_question_service),
) -> QuestionCreatedResponse:
    """Answer a question using the room's transcripts as context, and store it.

    Answer generation failures are not request failures: the question is
    stored and returned with ``answer: null``.
    """
    logger.info("New question for room %s", room_id)
    try:
        result = await service.create_question(str(room_id), data.question)
    except EmbeddingError as e:
        logger.error("Embedding failed: %s", e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to generate embeddings.",
        )
    except RetrievalError as e:
        logger.error("Retrieval failed: %s", e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to search the room transcripts.",
        )
    except PersistenceError as e:
        logger.error("Persistence failed: %s", e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create question.",
        )
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))

    return QuestionCreatedResponse(question_id=result.question_id, answer=result.answer)


@router.get("", response_model=list[QuestionResponse])
async def list_questions(
    room_id: UUID,
    skip: int = 0,
    limit: int = 100,
    service: QuestionService = Depends(get_question_service),
) -> list[QuestionResponse]:
    """List a room's questions, newest first."""
    questions = await service.list_questions(str(room_id), skip=skip, limit=limit)
    return [
        QuestionResponse(
            id=q.id,
            question=q.question,
            answer=q.answer,
            created_at=q.created_at,
        )
        for q in questions
    ]
