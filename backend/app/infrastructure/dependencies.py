"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import Settings, get_settings
from app.application.services import AnswerSynthesizer, QuestionService
from app.infrastructure.database.models.audio_chunk import EMBEDDING_DIMENSIONS
from app.infrastructure.database.session import get_db_session
from app.infrastructure.database.repositories import (
    PgTranscriptFragmentRepository,
    SQLAlchemyQuestionRepository,
)
from app.infrastructure.gemini import GeminiEmbeddingProvider, GeminiGenerationProvider


def build_question_service(session: AsyncSession, settings: Settings) -> QuestionService:
    """Build a QuestionService bound to one session, with Gemini as the model provider."""
    embedding_provider = GeminiEmbeddingProvider(
        api_key=settings.gemini_api_key,
        base_url=settings.gemini_base_url,
        model=settings.embedding_model,
        model_dimensions=settings.embedding_dimensions,
        task_type=settings.embedding_task_type,
        timeout=settings.http_timeout,
    )
    if embedding_provider.dimensions != EMBEDDING_DIMENSIONS:
        raise ValueError(
            f"Embedding model produces {embedding_provider.dimensions}-dimensional vectors "
            f"but audio_chunks.embedding stores {EMBEDDING_DIMENSIONS}"
        )

    generation_provider = GeminiGenerationProvider(
        api_key=settings.gemini_api_key,
        base_url=settings.gemini_base_url,
        model=settings.generation_model,
        timeout=settings.http_timeout,
    )

    return QuestionService(
        embedding_provider=embedding_provider,
        fragment_repository=PgTranscriptFragmentRepository(session),
        answer_synthesizer=AnswerSynthesizer(
            generation_provider, language=settings.answer_language
        ),
        question_repository=SQLAlchemyQuestionRepository(session),
        retrieval_policy=settings.retrieval_policy,
        stage_timeout=settings.pipeline_stage_timeout,
    )


async def get_question_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[QuestionService, None]:
    """Provides a QuestionService wired to the request's DB session."""
    yield build_question_service(session, get_settings())
