from .question_repository import SQLAlchemyQuestionRepository
from .transcript_fragment_repository import PgTranscriptFragmentRepository

__all__ = [
    "SQLAlchemyQuestionRepository",
    "PgTranscriptFragmentRepository",
]
