from .embedding_provider import EmbeddingProvider
from .generation_provider import GenerationProvider
from .question_repository import QuestionRepository
from .transcript_fragment_repository import TranscriptFragmentRepository

__all__ = [
    "EmbeddingProvider",
    "GenerationProvider",
    "QuestionRepository",
    "TranscriptFragmentRepository",
]
