from .base import Base
from .session import engine, async_session_factory, get_db_session
from .models import AudioChunkModel, QuestionModel

__all__ = [
    "Base",
    "engine",
    "async_session_factory",
    "get_db_session",
    "AudioChunkModel",
    "QuestionModel",
]
