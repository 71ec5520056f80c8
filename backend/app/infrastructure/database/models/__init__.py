from .audio_chunk import AudioChunkModel
from .question import QuestionModel

__all__ = [
    "AudioChunkModel",
    "QuestionModel",
]
