from .question import QuestionCreate, QuestionCreatedResponse, QuestionResponse

__all__ = [
    "QuestionCreate",
    "QuestionCreatedResponse",
    "QuestionResponse",
]
