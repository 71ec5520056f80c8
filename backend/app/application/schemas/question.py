"""Pydantic DTOs (Data Transfer Objects) for the room question feature."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class QuestionCreate(BaseModel):
    """Request body for asking a question about a room."""

    question: str = Field(..., min_length=1, examples=["What did the instructor say about recursion?"])

    @field_validator("question")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("question must not be blank")
        return value


class QuestionCreatedResponse(BaseModel):
    """Returned after a question was stored; ``answer`` is null when generation failed."""

    model_config = ConfigDict(populate_by_name=True)

    question_id: str = Field(..., alias="questionId")
    answer: str | None = None


class QuestionResponse(BaseModel):
    """A stored question as listed for a room."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    question: str
    answer: str | None = None
    created_at: datetime = Field(..., alias="createdAt")
