"""SQLAlchemy declarative base shared by the questions and audio_chunks tables."""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy ORM models."""
