"""Gemini infrastructure package."""

from .gemini_embedding_provider import GeminiEmbeddingProvider
from .gemini_generation_provider import GeminiGenerationProvider

__all__ = ["GeminiEmbeddingProvider", "GeminiGenerationProvider"]
