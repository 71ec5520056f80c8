"""Abstract interface (port) for embedding generation."""

from abc import ABC, abstractmethod


class EmbeddingProvider(ABC):
    """Port for turning text into embedding vectors — implemented in the infrastructure layer."""

    @abstractmethod
    async def embed(self, text: str) -> list[float]:
        """Generate the embedding vector for a single text.

        Args:
            text: Non-empty text to embed.

        Returns:
            A vector of finite floats whose length equals ``dimensions``.

        Raises:
            EmbeddingError: The provider failed or returned a malformed vector.
        """
        ...

    @property
    @abstractmethod
    def dimensions(self) -> int:
        """Return the dimensionality of the embedding vectors produced by this provider."""
        ...
