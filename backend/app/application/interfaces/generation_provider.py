"""Abstract generation provider interface — port for text generation adapters."""

from abc import ABC, abstractmethod
from typing import Any


class GenerationProvider(ABC):
    """Port — defines what the application layer needs from a text generation model."""

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Unique name identifying this provider (e.g. 'gemini')."""
        ...

    @abstractmethod
    async def generate(self, prompt: str) -> dict[str, Any]:
        """Send a single user prompt and return the raw response body.

        The body is returned undecoded; its shape is not guaranteed stable
        across providers or API versions, so callers decode it themselves.

        Raises:
            GenerationProviderError: The provider answered with an error status.
        """
        ...
