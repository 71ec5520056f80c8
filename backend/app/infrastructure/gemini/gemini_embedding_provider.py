"""Gemini-based embedding provider — calls the ``:embedContent`` endpoint.

Default model: text-embedding-004 (768 dimensions), with the
RETRIEVAL_DOCUMENT task type so question vectors live in the same space as
the stored transcript fragments.
"""

import logging
import math
from typing import Any

import httpx

from app.application.interfaces.embedding_provider import EmbeddingProvider
from app.domain.exceptions import EmbeddingError
from app.infrastructure.gemini._http import DEFAULT_BASE_URL, GeminiHttpMixin

logger = logging.getLogger(__name__)


class GeminiEmbeddingProvider(GeminiHttpMixin, EmbeddingProvider):
    """Infrastructure adapter — generates embeddings via the Gemini REST API."""

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        model: str = "text-embedding-004",
        model_dimensions: int = 768,
        task_type: str | None = "RETRIEVAL_DOCUMENT",
        timeout: float = 120.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._model = model
        self._dimensions = model_dimensions
        self._task_type = task_type
        self._timeout = timeout
        self._http_client = http_client

    @property
    def dimensions(self) -> int:
        return self._dimensions

    def _build_payload(self, text: str) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "model": self._model_path(self._model),
            "content": {"parts": [{"text": text}]},
        }
        if self._task_type:
            payload["taskType"] = self._task_type
        return payload

    async def embed(self, text: str) -> list[float]:
        """Embed a single text, validating the returned vector."""
        if not text or not text.strip():
            raise EmbeddingError("Cannot embed empty text")

        url = self._model_url(self._model, "embedContent")
        client = await self._get_client()
        should_close = self._http_client is None

        try:
            try:
                response = await client.post(
                    url, headers=self._get_headers(), json=self._build_payload(text)
                )
            except httpx.HTTPError as e:
                logger.error("Embedding request to Gemini failed: %s", e)
                raise EmbeddingError(f"Embedding request failed: {e}") from e

            if response.status_code != 200:
                message = self._error_message(response)
                logger.error("Embedding API error %d: %s", response.status_code, message)
                raise EmbeddingError(
                    f"Embedding API returned {response.status_code}: {message}"
                )

            try:
                data = response.json()
            except ValueError as e:
                raise EmbeddingError("Embedding API returned a non-JSON body") from e

            values = self._validate(self._extract_values(data), data)
            logger.info("Generated embedding (model=%s, dims=%d)", self._model, len(values))
            return values

        finally:
            if should_close:
                await client.aclose()

    @staticmethod
    def _extract_values(data: Any) -> Any:
        """Pull the vector out of the single (``embedding``) or batch (``embeddings``) shape."""
        if not isinstance(data, dict):
            return None
        embedding = data.get("embedding")
        if isinstance(embedding, dict):
            return embedding.get("values")
        embeddings = data.get("embeddings")
        if isinstance(embeddings, list) and embeddings and isinstance(embeddings[0], dict):
            return embeddings[0].get("values")
        return None

    def _validate(self, values: Any, data: Any) -> list[float]:
        if not isinstance(values, list) or not values:
            logger.error("Invalid embedding response: %s", str(data)[:500])
            raise EmbeddingError("Embedding API returned no vector")

        vector: list[float] = []
        for value in values:
            if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
                raise EmbeddingError("Embedding vector contains a non-numeric or non-finite element")
            vector.append(float(value))

        if self._dimensions and len(vector) != self._dimensions:
            raise EmbeddingError(
                f"Embedding has {len(vector)} dimensions, expected {self._dimensions}"
            )
        return vector
