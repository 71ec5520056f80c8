"""Gemini generation client — implements the GenerationProvider interface.

Sends a single role-tagged user message to ``:generateContent`` and returns
the raw JSON body; answer extraction is left to the application layer.
"""

import logging
from typing import Any

import httpx

from app.application.interfaces.generation_provider import GenerationProvider
from app.domain.exceptions import GenerationProviderError
from app.infrastructure.gemini._http import DEFAULT_BASE_URL, GeminiHttpMixin

logger = logging.getLogger(__name__)

# Status reported when the request never produced an HTTP response.
_TRANSPORT_ERROR_STATUS = 503


class GeminiGenerationProvider(GeminiHttpMixin, GenerationProvider):
    """Infrastructure adapter — connects to the Gemini generateContent API."""

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        model: str = "gemini-2.5-flash",
        timeout: float = 120.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._model = model
        self._timeout = timeout
        self._http_client = http_client

    @property
    def provider_name(self) -> str:
        return "gemini"

    @staticmethod
    def _build_payload(prompt: str) -> dict[str, Any]:
        return {"contents": [{"role": "user", "parts": [{"text": prompt}]}]}

    async def generate(self, prompt: str) -> dict[str, Any]:
        """Send the prompt and return the response body as a dict."""
        url = self._model_url(self._model, "generateContent")
        client = await self._get_client()
        should_close = self._http_client is None

        try:
            try:
                response = await client.post(
                    url, headers=self._get_headers(), json=self._build_payload(prompt)
                )
            except httpx.HTTPError as e:
                raise GenerationProviderError(
                    self.provider_name, _TRANSPORT_ERROR_STATUS, f"Request failed: {e}"
                ) from e

            if response.status_code != 200:
                raise GenerationProviderError(
                    self.provider_name, response.status_code, self._error_message(response)
                )

            try:
                data = response.json()
            except ValueError as e:
                raise GenerationProviderError(
                    self.provider_name, response.status_code, "Response body is not JSON"
                ) from e

            if not isinstance(data, dict):
                logger.warning("Unexpected generation response type: %s", type(data).__name__)
                return {}

            usage = data.get("usageMetadata")
            if not isinstance(usage, dict):
                usage = {}
            logger.info(
                "Gemini generation done (model=%s, prompt_tokens=%s, output_tokens=%s)",
                self._model,
                usage.get("promptTokenCount"),
                usage.get("candidatesTokenCount"),
            )
            return data

        finally:
            if should_close:
                await client.aclose()
