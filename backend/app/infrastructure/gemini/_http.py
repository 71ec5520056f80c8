"""Shared request plumbing for the Gemini REST adapters."""

import httpx

DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"


class GeminiHttpMixin:
    """Headers and client handling shared by the Gemini adapters.

    An injected ``httpx.AsyncClient`` is reused and never closed here;
    otherwise a short-lived client is created per call.
    """

    _api_key: str
    _base_url: str
    _timeout: float
    _http_client: httpx.AsyncClient | None

    def _get_headers(self) -> dict[str, str]:
        return {
            "x-goog-api-key": self._api_key,
            "Content-Type": "application/json",
        }

    @staticmethod
    def _model_path(model: str) -> str:
        return model if model.startswith("models/") else f"models/{model}"

    def _model_url(self, model: str, method: str) -> str:
        return f"{self._base_url}/{self._model_path(model)}:{method}"

    async def _get_client(self) -> httpx.AsyncClient:
        if self._http_client is not None:
            return self._http_client
        return httpx.AsyncClient(timeout=self._timeout)

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        """Best-effort error message from a Gemini error body."""
        try:
            error = response.json().get("error", {})
            return error.get("message") or response.text[:500]
        except (ValueError, AttributeError):
            return response.text[:500]
