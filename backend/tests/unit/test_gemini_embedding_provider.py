"""Unit tests for the GeminiEmbeddingProvider."""

import json

import httpx
import pytest

from app.domain.exceptions import EmbeddingError
from app.infrastructure.gemini import GeminiEmbeddingProvider


# ── Helpers ──


def _make_transport(
    *,
    status_code: int = 200,
    json_body: dict | None = None,
    raw_body: bytes | None = None,
    captured: list[httpx.Request] | None = None,
) -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        if captured is not None:
            captured.append(request)
        if raw_body is not None:
            return httpx.Response(status_code, content=raw_body)
        return httpx.Response(status_code, json=json_body or {})

    return httpx.MockTransport(handler)


def _provider(transport: httpx.MockTransport, dims: int = 4) -> GeminiEmbeddingProvider:
    return GeminiEmbeddingProvider(
        api_key="test-key",
        model_dimensions=dims,
        http_client=httpx.AsyncClient(transport=transport),
    )


# ── Tests ──


@pytest.mark.asyncio
async def test_embed_returns_vector_and_sends_expected_request():
    captured: list[httpx.Request] = []
    transport = _make_transport(
        json_body={"embedding": {"values": [0.1, -0.2, 0.3, 0]}}, captured=captured
    )

    vector = await _provider(transport).embed("What is a closure?")

    assert vector == [0.1, -0.2, 0.3, 0.0]
    request = captured[0]
    assert request.url.path.endswith("/models/text-embedding-004:embedContent")
    assert request.headers["x-goog-api-key"] == "test-key"
    body = json.loads(request.content)
    assert body["content"] == {"parts": [{"text": "What is a closure?"}]}
    assert body["taskType"] == "RETRIEVAL_DOCUMENT"
    assert body["model"] == "models/text-embedding-004"


@pytest.mark.asyncio
async def test_embed_accepts_batch_response_shape():
    transport = _make_transport(json_body={"embeddings": [{"values": [1, 2, 3, 4]}]})

    assert await _provider(transport).embed("hi") == [1.0, 2.0, 3.0, 4.0]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "body",
    [
        {},
        {"embedding": {}},
        {"embedding": {"values": []}},
        {"embeddings": []},
        {"embedding": {"values": ["a", "b", "c", "d"]}},
    ],
)
async def test_embed_rejects_malformed_responses(body):
    transport = _make_transport(json_body=body)

    with pytest.raises(EmbeddingError):
        await _provider(transport).embed("hi")


@pytest.mark.asyncio
async def test_embed_rejects_non_finite_values():
    transport = _make_transport(raw_body=b'{"embedding": {"values": [0.1, NaN, 0.3, 0.4]}}')

    with pytest.raises(EmbeddingError, match="non-finite"):
        await _provider(transport).embed("hi")


@pytest.mark.asyncio
async def test_embed_rejects_wrong_dimensionality():
    transport = _make_transport(json_body={"embedding": {"values": [0.1, 0.2]}})

    with pytest.raises(EmbeddingError, match="expected 4"):
        await _provider(transport).embed("hi")


@pytest.mark.asyncio
async def test_embed_error_status_raises():
    transport = _make_transport(
        status_code=403, json_body={"error": {"code": 403, "message": "API key invalid"}}
    )

    with pytest.raises(EmbeddingError, match="API key invalid"):
        await _provider(transport).embed("hi")


@pytest.mark.asyncio
async def test_embed_transport_failure_raises():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    provider = _provider(httpx.MockTransport(handler))

    with pytest.raises(EmbeddingError):
        await provider.embed("hi")


@pytest.mark.asyncio
async def test_embed_rejects_empty_text_without_calling_provider():
    captured: list[httpx.Request] = []
    transport = _make_transport(json_body={"embedding": {"values": [1, 2, 3, 4]}}, captured=captured)

    with pytest.raises(EmbeddingError):
        await _provider(transport).embed("   ")

    assert captured == []
