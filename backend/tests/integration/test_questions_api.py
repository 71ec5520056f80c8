"""API tests for the room question endpoints, with the pipeline wired to fakes."""

import pytest
from httpx import ASGITransport, AsyncClient

from app.application.services import AnswerSynthesizer, QuestionService
from app.domain.entities import SimilarityMatch
from app.domain.exceptions import EmbeddingError, RetrievalError
from app.infrastructure.dependencies import get_question_service
from app.main import app
from tests.fakes import (
    EMPTY_IN_ALL_SHAPES,
    FakeEmbeddingProvider,
    FakeFragmentRepository,
    FakeGenerationProvider,
    FakeQuestionRepository,
)

ROOM_ID = "0b5d3a59-3d5e-4f33-a6a7-7d1cb0d2d6a4"


@pytest.fixture
def questions() -> FakeQuestionRepository:
    return FakeQuestionRepository()


@pytest.fixture
def wire_service(questions):
    """Override the QuestionService dependency; returns a function that installs fakes."""

    def _wire(
        *,
        embedding: FakeEmbeddingProvider | None = None,
        generation: FakeGenerationProvider | None = None,
        fragments: FakeFragmentRepository | None = None,
        question_repository: FakeQuestionRepository | None = None,
    ) -> None:
        service = QuestionService(
            embedding_provider=embedding or FakeEmbeddingProvider(),
            fragment_repository=fragments or FakeFragmentRepository(),
            answer_synthesizer=AnswerSynthesizer(generation or FakeGenerationProvider()),
            question_repository=question_repository or questions,
        )
        app.dependency_overrides[get_question_service] = lambda: service

    yield _wire
    app.dependency_overrides.pop(get_question_service, None)


async def _post(path: str, payload: dict):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        return await client.post(path, json=payload)


async def _get(path: str):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        return await client.get(path)


@pytest.mark.asyncio
async def test_create_question_returns_201_with_answer(wire_service, questions):
    generation = FakeGenerationProvider({"text": "Recursion is a function calling itself."})
    wire_service(
        generation=generation,
        fragments=FakeFragmentRepository(
            [SimilarityMatch(fragment_id="f1", transcription="Recursion excerpt.", similarity=0.82)]
        ),
    )

    response = await _post(
        f"/rooms/{ROOM_ID}/questions",
        {"question": "What did the instructor say about recursion?"},
    )

    assert response.status_code == 201
    data = response.json()
    assert data == {"questionId": "question-1", "answer": "Recursion is a function calling itself."}
    assert questions.questions[0].room_id == ROOM_ID
    assert "Recursion excerpt." in generation.prompts[0]


@pytest.mark.asyncio
async def test_create_question_with_failed_answer_still_returns_201(wire_service, questions):
    wire_service(generation=FakeGenerationProvider(EMPTY_IN_ALL_SHAPES))

    response = await _post(f"/rooms/{ROOM_ID}/questions", {"question": "What is a closure?"})

    assert response.status_code == 201
    assert response.json() == {"questionId": "question-1", "answer": None}
    assert len(questions.questions) == 1
    assert questions.questions[0].answer is None


@pytest.mark.asyncio
async def test_embedding_failure_returns_500_and_stores_nothing(wire_service, questions):
    wire_service(embedding=FakeEmbeddingProvider(error=EmbeddingError("no vector")))

    response = await _post(f"/rooms/{ROOM_ID}/questions", {"question": "What is a closure?"})

    assert response.status_code == 500
    assert response.json()["detail"] == "Failed to generate embeddings."
    assert questions.questions == []


@pytest.mark.asyncio
async def test_retrieval_failure_returns_500_and_stores_nothing(wire_service, questions):
    generation = FakeGenerationProvider()
    wire_service(
        generation=generation,
        fragments=FakeFragmentRepository(error=RetrievalError("connection lost")),
    )

    response = await _post(f"/rooms/{ROOM_ID}/questions", {"question": "What is a closure?"})

    assert response.status_code == 500
    assert response.json()["detail"] == "Failed to search the room transcripts."
    assert questions.questions == []
    assert generation.prompts == []


@pytest.mark.asyncio
async def test_unsaved_question_returns_500(wire_service):
    wire_service(question_repository=FakeQuestionRepository(return_none=True))

    response = await _post(f"/rooms/{ROOM_ID}/questions", {"question": "What is a closure?"})

    assert response.status_code == 500
    assert response.json()["detail"] == "Failed to create question."


@pytest.mark.asyncio
@pytest.mark.parametrize("payload", [{}, {"question": ""}, {"question": "   "}, {"question": 3}])
async def test_invalid_body_returns_422(wire_service, questions, payload):
    wire_service()

    response = await _post(f"/rooms/{ROOM_ID}/questions", payload)

    assert response.status_code == 422
    assert questions.questions == []


@pytest.mark.asyncio
async def test_non_uuid_room_returns_422(wire_service):
    wire_service()

    response = await _post("/rooms/not-a-room/questions", {"question": "What is a closure?"})

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_list_questions_returns_room_questions(wire_service):
    wire_service()
    await _post(f"/rooms/{ROOM_ID}/questions", {"question": "What is a closure?"})

    response = await _get(f"/rooms/{ROOM_ID}/questions")

    assert response.status_code == 200
    data = response.json()
    assert len(data) == 1
    assert data[0]["id"] == "question-1"
    assert data[0]["question"] == "What is a closure?"
    assert "createdAt" in data[0]
