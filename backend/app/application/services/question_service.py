"""Question use case — the retrieval-augmented answer pipeline.

Drives a question through its stages, sequentially:
1. EMBEDDING     — question text → query vector
2. RETRIEVING    — room-scoped similarity search with the retrieval policy
3. ASSEMBLING    — matches → context block (possibly empty)
4. SYNTHESIZING  — question + context → answer text
5. PERSISTING    — store (room, question, answer-or-null)

Embedding, retrieval and persistence failures abort the request. A synthesis
failure does not: the question is stored with a null answer.
"""

import asyncio
import logging
import time
from collections.abc import Awaitable
from typing import TypeVar

from app.application.interfaces.embedding_provider import EmbeddingProvider
from app.application.interfaces.question_repository import QuestionRepository
from app.application.interfaces.transcript_fragment_repository import (
    TranscriptFragmentRepository,
)
from app.application.services.answer_synthesizer import AnswerSynthesizer
from app.application.services.context_assembler import assemble_context
from app.domain.entities import (
    PipelineState,
    Question,
    QuestionResult,
    RetrievalPolicy,
    SimilarityMatch,
)
from app.domain.exceptions import (
    EmbeddingError,
    PersistenceError,
    QuestionPipelineError,
    RetrievalError,
    SynthesisError,
)
from app.infrastructure.logging.colored_logger import PipelineLogger, PipelineStage

logger = logging.getLogger(__name__)
plog = PipelineLogger("QuestionPipeline")

T = TypeVar("T")


class QuestionService:
    """Application service — orchestrates embedding, retrieval, synthesis and storage.

    All collaborators are injected, so tests can swap any of them for fakes.
    ``stage_timeout`` (seconds) bounds every awaited stage; ``None`` disables it.
    """

    def __init__(
        self,
        embedding_provider: EmbeddingProvider,
        fragment_repository: TranscriptFragmentRepository,
        answer_synthesizer: AnswerSynthesizer,
        question_repository: QuestionRepository,
        *,
        retrieval_policy: RetrievalPolicy | None = None,
        stage_timeout: float | None = None,
    ):
        self._embedding_provider = embedding_provider
        self._fragment_repo = fragment_repository
        self._synthesizer = answer_synthesizer
        self._question_repo = question_repository
        self._policy = retrieval_policy or RetrievalPolicy()
        self._stage_timeout = stage_timeout
        self._history: list[PipelineState] = []

    @property
    def history(self) -> list[PipelineState]:
        """States visited by the most recent ``create_question`` call."""
        return list(self._history)

    async def create_question(self, room_id: str, question_text: str) -> QuestionResult:
        """Answer a question about a room and persist it.

        Raises:
            ValueError: The question text is blank.
            EmbeddingError: The question could not be embedded.
            RetrievalError: The similarity search failed.
            PersistenceError: The question could not be stored.
        """
        if not question_text or not question_text.strip():
            raise ValueError("Question text must not be empty")

        self._history = []
        start = time.monotonic()
        plog.separator(f"Question for room {room_id}")

        # 1. Embedding
        self._enter(PipelineState.EMBEDDING)
        with plog.timed_step(PipelineStage.EMBEDDING, "Embedding question", chars=len(question_text)):
            query_embedding = await self._bounded(
                self._embedding_provider.embed(question_text), EmbeddingError
            )
        plog.detail("Query vector ready", dims=len(query_embedding))

        # 2. Retrieval
        self._enter(PipelineState.RETRIEVING)
        with plog.timed_step(
            PipelineStage.RETRIEVAL,
            "Searching similar transcript fragments",
            min_score=self._policy.min_score,
            limit=self._policy.limit,
        ):
            matches = await self._bounded(
                self._fragment_repo.top_similar(
                    room_id,
                    query_embedding,
                    min_score=self._policy.min_score,
                    limit=self._policy.limit,
                ),
                RetrievalError,
            )
        self._log_matches(matches)

        # 3. Assembly
        self._enter(PipelineState.ASSEMBLING)
        context = assemble_context(matches)
        if context:
            plog.step_complete(PipelineStage.ASSEMBLY, "Context assembled", chars=len(context))
        else:
            plog.step_warning(
                PipelineStage.ASSEMBLY, "No similar fragments found — answering without context"
            )

        # 4. Synthesis (failure downgrades to a null answer)
        self._enter(PipelineState.SYNTHESIZING)
        answer: str | None
        try:
            with plog.timed_step(PipelineStage.SYNTHESIS, "Generating answer"):
                answer = await self._bounded(
                    self._synthesizer.synthesize(question_text, context), SynthesisError
                )
        except SynthesisError as e:
            self._enter(PipelineState.ANSWER_FAILED)
            logger.warning("Answer synthesis failed, storing question without answer: %s", e)
            answer = None

        # 5. Persistence
        self._enter(PipelineState.PERSISTING)
        with plog.timed_step(PipelineStage.PERSISTENCE, "Storing question"):
            stored = await self._bounded(
                self._question_repo.create(
                    Question(room_id=room_id, question=question_text, answer=answer)
                ),
                PersistenceError,
            )
            if stored is None or stored.id is None:
                raise PersistenceError("Failed to create question: no record returned")

        self._enter(PipelineState.DONE)
        duration_ms = int((time.monotonic() - start) * 1000)
        plog.step_complete(
            PipelineStage.COMPLETE,
            "Question answered" if answer is not None else "Question stored without answer",
            question_id=stored.id,
            duration_ms=duration_ms,
        )
        return QuestionResult(question_id=stored.id, answer=answer)

    async def list_questions(self, room_id: str, skip: int = 0, limit: int = 100) -> list[Question]:
        """Return a room's questions, newest first."""
        return await self._question_repo.list_by_room(room_id, skip=skip, limit=limit)

    # ── Helpers ──────────────────────────────────────────────────────

    def _enter(self, state: PipelineState) -> None:
        self._history.append(state)
        logger.debug("Question pipeline → %s", state.value)

    async def _bounded(
        self, awaitable: Awaitable[T], error_cls: type[QuestionPipelineError]
    ) -> T:
        """Await a stage, mapping a timeout to the stage's error type."""
        if self._stage_timeout is None:
            return await awaitable
        try:
            return await asyncio.wait_for(awaitable, timeout=self._stage_timeout)
        except asyncio.TimeoutError as e:
            raise error_cls(
                f"{error_cls.stage} stage timed out after {self._stage_timeout:.1f}s"
            ) from e

    @staticmethod
    def _log_matches(matches: list[SimilarityMatch]) -> None:
        plog.detail(f"{len(matches)} similar fragment(s) found")
        for match in matches:
            plog.detail("Match", fragment_id=match.fragment_id, similarity=f"{match.similarity:.3f}")
