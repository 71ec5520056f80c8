"""Unit tests for the AnswerSynthesizer and prompt selection."""

import pytest

from app.application.services.answer_synthesizer import AnswerSynthesizer, build_answer_prompt
from app.domain.entities import PromptTemplate
from app.domain.exceptions import GenerationProviderError, SynthesisError
from tests.fakes import EMPTY_IN_ALL_SHAPES, FakeGenerationProvider


# ── Prompt selection ──


def test_context_aware_prompt_when_context_present():
    prompt = build_answer_prompt("What is recursion?", "The instructor said recursion calls itself.")

    assert prompt.template == PromptTemplate.CONTEXT_AWARE
    assert "CONTEXT:" in prompt.text
    assert "The instructor said recursion calls itself." in prompt.text
    assert "What is recursion?" in prompt.text


@pytest.mark.parametrize("context", ["", "   ", "\n\n\t"])
def test_context_free_prompt_when_context_blank(context):
    prompt = build_answer_prompt("What is a closure?", context)

    assert prompt.template == PromptTemplate.CONTEXT_FREE
    assert "CONTEXT:" not in prompt.text
    assert "What is a closure?" in prompt.text
    assert "example or analogy" in prompt.text


def test_prompts_name_the_answer_language():
    aware = build_answer_prompt("q", "ctx", language="Spanish")
    free = build_answer_prompt("q", "", language="Spanish")

    assert "Spanish" in aware.text
    assert "Spanish" in free.text


def test_context_aware_prompt_allows_general_knowledge_fallback():
    prompt = build_answer_prompt("q", "ctx")

    assert "own knowledge" in prompt.text
    assert "professional tone" in prompt.text


# ── Synthesis ──


@pytest.mark.asyncio
async def test_synthesize_sends_selected_prompt_and_returns_text():
    provider = FakeGenerationProvider({"text": "  Recursion is a function calling itself.  "})
    synthesizer = AnswerSynthesizer(provider)

    answer = await synthesizer.synthesize("What is recursion?", "Excerpt about recursion.")

    assert answer == "Recursion is a function calling itself."
    assert len(provider.prompts) == 1
    assert "Excerpt about recursion." in provider.prompts[0]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "response",
    [
        {"text": "X"},
        {"output_text": "X"},
        {"candidates": [{"content": {"parts": [{"text": "X"}]}}]},
    ],
)
async def test_synthesize_handles_every_response_shape(response):
    synthesizer = AnswerSynthesizer(FakeGenerationProvider(response))

    assert await synthesizer.synthesize("q", "") == "X"


@pytest.mark.asyncio
async def test_synthesize_raises_when_all_shapes_empty():
    synthesizer = AnswerSynthesizer(FakeGenerationProvider(EMPTY_IN_ALL_SHAPES))

    with pytest.raises(SynthesisError):
        await synthesizer.synthesize("q", "")


@pytest.mark.asyncio
async def test_provider_error_becomes_synthesis_error():
    error = GenerationProviderError(provider="fake", status_code=429, message="Rate limited")
    synthesizer = AnswerSynthesizer(FakeGenerationProvider(error=error))

    with pytest.raises(SynthesisError) as exc_info:
        await synthesizer.synthesize("q", "ctx")

    assert exc_info.value.__cause__ is error
