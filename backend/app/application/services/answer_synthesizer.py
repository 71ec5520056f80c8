"""Answer synthesis — builds the answer prompt and extracts the generated text.

Two prompt variants exist:
- CONTEXT_AWARE: the question is grounded on transcript excerpts of the room,
  with permission to fall back to general knowledge.
- CONTEXT_FREE: no excerpt cleared the similarity threshold, so the model
  answers from general knowledge alone.
"""

import json
import logging

from app.application.interfaces.generation_provider import GenerationProvider
from app.application.services.response_decoder import decode_response
from app.domain.entities import AnswerPrompt, PromptTemplate
from app.domain.exceptions import GenerationProviderError, SynthesisError

logger = logging.getLogger(__name__)

DEFAULT_ANSWER_LANGUAGE = "Brazilian Portuguese"

_CONTEXT_AWARE_TEMPLATE = """\
You are an expert assistant. Use the context below to answer the question \
clearly and precisely, in {language}.

CONTEXT:
{context}

QUESTION:
{question}

INSTRUCTIONS:
- Use the context above whenever it is relevant;
- If the context does not contain the answer, answer from your own knowledge;
- Be didactic and direct, and keep a professional tone;
- Answer in {language}."""

_CONTEXT_FREE_TEMPLATE = """\
You are an expert assistant in technology and programming.
Answer the question below clearly, didactically and correctly, in {language}.

QUESTION:
{question}

INSTRUCTIONS:
- Be direct and objective;
- Avoid vague answers such as "there is not enough information" unless the \
question genuinely cannot be answered;
- If possible, give a short example or analogy;
- Answer in {language}."""


def build_answer_prompt(
    question: str, context: str, *, language: str = DEFAULT_ANSWER_LANGUAGE
) -> AnswerPrompt:
    """Render the context-aware prompt iff the trimmed context is non-empty."""
    if context.strip():
        text = _CONTEXT_AWARE_TEMPLATE.format(
            language=language, context=context.strip(), question=question.strip()
        )
        return AnswerPrompt(template=PromptTemplate.CONTEXT_AWARE, text=text)

    text = _CONTEXT_FREE_TEMPLATE.format(language=language, question=question.strip())
    return AnswerPrompt(template=PromptTemplate.CONTEXT_FREE, text=text)


class AnswerSynthesizer:
    """Application service — turns (question, context) into answer text.

    Depends on a GenerationProvider via dependency injection; the provider's
    raw response is decoded by ``decode_response``.
    """

    def __init__(
        self,
        generation_provider: GenerationProvider,
        *,
        language: str = DEFAULT_ANSWER_LANGUAGE,
    ):
        self._provider = generation_provider
        self._language = language

    async def synthesize(self, question: str, context: str) -> str:
        """Generate an answer for the question, grounded on the context when present.

        Raises:
            SynthesisError: The provider failed, or no recognised response
                shape contained any text.
        """
        prompt = build_answer_prompt(question, context, language=self._language)
        logger.info(
            "Generating answer with %s prompt via %s",
            prompt.template.value,
            self._provider.provider_name,
        )

        try:
            payload = await self._provider.generate(prompt.text)
        except GenerationProviderError as e:
            raise SynthesisError(f"Generation provider failed: {e}") from e

        logger.debug("Raw generation response: %s", json.dumps(payload, default=str)[:2000])

        decoded = decode_response(payload)
        if decoded is None:
            logger.error(
                "Empty or unrecognised generation response: %s",
                json.dumps(payload, default=str)[:500],
            )
            raise SynthesisError("Generation provider returned no answer text")

        logger.debug("Answer extracted from %s shape", decoded.shape.value)
        return decoded.text
