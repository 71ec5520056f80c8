"""Context assembly — turns ranked similarity matches into one prompt context block."""

from collections.abc import Sequence

from app.domain.entities import SimilarityMatch

CONTEXT_SEPARATOR = "\n\n"


def assemble_context(matches: Sequence[SimilarityMatch]) -> str:
    """Join match transcriptions, in the given order, separated by a blank line.

    Returns an empty string when there are no matches, which the answer
    synthesizer treats as "no relevant context".
    """
    if not matches:
        return ""
    return CONTEXT_SEPARATOR.join(match.transcription for match in matches)
