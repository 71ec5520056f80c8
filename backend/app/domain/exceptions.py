"""Domain-specific exceptions — framework-independent."""


class GenerationProviderError(Exception):
    """Raised when a generation provider returns an error response.

    Provider-agnostic — the Gemini adapter raises it today, any other
    text generation backend can reuse it.
    """

    def __init__(self, provider: str, status_code: int, message: str):
        self.provider = provider
        self.status_code = status_code
        self.message = message
        super().__init__(f"[{provider}] {status_code}: {message}")


class QuestionPipelineError(Exception):
    """Base class for failures of a question pipeline stage."""

    stage = "pipeline"


class EmbeddingError(QuestionPipelineError):
    """The embedding provider returned no usable vector."""

    stage = "embedding"


class RetrievalError(QuestionPipelineError):
    """The similarity store query failed (an empty result is not a failure)."""

    stage = "retrieval"


class SynthesisError(QuestionPipelineError):
    """No answer text could be extracted from the generation provider."""

    stage = "synthesis"


class PersistenceError(QuestionPipelineError):
    """Storing the question did not yield a record."""

    stage = "persistence"
