from .question import PipelineState, Question, QuestionResult
from .transcript_fragment import RetrievalPolicy, SimilarityMatch, TranscriptFragment
from .generation import AnswerPrompt, DecodedResponse, PromptTemplate, ResponseShape

__all__ = [
    "Question",
    "QuestionResult",
    "PipelineState",
    "TranscriptFragment",
    "SimilarityMatch",
    "RetrievalPolicy",
    "AnswerPrompt",
    "DecodedResponse",
    "PromptTemplate",
    "ResponseShape",
]
