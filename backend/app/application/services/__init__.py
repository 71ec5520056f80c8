from .answer_synthesizer import AnswerSynthesizer, build_answer_prompt
from .context_assembler import assemble_context
from .question_service import QuestionService
from .response_decoder import decode_response

__all__ = [
    "AnswerSynthesizer",
    "QuestionService",
    "assemble_context",
    "build_answer_prompt",
    "decode_response",
]
