"""
Answer Evaluator for the Mock Interview service.

Asks the LLM to grade an answer as JSON matching the Evaluation schema:
- score (1-4)
- rating (Poor/Fair/Good/Excellent)
- feedback
- followUp

evaluate() replaces any failure with DEFAULT_EVALUATION and logs it.
"""

from typing import Optional
from langchain_core.language_models import BaseChatModel
from langchain_core.output_parsers import PydanticOutputParser
from langchain_core.prompts import ChatPromptTemplate
from langchain_classic.chains import LLMChain

from .schemas import DEFAULT_EVALUATION, Evaluation
from ..errors import EvaluationError, UpstreamError
from ..llm.groq_service import initialize_llm
from ..utils.logger import setup_logger

logger = setup_logger("answer_evaluator")


class AnswerEvaluator:
    """Evaluates interview answers using LLM structured output."""

    def __init__(self, llm: Optional[BaseChatModel] = None):
        """
        Initialize answer evaluator.

        Args:
            llm: Optional LLM instance. If None, creates new one.
        """
        if llm is None:
            self.llm = initialize_llm()
        else:
            self.llm = llm

        self.parser = PydanticOutputParser(pydantic_object=Evaluation)
        self._evaluation_chain = None

        logger.info("AnswerEvaluator initialized")

    def _get_evaluation_chain(self) -> LLMChain:
        """Get or create answer evaluation chain."""
        if self._evaluation_chain is None:
            prompt = ChatPromptTemplate.from_messages([
                (
                    "system",
                    "Evaluate this technical interview answer:\n"
                    "Question: {question}\n"
                    "Answer: {answer}\n\n"
                    "Respond with JSON containing:\n"
                    "- score (1-4)\n"
                    "- rating (Poor/Fair/Good/Excellent)\n"
                    "- feedback (brief justification)\n"
                    "- followUp (relevant question)\n\n"
                    "{format_instructions}"
                ),
                ("human", "Evaluate this answer strictly following the format."),
            ]).partial(format_instructions=self.parser.get_format_instructions())

            self._evaluation_chain = LLMChain(
                llm=self.llm,
                prompt=prompt,
                output_parser=self.parser,
                output_key="evaluation"
            )
        return self._evaluation_chain

    def try_evaluate(self, question: str, answer: str) -> Evaluation:
        """
        Evaluate an answer, propagating failures.

        Raises:
            EvaluationError: If the LLM call fails or its output does not
                match the Evaluation schema
        """
        try:
            result = self._get_evaluation_chain().invoke({
                "question": question,
                "answer": answer
            })
        except Exception as e:
            raise EvaluationError("Answer evaluation failed", details=str(e)) from e

        evaluation = result.get("evaluation")
        if not isinstance(evaluation, Evaluation):
            raise EvaluationError("LLM returned no evaluation")

        logger.info(f"Evaluated answer, score: {evaluation.score} ({evaluation.rating})")
        return evaluation

    def evaluate(self, question: str, answer: str) -> Evaluation:
        """
        Evaluate an answer, never raising.

        Args:
            question: Question that was asked
            answer: Candidate's answer text

        Returns:
            Parsed Evaluation, or DEFAULT_EVALUATION if anything went wrong
        """
        try:
            return self.try_evaluate(question, answer)
        except UpstreamError as e:
            logger.warning(f"Using fallback evaluation: {e.message} ({e.details})")
            return DEFAULT_EVALUATION.model_copy()
