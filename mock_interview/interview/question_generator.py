"""
Question Generator for the Mock Interview service.

Generates technical interview questions for a position from the candidate's
résumé keywords. Two prompt variants are used:
- initial: the 5-6 question set that opens an interview session
- batch: a caller-chosen number of questions (stateless endpoint)

The LLM answers with a numbered list; each non-blank line becomes a question.
"""

from typing import List, Optional
from langchain_core.language_models import BaseChatModel
from langchain_core.prompts import ChatPromptTemplate
from langchain_classic.chains import LLMChain

from ..errors import QuestionGenerationError
from ..llm.groq_service import initialize_llm
from ..utils.config import DEFAULT_NUM_QUESTIONS
from ..utils.logger import setup_logger

logger = setup_logger("question_generator")

GENERATE_TRIGGER = "Generate the questions now."


class QuestionGenerator:
    """
    Generates interview questions using LLM.

    No check is made that the returned lines are well-formed questions or
    that their count matches the request.
    """

    def __init__(self, llm: Optional[BaseChatModel] = None):
        """
        Initialize question generator.

        Args:
            llm: Optional LLM instance. If None, creates new one.
        """
        if llm is None:
            self.llm = initialize_llm()
        else:
            self.llm = llm

        self._initial_chain = None
        self._batch_chain = None

        logger.info("QuestionGenerator initialized")

    def _get_initial_chain(self) -> LLMChain:
        """Get or create the chain for the opening question set."""
        if self._initial_chain is None:
            prompt = ChatPromptTemplate.from_messages([
                (
                    "system",
                    "You are an expert technical interviewer for {position} positions.\n"
                    "Skills: {keywords}\n\n"
                    "Generate 5-6 technical interview questions that:\n"
                    "1. Cover both fundamentals and advanced topics\n"
                    "2. Progress from easy to hard\n"
                    "3. Include at least 1 system design question\n"
                    "4. Relate to the mentioned skills\n\n"
                    "Format as a numbered list. Do NOT include any markdown."
                ),
                ("human", GENERATE_TRIGGER),
            ])
            self._initial_chain = LLMChain(
                llm=self.llm,
                prompt=prompt,
                output_key="questions"
            )
        return self._initial_chain

    def _get_batch_chain(self) -> LLMChain:
        """Get or create the chain for a fixed number of questions."""
        if self._batch_chain is None:
            prompt = ChatPromptTemplate.from_messages([
                (
                    "system",
                    "Generate {num_questions} technical interview questions for a {position} role.\n"
                    "Focus on these skills: {keywords}\n\n"
                    "Format as a numbered list. Include a mix of:\n"
                    "- Conceptual questions\n"
                    "- Practical problems\n"
                    "- System design challenges"
                ),
                ("human", GENERATE_TRIGGER),
            ])
            self._batch_chain = LLMChain(
                llm=self.llm,
                prompt=prompt,
                output_key="questions"
            )
        return self._batch_chain

    def generate_initial_questions(self, position: str, keywords: List[str]) -> List[str]:
        """
        Generate the question set that opens an interview.

        Args:
            position: Role the candidate interviews for
            keywords: Skills extracted from the résumé

        Returns:
            List of question lines (usually 5-6)

        Raises:
            QuestionGenerationError: If the LLM call fails
        """
        return self._run(
            self._get_initial_chain(),
            {"position": position, "keywords": ", ".join(keywords)}
        )

    def generate_questions(
        self,
        position: str,
        keywords: List[str],
        num_questions: int = DEFAULT_NUM_QUESTIONS
    ) -> List[str]:
        """
        Generate a batch of interview questions.

        Args:
            position: Role the questions target
            keywords: Skills to focus on
            num_questions: Number of questions requested (default: 5)

        Returns:
            List of question lines

        Raises:
            QuestionGenerationError: If the LLM call fails
        """
        return self._run(
            self._get_batch_chain(),
            {
                "position": position,
                "keywords": ", ".join(keywords),
                "num_questions": num_questions
            }
        )

    def _run(self, chain: LLMChain, inputs: dict) -> List[str]:
        try:
            result = chain.invoke(inputs)
        except Exception as e:
            logger.error(f"Error generating questions: {e}")
            raise QuestionGenerationError(str(e)) from e

        questions = self._parse_questions(result.get("questions", ""))
        logger.info(f"Generated {len(questions)} questions for position '{inputs['position']}'")
        return questions

    @staticmethod
    def _parse_questions(text: str) -> List[str]:
        """Split LLM output into non-blank lines."""
        return [line.strip() for line in text.splitlines() if line.strip()]
