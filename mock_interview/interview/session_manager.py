"""
Interview Session Manager.

Drives an interview session through its lifecycle:
- start: generate the opening questions and store a new session
- answer: evaluate the current question's answer, then advance or complete
- status: read-only view of a session

States: ACTIVE -> COMPLETE. A session becomes COMPLETE when the answer to its
last question has been recorded; later answers are rejected.
"""

from typing import List, Optional

from .answer_evaluator import AnswerEvaluator
from .question_generator import QuestionGenerator
from .schemas import AnswerOutcome, AnswerRecord, InterviewSession, SessionStatus
from .session_store import SessionStore
from ..errors import (
    NotFoundError,
    QuestionGenerationError,
    SessionCompleteError,
    ValidationError
)
from ..utils.logger import setup_logger

logger = setup_logger("session_manager")


class InterviewSessionManager:
    """
    Manages interview sessions on top of an injected SessionStore.

    Answer submissions hold the store's per-session lock for the whole
    read-evaluate-write cycle, so concurrent answers to one session are
    applied one after the other.
    """

    def __init__(
        self,
        store: SessionStore,
        question_generator: QuestionGenerator,
        answer_evaluator: AnswerEvaluator
    ):
        self.store = store
        self.question_generator = question_generator
        self.answer_evaluator = answer_evaluator

    def start_interview(self, position: Optional[str], keywords: Optional[List[str]]) -> InterviewSession:
        """
        Create a new interview session.

        Args:
            position: Role the candidate interviews for
            keywords: Skills extracted from the résumé

        Returns:
            The stored session, positioned on its first question

        Raises:
            ValidationError: If position or keywords are missing/empty
            QuestionGenerationError: If the LLM fails or returns no questions
        """
        if not position or not position.strip() or not keywords:
            raise ValidationError("Position and keywords are required")

        questions = self.question_generator.generate_initial_questions(position, keywords)
        if not questions:
            raise QuestionGenerationError("LLM returned no questions")

        session = self.store.create(position, keywords, questions)
        logger.info(
            f"Created interview session: {session.session_id} "
            f"for position '{position}' ({len(questions)} questions)"
        )
        return session

    def get_session(self, session_id: str) -> InterviewSession:
        """
        Get session by ID.

        Raises:
            NotFoundError: If the session does not exist
        """
        session = self.store.get(session_id) if session_id else None
        if session is None:
            raise NotFoundError("Session not found")
        return session

    def evaluate_answer(self, session_id: Optional[str], answer: Optional[str]) -> AnswerOutcome:
        """
        Evaluate the answer to the session's current question and advance.

        Args:
            session_id: Interview session ID
            answer: Candidate's answer text

        Returns:
            AnswerOutcome with the evaluation and either the next question
            or, once the last question is answered, the full answer summary

        Raises:
            NotFoundError: If the session does not exist
            SessionCompleteError: If every question was already answered
            ValidationError: If there is no current question or no answer
        """
        with self.store.lock(session_id):
            session = self.get_session(session_id)

            if session.is_complete:
                raise SessionCompleteError("Interview already complete")

            question = session.current_question
            if not question or not answer or not answer.strip():
                raise ValidationError("Missing question or answer")

            evaluation = self.answer_evaluator.evaluate(question, answer)
            session.answers.append(
                AnswerRecord(question=question, answer=answer, evaluation=evaluation)
            )

            if session.is_last_question:
                session.status = SessionStatus.COMPLETE
                outcome = AnswerOutcome(
                    evaluation=evaluation,
                    is_complete=True,
                    summary=list(session.answers)
                )
                logger.info(f"Completed interview session: {session_id}")
            else:
                session.current_question_index += 1
                outcome = AnswerOutcome(
                    evaluation=evaluation,
                    is_complete=False,
                    next_question=session.current_question
                )
                logger.info(
                    f"Session {session_id}: answered question "
                    f"{session.current_question_index}/{len(session.questions)}"
                )

            self.store.update(session)
            return outcome
