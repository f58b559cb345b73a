"""
AI Interview System for the Mock Interview service.

This module provides:
- Question generation from position and résumé keywords
- Answer evaluation and scoring
- Interview session storage and lifecycle management
"""

from .question_generator import QuestionGenerator
from .answer_evaluator import AnswerEvaluator
from .schemas import (
    AnswerOutcome,
    AnswerRecord,
    DEFAULT_EVALUATION,
    Evaluation,
    InterviewSession,
    SessionStatus
)
from .session_store import SessionStore, InMemorySessionStore
from .session_manager import InterviewSessionManager

__all__ = [
    'QuestionGenerator',
    'AnswerEvaluator',
    'AnswerOutcome',
    'AnswerRecord',
    'DEFAULT_EVALUATION',
    'Evaluation',
    'InterviewSession',
    'SessionStatus',
    'SessionStore',
    'InMemorySessionStore',
    'InterviewSessionManager'
]
