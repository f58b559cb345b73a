"""
Domain models for interview sessions and answer evaluations.
"""
from datetime import datetime
from enum import Enum
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class Evaluation(BaseModel):
    """LLM assessment of one answer. Also the schema the LLM is asked to emit."""
    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    score: int = Field(..., ge=1, le=4, description="Score from 1 (poor) to 4 (excellent)")
    rating: Literal["Poor", "Fair", "Good", "Excellent"] = Field(
        ..., description="Rating label matching the score"
    )
    feedback: str = Field(..., min_length=1, description="Brief justification of the score")
    follow_up: str = Field(
        ..., alias="followUp", min_length=1, description="Relevant follow-up question"
    )


DEFAULT_EVALUATION = Evaluation(
    score=2,
    rating="Fair",
    feedback="The answer showed basic understanding but needs improvement",
    follow_up="Can you explain this concept in more detail?"
)


class AnswerRecord(BaseModel):
    """One answered question with its evaluation."""
    question: str
    answer: str
    evaluation: Evaluation


class SessionStatus(str, Enum):
    ACTIVE = "active"
    COMPLETE = "complete"


class InterviewSession(BaseModel):
    """Server-held state of one candidate's progress through a question list."""
    session_id: str
    position: str
    keywords: List[str]
    questions: List[str]
    current_question_index: int = 0
    answers: List[AnswerRecord] = Field(default_factory=list)
    status: SessionStatus = SessionStatus.ACTIVE
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @property
    def current_question(self) -> Optional[str]:
        if 0 <= self.current_question_index < len(self.questions):
            return self.questions[self.current_question_index]
        return None

    @property
    def is_last_question(self) -> bool:
        return self.current_question_index >= len(self.questions) - 1

    @property
    def is_complete(self) -> bool:
        return self.status == SessionStatus.COMPLETE


class AnswerOutcome(BaseModel):
    """Result of recording an answer: its evaluation and where the session stands."""
    evaluation: Evaluation
    is_complete: bool
    next_question: Optional[str] = None
    summary: Optional[List[AnswerRecord]] = None
