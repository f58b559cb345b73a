"""
FastAPI request and response models.

Wire format is camelCase (sessionId, firstQuestion, ...); Python code uses
the snake_case field names.
"""
from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ..interview.schemas import AnswerRecord, Evaluation
from ..utils.config import DEFAULT_NUM_QUESTIONS


class ApiModel(BaseModel):
    """Base model serializing fields as camelCase."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ErrorResponse(ApiModel):
    """Body of every error response."""
    error: str = Field(..., description="Error message")
    details: Optional[Any] = Field(None, description="Additional error information")


class UploadResponse(ApiModel):
    """Response model for document upload."""
    success: bool = Field(True, description="Whether the document was processed")
    keywords: List[str] = Field(..., description="Top keyword stems, most frequent first")
    text_sample: str = Field(..., description="First characters of the extracted text")


class StartInterviewRequest(ApiModel):
    """Request model for starting an interview."""
    position: Optional[str] = Field(None, description="Position the candidate applies for")
    keywords: Optional[List[str]] = Field(None, description="Skills to interview on")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "position": "Backend Engineer",
                "keywords": ["python", "django", "postgr", "docker"]
            }
        }
    )


class StartInterviewResponse(ApiModel):
    """Response model for starting an interview."""
    success: bool = Field(True, description="Whether the session was created")
    session_id: str = Field(..., description="Interview session ID")
    first_question: str = Field(..., description="First interview question")


class GenerateQuestionsRequest(ApiModel):
    """Request model for stateless question generation."""
    position: Optional[str] = Field(None, description="Position the questions target")
    keywords: Optional[List[str]] = Field(None, description="Skills to focus on")
    num_questions: int = Field(
        DEFAULT_NUM_QUESTIONS, ge=1, le=50, description="Number of questions to generate"
    )


class GenerateQuestionsResponse(ApiModel):
    """Response model for stateless question generation."""
    success: bool = Field(True, description="Whether questions were generated")
    questions: List[str] = Field(..., description="Generated questions, one per line of LLM output")


class EvaluateAnswerRequest(ApiModel):
    """Request model for submitting an answer."""
    session_id: Optional[str] = Field(None, description="Interview session ID")
    answer: Optional[str] = Field(None, description="Candidate's answer to the current question")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "sessionId": "3f6c1d2e-8a4b-4c7e-9f10-2b3c4d5e6f70",
                "answer": "A hash map stores key/value pairs in buckets chosen by hashing the key..."
            }
        }
    )


class EvaluateAnswerResponse(ApiModel):
    """Response model for answer evaluation."""
    success: bool = Field(True, description="Always true, even when the fallback evaluation is used")
    evaluation: Evaluation = Field(..., description="Evaluation of the submitted answer")
    is_complete: bool = Field(..., description="Whether the last question has been answered")
    next_question: Optional[str] = Field(None, description="Next question (while in progress)")
    summary: Optional[List[AnswerRecord]] = Field(None, description="All answers (once complete)")


class SessionStatusResponse(ApiModel):
    """Response model for interview status."""
    success: bool = Field(True, description="Whether the session was found")
    session_id: str = Field(..., description="Session ID")
    position: str = Field(..., description="Position being interviewed for")
    keywords: List[str] = Field(..., description="Interview skills")
    status: str = Field(..., description="Session status: active or complete")
    current_question_index: int = Field(..., description="0-based index of the current question")
    current_question: Optional[str] = Field(None, description="Question awaiting an answer (while active)")
    total_questions: int = Field(..., description="Total questions")
    answered_questions: int = Field(..., description="Number of answered questions")
    created_at: datetime = Field(..., description="Session creation time")
    updated_at: datetime = Field(..., description="Last update time")


class HealthResponse(ApiModel):
    """Response model for health check."""
    status: str = Field(..., description="Service status")
    llm_ready: bool = Field(..., description="Whether the LLM collaborator is ready")
    active_sessions: int = Field(..., description="Number of sessions held in memory")
