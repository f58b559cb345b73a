"""
FastAPI API modules.
"""
from .models import (
    ErrorResponse,
    UploadResponse,
    StartInterviewRequest,
    StartInterviewResponse,
    GenerateQuestionsRequest,
    GenerateQuestionsResponse,
    EvaluateAnswerRequest,
    EvaluateAnswerResponse,
    SessionStatusResponse,
    HealthResponse
)
from .service import InterviewService

__all__ = [
    'ErrorResponse',
    'UploadResponse',
    'StartInterviewRequest',
    'StartInterviewResponse',
    'GenerateQuestionsRequest',
    'GenerateQuestionsResponse',
    'EvaluateAnswerRequest',
    'EvaluateAnswerResponse',
    'SessionStatusResponse',
    'HealthResponse',
    'InterviewService'
]
