"""
Exception hierarchy for the Mock Interview service.

Each error carries the HTTP status it maps to; the FastAPI app renders any
InterviewError as {"error": message, "details": ...}.
"""
from typing import Any, Optional


class InterviewError(Exception):
    """
    Base class for all service errors.

    Attributes:
        message: Human-readable error message (sent to the client)
        details: Optional extra information for the client
    """
    status_code = 500

    def __init__(self, message: str, details: Optional[Any] = None):
        self.message = message
        self.details = details
        super().__init__(message)


class ValidationError(InterviewError):
    """Missing or invalid request fields."""
    status_code = 400


class SessionCompleteError(ValidationError):
    """Answer submitted to a session that has no questions left."""
    status_code = 409


class NotFoundError(InterviewError):
    """Unknown interview session."""
    status_code = 404


class UpstreamError(InterviewError):
    """Failure of an external collaborator (LLM provider, PDF parser)."""
    status_code = 500


class DocumentParseError(UpstreamError):
    """The uploaded document could not be turned into text."""


class KeywordExtractionError(UpstreamError):
    """Keyword extraction resources (NLTK corpora) are unavailable."""


class QuestionGenerationError(UpstreamError):
    """The LLM failed to produce interview questions."""


class EvaluationError(UpstreamError):
    """The LLM failed to produce a valid answer evaluation."""


class PayloadTooLargeError(ValidationError):
    """Uploaded document exceeds the size limit."""
    status_code = 413


class ServiceUnavailableError(InterviewError):
    """LLM-backed components are not initialized."""
    status_code = 503
