"""
FastAPI application for the Mock Interview service.

Endpoints:
- POST /upload - Extract keywords from an uploaded PDF résumé
- POST /start-interview - Start an interview session
- POST /api/generate-questions - Generate questions without a session
- POST /evaluate-answer - Evaluate the current answer and advance the session
- GET /sessions/{session_id} - Interview status
- GET /health - Health check
"""
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Depends, FastAPI, Request, status
from fastapi.concurrency import run_in_threadpool
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.datastructures import UploadFile
import uvicorn

from mock_interview.api import (
    ErrorResponse,
    UploadResponse,
    StartInterviewRequest,
    StartInterviewResponse,
    GenerateQuestionsRequest,
    GenerateQuestionsResponse,
    EvaluateAnswerRequest,
    EvaluateAnswerResponse,
    SessionStatusResponse,
    HealthResponse,
    InterviewService
)
from mock_interview.errors import InterviewError, UpstreamError, ValidationError
from mock_interview.utils.config import HOST, PORT
from mock_interview.utils.logger import setup_logger

logger = setup_logger("fastapi_app")

# Generic messages for upstream failures; internal error text is only logged
UPLOAD_FAILED = "Failed to process document"
START_FAILED = "Failed to start interview"
GENERATE_FAILED = "Failed to generate questions"


def get_service(request: Request) -> InterviewService:
    """Dependency returning the service owned by the running app."""
    return request.app.state.service


def _error_response(status_code: int, error: str, details=None) -> JSONResponse:
    body = {"error": error}
    if details is not None:
        body["details"] = details
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body))


def create_app(service: Optional[InterviewService] = None) -> FastAPI:
    """
    Create the FastAPI app.

    Args:
        service: Interview service to serve. If None, a default one (Groq LLM,
            in-memory sessions) is created and initialized on startup.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("🚀 Starting Mock Interview API...")
        if app.state.service is None:
            app.state.service = InterviewService()
        if not app.state.service.is_ready():
            if not app.state.service.initialize():
                logger.error("⚠️ Service initialization failed - interview endpoints will not work")
        yield
        logger.info("Mock Interview API shutting down")

    app = FastAPI(
        title="Mock Interview API",
        description="Résumé keyword extraction, LLM-generated interview questions and answer scoring",
        version="1.0.0",
        lifespan=lifespan
    )
    app.state.service = service

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(InterviewError)
    async def interview_error_handler(request: Request, exc: InterviewError):
        return _error_response(exc.status_code, exc.message, exc.details)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return _error_response(status.HTTP_400_BAD_REQUEST, "Invalid request", exc.errors())

    error_responses = {
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    }

    @app.get("/", tags=["General"])
    async def root():
        """Root endpoint with API information."""
        return {
            "message": "Mock Interview API",
            "version": "1.0.0",
            "docs": "/docs",
            "health": "/health"
        }

    @app.get("/health", response_model=HealthResponse, tags=["General"])
    def health_check(service: InterviewService = Depends(get_service)):
        """
        Health check endpoint.

        Returns the status of the service and its components.
        """
        return HealthResponse(
            status="healthy" if service.is_ready() else "not ready",
            llm_ready=service.is_ready(),
            active_sessions=service.active_sessions()
        )

    @app.post("/upload", response_model=UploadResponse, responses=error_responses, tags=["Documents"])
    async def upload_document(request: Request, service: InterviewService = Depends(get_service)):
        """
        Upload a PDF résumé and extract its keywords.

        Exactly one file is accepted in the multipart field "file". The size
        limit is checked before the document is parsed.
        """
        form = await request.form()
        files = [f for f in form.getlist("file") if isinstance(f, UploadFile)]
        if not files:
            raise ValidationError("No file uploaded")
        if len(files) > 1:
            raise ValidationError("Only one file can be uploaded")

        upload = files[0]
        # One byte past the limit is enough to detect an oversized file
        data = await upload.read(service.max_upload_bytes + 1)
        logger.info(f"Upload received: {upload.filename} ({len(data)} bytes read)")

        try:
            keywords, text_sample = await run_in_threadpool(service.process_document, data)
        except UpstreamError as e:
            logger.error(f"PDF Processing Error: {e.message} ({e.details})", exc_info=True)
            raise UpstreamError(UPLOAD_FAILED) from e

        return UploadResponse(keywords=keywords, text_sample=text_sample)

    @app.post(
        "/start-interview",
        response_model=StartInterviewResponse,
        responses=error_responses,
        tags=["Interview"]
    )
    def start_interview(body: StartInterviewRequest, service: InterviewService = Depends(get_service)):
        """
        Start an interview session.

        Generates the opening question set for the position and keywords and
        returns the new session's ID with its first question.
        """
        logger.info(f"Start interview: position={body.position!r}, keywords={body.keywords}")
        try:
            session = service.sessions.start_interview(body.position, body.keywords)
        except UpstreamError as e:
            logger.error(f"Interview Start Error: {e.message}", exc_info=True)
            raise UpstreamError(START_FAILED) from e

        return StartInterviewResponse(
            session_id=session.session_id,
            first_question=session.current_question
        )

    @app.post(
        "/api/generate-questions",
        response_model=GenerateQuestionsResponse,
        responses=error_responses,
        tags=["Interview"]
    )
    def generate_questions(body: GenerateQuestionsRequest, service: InterviewService = Depends(get_service)):
        """Generate interview questions without creating a session."""
        try:
            questions = service.generate_questions(
                body.position,
                body.keywords,
                num_questions=body.num_questions
            )
        except UpstreamError as e:
            logger.error(f"Question Generation Error: {e.message}", exc_info=True)
            raise UpstreamError(GENERATE_FAILED, details=e.message) from e

        return GenerateQuestionsResponse(questions=questions)

    @app.post(
        "/evaluate-answer",
        response_model=EvaluateAnswerResponse,
        response_model_exclude_none=True,
        responses={**error_responses, 409: {"model": ErrorResponse}},
        tags=["Interview"]
    )
    def evaluate_answer(body: EvaluateAnswerRequest, service: InterviewService = Depends(get_service)):
        """
        Evaluate the answer to the session's current question.

        While questions remain, the response carries the next question; after
        the last one it carries the full answer summary. LLM failures yield a
        fixed fallback evaluation instead of an error.
        """
        outcome = service.sessions.evaluate_answer(body.session_id, body.answer)
        return EvaluateAnswerResponse(
            evaluation=outcome.evaluation,
            is_complete=outcome.is_complete,
            next_question=outcome.next_question,
            summary=outcome.summary
        )

    @app.get(
        "/sessions/{session_id}",
        response_model=SessionStatusResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Interview"]
    )
    def session_status(session_id: str, service: InterviewService = Depends(get_service)):
        """Get the progress of an interview session."""
        session = service.sessions.get_session(session_id)
        return SessionStatusResponse(
            session_id=session.session_id,
            position=session.position,
            keywords=session.keywords,
            status=session.status.value,
            current_question_index=session.current_question_index,
            current_question=None if session.is_complete else session.current_question,
            total_questions=len(session.questions),
            answered_questions=len(session.answers),
            created_at=session.created_at,
            updated_at=session.updated_at
        )

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(app, host=HOST, port=PORT)
