"""
Service layer wiring the interview components together.
"""
from typing import List, Optional, Tuple

from langchain_core.language_models import BaseChatModel

from ..errors import PayloadTooLargeError, ServiceUnavailableError, ValidationError
from ..interview import (
    AnswerEvaluator,
    InMemorySessionStore,
    InterviewSessionManager,
    QuestionGenerator,
    SessionStore
)
from ..keywords import KeywordExtractor
from ..llm import initialize_llm
from ..pdf import extract_text_from_pdf
from ..utils.config import (
    DEFAULT_NUM_QUESTIONS,
    DEFAULT_TOP_N_KEYWORDS,
    MAX_UPLOAD_BYTES,
    TEXT_SAMPLE_CHARS
)
from ..utils.logger import setup_logger
from ..utils.text_utils import make_text_sample

logger = setup_logger("api_service")


class InterviewService:
    """
    Service class that owns the interview components.

    Document processing works without an LLM; question generation and
    answer evaluation need initialize() to have succeeded.
    """

    def __init__(
        self,
        llm: Optional[BaseChatModel] = None,
        store: Optional[SessionStore] = None,
        extractor: Optional[KeywordExtractor] = None,
        max_upload_bytes: int = MAX_UPLOAD_BYTES
    ):
        """
        Initialize the service (LLM components are built by initialize()).

        Args:
            llm: Chat model to use. If None, a Groq model is created on initialize().
            store: Session store. If None, sessions are kept in memory.
            extractor: Keyword extractor. If None, uses the NLTK-based default.
            max_upload_bytes: Largest accepted document size
        """
        self.llm = llm
        self.store = store if store is not None else InMemorySessionStore()
        self.extractor = extractor if extractor is not None else KeywordExtractor()
        self.max_upload_bytes = max_upload_bytes
        self.question_generator = None
        self.answer_evaluator = None
        self._sessions = None
        self._initialized = False

    def initialize(self) -> bool:
        """
        Build the LLM-backed components.

        Returns:
            True if initialization successful, False otherwise
        """
        try:
            logger.info("Initializing Interview Service...")
            if self.llm is None:
                self.llm = initialize_llm()

            self.question_generator = QuestionGenerator(llm=self.llm)
            self.answer_evaluator = AnswerEvaluator(llm=self.llm)
            self._sessions = InterviewSessionManager(
                store=self.store,
                question_generator=self.question_generator,
                answer_evaluator=self.answer_evaluator
            )

            self._initialized = True
            logger.info("✅ Interview Service initialized successfully")
            return True

        except Exception as e:
            logger.error(f"❌ Failed to initialize service: {e}")
            self._initialized = False
            return False

    def is_ready(self) -> bool:
        """Check if the LLM-backed components are ready."""
        return self._initialized

    @property
    def sessions(self) -> InterviewSessionManager:
        """Session manager; raises ServiceUnavailableError before initialize()."""
        if not self._initialized:
            raise ServiceUnavailableError("Service not initialized. Please check /health endpoint.")
        return self._sessions

    def active_sessions(self) -> int:
        """Number of sessions held by the store."""
        return self.store.count()

    def process_document(
        self,
        data: bytes,
        top_n: int = DEFAULT_TOP_N_KEYWORDS
    ) -> Tuple[List[str], str]:
        """
        Extract keywords and a display sample from an uploaded PDF.

        Args:
            data: Raw document bytes
            top_n: Maximum number of keywords

        Returns:
            Tuple of (keywords, text_sample)

        Raises:
            PayloadTooLargeError: If the document exceeds the size limit
            DocumentParseError: If the document cannot be parsed
            KeywordExtractionError: If the stop-word list cannot be loaded
        """
        if len(data) > self.max_upload_bytes:
            raise PayloadTooLargeError(
                f"File too large (limit {self.max_upload_bytes // (1024 * 1024)} MB)"
            )

        text = extract_text_from_pdf(data)
        keywords = self.extractor.extract(text, top_n=top_n)
        logger.info(f"Processed document: {len(keywords)} keywords")
        return keywords, make_text_sample(text, TEXT_SAMPLE_CHARS)

    def generate_questions(
        self,
        position: Optional[str],
        keywords: Optional[List[str]],
        num_questions: int = DEFAULT_NUM_QUESTIONS
    ) -> List[str]:
        """
        Generate a stateless batch of questions.

        Raises:
            ValidationError: If position or keywords are missing/empty
            QuestionGenerationError: If the LLM call fails
        """
        if not position or not position.strip() or not keywords:
            raise ValidationError("Position and keywords are required")
        generator = self.sessions.question_generator
        return generator.generate_questions(position, keywords, num_questions=num_questions)
