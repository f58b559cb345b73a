"""
Interview session storage.

SessionStore is the interface the session manager depends on; the in-memory
implementation keeps sessions for the lifetime of the process.
"""
import threading
import uuid
from abc import ABC, abstractmethod
from contextlib import contextmanager
from datetime import datetime
from typing import Dict, Iterator, List, Optional

from .schemas import InterviewSession
from ..utils.logger import setup_logger

logger = setup_logger("session_store")


class SessionStore(ABC):
    """
    Interface for interview session storage.

    Implementations hand out copies: changes to a session returned by get()
    are only visible to other callers after update().
    """

    @abstractmethod
    def create(self, position: str, keywords: List[str], questions: List[str]) -> InterviewSession:
        """Allocate a new session id and store a fresh session."""

    @abstractmethod
    def get(self, session_id: str) -> Optional[InterviewSession]:
        """Return the session, or None if the id is unknown."""

    @abstractmethod
    def update(self, session: InterviewSession) -> None:
        """Replace the stored state of an existing session."""

    @abstractmethod
    def lock(self, session_id: str):
        """Context manager serializing read-modify-write cycles on one session."""

    @abstractmethod
    def count(self) -> int:
        """Number of stored sessions."""


class InMemorySessionStore(SessionStore):
    """
    Process-local session store.

    Sessions are never evicted and are lost on restart.
    """

    def __init__(self):
        self._sessions: Dict[str, InterviewSession] = {}
        self._locks: Dict[str, threading.Lock] = {}
        self._guard = threading.Lock()

    def create(self, position: str, keywords: List[str], questions: List[str]) -> InterviewSession:
        session = InterviewSession(
            session_id=str(uuid.uuid4()),
            position=position,
            keywords=list(keywords),
            questions=list(questions)
        )
        with self._guard:
            self._sessions[session.session_id] = session
            self._locks[session.session_id] = threading.Lock()
        logger.debug(f"Stored session {session.session_id}")
        return session.model_copy(deep=True)

    def get(self, session_id: str) -> Optional[InterviewSession]:
        with self._guard:
            session = self._sessions.get(session_id)
        return session.model_copy(deep=True) if session is not None else None

    def update(self, session: InterviewSession) -> None:
        session.updated_at = datetime.now()
        with self._guard:
            if session.session_id not in self._sessions:
                raise KeyError(session.session_id)
            self._sessions[session.session_id] = session.model_copy(deep=True)

    @contextmanager
    def lock(self, session_id: str) -> Iterator[None]:
        with self._guard:
            session_lock = self._locks.get(session_id)
        if session_lock is None:
            # Unknown ids have nothing to protect
            yield
            return
        with session_lock:
            yield

    def count(self) -> int:
        with self._guard:
            return len(self._sessions)
