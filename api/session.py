"""
api/session.py - in-memory quiz sessions, one per browser (cookie based)

Each client gets a UUID session id owning one QuizSession.
Sessions expire after SESSION_TTL seconds without access.
A single lock serializes every read and transition, so a transition is
atomic with respect to concurrent requests.
"""

import logging
import threading
import time
import uuid
from contextlib import contextmanager
from typing import Iterator

from config import SESSION_TTL
from topic_quiz.models.session_state import QuizSession

logger = logging.getLogger(__name__)

_lock = threading.RLock()
_sessions: dict[str, QuizSession] = {}
_timestamps: dict[str, float] = {}


def create_session() -> str:
    """Create a new Setup-phase session and return its id."""
    sid = uuid.uuid4().hex
    with _lock:
        _sessions[sid] = QuizSession()
        _timestamps[sid] = time.time()
    return sid


def get_session(sid: str) -> QuizSession | None:
    """Session for `sid`, or None when unknown or expired."""
    with _lock:
        if sid not in _sessions:
            return None
        if time.time() - _timestamps[sid] > SESSION_TTL:
            del _sessions[sid]
            del _timestamps[sid]
            return None
        _timestamps[sid] = time.time()  # refresh on access
        return _sessions[sid]


@contextmanager
def locked(sid: str) -> Iterator[QuizSession]:
    """
    Hold the store lock while working on a session.

    A missing or expired id gets a fresh session under the same id, so the
    caller always has something to work on.
    """
    with _lock:
        quiz = get_session(sid)
        if quiz is None:
            quiz = QuizSession()
            _sessions[sid] = quiz
            _timestamps[sid] = time.time()
        yield quiz


def reset(sid: str) -> QuizSession:
    """Discard the session's quiz and install a fresh Setup-phase one."""
    with _lock:
        quiz = QuizSession()
        _sessions[sid] = quiz
        _timestamps[sid] = time.time()
    logger.info(f"Session {sid[:8]} reset")
    return quiz


def cleanup_expired() -> int:
    """Drop expired sessions. Returns how many were removed."""
    now = time.time()
    removed = 0
    with _lock:
        expired = [sid for sid, ts in _timestamps.items() if now - ts > SESSION_TTL]
        for sid in expired:
            del _sessions[sid]
            del _timestamps[sid]
            removed += 1
    return removed


def clear() -> None:
    """Drop every session."""
    with _lock:
        _sessions.clear()
        _timestamps.clear()
