"""
api/app.py - FastAPI app factory + session cookie middleware

The expired-session sweeper runs only while the app is being served
(started and stopped by the lifespan handler).
"""

import logging
import threading
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from config import SESSION_TTL
from api.config import CLEANUP_INTERVAL, SESSION_COOKIE
from api.routes import router
import api.session as session

logger = logging.getLogger(__name__)


def _sweep_sessions(stop: threading.Event) -> None:
    while not stop.wait(CLEANUP_INTERVAL):
        removed = session.cleanup_expired()
        if removed:
            logger.info(f"Removed {removed} expired sessions")


@asynccontextmanager
async def lifespan(app: FastAPI):
    stop = threading.Event()
    sweeper = threading.Thread(
        target=_sweep_sessions, args=(stop,), name="session-sweeper", daemon=True
    )
    app.state.session_sweeper = sweeper
    sweeper.start()
    try:
        yield
    finally:
        stop.set()
        sweeper.join(timeout=5)


def create_app() -> FastAPI:
    app = FastAPI(title="Topic Quiz", docs_url="/docs", redoc_url=None, lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Every request carries a live session id; unknown or expired cookies get a new one
    @app.middleware("http")
    async def attach_quiz_session(request: Request, call_next):
        sid = request.cookies.get(SESSION_COOKIE)
        if not sid or session.get_session(sid) is None:
            sid = session.create_session()
            logger.debug(f"Issued session {sid[:8]}")

        request.state.session_id = sid
        response: Response = await call_next(request)
        response.set_cookie(
            SESSION_COOKIE,
            sid,
            max_age=SESSION_TTL,
            httponly=True,
            samesite="lax",
        )
        return response

    app.include_router(router)
    return app
