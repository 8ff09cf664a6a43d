"""
api/routes.py - FastAPI endpoints

Thin HTTP wrapper around QuizSession: each POST runs one transition under
the session lock. A rejected transition answers 409 and leaves state as is.
"""

from typing import Literal, Optional

from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel

import api.session as session
from topic_quiz.models.question_model import Question
from topic_quiz.models.session_state import (
    DIFFICULTIES, QUESTION_COUNTS, Difficulty, Phase, QuizSession
)
from topic_quiz.services.question_bank import get_question_bank
from topic_quiz.services.score_service import (
    answer_breakdown, calculate_category_scores, count_correct, performance_message,
    performance_tier, progress_percentage, score_percentage
)

router = APIRouter()

# ── Pydantic request bodies ──────────────────────────────────────────────────

class ConfigureBody(BaseModel):
    topic: Optional[str] = None
    difficulty: Optional[Difficulty] = None
    question_count: Optional[Literal[5, 10, 15]] = None

class SelectAnswerBody(BaseModel):
    option_index: int


# ── Helpers ──────────────────────────────────────────────────────────────────

def _sid(request: Request) -> str:
    return request.state.session_id


def _question_to_dict(q: Question, reveal: bool) -> dict:
    d = {
        "id": q.id,
        "question": q.question,
        "options": q.options,
        "category": q.category,
    }
    if reveal:
        d["correct"] = q.correct
    return d


def _state_to_dict(quiz: QuizSession) -> dict:
    current = quiz.current_question
    total = quiz.total_questions
    return {
        "phase": quiz.phase.value,
        "config": {
            "topic": quiz.config.topic,
            "difficulty": quiz.config.difficulty.value,
            "question_count": quiz.config.question_count,
        },
        "can_start": quiz.phase is Phase.SETUP and quiz.config.is_startable,
        "total_questions": total,
        "current_index": quiz.current_index,
        "current_question": (
            _question_to_dict(current, reveal=quiz.submitted) if current is not None else None
        ),
        "selected_answer": quiz.selected_answer,
        "submitted": quiz.submitted,
        "answers": quiz.answers,
        "feedback": quiz.feedback,
        "score": quiz.score,
        "progress": progress_percentage(quiz.current_index, total) if current is not None else 0.0,
        "is_last_question": current is not None and quiz.is_last_question,
    }


def _rejected(detail: str) -> HTTPException:
    return HTTPException(status_code=409, detail=detail)


# ── Endpoints ────────────────────────────────────────────────────────────────

@router.get("/api/options")
async def get_options():
    return {
        "difficulties": list(DIFFICULTIES),
        "question_counts": list(QUESTION_COUNTS),
        "topics": get_question_bank().topics(),
    }


@router.get("/api/state")
async def get_state(request: Request):
    with session.locked(_sid(request)) as quiz:
        return _state_to_dict(quiz)


@router.post("/api/configure")
async def configure(body: ConfigureBody, request: Request):
    updates = body.model_dump(exclude_none=True)
    with session.locked(_sid(request)) as quiz:
        if quiz.phase is not Phase.SETUP:
            raise _rejected("Configuration can only change before the quiz starts.")
        for field, value in updates.items():
            if not quiz.configure(field, value):
                raise HTTPException(status_code=422, detail=f"Invalid value for {field}.")
        return _state_to_dict(quiz)


@router.post("/api/start")
async def start_quiz(request: Request):
    with session.locked(_sid(request)) as quiz:
        if not quiz.start(get_question_bank()):
            if quiz.phase is not Phase.SETUP:
                raise _rejected("The quiz has already started.")
            raise _rejected("Please enter a topic to begin.")
        return _state_to_dict(quiz)


@router.post("/api/select")
async def select_answer(body: SelectAnswerBody, request: Request):
    with session.locked(_sid(request)) as quiz:
        if not quiz.select_answer(body.option_index):
            raise _rejected("Answer cannot be selected now.")
        return _state_to_dict(quiz)


@router.post("/api/submit")
async def submit_answer(request: Request):
    with session.locked(_sid(request)) as quiz:
        if not quiz.submit_answer():
            raise _rejected("Nothing to submit.")
        return _state_to_dict(quiz)


@router.post("/api/next")
async def next_question(request: Request):
    with session.locked(_sid(request)) as quiz:
        if not quiz.next_question():
            raise _rejected("Submit the current answer first.")
        return _state_to_dict(quiz)


@router.get("/api/results")
async def get_results(request: Request):
    with session.locked(_sid(request)) as quiz:
        if quiz.phase is not Phase.COMPLETED:
            raise _rejected("The quiz is not finished yet.")

        total = quiz.total_questions
        percentage = score_percentage(quiz.score, total)
        correct_count = count_correct(quiz.questions, quiz.answers)
        return {
            "topic": quiz.config.topic,
            "difficulty": quiz.config.difficulty.value,
            "score": quiz.score,
            "total": total,
            "correct_count": correct_count,
            "incorrect_count": total - correct_count,
            "percentage": round(percentage, 1),
            "tier": performance_tier(percentage),
            "message": performance_message(percentage),
            "breakdown": answer_breakdown(quiz.questions, quiz.answers),
            "category_scores": calculate_category_scores(quiz.questions, quiz.answers),
        }


@router.post("/api/reset")
async def reset_session(request: Request):
    quiz = session.reset(_sid(request))
    return _state_to_dict(quiz)
