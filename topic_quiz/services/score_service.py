"""
services/score_service.py

Quiz result derivations.
Pure Python functions: computed on read from session state, nothing is
stored back. No UI code, no global state.
"""

from collections import defaultdict
from typing import Dict, List, Optional, Sequence, Tuple

from topic_quiz.models.question_model import Question

# (lower bound, label, message), evaluated top-down
PERFORMANCE_TIERS = (
    (90.0, "Outstanding",
     "Outstanding! You absolutely crushed this quiz. You really know your stuff!"),
    (70.0, "Great Job",
     "Fantastic job! You clearly have a solid grasp of this topic. Keep pushing forward!"),
    (50.0, "Good Effort",
     "Good effort! You're on the right track. A little more practice and you'll master this topic."),
)
LOWEST_TIER = (
    0.0, "Keep Practicing",
    "Good try! Don't get discouraged. Learning takes time, and every attempt makes you stronger!",
)


def is_answer_correct(question: Question, answer: Optional[int]) -> bool:
    """Unanswered (None) counts as incorrect."""
    return answer is not None and answer == question.correct


def count_correct(
    questions: Sequence[Question],
    answers: Sequence[Optional[int]],
) -> int:
    """Number of answer slots matching their question's correct index."""
    return sum(
        1
        for q, ans in zip(questions, answers)
        if is_answer_correct(q, ans)
    )


def score_percentage(score: int, total: int) -> float:
    """
    Score on a 0-100 scale.

    Args:
        score: number of correct answers.
        total: number of questions in the session.

    Returns:
        score / total * 100, or 0.0 when total is 0 (session never started).
    """
    if total <= 0:
        return 0.0
    return score / total * 100


def _tier_for(percentage: float) -> Tuple[float, str, str]:
    for tier in PERFORMANCE_TIERS:
        if percentage >= tier[0]:
            return tier
    return LOWEST_TIER


def performance_tier(percentage: float) -> str:
    """
    Qualitative label for a score percentage.

    >= 90 Outstanding, >= 70 Great Job, >= 50 Good Effort, otherwise
    Keep Practicing. Lower bounds are inclusive.
    """
    return _tier_for(percentage)[1]


def performance_message(percentage: float) -> str:
    """Encouragement shown under the tier label on the results screen."""
    return _tier_for(percentage)[2]


def progress_percentage(current_index: int, total: int) -> float:
    """Progress bar value for the question currently on screen."""
    if total <= 0:
        return 0.0
    return (current_index + 1) / total * 100


def answer_breakdown(
    questions: Sequence[Question],
    answers: Sequence[Optional[int]],
) -> List[Dict[str, object]]:
    """
    Per-question review rows for the results screen.

    Returns:
        [{"number": int, "id": int, "question": str, "category": str,
          "selected": int | None, "selected_text": str | None,
          "correct": int, "correct_text": str, "is_correct": bool}, ...]
        in question order.
    """
    rows = []
    for i, (q, ans) in enumerate(zip(questions, answers)):
        rows.append({
            "number": i + 1,
            "id": q.id,
            "question": q.question,
            "category": q.category,
            "selected": ans,
            "selected_text": q.options[ans] if ans is not None else None,
            "correct": q.correct,
            "correct_text": q.correct_option,
            "is_correct": is_answer_correct(q, ans),
        })
    return rows


def calculate_category_scores(
    questions: Sequence[Question],
    answers: Sequence[Optional[int]],
) -> List[Dict[str, object]]:
    """
    Scores grouped by question category.

    Returns:
        [{"category": str, "total": int, "correct": int,
          "incorrect": int, "unanswered": int, "score": float}, ...]
        sorted by category name.
    """
    buckets: Dict[str, Dict[str, int]] = defaultdict(
        lambda: {"total": 0, "correct": 0, "incorrect": 0, "unanswered": 0}
    )

    for q, ans in zip(questions, answers):
        b = buckets[q.category]
        b["total"] += 1
        if ans is None:
            b["unanswered"] += 1
        elif ans == q.correct:
            b["correct"] += 1
        else:
            b["incorrect"] += 1

    result = []
    for cat in sorted(buckets):
        b = buckets[cat]
        score = round(score_percentage(b["correct"], b["total"]), 1)
        result.append({"category": cat, **b, "score": score})
    return result
