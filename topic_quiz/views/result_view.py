"""
views/result_view.py - results screen

Shows:
  - final score, percentage and performance tier
  - correct / incorrect counts
  - per-category scores (when the quiz spans several categories)
  - review of every answer with the correct option
  - "Start New Quiz" button (reset)
"""

from __future__ import annotations

import streamlit as st

from topic_quiz.models.session_state import QuizSession
from topic_quiz.services.score_service import (
    answer_breakdown, calculate_category_scores, count_correct, performance_message,
    performance_tier, score_percentage
)


def _new_quiz() -> None:
    """Discard the finished session and go back to setup."""
    st.session_state.quiz = QuizSession()


def render() -> None:
    quiz: QuizSession = st.session_state.quiz
    total = quiz.total_questions
    percentage = score_percentage(quiz.score, total)
    tier = performance_tier(percentage)
    correct_count = count_correct(quiz.questions, quiz.answers)

    st.title("Quiz Complete!")
    st.markdown(f"### {tier}")
    st.write(performance_message(percentage))
    st.metric("Score", f"{quiz.score}/{total}", f"{percentage:.0f}%", delta_color="off")

    c1, c2 = st.columns(2)
    c1.metric("Correct", correct_count)
    c2.metric("Incorrect", total - correct_count)

    category_scores = calculate_category_scores(quiz.questions, quiz.answers)
    if len(category_scores) > 1:
        st.subheader("By category")
        for cs in category_scores:
            st.markdown(
                f"**{cs['category']}**: {cs['correct']}/{cs['total']} ({cs['score']:.1f}%)"
            )

    st.subheader("Answer review")
    for row in answer_breakdown(quiz.questions, quiz.answers):
        mark = "✅" if row["is_correct"] else "❌"
        with st.expander(f"{mark} Question {row['number']}: {row['question']}"):
            st.markdown(f"Your answer: **{row['selected_text'] or 'No answer'}**")
            if not row["is_correct"]:
                st.markdown(f"Correct answer: **{row['correct_text']}**")

    st.button("Start New Quiz", type="primary", use_container_width=True, on_click=_new_quiz)
