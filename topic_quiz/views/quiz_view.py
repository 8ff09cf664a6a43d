"""
views/quiz_view.py - question screen

Layout:
  - progress bar + "Question n of N" + running score
  - question card with one button per option
  - feedback panel after submission
  - Submit / Next Question / See Results

All state changes go through QuizSession transitions.
"""

from __future__ import annotations

import streamlit as st

from topic_quiz.models.session_state import QuizSession
from topic_quiz.services.score_service import progress_percentage


def _select(option_index: int) -> None:
    st.session_state.quiz.select_answer(option_index)


def _submit() -> None:
    st.session_state.quiz.submit_answer()


def _next() -> None:
    st.session_state.quiz.next_question()


def _option_label(quiz: QuizSession, index: int, option: str) -> str:
    """Option text with a marker for selection / correctness."""
    question = quiz.current_question
    if quiz.submitted:
        if index == question.correct:
            return f"✅ {option}"
        if index == quiz.selected_answer:
            return f"❌ {option}"
        return option
    if index == quiz.selected_answer:
        return f"👉 {option}"
    return option


def render() -> None:
    quiz: QuizSession = st.session_state.quiz
    question = quiz.current_question
    total = quiz.total_questions

    # ── Progress ───────────────────────────────────────────────────────────
    left, right = st.columns(2)
    left.markdown(f"**Question {quiz.current_index + 1} of {total}**")
    right.markdown(f"<div style='text-align:right'>Score: {quiz.score}/{total}</div>",
                   unsafe_allow_html=True)
    st.progress(int(progress_percentage(quiz.current_index, total)))

    # ── Question card ──────────────────────────────────────────────────────
    st.subheader(question.question)
    st.caption(question.category)

    for i, option in enumerate(question.options):
        st.button(
            _option_label(quiz, i, option),
            key=f"opt_{quiz.current_index}_{i}",
            disabled=quiz.submitted,
            use_container_width=True,
            on_click=_select,
            args=(i,),
        )

    # ── Feedback ───────────────────────────────────────────────────────────
    if quiz.submitted:
        if quiz.selected_answer == question.correct:
            st.success(f"Well done! {quiz.feedback}")
        else:
            st.error(f"No worries! {quiz.feedback}")

    # ── Buttons ────────────────────────────────────────────────────────────
    if not quiz.submitted:
        st.button(
            "Submit",
            type="primary",
            disabled=quiz.selected_answer is None,
            use_container_width=True,
            on_click=_submit,
        )
    else:
        st.button(
            "See Results" if quiz.is_last_question else "Next Question",
            type="primary",
            use_container_width=True,
            on_click=_next,
        )
