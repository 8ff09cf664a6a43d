"""
views/setup_view.py - setup screen

  - topic text input
  - difficulty and question count pickers
  - "Let's Go" button, disabled while the topic is blank
"""

from __future__ import annotations

import streamlit as st

from topic_quiz.models.session_state import DIFFICULTIES, QUESTION_COUNTS, QuizSession
from topic_quiz.services.question_bank import get_question_bank


def _start_quiz() -> None:
    quiz: QuizSession = st.session_state.quiz
    if not quiz.start(get_question_bank()):
        st.session_state.setup_error = "Please enter a topic to begin"


def render() -> None:
    quiz: QuizSession = st.session_state.quiz
    bank = get_question_bank()

    st.title("Topic Quiz")
    st.caption("Ready to challenge yourself? Let's test your knowledge")

    topic = st.text_input(
        "What would you like to learn about?",
        value=quiz.config.topic,
        placeholder="e.g., Mathematics, Science, History",
    )
    quiz.configure("topic", topic)

    difficulty = st.radio(
        "Pick your difficulty level",
        options=list(DIFFICULTIES),
        index=DIFFICULTIES.index(quiz.config.difficulty.value),
        horizontal=True,
    )
    quiz.configure("difficulty", difficulty)

    count = st.radio(
        "How many questions? (Go at your own pace)",
        options=list(QUESTION_COUNTS),
        index=QUESTION_COUNTS.index(quiz.config.question_count),
        horizontal=True,
    )
    quiz.configure("question_count", count)

    st.button(
        "Let's Go",
        type="primary",
        disabled=not quiz.config.is_startable,
        use_container_width=True,
        on_click=_start_quiz,
    )

    error = st.session_state.pop("setup_error", None)
    if error:
        st.warning(error)
    elif not quiz.config.is_startable:
        st.caption("Please enter a topic to begin")
    elif not bank.has_topic(quiz.config.topic):
        st.caption(
            f"No questions for '{quiz.config.topic.strip()}' yet, "
            f"you will get {bank.default_topic} instead."
        )
    else:
        st.caption("You are all set!")
