"""
app.py - Streamlit entry point

    streamlit run topic_quiz/app.py

One QuizSession lives in st.session_state.quiz; the screen follows its phase.
"""

import os
import sys

_BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _BASE_DIR not in sys.path:
    sys.path.insert(0, _BASE_DIR)

import streamlit as st

from topic_quiz.models.session_state import Phase, QuizSession
from topic_quiz.views import quiz_view, result_view, setup_view

st.set_page_config(page_title="Topic Quiz", page_icon="📝", layout="centered")

if "quiz" not in st.session_state:
    st.session_state.quiz = QuizSession()

_phase = st.session_state.quiz.phase
if _phase is Phase.SETUP:
    setup_view.render()
elif _phase is Phase.IN_PROGRESS:
    quiz_view.render()
else:
    result_view.render()
