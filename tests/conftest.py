import pytest

from topic_quiz.data.sample_questions import MATHEMATICS, SAMPLE_QUESTIONS
from topic_quiz.models.question_model import Question
from topic_quiz.services.question_bank import StaticQuestionBank, get_question_bank


@pytest.fixture
def bank():
    return StaticQuestionBank(SAMPLE_QUESTIONS)


@pytest.fixture
def tiny_bank():
    questions = [
        Question(id=1, question="1 + 1?", options=["1", "2"], correct=1, category="tiny"),
        Question(id=2, question="2 + 2?", options=["4", "5"], correct=0, category="tiny"),
        Question(id=3, question="3 + 3?", options=["5", "6", "7"], correct=1, category="tiny"),
    ]
    return StaticQuestionBank({"mathematics": MATHEMATICS, "tiny": questions})


@pytest.fixture(autouse=True)
def clear_bank_cache():
    get_question_bank.cache_clear()
    yield
    get_question_bank.cache_clear()
