import pytest
from pydantic import ValidationError

from topic_quiz.models.question_model import Question
from topic_quiz.models.session_state import QuizSession


def _question(**overrides):
    data = {
        "id": 1,
        "question": "What is 2 + 2?",
        "options": ["3", "4", "5"],
        "correct": 1,
        "category": "mathematics",
    }
    data.update(overrides)
    return Question(**data)


def test_valid_question_exposes_correct_option():
    q = _question()
    assert q.correct_option == "4"


def test_question_requires_two_options():
    with pytest.raises(ValidationError):
        _question(options=["only one"], correct=0)


def test_correct_index_must_be_in_range():
    with pytest.raises(ValidationError):
        _question(correct=3)
    with pytest.raises(ValidationError):
        _question(correct=-1)


def test_blank_prompt_rejected():
    with pytest.raises(ValidationError):
        _question(question="")


def test_question_is_immutable():
    q = _question()
    with pytest.raises(ValidationError):
        q.correct = 0


def test_options_cannot_be_modified_in_place():
    q = _question()
    assert q.options == ("3", "4", "5")
    with pytest.raises(TypeError):
        q.options[0] = "x"


def test_shared_bank_questions_stay_intact_across_sessions(bank):
    first = QuizSession()
    first.configure("topic", "mathematics")
    first.start(bank)
    with pytest.raises((TypeError, AttributeError)):
        first.questions[0].options.append("extra")

    second = QuizSession()
    second.configure("topic", "mathematics")
    second.start(bank)
    assert second.questions[0].options == ("48", "54", "56", "62")
    assert second.questions[0].correct_option == "56"
