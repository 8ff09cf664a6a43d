import pytest

from topic_quiz.models.question_model import Question
from topic_quiz.models.session_state import Difficulty, Phase, QuizSession
from topic_quiz.services.question_bank import StaticQuestionBank
from topic_quiz.services.score_service import count_correct, performance_tier, score_percentage


def _started(bank, topic="Mathematics", count=5):
    quiz = QuizSession()
    assert quiz.configure("topic", topic)
    assert quiz.configure("question_count", count)
    assert quiz.start(bank)
    return quiz


def _answer(quiz, option_index):
    assert quiz.select_answer(option_index)
    assert quiz.submit_answer()
    assert quiz.next_question()


def _wrong(question):
    return (question.correct + 1) % len(question.options)


# ── configure ────────────────────────────────────────────────────────────────

def test_new_session_has_default_configuration():
    quiz = QuizSession()
    assert quiz.phase is Phase.SETUP
    assert quiz.config.topic == ""
    assert quiz.config.difficulty is Difficulty.MEDIUM
    assert quiz.config.question_count == 5
    assert quiz.questions == ()
    assert quiz.answers == []
    assert quiz.current_question is None


def test_configure_updates_fields():
    quiz = QuizSession()
    assert quiz.configure("topic", "Science")
    assert quiz.configure("difficulty", "Hard")
    assert quiz.configure("question_count", 15)
    assert quiz.config.topic == "Science"
    assert quiz.config.difficulty is Difficulty.HARD
    assert quiz.config.question_count == 15


def test_configure_allows_blank_topic():
    quiz = QuizSession()
    assert quiz.configure("topic", "   ")
    assert not quiz.config.is_startable


@pytest.mark.parametrize("field,value", [
    ("question_count", 7),
    ("difficulty", "Impossible"),
    ("topic", 42),
    ("colour", "red"),
])
def test_configure_rejects_invalid_values(field, value):
    quiz = QuizSession()
    assert not quiz.configure(field, value)
    assert quiz.config.question_count == 5
    assert quiz.config.difficulty is Difficulty.MEDIUM
    assert quiz.config.topic == ""


def test_configure_rejected_after_start(bank):
    quiz = _started(bank)
    assert not quiz.configure("question_count", 15)
    assert quiz.config.question_count == 5


# ── start ────────────────────────────────────────────────────────────────────

@pytest.mark.parametrize("topic", ["", "   ", "\t\n"])
def test_start_rejected_for_blank_topic(bank, topic):
    quiz = QuizSession()
    quiz.configure("topic", topic)
    assert not quiz.start(bank)
    assert quiz.phase is Phase.SETUP
    assert quiz.questions == ()


@pytest.mark.parametrize("count", [5, 10, 15])
def test_start_sizes_session_to_requested_count(bank, count):
    quiz = _started(bank, count=count)
    assert quiz.phase is Phase.IN_PROGRESS
    assert len(quiz.questions) == len(quiz.answers) == quiz.total_questions == count
    assert quiz.answers == [None] * count
    assert quiz.current_index == 0
    assert quiz.selected_answer is None
    assert not quiz.submitted
    assert quiz.score == 0


def test_start_uses_all_questions_when_bank_is_short(tiny_bank):
    quiz = _started(tiny_bank, topic="tiny", count=10)
    assert quiz.total_questions == 3
    assert len(quiz.answers) == 3


def test_start_falls_back_to_default_bank(bank):
    quiz = _started(bank, topic="history")
    assert quiz.phase is Phase.IN_PROGRESS
    assert all(q.category == "mathematics" for q in quiz.questions)


def test_start_is_case_insensitive(bank):
    quiz = _started(bank, topic="SCIENCE")
    assert quiz.questions[0].category == "science"


def test_start_twice_is_rejected(bank):
    quiz = _started(bank)
    first = quiz.questions
    assert not quiz.start(bank)
    assert quiz.questions is first


def test_questions_are_immutable(bank):
    quiz = _started(bank)
    assert isinstance(quiz.questions, tuple)


# ── select_answer ────────────────────────────────────────────────────────────

def test_select_answer_is_idempotent(bank):
    quiz = _started(bank)
    assert quiz.select_answer(2)
    snapshot = quiz.model_dump()
    assert quiz.select_answer(2)
    assert quiz.model_dump() == snapshot
    assert quiz.score == 0


def test_select_answer_rejected_in_setup():
    quiz = QuizSession()
    assert not quiz.select_answer(0)
    assert quiz.selected_answer is None


@pytest.mark.parametrize("option", [-1, 4, 99])
def test_select_answer_rejects_out_of_range(bank, option):
    quiz = _started(bank)
    assert not quiz.select_answer(option)
    assert quiz.selected_answer is None


def test_selection_locked_after_submit(bank):
    quiz = _started(bank)
    quiz.select_answer(0)
    quiz.submit_answer()
    assert not quiz.select_answer(1)
    assert quiz.selected_answer == 0


def test_only_last_selection_is_recorded(bank):
    quiz = _started(bank)
    assert quiz.select_answer(2)
    assert quiz.select_answer(1)
    assert quiz.submit_answer()
    assert quiz.answers[0] == 1
    # first math question: 7 × 8, correct index 2
    assert quiz.score == 0
    assert quiz.feedback == "Incorrect. The correct answer is: 56"


# ── submit_answer ────────────────────────────────────────────────────────────

def test_submit_without_selection_is_rejected(bank):
    quiz = _started(bank)
    assert not quiz.submit_answer()
    assert not quiz.submitted
    assert quiz.answers == [None] * 5


def test_submit_correct_answer_scores_once(bank):
    quiz = _started(bank)
    correct = quiz.current_question.correct
    quiz.select_answer(correct)
    assert quiz.submit_answer()
    assert quiz.score == 1
    assert quiz.feedback == "Correct!"
    assert not quiz.submit_answer()
    assert quiz.score == 1


def test_submit_rejected_outside_progress(bank):
    quiz = QuizSession()
    assert not quiz.submit_answer()
    quiz = _started(bank, count=5)
    for q in quiz.questions:
        _answer(quiz, q.correct)
    assert quiz.phase is Phase.COMPLETED
    assert not quiz.submit_answer()
    assert quiz.score == 5


# ── next_question ────────────────────────────────────────────────────────────

def test_next_requires_submission(bank):
    quiz = _started(bank)
    assert not quiz.next_question()
    quiz.select_answer(0)
    assert not quiz.next_question()
    assert quiz.current_index == 0


def test_next_advances_and_clears_question_state(bank):
    quiz = _started(bank)
    quiz.select_answer(0)
    quiz.submit_answer()
    assert quiz.next_question()
    assert quiz.current_index == 1
    assert quiz.selected_answer is None
    assert not quiz.submitted
    assert quiz.feedback == ""
    assert quiz.phase is Phase.IN_PROGRESS


def test_next_restores_previous_answer():
    questions = [
        Question(id=i, question=f"q{i}", options=["a", "b"], correct=0, category="t")
        for i in range(3)
    ]
    quiz = _started(StaticQuestionBank({"mathematics": questions}), count=5)
    quiz.answers[1] = 1
    quiz.select_answer(0)
    quiz.submit_answer()
    assert quiz.next_question()
    assert quiz.selected_answer == 1
    assert quiz.submitted
    assert not quiz.submit_answer()
    assert quiz.score == 1


def test_completion_only_from_last_submitted_question(bank):
    quiz = _started(bank, count=5)
    for q in quiz.questions[:-1]:
        _answer(quiz, q.correct)
        assert quiz.phase is Phase.IN_PROGRESS
    assert quiz.is_last_question
    assert not quiz.next_question()
    assert quiz.phase is Phase.IN_PROGRESS
    quiz.select_answer(quiz.current_question.correct)
    quiz.submit_answer()
    assert quiz.next_question()
    assert quiz.phase is Phase.COMPLETED
    assert not quiz.next_question()


# ── full runs ────────────────────────────────────────────────────────────────

def test_all_correct_run_is_outstanding(bank):
    quiz = _started(bank, count=5)
    assert len(bank.lookup("mathematics")) == 15
    for q in quiz.questions:
        _answer(quiz, q.correct)
    pct = score_percentage(quiz.score, quiz.total_questions)
    assert quiz.score == 5
    assert pct == 100.0
    assert performance_tier(pct) == "Outstanding"


def test_half_correct_run_is_good_effort(bank):
    quiz = _started(bank, count=10)
    for i, q in enumerate(quiz.questions):
        _answer(quiz, q.correct if i % 2 else _wrong(q))
    pct = score_percentage(quiz.score, quiz.total_questions)
    assert quiz.score == 5
    assert pct == 50.0
    assert performance_tier(pct) == "Good Effort"


def test_score_matches_recorded_answers(bank):
    quiz = _started(bank, count=15)
    for i, q in enumerate(quiz.questions):
        _answer(quiz, q.correct if i % 3 == 0 else _wrong(q))
    assert quiz.score == count_correct(quiz.questions, quiz.answers) == 5
    assert None not in quiz.answers


def test_fresh_session_after_completion_has_defaults(bank):
    quiz = _started(bank, topic="science", count=10)
    for q in quiz.questions:
        _answer(quiz, q.correct)
    quiz = QuizSession()
    assert quiz.phase is Phase.SETUP
    assert quiz.config.difficulty is Difficulty.MEDIUM
    assert quiz.answers == []
    assert quiz.score == 0
