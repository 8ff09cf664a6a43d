"""
models/session_state.py

Quiz session state machine.
Pydantic BaseModel holding the whole quiz state, mutated only through the
transition methods below. No UI code.

Phases: SETUP -> IN_PROGRESS -> COMPLETED. Going back to SETUP means replacing
the session with a fresh QuizSession() (see api/session.reset and the
Streamlit views).

Every transition checks its preconditions before touching any field and
returns True when applied, False when rejected (state left as it was).
"""

import logging
from enum import Enum
from typing import TYPE_CHECKING, Any, List, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from topic_quiz.models.question_model import Question

if TYPE_CHECKING:
    from topic_quiz.services.question_bank import QuestionBank

logger = logging.getLogger(__name__)

QUESTION_COUNTS: Tuple[int, ...] = (5, 10, 15)

CORRECT_FEEDBACK = "Correct!"
INCORRECT_FEEDBACK = "Incorrect. The correct answer is: {answer}"


class Phase(str, Enum):
    SETUP = "setup"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class Difficulty(str, Enum):
    # Informational only, the question bank does not filter on it yet.
    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"


DIFFICULTIES: Tuple[str, ...] = tuple(d.value for d in Difficulty)


class QuizConfig(BaseModel):
    """
    Pending quiz configuration edited on the setup screen.

    Assignments are validated, so a wrong type or a value outside the
    enumerations raises ValidationError instead of being stored.
    """
    model_config = ConfigDict(validate_assignment=True)

    topic: str = Field(default="", description="Free-text topic, may be blank while typing")
    difficulty: Difficulty = Field(default=Difficulty.MEDIUM)
    question_count: Literal[5, 10, 15] = Field(default=5)

    @property
    def is_startable(self) -> bool:
        return bool(self.topic.strip())


class QuizSession(BaseModel):
    """
    One quiz run, from configuration to results.

    Attributes:
        config:          pending configuration (editable only in SETUP).
        phase:           coarse state, governs which transitions are valid.
        questions:       question sequence, fixed by start().
        current_index:   index of the question on screen (0-based).
        answers:         one slot per question, None = unanswered.
        selected_answer: highlighted option of the current question, not yet final.
        submitted:       True once the current question is locked in and scored.
        score:           number of correct answers so far.
        feedback:        message produced by the last submit_answer().
    """

    config: QuizConfig = Field(default_factory=QuizConfig)
    phase: Phase = Phase.SETUP
    questions: Tuple[Question, ...] = ()
    current_index: int = Field(default=0, ge=0)
    answers: List[Optional[int]] = Field(default_factory=list)
    selected_answer: Optional[int] = None
    submitted: bool = False
    score: int = Field(default=0, ge=0)
    feedback: str = ""

    # ── read-only helpers ────────────────────────────────────────────────────

    @property
    def total_questions(self) -> int:
        return len(self.questions)

    @property
    def current_question(self) -> Optional[Question]:
        if self.phase is Phase.SETUP or not self.questions:
            return None
        return self.questions[self.current_index]

    @property
    def is_last_question(self) -> bool:
        return self.current_index == self.total_questions - 1

    def _reject(self, operation: str, reason: str) -> bool:
        logger.debug(f"{operation} rejected ({reason}); phase={self.phase.value}")
        return False

    # ── transitions ──────────────────────────────────────────────────────────

    def configure(self, field: str, value: Any) -> bool:
        """Update one configuration field. SETUP only."""
        if self.phase is not Phase.SETUP:
            return self._reject("configure", "not in setup")
        if field not in QuizConfig.model_fields:
            return self._reject("configure", f"unknown field {field!r}")
        try:
            setattr(self.config, field, value)
        except ValidationError as e:
            return self._reject("configure", f"invalid {field}: {e.errors()[0]['msg']}")
        return True

    def start(self, bank: "QuestionBank") -> bool:
        """
        Materialize the question sequence and enter IN_PROGRESS.

        Uses the first `question_count` questions the bank returns for the
        topic, or all of them when the bank has fewer.
        """
        if self.phase is not Phase.SETUP:
            return self._reject("start", "not in setup")
        if not self.config.is_startable:
            return self._reject("start", "blank topic")

        candidates = bank.lookup(self.config.topic)
        questions = tuple(candidates[: self.config.question_count])
        if not questions:
            return self._reject("start", "question bank returned nothing")

        self.questions = questions
        self.answers = [None] * len(questions)
        self.current_index = 0
        self.selected_answer = None
        self.submitted = False
        self.score = 0
        self.feedback = ""
        self.phase = Phase.IN_PROGRESS

        if len(questions) < self.config.question_count:
            logger.info(
                f"Bank has {len(questions)} questions for '{self.config.topic}', "
                f"{self.config.question_count} requested"
            )
        logger.info(
            f"Quiz started: topic='{self.config.topic}', "
            f"difficulty={self.config.difficulty.value}, questions={len(questions)}"
        )
        return True

    def select_answer(self, option_index: int) -> bool:
        """Highlight an option of the current question. No scoring."""
        if self.phase is not Phase.IN_PROGRESS:
            return self._reject("select_answer", "quiz not in progress")
        if self.submitted:
            return self._reject("select_answer", "answer already submitted")
        if isinstance(option_index, bool) or not isinstance(option_index, int):
            return self._reject("select_answer", "option index must be an int")
        if not 0 <= option_index < len(self.current_question.options):
            return self._reject("select_answer", f"option {option_index} out of range")
        self.selected_answer = option_index
        return True

    def submit_answer(self) -> bool:
        """
        Lock in the selected option and score it.

        The only place `score` changes; a second call for the same question is
        rejected because `submitted` is already set.
        """
        if self.phase is not Phase.IN_PROGRESS:
            return self._reject("submit_answer", "quiz not in progress")
        if self.submitted:
            return self._reject("submit_answer", "answer already submitted")
        if self.selected_answer is None:
            return self._reject("submit_answer", "no option selected")

        question = self.current_question
        self.answers[self.current_index] = self.selected_answer
        is_correct = self.selected_answer == question.correct
        if is_correct:
            self.score += 1
            self.feedback = CORRECT_FEEDBACK
        else:
            self.feedback = INCORRECT_FEEDBACK.format(answer=question.correct_option)
        self.submitted = True
        return True

    def next_question(self) -> bool:
        """Advance past a submitted question, completing the quiz after the last one."""
        if self.phase is not Phase.IN_PROGRESS:
            return self._reject("next_question", "quiz not in progress")
        if not self.submitted:
            return self._reject("next_question", "current answer not submitted")

        if self.is_last_question:
            self.phase = Phase.COMPLETED
            logger.info(f"Quiz completed: score {self.score}/{self.total_questions}")
            return True

        self.current_index += 1
        # a previously answered question keeps its selection and stays locked
        self.selected_answer = self.answers[self.current_index]
        self.submitted = self.selected_answer is not None
        self.feedback = ""
        return True
