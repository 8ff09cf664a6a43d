"""
services/question_bank.py

Question source for the quiz session.
Public API:
  - QuestionBank                           : lookup(topic) -> List[Question] protocol
  - StaticQuestionBank(questions_by_topic) : in-memory table with a default topic
  - load_question_bank(path)               : StaticQuestionBank from a JSON file
  - get_question_bank()                    : process-wide bank chosen from config

Contract:
- topic matching is case-insensitive (surrounding whitespace ignored)
- an unknown topic falls back to the default topic's questions
- lookup never returns an empty list
"""

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Dict, List, Mapping, Protocol, Sequence, Union

from pydantic import ValidationError

import config
from topic_quiz.data.sample_questions import SAMPLE_QUESTIONS
from topic_quiz.models.question_model import Question

logger = logging.getLogger(__name__)


class QuestionBank(Protocol):
    def lookup(self, topic: str) -> List[Question]:
        ...


def _normalize_topic(topic: str) -> str:
    return topic.strip().lower()


class StaticQuestionBank:
    """In-memory topic -> questions table."""

    def __init__(
        self,
        questions_by_topic: Mapping[str, Sequence[Question]],
        default_topic: str = config.DEFAULT_TOPIC,
    ):
        self._questions: Dict[str, List[Question]] = {
            _normalize_topic(topic): list(questions)
            for topic, questions in questions_by_topic.items()
        }
        self.default_topic = _normalize_topic(default_topic)
        if not self._questions.get(self.default_topic):
            raise ValueError(f"default topic '{default_topic}' has no questions.")

    def topics(self) -> List[str]:
        """Known topic keys, in table order."""
        return list(self._questions)

    def has_topic(self, topic: str) -> bool:
        """False when lookup(topic) would fall back to the default topic."""
        return bool(self._questions.get(_normalize_topic(topic)))

    def lookup(self, topic: str) -> List[Question]:
        """Questions for `topic`, or the default topic's questions when unknown."""
        key = _normalize_topic(topic)
        questions = self._questions.get(key)
        if not questions:
            logger.info(f"Unknown topic '{topic}', falling back to '{self.default_topic}'")
            questions = self._questions[self.default_topic]
        return list(questions)


def load_question_bank(
    path: Union[str, Path],
    default_topic: str = config.DEFAULT_TOPIC,
) -> StaticQuestionBank:
    """
    Build a bank from a JSON file.

    Expected format:
        {"mathematics": [{"id": 1, "question": "...", "options": [...],
                          "correct": 0, "category": "mathematics"}, ...],
         "science": [...]}

    `category` defaults to the topic key when omitted.

    Raises:
        ValueError: unreadable file, bad JSON, invalid question or missing default topic.
    """
    path = Path(path)
    try:
        with path.open(encoding="utf-8") as f:
            raw = json.load(f)
    except OSError as e:
        raise ValueError(f"Cannot read question bank {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ValueError(f"Question bank {path} is not valid JSON: {e}") from e

    if not isinstance(raw, dict):
        raise ValueError(f"Question bank {path} must be a JSON object keyed by topic.")

    table: Dict[str, List[Question]] = {}
    for topic, items in raw.items():
        if not isinstance(items, list):
            raise ValueError(f"Topic '{topic}' must map to a list of questions.")
        try:
            table[topic] = [
                Question.model_validate({"category": topic, **item})
                for item in items
            ]
        except (TypeError, ValidationError) as e:
            raise ValueError(f"Invalid question in topic '{topic}': {e}") from e

    bank = StaticQuestionBank(table, default_topic=default_topic)
    logger.info(f"Loaded question bank {path}: {len(table)} topics")
    return bank


@lru_cache(maxsize=1)
def get_question_bank() -> StaticQuestionBank:
    """Bank used by the app: QUESTION_BANK_PATH if set, else the built-in samples."""
    if config.QUESTION_BANK_PATH:
        return load_question_bank(config.QUESTION_BANK_PATH, config.DEFAULT_TOPIC)
    return StaticQuestionBank(SAMPLE_QUESTIONS, default_topic=config.DEFAULT_TOPIC)
