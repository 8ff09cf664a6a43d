from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class Question(BaseModel):
    """
    Multiple-choice quiz question.
    Pydantic v2, immutable once built.
    """
    model_config = ConfigDict(frozen=True)

    id: int = Field(
        ...,
        description="Question id (unique within a bank)"
    )
    question: str = Field(
        ...,
        min_length=1,
        description="Prompt text"
    )
    options: Tuple[str, ...] = Field(
        ...,
        description="Answer options, in display order"
    )
    correct: int = Field(
        ...,
        ge=0,
        description="Index of the correct option"
    )
    category: str = Field(
        ...,
        min_length=1,
        description="Category label (e.g. mathematics)"
    )

    @field_validator('options')
    @classmethod
    def validate_options_length(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        """
        A question needs at least two options.
        """
        if len(v) < 2:
            raise ValueError("options must contain at least 2 items.")
        return v

    @model_validator(mode='after')
    def validate_correct_in_options(self) -> 'Question':
        """
        The correct index must point at one of the options.
        """
        if self.correct >= len(self.options):
            raise ValueError(
                f"correct index {self.correct} is out of range for {len(self.options)} options."
            )
        return self

    @property
    def correct_option(self) -> str:
        """Text of the correct option."""
        return self.options[self.correct]
