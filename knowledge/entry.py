"""
Knowledge base entry model
"""

from typing import Tuple

from pydantic import BaseModel, ConfigDict, field_validator


class Entry(BaseModel):
    """One question/answer record of the knowledge base. Immutable once loaded."""

    model_config = ConfigDict(frozen=True)

    id: str
    question: str
    answer: str
    keywords: Tuple[str, ...]
    category: str

    @field_validator('id', 'category')
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("must not be empty")
        return value

    @field_validator('keywords')
    @classmethod
    def _has_keywords(cls, value: Tuple[str, ...]) -> Tuple[str, ...]:
        if not value:
            raise ValueError("at least one keyword is required")
        # a blank keyword is a substring of every token
        if any(not keyword.strip() for keyword in value):
            raise ValueError("keywords must not be blank")
        return value
