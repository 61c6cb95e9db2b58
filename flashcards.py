"""
Value types shared by the Leitner scheduler.

A flashcard is an immutable front/back pair with an optional hint and tags.
Buckets are held either as a sparse mapping (bucket number -> set of cards),
which is the state a practice session owns, or as a dense list indexed by
bucket number where ``None`` marks a bucket that does not exist.
"""
from __future__ import annotations

from enum import IntEnum
from typing import Dict, List, Optional, Set, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


class InvalidArgument(TypeError):
    """Raised when an argument does not have the shape an operation needs."""


class AnswerDifficulty(IntEnum):
    WRONG = 0
    HARD = 1
    EASY = 2


class Flashcard(BaseModel):
    model_config = ConfigDict(frozen=True)

    front: str
    back: str
    hint: str = ""
    tags: Tuple[str, ...] = ()

    @field_validator("hint", mode="before")
    @classmethod
    def _missing_hint_is_empty(cls, value: object) -> object:
        return "" if value is None else value


class BucketRange(BaseModel):
    min_bucket: int = Field(..., ge=0)
    max_bucket: int = Field(..., ge=0)


BucketMap = Dict[int, Set[Flashcard]]
BucketSets = List[Optional[Set[Flashcard]]]
