import pytest
from pydantic import ValidationError

from flashcards import AnswerDifficulty, BucketRange, Flashcard, InvalidArgument


def test_flashcard_is_immutable():
    card = Flashcard(front="Hund", back="dog")
    with pytest.raises(ValidationError):
        card.front = "Katze"


def test_missing_hint_becomes_empty_and_tags_become_tuple():
    card = Flashcard(front="Hund", back="dog", hint=None, tags=["noun", "animal"])
    assert card.hint == ""
    assert card.tags == ("noun", "animal")


def test_identical_cards_share_set_membership():
    first = Flashcard(front="Hund", back="dog", tags=["noun"])
    second = Flashcard(front="Hund", back="dog", tags=["noun"])
    assert first == second
    assert len({first, second}) == 1


def test_answer_difficulty_is_closed():
    assert [d.name for d in AnswerDifficulty] == ["WRONG", "HARD", "EASY"]
    with pytest.raises(ValueError):
        AnswerDifficulty(3)


def test_bucket_range_rejects_negative_bounds():
    with pytest.raises(ValidationError):
        BucketRange(min_bucket=-1, max_bucket=2)


def test_invalid_argument_is_a_type_error():
    assert issubclass(InvalidArgument, TypeError)
