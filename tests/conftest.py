import pytest

from flashcards import Flashcard


@pytest.fixture
def cards():
    return [
        Flashcard(front=f"front{i}", back=f"back{i}", hint=f"hint{i}", tags=["deck"])
        for i in range(4)
    ]
