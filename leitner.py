"""
Modified-Leitner scheduling for flashcard practice.

Cards sit in numbered buckets. Bucket 0 is practised every day and bucket
``i`` every ``2 ** i`` days, so a card that keeps being answered easily
resurfaces less and less often. After each trial ``update`` moves the card:
one bucket up on EASY, one down on HARD and back to bucket 0 on WRONG.

The day is an abstract counter supplied by the caller; nothing here reads
the clock.
"""
from __future__ import annotations

import logging
import os
from typing import Optional, Set, Union

from flashcards import (
    AnswerDifficulty,
    BucketMap,
    BucketRange,
    BucketSets,
    Flashcard,
    InvalidArgument,
)

logger = logging.getLogger(__name__)

HINT_FALLBACK = os.environ.get("LEITNER_HINT_FALLBACK", "You do not deserve hint")
UNPRACTISED_BUCKET = 0


def _is_bucket_number(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def _check_bucket_map(buckets: object) -> None:
    if not isinstance(buckets, dict):
        raise InvalidArgument(
            f"buckets must be a dict of bucket number to set of cards, got {type(buckets).__name__}"
        )
    for key, cards in buckets.items():
        if not _is_bucket_number(key):
            raise InvalidArgument(f"bucket number must be a non-negative int, got {key!r}")
        if not isinstance(cards, set):
            raise InvalidArgument(
                f"bucket {key} must hold a set of cards, got {type(cards).__name__}"
            )


def review_interval(bucket: int) -> int:
    return 2 ** bucket


def next_bucket(former: int, difficulty: Union[AnswerDifficulty, int]) -> int:
    """Bucket a card lands in after a trial answered with ``difficulty``."""
    if difficulty == AnswerDifficulty.EASY:
        return former + 1
    if difficulty == AnswerDifficulty.HARD:
        return max(former - 1, UNPRACTISED_BUCKET)
    if difficulty == AnswerDifficulty.WRONG:
        return UNPRACTISED_BUCKET
    raise InvalidArgument(f"unknown answer difficulty: {difficulty!r}")


def to_bucket_sets(buckets: BucketMap) -> BucketSets:
    """
    Dense view of ``buckets``: element ``i`` is the set held under key ``i``.

    The sets are shared with the mapping, not copied, so a later ``update``
    on the mapping is visible through the returned list. Bucket numbers with
    no key are left as ``None``, which is not the same as an empty bucket.
    """
    _check_bucket_map(buckets)
    if not buckets:
        return []
    dense: BucketSets = [None] * (max(buckets) + 1)
    for key, cards in buckets.items():
        dense[key] = cards
    return dense


def get_bucket_range(buckets: BucketSets) -> Optional[BucketRange]:
    """
    Lowest and highest bucket that exist in ``buckets``, as a rough measure of
    progress. An existing bucket counts even when it is empty. Returns
    ``None`` when no bucket exists at all.
    """
    if not isinstance(buckets, (list, tuple)):
        raise InvalidArgument(
            f"buckets must be a list of optional card sets, got {type(buckets).__name__}"
        )
    lowest: Optional[int] = None
    highest: Optional[int] = None
    for index, cards in enumerate(buckets):
        if cards is None:
            continue
        if lowest is None or index < lowest:
            lowest = index
        if highest is None or index > highest:
            highest = index
    if lowest is None or highest is None:
        return None
    return BucketRange(min_bucket=lowest, max_bucket=highest)


def practice(buckets: BucketSets, day: int) -> Set[Flashcard]:
    """Cards due on ``day``: bucket ``i`` is due when ``day`` is a multiple of ``2 ** i``."""
    due: Set[Flashcard] = set()
    for index, cards in enumerate(buckets):
        if cards and day % review_interval(index) == 0:
            due.update(cards)
    return due


def update(
    buckets: BucketMap,
    card: Flashcard,
    difficulty: AnswerDifficulty,
) -> BucketMap:
    """
    Move ``card`` to the bucket earned by the trial and return ``buckets``.

    The mapping is changed in place. A card that is in no bucket is left
    alone and the mapping is returned untouched.
    """
    if not isinstance(card, Flashcard):
        raise InvalidArgument(f"card must be a Flashcard, got {type(card).__name__}")
    _check_bucket_map(buckets)
    try:
        difficulty = AnswerDifficulty(difficulty)
    except ValueError:
        raise InvalidArgument(f"unknown answer difficulty: {difficulty!r}") from None

    former = next((key for key, cards in buckets.items() if card in cards), None)
    if former is None:
        logger.debug("Card %r is not in any bucket; nothing to update.", card.front)
        return buckets

    target = next_bucket(former, difficulty)
    buckets[former].discard(card)
    buckets.setdefault(target, set()).add(card)
    logger.debug(
        "Moved card %r from bucket %d to %d (%s).",
        card.front,
        former,
        target,
        difficulty.name,
    )
    return buckets


def get_hint(card: Flashcard) -> str:
    if card.hint:
        return card.hint
    return HINT_FALLBACK
