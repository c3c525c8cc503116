"""
Best-play search for the Balatro advisor.

Every k-card subset of the hand is scored and the best one kept. The search
is exhaustive: C(8, 5) = 56 and C(10, 5) = 252 evaluations are trivial, but
the count grows combinatorially, so hands above ``EXHAUSTIVE_LIMIT`` cards
are still searched and logged as a warning.
"""

import logging
from dataclasses import dataclass
from itertools import combinations
from typing import Iterator, Optional, Sequence

from .deck import Card
from .hand_detector import HandType, MAX_HAND_CARDS
from .scoring import ScoreResult, ScoringEngine

logger = logging.getLogger(__name__)

EXHAUSTIVE_LIMIT = 12


@dataclass(frozen=True)
class BestPlay:
    """The highest scoring subset of a hand and what is left over."""
    result: ScoreResult
    recommended_cards: tuple[Card, ...]
    cards_to_discard: tuple[Card, ...]

    @property
    def score(self) -> int:
        return self.result.score

    @property
    def hand_type(self) -> HandType:
        return self.result.hand_type

    @property
    def level(self) -> int:
        return self.result.level

    @property
    def calculation(self) -> str:
        return self.result.calculation


def iter_combinations(cards: Sequence[Card], k: int) -> Iterator[tuple[Card, ...]]:
    """
    Lazily yield every k-card combination in lexicographic index order.

    Each call starts a fresh sequence, so the order is reproducible.
    """
    if k < 0:
        raise ValueError(f"Subset size must be non-negative, got {k}")
    return combinations(tuple(cards), k)


def _subset_size(hand: Sequence[Card], k: int) -> int:
    if k < 1:
        raise ValueError(f"Subset size must be at least 1, got {k}")
    if k > MAX_HAND_CARDS:
        # Only the first five cards of a play are scored
        raise ValueError(f"Subset size must be at most {MAX_HAND_CARDS}, got {k}")
    return min(k, len(hand))


def _check_limit(hand: Sequence[Card], limit: int) -> None:
    if len(hand) > limit:
        logger.warning("Exhaustive search over %d cards (limit %d); consider pruning",
                       len(hand), limit)


def _complement(hand: Sequence[Card], chosen: Sequence[Card]) -> tuple[Card, ...]:
    chosen_ids = {card.uid for card in chosen}
    return tuple(card for card in hand if card.uid not in chosen_ids)


def best_play(engine: ScoringEngine, hand: Sequence[Card], k: int = MAX_HAND_CARDS,
              limit: int = EXHAUSTIVE_LIMIT) -> BestPlay:
    """
    Find the highest scoring k-card play in the hand.

    Ties keep the first combination enumerated. Hands of k cards or fewer
    are scored whole.
    """
    hand = tuple(hand)
    size = _subset_size(hand, k)

    if len(hand) <= size:
        result = engine.score(hand)
        return BestPlay(result=result, recommended_cards=hand, cards_to_discard=())

    _check_limit(hand, limit)

    best: Optional[ScoreResult] = None
    best_combo: tuple[Card, ...] = ()
    evaluated = 0
    for combo in iter_combinations(hand, size):
        result = engine.score(combo)
        evaluated += 1
        if best is None or result.score > best.score:
            best, best_combo = result, combo

    logger.debug("Evaluated %d combinations of %d from %d cards; best %s for %d",
                 evaluated, size, len(hand), best.hand_type, best.score)

    return BestPlay(
        result=best,
        recommended_cards=best_combo,
        cards_to_discard=_complement(hand, best_combo),
    )


def rank_all_plays(engine: ScoringEngine, hand: Sequence[Card], k: int = MAX_HAND_CARDS,
                   limit: int = EXHAUSTIVE_LIMIT) -> list[ScoreResult]:
    """Score every k-card play, highest first; equal scores keep enumeration order."""
    hand = tuple(hand)
    size = _subset_size(hand, k)

    if len(hand) <= size:
        return [engine.score(hand)]

    _check_limit(hand, limit)
    results = [engine.score(combo) for combo in iter_combinations(hand, size)]
    return sorted(results, key=lambda r: r.score, reverse=True)
