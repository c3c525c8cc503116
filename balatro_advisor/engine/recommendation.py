"""
Play/discard recommendations for the Balatro advisor.
"""

import logging
from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import Sequence

from .deck import Card
from .hand_detector import HandType
from .search import BestPlay

logger = logging.getLogger(__name__)

STRONG_HAND_THRESHOLD = 100
MIN_CARDS_KEPT = 3


class Action(Enum):
    PLAY = "PLAY"
    DISCARD = "DISCARD"


class Confidence(Enum):
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"


class Urgency(Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    CRITICAL = "CRITICAL"


@dataclass
class Recommendation:
    """What to do with the current hand and why."""
    action: Action
    confidence: Confidence
    cards: tuple[Card, ...]
    hand_type: HandType
    expected_score: int
    meets_target: bool
    cards_to_discard: tuple[Card, ...]
    reasoning: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "action": self.action.value,
            "confidence": self.confidence.value,
            "cards": [str(c) for c in self.cards],
            "hand_type": self.hand_type.value,
            "expected_score": self.expected_score,
            "meets_target": self.meets_target,
            "cards_to_discard": [str(c) for c in self.cards_to_discard],
            "reasoning": list(self.reasoning),
        }


@dataclass
class DiscardAdvice:
    """Cards to throw away and cards to hold."""
    cards_to_discard: list[Card]
    keep_cards: list[Card]
    reasoning: str


def _check_counter(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


def recommend(best: BestPlay, target_score: int, hands_remaining: int,
              discards_remaining: int) -> Recommendation:
    """
    Decide between playing the best hand now and discarding.

    1. Target reached: play (HIGH).
    2. Short, discards left: discard the leftover cards (MEDIUM).
    3. Short, more hands after this one: play (HIGH).
    4. Short on the last hand: play anyway (LOW).
    """
    _check_counter("target_score", target_score)
    _check_counter("hands_remaining", hands_remaining)
    _check_counter("discards_remaining", discards_remaining)

    score = best.score
    rec = Recommendation(
        action=Action.PLAY,
        confidence=Confidence.HIGH,
        cards=best.recommended_cards,
        hand_type=best.hand_type,
        expected_score=score,
        meets_target=score >= target_score,
        cards_to_discard=best.cards_to_discard,
    )

    if rec.meets_target:
        branch = "meets_target"
        rec.reasoning.append(
            f"✓ This play scores {score}, {score - target_score} over target of {target_score}")
        rec.reasoning.append("→ Play immediately to conserve hands for next blind")
    else:
        deficit = target_score - score
        rec.reasoning.append(f"⚠ This play scores {score}, {deficit} short of target {target_score}")

        if discards_remaining > 0:
            branch = "discard"
            rec.action = Action.DISCARD
            rec.confidence = Confidence.MEDIUM
            rec.reasoning.append(
                f"→ Consider discarding {len(best.cards_to_discard)} cards to fish for better hand")
            rec.reasoning.append(f"   Discards remaining: {discards_remaining}")
        elif hands_remaining > 1:
            branch = "play_with_margin"
            rec.reasoning.append(
                f"→ Play now, you have {hands_remaining - 1} more hands to reach target")
        else:
            branch = "last_hand"
            rec.confidence = Confidence.LOW
            rec.reasoning.append("→ Last hand - play best available")

    logger.debug("Recommendation %s/%s (%s): %s scoring %d vs target %d",
                 rec.action.value, rec.confidence.value, branch, rec.hand_type, score, target_score)
    return rec


def recommend_discard(best: BestPlay, hand: Sequence[Card],
                      strong_threshold: int = STRONG_HAND_THRESHOLD) -> DiscardAdvice:
    """
    Pick cards to discard.

    A strong best play keeps its cards and drops the rest. Otherwise keep
    pairs and cards of suits with three or more, and never keep fewer than
    three cards.
    """
    if best.score > strong_threshold:
        return DiscardAdvice(
            cards_to_discard=list(best.cards_to_discard),
            keep_cards=list(best.recommended_cards),
            reasoning=(f"Current hand is {best.hand_type} ({best.score} points). "
                       f"Discard these cards to improve."),
        )

    rank_counts = Counter(c.rank for c in hand)
    suit_counts = Counter(c.suit for c in hand)

    keep_cards = []
    discard_cards = []
    for card in hand:
        if rank_counts[card.rank] >= 2 or suit_counts[card.suit] >= 3:
            keep_cards.append(card)
        else:
            discard_cards.append(card)

    while len(keep_cards) < MIN_CARDS_KEPT and discard_cards:
        keep_cards.append(discard_cards.pop())

    return DiscardAdvice(
        cards_to_discard=discard_cards,
        keep_cards=keep_cards,
        reasoning=(f"Looking for pairs or flushes. "
                   f"Discarding {len(discard_cards)} low-value cards."),
    )


def urgency(rec: Recommendation, hands_remaining: int, target_score: int) -> Urgency:
    """How pressing the current blind is."""
    if rec.meets_target:
        return Urgency.LOW
    if hands_remaining <= 1:
        return Urgency.CRITICAL
    if rec.expected_score < target_score * 0.5:
        return Urgency.HIGH
    return Urgency.MEDIUM
