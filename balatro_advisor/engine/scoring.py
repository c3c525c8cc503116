"""
Scoring engine for the Balatro advisor.
Calculates the score of a played hand from its type, level and cards.
"""

import math
import threading
from dataclasses import dataclass, field
from typing import Mapping, Optional, Sequence

from .deck import Card
from .errors import InvalidLevel
from .hand_detector import HandType, MAX_HAND_CARDS, classify, hand_values


class HandLevelTable:
    """
    Level of every hand type, starting at 1.

    Owned by a single ScoringEngine. Writes go through ``set``; reads and
    writes share one lock so a score never sees a half-applied update.
    """

    def __init__(self, levels: Optional[Mapping] = None):
        self._levels: dict[HandType, int] = {hand_type: 1 for hand_type in HandType}
        self._lock = threading.Lock()
        for hand_type, level in (levels or {}).items():
            self.set(hand_type, level)

    def get(self, hand_type) -> int:
        hand_type = HandType.from_name(hand_type)
        with self._lock:
            return self._levels[hand_type]

    def set(self, hand_type, level: int) -> "HandLevelTable":
        """Set the level of one hand type and return the table."""
        hand_type = HandType.from_name(hand_type)
        if isinstance(level, bool) or not isinstance(level, int):
            raise InvalidLevel(f"Level for {hand_type} must be an integer, got {level!r}")
        if level < 1:
            raise InvalidLevel(f"Level for {hand_type} must be >= 1, got {level}")
        with self._lock:
            self._levels[hand_type] = level
        return self

    def as_dict(self) -> dict[str, int]:
        with self._lock:
            return {hand_type.value: level for hand_type, level in self._levels.items()}

    def copy(self) -> "HandLevelTable":
        with self._lock:
            return HandLevelTable(dict(self._levels))

    def __repr__(self) -> str:
        leveled = {k: v for k, v in self.as_dict().items() if v > 1}
        return f"HandLevelTable({leveled})"


@dataclass(frozen=True)
class ScoreResult:
    """
    Score of one played hand with the numbers behind it.

    ``score == floor(total_chips * total_mult * x_mult)``.
    """
    hand_type: HandType
    level: int
    score: int
    base_chips: int
    base_mult: int
    total_chips: int
    total_mult: int
    x_mult: float
    cards: tuple[Card, ...] = field(default=(), compare=False)

    @property
    def breakdown(self) -> dict:
        return {
            "base_chips": self.base_chips,
            "base_mult": self.base_mult,
            "total_chips": self.total_chips,
            "total_mult": self.total_mult,
            "x_mult": self.x_mult,
        }

    @property
    def calculation(self) -> str:
        return f"{self.total_chips} × {self.total_mult} × {self.x_mult:.2f} = {self.score}"

    def to_dict(self) -> dict:
        return {
            "hand_type": self.hand_type.value,
            "level": self.level,
            "score": self.score,
            "cards": [str(c) for c in self.cards],
            **self.breakdown,
        }


class ScoringEngine:
    """
    Calculates scores following Balatro's scoring rules.

    Score = (Base Chips + Card Chips) × (Base Mult + Card Mult) × X-Mult
    """

    def __init__(self, levels: Optional[HandLevelTable] = None):
        self.levels = levels if levels is not None else HandLevelTable()

    def get_level(self, hand_type) -> int:
        return self.levels.get(hand_type)

    def set_level(self, hand_type, level: int) -> HandLevelTable:
        """Level up (or down) a hand type; returns the engine's table."""
        return self.levels.set(hand_type, level)

    def set_levels(self, levels: Mapping) -> HandLevelTable:
        for hand_type, level in levels.items():
            self.levels.set(hand_type, level)
        return self.levels

    def score(self, cards: Sequence[Card], jokers: Optional[list] = None) -> ScoreResult:
        """
        Score the first five cards as a single played hand.

        Args:
            cards: Cards to play
            jokers: Reserved for joker effects; accepted and ignored
        """
        cards = tuple(cards)[:MAX_HAND_CARDS]
        if not cards:
            return ScoreResult(
                hand_type=HandType.HIGH_CARD,
                level=self.levels.get(HandType.HIGH_CARD),
                score=0,
                base_chips=0,
                base_mult=0,
                total_chips=0,
                total_mult=0,
                x_mult=1.0,
            )

        # 1. Hand type and its level
        hand_type = classify(cards)
        level = self.levels.get(hand_type)

        # 2. Base chips and mult
        base_chips, base_mult = hand_values(hand_type, level)

        # 3-5. Card contributions
        total_chips = base_chips + sum(c.chip_contribution() for c in cards)
        total_mult = base_mult + sum(c.mult_contribution() for c in cards)
        x_mult = 1.0
        for card in cards:
            x_mult *= card.xmult_contribution()

        # 6. Final score
        final_score = math.floor(total_chips * total_mult * x_mult)

        return ScoreResult(
            hand_type=hand_type,
            level=level,
            score=final_score,
            base_chips=base_chips,
            base_mult=base_mult,
            total_chips=total_chips,
            total_mult=total_mult,
            x_mult=x_mult,
            cards=cards,
        )


def calculate_score(cards: Sequence[Card], levels: Optional[HandLevelTable] = None) -> int:
    """Convenience function to calculate a score."""
    return ScoringEngine(levels).score(cards).score
