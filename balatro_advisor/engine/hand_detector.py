"""
Hand classification for the Balatro advisor.
Identifies the poker hand formed by up to five played cards.
"""

from collections import Counter
from enum import Enum
from typing import Sequence

from .deck import Card
from .errors import UnknownHandType


class HandType(Enum):
    """Poker hand types, ordered by base strength."""
    HIGH_CARD = "High Card"
    PAIR = "Pair"
    TWO_PAIR = "Two Pair"
    THREE_OF_A_KIND = "Three of a Kind"
    STRAIGHT = "Straight"
    FLUSH = "Flush"
    FULL_HOUSE = "Full House"
    FOUR_OF_A_KIND = "Four of a Kind"
    STRAIGHT_FLUSH = "Straight Flush"
    FIVE_OF_A_KIND = "Five of a Kind"
    FLUSH_HOUSE = "Flush House"
    FLUSH_FIVE = "Flush Five"

    @property
    def strength(self) -> int:
        return _STRENGTH[self]

    @classmethod
    def from_name(cls, name) -> "HandType":
        """Resolve a member, enum name ("FULL_HOUSE") or display name ("Full House")."""
        if isinstance(name, cls):
            return name
        if isinstance(name, str):
            key = name.strip().upper().replace(" ", "_")
            if key in cls.__members__:
                return cls[key]
        raise UnknownHandType(f"Unknown hand type: {name!r}")

    def __str__(self) -> str:
        return self.value


_STRENGTH = {hand_type: i for i, hand_type in enumerate(HandType)}

# Base chips and mult for each hand type (level 1)
HAND_BASE_VALUES = {
    HandType.HIGH_CARD: (5, 1),
    HandType.PAIR: (10, 2),
    HandType.TWO_PAIR: (20, 2),
    HandType.THREE_OF_A_KIND: (30, 3),
    HandType.STRAIGHT: (30, 4),
    HandType.FLUSH: (35, 4),
    HandType.FULL_HOUSE: (40, 4),
    HandType.FOUR_OF_A_KIND: (60, 7),
    HandType.STRAIGHT_FLUSH: (100, 8),
    HandType.FIVE_OF_A_KIND: (120, 12),
    HandType.FLUSH_HOUSE: (140, 14),
    HandType.FLUSH_FIVE: (160, 16),
}

# Chips and mult added per level up
LEVEL_UP_BONUS = {
    HandType.HIGH_CARD: (10, 1),
    HandType.PAIR: (15, 1),
    HandType.TWO_PAIR: (20, 1),
    HandType.THREE_OF_A_KIND: (20, 2),
    HandType.STRAIGHT: (30, 3),
    HandType.FLUSH: (15, 2),
    HandType.FULL_HOUSE: (25, 2),
    HandType.FOUR_OF_A_KIND: (30, 3),
    HandType.STRAIGHT_FLUSH: (40, 3),
    HandType.FIVE_OF_A_KIND: (35, 3),
    HandType.FLUSH_HOUSE: (40, 3),
    HandType.FLUSH_FIVE: (40, 3),
}

# Ace sits only at the bottom of the run
STRAIGHT_ORDER = ["A", "2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K"]
STRAIGHT_POSITION = {rank: i for i, rank in enumerate(STRAIGHT_ORDER)}

MAX_HAND_CARDS = 5


def hand_values(hand_type: HandType, level: int = 1) -> tuple[int, int]:
    """Return (base_chips, base_mult) for a hand type at the given level."""
    chips, mult = HAND_BASE_VALUES[hand_type]
    bonus_chips, bonus_mult = LEVEL_UP_BONUS[hand_type]
    return chips + bonus_chips * (level - 1), mult + bonus_mult * (level - 1)


def is_flush(cards: Sequence[Card]) -> bool:
    suit_counts = Counter(c.suit for c in cards)
    return any(count >= 5 for count in suit_counts.values())


def is_straight(cards: Sequence[Card]) -> bool:
    """
    Five distinct ranks in consecutive positions of A,2,...,K.

    A-2-3-4-5 counts, 10-J-Q-K-A does not.
    """
    positions = sorted({STRAIGHT_POSITION[c.rank] for c in cards})
    for start in range(len(positions) - 4):
        window = positions[start:start + 5]
        if window[-1] - window[0] == 4:
            return True
    return False


def classify(cards: Sequence[Card]) -> HandType:
    """
    Classify the hand formed by the first five cards.

    Extra cards are ignored; pick the five to play with the search first.
    An empty hand is a High Card.
    """
    cards = list(cards)[:MAX_HAND_CARDS]
    if not cards:
        return HandType.HIGH_CARD

    counts = sorted(Counter(c.rank for c in cards).values(), reverse=True)
    counts.append(0)  # so counts[1] always exists
    flush = is_flush(cards)
    straight = is_straight(cards)

    if counts[0] == 5 and flush:
        return HandType.FLUSH_FIVE
    if counts[0] == 5:
        return HandType.FIVE_OF_A_KIND
    if counts[0] == 3 and counts[1] == 2 and flush:
        return HandType.FLUSH_HOUSE
    if straight and flush:
        return HandType.STRAIGHT_FLUSH
    if counts[0] == 4:
        return HandType.FOUR_OF_A_KIND
    if counts[0] == 3 and counts[1] == 2:
        return HandType.FULL_HOUSE
    if flush:
        return HandType.FLUSH
    if straight:
        return HandType.STRAIGHT
    if counts[0] == 3:
        return HandType.THREE_OF_A_KIND
    if counts[0] == 2 and counts[1] == 2:
        return HandType.TWO_PAIR
    if counts[0] == 2:
        return HandType.PAIR
    return HandType.HIGH_CARD
