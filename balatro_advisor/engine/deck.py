"""
Cards and decks for the Balatro advisor.
Handles card creation, validation, text parsing and dealing.
"""

import itertools
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .errors import InvalidCard


class Suit(Enum):
    SPADES = "Spades"
    HEARTS = "Hearts"
    DIAMONDS = "Diamonds"
    CLUBS = "Clubs"

    @property
    def symbol(self) -> str:
        return SUIT_SYMBOLS[self]


class Enhancement(Enum):
    NONE = "None"
    BONUS = "Bonus"      # +30 Chips
    MULT = "Mult"        # +4 Mult
    WILD = "Wild"        # reserved
    GLASS = "Glass"      # X2 Mult
    STEEL = "Steel"      # X1.5 Mult
    STONE = "Stone"      # +50 Chips
    GOLD = "Gold"        # reserved
    LUCKY = "Lucky"      # reserved


class Edition(Enum):
    BASE = "Base"
    FOIL = "Foil"                # +50 Chips
    HOLOGRAPHIC = "Holographic"  # +10 Mult
    POLYCHROME = "Polychrome"    # X1.5 Mult


class Seal(Enum):
    # No seal affects scoring yet
    NONE = "None"
    GOLD = "Gold"
    RED = "Red"
    BLUE = "Blue"
    PURPLE = "Purple"


RANKS = ["2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K", "A"]
RANK_VALUES = {
    "2": 2, "3": 3, "4": 4, "5": 5, "6": 6, "7": 7, "8": 8, "9": 9, "10": 10,
    "J": 10, "Q": 10, "K": 10, "A": 11
}

SUIT_SYMBOLS = {
    Suit.SPADES: "♠",
    Suit.HEARTS: "♥",
    Suit.DIAMONDS: "♦",
    Suit.CLUBS: "♣",
}

# Accepted spellings, all lowercase
SUIT_ALIASES = {
    "♠": Suit.SPADES, "s": Suit.SPADES, "spade": Suit.SPADES,
    "♥": Suit.HEARTS, "h": Suit.HEARTS, "heart": Suit.HEARTS,
    "♦": Suit.DIAMONDS, "d": Suit.DIAMONDS, "diamond": Suit.DIAMONDS,
    "♣": Suit.CLUBS, "c": Suit.CLUBS, "club": Suit.CLUBS,
}
RANK_ALIASES = {"t": "10", "jack": "J", "queen": "Q", "king": "K", "ace": "A"}
MODIFIER_ALIASES = {
    "holo": Edition.HOLOGRAPHIC,
    "poly": Edition.POLYCHROME,
}

_card_ids = itertools.count(1)


def _coerce_rank(rank) -> str:
    if isinstance(rank, bool):
        raise InvalidCard(f"Invalid rank: {rank!r}")
    if isinstance(rank, int):
        rank = str(rank)
    if isinstance(rank, str):
        text = rank.strip()
        text = RANK_ALIASES.get(text.lower(), text.upper())
        if text in RANK_VALUES:
            return text
    raise InvalidCard(f"Invalid rank: {rank!r} (expected one of {', '.join(RANKS)})")


def _coerce_suit(suit) -> Suit:
    if isinstance(suit, Suit):
        return suit
    if isinstance(suit, str):
        text = suit.strip().lower()
        for member in Suit:
            if text in (member.name.lower(), member.value.lower()):
                return member
        if text in SUIT_ALIASES:
            return SUIT_ALIASES[text]
    raise InvalidCard(f"Invalid suit: {suit!r} (expected one of {', '.join(s.value for s in Suit)})")


def _coerce_modifier(enum_cls, value, default):
    """Resolve a modifier given as a member, its name or its value."""
    if value is None or value == "":
        return default
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        text = value.strip().lower()
        for member in enum_cls:
            if text in (member.name.lower(), member.value.lower()):
                return member
        alias = MODIFIER_ALIASES.get(text)
        if isinstance(alias, enum_cls):
            return alias
    raise InvalidCard(f"Invalid {enum_cls.__name__.lower()}: {value!r}")


@dataclass(frozen=True, eq=False)
class Card:
    """
    A playing card with its Balatro modifiers.

    Cards are immutable. Equality is identity: two cards with the same rank,
    suit and modifiers are still different cards, told apart by ``uid``.
    """
    rank: str
    suit: Suit
    enhancement: Enhancement = Enhancement.NONE
    edition: Edition = Edition.BASE
    seal: Seal = Seal.NONE
    uid: int = field(default_factory=lambda: next(_card_ids), repr=False)

    def __post_init__(self):
        object.__setattr__(self, "rank", _coerce_rank(self.rank))
        object.__setattr__(self, "suit", _coerce_suit(self.suit))
        object.__setattr__(self, "enhancement",
                           _coerce_modifier(Enhancement, self.enhancement, Enhancement.NONE))
        object.__setattr__(self, "edition",
                           _coerce_modifier(Edition, self.edition, Edition.BASE))
        object.__setattr__(self, "seal", _coerce_modifier(Seal, self.seal, Seal.NONE))

    @property
    def chip_value(self) -> int:
        """Base chip value of the rank."""
        return RANK_VALUES[self.rank]

    def chip_contribution(self) -> int:
        """Chips this card adds when scored."""
        chips = self.chip_value
        if self.enhancement == Enhancement.BONUS:
            chips += 30
        if self.enhancement == Enhancement.STONE:
            chips += 50
        if self.edition == Edition.FOIL:
            chips += 50
        return chips

    def mult_contribution(self) -> int:
        """Additive mult this card adds when scored."""
        mult = 0
        if self.enhancement == Enhancement.MULT:
            mult += 4
        if self.edition == Edition.HOLOGRAPHIC:
            mult += 10
        return mult

    def xmult_contribution(self) -> float:
        """Multiplicative mult factor of this card (1.0 when unmodified)."""
        x_mult = 1.0
        if self.enhancement == Enhancement.GLASS:
            x_mult *= 2.0
        if self.enhancement == Enhancement.STEEL:
            x_mult *= 1.5
        if self.edition == Edition.POLYCHROME:
            x_mult *= 1.5
        return x_mult

    @classmethod
    def parse(cls, text: str) -> "Card":
        """
        Build a card from short text.

        Format is ``<rank><suit>[:modifier...]``, e.g. ``"A♠"``, ``"10h"``,
        ``"Kd:glass:foil"`` or ``"Q♣:bonus:red"``. Each modifier is matched
        against enhancements, then editions, then seals.
        """
        if not isinstance(text, str) or not text.strip():
            raise InvalidCard(f"Invalid card text: {text!r}")
        head, *mods = text.strip().split(":")
        if len(head) < 2:
            raise InvalidCard(f"Invalid card text: {text!r}")

        kwargs = {}
        for mod in mods:
            for key, enum_cls in (("enhancement", Enhancement),
                                  ("edition", Edition),
                                  ("seal", Seal)):
                if key in kwargs:
                    continue
                try:
                    kwargs[key] = _coerce_modifier(enum_cls, mod, None)
                except InvalidCard:
                    continue
                break
            else:
                raise InvalidCard(f"Unknown modifier {mod!r} in card {text!r}")

        return cls(rank=head[:-1], suit=head[-1], **kwargs)

    def __str__(self) -> str:
        base = f"{self.rank}{self.suit.symbol}"
        mods = []
        if self.enhancement != Enhancement.NONE:
            mods.append(self.enhancement.value)
        if self.edition != Edition.BASE:
            mods.append(self.edition.value)
        if self.seal != Seal.NONE:
            mods.append(f"{self.seal.value} Seal")
        if mods:
            return f"{base} [{', '.join(mods)}]"
        return base


def parse_hand(text: str) -> list[Card]:
    """Parse whitespace or comma separated card texts into fresh cards."""
    tokens = text.replace(",", " ").split()
    return [Card.parse(token) for token in tokens]


@dataclass
class Deck:
    cards: list[Card] = field(default_factory=list)
    rng: random.Random = field(default_factory=random.Random, repr=False)

    @classmethod
    def standard_52(cls, seed: Optional[int] = None) -> "Deck":
        """Create a standard 52-card deck."""
        cards = [Card(rank=rank, suit=suit) for suit in Suit for rank in RANKS]
        return cls(cards=cards, rng=random.Random(seed))

    def shuffle(self) -> None:
        self.rng.shuffle(self.cards)

    def draw(self, n: int = 1) -> list[Card]:
        """Draw up to n cards from the top of the deck."""
        drawn = []
        for _ in range(n):
            if not self.cards:
                break
            drawn.append(self.cards.pop())
        return drawn


def deal_random_hand(size: int = 8, seed: Optional[int] = None) -> list[Card]:
    """Shuffle a fresh standard deck and deal ``size`` cards from it."""
    deck = Deck.standard_52(seed)
    deck.shuffle()
    return deck.draw(size)
