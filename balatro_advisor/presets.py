"""
Preset scenarios for the Balatro advisor.
Ready-made hands and game situations for the demo and the web app.
"""

from dataclasses import dataclass, field
from typing import Optional

from .engine.deck import Card, parse_hand


@dataclass
class Scenario:
    """A hand plus the blind situation it is played in."""
    name: str
    description: str
    hand: str  # card text, see Card.parse
    target_score: int
    hands_remaining: int
    discards_remaining: int
    ante: int = 1
    money: int = 4
    hand_levels: dict = field(default_factory=dict)  # HandType name -> level

    def cards(self) -> list[Card]:
        """Fresh card instances for this scenario's hand."""
        return parse_hand(self.hand)


# Built-in scenarios
PRESETS = {
    "easy_win": Scenario(
        name="Easy Win",
        description="A strong Spade run is available; play it immediately",
        hand="K♠ Q♠ J♠ 10♠ 9♠ 7♦ 3♣ 2♥",
        target_score=250,
        hands_remaining=3,
        discards_remaining=3,
        ante=1,
    ),

    "tough_decision": Scenario(
        name="Tough Decision",
        description="A Pair of Aces and a Spade flush compete for the play",
        hand="A♠ A♥ K♠ Q♠ J♠ 10♠ 9♦ 8♣",
        target_score=400,
        hands_remaining=2,
        discards_remaining=2,
        ante=2,
    ),

    "critical": Scenario(
        name="Critical Situation",
        description="Last hand, no discards, weak pairs against a tough target",
        hand="K♠ K♥ 7♦ 5♣ 3♠ 2♥ 2♦ 2♣",
        target_score=500,
        hands_remaining=1,
        discards_remaining=0,
        ante=3,
    ),

    "enhanced_cards": Scenario(
        name="Enhanced Cards",
        description="Glass, Mult and Polychrome effects stacking multiplicatively",
        hand="A♠:glass A♥:mult K♦:polychrome Q♣:bonus J♠:steel 10♥ 5♦ 3♣",
        target_score=800,
        hands_remaining=2,
        discards_remaining=3,
        ante=4,
    ),
}


def get_preset(name: str) -> Optional[Scenario]:
    """Get a scenario by name."""
    return PRESETS.get(name.lower().replace(" ", "_"))


def list_presets() -> list[str]:
    """List all available scenario names."""
    return list(PRESETS.keys())


def get_preset_info(name: str) -> Optional[dict]:
    """Get info about a scenario."""
    preset = get_preset(name)
    if preset:
        return {
            "name": preset.name,
            "description": preset.description,
            "hand": preset.hand,
            "target_score": preset.target_score,
            "hands_remaining": preset.hands_remaining,
            "discards_remaining": preset.discards_remaining,
            "ante": preset.ante,
        }
    return None
