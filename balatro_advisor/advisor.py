"""
Main API for the Balatro advisor.
Provides a clean interface for scoring hands and getting recommendations.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Mapping, Optional, Sequence, Union

from .config import AdvisorConfig
from .engine.deck import Card
from .engine.hand_detector import HandType, classify as classify_hand
from .engine.recommendation import (DiscardAdvice, Recommendation, Urgency,
                                    recommend as recommend_play, recommend_discard, urgency)
from .engine.scoring import HandLevelTable, ScoreResult, ScoringEngine
from .engine.search import BestPlay, best_play as search_best_play, rank_all_plays
from .formatting import format_alternatives, format_recommendation
from .presets import Scenario, get_preset, list_presets


@dataclass
class SituationReport:
    """Everything the advisor knows about the current blind."""
    target_score: int
    hands_remaining: int
    discards_remaining: int
    hand_size: int
    ante: int
    money: int
    recommendation: Recommendation
    alternatives: list[ScoreResult]
    urgency: Urgency
    timestamp: str = field(default_factory=lambda: datetime.now().isoformat())

    def __str__(self):
        lines = [
            f"{'='*50}",
            f"  Ante {self.ante} - Target {self.target_score:,} - Urgency {self.urgency.value}",
            f"  Hands: {self.hands_remaining}  Discards: {self.discards_remaining}  Money: ${self.money}",
            f"{'='*50}",
            format_recommendation(self.recommendation),
        ]
        if self.alternatives:
            lines.append("")
            lines.append("ALTERNATIVE PLAYS:")
            lines.append(format_alternatives(self.alternatives, limit=len(self.alternatives)))
        return "\n".join(lines)

    def to_dict(self):
        return {
            "timestamp": self.timestamp,
            "ante": self.ante,
            "money": self.money,
            "current_situation": {
                "target_score": self.target_score,
                "hands_remaining": self.hands_remaining,
                "discards_remaining": self.discards_remaining,
                "hand_size": self.hand_size,
            },
            "primary_recommendation": self.recommendation.to_dict(),
            "alternative_plays": [play.to_dict() for play in self.alternatives],
            "urgency": self.urgency.value,
        }


class Advisor:
    """
    Main advisor class. Owns one scoring engine and its hand levels.

    Usage:
        advisor = Advisor()
        advisor.set_hand_levels({"Flush": 3})
        rec = advisor.recommend(hand, target_score=300, hands_remaining=3, discards_remaining=3)

        # Or a full report for a preset scenario:
        print(advisor.analyze_scenario("tough_decision"))
    """

    def __init__(self, config: Optional[AdvisorConfig] = None):
        self.config = config or AdvisorConfig()
        self.engine = ScoringEngine(HandLevelTable(self.config.hand_levels))

    @property
    def levels(self) -> HandLevelTable:
        return self.engine.levels

    def set_hand_levels(self, levels: Mapping) -> HandLevelTable:
        """Apply hand level upgrades (e.g. from Planet cards)."""
        return self.engine.set_levels(levels)

    def with_levels(self, levels: Mapping) -> "Advisor":
        """A separate advisor with this one's config and levels, plus ``levels``."""
        scoped = Advisor(self.config)
        scoped.engine = ScoringEngine(self.levels.copy())
        scoped.set_hand_levels(levels)
        return scoped

    def score(self, cards: Sequence[Card]) -> ScoreResult:
        return self.engine.score(cards)

    def best_play(self, hand: Sequence[Card]) -> BestPlay:
        return search_best_play(self.engine, hand, k=self.config.play_size,
                                limit=self.config.exhaustive_limit)

    def rank_all_plays(self, hand: Sequence[Card]) -> list[ScoreResult]:
        return rank_all_plays(self.engine, hand, k=self.config.play_size,
                              limit=self.config.exhaustive_limit)

    def analyze_all_plays(self, hand: Sequence[Card]) -> list[ScoreResult]:
        """All plays sorted by score; a single entry when the hand is small."""
        return self.rank_all_plays(hand)

    def recommend(self, hand: Sequence[Card], target_score: Optional[int] = None,
                  hands_remaining: Optional[int] = None,
                  discards_remaining: Optional[int] = None) -> Recommendation:
        """
        Recommend a play for the hand.

        Counters left as None fall back to the config defaults.
        """
        counters = self._counters(target_score, hands_remaining, discards_remaining)
        return recommend_play(self.best_play(hand), *counters)

    def _counters(self, target_score, hands_remaining, discards_remaining) -> tuple[int, int, int]:
        cfg = self.config
        return (
            cfg.target_score if target_score is None else target_score,
            cfg.hands_remaining if hands_remaining is None else hands_remaining,
            cfg.discards_remaining if discards_remaining is None else discards_remaining,
        )

    def recommend_discard(self, hand: Sequence[Card]) -> DiscardAdvice:
        best = self.best_play(hand)
        return recommend_discard(best, hand, strong_threshold=self.config.strong_hand_threshold)

    def generate_report(self, hand: Sequence[Card], target_score: Optional[int] = None,
                        hands_remaining: Optional[int] = None,
                        discards_remaining: Optional[int] = None,
                        money: int = 0, ante: int = 1) -> SituationReport:
        """Recommendation, top alternatives and urgency for one situation."""
        hand = list(hand)
        target_score, hands_remaining, discards_remaining = self._counters(
            target_score, hands_remaining, discards_remaining)
        rec = self.recommend(hand, target_score, hands_remaining, discards_remaining)

        return SituationReport(
            target_score=target_score,
            hands_remaining=hands_remaining,
            discards_remaining=discards_remaining,
            hand_size=len(hand),
            ante=ante,
            money=money,
            recommendation=rec,
            alternatives=self.analyze_all_plays(hand)[:self.config.alternatives],
            urgency=urgency(rec, hands_remaining, target_score),
        )

    def analyze_scenario(self, scenario: Union[str, Scenario]) -> SituationReport:
        """
        Build a report for a preset scenario.

        Scenario hand levels apply to this report only; the advisor's own
        levels are left as they were.
        """
        if isinstance(scenario, str):
            s = get_preset(scenario)
            if s is None:
                raise ValueError(f"Unknown scenario: {scenario}. Available: {list_presets()}")
        else:
            s = scenario

        advisor = self.with_levels(s.hand_levels) if s.hand_levels else self
        return advisor.generate_report(
            s.cards(),
            target_score=s.target_score,
            hands_remaining=s.hands_remaining,
            discards_remaining=s.discards_remaining,
            money=s.money,
            ante=s.ante,
        )


# Convenience functions
def classify(cards: Sequence[Card]) -> HandType:
    return classify_hand(cards)


def best_play(hand: Sequence[Card]) -> BestPlay:
    """Quick best play with a default advisor."""
    return Advisor().best_play(hand)


def recommend(hand: Sequence[Card], target_score: int, hands_remaining: int,
              discards_remaining: int) -> Recommendation:
    """Quick recommendation with a default advisor."""
    return Advisor().recommend(hand, target_score, hands_remaining, discards_remaining)
