"""
Text rendering of scores and recommendations.
"""

import textwrap
from typing import Sequence

from .engine.deck import Card
from .engine.hand_detector import HAND_BASE_VALUES, HandType
from .engine.recommendation import Recommendation
from .engine.scoring import ScoreResult

BOX_WIDTH = 44


def _cards(cards: Sequence[Card]) -> str:
    return ", ".join(str(c) for c in cards)


def _row(text: str = "") -> str:
    return f"║ {text:<{BOX_WIDTH - 2}} ║"


def _rule(left: str, right: str) -> str:
    return left + "═" * BOX_WIDTH + right


def format_recommendation(rec: Recommendation) -> str:
    """Boxed summary of a recommendation."""
    lines = [
        _rule("╔", "╗"),
        _row("BALATRO AI RECOMMENDATION".center(BOX_WIDTH - 2)),
        _rule("╠", "╣"),
        _row(f"Action: {rec.action.value}"),
        _row(f"Confidence: {rec.confidence.value}"),
        _row(f"Hand Type: {rec.hand_type.value}"),
        _row(f"Expected Score: {rec.expected_score:,}"),
        _row(f"Meets Target: {'YES' if rec.meets_target else 'NO'}"),
        _rule("╠", "╣"),
        _row("RECOMMENDED CARDS:"),
    ]
    for i, card in enumerate(rec.cards, 1):
        lines.append(_row(f" {i}. {card}"))
    if rec.cards_to_discard:
        lines.append(_row("DISCARD:"))
        for line in textwrap.wrap(_cards(rec.cards_to_discard), BOX_WIDTH - 4):
            lines.append(_row(f" {line}"))
    lines.append(_rule("╠", "╣"))
    lines.append(_row("REASONING:"))
    for reason in rec.reasoning:
        for line in textwrap.wrap(reason, BOX_WIDTH - 2, drop_whitespace=False) or [""]:
            lines.append(_row(line.rstrip()))
    lines.append(_rule("╚", "╝"))
    return "\n".join(lines)


def format_score(result: ScoreResult) -> str:
    lines = [
        f"{result.hand_type.value} (Lv.{result.level}): {result.score:,} points",
        f"  Base: {result.base_chips} chips × {result.base_mult} mult",
        f"  {result.calculation}",
    ]
    if result.cards:
        lines.insert(1, f"  Cards: {_cards(result.cards)}")
    return "\n".join(lines)


def format_alternatives(plays: Sequence[ScoreResult], limit: int = 5) -> str:
    """Numbered list of the top plays, best marked with a star."""
    lines = []
    for i, play in enumerate(plays[:limit]):
        marker = "★" if i == 0 else " "
        lines.append(f"{marker} {i + 1}. {play.hand_type.value}: {play.score:,} points")
        lines.append(f"      {_cards(play.cards)}")
    return "\n".join(lines)


def format_game_state(hand: Sequence[Card], target_score: int, hands_remaining: int,
                      discards_remaining: int, ante: int = 1, money: int = 0) -> str:
    lines = [
        f"{'='*50}",
        "  GAME STATE",
        f"{'='*50}",
        f"  Ante: {ante}",
        f"  Money: ${money}",
        f"  Target Score: {target_score:,}",
        f"  Hands Remaining: {hands_remaining}",
        f"  Discards Remaining: {discards_remaining}",
        f"{'='*50}",
        "",
        "YOUR HAND:",
    ]
    for i, card in enumerate(hand, 1):
        lines.append(f"  {i}. {card}")
    return "\n".join(lines)


def _scoring_reference() -> str:
    lines = [
        f"{'='*50}",
        "  BALATRO SCORING REFERENCE",
        f"{'='*50}",
        "",
        "  FORMULA: Score = Chips × Mult × XMult",
        "",
        "  BASE POKER HANDS (Level 1):",
    ]
    for hand_type in HandType:
        chips, mult = HAND_BASE_VALUES[hand_type]
        lines.append(f"    {hand_type.value + ':':<17}{chips:>4} chips × {mult:>2} mult")
    lines += [
        "",
        "  CARD ENHANCEMENTS:",
        "    Bonus:  +30 chips",
        "    Mult:   +4 mult",
        "    Glass:  ×2 XMult",
        "    Steel:  ×1.5 XMult",
        "    Stone:  +50 chips",
        "",
        "  EDITIONS:",
        "    Foil:        +50 chips",
        "    Holographic: +10 mult",
        "    Polychrome:  ×1.5 XMult",
        f"{'='*50}",
    ]
    return "\n".join(lines)


SCORING_REFERENCE = _scoring_reference()
