from balatro_advisor.engine.deck import parse_hand
from balatro_advisor.engine.recommendation import recommend
from balatro_advisor.engine.search import best_play, rank_all_plays
from balatro_advisor.formatting import (BOX_WIDTH, SCORING_REFERENCE, format_alternatives,
                                        format_game_state, format_recommendation, format_score)


def test_recommendation_box(engine):
    hand = parse_hand("A♠ A♥ K♠ Q♠ J♠ 10♠ 9♦ 8♣")
    rec = recommend(best_play(engine, hand), 400, 2, 2)
    text = format_recommendation(rec)
    lines = text.splitlines()

    assert lines[0].startswith("╔") and lines[-1].endswith("╝")
    assert all(len(line) == BOX_WIDTH + 2 for line in lines)
    assert "Action: DISCARD" in text
    assert "Confidence: MEDIUM" in text
    assert "Hand Type: Flush" in text
    assert "Expected Score: 344" in text
    assert "Meets Target: NO" in text
    assert "DISCARD:" in text
    assert "A♥, 9♦, 8♣" in text
    assert "56 short of target 400" in text


def test_recommendation_box_without_discards(engine):
    rec = recommend(best_play(engine, parse_hand("K♠ K♥ 7♦ 3♣ 2♠")), 50, 1, 0)
    text = format_recommendation(rec)
    assert "Meets Target: YES" in text
    assert "DISCARD:" not in text
    assert " 1. K♠" in text


def test_format_score(engine):
    text = format_score(engine.score(parse_hand("K♠ K♥ 7♦ 3♣ 2♠")))
    assert text.splitlines()[0] == "Pair (Lv.1): 84 points"
    assert "Cards: K♠, K♥, 7♦, 3♣, 2♠" in text
    assert "42 × 2 × 1.00 = 84" in text


def test_format_alternatives(engine):
    plays = rank_all_plays(engine, parse_hand("A♠ A♥ K♠ Q♠ J♠ 10♠ 3♦ 2♣"))
    text = format_alternatives(plays, limit=2)
    lines = text.splitlines()
    assert len(lines) == 4
    assert lines[0] == "★ 1. Flush: 344 points"
    assert lines[2].startswith("  2. ")


def test_format_game_state():
    text = format_game_state(parse_hand("K♠ K♥"), 1500, 2, 1, ante=3, money=12)
    assert "Target Score: 1,500" in text
    assert "Ante: 3" in text
    assert "Money: $12" in text
    assert "2. K♥" in text


def test_scoring_reference_lists_every_hand():
    assert "Flush Five:" in SCORING_REFERENCE
    assert "High Card:" in SCORING_REFERENCE
    assert "Polychrome:  ×1.5 XMult" in SCORING_REFERENCE
