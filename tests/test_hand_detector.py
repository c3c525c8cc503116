import pytest

from balatro_advisor.engine.deck import parse_hand
from balatro_advisor.engine.errors import UnknownHandType
from balatro_advisor.engine.hand_detector import (
    HandType,
    classify,
    hand_values,
    is_flush,
    is_straight,
)


@pytest.mark.parametrize("text, expected", [
    ("K♠ K♥ 7♦ 3♣ 2♠", HandType.PAIR),
    ("K♠ K♥ 7♦ 7♣ 2♠", HandType.TWO_PAIR),
    ("7♠ 7♥ 7♦ 3♣ 2♠", HandType.THREE_OF_A_KIND),
    ("5♥ 6♦ 7♣ 8♠ 9♥", HandType.STRAIGHT),
    ("A♥ 10♥ 7♥ 5♥ 2♥", HandType.FLUSH),
    ("Q♥ Q♦ Q♣ 9♠ 9♥", HandType.FULL_HOUSE),
    ("9♠ 9♥ 9♦ 9♣ 2♠", HandType.FOUR_OF_A_KIND),
    ("9♠ 10♠ J♠ Q♠ K♠", HandType.STRAIGHT_FLUSH),
    ("9♠ 9♥ 9♦ 9♣ 9♠", HandType.FIVE_OF_A_KIND),
    ("Q♥ Q♥ Q♥ 9♥ 9♥", HandType.FLUSH_HOUSE),
    ("A♦ A♦ A♦ A♦ A♦", HandType.FLUSH_FIVE),
    ("A♠ K♥ 7♦ 3♣ 2♠", HandType.HIGH_CARD),
])
def test_classify_five_card_hands(text, expected):
    assert classify(parse_hand(text)) == expected


def test_pair_regression_anchor():
    assert classify(parse_hand("K♠ K♥ 7♦ 3♣ 2♠")) == HandType.PAIR


def test_straight_flush_beats_flush_and_straight():
    hand = parse_hand("5♣ 6♣ 7♣ 8♣ 9♣")
    assert is_flush(hand)
    assert is_straight(hand)
    assert classify(hand) == HandType.STRAIGHT_FLUSH


def test_ace_low_straight():
    assert classify(parse_hand("A♠ 2♥ 3♦ 4♣ 5♠")) == HandType.STRAIGHT


def test_ace_high_run_is_not_a_straight():
    hand = parse_hand("10♠ J♥ Q♦ K♣ A♠")
    assert not is_straight(hand)
    assert classify(hand) == HandType.HIGH_CARD


def test_ace_high_suited_run_is_only_a_flush():
    assert classify(parse_hand("10♥ J♥ Q♥ K♥ A♥")) == HandType.FLUSH


def test_wraparound_is_not_a_straight():
    assert classify(parse_hand("Q♠ K♥ A♦ 2♣ 3♠")) == HandType.HIGH_CARD


def test_short_hands():
    assert classify([]) == HandType.HIGH_CARD
    assert classify(parse_hand("A♠")) == HandType.HIGH_CARD
    assert classify(parse_hand("K♠ K♥")) == HandType.PAIR
    assert classify(parse_hand("7♠ 7♥ 7♦")) == HandType.THREE_OF_A_KIND
    assert classify(parse_hand("7♠ 7♥ 7♦ 7♣")) == HandType.FOUR_OF_A_KIND
    assert classify(parse_hand("2♥ 4♥ 6♥ 8♥")) == HandType.HIGH_CARD


def test_only_first_five_cards_are_classified():
    # The sixth card would complete a flush
    hand = parse_hand("2♥ 4♥ 6♥ 8♥ K♠ 10♥")
    assert classify(hand) == HandType.HIGH_CARD
    assert classify(hand[:4] + hand[5:]) == HandType.FLUSH


def test_hand_types_ordered_by_strength():
    order = list(HandType)
    assert order[0] == HandType.HIGH_CARD
    assert order[-1] == HandType.FLUSH_FIVE
    assert len(order) == 12
    assert HandType.FLUSH.strength > HandType.STRAIGHT.strength


def test_hand_values_by_level():
    assert hand_values(HandType.PAIR) == (10, 2)
    assert hand_values(HandType.PAIR, 3) == (40, 4)
    assert hand_values(HandType.STRAIGHT_FLUSH, 2) == (140, 11)


@pytest.mark.parametrize("name", ["Full House", "FULL_HOUSE", "full house", HandType.FULL_HOUSE])
def test_hand_type_from_name(name):
    assert HandType.from_name(name) is HandType.FULL_HOUSE


def test_unknown_hand_type():
    with pytest.raises(UnknownHandType):
        HandType.from_name("Royal Flush")
