import pytest

from balatro_advisor.presets import PRESETS, get_preset, get_preset_info, list_presets


def test_list_presets():
    assert list_presets() == ["easy_win", "tough_decision", "critical", "enhanced_cards"]


@pytest.mark.parametrize("name", ["critical", "Critical", "Enhanced Cards", "tough_decision"])
def test_get_preset_normalizes_names(name):
    assert get_preset(name) is not None


def test_unknown_preset():
    assert get_preset("royal_mess") is None
    assert get_preset_info("royal_mess") is None


@pytest.mark.parametrize("name", list(PRESETS))
def test_every_preset_parses_to_eight_cards(name):
    assert len(PRESETS[name].cards()) == 8


def test_cards_are_fresh_each_call():
    scenario = PRESETS["easy_win"]
    first = scenario.cards()
    second = scenario.cards()
    assert [str(c) for c in first] == [str(c) for c in second]
    assert all(a is not b for a, b in zip(first, second))


def test_preset_info():
    info = get_preset_info("tough_decision")
    assert info["name"] == "Tough Decision"
    assert info["target_score"] == 400
    assert info["hands_remaining"] == 2
    assert info["discards_remaining"] == 2
    assert info["ante"] == 2
