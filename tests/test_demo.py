import json

from balatro_advisor.demo import analyze_scenario, custom_hand_entry, main, run_menu
from balatro_advisor.engine.deck import parse_hand
from balatro_advisor.presets import Scenario


def _reader(*answers):
    answers = iter(answers)

    def read(prompt=""):
        try:
            return next(answers)
        except StopIteration:
            raise EOFError
    return read


def test_scenario_flag(capsys):
    assert main(["--scenario", "easy_win"]) == 0
    out = capsys.readouterr().out
    assert "SCENARIO: Easy Win" in out
    assert "Action: PLAY" in out
    assert "Hand Type: Straight Flush" in out
    assert "Expected Score: 1,192" in out
    assert "SCORE BREAKDOWN:" in out
    assert "Straight Flush (Lv.1): 1,192 points" in out
    assert "TOP 5 ALTERNATIVE PLAYS:" in out


def test_hand_flag_with_overrides(capsys):
    assert main(["--hand", "K♠ K♥ 7♦ 3♣ 2♠", "--target", "50", "--hands", "1", "--discards", "0"]) == 0
    out = capsys.readouterr().out
    assert "Target Score: 50" in out
    assert "Expected Score: 84" in out
    assert "Meets Target: YES" in out


def test_invalid_hand_flag(capsys):
    assert main(["--hand", "K♠ Zq"]) == 2
    assert "error:" in capsys.readouterr().err


def test_random_flag_is_seeded(capsys):
    assert main(["--random", "--seed", "11"]) == 0
    first = capsys.readouterr().out
    assert main(["--random", "--seed", "11"]) == 0
    assert capsys.readouterr().out == first


def test_config_flag(tmp_path, capsys):
    path = tmp_path / "advisor.json"
    path.write_text(json.dumps({"target_score": 50}))
    assert main(["--config", str(path), "--hand", "K♠ K♥ 7♦ 3♣ 2♠"]) == 0
    assert "Target Score: 50" in capsys.readouterr().out


def test_bad_config_flag(tmp_path, capsys):
    assert main(["--config", str(tmp_path / "missing.json"), "--scenario", "critical"]) == 2
    assert "Config file not found" in capsys.readouterr().err


def test_menu_runs_scenarios_and_exits(advisor, capsys):
    run_menu(advisor, read=_reader("4", "", "7", "", "9", "8"))
    out = capsys.readouterr().out
    assert "SCENARIO: Critical Situation" in out
    assert "Confidence: LOW" in out
    assert "BALATRO SCORING REFERENCE" in out
    assert "Invalid option" in out
    assert "Thanks for trying" in out


def test_menu_stops_at_end_of_input(advisor, capsys):
    run_menu(advisor, read=_reader("1"), seed=3)
    assert "YOUR HAND:" in capsys.readouterr().out


def test_custom_hand_entry(advisor, capsys):
    custom_hand_entry(advisor, read=_reader("A♥ 10h 7♥ 5h 2♥", "100", "", "x"))
    out = capsys.readouterr().out
    assert "Hand Type: Flush" in out
    assert "Target Score: 100" in out
    assert "Not a number: 'x'" in out
    assert "Discards Remaining: 3" in out


def test_custom_hand_entry_rejects_bad_cards(advisor, capsys):
    custom_hand_entry(advisor, read=_reader("A♠ 1x"))
    assert "❌" in capsys.readouterr().out


def test_directory_config_flag(tmp_path, capsys):
    assert main(["--config", str(tmp_path), "--hand", "K♠ K♥"]) == 2
    assert "Cannot read config file" in capsys.readouterr().err


def test_play_size_config_flag(tmp_path, capsys):
    path = tmp_path / "advisor.json"
    path.write_text(json.dumps({"play_size": 6}))
    assert main(["--config", str(path), "--scenario", "easy_win"]) == 2
    assert "play_size" in capsys.readouterr().err


def test_scenario_levels_stay_with_the_scenario(advisor, capsys):
    scenario = Scenario(
        name="Leveled Pair",
        description="Pair upgraded by Planet cards",
        hand="K♠ K♥ 7♦ 3♣ 2♠",
        target_score=500,
        hands_remaining=2,
        discards_remaining=0,
        hand_levels={"Pair": 5},
    )
    analyze_scenario(advisor, scenario)
    assert "Pair (Lv.5): 612 points" in capsys.readouterr().out
    assert advisor.score(parse_hand("K♠ K♥ 7♦ 3♣ 2♠")).score == 84
