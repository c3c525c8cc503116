#!/usr/bin/env python3
"""
Interactive demo for the Balatro advisor.
Shows hand scoring and play/discard recommendations for preset or custom hands.
"""

import argparse
import logging
import sys
from typing import Callable, Optional

from .advisor import Advisor
from .config import AdvisorConfig
from .engine.deck import Card, deal_random_hand, parse_hand
from .engine.errors import AdvisorError
from .formatting import (SCORING_REFERENCE, format_alternatives, format_game_state,
                         format_recommendation, format_score)
from .presets import PRESETS, Scenario, get_preset, list_presets

logger = logging.getLogger(__name__)

MENU = [
    ("1", "Quick Test - Random Hand"),
    ("2", "Scenario 1: Easy Win"),
    ("3", "Scenario 2: Tough Decision"),
    ("4", "Scenario 3: Critical Situation (Last hand)"),
    ("5", "Scenario 4: Enhanced Cards (Glass, Mult, etc.)"),
    ("6", "Custom Hand Entry"),
    ("7", "View Scoring Reference"),
    ("8", "Exit"),
]
MENU_SCENARIOS = {"2": "easy_win", "3": "tough_decision", "4": "critical", "5": "enhanced_cards"}


def analyze_hand(advisor: Advisor, hand: list[Card], target_score: int, hands_remaining: int,
                 discards_remaining: int, ante: int = 1, money: int = 0,
                 out: Callable[[str], None] = print) -> None:
    """Print the game state, the recommendation with its breakdown, and the top five plays."""
    out(format_game_state(hand, target_score, hands_remaining, discards_remaining, ante, money))
    out("")
    rec = advisor.recommend(hand, target_score, hands_remaining, discards_remaining)
    out(format_recommendation(rec))

    out("\nSCORE BREAKDOWN:")
    out(format_score(advisor.best_play(hand).result))

    out("\nTOP 5 ALTERNATIVE PLAYS:\n")
    out(format_alternatives(advisor.analyze_all_plays(hand), limit=5))


def analyze_scenario(advisor: Advisor, scenario: Scenario,
                     out: Callable[[str], None] = print) -> None:
    out(f"SCENARIO: {scenario.name}")
    out(f"{scenario.description}\n")
    if scenario.hand_levels:
        advisor = advisor.with_levels(scenario.hand_levels)
    analyze_hand(advisor, scenario.cards(), scenario.target_score, scenario.hands_remaining,
                 scenario.discards_remaining, scenario.ante, scenario.money, out=out)


def _prompt_int(prompt: str, default: int, read: Callable[[str], str]) -> int:
    answer = read(f"{prompt} [{default}]: ").strip()
    if not answer:
        return default
    try:
        value = int(answer)
    except ValueError:
        print(f"Not a number: {answer!r}, using {default}")
        return default
    if value < 0:
        print(f"Must be non-negative, using {default}")
        return default
    return value


def custom_hand_entry(advisor: Advisor, read: Callable[[str], str] = input) -> None:
    """Prompt for a hand and situation, then analyze it."""
    print("Enter cards separated by spaces, e.g.  A♠ Kh 10d:glass Q♣:bonus:foil")
    print("Suits: ♠/s ♥/h ♦/d ♣/c   Modifiers: bonus mult glass steel stone foil holo poly ...")
    text = read("Hand: ")
    try:
        hand = parse_hand(text)
    except AdvisorError as e:
        print(f"❌ {e}")
        return
    if not hand:
        print("❌ No cards entered")
        return

    cfg = advisor.config
    target = _prompt_int("Target score", cfg.target_score, read)
    hands = _prompt_int("Hands remaining", cfg.hands_remaining, read)
    discards = _prompt_int("Discards remaining", cfg.discards_remaining, read)
    analyze_hand(advisor, hand, target, hands, discards)


def run_menu(advisor: Advisor, read: Callable[[str], str] = input,
             seed: Optional[int] = None) -> None:
    """Text menu loop; returns when the user exits or input ends."""
    print("=" * 60)
    print("BALATRO AI ASSISTANT")
    print("=" * 60)
    print("Choose from preset scenarios or enter your own hand.")

    while True:
        print("\n" + "=" * 50)
        print("MAIN MENU")
        print("=" * 50)
        for key, label in MENU:
            print(f"{key}. {label}")
        print("=" * 50)

        try:
            choice = read("Select option (1-8): ").strip()
        except EOFError:
            break

        try:
            if choice == "1":
                cfg = advisor.config
                print("Dealing random hand...\n")
                hand = deal_random_hand(cfg.hand_size, seed)
                analyze_hand(advisor, hand, cfg.target_score, cfg.hands_remaining,
                             cfg.discards_remaining)
            elif choice in MENU_SCENARIOS:
                analyze_scenario(advisor, PRESETS[MENU_SCENARIOS[choice]])
            elif choice == "6":
                custom_hand_entry(advisor, read)
            elif choice == "7":
                print(SCORING_REFERENCE)
            elif choice == "8":
                print("\nThanks for trying the Balatro AI Assistant!")
                break
            else:
                print("❌ Invalid option. Please select 1-8.")
                continue
            read("\nPress Enter to continue...")
        except EOFError:
            break


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Balatro hand advisor")
    parser.add_argument("--scenario", choices=list_presets(), help="Analyze a preset scenario and exit")
    parser.add_argument("--hand", type=str, help='Analyze a hand and exit, e.g. "K♠ K♥ 7♦ 3♣ 2♠"')
    parser.add_argument("--random", action="store_true", help="Analyze a random hand and exit")
    parser.add_argument("--seed", type=int, help="Seed for --random")
    parser.add_argument("--target", type=int, help="Target score")
    parser.add_argument("--hands", type=int, help="Hands remaining")
    parser.add_argument("--discards", type=int, help="Discards remaining")
    parser.add_argument("--config", type=str, help="JSON config file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = AdvisorConfig.load(args.config).with_overrides(
            target_score=args.target,
            hands_remaining=args.hands,
            discards_remaining=args.discards,
        )
        advisor = Advisor(config)

        if args.scenario:
            analyze_scenario(advisor, get_preset(args.scenario))
        elif args.hand:
            analyze_hand(advisor, parse_hand(args.hand), config.target_score,
                         config.hands_remaining, config.discards_remaining)
        elif args.random:
            analyze_hand(advisor, deal_random_hand(config.hand_size, args.seed),
                         config.target_score, config.hands_remaining, config.discards_remaining)
        else:
            run_menu(advisor, seed=args.seed)
    except AdvisorError as e:
        logger.debug("Aborting", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
