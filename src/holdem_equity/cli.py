"""Command-line front end for hand classification and equity estimation.

Usage:
    python -m holdem_equity classify AsKsQsJsTs
    python -m holdem_equity showdown --board QsJhTd9c8s AhAd KhKd
    python -m holdem_equity equity --board Ts9s8s AsKs Qh?? --trials 1000 --seed 7
    python -m holdem_equity equity --full --workers 4 AsAd KcKh 7h7d

Hole cards are written as card strings; '??' marks a card not yet known.
"""

import argparse
import json
import logging
import random
import sys
from typing import List, Optional, Sequence

from holdem_equity.config import get_config
from holdem_equity.core.hand import parse_cards
from holdem_equity.evaluation.evaluator import classify
from holdem_equity.evaluation.hand_description import describer
from holdem_equity.game.equity import estimate_equity
from holdem_equity.game.showdown import Player, resolve, winners

logger = logging.getLogger(__name__)


def _build_players(hands: Sequence[str]) -> List[Player]:
    """Create seat-ordered players from hole card strings."""
    players = []
    for seat, hand_str in enumerate(hands, 1):
        hole_cards = parse_cards(hand_str, allow_unknown=True)
        if len(hole_cards) != 2:
            raise ValueError(f"Player {seat} needs exactly 2 hole cards, got '{hand_str}'")
        players.append(Player(id=seat, name=f"Player {seat}", hole_cards=tuple(hole_cards)))
    return players


def _cmd_classify(args: argparse.Namespace) -> dict:
    cards = parse_cards(args.cards)
    hand = classify(cards)
    return {
        "rank": int(hand.rank),
        "hand_name": hand.name,
        "hand_description": describer.describe_hand_detailed(hand),
        "cards": [str(card) for card in hand.cards],
    }


def _cmd_showdown(args: argparse.Namespace) -> dict:
    players = _build_players(args.players)
    board = parse_cards(args.board)
    ranked = resolve(players, board)
    best = winners(ranked)
    return {
        "ranking": [ph.to_json() for ph in ranked],
        "winners": [ph.player_id for ph in best],
        "split": len(best) > 1,
    }


def _cmd_equity(args: argparse.Namespace) -> dict:
    settings = get_config()
    players = _build_players(args.players)
    board = parse_cards(args.board, allow_unknown=True)

    if args.quick:
        trials = settings.FAST_TRIALS
    elif args.full:
        trials = settings.THOROUGH_TRIALS
    else:
        trials = args.trials

    seed = args.seed if args.seed is not None else settings.SEED
    result = estimate_equity(players, board, trials=trials, rng=random.Random(seed), workers=args.workers)
    return result.to_json()


def _print_text(command: str, payload: dict) -> None:
    if command == "classify":
        print(f"{payload['hand_description']}: {' '.join(payload['cards'])}")
    elif command == "showdown":
        for position, entry in enumerate(payload["ranking"], 1):
            print(f"{position}. {entry['player_name']}: {entry['hand_description']} ({' '.join(entry['cards'])})")
        if not payload["ranking"]:
            print("No complete hands to compare")
        elif payload["split"]:
            print(f"Split pot between players {', '.join(str(w) for w in payload['winners'])}")
        else:
            print(f"Winner: player {payload['winners'][0]}")
    else:
        if not payload["players"]:
            print("No player has a known hole card")
            return
        print(f"Equity over {payload['total_trials']} trials ({payload['elapsed_ms']:.1f} ms)")
        for entry in payload["players"]:
            print(
                f"  {entry['player_name']}: {entry['equity']:.2f}% "
                f"({entry['win_count']} wins, {entry['tie_count']} ties)"
            )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="holdem_equity",
        description="Classify Texas Hold'em hands and estimate showdown equity.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("--json", action="store_true", help="Print results as JSON")
    subparsers = parser.add_subparsers(dest="command", required=True)

    classify_parser = subparsers.add_parser("classify", help="Classify 1-7 cards")
    classify_parser.add_argument("cards", help="Cards, e.g. AsKsQsJsTs")
    classify_parser.set_defaults(handler=_cmd_classify)

    showdown_parser = subparsers.add_parser("showdown", help="Rank fully known hands")
    showdown_parser.add_argument("--board", default="", help="Community cards, e.g. QsJhTd")
    showdown_parser.add_argument("players", nargs="+", help="Hole cards per player, e.g. AhAd")
    showdown_parser.set_defaults(handler=_cmd_showdown)

    equity_parser = subparsers.add_parser("equity", help="Estimate win chances by simulation")
    equity_parser.add_argument("--board", default="", help="Known community cards")
    preset = equity_parser.add_mutually_exclusive_group()
    preset.add_argument("--trials", type=int, default=None, help="Number of simulated deals")
    preset.add_argument("--quick", action="store_true", help="Use the fast trial preset")
    preset.add_argument("--full", action="store_true", help="Use the thorough trial preset")
    equity_parser.add_argument("--seed", type=int, default=None, help="Random seed")
    equity_parser.add_argument("--workers", type=int, default=None, help="Worker processes")
    equity_parser.add_argument("players", nargs="+", help="Hole cards per player, '??' for unknown")
    equity_parser.set_defaults(handler=_cmd_equity)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command line; returns the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=get_config().LOG_LEVEL,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stderr)]
    )

    try:
        payload = args.handler(args)
    except ValueError as e:
        logger.debug(f"Rejected input: {e}")
        print(f"error: {e}", file=sys.stderr)
        return 2

    if args.json:
        print(json.dumps(payload, indent=2))
    else:
        _print_text(args.command, payload)
    return 0
