"""Texas Hold'em hand classification and equity estimation."""

from holdem_equity.core.card import Card, Rank, Suit
from holdem_equity.core.deck import Deck, exclude_known, generate_full_deck, sample_without_replacement
from holdem_equity.core.hand import parse_cards
from holdem_equity.evaluation.constants import HAND_NAMES, HandRank
from holdem_equity.evaluation.evaluator import ClassifiedHand, classify, compare_hands
from holdem_equity.game.equity import (
    EquityResult,
    EquitySimulator,
    PlayerEquity,
    estimate_equity,
    estimate_full_equity,
    estimate_quick_equity,
)
from holdem_equity.game.showdown import Player, PlayerHand, resolve, winners

__version__ = "0.1.0"
__all__ = [
    "Card",
    "Rank",
    "Suit",
    "Deck",
    "generate_full_deck",
    "exclude_known",
    "sample_without_replacement",
    "parse_cards",
    "HandRank",
    "HAND_NAMES",
    "ClassifiedHand",
    "classify",
    "compare_hands",
    "Player",
    "PlayerHand",
    "resolve",
    "winners",
    "EquityResult",
    "EquitySimulator",
    "PlayerEquity",
    "estimate_equity",
    "estimate_quick_equity",
    "estimate_full_equity",
]
