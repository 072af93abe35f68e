"""Tests for high-hand poker classification."""
import itertools
import logging
import random
import sys

import pytest

from holdem_equity.core.deck import generate_full_deck
from holdem_equity.core.hand import parse_cards
from holdem_equity.evaluation.constants import HAND_NAMES, HandRank
from holdem_equity.evaluation.evaluator import (
    ClassifiedHand, classify, compare_classified, compare_hands
)

logger = logging.getLogger(__name__)


@pytest.fixture(autouse=True)
def setup_logging():
    """Set up logging for all tests."""
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    logging.basicConfig(
        level=logging.DEBUG,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout)
        ],
        force=True
    )


def hand_str(hand: ClassifiedHand) -> str:
    return ''.join(str(card) for card in hand.cards)


@pytest.mark.parametrize("cards,expected_rank", [
    ("TsJsQsKsAs", HandRank.ROYAL_FLUSH),
    ("9s8s7s6s5s", HandRank.STRAIGHT_FLUSH),
    ("AhAdAcAsKh", HandRank.FOUR_OF_A_KIND),
    ("KhKdKcQhQd", HandRank.FULL_HOUSE),
    ("AcJc9c6c3c", HandRank.FLUSH),
    ("9h8c7d6s5h", HandRank.STRAIGHT),
    ("QhQdQcJh9d", HandRank.THREE_OF_A_KIND),
    ("JhJdThTc9s", HandRank.TWO_PAIR),
    ("AhAdKhQcJs", HandRank.ONE_PAIR),
    ("AhQdTh8c5s", HandRank.HIGH_CARD),
])
def test_five_card_tiers(cards, expected_rank):
    hand = classify(parse_cards(cards))
    assert hand.rank == expected_rank
    assert hand.name == HAND_NAMES[expected_rank]
    assert len(hand.cards) == 5


def test_royal_flush():
    hand = classify(parse_cards("TsJsQsKsAs"))
    assert hand.rank == HandRank.ROYAL_FLUSH
    assert hand.values == (14, 13, 12, 11, 10)
    assert hand.high_card is None


def test_wheel_is_a_straight():
    hand = classify(parse_cards("As2h3d4c5s"))
    assert hand.rank == HandRank.STRAIGHT
    assert hand_str(hand) == "5s4c3d2hAs"
    assert hand.values == (5, 4, 3, 2, 1)


def test_wheel_loses_to_six_high_straight():
    assert compare_hands(parse_cards("As2h3d4c5s"), parse_cards("2h3d4c5s6h")) == -1


def test_steel_wheel_is_straight_flush_not_royal():
    hand = classify(parse_cards("As2s3s4s5sKd"))
    assert hand.rank == HandRank.STRAIGHT_FLUSH
    assert hand.values == (5, 4, 3, 2, 1)


def test_broadway_straight():
    hand = classify(parse_cards("AsKdQhJcTs2d3c"))
    assert hand.rank == HandRank.STRAIGHT
    assert hand.values == (14, 13, 12, 11, 10)


def test_straight_and_flush_in_different_cards_is_flush():
    """A straight that is not confined to the flush suit is not a straight flush."""
    hand = classify(parse_cards("9s8s7s6s2s5h"))
    assert hand.rank == HandRank.FLUSH
    assert hand_str(hand) == "9s8s7s6s2s"


def test_straight_flush_found_among_seven():
    hand = classify(parse_cards("9h8h7h6h5hKhAc"))
    assert hand.rank == HandRank.STRAIGHT_FLUSH
    assert hand.values == (9, 8, 7, 6, 5)


def test_royal_flush_with_extra_cards():
    hand = classify(parse_cards("AhKhQhJhTh9h2c"))
    assert hand.rank == HandRank.ROYAL_FLUSH
    assert hand_str(hand) == "AhKhQhJhTh"


def test_four_of_a_kind_takes_highest_kicker():
    hand = classify(parse_cards("2c2d2h2sKd3c7h"))
    assert hand.rank == HandRank.FOUR_OF_A_KIND
    assert hand.values == (2, 2, 2, 2, 13)


def test_four_of_a_kind_beats_flush():
    hand = classify(parse_cards("AsAhAdAc2s5s9sJs"))
    assert hand.rank == HandRank.FOUR_OF_A_KIND


def test_full_house_with_two_triples_uses_higher_triple():
    hand = classify(parse_cards("7s7h7dKsKhKd2c"))
    assert hand.rank == HandRank.FULL_HOUSE
    assert hand.values == (13, 13, 13, 7, 7)


def test_full_house_prefers_higher_pair_over_second_triple():
    hand = classify(parse_cards("7s7h7d5s5h5dKc"))
    assert hand.rank == HandRank.FULL_HOUSE
    assert hand.values == (7, 7, 7, 5, 5)

    hand = classify(parse_cards("7s7h7d5s5h5dKcKd"))
    assert hand.values == (7, 7, 7, 13, 13)


def test_full_house_beats_flush():
    hand = classify(parse_cards("QsQhQd4s4c9s2s"))
    assert hand.rank == HandRank.FULL_HOUSE


def test_flush_takes_top_five_of_suit():
    hand = classify(parse_cards("2s9sKs4s7sJs3h"))
    assert hand.rank == HandRank.FLUSH
    assert hand.values == (13, 11, 9, 7, 4)


def test_straight_with_paired_cards():
    hand = classify(parse_cards("9h8d8s7c6h5d2s"))
    assert hand.rank == HandRank.STRAIGHT
    assert hand.values == (9, 8, 7, 6, 5)


def test_highest_straight_is_chosen():
    hand = classify(parse_cards("4c5d6h7s8c9dTh"))
    assert hand.values == (10, 9, 8, 7, 6)


def test_three_of_a_kind_kickers():
    hand = classify(parse_cards("8c8d8h2sKdJc4h"))
    assert hand.rank == HandRank.THREE_OF_A_KIND
    assert hand.values == (8, 8, 8, 13, 11)


def test_two_pair_from_three_pairs():
    """The third pair can only play as the kicker."""
    hand = classify(parse_cards("AsAhKsKhQsQh2c"))
    assert hand.rank == HandRank.TWO_PAIR
    assert hand.values == (14, 14, 13, 13, 12)


def test_two_pair_kicker():
    hand = classify(parse_cards("JhJd4h4c9s2d3c"))
    assert hand.rank == HandRank.TWO_PAIR
    assert hand.values == (11, 11, 4, 4, 9)


def test_one_pair_kickers():
    hand = classify(parse_cards("5h5dAcJs9d3c2h"))
    assert hand.rank == HandRank.ONE_PAIR
    assert hand.values == (5, 5, 14, 11, 9)


def test_high_card_records_highest_card():
    hand = classify(parse_cards("2hKd9c7s4hJc3d"))
    assert hand.rank == HandRank.HIGH_CARD
    assert hand.values == (13, 11, 9, 7, 4)
    assert str(hand.high_card) == "Kd"


@pytest.mark.parametrize("cards,expected_values", [
    ("", ()),
    ("7d", (7,)),
    ("AsAh", (14, 14)),
    ("3c9hKd", (13, 9, 3)),
    ("2c3c4c5c", (5, 4, 3, 2)),
])
def test_fewer_than_five_cards(cards, expected_values):
    """Short input degrades to a high card hand of every card given."""
    hand = classify(parse_cards(cards))
    assert hand.rank == HandRank.HIGH_CARD
    assert hand.values == expected_values
    assert len(hand.cards) == len(expected_values)
    if expected_values:
        assert hand.high_card.value == expected_values[0]
    else:
        assert hand.high_card is None


def test_classify_accepts_any_iterable():
    hand = classify(iter(parse_cards("TsJsQsKsAs")))
    assert hand.rank == HandRank.ROYAL_FLUSH


def test_classify_does_not_reorder_input():
    cards = parse_cards("2hKd9c7s4hJc3d")
    original = list(cards)
    classify(cards)
    assert cards == original


@pytest.mark.parametrize("seed", range(5))
def test_seven_cards_pick_best_five(seed):
    """The chosen five cards beat or tie every other five-card subset."""
    rng = random.Random(seed)
    deck = generate_full_deck()
    for _ in range(100):
        cards = rng.sample(deck, 7)
        hand = classify(cards)
        best = max(classify(combo).key for combo in itertools.combinations(cards, 5))

        assert len(hand.cards) == 5
        assert all(card in cards for card in hand.cards)
        assert hand.key == best


def test_chosen_cards_reclassify_to_same_hand():
    cards = parse_cards("7s7h7dKsKhKd2c")
    hand = classify(cards)
    assert classify(hand.cards).key == hand.key


def test_suits_never_break_ties():
    assert compare_hands(parse_cards("AsKdQh9c7s"), parse_cards("AhKcQd9s7h")) == 0


@pytest.mark.parametrize("better,worse", [
    ("TsJsQsKsAs", "9s8s7s6s5s"),
    ("9s8s7s6s5s", "AhAdAcAsKh"),
    ("AhAdAcAsKh", "KhKdKcQhQd"),
    ("KhKdKcQhQd", "AcJc9c6c3c"),
    ("AcJc9c6c3c", "9h8c7d6s5h"),
    ("9h8c7d6s5h", "QhQdQcJh9d"),
    ("QhQdQcJh9d", "JhJdThTc9s"),
    ("JhJdThTc9s", "AhAdKhQcJs"),
    ("AhAdKhQcJs", "AhQdTh8c5s"),
    # same tier, kicker decides
    ("AhAdKhQcJs", "AsAcKdQhTs"),
    ("KhKdKc2h2d", "QhQdQcAhAd"),
    ("AsKs9s5s3s", "AhKh9h5h2h"),
])
def test_compare_hands_ordering(better, worse):
    assert compare_hands(parse_cards(better), parse_cards(worse)) == 1
    assert compare_hands(parse_cards(worse), parse_cards(better)) == -1


def test_compare_classified():
    royal = classify(parse_cards("TsJsQsKsAs"))
    pair = classify(parse_cards("AhAdKhQcJs"))
    assert compare_classified(royal, pair) == 1
    assert compare_classified(pair, royal) == -1
    assert compare_classified(pair, pair) == 0


def test_classified_hand_str():
    hand = classify(parse_cards("AhAdKhQcJs"))
    assert str(hand) == "One Pair (Ah Ad Kh Qc Js)"
