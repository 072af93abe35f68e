"""Main poker hand evaluation interface."""
from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

from holdem_equity.core.card import Card, Suit
from holdem_equity.evaluation.constants import (
    ACE_HIGH, HAND_NAMES, HAND_SIZE, WHEEL_VALUES, HandRank
)


@dataclass(frozen=True)
class ClassifiedHand:
    """
    Result of hand evaluation.

    Attributes:
        rank: Hand tier, from high card (1) to royal flush (10)
        cards: The cards making up the hand, grouped cards first (each
            group highest first), then kickers highest first. A wheel
            straight is ordered 5-4-3-2-A.
        values: Comparison sequence for ``cards``; the ace of a wheel
            counts as 1
        high_card: The single highest card, for high card hands only
    """
    rank: HandRank
    cards: Tuple[Card, ...]
    values: Tuple[int, ...]
    high_card: Optional[Card] = None

    @property
    def name(self) -> str:
        """Display name of the hand tier."""
        return HAND_NAMES[self.rank]

    @property
    def key(self) -> Tuple[int, Tuple[int, ...]]:
        """Sort key; a larger key is a stronger hand."""
        return (int(self.rank), self.values)

    def __str__(self) -> str:
        return f"{self.name} ({' '.join(str(c) for c in self.cards)})"


def _make_hand(rank: HandRank, cards: List[Card], high_card: Optional[Card] = None) -> ClassifiedHand:
    return ClassifiedHand(
        rank=rank,
        cards=tuple(cards),
        values=tuple(card.value for card in cards),
        high_card=high_card
    )


def _find_straight(ordered: List[Card]) -> Optional[Tuple[List[Card], Tuple[int, ...]]]:
    """
    Find the highest five-card run among cards sorted highest first.

    Returns:
        (cards, values) of the straight, or None if there is none
    """
    by_value: Dict[int, Card] = {}
    for card in ordered:
        by_value.setdefault(card.value, card)
    unique = list(by_value)

    for i in range(len(unique) - HAND_SIZE + 1):
        if unique[i] - unique[i + HAND_SIZE - 1] == HAND_SIZE - 1:
            window = unique[i:i + HAND_SIZE]
            return [by_value[v] for v in window], tuple(window)

    # wheel: the ace plays low
    if ACE_HIGH in by_value and all(v in by_value for v in WHEEL_VALUES[:-1]):
        cards = [by_value[v] for v in WHEEL_VALUES[:-1]] + [by_value[ACE_HIGH]]
        return cards, WHEEL_VALUES

    return None


def classify(cards: Iterable[Card]) -> ClassifiedHand:
    """
    Classify the best five-card poker hand found in the given cards.

    Args:
        cards: Any number of cards, normally 5 to 7. Fewer than five
            cards yield a high card hand holding every card given.

    Returns:
        ClassifiedHand with the tier and the five cards used
    """
    ordered = sorted(cards, key=lambda c: c.value, reverse=True)

    if len(ordered) < HAND_SIZE:
        return _make_hand(HandRank.HIGH_CARD, ordered, ordered[0] if ordered else None)

    by_suit: Dict[Suit, List[Card]] = defaultdict(list)
    by_value: Dict[int, List[Card]] = defaultdict(list)
    for card in ordered:
        by_suit[card.suit].append(card)
        by_value[card.value].append(card)

    flush_cards = next(
        (suited for suited in by_suit.values() if len(suited) >= HAND_SIZE), None
    )

    # Straight flush must be a straight within the flush suit alone
    if flush_cards:
        straight_flush = _find_straight(flush_cards)
        if straight_flush:
            sf_cards, sf_values = straight_flush
            rank = HandRank.ROYAL_FLUSH if sf_values[0] == ACE_HIGH else HandRank.STRAIGHT_FLUSH
            return ClassifiedHand(rank=rank, cards=tuple(sf_cards), values=sf_values)

    # Largest groups first, ties broken by the higher value
    groups = sorted(by_value.values(), key=lambda g: (len(g), g[0].value), reverse=True)

    def kickers(used: List[Card], count: int) -> List[Card]:
        return [c for c in ordered if c not in used][:count]

    top = groups[0]
    if len(top) == 4:
        return _make_hand(HandRank.FOUR_OF_A_KIND, top + kickers(top, 1))

    if len(top) == 3:
        pairs = [g for g in groups[1:] if len(g) >= 2]
        if pairs:
            pair = max(pairs, key=lambda g: g[0].value)
            return _make_hand(HandRank.FULL_HOUSE, top + pair[:2])

    if flush_cards:
        return _make_hand(HandRank.FLUSH, flush_cards[:HAND_SIZE])

    straight = _find_straight(ordered)
    if straight:
        s_cards, s_values = straight
        return ClassifiedHand(rank=HandRank.STRAIGHT, cards=tuple(s_cards), values=s_values)

    if len(top) == 3:
        return _make_hand(HandRank.THREE_OF_A_KIND, top + kickers(top, 2))

    if len(top) == 2:
        second = groups[1]
        if len(second) == 2:
            used = top + second
            return _make_hand(HandRank.TWO_PAIR, used + kickers(used, 1))
        return _make_hand(HandRank.ONE_PAIR, top + kickers(top, 3))

    return _make_hand(HandRank.HIGH_CARD, ordered[:HAND_SIZE], ordered[0])


def compare_classified(hand1: ClassifiedHand, hand2: ClassifiedHand) -> int:
    """
    Compare two classified hands by tier, then value sequence.

    Returns:
        1 if hand1 wins, -1 if hand2 wins, 0 if tie
    """
    if hand1.key == hand2.key:
        return 0
    return 1 if hand1.key > hand2.key else -1


def compare_hands(hand1: List[Card], hand2: List[Card]) -> int:
    """
    Compare two poker hands.

    Args:
        hand1: First set of cards to compare
        hand2: Second set of cards to compare

    Returns:
        1 if hand1 wins, -1 if hand2 wins, 0 if tie

    Note:
        Suits never break ties; equal tier and equal value sequence
        is a split.
    """
    return compare_classified(classify(hand1), classify(hand2))
