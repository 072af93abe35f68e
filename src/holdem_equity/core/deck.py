"""Deck implementation."""
from typing import Iterable, List, Optional
import random

from .card import Card, Rank, Suit


def generate_full_deck() -> List[Card]:
    """Return the 52 standard cards, suit by suit."""
    return [Card(rank=rank, suit=suit) for suit in Suit for rank in Rank]


def exclude_known(deck: Iterable[Card], known_cards: Iterable[Optional[Card]]) -> List[Card]:
    """
    Return a new list of cards without any of the known cards.

    Cards are matched on rank and suit. Empty (None) entries in
    ``known_cards`` are ignored.
    """
    known = {card for card in known_cards if card is not None}
    return [card for card in deck if card not in known]


def sample_without_replacement(
    pool: List[Card],
    count: int,
    rng: Optional[random.Random] = None
) -> List[Card]:
    """
    Draw ``count`` cards uniformly at random from ``pool``.

    Runs a Fisher-Yates shuffle on a copy, stopping after ``count`` swaps.
    The caller's list is left untouched.
    """
    assert 0 <= count <= len(pool), (
        f"Cannot sample {count} cards from a pool of {len(pool)}"
    )
    cards = list(pool)
    rng = rng or random
    size = len(cards)
    for i in range(count):
        j = rng.randrange(i, size)
        cards[i], cards[j] = cards[j], cards[i]
    return cards[:count]


class Deck:
    """
    A pool of undealt cards.

    Every unknown slot of a deal draws from the same deck, so the pool
    shrinks with each draw and no card can be handed out twice.

    Attributes:
        cards: List of cards remaining in the deck
    """

    def __init__(self, exclude: Iterable[Optional[Card]] = ()):
        """
        Initialize a new deck.

        Args:
            exclude: Cards already known to be out of the deck
        """
        self.cards: List[Card] = exclude_known(generate_full_deck(), exclude)

    @classmethod
    def from_cards(cls, cards: Iterable[Card]) -> 'Deck':
        """Create a deck holding exactly the given cards."""
        deck = cls.__new__(cls)
        deck.cards = list(cards)
        return deck

    def draw(self, count: int, rng: Optional[random.Random] = None) -> List[Card]:
        """
        Remove and return ``count`` random cards.

        Args:
            count: Number of cards to draw
            rng: Randomness source, defaults to the ``random`` module

        Returns:
            The drawn cards, in draw order

        Raises:
            AssertionError: If fewer than ``count`` cards remain
        """
        assert count <= len(self.cards), (
            f"Deck exhausted: need {count} cards, {len(self.cards)} remain"
        )
        drawn = sample_without_replacement(self.cards, count, rng)
        taken = set(drawn)
        self.cards = [card for card in self.cards if card not in taken]
        return drawn

    def get_cards(self) -> List[Card]:
        """Get all cards in the deck."""
        return self.cards.copy()

    @property
    def size(self) -> int:
        """Number of cards in the deck."""
        return len(self.cards)
