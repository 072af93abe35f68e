"""Card related classes and utilities."""
from dataclasses import dataclass
from enum import Enum
from typing import Dict


class Suit(Enum):
    """Card suits."""
    CLUBS = 'c'
    DIAMONDS = 'd'
    HEARTS = 'h'
    SPADES = 's'

    def __str__(self) -> str:
        return self.value


class Rank(Enum):
    """Card ranks."""
    TWO = '2'
    THREE = '3'
    FOUR = '4'
    FIVE = '5'
    SIX = '6'
    SEVEN = '7'
    EIGHT = '8'
    NINE = '9'
    TEN = 'T'
    JACK = 'J'
    QUEEN = 'Q'
    KING = 'K'
    ACE = 'A'

    def __str__(self) -> str:
        return self.value


# Ace is 14 here; the wheel straight treats it as 1 during evaluation
RANK_VALUES: Dict[Rank, int] = {rank: i + 2 for i, rank in enumerate(Rank)}

# Symbol suits as shown by the presentation layer
SUIT_SYMBOLS: Dict[str, Suit] = {
    '♣': Suit.CLUBS,
    '♦': Suit.DIAMONDS,
    '♥': Suit.HEARTS,
    '♠': Suit.SPADES,
}


@dataclass(frozen=True)
class Card:
    """
    Represents a playing card.

    Cards are value objects: two cards are equal if rank and suit match,
    and they can be used as set members or dict keys.

    Attributes:
        rank: Card rank (2-A)
        suit: Card suit (clubs, diamonds, hearts, spades)
    """
    rank: Rank
    suit: Suit

    @property
    def value(self) -> int:
        """Numeric rank value, 2 through 14."""
        return RANK_VALUES[self.rank]

    def __str__(self) -> str:
        """String representation in format 'As' for Ace of spades."""
        return f"{self.rank}{self.suit}"

    def __repr__(self) -> str:
        return f"Card('{self}')"

    @classmethod
    def from_string(cls, card_str: str) -> 'Card':
        """
        Create a Card from a string representation.

        Args:
            card_str: String such as 'As', 'Td' or '10d'. The suit may also
                      be given as a symbol ('A♠').

        Returns:
            Card instance

        Raises:
            ValueError: If string format is invalid
        """
        if not isinstance(card_str, str) or len(card_str) not in (2, 3):
            raise ValueError(f"Invalid card string: {card_str!r}")

        rank_str, suit_str = card_str[:-1], card_str[-1]
        if rank_str == '10':
            rank_str = 'T'
        if len(rank_str) != 1:
            raise ValueError(f"Invalid card string: {card_str!r}")

        try:
            rank = next(r for r in Rank if r.value == rank_str.upper())
            if suit_str in SUIT_SYMBOLS:
                suit = SUIT_SYMBOLS[suit_str]
            else:
                suit = next(s for s in Suit if s.value == suit_str.lower())
        except StopIteration:
            raise ValueError(f"Invalid rank or suit in: {card_str}")

        return cls(rank=rank, suit=suit)
