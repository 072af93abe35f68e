"""Showdown resolution: ranking players' hands and finding the winners."""
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from holdem_equity.core.card import Card
from holdem_equity.evaluation.evaluator import ClassifiedHand, classify
from holdem_equity.evaluation.hand_description import describer

PlayerId = Union[int, str]

HOLE_CARDS = 2


@dataclass(frozen=True)
class Player:
    """
    A seat in the deal.

    Attributes:
        id: Unique identifier for player
        name: Display name
        hole_cards: Two hole card slots, None where the card is not known
        active: Whether the player is still contesting the pot
    """
    id: PlayerId
    name: str
    hole_cards: Tuple[Optional[Card], ...] = (None, None)
    active: bool = True

    def __post_init__(self):
        # Accept lists from callers while keeping the value immutable
        object.__setattr__(self, 'hole_cards', tuple(self.hole_cards))
        if len(self.hole_cards) != HOLE_CARDS:
            raise ValueError(
                f"Player {self.name} needs {HOLE_CARDS} hole card slots, got {len(self.hole_cards)}"
            )

    @property
    def known_cards(self) -> List[Card]:
        """Hole cards that have been revealed."""
        return [card for card in self.hole_cards if card is not None]

    @property
    def missing_count(self) -> int:
        """Number of hole card slots still unknown."""
        return sum(1 for card in self.hole_cards if card is None)

    @property
    def has_full_hand(self) -> bool:
        return self.missing_count == 0


@dataclass(frozen=True)
class PlayerHand:
    """A player's identity paired with their classified hand."""
    player_id: PlayerId
    player_name: str
    hand: ClassifiedHand

    def __str__(self) -> str:
        return f"{self.player_name}: {describer.describe_hand_detailed(self.hand)} ({self._cards_str()})"

    def _cards_str(self) -> str:
        return ", ".join(str(card) for card in self.hand.cards)

    def to_json(self) -> dict:
        """Convert to JSON-compatible dictionary."""
        return {
            "player_id": self.player_id,
            "player_name": self.player_name,
            "rank": int(self.hand.rank),
            "hand_name": self.hand.name,
            "hand_description": describer.describe_hand_detailed(self.hand),
            "cards": [str(card) for card in self.hand.cards],
        }


def resolve(players: Iterable[Player], shared_cards: Sequence[Optional[Card]]) -> List[PlayerHand]:
    """
    Classify and rank every player whose hole cards are all known.

    Args:
        players: Players in seat order
        shared_cards: Community card slots; None marks an unrevealed slot

    Returns:
        PlayerHands from strongest to weakest. Players with equal hands
        keep their seat order.
    """
    board = [card for card in shared_cards if card is not None]

    player_hands = [
        PlayerHand(
            player_id=player.id,
            player_name=player.name,
            hand=classify(list(player.hole_cards) + board)
        )
        for player in players
        if player.has_full_hand
    ]

    # sorted() is stable, so tied hands stay in seat order
    return sorted(player_hands, key=lambda ph: ph.hand.key, reverse=True)


def winners(ranked: List[PlayerHand]) -> List[PlayerHand]:
    """
    Get the players sharing the best hand.

    Args:
        ranked: Output of resolve()

    Returns:
        The leading entries whose tier and value sequence match the top
        hand exactly; more than one entry means a split.
    """
    if not ranked:
        return []

    best_key = ranked[0].hand.key
    tied = []
    for player_hand in ranked:
        if player_hand.hand.key != best_key:
            break
        tied.append(player_hand)
    return tied
