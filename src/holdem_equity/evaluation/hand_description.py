"""Human-readable descriptions for classified poker hands."""
from typing import Iterable, Union

from holdem_equity.core.card import Card, Rank
from holdem_equity.evaluation.constants import RANK_NAMES, HandRank
from holdem_equity.evaluation.evaluator import ClassifiedHand, classify

HandLike = Union[ClassifiedHand, Iterable[Card]]


class HandDescriber:
    """Generates human-readable descriptions for poker hands."""

    def describe_hand(self, hand: HandLike) -> str:
        """Get a basic description of the hand."""
        return self._classified(hand).name

    def describe_hand_detailed(self, hand: HandLike) -> str:
        """Get a detailed description of the hand, e.g. 'Full House, Aces over Kings'."""
        classified = self._classified(hand)
        if not classified.cards:
            return classified.name

        rank = classified.rank
        lead = classified.cards[0].rank

        if rank == HandRank.ROYAL_FLUSH:
            return "Royal Flush"
        if rank == HandRank.STRAIGHT_FLUSH:
            return f"{self._singular(lead)}-high Straight Flush"
        if rank == HandRank.FOUR_OF_A_KIND:
            return f"Four {self._plural(lead)}"
        if rank == HandRank.FULL_HOUSE:
            pair = classified.cards[3].rank
            return f"Full House, {self._plural(lead)} over {self._plural(pair)}"
        if rank == HandRank.FLUSH:
            return f"{self._singular(lead)}-high Flush"
        if rank == HandRank.STRAIGHT:
            return f"{self._singular(lead)}-high Straight"
        if rank == HandRank.THREE_OF_A_KIND:
            return f"Three {self._plural(lead)}"
        if rank == HandRank.TWO_PAIR:
            second = classified.cards[2].rank
            return f"Two Pair, {self._plural(lead)} and {self._plural(second)}"
        if rank == HandRank.ONE_PAIR:
            return f"Pair of {self._plural(lead)}"
        return f"{self._singular(lead)} High"

    @staticmethod
    def _classified(hand: HandLike) -> ClassifiedHand:
        if isinstance(hand, ClassifiedHand):
            return hand
        return classify(hand)

    @staticmethod
    def _singular(rank: Rank) -> str:
        return RANK_NAMES[rank][0]

    @staticmethod
    def _plural(rank: Rank) -> str:
        return RANK_NAMES[rank][1]


# Shared describer instance
describer = HandDescriber()
