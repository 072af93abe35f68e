"""Parsing of hands written as card strings."""

import logging
import re
from typing import List, Optional

from .card import Card

logger = logging.getLogger(__name__)

UNKNOWN_CARD = '??'

_CARD_PATTERN = re.compile(r'(10|[2-9TJQKA?])([CDHS♣♦♥♠?])', re.IGNORECASE)


def parse_cards(hand_str: str, allow_unknown: bool = False) -> List[Optional[Card]]:
    """
    Create a list of cards from a string representation.

    Args:
        hand_str: Concatenated card representations (e.g., "AsAhJs9s5s").
                  Cards may be separated by spaces or commas, and '10' may
                  be used in place of 'T'.
        allow_unknown: Accept '??' as a placeholder for an unrevealed card,
                       which is returned as None.

    Returns:
        The parsed cards, in the order written

    Raises:
        ValueError: If the string format is invalid or a placeholder is
                    given when not allowed
    """
    compact = re.sub(r'[\s,]+', '', hand_str)
    cards: List[Optional[Card]] = []
    pos = 0
    while pos < len(compact):
        match = _CARD_PATTERN.match(compact, pos)
        if not match:
            raise ValueError(
                f"Invalid card at position {len(cards) + 1} in hand string '{hand_str}'"
            )
        token = match.group(0)
        if token == UNKNOWN_CARD:
            if not allow_unknown:
                raise ValueError(f"Unknown card not allowed in '{hand_str}'")
            cards.append(None)
        elif '?' in token:
            raise ValueError(f"Partially unknown card '{token}' in '{hand_str}'")
        else:
            cards.append(Card.from_string(token))
        pos = match.end()

    logger.debug(f"Created hand from string '{hand_str}': {[str(c) for c in cards]}")
    return cards
