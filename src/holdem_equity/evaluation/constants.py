"""Constants for poker hand evaluation."""
from enum import IntEnum
from types import MappingProxyType

from holdem_equity.core.card import Rank


class HandRank(IntEnum):
    """Hand tiers, ordered worst to best."""
    HIGH_CARD = 1
    ONE_PAIR = 2
    TWO_PAIR = 3
    THREE_OF_A_KIND = 4
    STRAIGHT = 5
    FLUSH = 6
    FULL_HOUSE = 7
    FOUR_OF_A_KIND = 8
    STRAIGHT_FLUSH = 9
    ROYAL_FLUSH = 10


# Display names for each tier
HAND_NAMES = MappingProxyType({
    HandRank.ROYAL_FLUSH: 'Royal Flush',
    HandRank.STRAIGHT_FLUSH: 'Straight Flush',
    HandRank.FOUR_OF_A_KIND: 'Four of a Kind',
    HandRank.FULL_HOUSE: 'Full House',
    HandRank.FLUSH: 'Flush',
    HandRank.STRAIGHT: 'Straight',
    HandRank.THREE_OF_A_KIND: 'Three of a Kind',
    HandRank.TWO_PAIR: 'Two Pair',
    HandRank.ONE_PAIR: 'One Pair',
    HandRank.HIGH_CARD: 'High Card',
})

HAND_SIZE = 5

ACE_HIGH = 14
# Value the ace takes at the bottom of a wheel (A-2-3-4-5)
ACE_LOW = 1
WHEEL_VALUES = (5, 4, 3, 2, ACE_LOW)

# Singular and plural rank names used in hand descriptions
RANK_NAMES = MappingProxyType({
    Rank.TWO: ('Two', 'Twos'),
    Rank.THREE: ('Three', 'Threes'),
    Rank.FOUR: ('Four', 'Fours'),
    Rank.FIVE: ('Five', 'Fives'),
    Rank.SIX: ('Six', 'Sixes'),
    Rank.SEVEN: ('Seven', 'Sevens'),
    Rank.EIGHT: ('Eight', 'Eights'),
    Rank.NINE: ('Nine', 'Nines'),
    Rank.TEN: ('Ten', 'Tens'),
    Rank.JACK: ('Jack', 'Jacks'),
    Rank.QUEEN: ('Queen', 'Queens'),
    Rank.KING: ('King', 'Kings'),
    Rank.ACE: ('Ace', 'Aces'),
})
