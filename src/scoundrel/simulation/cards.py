"""Card model: suits, ranks and the standard deck."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Suit(Enum):
    """Playing card suits."""

    HEARTS = "H"
    SPADES = "S"
    DIAMONDS = "D"
    CLUBS = "C"


class Rank(Enum):
    """Playing card ranks, valued 2-14 (Ace high)."""

    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "10"
    JACK = "J"
    QUEEN = "Q"
    KING = "K"
    ACE = "A"

    @property
    def strength(self) -> int:
        """Numeric strength used for damage, weapons and healing."""
        return RANK_VALUES[self.value]


RANK_VALUES = {
    "2": 2,
    "3": 3,
    "4": 4,
    "5": 5,
    "6": 6,
    "7": 7,
    "8": 8,
    "9": 9,
    "10": 10,
    "J": 11,
    "Q": 12,
    "K": 13,
    "A": 14,
}


@dataclass(frozen=True)
class Card:
    """Immutable playing card."""

    rank: Rank
    suit: Suit

    @property
    def value(self) -> int:
        return self.rank.strength

    def __str__(self) -> str:
        return f"{self.rank.value}{self.suit.value}"


def new_deck() -> list[Card]:
    """Build an ordered 52-card deck, one card per (suit, rank) pair."""
    return [Card(rank=rank, suit=suit) for suit in Suit for rank in Rank]


def is_high_diamond(card: Card) -> bool:
    """Diamonds above ten are removed from the deck before play."""
    return card.suit == Suit.DIAMONDS and card.value > Rank.TEN.strength
