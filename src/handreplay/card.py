"""Playing card tokens as they appear in hand histories."""

from enum import IntEnum
from dataclasses import dataclass
from typing import Self

from .errors import InvalidCardError


class Suit(IntEnum):
    """Card suits. Values don't affect ordering of anything in a replay."""

    CLUBS = 0
    DIAMONDS = 1
    HEARTS = 2
    SPADES = 3

    @property
    def letter(self) -> str:
        """Lower-case suit letter used in hand-history text."""
        return "cdhs"[self.value]

    @property
    def symbol(self) -> str:
        """Unicode symbol for the suit."""
        return ["♣", "♦", "♥", "♠"][self.value]

    def __str__(self) -> str:
        return self.letter


class Rank(IntEnum):
    """Card ranks. Higher value = higher rank."""

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    @property
    def symbol(self) -> str:
        """Single-character rank symbol ('T' for ten)."""
        if self.value <= 9:
            return str(self.value)
        return {10: "T", 11: "J", 12: "Q", 13: "K", 14: "A"}[self.value]

    def __str__(self) -> str:
        return self.symbol


_RANKS = {r.symbol: r for r in Rank}
_SUITS = {s.letter: s for s in Suit}


@dataclass(frozen=True, slots=True)
class Card:
    """A playing card with rank and suit."""

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{self.rank.symbol}{self.suit.letter}"

    def __repr__(self) -> str:
        return f"Card({self})"

    @property
    def pretty(self) -> str:
        """Rank followed by the unicode suit symbol, e.g. 'A♠'."""
        return f"{self.rank.symbol}{self.suit.symbol}"

    @classmethod
    def from_str(cls, s: str) -> Self:
        """Parse a two-character token like 'As', 'Td', '2c'.

        Rank: 2-9, T, J, Q, K, A (upper-case)
        Suit: c(lubs), d(iamonds), h(earts), s(pades) (lower-case)
        """
        if len(s) != 2:
            raise InvalidCardError(
                f"Invalid card format: {s!r}. Expected format: rank + suit (e.g., 'As', 'Kh')"
            )
        rank = _RANKS.get(s[0])
        if rank is None:
            raise InvalidCardError(f"Invalid rank in card {s!r}")
        suit = _SUITS.get(s[1])
        if suit is None:
            raise InvalidCardError(f"Invalid suit in card {s!r}")
        return cls(rank=rank, suit=suit)


# Convenience functions
def card(s: str) -> Card:
    """Shorthand for Card.from_str()."""
    return Card.from_str(s)


def parse_cards(s: str) -> tuple[Card, ...]:
    """Parse a space separated card list such as 'As Kd 7h'."""
    return tuple(card(token) for token in s.split())
