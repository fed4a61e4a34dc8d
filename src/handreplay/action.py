"""Streets, action types and the action records produced by the parser."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .card import Card


class Street(Enum):
    """Betting rounds, in the order they occur."""

    PREFLOP = "preflop"
    FLOP = "flop"
    TURN = "turn"
    RIVER = "river"
    SHOWDOWN = "showdown"

    @property
    def order(self) -> int:
        return list(Street).index(self)


class ActionType(Enum):
    """Everything that can happen on a hand-history action line."""

    BLIND = "blind"
    ANTE = "ante"
    POST = "post"
    BET = "bet"
    RAISE = "raise"
    CALL = "call"
    CHECK = "check"
    FOLD = "fold"
    DEAL = "deal"
    SHOW = "show"
    MUCK = "muck"
    COLLECTED = "collected"
    UNCALLED = "uncalled"
    TIMEOUT = "timeout"
    DISCONNECT = "disconnect"
    RECONNECT = "reconnect"
    SITOUT = "sitout"
    RETURN = "return"

    @property
    def is_wager(self) -> bool:
        """Action puts chips into the pot."""
        return self in WAGER_TYPES


WAGER_TYPES = frozenset(
    {
        ActionType.BLIND,
        ActionType.ANTE,
        ActionType.POST,
        ActionType.BET,
        ActionType.RAISE,
        ActionType.CALL,
    }
)


class PotKind(Enum):
    """Which pot a 'collected' line refers to."""

    MAIN = "main"
    SIDE = "side"
    SINGLE = "single"


@dataclass(frozen=True)
class Action:
    """A single replayable event.

    Attributes:
        index: Position in the hand's action sequence (0-based).
        street: Street the action happened on.
        type: The action type.
        player: Acting player, None for board deals.
        amount: Chips involved. For raises this is the total for the round.
        cards: Cards dealt or shown.
        is_all_in: The action put the player all-in.
        reason: Free text for timeouts/disconnects.
    """

    index: int
    street: Street
    type: ActionType
    player: str | None = None
    amount: float | None = None
    cards: tuple[Card, ...] = ()
    is_all_in: bool = False
    reason: str | None = None

    def __str__(self) -> str:
        who = self.player or "Dealer"
        text = f"{who}: {self.type.value}"
        if self.amount is not None:
            text += f" {self.amount:g}"
        if self.cards:
            text += " [" + " ".join(str(c) for c in self.cards) + "]"
        if self.is_all_in:
            text += " (all-in)"
        return text


@dataclass(frozen=True)
class CollectedAction:
    """A 'collected N from pot' statement scraped from the hand text."""

    player: str
    amount: float
    kind: PotKind
    side_pot_level: int | None = None
