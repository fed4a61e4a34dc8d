"""The parsed hand record handed to replay front-ends."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from .action import Action, Street
from .card import Card
from .player import Player
from .pot import Pot


@dataclass(frozen=True)
class TableInfo:
    """Table metadata from the second header line."""

    name: str
    max_seats: int = 9
    button_seat: int = 1


@dataclass(frozen=True)
class PokerHand:
    """A fully parsed hand. Immutable; built once per successful parse.

    Attributes:
        id: Hand number from the header.
        tournament_id: Tournament number, None for cash games.
        stakes: Blind levels, e.g. '$1/$2', or 'Unknown'.
        date: Local timestamp from the header.
        table: Table metadata.
        players: Seated players in seat order.
        actions: Every action in order; ``actions[i].index == i``.
        board: 0, 3, 4 or 5 community cards.
        pots: Main pot first, then side pots by level.
        rake: House rake, if the summary declares one.
        total_pot: Total pot declared in the summary.
        warnings: Advisory problems that didn't abort the parse.
    """

    id: str
    stakes: str
    date: datetime
    table: TableInfo
    players: tuple[Player, ...]
    actions: tuple[Action, ...]
    board: tuple[Card, ...]
    pots: tuple[Pot, ...]
    tournament_id: str | None = None
    rake: float | None = None
    total_pot: float | None = None
    warnings: tuple[str, ...] = ()

    @property
    def hero(self) -> Player | None:
        return next((p for p in self.players if p.is_hero), None)

    def player(self, name: str) -> Player | None:
        return next((p for p in self.players if p.name == name), None)

    def actions_on(self, street: Street) -> list[Action]:
        return [a for a in self.actions if a.street is street]

    @property
    def street_reached(self) -> Street:
        """Last street that had any action or board card."""
        if any(a.street is Street.SHOWDOWN for a in self.actions):
            return Street.SHOWDOWN
        return {0: Street.PREFLOP, 3: Street.FLOP, 4: Street.TURN, 5: Street.RIVER}.get(
            len(self.board), Street.PREFLOP
        )

    def to_dict(self) -> dict[str, Any]:
        """Plain JSON-serialisable representation."""
        return {
            "id": self.id,
            "tournament_id": self.tournament_id,
            "stakes": self.stakes,
            "date": self.date.isoformat(),
            "table": {
                "name": self.table.name,
                "max_seats": self.table.max_seats,
                "button_seat": self.table.button_seat,
            },
            "players": [
                {
                    "seat": p.seat,
                    "name": p.name,
                    "chips": p.chips,
                    "cards": [str(c) for c in p.cards] if p.cards else None,
                    "is_hero": p.is_hero,
                    "position": p.position,
                }
                for p in self.players
            ],
            "actions": [
                {
                    "index": a.index,
                    "street": a.street.value,
                    "type": a.type.value,
                    "player": a.player,
                    "amount": a.amount,
                    "cards": [str(c) for c in a.cards],
                    "is_all_in": a.is_all_in,
                    "reason": a.reason,
                }
                for a in self.actions
            ],
            "board": [str(c) for c in self.board],
            "pots": [
                {
                    "amount": p.amount,
                    "is_side": p.is_side,
                    "side_pot_level": p.side_pot_level,
                    "eligible_players": list(p.eligible_players),
                    "winners": list(p.winners),
                    "is_split": p.is_split,
                    "odd_chip_winner": p.odd_chip_winner,
                }
                for p in self.pots
            ],
            "rake": self.rake,
            "total_pot": self.total_pot,
            "warnings": list(self.warnings),
        }
