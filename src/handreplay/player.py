"""Seated players and the running chip ledger used while replaying actions."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .card import Card
from .errors import DuplicatePlayerError, PlayerStateError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Player:
    """A player seated at the table for one hand.

    ``chips`` is the starting stack and never changes; the running balance
    lives in PlayerStateTracker.
    """

    seat: int
    name: str
    chips: float
    cards: tuple[Card, Card] | None = None
    position: str | None = None
    dealt_in: bool = field(default=False, repr=False)

    @property
    def is_hero(self) -> bool:
        """True when hole cards were dealt to this player ('Dealt to ...')."""
        return self.dealt_in and self.cards is not None


@dataclass(frozen=True)
class ChipUnderflow:
    """A balance update that had to be clamped at zero."""

    player: str
    requested: float


@dataclass
class PlayerStateTracker:
    """Single source of truth for stacks, folds and all-ins during one hand."""

    _chips: dict[str, float] = field(default_factory=dict)
    _all_in: dict[str, float] = field(default_factory=dict)
    _active: set[str] = field(default_factory=set)
    _folded: set[str] = field(default_factory=set)
    _contributions: dict[str, float] = field(default_factory=dict)
    underflows: list[ChipUnderflow] = field(default_factory=list)

    def initialize_player(self, name: str, chips: float) -> None:
        if name in self._chips:
            raise DuplicatePlayerError(f"Duplicate player name: {name}")
        self._chips[name] = chips
        self._active.add(name)
        self._contributions[name] = 0.0

    def track_player_chips(self, name: str, balance: float) -> None:
        """Overwrite a player's balance, clamped at zero."""
        if balance < 0:
            logger.warning("Clamping %s's balance %.2f to 0", name, balance)
            self.underflows.append(ChipUnderflow(player=name, requested=balance))
            balance = 0.0
        self._chips[name] = balance

    def mark_player_all_in(self, name: str, amount: float) -> None:
        """Record the amount a player is all-in for. Only once per hand."""
        if name in self._all_in:
            raise PlayerStateError(f"Player {name} is already all-in")
        self._all_in[name] = amount

    def remove_active_player(self, name: str) -> None:
        """Fold a player out of the hand."""
        self._active.discard(name)
        self._folded.add(name)

    def add_contribution(self, name: str, amount: float) -> None:
        self._contributions[name] = self._contributions.get(name, 0.0) + amount

    def return_contribution(self, name: str, amount: float) -> None:
        """Take back an uncalled bet."""
        self._contributions[name] = max(0.0, self._contributions.get(name, 0.0) - amount)
        if name in self._all_in:
            self._all_in[name] = min(self._all_in[name], self._contributions[name])

    def get_player_chips(self, name: str) -> float:
        return self._chips.get(name, 0.0)

    def get_all_in_players(self) -> dict[str, float]:
        return dict(self._all_in)

    def get_active_players(self) -> set[str]:
        return set(self._active)

    def get_folded_players(self) -> set[str]:
        return set(self._folded)

    def get_contributions(self) -> dict[str, float]:
        return dict(self._contributions)

    def is_player_all_in(self, name: str) -> bool:
        return name in self._all_in

    def is_player_active(self, name: str) -> bool:
        return name in self._active

    def reset(self) -> None:
        """Clear all per-hand state."""
        self._chips.clear()
        self._all_in.clear()
        self._active.clear()
        self._folded.clear()
        self._contributions.clear()
        self.underflows.clear()
