"""Service contracts the hand parser depends on.

Any object with these methods can be injected into HandHistoryParser
(trackers and action parsers through a factory, since they hold per-hand
state), e.g. to support another site's wording or to stub a service in tests.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Protocol

from .action import Action, ActionType, CollectedAction, Street
from .hand import PokerHand
from .player import Player
from .pot import Pot
from .validator import ValidationResult


class ActionParserProtocol(Protocol):
    def parse_action(self, line: str, street: Street) -> Action | None: ...

    def create_action(
        self,
        type: ActionType,
        player: str | None,
        amount: float | None = None,
        street: Street = Street.PREFLOP,
        *,
        cards: tuple = (),
        is_all_in: bool = False,
        reason: str | None = None,
    ) -> Action: ...

    def extract_collected_actions(self, lines: Iterable[str]) -> list[CollectedAction]: ...

    def reset(self) -> None: ...


class PlayerStateTrackerProtocol(Protocol):
    def initialize_player(self, name: str, chips: float) -> None: ...

    def track_player_chips(self, name: str, balance: float) -> None: ...

    def mark_player_all_in(self, name: str, amount: float) -> None: ...

    def remove_active_player(self, name: str) -> None: ...

    def add_contribution(self, name: str, amount: float) -> None: ...

    def return_contribution(self, name: str, amount: float) -> None: ...

    def get_player_chips(self, name: str) -> float: ...

    def get_all_in_players(self) -> dict[str, float]: ...

    def get_active_players(self) -> set[str]: ...

    def get_contributions(self) -> dict[str, float]: ...

    def is_player_all_in(self, name: str) -> bool: ...

    def reset(self) -> None: ...


class PotCalculatorProtocol(Protocol):
    def calculate_pot_structure(
        self,
        contributions: Mapping[str, float],
        active_players: Iterable[str],
        all_in_players: Mapping[str, float],
    ) -> list[Pot]: ...

    def get_eligible_players(
        self,
        side_pot_level: int,
        all_in_players: Mapping[str, float],
        active_players: Iterable[str],
    ) -> list[str]: ...

    def enhance_pots(
        self, pots: Iterable[Pot], collected: Iterable[CollectedAction]
    ) -> list[Pot]: ...

    def validate_pot_math(
        self, pots: Iterable[Pot], total: float, rake: float = 0.0, tolerance: float = 0.01
    ) -> None: ...


class HandHistoryValidatorProtocol(Protocol):
    def validate_hand_structure(self, hand: PokerHand) -> ValidationResult: ...

    def validate_player_consistency(
        self, players: Iterable[Player], actions: Iterable[Action], max_seats: int | None = None
    ) -> ValidationResult: ...

    def validate_pot_totals(
        self,
        pots: Iterable[Pot],
        actions: Iterable[Action],
        total_pot: float | None = None,
        rake: float | None = None,
    ) -> ValidationResult: ...
