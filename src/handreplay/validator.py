"""Post-assembly consistency checks for parsed hands."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from .action import Action, ActionType
from .hand import PokerHand
from .player import Player
from .pot import Pot


@dataclass
class ValidationResult:
    """Outcome of one or more checks."""

    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def merge(self, other: ValidationResult) -> ValidationResult:
        return ValidationResult(errors=self.errors + other.errors)


class HandHistoryValidator:
    """Cross-checks a PokerHand for structural and numeric consistency."""

    def __init__(self, tolerance: float = 0.01) -> None:
        self.tolerance = tolerance

    def validate_hand_structure(self, hand: PokerHand) -> ValidationResult:
        errors = []

        if not hand.id or not hand.id.strip():
            errors.append("Hand ID is required")
        if not hand.stakes or not hand.stakes.strip():
            errors.append("Stakes information is required")
        if hand.date is None:
            errors.append("Hand date is required")

        if hand.table is None:
            errors.append("Table information is required")
        else:
            if not hand.table.name.strip():
                errors.append("Table name is required")
            if hand.table.max_seats < 2:
                errors.append("Table must have at least 2 seats")

        if not hand.players:
            errors.append("At least one seated player is required")

        return ValidationResult(errors)

    def validate_player_consistency(
        self, players: Iterable[Player], actions: Iterable[Action], max_seats: int | None = None
    ) -> ValidationResult:
        errors = []
        players = list(players)

        seats: set[int] = set()
        names: set[str] = set()
        for player in players:
            if player.seat in seats:
                errors.append(f"Duplicate seat number: {player.seat}")
            seats.add(player.seat)
            if player.name in names:
                errors.append(f"Duplicate player name: {player.name}")
            names.add(player.name)
            if player.chips < 0:
                errors.append(f"Player {player.name} has negative chips: {player.chips}")
            if max_seats is not None and not 1 <= player.seat <= max_seats:
                errors.append(f"Seat {player.seat} is outside 1..{max_seats}")

        for action in actions:
            if action.player is not None and action.player not in names:
                errors.append(f"Action by unknown player: {action.player}")

        return ValidationResult(errors)

    def validate_pot_totals(
        self,
        pots: Iterable[Pot],
        actions: Iterable[Action],
        total_pot: float | None = None,
        rake: float | None = None,
    ) -> ValidationResult:
        """Check pots against the declared total and the wagered chips.

        Wagered chips are blinds, antes, bets, calls and raise totals,
        less uncalled bets returned.
        """
        errors = []
        pots = list(pots)
        rake = rake or 0.0
        pot_sum = sum(p.amount for p in pots)

        for pot in pots:
            if pot.amount < 0:
                errors.append(f"Pot has negative amount: {pot.amount}")
            if not pot.eligible_players:
                errors.append(f"Pot at level {pot.side_pot_level} has no eligible players")

        if rake < 0:
            errors.append(f"Rake is negative: {rake}")

        if total_pot is not None:
            if rake > total_pot + self.tolerance:
                errors.append(f"Rake {rake:g} exceeds total pot {total_pot:g}")
            if abs(pot_sum + rake - total_pot) > self.tolerance:
                errors.append(
                    f"Pot total mismatch: pots {pot_sum:g} + rake {rake:g} != total {total_pot:g}"
                )

            wagered = _wagered(actions)
            if abs(wagered - total_pot) > self.tolerance:
                errors.append(f"Wagered chips {wagered:g} != total pot {total_pot:g}")

        return ValidationResult(errors)

    def validate_complete_hand(self, hand: PokerHand) -> ValidationResult:
        """Run every check and merge the results."""
        return (
            self.validate_hand_structure(hand)
            .merge(self.validate_player_consistency(hand.players, hand.actions, hand.table.max_seats))
            .merge(self.validate_pot_totals(hand.pots, hand.actions, hand.total_pot, hand.rake))
        )


def _wagered(actions: Iterable[Action]) -> float:
    """Total chips put in, per street: raises count their total once per round."""
    total = 0.0
    street_commit: dict[tuple[object, str], float] = {}
    for action in actions:
        if action.player is None or action.amount is None:
            continue
        key = (action.street, action.player)
        if action.type is ActionType.RAISE:
            already = street_commit.get(key, 0.0)
            total += action.amount - already
            street_commit[key] = action.amount
        elif action.type.is_wager:
            total += action.amount
            if action.type is not ActionType.ANTE:
                street_commit[key] = street_commit.get(key, 0.0) + action.amount
        elif action.type is ActionType.UNCALLED:
            total -= action.amount
    return total
