"""Pot records and side pot calculation."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, replace

from .action import CollectedAction, PotKind
from .errors import PotMathError

logger = logging.getLogger(__name__)

EPSILON = 1e-9


@dataclass(frozen=True)
class Pot:
    """A single pot (main or side) with its eligible winners.

    Attributes:
        amount: Chips in the pot.
        is_side: False for the main pot.
        side_pot_level: 0 for the main pot, 1..N for side pots.
        eligible_players: Names that may win this pot, in seat order.
        winners: Names that collected from this pot.
        is_split: More than one player collected.
        odd_chip_winner: Player who collected the larger share of a split.
    """

    amount: float
    is_side: bool = False
    side_pot_level: int = 0
    eligible_players: tuple[str, ...] = ()
    winners: tuple[str, ...] = ()
    is_split: bool = False
    odd_chip_winner: str | None = None


def _chips(value: float) -> float:
    return round(value, 2)


class PotCalculator:
    """Splits contributions into a main pot and side pots."""

    def calculate_pot_structure(
        self,
        contributions: Mapping[str, float],
        active_players: Iterable[str],
        all_in_players: Mapping[str, float],
    ) -> list[Pot]:
        """Calculate main pot and side pots from what each player put in.

        Algorithm:
        1. Tier boundaries are the distinct all-in amounts, ascending,
           followed by the largest contribution if it is above them
        2. Each contributor adds min(their_total, level) - min(their_total, prev)
           to a tier, folded players included
        3. Eligible = non-folded players whose total reaches the tier
        4. A tier nobody can win is merged into the one below it
        """
        contributors = {name: c for name, c in contributions.items() if c > EPSILON}
        if not contributors:
            return []

        contenders = set(active_players) | set(all_in_players)
        levels = sorted(
            {
                min(amount, contributions.get(name, 0.0))
                for name, amount in all_in_players.items()
            }
            - {0.0}
        )
        top = max(contributors.values())
        if not levels or levels[-1] < top - EPSILON:
            levels.append(top)

        tiers: list[tuple[float, list[str]]] = []
        prev_level = 0.0
        for level in levels:
            amount = sum(
                min(c, level) - min(c, prev_level) for c in contributors.values()
            )
            eligible = [
                name
                for name in contributions
                if name in contenders and contributions[name] >= level - EPSILON
            ]
            prev_level = level
            if amount <= EPSILON:
                continue
            if not eligible and tiers:
                below_amount, below_eligible = tiers[-1]
                tiers[-1] = (below_amount + amount, below_eligible)
                continue
            tiers.append((amount, eligible))

        pots = [
            Pot(
                amount=_chips(amount),
                is_side=level > 0,
                side_pot_level=level,
                eligible_players=tuple(eligible),
            )
            for level, (amount, eligible) in enumerate(tiers)
        ]
        logger.debug("Structural pots: %s", pots)
        return pots

    def get_eligible_players(
        self,
        side_pot_level: int,
        all_in_players: Mapping[str, float],
        active_players: Iterable[str],
    ) -> list[str]:
        """Players who may win the pot at ``side_pot_level``.

        All-in players qualify while their all-in amount reaches the tier;
        players who are still active and not all-in qualify for every tier.
        """
        boundaries = sorted(set(all_in_players.values()))
        eligible: list[str] = []
        if side_pot_level < len(boundaries):
            threshold = boundaries[side_pot_level]
            eligible.extend(
                name
                for name, amount in all_in_players.items()
                if amount >= threshold - EPSILON
            )
        for name in sorted(active_players):
            if name not in all_in_players and name not in eligible:
                eligible.append(name)
        return eligible

    def enhance_pots(
        self, pots: Iterable[Pot], collected: Iterable[CollectedAction]
    ) -> list[Pot]:
        """Attach winners, split flags and odd chip winners. Amounts are untouched."""
        collected = list(collected)
        pots = list(pots)
        enhanced = []
        for pot in pots:
            relevant = self._relevant_collections(pot, collected, single_pot=len(pots) == 1)
            winners = tuple(dict.fromkeys(c.player for c in relevant))
            is_split = len(winners) > 1
            odd_chip_winner = None
            if is_split:
                amounts = [c.amount for c in relevant]
                if max(amounts) - min(amounts) > EPSILON:
                    odd_chip_winner = max(relevant, key=lambda c: c.amount).player
            enhanced.append(
                replace(pot, winners=winners, is_split=is_split, odd_chip_winner=odd_chip_winner)
            )
        return enhanced

    def validate_pot_math(
        self,
        pots: Iterable[Pot],
        total: float,
        rake: float = 0.0,
        tolerance: float = 0.01,
    ) -> None:
        """Raise PotMathError unless pots plus rake add up to ``total``."""
        pot_sum = sum(p.amount for p in pots)
        if abs(pot_sum + rake - total) > tolerance:
            raise PotMathError(
                f"Pot math validation failed: pots {pot_sum:g} + rake {rake:g} != total {total:g}"
            )

    @staticmethod
    def _relevant_collections(
        pot: Pot, collected: list[CollectedAction], single_pot: bool
    ) -> list[CollectedAction]:
        if single_pot:
            return collected
        if pot.is_side:
            return [
                c
                for c in collected
                if c.kind is PotKind.SIDE
                and (c.side_pot_level is None or c.side_pot_level == pot.side_pot_level)
            ]
        return [c for c in collected if c.kind in (PotKind.MAIN, PotKind.SINGLE)]
