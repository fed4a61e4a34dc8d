"""Action statistics for parsed hands: categories, filters and per-player summaries."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum

from .action import Action, ActionType, Street


class ActionCategory(Enum):
    """What kind of decision an action represents."""

    FORCED = "forced"
    AGGRESSIVE = "aggressive"
    PASSIVE = "passive"
    NEUTRAL = "neutral"
    SYSTEM = "system"


_CATEGORIES = {
    ActionType.BLIND: ActionCategory.FORCED,
    ActionType.ANTE: ActionCategory.FORCED,
    ActionType.POST: ActionCategory.FORCED,
    ActionType.BET: ActionCategory.AGGRESSIVE,
    ActionType.RAISE: ActionCategory.AGGRESSIVE,
    ActionType.CALL: ActionCategory.PASSIVE,
    ActionType.CHECK: ActionCategory.PASSIVE,
    ActionType.FOLD: ActionCategory.PASSIVE,
    ActionType.SHOW: ActionCategory.NEUTRAL,
    ActionType.MUCK: ActionCategory.NEUTRAL,
    ActionType.COLLECTED: ActionCategory.NEUTRAL,
    ActionType.UNCALLED: ActionCategory.NEUTRAL,
}


def categorize_action(action: Action) -> ActionCategory:
    """Deals and connection events are SYSTEM; everything else by type."""
    return _CATEGORIES.get(action.type, ActionCategory.SYSTEM)


@dataclass(frozen=True)
class ActionFilter:
    """Criteria for filter_actions. Unset fields match everything.

    An amount bound excludes actions that have no amount.
    """

    player: str | None = None
    types: frozenset[ActionType] | None = None
    street: Street | None = None
    min_amount: float | None = None
    max_amount: float | None = None

    def matches(self, action: Action) -> bool:
        if self.player is not None and action.player != self.player:
            return False
        if self.types is not None and action.type not in self.types:
            return False
        if self.street is not None and action.street is not self.street:
            return False
        if self.min_amount is not None or self.max_amount is not None:
            if action.amount is None:
                return False
            if self.min_amount is not None and action.amount < self.min_amount:
                return False
            if self.max_amount is not None and action.amount > self.max_amount:
                return False
        return True


def filter_actions(actions: Iterable[Action], criteria: ActionFilter) -> list[Action]:
    return [a for a in actions if criteria.matches(a)]


def search_actions(actions: Iterable[Action], query: str) -> list[Action]:
    """Case-insensitive match on player, action type, street or amount."""
    query = query.strip().lower()
    if not query:
        return []

    def hit(action: Action) -> bool:
        fields = [action.type.value, action.street.value]
        if action.player:
            fields.append(action.player.lower())
        if action.amount is not None:
            fields.append(f"{action.amount:g}")
        return any(query in f for f in fields)

    return [a for a in actions if hit(a)]


@dataclass
class ActionStats:
    """Counts over a list of actions.

    ``average_amount`` averages only the actions that carry an amount.
    """

    total_actions: int = 0
    by_type: Counter[ActionType] = field(default_factory=Counter)
    by_street: Counter[Street] = field(default_factory=Counter)
    by_player: Counter[str] = field(default_factory=Counter)
    total_amount: float = 0.0
    average_amount: float = 0.0


def action_stats(actions: Iterable[Action]) -> ActionStats:
    stats = ActionStats()
    with_amount = 0
    for action in actions:
        stats.total_actions += 1
        stats.by_type[action.type] += 1
        stats.by_street[action.street] += 1
        if action.player:
            stats.by_player[action.player] += 1
        if action.amount is not None:
            stats.total_amount += action.amount
            with_amount += 1
    if with_amount:
        stats.average_amount = stats.total_amount / with_amount
    return stats


@dataclass(frozen=True)
class PlayerStats:
    """One player's decisions in a hand.

    vpip: Put chips in preflop voluntarily (call, bet or raise).
    pfr: Raised preflop.
    winnings: Total collected from pots.
    """

    name: str
    total_actions: int
    aggressive_actions: int
    passive_actions: int
    vpip: bool
    pfr: bool
    winnings: float

    @property
    def aggression(self) -> float:
        """Share of aggressive actions among non-forced decisions."""
        decisions = self.aggressive_actions + self.passive_actions
        return self.aggressive_actions / decisions if decisions else 0.0


def player_stats(actions: Iterable[Action], name: str) -> PlayerStats:
    own = [a for a in actions if a.player == name]
    aggressive = passive = 0
    vpip = pfr = False
    for action in own:
        category = categorize_action(action)
        if category is ActionCategory.AGGRESSIVE:
            aggressive += 1
        elif category is ActionCategory.PASSIVE:
            passive += 1
        else:
            continue
        if action.street is Street.PREFLOP and action.amount:
            vpip = True
            pfr = pfr or action.type is ActionType.RAISE
    return PlayerStats(
        name=name,
        total_actions=len(own),
        aggressive_actions=aggressive,
        passive_actions=passive,
        vpip=vpip,
        pfr=pfr,
        winnings=round(sum(a.amount or 0.0 for a in own if a.type is ActionType.COLLECTED), 2),
    )
