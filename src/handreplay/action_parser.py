"""Recognizes individual hand-history lines as actions."""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Iterable
from dataclasses import dataclass

from .action import Action, ActionType, CollectedAction, PotKind, Street
from .card import parse_cards
from .errors import InvalidAmountError

logger = logging.getLogger(__name__)

_CURRENCY = "$€£"


def parse_amount(token: str) -> float:
    """Convert an amount token like '$1,250.50' to a float.

    Raises InvalidAmountError for negative or non-numeric values.
    """
    cleaned = token.strip().rstrip(".,")
    negative = cleaned.startswith("-")
    cleaned = cleaned.lstrip("-").lstrip(_CURRENCY).replace(",", "")
    try:
        value = float(cleaned)
    except ValueError:
        raise InvalidAmountError(f"Invalid amount: {token!r}") from None
    if negative or value < 0 or not math.isfinite(value):
        raise InvalidAmountError(f"Invalid amount: {token!r}")
    return value


@dataclass(frozen=True)
class _Pattern:
    regex: re.Pattern[str]
    type: ActionType
    amount_group: str | None = "amount"
    reason: str | None = None


_NAME = r"(?P<player>[^:]+?)"
# Lines without a colon after the name; quotes and commas mean chat.
_BARE_NAME = r'(?P<player>[^",:]+?)'
_AMT = r"(?P<amount>\S+?)"
_ALL_IN = r"(?P<all_in> and is all-in)?$"

# Order matters: the first match wins.
_PATTERNS: tuple[_Pattern, ...] = (
    _Pattern(re.compile(rf"^{_NAME}: posts (?:small|big) blind {_AMT}{_ALL_IN}"), ActionType.BLIND),
    _Pattern(re.compile(rf"^{_NAME}: posts small & big blinds {_AMT}{_ALL_IN}"), ActionType.BLIND),
    _Pattern(re.compile(rf"^{_NAME}: posts dead blind {_AMT}{_ALL_IN}"), ActionType.BLIND),
    _Pattern(re.compile(rf"^{_NAME}: posts (?:the )?ante {_AMT}{_ALL_IN}"), ActionType.ANTE),
    _Pattern(re.compile(rf"^{_NAME}: posts {_AMT}{_ALL_IN}"), ActionType.POST),
    _Pattern(re.compile(rf"^{_NAME}: folds\b"), ActionType.FOLD, None),
    _Pattern(re.compile(rf"^{_NAME}: checks\b"), ActionType.CHECK, None),
    _Pattern(re.compile(rf"^{_NAME}: calls {_AMT}{_ALL_IN}"), ActionType.CALL),
    _Pattern(re.compile(rf"^{_NAME}: bets {_AMT}{_ALL_IN}"), ActionType.BET),
    _Pattern(re.compile(rf"^{_NAME}: raises (?P<increment>\S+) to {_AMT}{_ALL_IN}"), ActionType.RAISE),
    _Pattern(re.compile(rf"^{_NAME}: shows \[(?P<cards>[^\]]*)\]"), ActionType.SHOW, None),
    _Pattern(re.compile(rf"^{_NAME}: (?:mucks hand|doesn't show hand)"), ActionType.MUCK, None),
    _Pattern(re.compile(r"^Uncalled bet \((?P<amount>[^)]+)\) returned to (?P<player>.+)$"), ActionType.UNCALLED),
    _Pattern(
        re.compile(rf"^{_BARE_NAME} collected (?P<amount>\S+) from (?:main |side )?pot"),
        ActionType.COLLECTED,
    ),
    _Pattern(
        re.compile(rf"^{_BARE_NAME}:? has timed out(?P<detail> while disconnected)?"),
        ActionType.TIMEOUT,
        None,
        "timed out",
    ),
    _Pattern(re.compile(rf"^{_BARE_NAME}:? is disconnected"), ActionType.DISCONNECT, None, "disconnected"),
    _Pattern(re.compile(rf"^{_BARE_NAME}:? is connected"), ActionType.RECONNECT, None),
    _Pattern(re.compile(rf"^{_NAME}: sits out"), ActionType.SITOUT, None),
    _Pattern(re.compile(rf"^{_BARE_NAME}:? is sitting out"), ActionType.SITOUT, None),
    _Pattern(re.compile(rf"^{_BARE_NAME}:? has returned"), ActionType.RETURN, None),
)

_COLLECTED_PATTERNS: tuple[tuple[re.Pattern[str], PotKind], ...] = (
    (re.compile(rf"^{_BARE_NAME} collected (?P<amount>\S+) from main pot"), PotKind.MAIN),
    (
        re.compile(rf"^{_BARE_NAME} collected (?P<amount>\S+) from side pot(?:-(?P<level>\d+))?"),
        PotKind.SIDE,
    ),
    (re.compile(rf"^{_BARE_NAME} collected (?P<amount>\S+) from pot"), PotKind.SINGLE),
)

# Per-seat summary results. They repeat the collections above, or give a
# player's total over every pot, so they only count for players without one.
_SUMMARY_COLLECTED_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"^Seat \d+: (?P<player>.+?) (?:\([^)]*\) )*collected \((?P<amount>[^)]+)\)"),
    re.compile(
        r"^Seat \d+: (?P<player>.+?) (?:\([^)]*\) )*showed \[[^\]]*\] and won \((?P<amount>[^)]+)\)"
    ),
)


class ActionParser:
    """Turns action lines into Action records with sequential indexes."""

    def __init__(self) -> None:
        self._action_index = 0

    def parse_action(self, line: str, street: Street) -> Action | None:
        """Parse one line, or return None if it isn't an action line."""
        if not line or not line.strip():
            return None

        for pattern in _PATTERNS:
            match = pattern.regex.match(line)
            if match is None:
                continue

            groups = match.groupdict()
            amount = None
            if pattern.amount_group is not None:
                amount = parse_amount(groups[pattern.amount_group])
            cards = parse_cards(groups["cards"]) if groups.get("cards") else ()
            reason = pattern.reason
            if groups.get("detail"):
                reason = f"{reason}{groups['detail']}"

            action = self.create_action(
                pattern.type,
                groups["player"].strip(),
                amount,
                street,
                cards=cards,
                is_all_in=bool(groups.get("all_in")),
                reason=reason,
            )
            logger.debug("Line %r -> %s", line, action)
            return action

        return None

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
    ) -> Action:
        """Build an Action and assign it the next index."""
        action = Action(
            index=self._action_index,
            street=street,
            type=type,
            player=player,
            amount=amount,
            cards=tuple(cards),
            is_all_in=is_all_in,
            reason=reason,
        )
        self._action_index += 1
        return action

    def extract_collected_actions(self, lines: Iterable[str]) -> list[CollectedAction]:
        """Find every pot collection anywhere in the hand.

        A player may collect the same amount from several pots, so pot lines
        are only de-duplicated when kind and level match too. Summary
        results are used for players with no pot line at all.
        """
        collected: list[CollectedAction] = []
        from_summary: dict[str, CollectedAction] = {}

        for line in lines:
            item = self._match_collected(line)
            if item is not None:
                if item not in collected:
                    collected.append(item)
                continue
            for regex in _SUMMARY_COLLECTED_PATTERNS:
                match = regex.match(line)
                if match is not None:
                    player = match.group("player").strip()
                    from_summary.setdefault(
                        player,
                        CollectedAction(player, parse_amount(match.group("amount")), PotKind.SINGLE),
                    )
                    break

        winners = {c.player for c in collected}
        collected.extend(c for name, c in from_summary.items() if name not in winners)
        return collected

    @staticmethod
    def _match_collected(line: str) -> CollectedAction | None:
        for regex, kind in _COLLECTED_PATTERNS:
            match = regex.match(line)
            if match is None:
                continue
            level = match.group("level") if kind is PotKind.SIDE else None
            return CollectedAction(
                player=match.group("player").strip(),
                amount=parse_amount(match.group("amount")),
                kind=kind,
                side_pot_level=int(level) if level else None,
            )
        return None

    def reset(self) -> None:
        """Start numbering from zero again."""
        self._action_index = 0
