"""Hand assembler: turns a raw hand history into a PokerHand.

The parser walks the text once, top to bottom:

    Header -> Table -> Players -> Blinds/Ante -> HoleCards -> Preflop
    -> Flop -> Turn -> River -> Showdown -> Summary

Optional sections consume nothing when their marker is missing. Every
failure is returned as a ParseError inside a ParseResult, never raised.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass, field, replace
from datetime import datetime

from .action import Action, ActionType, CollectedAction, Street
from .action_parser import ActionParser, parse_amount
from .card import Card, parse_cards
from .config import ParserConfig
from .cursor import LineCursor
from .errors import (
    ChipUnderflowError,
    HandHistoryError,
    InvalidHeaderError,
    InvalidTableError,
    MissingPlayersError,
    ParseError,
    PotMathError,
    StructuralError,
    ValidationError,
)
from .hand import PokerHand, TableInfo
from .interfaces import (
    ActionParserProtocol,
    HandHistoryValidatorProtocol,
    PlayerStateTrackerProtocol,
    PotCalculatorProtocol,
)
from .player import Player, PlayerStateTracker
from .pot import Pot, PotCalculator
from .validator import HandHistoryValidator

logger = logging.getLogger(__name__)

RE_HAND_ID = re.compile(r"Hand #(\d+)")
RE_TOURNAMENT = re.compile(r"Tournament #(\d+)")
RE_STAKES = re.compile(r"([$€£]?)([\d.,]+)/[$€£]?([\d.,]+)")
RE_DATE = re.compile(r"(\d{4})/(\d{2})/(\d{2}) (\d{1,2}):(\d{2}):(\d{2})")
RE_TABLE = re.compile(r"Table '([^']+)'")
RE_MAX_SEATS = re.compile(r"(\d+)-max")
RE_BUTTON = re.compile(r"Seat #(\d+) is the button")
RE_SEAT = re.compile(r"^Seat (\d+): (.+?) \(([^\s)]+) in chips[^)]*\)")
RE_DEALT = re.compile(r"^Dealt to (.+?) \[([^\]]+)\]")
RE_BRACKETS = re.compile(r"\[([^\]]*)\]")
RE_TOTAL_POT = re.compile(r"^Total pot (\S+?)\.?(?:\s|$)")
RE_MAIN_POT = re.compile(r"Main pot (\S+?)\.?(?:\s|$)")
RE_SIDE_POT = re.compile(r"Side pot(?:-(\d+))? (\S+?)\.?(?=\s|$)")
RE_RAKE = re.compile(r"\|\s*Rake (\S+)")
RE_RAKE_LINE = re.compile(r"^Rake (\S+)")

# Lines that may appear between the seats and the hole cards marker.
_PRE_DEAL_TYPES = frozenset(
    {
        ActionType.BLIND,
        ActionType.ANTE,
        ActionType.POST,
        ActionType.SITOUT,
        ActionType.DISCONNECT,
        ActionType.RECONNECT,
        ActionType.RETURN,
        ActionType.TIMEOUT,
    }
)


@dataclass(frozen=True)
class ParseResult:
    """Either a hand or an error, never both."""

    hand: PokerHand | None = None
    error: ParseError | None = None

    def __post_init__(self) -> None:
        if (self.hand is None) == (self.error is None):
            raise ValueError("ParseResult needs exactly one of hand or error")

    @property
    def ok(self) -> bool:
        return self.hand is not None

    def unwrap(self) -> PokerHand:
        """Return the hand, or raise HandHistoryError with the parse error."""
        if self.hand is None:
            raise HandHistoryError(str(self.error))
        return self.hand


@dataclass
class _Header:
    id: str
    tournament_id: str | None
    stakes: str
    date: datetime


@dataclass
class _Summary:
    total_pot: float | None = None
    rake: float | None = None
    main_pot: float | None = None
    side_pots: list[tuple[int, float]] = field(default_factory=list)


@dataclass
class _HandAssembly:
    """Mutable state for one parse call. Never shared between calls."""

    cursor: LineCursor
    config: ParserConfig
    tracker: PlayerStateTrackerProtocol
    action_parser: ActionParserProtocol
    pot_calculator: PotCalculatorProtocol
    validator: HandHistoryValidatorProtocol

    players: list[Player] = field(default_factory=list)
    actions: list[Action] = field(default_factory=list)
    board: list[Card] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    street_commits: dict[str, float] = field(default_factory=dict)
    hole_cards: dict[str, tuple[Card, Card]] = field(default_factory=dict)
    shown_cards: dict[str, tuple[Card, Card]] = field(default_factory=dict)

    def assemble(self) -> PokerHand:
        header = self._parse_header()
        table = self._parse_table()
        self._parse_players()
        self._parse_blinds_and_antes()
        self._parse_hole_cards()
        self._parse_street(Street.PREFLOP)

        if self._parse_board(Street.FLOP, "*** FLOP ***", 3, expected_board=0):
            self._parse_street(Street.FLOP)
        if self._parse_board(Street.TURN, "*** TURN ***", 1, expected_board=3):
            self._parse_street(Street.TURN)
        if self._parse_board(Street.RIVER, "*** RIVER ***", 1, expected_board=4):
            self._parse_street(Street.RIVER)

        self._parse_showdown()
        summary = self._parse_summary()
        collected = self.action_parser.extract_collected_actions(self.cursor.lines)
        self._add_summary_collections(collected)
        pots = self._resolve_pots(summary, collected)

        hand = PokerHand(
            id=header.id,
            tournament_id=header.tournament_id,
            stakes=header.stakes,
            date=header.date,
            table=table,
            players=tuple(self._final_players()),
            actions=tuple(self.actions),
            board=tuple(self.board),
            pots=tuple(pots),
            rake=summary.rake,
            total_pot=summary.total_pot,
            warnings=tuple(self.warnings),
        )
        return self._validate(hand)

    # -- sections -----------------------------------------------------

    def _parse_header(self) -> _Header:
        line = self.cursor.current_line()
        hand_id = RE_HAND_ID.search(line)
        if not hand_id:
            raise InvalidHeaderError("Invalid header: Hand ID not found")
        date_match = RE_DATE.search(line)
        if not date_match:
            raise InvalidHeaderError("Invalid header: Date not found or in an invalid format")
        try:
            date = datetime(*(int(part) for part in date_match.groups()))
        except ValueError:
            raise InvalidHeaderError(f"Invalid header: bad date {date_match.group(0)!r}") from None

        # Only look for stakes before the date so '2023/01' isn't mistaken for blinds.
        stakes_match = RE_STAKES.search(line, 0, date_match.start())
        if stakes_match:
            symbol, small, big = stakes_match.groups()
            stakes = f"{symbol}{small}/{symbol}{big}"
        else:
            stakes = "Unknown"

        tournament = RE_TOURNAMENT.search(line)
        logger.debug("Header: hand %s, stakes %s", hand_id.group(1), stakes)
        self.cursor.advance()
        return _Header(
            id=hand_id.group(1),
            tournament_id=tournament.group(1) if tournament else None,
            stakes=stakes,
            date=date,
        )

    def _parse_table(self) -> TableInfo:
        line = self.cursor.current_line()
        name = RE_TABLE.search(line)
        if not name:
            raise InvalidTableError("Invalid table info")
        max_seats = RE_MAX_SEATS.search(line)
        button = RE_BUTTON.search(line)
        self.cursor.advance()
        return TableInfo(
            name=name.group(1),
            max_seats=int(max_seats.group(1)) if max_seats else 9,
            button_seat=int(button.group(1)) if button else 1,
        )

    def _parse_players(self) -> None:
        while self.cursor.has_more() and self.cursor.current_line().startswith("Seat "):
            line = self.cursor.current_line()
            match = RE_SEAT.match(line)
            if not match:
                raise StructuralError(f"Malformed seat line: {line}")
            seat, name, chips = int(match.group(1)), match.group(2).strip(), parse_amount(match.group(3))
            self.tracker.initialize_player(name, chips)
            self.players.append(Player(seat=seat, name=name, chips=chips))
            self.cursor.advance()

        if not self.players:
            raise MissingPlayersError("No seated players found")
        self.players.sort(key=lambda p: p.seat)
        logger.debug("Seated %d players", len(self.players))

    def _parse_blinds_and_antes(self) -> None:
        while self.cursor.has_more():
            line = self.cursor.current_line()
            if line.startswith("***"):
                return
            action = self.action_parser.parse_action(line, Street.PREFLOP)
            if action is None:
                logger.debug("Skipping pre-deal line %r", line)
            else:
                if action.type not in _PRE_DEAL_TYPES:
                    logger.debug("%s before the hole cards marker", action.type.value)
                self._record(action)
            self.cursor.advance()

    def _parse_hole_cards(self) -> None:
        if self.cursor.peek() != "*** HOLE CARDS ***":
            return
        self.cursor.advance()
        while self.cursor.has_more() and self.cursor.current_line().startswith("Dealt to"):
            match = RE_DEALT.match(self.cursor.current_line())
            if match:
                cards = parse_cards(match.group(2))
                if len(cards) == 2:
                    self.hole_cards[match.group(1).strip()] = (cards[0], cards[1])
                else:
                    logger.debug("Ignoring %d-card holding for %s", len(cards), match.group(1))
            self.cursor.advance()

    def _parse_street(self, street: Street) -> None:
        while self.cursor.has_more():
            line = self.cursor.current_line()
            if line.startswith("***"):
                return
            action = self.action_parser.parse_action(line, street)
            if action is None:
                logger.debug("Skipping non-action line %r", line)
            else:
                self._record(action)
            self.cursor.advance()

    def _parse_board(self, street: Street, marker: str, new_cards: int, expected_board: int) -> bool:
        line = self.cursor.peek()
        if line is None or not line.startswith(marker):
            return False
        if len(self.board) != expected_board:
            raise StructuralError(f"{street.value} dealt with {len(self.board)} board cards")

        groups = RE_BRACKETS.findall(line)
        if not groups:
            raise StructuralError(f"No cards on {street.value} line")
        cards = parse_cards(groups[-1])
        if len(cards) != new_cards:
            raise StructuralError(f"Expected {new_cards} {street.value} card(s), got {len(cards)}")

        self.board.extend(cards)
        self.street_commits = {}
        self.actions.append(self.action_parser.create_action(ActionType.DEAL, None, None, street, cards=cards))
        logger.debug("%s: %s", street.value, " ".join(str(c) for c in self.board))
        self.cursor.advance()
        return True

    def _parse_showdown(self) -> None:
        if self.cursor.peek() != "*** SHOW DOWN ***":
            return
        self.cursor.advance()
        self.street_commits = {}
        self._parse_street(Street.SHOWDOWN)

    def _parse_summary(self) -> _Summary:
        summary = _Summary()
        while self.cursor.has_more() and self.cursor.current_line() != "*** SUMMARY ***":
            self.cursor.advance()
        if not self.cursor.has_more():
            self.warnings.append("No summary section")
            logger.warning("Hand has no summary section")
            return summary
        summary_start = self.cursor.line_number
        self.cursor.advance()

        while self.cursor.has_more():
            line = self.cursor.current_line()
            total = RE_TOTAL_POT.match(line)
            if total:
                summary.total_pot = parse_amount(total.group(1))
                main = RE_MAIN_POT.search(line)
                if main:
                    summary.main_pot = parse_amount(main.group(1))
                    for index, (level, amount) in enumerate(RE_SIDE_POT.findall(line), start=1):
                        summary.side_pots.append((int(level) if level else index, parse_amount(amount)))
                rake = RE_RAKE.search(line)
                if rake:
                    summary.rake = parse_amount(rake.group(1))
                break
            self.cursor.advance()

        if summary.total_pot is not None and summary.rake is None:
            summary.rake = self._scan_rake(summary_start)
        return summary

    def _scan_rake(self, start: int) -> float | None:
        """Re-scan the summary for a rake stated on its own line."""
        position = self.cursor.line_number
        self.cursor.seek(start)
        try:
            while self.cursor.has_more():
                match = RE_RAKE_LINE.match(self.cursor.current_line())
                if match:
                    return parse_amount(match.group(1))
                self.cursor.advance()
            return None
        finally:
            self.cursor.seek(position)

    # -- chip accounting ----------------------------------------------

    def _record(self, action: Action) -> None:
        self.actions.append(action)
        name = action.player
        if name is None or name not in {p.name for p in self.players}:
            # Unknown names are reported by the validator.
            return

        if action.type is ActionType.FOLD:
            self.tracker.remove_active_player(name)
        elif action.type is ActionType.RAISE:
            already = self.street_commits.get(name, 0.0)
            self._pay(name, action.amount - already)
            self.street_commits[name] = action.amount
        elif action.type is ActionType.ANTE:
            self._pay(name, action.amount)
        elif action.type.is_wager:
            self._pay(name, action.amount)
            self.street_commits[name] = self.street_commits.get(name, 0.0) + action.amount
        elif action.type is ActionType.UNCALLED:
            self.tracker.track_player_chips(name, self.tracker.get_player_chips(name) + action.amount)
            self.tracker.return_contribution(name, action.amount)
            self.street_commits[name] = max(0.0, self.street_commits.get(name, 0.0) - action.amount)
        elif action.type is ActionType.COLLECTED:
            self.tracker.track_player_chips(name, self.tracker.get_player_chips(name) + action.amount)
        elif action.type is ActionType.SHOW and len(action.cards) == 2:
            self.shown_cards[name] = (action.cards[0], action.cards[1])

        if action.is_all_in and action.type.is_wager:
            self.tracker.mark_player_all_in(name, self.tracker.get_contributions()[name])

    def _pay(self, name: str, amount: float) -> None:
        before = self.tracker.get_player_chips(name)
        after = round(before - amount, 2)
        if after < 0 and self.config.strict_chips:
            raise ChipUnderflowError(f"{name} would have {after:g} chips after putting in {amount:g}")
        self.tracker.track_player_chips(name, after)
        self.tracker.add_contribution(name, amount)

    # -- pots ---------------------------------------------------------

    def _add_summary_collections(self, collected: list[CollectedAction]) -> None:
        seen = {
            (a.player, a.amount) for a in self.actions if a.type is ActionType.COLLECTED
        }
        for item in collected:
            if (item.player, item.amount) in seen:
                continue
            seen.add((item.player, item.amount))
            self._record(
                self.action_parser.create_action(
                    ActionType.COLLECTED, item.player, item.amount, Street.SHOWDOWN
                )
            )

    def _resolve_pots(self, summary: _Summary, collected: list[CollectedAction]) -> list[Pot]:
        contributions = self.tracker.get_contributions()
        active = self.tracker.get_active_players()
        all_in = self.tracker.get_all_in_players()
        tolerance = self.config.tolerance

        pots = self.pot_calculator.calculate_pot_structure(contributions, active, all_in)
        total = summary.total_pot if summary.total_pot is not None else sum(contributions.values())
        rake = summary.rake or 0.0

        if summary.main_pot is not None:
            declared = [summary.main_pot] + [amount for _, amount in summary.side_pots]
            if len(declared) == len(pots):
                pots = [replace(pot, amount=amount) for pot, amount in zip(pots, declared)]
            else:
                logger.debug("Declared %d pots, computed %d", len(declared), len(pots))
                pots = [
                    Pot(
                        amount=amount,
                        is_side=level > 0,
                        side_pot_level=level,
                        eligible_players=tuple(
                            self.pot_calculator.get_eligible_players(level, all_in, active)
                        ),
                    )
                    for level, amount in enumerate(declared)
                ]

        # Pots are reported before rake; the house takes it from the main pot.
        if rake and pots and abs(sum(p.amount for p in pots) - total) <= tolerance:
            pots[0] = replace(pots[0], amount=round(pots[0].amount - rake, 2))

        try:
            self.pot_calculator.validate_pot_math(pots, total, rake, tolerance)
        except PotMathError as e:
            if self.config.strict_pot_math:
                raise
            logger.warning("%s", e)
            self.warnings.append(str(e))
            pots = [
                Pot(
                    amount=round(total - rake, 2),
                    eligible_players=tuple(p.name for p in self.players if p.name in active),
                )
            ]

        return self.pot_calculator.enhance_pots(pots, collected)

    # -- finishing ----------------------------------------------------

    def _final_players(self) -> list[Player]:
        players = []
        for player in self.players:
            if player.name in self.hole_cards:
                player = replace(player, cards=self.hole_cards[player.name], dealt_in=True)
            elif player.name in self.shown_cards:
                player = replace(player, cards=self.shown_cards[player.name])
            players.append(player)
        return players

    def _validate(self, hand: PokerHand) -> PokerHand:
        fatal = self.validator.validate_hand_structure(hand).errors
        fatal += self.validator.validate_player_consistency(
            hand.players, hand.actions, hand.table.max_seats
        ).errors
        if fatal:
            raise ValidationError(fatal)

        pot_errors = self.validator.validate_pot_totals(
            hand.pots, hand.actions, hand.total_pot, hand.rake
        ).errors
        if pot_errors:
            if self.config.strict_pot_math:
                raise ValidationError(pot_errors)
            for message in pot_errors:
                logger.warning("Hand %s: %s", hand.id, message)
            new = [m for m in pot_errors if m not in hand.warnings]
            hand = replace(hand, warnings=hand.warnings + tuple(new))
        return hand


class HandHistoryParser:
    """Parses PokerStars-style hand histories.

    The collaborating services can be swapped for anything that satisfies
    the protocols in ``handreplay.interfaces``. The tracker and the action
    parser hold per-hand state, so they are passed as factories and built
    fresh for every call; one parser can be shared between threads.
    """

    def __init__(
        self,
        pot_calculator: PotCalculatorProtocol | None = None,
        tracker_factory: Callable[[], PlayerStateTrackerProtocol] = PlayerStateTracker,
        action_parser_factory: Callable[[], ActionParserProtocol] = ActionParser,
        validator: HandHistoryValidatorProtocol | None = None,
        config: ParserConfig | None = None,
    ) -> None:
        self.config = config or ParserConfig()
        self.pot_calculator = pot_calculator or PotCalculator()
        self.tracker_factory = tracker_factory
        self.action_parser_factory = action_parser_factory
        self.validator = validator or HandHistoryValidator(tolerance=self.config.tolerance)

    def parse(self, hand_history: str) -> ParseResult:
        """Parse one hand. Returns a ParseResult holding a hand or an error."""
        if not hand_history or not hand_history.strip():
            return ParseResult(error=ParseError(message="Empty hand history", line=0))

        cursor = LineCursor.from_text(hand_history)
        assembly = _HandAssembly(
            cursor=cursor,
            config=self.config,
            tracker=self.tracker_factory(),
            action_parser=self.action_parser_factory(),
            pot_calculator=self.pot_calculator,
            validator=self.validator,
        )

        try:
            hand = assembly.assemble()
        except ValidationError as e:
            # Raised after the whole text was read; no single line is at fault.
            logger.debug("Hand failed validation: %s", e)
            return ParseResult(error=ParseError(message=str(e), line=cursor.line_number))
        except HandHistoryError as e:
            logger.debug("Parse failed at line %d: %s", cursor.line_number, e)
            return self._failure(str(e), cursor)
        except Exception:
            logger.exception("Unexpected error while parsing hand history")
            return self._failure("Unknown parsing error", cursor)

        return ParseResult(hand=hand)

    @staticmethod
    def _failure(message: str, cursor: LineCursor) -> ParseResult:
        return ParseResult(
            error=ParseError(message=message, line=cursor.line_number, context=cursor.peek())
        )


def parse(hand_history: str, config: ParserConfig | None = None) -> ParseResult:
    """Parse a hand history with a fresh parser and default services."""
    return HandHistoryParser(config=config).parse(hand_history)
