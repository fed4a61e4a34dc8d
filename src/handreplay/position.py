"""Table positions derived from seats and the button."""

from __future__ import annotations

from dataclasses import replace
from enum import IntEnum

from .hand import PokerHand


class Position(IntEnum):
    """Player positions, ordered by preflop action.

    UTG acts first preflop; BB acts last. The value is the seat's
    distance from UTG at a full table.
    """

    UTG = 0
    UTG_1 = 1
    MP = 2
    HJ = 3
    CO = 4
    BTN = 5
    SB = 6
    BB = 7

    @property
    def short(self) -> str:
        """Short abbreviation (e.g. 'UTG', 'BTN')."""
        return "UTG+1" if self is Position.UTG_1 else self.name


def position_from_utg_distance(utg_distance: int, total_players: int) -> Position:
    """Map a seat's distance from UTG to a named Position.

    Works backward from the blinds: the last seat is always BB,
    then SB, BTN, CO and HJ. Remaining early seats compress into
    UTG / UTG+1 / MP. Heads-up the button is the small blind.
    """
    if utg_distance < 0 or utg_distance >= total_players:
        raise ValueError(f"utg_distance must be 0..{total_players - 1}, got {utg_distance}")

    from_end = total_players - 1 - utg_distance
    by_distance_from_end = [Position.BB, Position.SB, Position.BTN, Position.CO, Position.HJ]
    if from_end < len(by_distance_from_end):
        return by_distance_from_end[from_end]
    return [Position.UTG, Position.UTG_1][utg_distance] if utg_distance < 2 else Position.MP


def seat_positions(seats: list[int], button_seat: int) -> dict[int, Position]:
    """Assign a Position to every occupied seat.

    Seats are taken clockwise from the one after the button. If the
    button seat is empty, the next occupied seat counter-clockwise holds it.
    """
    if not seats:
        return {}
    ordered = sorted(seats)
    if len(ordered) == 1:
        return {ordered[0]: Position.BTN}

    at_or_before = [s for s in ordered if s <= button_seat]
    button = at_or_before[-1] if at_or_before else ordered[-1]
    start = ordered.index(button)
    clockwise = ordered[start + 1 :] + ordered[: start + 1]  # SB first, button last

    if len(ordered) == 2:
        # Heads-up: button posts the small blind.
        return {button: Position.SB, clockwise[0]: Position.BB}

    # Preflop order starts after the big blind and ends with it.
    preflop = clockwise[2:] + clockwise[:2]
    return {
        seat: position_from_utg_distance(distance, len(preflop))
        for distance, seat in enumerate(preflop)
    }


def assign_positions(hand: PokerHand) -> PokerHand:
    """Return a copy of ``hand`` with each player's position label filled in."""
    positions = seat_positions([p.seat for p in hand.players], hand.table.button_seat)
    players = tuple(replace(p, position=positions[p.seat].short) for p in hand.players)
    return replace(hand, players=players)
