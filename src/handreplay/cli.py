"""Command line front-end: inspect parsed hand histories."""

import json
import logging
from dataclasses import replace
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from .action import ActionType, Street
from .analysis import ActionFilter, action_stats, filter_actions, player_stats, search_actions
from .card import Card, Suit
from .config import get_config
from .formats import ParserRegistry, detect_format
from .hand import PokerHand
from .parser import HandHistoryParser, ParseResult
from .position import assign_positions

app = typer.Typer(help="Parse and inspect poker hand histories")
console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
):
    """Configure logging for every command."""
    level = "DEBUG" if verbose else get_config().logging.level
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def format_card(c: Card) -> str:
    """Format a card with color based on suit."""
    if c.suit in (Suit.HEARTS, Suit.DIAMONDS):
        return f"[red]{c.pretty}[/red]"
    return f"[white]{c.pretty}[/white]"


def format_cards(cards) -> str:
    """Format multiple cards."""
    return " ".join(format_card(c) for c in cards)


def _parse_file(path: Path, strict: bool) -> PokerHand:
    """Read and parse a hand history, exiting with code 1 on failure."""
    config = get_config().parser
    if strict:
        config = replace(config, strict_pot_math=True)
    try:
        text = path.read_text(encoding="utf-8-sig")
    except OSError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    result: ParseResult = HandHistoryParser(config=config).parse(text)
    if not result.ok:
        error = result.error
        console.print(f"[red]Error: {error.message}[/red] (line {error.line})")
        if error.context:
            console.print(f"[dim]{error.context}[/dim]")
        raise typer.Exit(1)
    return result.hand


@app.command()
def show(
    path: Path = typer.Argument(..., help="Hand history text file"),
    strict: bool = typer.Option(False, "--strict", help="Fail on pot math mismatches"),
):
    """Print a parsed hand: seats, actions, board and pots."""
    hand = assign_positions(_parse_file(path, strict))

    title = f"Hand #{hand.id}"
    if hand.tournament_id:
        title += f"  Tournament #{hand.tournament_id}"
    console.print(
        Panel(
            f"{hand.stakes}  {hand.date:%Y-%m-%d %H:%M:%S}\n"
            f"Table '{hand.table.name}' {hand.table.max_seats}-max, button seat {hand.table.button_seat}",
            title=title,
        )
    )

    seats = Table(title="Seats")
    seats.add_column("Seat", justify="right")
    seats.add_column("Player", style="cyan")
    seats.add_column("Pos")
    seats.add_column("Chips", justify="right")
    seats.add_column("Cards")
    for p in hand.players:
        name = f"[bold]{p.name}[/bold]" if p.is_hero else p.name
        seats.add_row(str(p.seat), name, p.position or "", f"{p.chips:,g}", format_cards(p.cards or ()))
    console.print(seats)

    actions = Table(title="Actions")
    actions.add_column("#", justify="right")
    actions.add_column("Street")
    actions.add_column("Player", style="cyan")
    actions.add_column("Action")
    actions.add_column("Amount", justify="right")
    for a in hand.actions:
        what = a.type.value
        if a.cards:
            what += " " + format_cards(a.cards)
        if a.is_all_in:
            what += " [yellow](all-in)[/yellow]"
        if a.reason:
            what += f" [dim]({a.reason})[/dim]"
        amount = "" if a.amount is None else f"{a.amount:,g}"
        player = a.player or ("[dim]dealer[/dim]" if a.type is ActionType.DEAL else "")
        actions.add_row(str(a.index), a.street.value, player, what, amount)
    console.print(actions)

    if hand.board:
        console.print(f"[bold]Board:[/bold] {format_cards(hand.board)}")

    pots = Table(title="Pots")
    pots.add_column("Pot")
    pots.add_column("Amount", justify="right")
    pots.add_column("Eligible")
    pots.add_column("Winners", style="green")
    for pot in hand.pots:
        label = f"Side pot {pot.side_pot_level}" if pot.is_side else "Main pot"
        pots.add_row(label, f"{pot.amount:,g}", ", ".join(pot.eligible_players), ", ".join(pot.winners))
    console.print(pots)

    if hand.rake is not None:
        console.print(f"[bold]Rake:[/bold] {hand.rake:,g}")
    for warning in hand.warnings:
        console.print(f"[yellow]Warning: {warning}[/yellow]")


@app.command("json")
def dump_json(
    path: Path = typer.Argument(..., help="Hand history text file"),
    strict: bool = typer.Option(False, "--strict", help="Fail on pot math mismatches"),
    indent: int = typer.Option(2, "--indent", "-i", help="JSON indentation"),
):
    """Dump a parsed hand as JSON."""
    hand = _parse_file(path, strict)
    typer.echo(json.dumps(hand.to_dict(), indent=indent))


@app.command()
def stats(
    path: Path = typer.Argument(..., help="Hand history text file"),
    strict: bool = typer.Option(False, "--strict", help="Fail on pot math mismatches"),
    street: Street | None = typer.Option(None, "--street", "-s", help="Only count actions on this street"),
    search: str | None = typer.Option(None, "--search", help="List the actions matching a query"),
):
    """Print action counts and per-player stats for a hand."""
    hand = _parse_file(path, strict)
    actions = filter_actions(hand.actions, ActionFilter(street=street))

    summary = action_stats(actions)
    counts = Table(title="Action counts")
    counts.add_column("Type")
    counts.add_column("Count", justify="right")
    for type_, count in summary.by_type.most_common():
        counts.add_row(type_.value, str(count))
    console.print(counts)
    console.print(
        f"[bold]Actions:[/bold] {summary.total_actions}  "
        f"[bold]Chips moved:[/bold] {summary.total_amount:,.2f}  "
        f"[bold]Average:[/bold] {summary.average_amount:,.2f}"
    )

    players = Table(title="Players")
    players.add_column("Player", style="cyan")
    players.add_column("Actions", justify="right")
    players.add_column("Agg", justify="right")
    players.add_column("Pass", justify="right")
    players.add_column("Aggression", justify="right")
    players.add_column("VPIP")
    players.add_column("PFR")
    players.add_column("Won", justify="right", style="green")
    for p in hand.players:
        ps = player_stats(actions, p.name)
        players.add_row(
            p.name,
            str(ps.total_actions),
            str(ps.aggressive_actions),
            str(ps.passive_actions),
            f"{ps.aggression:.0%}",
            "yes" if ps.vpip else "no",
            "yes" if ps.pfr else "no",
            f"{ps.winnings:,g}",
        )
    console.print(players)

    if search is not None:
        matches = search_actions(actions, search)
        console.print(f"[bold]{len(matches)} action(s) matching {search!r}[/bold]")
        for a in matches:
            amount = "" if a.amount is None else f" {a.amount:,g}"
            console.print(f"  #{a.index} {a.street.value} {a.player or 'dealer'} {a.type.value}{amount}")


@app.command()
def detect(path: Path = typer.Argument(..., help="Hand history text file")):
    """Print which poker room the hand history looks like."""
    text = path.read_text(encoding="utf-8-sig")
    fmt = detect_format(text)
    supported = fmt in ParserRegistry().supported_formats()
    status = "[green]supported[/green]" if supported else "[yellow]parsed as PokerStars[/yellow]"
    console.print(f"{fmt.value} ({status})")


if __name__ == "__main__":
    app()
