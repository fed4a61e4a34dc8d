"""Hand-history format detection and a registry of parsers per format."""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import Enum

from .errors import UnsupportedFormatError
from .parser import HandHistoryParser, ParseResult

logger = logging.getLogger(__name__)


class HandHistoryFormat(Enum):
    """Poker rooms whose hand histories can be recognised."""

    POKERSTARS = "pokerstars"
    PARTYPOKER = "partypoker"
    EIGHT88POKER = "888poker"
    WINAMAX = "winamax"
    GENERIC = "generic"


def detect_format(hand_history: str) -> HandHistoryFormat:
    """Guess the poker room from marker text in the hand history."""
    if "PokerStars Hand #" in hand_history:
        return HandHistoryFormat.POKERSTARS
    if "***** PartyPoker Hand History" in hand_history:
        return HandHistoryFormat.PARTYPOKER
    if "Game #" in hand_history and "888poker" in hand_history:
        return HandHistoryFormat.EIGHT88POKER
    if "Winamax Poker" in hand_history:
        return HandHistoryFormat.WINAMAX
    return HandHistoryFormat.GENERIC


ParserFactory = Callable[[], HandHistoryParser]


class ParserRegistry:
    """Maps formats to parser factories.

    PokerStars is registered by default and also handles generic text,
    since most rooms copy its layout.
    """

    def __init__(self, fallback: HandHistoryFormat | None = HandHistoryFormat.POKERSTARS) -> None:
        self._factories: dict[HandHistoryFormat, ParserFactory] = {}
        self.fallback = fallback
        self.register(HandHistoryFormat.POKERSTARS, HandHistoryParser)

    def register(self, fmt: HandHistoryFormat, factory: ParserFactory) -> None:
        self._factories[fmt] = factory

    def supported_formats(self) -> list[HandHistoryFormat]:
        return list(self._factories)

    def create(self, fmt: HandHistoryFormat) -> HandHistoryParser:
        """Build a fresh parser for ``fmt``."""
        factory = self._factories.get(fmt)
        if factory is None:
            raise UnsupportedFormatError(f"Unsupported format: {fmt.value}")
        return factory()

    def parse(self, hand_history: str) -> ParseResult:
        """Detect the format and parse with a fresh parser for it."""
        fmt = detect_format(hand_history)
        if fmt not in self._factories and fmt is HandHistoryFormat.GENERIC and self.fallback:
            logger.debug("Unknown format, falling back to %s", self.fallback.value)
            fmt = self.fallback
        return self.create(fmt).parse(hand_history)
