"""handreplay - Parse poker hand histories into replayable hand records."""

__version__ = "0.1.0"

from .action import Action, ActionType, CollectedAction, PotKind, Street
from .action_parser import ActionParser, parse_amount
from .analysis import ActionFilter, action_stats, filter_actions, player_stats, search_actions
from .card import Card, Rank, Suit, card, parse_cards
from .config import Config, ParserConfig, get_config
from .cursor import LineCursor
from .errors import HandHistoryError, ParseError
from .formats import HandHistoryFormat, ParserRegistry, detect_format
from .hand import PokerHand, TableInfo
from .parser import HandHistoryParser, ParseResult, parse
from .player import Player, PlayerStateTracker
from .position import Position, assign_positions
from .pot import Pot, PotCalculator
from .validator import HandHistoryValidator, ValidationResult

__all__ = [
    "Action",
    "ActionFilter",
    "ActionParser",
    "ActionType",
    "Card",
    "CollectedAction",
    "Config",
    "HandHistoryError",
    "HandHistoryFormat",
    "HandHistoryParser",
    "HandHistoryValidator",
    "LineCursor",
    "ParseError",
    "ParseResult",
    "ParserConfig",
    "ParserRegistry",
    "Player",
    "PlayerStateTracker",
    "PokerHand",
    "Position",
    "Pot",
    "PotCalculator",
    "PotKind",
    "Rank",
    "Street",
    "Suit",
    "TableInfo",
    "ValidationResult",
    "action_stats",
    "assign_positions",
    "card",
    "detect_format",
    "filter_actions",
    "get_config",
    "parse",
    "parse_amount",
    "parse_cards",
    "player_stats",
    "search_actions",
]
