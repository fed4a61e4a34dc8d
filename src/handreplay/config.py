"""Application configuration for handreplay."""

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Self


@dataclass
class ParserConfig:
    """How strictly the parser treats numeric inconsistencies.

    strict_pot_math: Pot totals that don't balance fail the parse instead
        of being recorded as warnings on the hand.
    strict_chips: A balance that would drop below zero fails the parse
        instead of being clamped.
    tolerance: Allowed rounding difference when comparing chip totals.
    """

    strict_pot_math: bool = False
    strict_chips: bool = False
    tolerance: float = 0.01


@dataclass
class LoggingConfig:
    """Logging setup for the command line front-end."""

    level: str = "WARNING"


@dataclass
class Config:
    """Application configuration."""

    parser: ParserConfig = field(default_factory=ParserConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def load(cls) -> Self:
        """Load config from file, falling back to defaults."""
        config_paths = [
            Path.cwd() / "handreplay.toml",
            Path.cwd() / ".handreplay.toml",
            Path.home() / ".config" / "handreplay" / "config.toml",
            Path.home() / ".handreplay.toml",
        ]

        for path in config_paths:
            if path.exists():
                return cls.from_file(path)

        return cls()

    @classmethod
    def from_file(cls, path: Path) -> Self:
        """Load config from a TOML file."""
        with open(path, "rb") as f:
            data = tomllib.load(f)

        parser_data = data.get("parser", {})
        parser = ParserConfig(
            strict_pot_math=bool(parser_data.get("strict_pot_math", False)),
            strict_chips=bool(parser_data.get("strict_chips", False)),
            tolerance=float(parser_data.get("tolerance", 0.01)),
        )

        logging_data = data.get("logging", {})
        logging = LoggingConfig(level=str(logging_data.get("level", "WARNING")).upper())

        return cls(parser=parser, logging=logging)


# Global config instance (loaded lazily)
_config: Config | None = None


def get_config() -> Config:
    """Get the global config instance."""
    global _config
    if _config is None:
        _config = Config.load()
    return _config
