"""
Chain Game States and Options

Defines the play modes, the named phases of the round scheduler and the
per-game options.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional

from .errors import ConfigurationError
from .link_sources import DEFAULT_SOURCE, find_link_source
from ..utils.config import Settings, get_settings


class ChainMode(Enum):
    """How players take part in a chain game."""
    FREEJOIN = "freejoin"
    ELIMINATION = "elimination"


class ChainPhase(Enum):
    """Phases of the chain round scheduler."""
    SIGNUPS = "signups"
    # Free-join
    AWAITING_GUESS = "awaiting_guess"
    SCORING = "scoring"
    # Elimination
    SWEEP_START = "sweep_start"
    TURN_START = "turn_start"
    AWAITING_TURN_GUESS = "awaiting_turn_guess"
    ENDED = "ended"


# Delays between announcements, in seconds
FREEJOIN_START_DELAY = 5
NEXT_ROUND_DELAY = 5
SWEEP_INTRO_DELAY = 5

# Bits awarded at the end of a game
ELIMINATION_WINNER_BITS = 500
FREEJOIN_BITS_PER_POINT = 50


@dataclass
class ChainOptions:
    """Options of a single chain game."""
    mode: ChainMode = ChainMode.ELIMINATION
    variant: str = DEFAULT_SOURCE
    mascot: str = "Unown"
    points: int = 5
    link_length: int = 1
    reverse_links: bool = False
    accepts_formes: bool = False
    letter_based: bool = True
    round_time: float = 7.0
    min_round_time: float = 3.0
    round_time_decay: float = 0.5
    max_sweeps: int = 20
    max_players: int = 20

    @property
    def freejoin(self) -> bool:
        return self.mode == ChainMode.FREEJOIN

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None, **overrides) -> "ChainOptions":
        """Build options from the application settings, then apply overrides."""
        settings = settings or get_settings()
        options = cls(
            mascot=settings.chain_mascot,
            points=settings.chain_points,
            link_length=settings.chain_link_length,
            reverse_links=settings.chain_reverse_links,
            accepts_formes=settings.chain_accept_formes,
            round_time=settings.chain_round_time,
            min_round_time=settings.chain_min_round_time,
            round_time_decay=settings.chain_round_time_decay,
            max_sweeps=settings.chain_max_sweeps,
            max_players=settings.chain_max_players,
        )
        for key, value in overrides.items():
            setattr(options, key, value)
        return options

    def apply_args(self, args: Iterable[str]) -> "ChainOptions":
        """
        Apply /chain command arguments.

        Accepted words: ``freejoin``/``fj``, ``elimination``, ``reverse``,
        ``formes``, ``points=N`` and a variant name (``moves``, ``items``...).

        Raises:
            ConfigurationError: On an unknown argument or an invalid value
        """
        for arg in args:
            word = arg.strip().lower()
            if not word:
                continue
            if word in ("freejoin", "fj"):
                self.mode = ChainMode.FREEJOIN
            elif word in ("elimination", "elim"):
                self.mode = ChainMode.ELIMINATION
            elif word == "reverse":
                self.reverse_links = True
            elif word == "formes":
                self.accepts_formes = True
            elif word.startswith("points="):
                try:
                    self.points = int(word.split("=", 1)[1])
                except ValueError as e:
                    raise ConfigurationError(f"Invalid points value: '{arg}'.") from e
                if self.points < 1:
                    raise ConfigurationError("The points goal must be at least 1.")
            elif find_link_source(word) is not None:
                self.variant = find_link_source(word).name
            else:
                raise ConfigurationError(f"Game variation '{arg}' has no pool.")
        return self
