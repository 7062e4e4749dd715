"""
Logging Configuration

Console logging for the chain bot, plus one-line key=value records for
player commands and game events so a game can be followed through the log.
"""

import logging
import sys
from typing import Any, Dict, Optional

from .config import get_settings

USER_ACTIONS_LOGGER = "chainbot.users"
GAME_EVENTS_LOGGER = "chainbot.games"

# Events that open or close a game are logged at INFO, the rest at DEBUG
LIFECYCLE_EVENTS = frozenset({"chain_created", "chain_started", "chain_ended", "chain_stopped"})


def setup_logging(level: Optional[str] = None) -> None:
    """
    Configure console logging.

    Args:
        level: Level name overriding LOG_LEVEL. DEBUG=true forces DEBUG.
    """
    settings = get_settings()
    level_name = "DEBUG" if settings.debug else (level or settings.log_level)

    logging.basicConfig(
        level=getattr(logging, level_name.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    # Polling makes a request every few seconds
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("telegram").setLevel(logging.WARNING)

    logging.getLogger(__name__).info(f"Logging initialized at {level_name.upper()}")


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def _format_fields(fields: Dict[str, Any]) -> str:
    parts = []
    for key, value in fields.items():
        if value is None:
            continue
        if isinstance(value, (list, tuple, set)):
            value = ",".join(str(item) for item in value) or "-"
        parts.append(f"{key}={value}")
    return " ".join(parts)


def log_user_action(user_id: int, action: str, chat_id: Optional[int] = None, **kwargs) -> None:
    """Record a player command, e.g. ``user=42 chat=-100 action=chain_guess accepted=True``."""
    fields = {"user": user_id, "chat": chat_id, "action": action, **kwargs}
    get_logger(USER_ACTIONS_LOGGER).debug(_format_fields(fields))


def log_game_event(game_id: str, event_type: str, chat_id: Optional[int] = None, **kwargs) -> None:
    """
    Record a game event.

    Args:
        game_id: Short id of the game
        event_type: Event name such as ``chain_round`` or ``chain_substitution``
        chat_id: Chat the game runs in, when known
        **kwargs: Event data; list values are comma-joined
    """
    fields = {"game": game_id, "chat": chat_id, "event": event_type, **kwargs}
    level = logging.INFO if event_type in LIFECYCLE_EVENTS else logging.DEBUG
    get_logger(GAME_EVENTS_LOGGER).log(level, _format_fields(fields))
