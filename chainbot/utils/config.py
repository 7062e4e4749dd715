"""
Configuration Management

This module handles all application configuration using environment variables.
Chain game defaults live here too so every new game starts from the same
settings unless the /chain command overrides them.
"""

import os
from functools import lru_cache
from typing import List
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def _clean(value: str) -> str:
    """Strip trailing comments and whitespace from an environment value."""
    return value.split('#')[0].strip()


def _get_int(name: str, default: str) -> int:
    raw = os.getenv(name, default)
    try:
        return int(_clean(raw))
    except ValueError as e:
        raise ValueError(f"Invalid {name} value: '{raw}'. Must be a number without comments.") from e


def _get_float(name: str, default: str) -> float:
    raw = os.getenv(name, default)
    try:
        return float(_clean(raw))
    except ValueError as e:
        raise ValueError(f"Invalid {name} value: '{raw}'. Must be a number of seconds.") from e


def _get_bool(name: str, default: str) -> bool:
    return _clean(os.getenv(name, default)).lower() in ("1", "true", "yes", "on")


class Settings:
    """
    Application settings loaded from environment variables.
    
    All settings have sensible defaults for development.
    """
    
    def __init__(self):
        # Telegram Bot Configuration
        self.telegram_bot_token: str = os.getenv('TELEGRAM_BOT_TOKEN', '')
        
        # Application Settings
        self.debug: bool = _get_bool('DEBUG', 'false')
        self.log_level: str = os.getenv('LOG_LEVEL', 'INFO')
        self.environment: str = os.getenv('ENVIRONMENT', 'development')
        
        # Chain game defaults (times are in seconds)
        self.chain_mascot: str = os.getenv('CHAIN_MASCOT', 'Unown')
        self.chain_round_time: float = _get_float('CHAIN_ROUND_TIME', '7')
        self.chain_min_round_time: float = _get_float('CHAIN_MIN_ROUND_TIME', '3')
        self.chain_round_time_decay: float = _get_float('CHAIN_ROUND_TIME_DECAY', '0.5')
        self.chain_max_sweeps: int = _get_int('CHAIN_MAX_SWEEPS', '20')
        self.chain_points: int = _get_int('CHAIN_POINTS', '5')
        self.chain_link_length: int = _get_int('CHAIN_LINK_LENGTH', '1')
        self.chain_reverse_links: bool = _get_bool('CHAIN_REVERSE_LINKS', 'false')
        self.chain_accept_formes: bool = _get_bool('CHAIN_ACCEPT_FORMES', 'false')
        self.chain_max_players: int = _get_int('CHAIN_MAX_PLAYERS', '20')
        
        if self.chain_link_length < 1:
            raise ValueError(f"Invalid CHAIN_LINK_LENGTH value: {self.chain_link_length}. Must be at least 1.")
        if self.chain_min_round_time > self.chain_round_time:
            raise ValueError("CHAIN_MIN_ROUND_TIME cannot be larger than CHAIN_ROUND_TIME.")
        
        # Security Settings
        admin_ids_str = os.getenv('ADMIN_USER_IDS', '')
        self.admin_user_ids: List[int] = []
        if admin_ids_str:
            try:
                self.admin_user_ids = [int(x.strip()) for x in admin_ids_str.split(',') if x.strip()]
            except ValueError:
                self.admin_user_ids = []


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings with caching.
    
    Uses LRU cache to avoid reloading settings on every call.
    Cache is cleared when the process restarts.
    
    Returns:
        Settings: Application configuration settings
    """
    return Settings()


def is_admin_user(user_id: int) -> bool:
    """
    Check if a user ID is in the admin list.
    
    Args:
        user_id: Telegram user ID to check
        
    Returns:
        bool: True if user is admin, False otherwise
    """
    settings = get_settings()
    return user_id in settings.admin_user_ids


def is_development() -> bool:
    """
    Check if running in development environment.
    
    Returns:
        bool: True if in development, False otherwise
    """
    settings = get_settings()
    return settings.environment.lower() in ["development", "dev", "local"]
