"""
Chain Bot Package

A Telegram group bot hosting the Chain minigame:
- Command handlers for user interactions
- The link-chain round engine
- Content tables used as link candidates
- Utility functions and helpers
"""

__version__ = "1.0.0"

# Package imports for easier access
from .main import main
from .utils.config import get_settings

__all__ = ["main", "get_settings"]
