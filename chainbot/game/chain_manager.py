"""
Chain Game Manager

This module manages chain game sessions, one per chat. It owns the mapping
of chats to running games and supplies each game with a room that talks to
Telegram.
"""

import random
import uuid
from typing import Any, Dict, List, Optional, Tuple

from .chain_game import ChainGame
from .chain_states import ChainOptions
from .errors import ConfigurationError
from .room import AsyncioTimer, GameRoom, TimerCallback, TimerHandle
from ..utils.logging_config import get_logger, log_game_event
from ..utils.config import get_settings

# Setup logger
logger = get_logger(__name__)


class TelegramRoom(GameRoom):
    """Game room backed by a Telegram group chat."""

    def __init__(self, bot: Any, chat_id: int):
        self.bot = bot
        self.chat_id = chat_id

    async def say(self, text: str) -> None:
        try:
            await self.bot.send_message(chat_id=self.chat_id, text=text, parse_mode='Markdown')
        except Exception as e:
            # A lost announcement must not stop the game
            logger.error(f"Failed to send message to chat {self.chat_id}: {e}")

    def schedule(self, delay: float, callback: TimerCallback) -> TimerHandle:
        return AsyncioTimer(delay, callback, name=f"chain-{self.chat_id}")


class ChainManager:
    """
    Central manager for chain game sessions.

    This coordinates:
    - Creating games with per-chat options
    - Signing players up and starting elimination games
    - Routing guesses to the game of the chat
    - Cleaning up finished games
    """

    def __init__(self, rng: Optional[random.Random] = None):
        """Initialize the chain manager."""
        self.active_games: Dict[int, ChainGame] = {}  # chat_id -> game
        self.creators: Dict[int, int] = {}  # chat_id -> creator user id
        self.settings = get_settings()
        self.rng = rng
        self.bot_context = None  # Will be set by the bot handlers

    def set_bot_context(self, bot_context) -> None:
        """Store the handler context so rooms can reach the bot."""
        self.bot_context = bot_context

    def _make_room(self, chat_id: int) -> GameRoom:
        if self.bot_context is None:
            raise RuntimeError("Bot context not set")
        return TelegramRoom(self.bot_context.bot, chat_id)

    def get_game(self, chat_id: int) -> Optional[ChainGame]:
        game = self.active_games.get(chat_id)
        if game is not None and game.ended:
            self._remove(chat_id)
            return None
        return game

    async def create_game(
        self,
        chat_id: int,
        creator_user_id: int,
        args: Optional[List[str]] = None,
        room: Optional[GameRoom] = None,
    ) -> ChainGame:
        """
        Create a chain game in a chat.

        Args:
            chat_id: Telegram chat ID where the game will be played
            creator_user_id: User ID of the game creator
            args: /chain command arguments (mode, variant, options)
            room: Room to use instead of the Telegram chat

        Returns:
            ChainGame: The new game, already in signups

        Raises:
            ConfigurationError: If a game is already running or the options
                do not make a playable game
        """
        if self.get_game(chat_id) is not None:
            raise ConfigurationError("A chain game is already running in this chat.")

        options = ChainOptions.from_settings(self.settings).apply_args(args or [])
        game_id = str(uuid.uuid4())[:8]
        game = ChainGame(
            game_id,
            room or self._make_room(chat_id),
            options=options,
            rng=self.rng or random.Random(),
            on_end=self._on_game_end,
            chat_id=chat_id,
        )
        await game.on_signups()

        self.active_games[chat_id] = game
        self.creators[chat_id] = creator_user_id

        log_game_event(game_id, "chain_created", chat_id=chat_id, creator=creator_user_id,
                       mode=options.mode.value, variant=options.variant)
        logger.info(f"Chain game created - game_id: {game_id}, chat_id: {chat_id}, creator: {creator_user_id}")
        return game

    def join_game(self, chat_id: int, user_id: int, username: str) -> Tuple[bool, str]:
        """
        Sign a player up for the chat's game.

        Returns:
            Tuple: (success, message)
        """
        game = self.get_game(chat_id)
        if game is None:
            return False, "No chain game is running in this chat."
        if game.freejoin:
            return False, "This is a free-join game, just start guessing!"
        if game.started:
            return False, "The game has already started."
        if user_id in game.players:
            return False, "You are already in this game."
        if game.add_player(user_id, username) is None:
            return False, f"The game is full (maximum {game.options.max_players} players)."
        return True, f"{username} joined the game! ({len(game.players)} players)"

    async def start_game(self, chat_id: int) -> Tuple[bool, str]:
        """Start the chat's elimination game."""
        game = self.get_game(chat_id)
        if game is None:
            return False, "No chain game is running in this chat."
        if game.started:
            return False, "The game has already started."
        try:
            await game.on_start()
        except ConfigurationError as e:
            return False, str(e)
        return True, "The game has started!"

    async def submit_guess(self, chat_id: int, user_id: int, username: str, text: str) -> bool:
        """Route a guess to the chat's game."""
        game = self.get_game(chat_id)
        if game is None:
            return False
        accepted = await game.guess(user_id, username, text)
        if accepted:
            log_game_event(game.game_id, "guess_accepted", chat_id=chat_id, user_id=user_id)
        return accepted

    async def stop_game(self, chat_id: int) -> bool:
        """End the chat's game early."""
        game = self.get_game(chat_id)
        if game is None:
            return False
        await game.stop()
        self._remove(chat_id)
        return True

    def get_creator(self, chat_id: int) -> Optional[int]:
        return self.creators.get(chat_id)

    def get_game_status(self, chat_id: int) -> Optional[Dict[str, Any]]:
        game = self.get_game(chat_id)
        if game is None:
            return None
        return game.get_status()

    async def _on_game_end(self, game: ChainGame) -> None:
        for chat_id, active in list(self.active_games.items()):
            if active is game:
                self._remove(chat_id)
                logger.info(f"Chain game finished - game_id: {game.game_id}, chat_id: {chat_id}")

    def _remove(self, chat_id: int) -> None:
        self.active_games.pop(chat_id, None)
        self.creators.pop(chat_id, None)
