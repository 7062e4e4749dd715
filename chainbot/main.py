"""
Chain Bot Main Application

This is the main entry point for the Chain Telegram bot.
It sets up handlers and starts the bot.
"""

import asyncio
import sys
from typing import Optional

from telegram import Update, BotCommand
from telegram.ext import Application, CommandHandler
from telegram.constants import ParseMode
from telegram.ext import Defaults

from .handlers.command_handlers import start_command, help_command
from .handlers.chain_handlers import (
    chain_command, join_command, start_chain_command, guess_command,
    end_chain_command, status_command
)
from .handlers.error_handlers import error_handler
from .utils.config import get_settings
from .utils.logging_config import setup_logging, get_logger

# Setup logging first
setup_logging()
logger = get_logger(__name__)


class ChainBot:
    """
    Main Chain bot application class.

    This handles the lifecycle of the bot:
    - Handler registration
    - Command menu setup
    """

    def __init__(self):
        """Initialize the bot application."""
        self.settings = get_settings()
        self.application: Optional[Application] = None

    async def setup_bot_commands(self) -> None:
        """
        Set up the bot command menu that appears when users type '/'.
        """
        if not self.application:
            raise RuntimeError("Application not initialized")

        try:
            logger.info("Setting up bot command menu...")

            commands = [
                BotCommand("start", "Welcome message and introduction"),
                BotCommand("help", "Commands and game options"),
                BotCommand("chain", "Create a Chain game (groups only)"),
                BotCommand("join", "Sign up for an elimination game"),
                BotCommand("startchain", "Start the elimination game"),
                BotCommand("g", "Continue the chain"),
                BotCommand("chainstatus", "Show the current link and players"),
                BotCommand("endchain", "End the current game"),
            ]

            await self.application.bot.set_my_commands(commands)

            bot_info = await self.application.bot.get_me()
            logger.info(f"Bot username: @{bot_info.username}")
            logger.info(f"Bot commands menu configured with {len(commands)} commands")

        except Exception as e:
            logger.error(f"Failed to set bot commands: {e}")
            # Don't raise - this is not critical for bot operation

    def setup_handlers(self) -> None:
        """
        Register all bot command handlers.
        """
        if not self.application:
            raise RuntimeError("Application not initialized")

        logger.info("Setting up bot handlers...")

        # Command handlers - these automatically handle both /command and /command@botusername
        command_handlers = [
            CommandHandler("start", start_command),
            CommandHandler("help", help_command),
            CommandHandler("chain", chain_command),
            CommandHandler("join", join_command),
            CommandHandler("startchain", start_chain_command),
            CommandHandler(["g", "guess"], guess_command),
            CommandHandler("chainstatus", status_command),
            CommandHandler("endchain", end_chain_command),
        ]

        for handler in command_handlers:
            self.application.add_handler(handler)

        self.application.add_error_handler(error_handler)

        logger.info("All handlers registered successfully")


async def main() -> None:
    """
    Main entry point for the Chain bot.

    This function creates and starts the bot application,
    handling any startup errors gracefully.
    """
    bot = ChainBot()

    if not bot.settings.telegram_bot_token:
        logger.error("TELEGRAM_BOT_TOKEN is not set")
        sys.exit(1)

    try:
        logger.info("Starting Chain Bot")

        # Global Markdown parse mode so **text** renders bold
        defaults = Defaults(parse_mode=ParseMode.MARKDOWN)
        bot.application = (
            Application.builder()
            .token(bot.settings.telegram_bot_token)
            .defaults(defaults)
            .build()
        )

        bot.setup_handlers()

        logger.info("Bot initialization complete, starting polling...")
        async with bot.application:
            await bot.setup_bot_commands()
            await bot.application.start()
            await bot.application.updater.start_polling(
                allowed_updates=Update.ALL_TYPES,
                drop_pending_updates=True
            )

            # Keep running until interrupted
            try:
                await asyncio.Event().wait()
            except (KeyboardInterrupt, SystemExit):
                logger.info("Received shutdown signal")
            finally:
                await bot.application.updater.stop()
                await bot.application.stop()

    except KeyboardInterrupt:
        logger.info("Received interrupt signal, shutting down...")
    except Exception as e:
        logger.error(f"Unexpected error in main: {e}")
        sys.exit(1)


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        print("\nBot stopped by user")
