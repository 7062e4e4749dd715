"""
Bot Command Handlers

This module contains handlers for the general bot commands.
Each handler processes a specific command and provides appropriate responses.
"""

from telegram import Update
from telegram.ext import ContextTypes

from ..utils.logging_config import log_user_action, get_logger
from ..utils.config import get_settings

# Logger setup
logger = get_logger(__name__)


async def start_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """
    Handle the /start command.
    
    This is the first command users see when they start the bot.
    It provides a welcome message and basic instructions.
    
    Args:
        update: Telegram update object
        context: Bot context
    """
    user = update.effective_user
    chat_id = update.effective_chat.id
    
    log_user_action(user.id, "start_command", username=user.username)
    
    settings = get_settings()
    welcome_text = f"""
🔗 **Welcome to {settings.chain_mascot}'s Chain, {user.first_name}!**

Continue the chain: every answer must start with the last letter of the previous one.

🚀 **QUICK START:**
1️⃣ Add me to a **group chat**
2️⃣ Type `/chain` for an elimination game or `/chain freejoin` for a race
3️⃣ Answer with `/g [name]`

❓ `/help` - All commands and options
    """
    
    try:
        await context.bot.send_message(
            chat_id=chat_id,
            text=welcome_text,
            parse_mode='Markdown'
        )
        logger.info(f"Start command processed - user_id={user.id}, chat_id={chat_id}")
        
    except Exception as e:
        logger.error(f"Error in start command - user_id={user.id}, error={str(e)}")
        await context.bot.send_message(
            chat_id=chat_id,
            text="Sorry, something went wrong. Please try again later."
        )


async def help_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """
    Handle the /help command.
    
    Args:
        update: Telegram update object
        context: Bot context
    """
    user = update.effective_user
    chat_id = update.effective_chat.id
    
    log_user_action(user.id, "help_command")
    
    help_text = """
📚 **Chain Commands**

`/chain [options]` - Create a game in this group
`/join` - Sign up for an elimination game
`/startchain` - Start the elimination game (creator)
`/g [answer]` - Continue the chain
`/chainstatus` - Show the current link and players
`/endchain` - End the game (creator)

⚙️ **Options for /chain**
• `freejoin` - everyone answers, first to the points goal wins
• `elimination` - take turns, run out of time and you're out (default)
• `pokemon`, `moves`, `items`, `abilities` - what to chain
• `reverse` - answers may also end with the first letter
• `formes` - allow alternate formes
• `points=N` - points goal for free-join games
    """
    
    try:
        await context.bot.send_message(
            chat_id=chat_id,
            text=help_text,
            parse_mode='Markdown'
        )
    except Exception as e:
        logger.error(f"Error in help command - user_id={user.id}, error={str(e)}")
