"""
Chain Command Handlers

This module handles the Telegram commands of the chain game.
It provides the interface between players and the chain manager.
"""

from telegram import Update
from telegram.ext import ContextTypes

from ..game.chain_manager import ChainManager
from ..game.errors import ConfigurationError
from ..utils.config import is_admin_user
from ..utils.logging_config import get_logger, log_user_action

# Setup logger and manager
logger = get_logger(__name__)
chain_manager = ChainManager()


def _display_name(user) -> str:
    return user.first_name or user.username or f"Player {user.id}"


async def chain_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """
    Handle /chain command to create a new game.

    Usage: /chain [freejoin|elimination] [pokemon|moves|items|abilities] [reverse] [formes] [points=N]
    """
    if not update.message:
        logger.warning("chain_command called without a message object")
        return

    chat_id = update.effective_chat.id
    user_id = update.effective_user.id
    log_user_action(user_id, "chain_command", chat_id=chat_id, args=context.args)

    if update.effective_chat.type == 'private':
        await update.message.reply_text(
            "❌ Chain must be played in a group chat!\n\n"
            "Add me to a group and use /chain there to start a game."
        )
        return

    chain_manager.set_bot_context(context)
    try:
        game = await chain_manager.create_game(chat_id, user_id, list(context.args or []))
    except ConfigurationError as e:
        await update.message.reply_text(f"❌ {e}")
        return

    options = game.options
    if game.freejoin:
        text = (
            f"🔗 **{options.mascot}'s Chain** (free-join, {game.links_type})\n\n"
            f"Use `/g [{game.links_type}]` to answer with a {game.links_type} whose first letter "
            f"matches the last letter of the current one!\n"
            f"First to **{options.points}** points wins. The first round starts in a few seconds."
        )
    else:
        text = (
            f"🔗 **{options.mascot}'s Chain** (elimination, {game.links_type})\n\n"
            f"Use `/join` to sign up and `/startchain` when everyone is in.\n"
            f"On your turn, use `/g [{game.links_type}]` to continue the chain before time runs out!"
        )
    if options.reverse_links:
        text += "\n\n↔️ Links may also be reversed (last letter matching the first letter)."
    await update.message.reply_text(text, parse_mode='Markdown')


async def join_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /join command."""
    if not update.message:
        return

    user = update.effective_user
    success, message = chain_manager.join_game(update.effective_chat.id, user.id, _display_name(user))
    log_user_action(user.id, "join_chain", chat_id=update.effective_chat.id, success=success)
    await update.message.reply_text(("✅ " if success else "❌ ") + message)


async def start_chain_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /startchain command."""
    if not update.message:
        return

    chat_id = update.effective_chat.id
    user_id = update.effective_user.id
    creator_id = chain_manager.get_creator(chat_id)
    if creator_id is not None and creator_id != user_id and not is_admin_user(user_id):
        await update.message.reply_text("❌ Only the game creator can start the game.")
        return

    chain_manager.set_bot_context(context)
    success, message = await chain_manager.start_game(chat_id)
    if not success:
        await update.message.reply_text(f"❌ {message}")


async def guess_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """
    Handle /g and /guess commands.

    Rejected guesses are silent; the game announces accepted ones.
    """
    if not update.message or not context.args:
        return

    user = update.effective_user
    text = " ".join(context.args)
    accepted = await chain_manager.submit_guess(update.effective_chat.id, user.id, _display_name(user), text)
    log_user_action(user.id, "chain_guess", chat_id=update.effective_chat.id, accepted=accepted)


async def end_chain_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /endchain command. Only the creator or an admin may end a game."""
    if not update.message:
        return

    chat_id = update.effective_chat.id
    user_id = update.effective_user.id
    creator_id = chain_manager.get_creator(chat_id)
    if creator_id is None:
        await update.message.reply_text("❌ No chain game is running in this chat.")
        return
    if creator_id != user_id and not is_admin_user(user_id):
        await update.message.reply_text("❌ Only the game creator can end the game.")
        return

    await chain_manager.stop_game(chat_id)
    log_user_action(user_id, "end_chain", chat_id=chat_id)


async def status_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /chainstatus command."""
    if not update.message:
        return

    status = chain_manager.get_game_status(update.effective_chat.id)
    if not status:
        await update.message.reply_text(
            "❌ No chain game is running in this chat.\n"
            "Use /chain to start a new game."
        )
        return

    lines = [
        f"🔗 **Chain** ({status['mode']}, {status['variant']})",
        f"Phase: {status['phase']}",
    ]
    if status["current_link"]:
        keys = status["target_starts"] + status["target_ends"]
        target = ", ".join(key.upper() for key in keys) or "none"
        lines.append(f"Current link: **{status['current_link']}** (next: {target})")
    if status["mode"] == "elimination":
        lines.append(f"Round: {status['sweep']}")
        lines.append(f"Remaining players: {', '.join(status['remaining_players']) or 'none'}")
        if status["current_player"]:
            lines.append(f"Current turn: {status['current_player']}")
    elif status["points"]:
        scores = ", ".join(f"{name} ({points})" for name, points in status["points"].items())
        lines.append(f"Points: {scores}")

    await update.message.reply_text("\n".join(lines), parse_mode='Markdown')
