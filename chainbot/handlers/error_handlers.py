"""
Error Handlers

This module handles errors and exceptions that occur during bot operation.
It provides graceful error handling and user-friendly error messages.
"""

import traceback
from telegram import Update
from telegram.ext import ContextTypes

from ..utils.logging_config import get_logger
from ..utils.config import is_development

# Logger setup
logger = get_logger(__name__)


async def error_handler(update: object, context: ContextTypes.DEFAULT_TYPE) -> None:
    """
    Handle errors that occur during bot operation.
    
    This function logs errors and provides appropriate user feedback.
    In development, it shows detailed error information.
    
    Args:
        update: Telegram update object (may be None)
        context: Bot context containing error information
    """
    error = context.error
    error_message = str(error) if error else "Unknown error"
    
    user_id = None
    chat_id = None
    
    if isinstance(update, Update):
        if update.effective_user:
            user_id = update.effective_user.id
        if update.effective_chat:
            chat_id = update.effective_chat.id
    
    update_type = type(update).__name__ if update else None
    tb = "".join(traceback.format_exception(type(error), error, error.__traceback__)) if error else None
    logger.error(
        f"Bot error occurred - error_message={error_message}, user_id={user_id}, "
        f"chat_id={chat_id}, update_type={update_type}, traceback={tb}"
    )
    
    if chat_id:
        try:
            if is_development():
                error_text = (
                    "🐛 **Development Error**\n\n"
                    f"An error occurred: `{error_message}`\n\n"
                    "This detailed message is only shown in development mode."
                )
            else:
                error_text = (
                    "⚠️ **Something went wrong**\n\n"
                    "I encountered an error while processing your request.\n"
                    "Please try again in a few moments."
                )
            
            await context.bot.send_message(
                chat_id=chat_id,
                text=error_text,
                parse_mode='Markdown'
            )
            
        except Exception as send_error:
            # If we can't even send an error message, log it
            logger.error(
                f"Failed to send error message to user - original_error={error_message}, "
                f"send_error={str(send_error)}, chat_id={chat_id}"
            )
