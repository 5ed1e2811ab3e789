# utils/decorators.py
# Error handling decorator for bot handlers

import logging
from functools import wraps
from telegram import Update
from telegram.ext import ContextTypes
from telegram.error import TelegramError, BadRequest, Forbidden, NetworkError

from errors import PigGameError, GameOverError, NoActiveGameError, ExternalReportError

logger = logging.getLogger(__name__)

GAME_ERROR_MESSAGES = {
    GameOverError: "🏁 <b>Not now</b>\n\n{error}",
    NoActiveGameError: "❌ <b>No active game</b>\n\nUse /roll to start one.",
    ExternalReportError: "⚠️ <b>Leaderboard rejected the game</b>\n\n{error}",
}


async def _reply(update: Update, text: str):
    try:
        if update.effective_message:
            await update.effective_message.reply_html(text)
    except TelegramError as e:
        logger.error(f"Failed to send error reply: {e}")


def handle_errors(func):
    """
    Decorator that wraps handler functions with error handling.
    Game rule violations are answered to the player; Telegram API errors
    and unexpected exceptions are logged.
    """
    @wraps(func)
    async def wrapper(update: Update, context: ContextTypes.DEFAULT_TYPE, *args, **kwargs):
        try:
            return await func(update, context, *args, **kwargs)
        except PigGameError as e:
            template = GAME_ERROR_MESSAGES.get(type(e), "❌ {error}")
            await _reply(update, template.format(error=e))
        except BadRequest as e:
            logger.error(f"BadRequest in {func.__name__}: {e}")
            await _reply(
                update,
                "❌ <b>Request Error</b>\n\n"
                "Something went wrong with your request. Please try again."
            )
        except Forbidden as e:
            logger.error(f"Forbidden in {func.__name__}: {e}")
        except NetworkError as e:
            logger.error(f"NetworkError in {func.__name__}: {e}")
            await _reply(
                update,
                "❌ <b>Network Error</b>\n\n"
                "Connection issue. Please try again later."
            )
        except TelegramError as e:
            logger.error(f"TelegramError in {func.__name__}: {e}")
            await _reply(update, "❌ <b>Error</b>\n\nAn error occurred. Please try again.")
        except Exception as e:
            logger.error(f"Unexpected error in {func.__name__}: {e}", exc_info=True)
            await _reply(
                update,
                "❌ <b>Unexpected Error</b>\n\n"
                "Something went wrong. Please try again later."
            )
    return wrapper
