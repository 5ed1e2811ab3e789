# main.py
# Entry point for the Pig bot - registers all handlers and starts polling

import logging

from telegram import Update
from telegram.ext import (
    Application,
    CommandHandler,
    CallbackQueryHandler,
    MessageHandler,
    filters,
)

from config import BOT_TOKEN
import database as db

from handlers import (
    # Basic commands
    start,
    help_command,
    status_command,
    stats_command,
    top_command,
    # Game commands
    roll_command,
    hold_command,
    complete_command,
    reset_command,
    handle_game_emoji,
    # Callbacks
    button_callback,
)

logger = logging.getLogger(__name__)


async def error_handler(update: Update, context):
    """Handle unhandled exceptions."""
    logger.error(f"Unhandled exception: {context.error}", exc_info=context.error)

    try:
        if isinstance(update, Update) and update.effective_message:
            await update.effective_message.reply_html(
                "❌ <b>An unexpected error occurred</b>\n\n"
                "Please try again later."
            )
    except Exception as e:
        logger.error(f"Error in error handler: {e}")


def build_application(token: str) -> Application:
    """Build the bot application with every handler registered."""
    application = Application.builder().token(token).build()

    application.add_error_handler(error_handler)

    # ==================== COMMAND HANDLERS ====================

    application.add_handler(CommandHandler("start", start))
    application.add_handler(CommandHandler("help", help_command))
    application.add_handler(CommandHandler("status", status_command))
    application.add_handler(CommandHandler("stats", stats_command))
    application.add_handler(CommandHandler("top", top_command))

    application.add_handler(CommandHandler("roll", roll_command))
    application.add_handler(CommandHandler("r", roll_command))  # Alias
    application.add_handler(CommandHandler("hold", hold_command))
    application.add_handler(CommandHandler("h", hold_command))  # Alias
    application.add_handler(CommandHandler("complete", complete_command))
    application.add_handler(CommandHandler("reset", reset_command))

    # ==================== OTHER HANDLERS ====================

    application.add_handler(CallbackQueryHandler(button_callback, pattern=r"^pig_"))

    # Dice messages sent by players
    application.add_handler(MessageHandler(filters.Dice.DICE & ~filters.FORWARDED, handle_game_emoji))

    return application


def main():
    """Main function to start the bot."""
    if not BOT_TOKEN:
        raise ValueError("BOT_TOKEN environment variable is required")

    db.init_registry()
    db.load_data()

    application = build_application(BOT_TOKEN)

    logger.info("Bot starting...")
    application.run_polling(allowed_updates=Update.ALL_TYPES)


if __name__ == "__main__":
    main()
