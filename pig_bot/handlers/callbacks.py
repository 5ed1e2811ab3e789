# handlers/callbacks.py
# Callback query handler for the game's inline buttons

from telegram import Update
from telegram.ext import ContextTypes
from telegram.error import BadRequest

from config import logger
from utils.decorators import handle_errors
from handlers.games import play_roll, play_hold, play_complete, play_reset

BUTTON_ACTIONS = {
    "pig_roll": play_roll,
    "pig_hold": play_hold,
    "pig_complete": play_complete,
    "pig_reset": play_reset,
}


@handle_errors
async def button_callback(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Handle all inline button callbacks."""
    query = update.callback_query
    await query.answer()

    action = BUTTON_ACTIONS.get(query.data)
    if action is None:
        logger.warning(f"Unknown callback data from {query.from_user.id}: {query.data}")
        return

    # Drop the buttons on the old message so it can't be pressed twice
    try:
        await query.edit_message_reply_markup(reply_markup=None)
    except BadRequest as e:
        logger.debug(f"Could not clear buttons: {e}")
    await action(update, context)
