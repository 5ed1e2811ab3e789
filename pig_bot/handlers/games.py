# handlers/games.py
# Game commands: roll, hold, complete, reset, and dice emoji handling

import logging
import asyncio

from telegram import Update
from telegram.ext import ContextTypes

from config import DICE_EMOJI, DICE_ANIMATION_SEC
from errors import GameOverError
from utils.decorators import handle_errors
from utils.helpers import (
    get_user_link,
    is_private_chat,
    game_keyboard,
    format_roll,
    format_hold,
)
import database as db

logger = logging.getLogger(__name__)


async def play_roll(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """
    Send a die for the player and apply its value.

    Works for both commands and inline buttons since it only uses the
    effective user, chat and message of the update.
    """
    user_id = update.effective_user.id

    if db.registry.game_over(user_id):
        raise GameOverError("Your game is already won. Use /complete or /reset.")

    dice_msg = await context.bot.send_dice(chat_id=update.effective_chat.id, emoji=DICE_EMOJI)
    await asyncio.sleep(DICE_ANIMATION_SEC)

    view = await db.registry.roll(user_id, dice_msg.dice.value)
    await update.effective_message.reply_html(
        format_roll(view),
        reply_markup=game_keyboard(False)
    )


async def play_hold(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Bank the player's turn score."""
    user_id = update.effective_user.id

    view = await db.registry.hold(user_id)
    await update.effective_message.reply_html(
        format_hold(view, db.registry.leaderboard.win_threshold()),
        reply_markup=game_keyboard(view['game_over'])
    )


async def play_complete(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Record the player's won game on the leaderboard."""
    user = update.effective_user

    report = await db.registry.complete(user.id)
    user_link = get_user_link(user.id, user.first_name or 'Player')
    await update.effective_message.reply_html(
        f"🏆 <b>{user_link}'s game is on the leaderboard!</b>\n\n"
        f"💰 Final score: <b>{report.total_score}</b>\n"
        f"🔁 Rounds: <b>{report.round}</b> | Turns: <b>{report.turn}</b>\n\n"
        f"🎮 Your completed games: <b>{db.registry.user_games_played_for(user.id)}</b>\n"
        f"🌍 Games completed by everyone: <b>{db.registry.games_played()}</b>",
        reply_markup=game_keyboard(True)
    )


async def play_reset(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Start the player over with a fresh game."""
    user_id = update.effective_user.id

    await db.registry.reset(user_id)
    await update.effective_message.reply_html(
        f"🔄 <b>New game started!</b>\n\n"
        f"Reach <b>{db.registry.leaderboard.win_threshold()}</b> points to win. "
        f"Roll to build your turn score, hold to bank it. A 1 loses the turn!",
        reply_markup=game_keyboard(False)
    )


@handle_errors
async def roll_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Handle the /roll command."""
    await play_roll(update, context)


@handle_errors
async def hold_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Handle the /hold command."""
    await play_hold(update, context)


@handle_errors
async def complete_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Handle the /complete command."""
    await play_complete(update, context)


@handle_errors
async def reset_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Handle the /reset command."""
    await play_reset(update, context)


@handle_errors
async def handle_game_emoji(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Apply a 🎲 sent by the player as a roll.

    In groups the dice only counts for players who already have a game,
    so casual dice messages don't open one. Forwarded dice never count.
    """
    message = update.message
    if not message or not message.dice:
        return

    if message.dice.emoji != DICE_EMOJI:
        return

    # A forwarded dice keeps its original value
    if message.forward_origin is not None:
        return

    user_id = update.effective_user.id
    if db.registry.snapshot(user_id) is None and not is_private_chat(update):
        return

    await asyncio.sleep(DICE_ANIMATION_SEC)

    view = await db.registry.roll(user_id, message.dice.value)
    await message.reply_html(format_roll(view), reply_markup=game_keyboard(False))
