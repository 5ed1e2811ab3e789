# handlers/basic.py
# Basic command handlers: /start, /help, /status, /stats, /top

from telegram import Update
from telegram.ext import ContextTypes

from config import DICE_EMOJI, LEADERBOARD_SIZE
from utils.decorators import handle_errors
from utils.helpers import get_user_link, game_keyboard, format_status
import database as db


@handle_errors
async def start(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /start command - welcome message and game buttons."""
    user = update.effective_user
    threshold = db.registry.leaderboard.win_threshold()

    welcome_text = (
        f"🐷 <b>Welcome to Pig, {user.first_name or 'Player'}!</b>\n\n"
        f"Roll the die as often as you dare. Every roll adds to your turn score, "
        f"but a <b>1</b> wipes it out. Hold to bank your points.\n\n"
        f"First to <b>{threshold}</b> banked points wins.\n\n"
        f"Type /help for all commands."
    )

    await update.message.reply_html(
        welcome_text,
        reply_markup=game_keyboard(db.registry.game_over(user.id))
    )


@handle_errors
async def help_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /help command - show help information."""
    help_text = (
        "🎯 <b>How to Play:</b>\n\n"
        f"1️⃣ /roll or send a {DICE_EMOJI} to roll the die\n"
        "2️⃣ Faces 2-6 add to your turn score\n"
        "3️⃣ A 1 is a bust: the turn ends and its points are lost\n"
        "4️⃣ /hold banks your turn score into your total\n"
        f"5️⃣ Reach {db.registry.leaderboard.win_threshold()} to win\n"
        "6️⃣ /complete records the win on the leaderboard\n\n"
        "📝 <b>Other Commands:</b>\n"
        "• /status - Your current game\n"
        "• /stats - Games completed\n"
        "• /top - Leaderboard\n"
        "• /reset - Start over\n"
    )

    await update.message.reply_html(help_text)


@handle_errors
async def status_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /status command - show the player's game."""
    user_id = update.effective_user.id
    await update.message.reply_html(
        format_status(db.registry, user_id),
        reply_markup=game_keyboard(db.registry.game_over(user_id))
    )


@handle_errors
async def stats_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /stats command - personal and global completion counts."""
    user_id = update.effective_user.id
    best = db.registry.leaderboard.best_scores.get(user_id, 0)

    await update.message.reply_html(
        f"📈 <b>Statistics</b>\n\n"
        f"🏆 Your completed games: <b>{db.registry.user_games_played_for(user_id)}</b>\n"
        f"⭐ Your best score: <b>{best}</b>\n"
        f"🌍 Games completed by everyone: <b>{db.registry.games_played()}</b>"
    )


@handle_errors
async def top_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /top command - leaderboard."""
    ranking = db.registry.leaderboard.top_players(LEADERBOARD_SIZE)
    if not ranking:
        await update.message.reply_html("🏆 <b>Leaderboard</b>\n\nNo completed games yet!")
        return

    lines = ["🏆 <b>Leaderboard</b>\n"]
    for position, (player_id, completed, best) in enumerate(ranking, start=1):
        lines.append(
            f"{position}. {get_user_link(player_id, str(player_id))} - "
            f"<b>{completed}</b> wins, best <b>{best}</b>"
        )

    await update.message.reply_html("\n".join(lines))
