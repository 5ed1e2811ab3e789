# utils/helpers.py
# Message formatting and keyboard helpers for the Pig bot

from telegram import Update, InlineKeyboardButton, InlineKeyboardMarkup

from config import DICE_EMOJI
from game_logic import is_bust
from registry import GameRegistry


def get_user_link(user_id: int, name: str) -> str:
    """Generate an HTML user link for Telegram."""
    return f'<a href="tg://user?id={user_id}">{name}</a>'


def is_private_chat(update: Update) -> bool:
    """Check if the message is from a private chat."""
    return update.effective_chat.type == "private"


def game_keyboard(game_over: bool) -> InlineKeyboardMarkup:
    """
    Build the inline keyboard shown under game messages.

    Args:
        game_over: Whether the game is won; swaps roll/hold for complete/reset

    Returns:
        Inline keyboard markup
    """
    if game_over:
        keyboard = [[
            InlineKeyboardButton("🏆 Complete", callback_data="pig_complete"),
            InlineKeyboardButton("🔄 New Game", callback_data="pig_reset"),
        ]]
    else:
        keyboard = [[
            InlineKeyboardButton(f"{DICE_EMOJI} Roll", callback_data="pig_roll"),
            InlineKeyboardButton("✋ Hold", callback_data="pig_hold"),
        ]]
    return InlineKeyboardMarkup(keyboard)


def format_roll(view: dict) -> str:
    """Render the result of a roll."""
    if is_bust(view['last_roll']):
        headline = "💥 <b>Bust!</b> You rolled a <b>1</b> and lost this turn's points."
    else:
        headline = f"{DICE_EMOJI} You rolled a <b>{view['last_roll']}</b>"
    return (
        f"{headline}\n\n"
        f"🎯 Turn score: <b>{view['turn_score']}</b>\n"
        f"🔁 Round: <b>{view['round']}</b> | Turn: <b>{view['turn']}</b>"
    )


def format_hold(view: dict, win_threshold: int) -> str:
    """Render the result of a hold."""
    if view['game_over']:
        return (
            f"🎉 <b>You won!</b>\n\n"
            f"💰 Total score: <b>{view['total_score']}</b> / {win_threshold}\n"
            f"🔁 Rounds: <b>{view['round']}</b> | Turns: <b>{view['turn']}</b>\n\n"
            f"Use /complete to record the game on the leaderboard."
        )
    return (
        f"✋ <b>Held!</b> Points banked.\n\n"
        f"💰 Total score: <b>{view['total_score']}</b> / {win_threshold}\n"
        f"🔁 Round: <b>{view['round']}</b> | Turn: <b>{view['turn']}</b>"
    )


def format_status(registry: GameRegistry, user_id: int) -> str:
    """Render a player's current game from the registry views."""
    threshold = registry.leaderboard.win_threshold()
    status = "🏁 Won" if registry.game_over(user_id) else "▶️ In progress"
    return (
        f"📊 <b>Your Game</b>\n\n"
        f"Status: <b>{status}</b>\n"
        f"{DICE_EMOJI} Last roll: <b>{registry.last_roll(user_id) or '-'}</b>\n"
        f"🎯 Turn score: <b>{registry.turn_score(user_id)}</b>\n"
        f"💰 Total score: <b>{registry.total_score(user_id)}</b> / {threshold}\n"
        f"🔁 Round: <b>{registry.round(user_id)}</b> | Turn: <b>{registry.turn(user_id)}</b>\n"
        f"🏆 Games completed: <b>{registry.user_games_played_for(user_id)}</b>"
    )
