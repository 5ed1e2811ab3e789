"""
Pytest configuration and fixtures for the Pig bot test suite.

This module provides:
- Leaderboard and registry fixtures with a fixed win threshold
- Scripted dice for deterministic rolls
- Telegram Update/context mocks for handler tests
"""
import os
import sys
from unittest.mock import AsyncMock, MagicMock

import pytest

# Settings are read at import time, so they must be in place first
os.environ.setdefault("AUTOSAVE", "0")
os.environ.setdefault("DICE_ANIMATION_SEC", "0")
os.environ.setdefault("WIN_THRESHOLD", "100")

# Add the bot source directory to path
sys.path.insert(
    0, os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "pig_bot")
)

from leaderboard import Leaderboard  # noqa: E402
from registry import GameRegistry  # noqa: E402


# =============================================================================
# Game Fixtures
# =============================================================================

@pytest.fixture
def leaderboard():
    """Leaderboard with the standard threshold of 100."""
    return Leaderboard(win_threshold=100)


@pytest.fixture
def registry(leaderboard):
    """Empty registry without persistence."""
    return GameRegistry(leaderboard)


@pytest.fixture
def scripted_dice():
    """Factory for a dice source that returns the given faces in order."""
    def _make(*faces):
        values = iter(faces)
        return lambda: next(values)
    return _make


@pytest.fixture
def fresh_db():
    """Reset the bot's module-level registry and leaderboard."""
    import database as db
    return db.init_registry(win_threshold=100, autosave=False)


# =============================================================================
# Telegram Mock Fixtures
# =============================================================================

@pytest.fixture
def make_update():
    """Factory for a mock Telegram update from a player."""
    def _make(user_id=222222222, chat_type="private", dice_value=None, dice_emoji="🎲",
              forward_origin=None):
        update = MagicMock()
        update.effective_user.id = user_id
        update.effective_user.first_name = "Tester"
        update.effective_chat.id = 333333333
        update.effective_chat.type = chat_type

        message = MagicMock()
        message.reply_html = AsyncMock()
        message.forward_origin = forward_origin
        if dice_value is None:
            message.dice = None
        else:
            message.dice.value = dice_value
            message.dice.emoji = dice_emoji
        update.message = message
        update.effective_message = message

        update.callback_query.answer = AsyncMock()
        update.callback_query.edit_message_reply_markup = AsyncMock()
        update.callback_query.from_user.id = user_id
        return update
    return _make


@pytest.fixture
def make_context():
    """Factory for a mock handler context whose bot rolls the given face."""
    def _make(die_value=4):
        context = MagicMock()
        dice_msg = MagicMock()
        dice_msg.dice.value = die_value
        context.bot.send_dice = AsyncMock(return_value=dice_msg)
        context.args = []
        return context
    return _make

