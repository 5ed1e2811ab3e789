# utils/__init__.py
# Utility functions and decorators for the Pig bot

from .decorators import handle_errors
from .helpers import (
    get_user_link,
    is_private_chat,
    game_keyboard,
    format_roll,
    format_hold,
    format_status,
)

__all__ = [
    'handle_errors',
    'get_user_link',
    'is_private_chat',
    'game_keyboard',
    'format_roll',
    'format_hold',
    'format_status',
]
