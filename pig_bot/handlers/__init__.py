# handlers/__init__.py
# Handler modules for the Pig bot

from .basic import (
    start,
    help_command,
    status_command,
    stats_command,
    top_command,
)

from .games import (
    roll_command,
    hold_command,
    complete_command,
    reset_command,
    handle_game_emoji,
)

from .callbacks import button_callback

__all__ = [
    # Basic
    'start',
    'help_command',
    'status_command',
    'stats_command',
    'top_command',
    # Games
    'roll_command',
    'hold_command',
    'complete_command',
    'reset_command',
    'handle_game_emoji',
    # Callbacks
    'button_callback',
]
