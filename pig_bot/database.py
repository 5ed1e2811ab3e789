# database.py
# Data persistence and storage management

import json
import os
import logging

from config import DATA_FILE, AUTOSAVE, WIN_THRESHOLD
from leaderboard import Leaderboard
from registry import GameRegistry

logger = logging.getLogger(__name__)

# ==================== DATA STRUCTURES ====================

# Leaderboard collaborator (win threshold, completed games per player)
leaderboard = Leaderboard(WIN_THRESHOLD)

# Player id -> game state registry
registry = GameRegistry(leaderboard)


def _autosave(game_registry: GameRegistry):
    save_data(game_registry)


def init_registry(win_threshold: int = WIN_THRESHOLD, autosave: bool = AUTOSAVE) -> GameRegistry:
    """Create a fresh leaderboard and registry and install them as the module's data."""
    global leaderboard, registry
    leaderboard = Leaderboard(win_threshold)
    registry = GameRegistry(leaderboard, on_change=_autosave if autosave else None)
    return registry


# ==================== JSON DATA PERSISTENCE ====================

def save_data(game_registry: GameRegistry = None, path: str = None):
    """Save registry and leaderboard to the JSON data file."""
    game_registry = game_registry or registry
    path = path or DATA_FILE
    try:
        data = {
            'registry': game_registry.to_dict(),
            'leaderboard': game_registry.leaderboard.to_dict(),
        }

        with open(path, 'w') as f:
            json.dump(data, f, indent=2)

        logger.debug("Data saved successfully")
    except Exception as e:
        logger.error(f"Error saving data: {e}")


def load_data(game_registry: GameRegistry = None, path: str = None):
    """Load registry and leaderboard from the JSON data file."""
    game_registry = game_registry or registry
    path = path or DATA_FILE
    try:
        if not os.path.exists(path):
            logger.info("No data file found, starting fresh")
            return

        with open(path, 'r') as f:
            data = json.load(f)

        game_registry.load_dict(data.get('registry', {}))
        game_registry.leaderboard.load_dict(data.get('leaderboard', {}))

        logger.info(
            f"Data loaded successfully: {len(game_registry.user_games)} games, "
            f"{game_registry.total_games_played} completed"
        )
    except Exception as e:
        logger.error(f"Error loading data: {e}")
