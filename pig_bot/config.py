# config.py
# Configuration constants, tokens, and game settings for the Pig bot

import logging
import os

# ==================== LOGGING CONFIGURATION ====================
logging.basicConfig(
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    level=logging.INFO
)
logger = logging.getLogger(__name__)

# ==================== BOT CONFIGURATION ====================
BOT_TOKEN = os.environ.get('BOT_TOKEN', '')
BOT_USERNAME = os.environ.get('BOT_USERNAME', 'PigDiceBot')
DATA_FILE = os.environ.get('DATA_FILE', 'pig_data.json')

# Persist after every mutating command. Tests turn this off.
AUTOSAVE = os.environ.get('AUTOSAVE', '1') not in ('0', 'false', 'False', '')

# ==================== GAME RULES ====================
WIN_THRESHOLD = int(os.environ.get('WIN_THRESHOLD', '100'))
DIE_FACES = 6
BUST_FACE = 1
DICE_EMOJI = '🎲'

# Wait for Telegram's dice animation before showing the result (seconds)
DICE_ANIMATION_SEC = float(os.environ.get('DICE_ANIMATION_SEC', '3.5'))

# ==================== LEADERBOARD ====================
LEADERBOARD_SIZE = int(os.environ.get('LEADERBOARD_SIZE', '10'))

# Accepted reports kept per player
HISTORY_LIMIT = int(os.environ.get('HISTORY_LIMIT', '50'))
