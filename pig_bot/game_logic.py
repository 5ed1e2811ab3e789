"""Core rules for Pig.

Applies roll and hold outcomes to a single UserGameState, detects the win
and validates completion. Nothing here knows about players, locks or
Telegram; the registry takes care of those.
"""

from config import DIE_FACES, BUST_FACE
from errors import GameOverError
from models import UserGameState, CompletionReport


def new_game_state() -> UserGameState:
    """Return the zero-valued state a reset or a first roll starts from."""
    return UserGameState()


def is_bust(die_value: int) -> bool:
    return die_value == BUST_FACE


def check_die_value(die_value: int) -> int:
    """
    Validate a die value coming from the randomness source.

    Raises:
        ValueError: If the value is not an int between 1 and DIE_FACES
    """
    if isinstance(die_value, bool) or not isinstance(die_value, int):
        raise ValueError(f"Die value must be an integer, got {die_value!r}")
    if not 1 <= die_value <= DIE_FACES:
        raise ValueError(f"Die value must be between 1 and {DIE_FACES}, got {die_value}")
    return die_value


def apply_roll(state: UserGameState, die_value: int) -> dict:
    """
    Apply one die roll to the state.

    A 1 busts the turn: unbanked points are lost and the turn ends.
    Any other face is added to the turn score. Rolling never wins a game,
    since only banked points count.

    Args:
        state: The player's game state, mutated in place
        die_value: Face shown by the die (1-6)

    Returns:
        Roll view with last_roll, turn_score, round and turn

    Raises:
        GameOverError: If the game is already won
        ValueError: If die_value is out of range
    """
    if state.game_over:
        raise GameOverError("Game is over, reset to play again")
    check_die_value(die_value)

    if is_bust(die_value):
        turn_score = 0
        turn = state.turn + 1
    else:
        turn_score = state.turn_score + die_value
        turn = state.turn

    state.round += 1
    state.last_roll = die_value
    state.turn_score = turn_score
    state.turn = turn
    return state.roll_view()


def apply_hold(state: UserGameState, win_threshold: int) -> dict:
    """
    Bank the turn score and end the turn.

    This is the only place total_score changes, so the win check lives here.

    Args:
        state: The player's game state, mutated in place
        win_threshold: Banked score needed to win

    Returns:
        Hold view, roll view plus total_score and game_over

    Raises:
        GameOverError: If the game is already won
    """
    if state.game_over:
        raise GameOverError("Game is over, reset to play again")

    total_score = state.total_score + state.turn_score

    state.total_score = total_score
    state.turn_score = 0
    state.last_roll = 0
    state.round += 1
    state.turn += 1
    if total_score >= win_threshold:
        state.game_over = True
    return state.hold_view()


def validate_completion(state: UserGameState) -> CompletionReport:
    """
    Build the completion payload for a won game. Does not touch the state.

    Raises:
        GameOverError: If the game has not been won yet
    """
    if not state.game_over:
        raise GameOverError("Game is not over yet, keep playing")
    return CompletionReport(state.total_score, state.round, state.turn)
