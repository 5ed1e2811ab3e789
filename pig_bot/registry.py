"""Player registry for Pig games.

Maps each player id to their UserGameState and counts completed games.
Every mutating operation holds that player's lock for its whole duration,
so two commands from the same player never interleave while different
players never wait on each other.
"""

import asyncio
import inspect
import logging
from collections import defaultdict
from typing import Callable, Dict, Optional

from dice import roll_die
from errors import ExternalReportError, GameOverError, NoActiveGameError
from game_logic import (
    apply_hold,
    apply_roll,
    check_die_value,
    is_bust,
    new_game_state,
    validate_completion,
)
from leaderboard import Leaderboard
from models import CompletionReport, UserGameState

logger = logging.getLogger(__name__)


class GameRegistry:
    """Owns every player's game state and the global completed-games counter.

    Attributes:
        user_games: Dict mapping player id to UserGameState
        total_games_played: Completions accepted by the leaderboard
        leaderboard: Collaborator providing the win threshold and
            receiving completion reports
        game_locks: Per-player asyncio locks, created on first use
    """

    def __init__(self, leaderboard: Leaderboard,
                 on_change: Optional[Callable[['GameRegistry'], None]] = None,
                 dice: Callable[[], int] = roll_die):
        """
        Initialize an empty registry.

        Args:
            leaderboard: Leaderboard collaborator
            on_change: Called with the registry after every committed mutation
            dice: Randomness source used when roll() gets no die value
        """
        self.user_games: Dict[int, UserGameState] = {}
        self.total_games_played = 0
        self.leaderboard = leaderboard
        self.game_locks = defaultdict(asyncio.Lock)
        self._counter_lock = asyncio.Lock()
        self._on_change = on_change
        self._dice = dice

    # ==================== RECORD ACCESS ====================

    def get_or_create(self, player_id: int) -> UserGameState:
        """Return the player's state, inserting a fresh one if absent."""
        if player_id not in self.user_games:
            self.user_games[player_id] = new_game_state()
            logger.info(f"[GAME_CREATE] player={player_id}")
        return self.user_games[player_id]

    def require_existing(self, player_id: int) -> UserGameState:
        """
        Return the player's state.

        Raises:
            NoActiveGameError: If the player never rolled or reset
        """
        state = self.user_games.get(player_id)
        if state is None:
            raise NoActiveGameError(player_id)
        return state

    def snapshot(self, player_id: int) -> Optional[UserGameState]:
        """Detached copy of the player's state, None if there is none."""
        state = self.user_games.get(player_id)
        return state.copy() if state is not None else None

    def _persist(self) -> None:
        if self._on_change is not None:
            self._on_change(self)

    # ==================== MUTATING OPERATIONS ====================

    async def roll(self, player_id: int, die_value: Optional[int] = None) -> dict:
        """
        Roll for the player, starting a game on their first roll.

        Args:
            player_id: Player id
            die_value: Face to apply; drawn from the dice source when None

        Returns:
            Roll view of the updated state

        Raises:
            GameOverError: If the player's game is already won
            ValueError: If die_value is out of range
        """
        if die_value is None:
            die_value = self._dice()
        check_die_value(die_value)

        async with self.game_locks[player_id]:
            updated = self.get_or_create(player_id).copy()
            try:
                view = apply_roll(updated, die_value)
            except GameOverError:
                logger.warning(f"[ROLL_REJECTED] player={player_id} reason=game_over")
                raise
            self.user_games[player_id] = updated
            self._persist()

        tag = "BUST" if is_bust(die_value) else "ROLL"
        logger.info(
            f"[{tag}] player={player_id} die={die_value} "
            f"turn_score={view['turn_score']} round={view['round']} turn={view['turn']}"
        )
        return view

    async def hold(self, player_id: int) -> dict:
        """
        Bank the player's turn score against the leaderboard's threshold.

        Returns:
            Hold view of the updated state

        Raises:
            NoActiveGameError: If the player has no game
            GameOverError: If the player's game is already won
        """
        async with self.game_locks[player_id]:
            try:
                updated = self.require_existing(player_id).copy()
                view = apply_hold(updated, self.leaderboard.win_threshold())
            except (NoActiveGameError, GameOverError) as e:
                logger.warning(f"[HOLD_REJECTED] player={player_id} reason={e}")
                raise
            self.user_games[player_id] = updated
            self._persist()

        logger.info(
            f"[HOLD] player={player_id} total_score={view['total_score']} "
            f"round={view['round']} turn={view['turn']}"
        )
        if view['game_over']:
            logger.info(f"[WIN] player={player_id} total_score={view['total_score']}")
        return view

    async def complete(self, player_id: int) -> CompletionReport:
        """
        Report the player's won game to the leaderboard and count it.

        The counter moves only after the leaderboard accepted the report.

        Returns:
            The CompletionReport that was forwarded

        Raises:
            NoActiveGameError: If the player has no game
            GameOverError: If the game is not won yet
            ExternalReportError: If the leaderboard rejected the report
        """
        async with self.game_locks[player_id]:
            try:
                report = validate_completion(self.require_existing(player_id))
            except (NoActiveGameError, GameOverError) as e:
                logger.warning(f"[COMPLETE_REJECTED] player={player_id} reason={e}")
                raise

            try:
                result = self.leaderboard.report_completion(
                    player_id, report.total_score, report.round, report.turn
                )
                if inspect.isawaitable(result):
                    result = await result
            except ExternalReportError as e:
                logger.warning(f"[COMPLETE_REJECTED] player={player_id} reason={e}")
                raise
            except Exception as e:
                logger.error(f"[COMPLETE_FAILED] player={player_id} error={e}", exc_info=True)
                raise ExternalReportError(f"Leaderboard failed to record the game: {e}") from e

            if result is False:
                logger.warning(f"[COMPLETE_REJECTED] player={player_id} reason=refused")
                raise ExternalReportError("Leaderboard refused the report")

            async with self._counter_lock:
                self.total_games_played += 1
            self._persist()

        logger.info(
            f"[COMPLETE] player={player_id} total_score={report.total_score} "
            f"round={report.round} turn={report.turn} games_played={self.total_games_played}"
        )
        return report

    async def reset(self, player_id: int) -> dict:
        """Replace the player's state with a fresh game. Always succeeds.

        A leaderboard that has an `open_game` hook is told a new game
        started, so its win can be reported even when the figures match
        the previous one.
        """
        async with self.game_locks[player_id]:
            open_game = getattr(self.leaderboard, 'open_game', None)
            if open_game is not None:
                open_game(player_id)
            state = new_game_state()
            self.user_games[player_id] = state
            self._persist()

        logger.info(f"[RESET] player={player_id}")
        return state.hold_view()

    # ==================== VIEWS ====================

    def last_roll(self, player_id: int) -> int:
        state = self.user_games.get(player_id)
        return state.last_roll if state else 0

    def round(self, player_id: int) -> int:
        state = self.user_games.get(player_id)
        return state.round if state else 0

    def turn(self, player_id: int) -> int:
        state = self.user_games.get(player_id)
        return state.turn if state else 0

    def game_over(self, player_id: int) -> bool:
        state = self.user_games.get(player_id)
        return state.game_over if state else False

    def turn_score(self, player_id: int) -> int:
        state = self.user_games.get(player_id)
        return state.turn_score if state else 0

    def total_score(self, player_id: int) -> int:
        state = self.user_games.get(player_id)
        return state.total_score if state else 0

    def games_played(self) -> int:
        return self.total_games_played

    def user_games_played_for(self, player_id: int) -> int:
        """Completed games the leaderboard holds for the player, 0 if none."""
        return self.leaderboard.completed_games_for(player_id) or 0

    # ==================== SERIALIZATION ====================

    def to_dict(self) -> dict:
        return {
            'user_games': {str(k): v.to_dict() for k, v in self.user_games.items()},
            'total_games_played': self.total_games_played,
        }

    def load_dict(self, data: dict) -> None:
        self.user_games.update({
            int(k): UserGameState.from_dict(v) for k, v in data.get('user_games', {}).items()
        })
        self.total_games_played = int(data.get('total_games_played', 0))
