# leaderboard.py
# Records finished games, owns the win threshold and per-player completion counts

import logging
from collections import defaultdict
from datetime import datetime
from typing import Dict, List, Optional, Tuple

from config import WIN_THRESHOLD, HISTORY_LIMIT
from errors import ExternalReportError

logger = logging.getLogger(__name__)


class Leaderboard:
    """In-process leaderboard the registry reports completed games to.

    Attributes:
        completed_games: Dict mapping player id to number of accepted reports
        best_scores: Dict mapping player id to highest reported total score
        history: Dict mapping player id to its most recent accepted reports,
            at most HISTORY_LIMIT entries each
    """

    def __init__(self, win_threshold: int = WIN_THRESHOLD, history_limit: int = HISTORY_LIMIT):
        self._win_threshold = win_threshold
        self._history_limit = history_limit
        self.completed_games: Dict[int, int] = {}
        self.best_scores: Dict[int, int] = {}
        self.history: Dict[int, List[dict]] = defaultdict(list)
        self._last_reports: Dict[int, Tuple[int, int, int]] = {}

    def win_threshold(self) -> int:
        return self._win_threshold

    def report_completion(self, player_id: int, total_score: int, round: int, turn: int) -> None:
        """
        Record a finished game.

        Args:
            player_id: Player who finished the game
            total_score: Final banked score
            round: Number of roll or hold actions in the game
            turn: Number of turns in the game

        Raises:
            ExternalReportError: If the score never reached the threshold
                or the player's current game was already recorded
        """
        if total_score < self._win_threshold:
            raise ExternalReportError(
                f"Score {total_score} is below the win threshold {self._win_threshold}"
            )

        if player_id in self._last_reports:
            raise ExternalReportError(f"Game already recorded for player {player_id}")

        self._last_reports[player_id] = (total_score, round, turn)
        self.completed_games[player_id] = self.completed_games.get(player_id, 0) + 1
        if total_score > self.best_scores.get(player_id, 0):
            self.best_scores[player_id] = total_score
        self.history[player_id].append({
            'total_score': total_score,
            'round': round,
            'turn': turn,
            'timestamp': datetime.now(),
        })
        del self.history[player_id][:-self._history_limit]

        logger.info(
            f"[LEADERBOARD] player={player_id} score={total_score} "
            f"round={round} turn={turn} completed={self.completed_games[player_id]}"
        )

    def open_game(self, player_id: int) -> None:
        """Start accepting a report for the player's next game."""
        self._last_reports.pop(player_id, None)

    def completed_games_for(self, player_id: int) -> Optional[int]:
        """Number of recorded games for the player, None if there are none."""
        return self.completed_games.get(player_id)

    def top_players(self, limit: int = 10) -> List[Tuple[int, int, int]]:
        """
        Rank players by completed games, then by best score.

        Returns:
            List of (player_id, completed_games, best_score) tuples
        """
        ranking = sorted(
            self.completed_games.items(),
            key=lambda item: (item[1], self.best_scores.get(item[0], 0)),
            reverse=True
        )
        return [
            (player_id, count, self.best_scores.get(player_id, 0))
            for player_id, count in ranking[:limit]
        ]

    # ==================== SERIALIZATION ====================

    def to_dict(self) -> dict:
        history = {}
        for player_id, entries in self.history.items():
            serialized = []
            for entry in entries:
                entry_copy = dict(entry)
                entry_copy['timestamp'] = entry_copy['timestamp'].isoformat()
                serialized.append(entry_copy)
            history[str(player_id)] = serialized

        return {
            'completed_games': {str(k): v for k, v in self.completed_games.items()},
            'best_scores': {str(k): v for k, v in self.best_scores.items()},
            'last_reports': {str(k): list(v) for k, v in self._last_reports.items()},
            'history': history,
        }

    def load_dict(self, data: dict) -> None:
        self.completed_games.update({int(k): int(v) for k, v in data.get('completed_games', {}).items()})
        self.best_scores.update({int(k): int(v) for k, v in data.get('best_scores', {}).items()})
        self._last_reports.update({int(k): tuple(v) for k, v in data.get('last_reports', {}).items()})
        for player_id_str, entries in data.get('history', {}).items():
            restored = []
            for entry in entries[-self._history_limit:]:
                entry_copy = dict(entry)
                if 'timestamp' in entry_copy:
                    entry_copy['timestamp'] = datetime.fromisoformat(entry_copy['timestamp'])
                restored.append(entry_copy)
            self.history[int(player_id_str)] = restored
