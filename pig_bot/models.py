# models.py
# Per-player game state and the completion payload for the Pig bot

from typing import NamedTuple


class CompletionReport(NamedTuple):
    """Final figures of a won game, as handed to the leaderboard."""
    total_score: int
    round: int
    turn: int


class UserGameState:
    """Represents one player's Pig game progress."""

    def __init__(self, last_roll: int = 0, turn_score: int = 0, total_score: int = 0,
                 round: int = 0, turn: int = 0, game_over: bool = False):
        """
        Initialize a game state. All defaults give a fresh game.

        Args:
            last_roll: Most recent die value, 0 when none this turn or just held
            turn_score: Points accumulated in the current, unbanked turn
            total_score: Banked score across the whole game
            round: Number of roll or hold actions since the last reset
            turn: Number of turns ended by a bust or a hold
            game_over: Whether the banked score reached the win threshold
        """
        self.last_roll = last_roll
        self.turn_score = turn_score
        self.total_score = total_score
        self.round = round
        self.turn = turn
        self.game_over = game_over

    def copy(self) -> 'UserGameState':
        return UserGameState(**self.to_dict())

    def roll_view(self) -> dict:
        """Public fields a player sees after rolling."""
        return {
            'last_roll': self.last_roll,
            'turn_score': self.turn_score,
            'round': self.round,
            'turn': self.turn,
        }

    def hold_view(self) -> dict:
        """Public fields a player sees after holding."""
        view = self.roll_view()
        view['total_score'] = self.total_score
        view['game_over'] = self.game_over
        return view

    def to_dict(self) -> dict:
        return {
            'last_roll': self.last_roll,
            'turn_score': self.turn_score,
            'total_score': self.total_score,
            'round': self.round,
            'turn': self.turn,
            'game_over': self.game_over,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'UserGameState':
        return cls(
            last_roll=int(data.get('last_roll', 0)),
            turn_score=int(data.get('turn_score', 0)),
            total_score=int(data.get('total_score', 0)),
            round=int(data.get('round', 0)),
            turn=int(data.get('turn', 0)),
            game_over=bool(data.get('game_over', False)),
        )

    def __eq__(self, other):
        if not isinstance(other, UserGameState):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self):
        fields = ', '.join(f"{k}={v!r}" for k, v in self.to_dict().items())
        return f"UserGameState({fields})"
