# errors.py
# Exceptions raised by the Pig state machine, registry and leaderboard


class PigGameError(Exception):
    """Base class for every rule violation reported back to a player."""


class GameOverError(PigGameError):
    """Roll or hold on a finished game, or completion of an unfinished one."""


class NoActiveGameError(PigGameError):
    """Hold or completion requested for a player who never rolled."""

    def __init__(self, player_id: int):
        super().__init__(f"No active game for player {player_id}")
        self.player_id = player_id


class ExternalReportError(PigGameError):
    """The leaderboard rejected or failed to record a completed game."""
