"""
Tests for the in-process Leaderboard collaborator.
"""
from datetime import datetime

import pytest

from errors import ExternalReportError
from leaderboard import Leaderboard


class TestReportCompletion:

    def test_accepts_winning_report(self, leaderboard):
        leaderboard.report_completion(7, 104, 30, 8)

        assert leaderboard.completed_games_for(7) == 1
        assert leaderboard.best_scores[7] == 104
        entry = leaderboard.history[7][0]
        assert (entry['total_score'], entry['round'], entry['turn']) == (104, 30, 8)
        assert isinstance(entry['timestamp'], datetime)

    def test_rejects_score_below_threshold(self, leaderboard):
        with pytest.raises(ExternalReportError):
            leaderboard.report_completion(7, 99, 30, 8)

        assert leaderboard.completed_games_for(7) is None

    def test_rejects_duplicate_report(self, leaderboard):
        leaderboard.report_completion(7, 104, 30, 8)

        with pytest.raises(ExternalReportError):
            leaderboard.report_completion(7, 104, 30, 8)

        assert leaderboard.completed_games_for(7) == 1

    def test_counts_separate_games(self, leaderboard):
        leaderboard.report_completion(7, 104, 30, 8)
        leaderboard.open_game(7)
        leaderboard.report_completion(7, 100, 22, 6)

        assert leaderboard.completed_games_for(7) == 2
        assert leaderboard.best_scores[7] == 104

    def test_same_figures_accepted_for_new_game(self, leaderboard):
        leaderboard.report_completion(7, 120, 25, 5)
        leaderboard.open_game(7)

        leaderboard.report_completion(7, 120, 25, 5)

        assert leaderboard.completed_games_for(7) == 2

    def test_history_keeps_latest_entries(self):
        leaderboard = Leaderboard(win_threshold=100, history_limit=3)
        for score in range(100, 105):
            leaderboard.report_completion(7, score, 20, 5)
            leaderboard.open_game(7)

        assert [e['total_score'] for e in leaderboard.history[7]] == [102, 103, 104]
        assert leaderboard.completed_games_for(7) == 5

    def test_threshold_is_configurable(self):
        assert Leaderboard(win_threshold=50).win_threshold() == 50


class TestTopPlayers:

    def test_empty(self, leaderboard):
        assert leaderboard.top_players() == []

    def test_ranked_by_count_then_best_score(self, leaderboard):
        leaderboard.report_completion(1, 100, 20, 5)
        leaderboard.report_completion(2, 110, 20, 5)
        leaderboard.report_completion(3, 105, 20, 5)
        leaderboard.open_game(3)
        leaderboard.report_completion(3, 100, 21, 6)

        assert leaderboard.top_players() == [(3, 2, 105), (2, 1, 110), (1, 1, 100)]
        assert leaderboard.top_players(limit=1) == [(3, 2, 105)]


class TestSerialization:

    def test_dict_round_trip_keeps_duplicate_guard(self, leaderboard):
        leaderboard.report_completion(7, 104, 30, 8)

        restored = Leaderboard(100)
        restored.load_dict(leaderboard.to_dict())

        assert restored.completed_games_for(7) == 1
        assert restored.best_scores == {7: 104}
        assert restored.history[7][0]['timestamp'] == leaderboard.history[7][0]['timestamp']
        with pytest.raises(ExternalReportError):
            restored.report_completion(7, 104, 30, 8)

    def test_load_leaves_source_untouched(self, leaderboard):
        leaderboard.report_completion(7, 104, 30, 8)
        data = leaderboard.to_dict()
        stamp = data['history']['7'][0]['timestamp']

        Leaderboard(100).load_dict(data)

        assert data['history']['7'][0]['timestamp'] == stamp

    def test_load_trims_history(self):
        data = {'history': {'7': [
            {'total_score': 100 + i, 'round': 20, 'turn': 5, 'timestamp': '2026-01-01T00:00:00'}
            for i in range(5)
        ]}}

        restored = Leaderboard(100, history_limit=2)
        restored.load_dict(data)

        assert [e['total_score'] for e in restored.history[7]] == [103, 104]
