"""
Tests for JSON persistence of the registry and leaderboard.
"""
import json

import pytest

import database as db
from leaderboard import Leaderboard
from models import UserGameState
from registry import GameRegistry


@pytest.fixture
def data_file(tmp_path):
    return str(tmp_path / "pig_data.json")


class TestSaveAndLoad:

    @pytest.mark.asyncio
    async def test_round_trip(self, registry, data_file):
        await registry.roll(11, 5)
        registry.user_games[22] = UserGameState(total_score=101, round=9, turn=5, game_over=True)
        await registry.complete(22)

        db.save_data(registry, path=data_file)
        restored = GameRegistry(Leaderboard(100))
        db.load_data(restored, path=data_file)

        assert restored.snapshot(11) == registry.snapshot(11)
        assert restored.snapshot(22) == registry.snapshot(22)
        assert restored.games_played() == 1
        assert restored.user_games_played_for(22) == 1

    def test_player_ids_stored_as_strings(self, registry, data_file):
        registry.user_games[42] = UserGameState(turn_score=3)

        db.save_data(registry, path=data_file)

        with open(data_file) as f:
            data = json.load(f)
        assert data['registry']['user_games']['42']['turn_score'] == 3

    def test_missing_file_starts_fresh(self, registry, data_file):
        db.load_data(registry, path=data_file)

        assert registry.user_games == {}

    def test_corrupt_file_is_logged(self, registry, data_file, caplog):
        with open(data_file, 'w') as f:
            f.write("{not json")

        db.load_data(registry, path=data_file)

        assert registry.user_games == {}
        assert "Error loading data" in caplog.text


class TestInitRegistry:

    @pytest.mark.asyncio
    async def test_autosave_writes_after_roll(self, data_file, monkeypatch):
        monkeypatch.setattr(db, "DATA_FILE", data_file)
        registry = db.init_registry(win_threshold=100, autosave=True)

        await registry.roll(5, 3)

        with open(data_file) as f:
            data = json.load(f)
        assert data['registry']['user_games']['5']['last_roll'] == 3

    def test_installs_module_data(self):
        registry = db.init_registry(win_threshold=60, autosave=False)

        assert db.registry is registry
        assert db.leaderboard is registry.leaderboard
        assert db.leaderboard.win_threshold() == 60
